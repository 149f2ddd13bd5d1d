"""Element types with fixed-width wrap-around and float32 rounding."""

from __future__ import annotations

import math
import operator
import struct
from enum import Enum
from typing import Iterable

from .errors import InvalidArgumentError, NullInputError, UnsupportedError

_F32 = struct.Struct("<f")


def to_f32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float.

    Values too large for single precision become signed infinity.
    """
    x = float(value)
    try:
        return _F32.unpack(_F32.pack(x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


class ElementType(Enum):
    """The element types the vector and matrix routines work on."""

    I8 = "i8"
    U8 = "u8"
    I16 = "i16"
    U16 = "u16"
    I32 = "i32"
    U32 = "u32"
    I64 = "i64"
    U64 = "u64"
    I128 = "i128"
    U128 = "u128"
    I256 = "i256"
    U256 = "u256"
    F32 = "f32"
    F64 = "f64"

    @property
    def bits(self) -> int:
        """Width of one element in bits."""
        return int(self.value[1:])

    @property
    def is_float(self) -> bool:
        """True for floating-point types."""
        return self.value[0] == "f"

    @property
    def signed(self) -> bool:
        """True for signed integer and floating-point types."""
        return self.value[0] in "if"

    def wrap(self, value):
        """Bring ``value`` into this type, as a store into it would.

        Integers wrap around modulo 2**bits (two's complement for signed
        types); ``F32`` rounds to single precision.
        """
        if self is ElementType.F32:
            try:
                return to_f32(value)
            except (TypeError, ValueError) as exc:
                raise InvalidArgumentError(f"not a number: {value!r}") from exc
        if self is ElementType.F64:
            try:
                return float(value)
            except (TypeError, ValueError) as exc:
                raise InvalidArgumentError(f"not a number: {value!r}") from exc
        try:
            v = operator.index(value)
        except TypeError as exc:
            raise InvalidArgumentError(
                f"{self.name} needs an integer, got {value!r}"
            ) from exc
        bits = self.bits
        v &= (1 << bits) - 1
        if self.signed and v >= 1 << (bits - 1):
            v -= 1 << bits
        return v

    def widened(self) -> ElementType:
        """The type twice as wide, used for products and accumulators."""
        try:
            return _WIDENED[self]
        except KeyError:
            raise UnsupportedError(f"{self.name} has no wider type") from None

    def coerce(self, values: Iterable) -> list:
        """Return ``values`` as a list with every element wrapped to this type."""
        if values is None:
            raise NullInputError("values must not be None")
        return [self.wrap(v) for v in values]


_WIDENED = {
    ElementType.I8: ElementType.I16,
    ElementType.U8: ElementType.U16,
    ElementType.I16: ElementType.I32,
    ElementType.U16: ElementType.U32,
    ElementType.I32: ElementType.I64,
    ElementType.U32: ElementType.U64,
    ElementType.I64: ElementType.I128,
    ElementType.U64: ElementType.U128,
    ElementType.I128: ElementType.I256,
    ElementType.U128: ElementType.U256,
    ElementType.F32: ElementType.F64,
}