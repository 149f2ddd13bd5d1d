"""Element-by-element vector arithmetic on fixed-width element types."""

from __future__ import annotations

from typing import Iterable

from .dtypes import ElementType
from .errors import (
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidSizeError,
    NullInputError,
)


def _resolve_dtype(dtype) -> ElementType:
    """Accept an ElementType or its short name such as ``"i8"``."""
    if isinstance(dtype, ElementType):
        return dtype
    try:
        return ElementType(dtype)
    except (ValueError, TypeError):
        raise InvalidArgumentError(f"unknown element type: {dtype!r}") from None


def _coerce(values: Iterable | None, dtype: ElementType, name: str) -> list:
    if values is None:
        raise NullInputError(f"{name} must not be None")
    return dtype.coerce(values)


def _operands(a, b, dtype: ElementType) -> tuple[list, list]:
    """Coerce both operands to ``dtype`` and check that their lengths agree."""
    xs = _coerce(a, dtype, "a")
    ys = _coerce(b, dtype, "b")
    if len(xs) != len(ys):
        raise InvalidSizeError(
            f"operands differ in length: {len(xs)} and {len(ys)}"
        )
    return xs, ys


def vadd(a, b, dtype) -> list:
    """Add two vectors element by element, wrapping to ``dtype``."""
    dtype = _resolve_dtype(dtype)
    xs, ys = _operands(a, b, dtype)
    return [dtype.wrap(x + y) for x, y in zip(xs, ys)]


def vsub(a, b, dtype) -> list:
    """Subtract ``b`` from ``a`` element by element, wrapping to ``dtype``."""
    dtype = _resolve_dtype(dtype)
    xs, ys = _operands(a, b, dtype)
    return [dtype.wrap(x - y) for x, y in zip(xs, ys)]


def vmul(a, b, dtype) -> list:
    """Multiply two vectors element by element into the widened type.

    The products of ``F32`` operands are returned in double precision.
    """
    dtype = _resolve_dtype(dtype)
    out = dtype.widened()
    xs, ys = _operands(a, b, dtype)
    return [out.wrap(x * y) for x, y in zip(xs, ys)]


def vmac(acc, a, b, dtype) -> list:
    """Return ``acc + a * b`` element by element in the widened type.

    ``acc`` holds values of the widened type and is not modified.
    """
    dtype = _resolve_dtype(dtype)
    out = dtype.widened()
    xs, ys = _operands(a, b, dtype)
    cs = _coerce(acc, out, "acc")
    if len(cs) != len(xs):
        raise InvalidSizeError(
            f"accumulator has {len(cs)} elements, operands have {len(xs)}"
        )
    return [out.wrap(c + x * y) for c, x, y in zip(cs, xs, ys)]


def _divide(x, y, dtype: ElementType):
    if dtype.is_float:
        return dtype.wrap(x / y)
    quotient = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        quotient = -quotient
    return dtype.wrap(quotient)


def vdiv(a, b, dtype) -> list:
    """Divide ``a`` by ``b`` element by element.

    Integer division truncates toward zero. If any divisor is zero, every
    other element is still computed, the zero-divisor positions are set to
    zero, and DivisionByZeroError is raised carrying that result and the
    offending indices.
    """
    dtype = _resolve_dtype(dtype)
    xs, ys = _operands(a, b, dtype)
    result = []
    zero_indices = []
    for index, (x, y) in enumerate(zip(xs, ys)):
        if y == 0:
            result.append(dtype.wrap(0))
            zero_indices.append(index)
        else:
            result.append(_divide(x, y, dtype))
    if zero_indices:
        raise DivisionByZeroError(
            f"division by zero at indices {zero_indices}",
            result=result,
            indices=zero_indices,
        )
    return result