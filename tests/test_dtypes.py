import math
import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from halmath.dtypes import ElementType, to_f32
from halmath.errors import InvalidArgumentError, NullInputError, UnsupportedError

INT_TYPE_NAMES = [t.name for t in ElementType if not t.is_float]
FLT_MAX = struct.unpack("<f", struct.pack("<I", 0x7F7FFFFF))[0]


def test_int32_max_plus_one_rolls_over_to_min():
    int32_max = 2**31 - 1
    int32_min = -(2**31)
    assert ElementType.I32.wrap(int32_max + 1) == int32_min
    assert ElementType.I32.wrap(int32_min - 1) == int32_max


def test_unsigned_negative_wraps_to_top():
    assert ElementType.U8.wrap(-1) == 2**8 - 1
    assert ElementType.U64.wrap(-1) == 2**64 - 1


@pytest.mark.parametrize("name", INT_TYPE_NAMES)
@given(value=st.integers(min_value=-(2**300), max_value=2**300))
def test_wrap_lands_in_range(name, value):
    wrapped = ElementType[name].wrap(value)
    bits = ElementType[name].bits
    if ElementType[name].signed:
        assert -(2 ** (bits - 1)) <= wrapped < 2 ** (bits - 1)
    else:
        assert 0 <= wrapped < 2**bits


@pytest.mark.parametrize("name", INT_TYPE_NAMES)
@given(value=st.integers(min_value=-(2**300), max_value=2**300))
def test_wrap_is_idempotent_and_periodic(name, value):
    bits = ElementType[name].bits
    wrapped = ElementType[name].wrap(value)
    assert ElementType[name].wrap(wrapped) == wrapped
    assert ElementType[name].wrap(value + 2**bits) == wrapped
    assert (value - wrapped) % 2**bits == 0


@pytest.mark.parametrize(
    "dtype, wider",
    [
        (ElementType.I8, ElementType.I16),
        (ElementType.U8, ElementType.U16),
        (ElementType.I16, ElementType.I32),
        (ElementType.U16, ElementType.U32),
        (ElementType.I32, ElementType.I64),
        (ElementType.U32, ElementType.U64),
        (ElementType.I64, ElementType.I128),
        (ElementType.U64, ElementType.U128),
        (ElementType.I128, ElementType.I256),
        (ElementType.U128, ElementType.U256),
        (ElementType.F32, ElementType.F64),
    ],
)
def test_widened_doubles_width_and_keeps_kind(dtype, wider):
    assert dtype.widened() is wider
    assert wider.bits == 2 * dtype.bits
    assert wider.signed == dtype.signed
    assert wider.is_float == dtype.is_float


@pytest.mark.parametrize("dtype", [ElementType.I256, ElementType.U256, ElementType.F64])
def test_widest_types_have_no_wider(dtype):
    with pytest.raises(UnsupportedError):
        dtype.widened()


def test_coerce_wraps_every_element():
    assert ElementType.U8.coerce([2**8, 2**8 + 5]) == [0, 5]


def test_coerce_accepts_generators():
    values = ElementType.I16.coerce(v for v in range(3))
    assert values == [0, 1, 2]


def test_coerce_none_raises():
    with pytest.raises(NullInputError):
        ElementType.I32.coerce(None)


def test_integer_type_rejects_float():
    with pytest.raises(InvalidArgumentError):
        ElementType.I32.wrap(1.5)


def test_float_type_rejects_non_number():
    with pytest.raises(InvalidArgumentError):
        ElementType.F32.wrap("abc")


def test_f32_overflow_to_infinity():
    assert to_f32(FLT_MAX + FLT_MAX) == math.inf
    assert to_f32(-FLT_MAX - FLT_MAX) == -math.inf


def test_f32_keeps_max_and_subnormals():
    assert to_f32(FLT_MAX) == FLT_MAX
    tiny = to_f32(1e-40)
    assert 0.0 < tiny < 1e-38


def test_f32_special_values():
    assert math.isnan(to_f32(math.nan))
    assert to_f32(math.inf) == math.inf
    assert math.isnan(ElementType.F32.wrap(math.inf * 0.0))


@given(value=st.floats(allow_nan=False, allow_infinity=False))
def test_f32_rounding_is_idempotent(value):
    once = to_f32(value)
    assert to_f32(once) == once
    assert ElementType.F32.wrap(value) == once


@given(value=st.floats(allow_nan=False, allow_infinity=False, width=32))
def test_f32_exact_for_single_precision_values(value):
    assert to_f32(value) == value


def test_f64_wrap_leaves_value_alone():
    assert ElementType.F64.wrap(0.1) == 0.1
    assert ElementType.F64.wrap(3) == 3.0