# halmath

Vector and matrix arithmetic on fixed-width element types. Each result is
reduced to its element type the way a store into a fixed-width C integer or
`float` behaves. Integers wrap around modulo 2**bits, and single-precision
values are rounded to float32.

## Installation

```
pip install halmath
```

To install the test dependencies as well:

```
pip install "halmath[test]"
```

## Element types

`halmath.dtypes.ElementType` names the element types: `I8`, `U8`, `I16`,
`U16`, `I32`, `U32`, `I64`, `U64`, `I128`, `U128`, `I256`, `U256`, `F32` and
`F64`. Any function that takes a `dtype` accepts either a member or its short
name, such as `"i32"`. An unknown name raises `InvalidArgumentError`.

- `bits`, `is_float` and `signed` describe the type.
- `wrap(value)` brings a value into the type. Integers wrap modulo 2**bits, and
  signed types use two's complement. `F32` rounds with `halmath.dtypes.to_f32`.
  A value that is not an integer given to an integer type raises
  `InvalidArgumentError`.
- `widened()` returns the type that products and accumulators use. That type is
  twice as wide as the original, and for `F32` it is `F64`. `I256`, `U256` and
  `F64` have no wider type, so for them `widened()` raises `UnsupportedError`.
- `coerce(values)` returns a list with every value wrapped to the type.

`to_f32(value)` rounds a number to the nearest float32. A value that is too
large for float32 becomes a signed infinity.

## Element-wise operations

The functions in `halmath.elementwise` take two sequences of equal length. If
the lengths differ, they raise `InvalidSizeError`.

- `vadd(a, b, dtype)` and `vsub(a, b, dtype)` return their results in `dtype`.
- `vmul(a, b, dtype)` returns the products in the widened type.
- `vmac(acc, a, b, dtype)` returns `acc + a * b` in the widened type. It does not
  modify `acc`.
- `vdiv(a, b, dtype)` divides the elements. Integer division truncates toward
  zero.

If a divisor is zero, `vdiv` still computes every other element and sets each
zero-divisor position to zero. Then it raises
`halmath.errors.DivisionByZeroError`, which has two attributes:

- `result` holds the finished vector.
- `indices` lists the zero-divisor positions.

```python
from halmath.dtypes import ElementType
from halmath.elementwise import vadd, vdiv
from halmath.errors import DivisionByZeroError

vadd([2147483647], [1], ElementType.I32)        # [-2147483648]

try:
    vdiv([10, 20, 30], [2, 0, 3], "i32")
except DivisionByZeroError as exc:
    print(exc.result, exc.indices)              # [5, 0, 10] (1,)
```

## Dot product and matrix multiplication

The functions in `halmath.linalg` accumulate their results in the widened type.

- `vdot(a, b, dtype)` returns the dot product. For float operands, any pair
  that has a zero factor is skipped, so `inf * 0` adds nothing to the sum.
- `matmul(a, b, m, n, k, dtype)` multiplies an `m × k` matrix by a `k × n`
  matrix. All three matrices are flat row-major lists.
  - If `m` or `n` is not positive, the result is an empty list.
  - If `k` is not positive, the result is `m * n` zeros.
  - If an operand has the wrong number of elements, `matmul` raises
    `InvalidSizeError`.

```python
from halmath.dtypes import ElementType
from halmath.linalg import matmul, vdot

vdot([1, 2, 3], [1, 1, 1], ElementType.U8)                           # 6
matmul([1, 2, 3, 4, 5, 6], [1, 2, 3, 4, 5, 6], 2, 2, 3, ElementType.I16)
# [22, 28, 49, 64]
```

## Errors

`halmath.errors.Status` lists the numeric status codes. `TIMEOUT` is an alias
of `HW_FAULT`.

Every exception derives from `HalError`, and its `code` attribute gives the
numeric status. These are the exception classes:

- `NullInputError`
- `InvalidSizeError`
- `InvalidArgumentError`
- `UnalignedError`
- `UnsupportedError`
- `HardwareFaultError`
- `OutOfResourceError`
- `DivisionByZeroError`
- `ValuesMismatchError`

`error_for_status(status)` returns an instance of the exception that matches a
non-OK code. It raises `ValueError` for `Status.OK` and for an unknown code.

If an operand is `None`, the functions raise `NullInputError`.

## What this package does not do

The package is a library only. It has no command-line program, and it does not
run on accelerator hardware or report cycle counts. It has no tiled matrix
multiplication and no array reductions such as a maximum or a sum.