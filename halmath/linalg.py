"""Dot products and matrix multiplication with widened accumulators."""

from __future__ import annotations

import operator

from .dtypes import ElementType
from .elementwise import _coerce, _operands, _resolve_dtype
from .errors import InvalidArgumentError, InvalidSizeError


def vdot(a, b, dtype):
    """Return the dot product of ``a`` and ``b`` in the widened type.

    Integer sums wrap around in the widened type. For floating-point
    operands, pairs with a zero factor are skipped, so ``inf * 0`` adds
    nothing instead of producing NaN.
    """
    dtype = _resolve_dtype(dtype)
    out = dtype.widened()
    xs, ys = _operands(a, b, dtype)
    if dtype.is_float:
        total = 0.0
        for x, y in zip(xs, ys):
            if x == 0 or y == 0:
                continue
            total += x * y
    else:
        total = sum(x * y for x, y in zip(xs, ys))
    return out.wrap(total)


def _dimension(value, name: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}") from None


def matmul(a, b, m, n, k, dtype) -> list:
    """Multiply an ``m``x``k`` matrix by a ``k``x``n`` matrix.

    Both matrices and the result are flat row-major lists; the result has
    the widened element type. Rows of ``a`` are walked in i-k-j order and
    zero entries of ``a`` are skipped. A non-positive ``m`` or ``n`` gives
    an empty result; a non-positive ``k`` gives an all-zero result.
    """
    dtype = _resolve_dtype(dtype)
    out = dtype.widened()
    m = _dimension(m, "m")
    n = _dimension(n, "n")
    k = _dimension(k, "k")
    xs = _coerce(a, dtype, "a")
    ys = _coerce(b, dtype, "b")
    if m <= 0 or n <= 0:
        return []
    zero = out.wrap(0)
    if k <= 0:
        return [zero] * (m * n)
    if len(xs) != m * k:
        raise InvalidSizeError(f"a has {len(xs)} elements, expected {m * k}")
    if len(ys) != k * n:
        raise InvalidSizeError(f"b has {len(ys)} elements, expected {k * n}")

    b_rows = [ys[row * n:(row + 1) * n] for row in range(k)]
    start = 0.0 if dtype.is_float else 0
    result: list = []
    for row in range(m):
        acc = [start] * n
        for a_ik, b_row in zip(xs[row * k:(row + 1) * k], b_rows):
            if a_ik != 0:
                acc = [s + a_ik * bv for s, bv in zip(acc, b_row)]
        result.extend(out.wrap(s) for s in acc)
    return result


__all__ = ["ElementType", "matmul", "vdot"]