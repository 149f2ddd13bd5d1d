"""Status codes and the exceptions raised for them."""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence


class Status(IntEnum):
    """Numeric status codes reported by the math routines."""

    OK = 0

    NULL_PTR = -1
    INVALID_SIZE = -2
    INVALID_ARG = -3

    UNALIGNED = -10

    UNSUPPORTED = -20
    HW_FAULT = -21
    TIMEOUT = -21  # shares its code with HW_FAULT, so it is an alias
    OUT_OF_RESOURCE = -22

    DIV_BY_ZERO = -30
    VALUES_DO_NOT_MATCH = -31


class HalError(Exception):
    """Base class for every error the math routines raise."""

    status: Status = Status.INVALID_ARG
    default_message = "operation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def code(self) -> int:
        """The numeric status code of this error."""
        return int(self.status)


class NullInputError(HalError, TypeError):
    """An operand or output was missing."""

    status = Status.NULL_PTR
    default_message = "an operand is missing"


class InvalidSizeError(HalError, ValueError):
    """An operand has the wrong size."""

    status = Status.INVALID_SIZE
    default_message = "invalid operand size"


class InvalidArgumentError(HalError, ValueError):
    """An argument has a value the operation cannot use."""

    status = Status.INVALID_ARG
    default_message = "invalid argument"


class UnalignedError(HalError):
    """Memory was not aligned as the operation requires."""

    status = Status.UNALIGNED
    default_message = "unaligned memory access"


class UnsupportedError(HalError):
    """The operation is not supported for the given type or target."""

    status = Status.UNSUPPORTED
    default_message = "operation not supported"


class HardwareFaultError(HalError):
    """The arithmetic unit faulted or did not answer in time."""

    status = Status.HW_FAULT
    default_message = "hardware fault or timeout"


class OutOfResourceError(HalError):
    """The operation ran out of a limited resource."""

    status = Status.OUT_OF_RESOURCE
    default_message = "out of resources"


class DivisionByZeroError(HalError, ZeroDivisionError):
    """One or more divisors were zero.

    ``result`` holds the computed vector with zeros in the positions whose
    divisor was zero, and ``indices`` lists those positions.
    """

    status = Status.DIV_BY_ZERO
    default_message = "division by zero"

    def __init__(
        self,
        message: str | None = None,
        *,
        result: Sequence | None = None,
        indices: Sequence[int] = (),
    ) -> None:
        super().__init__(message)
        self.result = list(result) if result is not None else None
        self.indices = tuple(indices)


class ValuesMismatchError(HalError, ValueError):
    """Two sets of values that should agree do not."""

    status = Status.VALUES_DO_NOT_MATCH
    default_message = "values do not match"


_ERRORS_BY_STATUS: dict[Status, type[HalError]] = {
    Status.NULL_PTR: NullInputError,
    Status.INVALID_SIZE: InvalidSizeError,
    Status.INVALID_ARG: InvalidArgumentError,
    Status.UNALIGNED: UnalignedError,
    Status.UNSUPPORTED: UnsupportedError,
    Status.HW_FAULT: HardwareFaultError,
    Status.OUT_OF_RESOURCE: OutOfResourceError,
    Status.DIV_BY_ZERO: DivisionByZeroError,
    Status.VALUES_DO_NOT_MATCH: ValuesMismatchError,
}


def error_for_status(status: int) -> HalError:
    """Return an exception instance matching a non-OK status code.

    Raises ValueError for ``Status.OK`` and for unknown codes.
    """
    try:
        code = Status(status)
    except ValueError:
        raise ValueError(f"unknown status code: {status!r}") from None
    if code is Status.OK:
        raise ValueError("Status.OK does not describe an error")
    return _ERRORS_BY_STATUS[code]()