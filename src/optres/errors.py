"""Exceptions raised by Option and Result operations.

Every error constructed by this package derives from OptresError. Exceptions
raised by caller-supplied callbacks are never wrapped, with one exception:
Python can only raise BaseException objects, so when an ``expect`` callback
returns something else it is carried by ExpectError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

if TYPE_CHECKING:
    from collections.abc import Callable


class OptresError(Exception):
    """Base class for errors raised by optres."""


class UnwrapError(OptresError):
    """Raised when unwrap() or unwrap_err() is called on the wrong variant."""


class AbsentValueError(OptresError, ValueError):
    """Raised when None is passed as the payload of Some, Ok or Err."""

    def __init__(self, variant: str) -> None:
        self.variant = variant
        super().__init__(f"{variant} cannot hold None; use none() to express absence")


class ExpectError(OptresError):
    """Carries a non-exception value returned by an ``expect`` callback.

    Attributes:
        value: The object the callback returned, unchanged.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(value)

    def __str__(self) -> str:
        return str(self.value)


def require_present(value: object, variant: str) -> None:
    """Reject None as a payload for the named variant."""
    if value is None:
        raise AbsentValueError(variant)


def raise_expected(on_absent: Callable[[], object]) -> NoReturn:
    """Invoke an ``expect`` callback and raise whatever it returns.

    Exception instances and classes are raised as-is. Any other value is
    raised as ExpectError with that value attached.
    """
    failure = on_absent()
    if isinstance(failure, BaseException):
        raise failure
    if isinstance(failure, type) and issubclass(failure, BaseException):
        raise failure
    raise ExpectError(failure)
