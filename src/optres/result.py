"""Result type for explicit error handling.

Provides a Result[T, E] type with Ok and Err variants for operations that can
fail, without relying on exceptions for control flow.

Usage:
    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return err(f"not a number: {raw!r}")
        return ok(int(raw))

    result = parse_port(value)
    if result.is_ok():
        port = result.unwrap()
    else:
        message = result.unwrap_err()

    # Bridge into Option-consuming code
    port = parse_port(value).ok().unwrap_or_default(8080)
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn, final

from optres.errors import UnwrapError, raise_expected, require_present
from optres.option import Some, none

if TYPE_CHECKING:
    from collections.abc import Callable

    from optres.option import Option

logger = logging.getLogger(__name__)


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Represents a successful result containing a value."""

    value: T

    def __post_init__(self) -> None:
        require_present(self.value, "Ok")

    def is_ok(self) -> bool:
        """Returns True if this is an Ok result."""
        return True

    def is_err(self) -> bool:
        """Returns False for Ok results."""
        return False

    def ok(self) -> Option[T]:
        """Returns Some(value)."""
        return Some(self.value)

    def err[E](self) -> Option[E]:
        """Returns Nothing since this is not an Err."""
        return none()

    def expect(self, on_absent: Callable[[], object]) -> T:
        """Returns the contained value without calling on_absent."""
        return self.value

    def map[U, E](self, fn: Callable[[T], U]) -> Result[U, E]:
        """Applies fn to the contained value, returning Ok(fn(value))."""
        return Ok(fn(self.value))

    def map_err[E, F](self, fn: Callable[[E], F]) -> Result[T, F]:
        """Returns self unchanged since this is Ok."""
        return self

    def map_or_default[U](self, default: U, fn: Callable[[T], U]) -> U:
        """Returns fn(value), ignoring the default."""
        return fn(self.value)

    def and_then[U, E](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Applies fn to the contained value, returning its result."""
        return fn(self.value)

    def or_else[E, F](self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Returns self unchanged since this is Ok."""
        return self

    def unwrap(self) -> T:
        """Returns the contained value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raises UnwrapError since this is not an Err."""
        raise UnwrapError("Cannot unwrap an error from an Ok result")

    def unwrap_or_default(self, default: T) -> T:
        """Returns the contained value, ignoring the default."""
        return self.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Represents a failed result containing an error."""

    error: E

    def __post_init__(self) -> None:
        require_present(self.error, "Err")

    def is_ok(self) -> bool:
        """Returns False for Err results."""
        return False

    def is_err(self) -> bool:
        """Returns True if this is an Err result."""
        return True

    def ok[T](self) -> Option[T]:
        """Returns Nothing since this is not an Ok."""
        return none()

    def err(self) -> Option[E]:
        """Returns Some(error)."""
        return Some(self.error)

    def expect(self, on_absent: Callable[[], object]) -> NoReturn:
        """Calls on_absent and raises what it returns.

        on_absent receives no arguments; close over the result to surface
        the contained error.
        """
        raise_expected(on_absent)

    def map[T, U](self, fn: Callable[[T], U]) -> Result[U, E]:
        """Returns self unchanged since this is Err."""
        return self

    def map_err[T, F](self, fn: Callable[[E], F]) -> Result[T, F]:
        """Applies fn to the contained error, returning Err(fn(error))."""
        return Err(fn(self.error))

    def map_or_default[T, U](self, default: U, fn: Callable[[T], U]) -> U:
        """Returns the default value."""
        return default

    def and_then[T, U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Returns self unchanged since this is Err."""
        return self

    def or_else[T, F](self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Applies fn to the contained error, returning its result."""
        return fn(self.error)

    def unwrap(self) -> NoReturn:
        """Raises UnwrapError, chained to the error when it is an exception."""
        cause = self.error if isinstance(self.error, BaseException) else None
        raise UnwrapError("Cannot unwrap a value from an Err result") from cause

    def unwrap_err(self) -> E:
        """Returns the contained error."""
        return self.error

    def unwrap_or_default[T](self, default: T) -> T:
        """Returns the default value."""
        return default

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]


def ok[T, E](value: T) -> Result[T, E]:
    """Creates an Ok result. Raises AbsentValueError if value is None."""
    return Ok(value)


def err[T, E](error: E) -> Result[T, E]:
    """Creates an Err result. Raises AbsentValueError if error is None."""
    return Err(error)


def catching[**P, T](
    *exceptions: type[Exception],
) -> Callable[[Callable[P, T]], Callable[P, Result[T, Exception]]]:
    """Decorator that turns raised exceptions into Err results.

    Only the listed exception types are captured (Exception when none are
    given); anything else propagates. The wrapped function must not return
    None.

    Usage:
        @catching(ValueError)
        def parse(raw: str) -> int:
            return int(raw)

        parse("42")    # Ok(42)
        parse("nope")  # Err(ValueError(...))
    """
    captured = exceptions or (Exception,)

    def decorator(fn: Callable[P, T]) -> Callable[P, Result[T, Exception]]:
        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
            try:
                value = fn(*args, **kwargs)
            except captured as e:
                logger.debug("Captured %s from %s", type(e).__name__, getattr(fn, "__qualname__", fn))
                return Err(e)
            return Ok(value)

        return wrapper

    return decorator


__all__ = [
    "Err",
    "Ok",
    "Result",
    "catching",
    "err",
    "ok",
]
