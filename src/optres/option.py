"""Option type for values that may be absent.

Provides an Option[T] type with Some and Nothing variants as an explicit
alternative to returning None.

Usage:
    def find_player(name: str) -> Option[Player]:
        player = _lookup(name)
        return from_optional(player)

    match find_player("Ohtani"):
        case Some(player):
            print(player.team)
        case Nothing():
            print("not found")

    team = find_player("Ohtani").map_or_default("FA", lambda p: p.team)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, NoReturn, final

from optres.errors import UnwrapError, raise_expected, require_present

if TYPE_CHECKING:
    from collections.abc import Callable


@final
@dataclass(frozen=True, slots=True)
class Some[T]:
    """An Option holding a value."""

    value: T

    def __post_init__(self) -> None:
        require_present(self.value, "Some")

    def is_some(self) -> bool:
        """Returns True if this is a Some option."""
        return True

    def is_none(self) -> bool:
        """Returns False for Some options."""
        return False

    def expect(self, on_absent: Callable[[], object]) -> T:
        """Returns the contained value without calling on_absent."""
        return self.value

    def map[U](self, fn: Callable[[T], U]) -> Option[U]:
        """Applies fn to the contained value, returning Some(fn(value))."""
        return Some(fn(self.value))

    def map_or_default[U](self, default: U, fn: Callable[[T], U]) -> U:
        """Returns fn(value), ignoring the default."""
        return fn(self.value)

    def and_then[U](self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """Applies fn to the contained value, returning its option."""
        return fn(self.value)

    def or_else(self, fn: Callable[[], Option[T]]) -> Option[T]:
        """Returns self unchanged since this is Some."""
        return self

    def unwrap(self) -> T:
        """Returns the contained value."""
        return self.value

    def unwrap_or_default(self, default: T) -> T:
        """Returns the contained value, ignoring the default."""
        return self.value

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@final
@dataclass(frozen=True, slots=True)
class Nothing:
    """An Option holding no value."""

    def is_some(self) -> bool:
        """Returns False for Nothing."""
        return False

    def is_none(self) -> bool:
        """Returns True if this is the absent option."""
        return True

    def expect(self, on_absent: Callable[[], object]) -> NoReturn:
        """Calls on_absent and raises what it returns."""
        raise_expected(on_absent)

    def map[T, U](self, fn: Callable[[T], U]) -> Option[U]:
        """Returns self unchanged since there is nothing to map."""
        return self

    def map_or_default[T, U](self, default: U, fn: Callable[[T], U]) -> U:
        """Returns the default value."""
        return default

    def and_then[T, U](self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """Returns self unchanged since there is nothing to chain."""
        return self

    def or_else[T](self, fn: Callable[[], Option[T]]) -> Option[T]:
        """Returns the option produced by fn."""
        return fn()

    def unwrap(self) -> NoReturn:
        """Raises UnwrapError since there is no value."""
        raise UnwrapError("Cannot unwrap a value from None")

    def unwrap_or_default[T](self, default: T) -> T:
        """Returns the default value."""
        return default

    def __repr__(self) -> str:
        return "Nothing"


type Option[T] = Some[T] | Nothing

_NOTHING: Final = Nothing()


def some[T](value: T) -> Option[T]:
    """Creates a Some option. Raises AbsentValueError if value is None."""
    return Some(value)


def none[T]() -> Option[T]:
    """Returns the absent option."""
    return _NOTHING


def from_optional[T](value: T | None) -> Option[T]:
    """Converts a value that may be None into an Option.

    Only None maps to Nothing; falsy values such as 0 or "" become Some.
    """
    if value is None:
        return _NOTHING
    return Some(value)


__all__ = [
    "Nothing",
    "Option",
    "Some",
    "from_optional",
    "none",
    "some",
]
