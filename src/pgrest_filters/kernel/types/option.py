"""Option[T] – Some and Nothing variants.

Parsing in this package is total: a fragment that cannot be understood
produces ``Nothing`` rather than an exception.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, NoReturn, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Some(Generic[T]):
    """Option with a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def to_optional(self) -> T | None:
        return self._value

    def map(self, func: Callable[[T], U]) -> "Some[U]":
        return Some(func(self._value))

    def and_then(self, func: "Callable[[T], Option[U]]") -> "Option[U]":
        return func(self._value)

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        return self if predicate(self._value) else NOTHING

    def or_else(self, func: "Callable[[], Option[T]]") -> "Option[T]":  # noqa: ARG002
        return self

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Some) and other._value == self._value

    def __hash__(self) -> int:
        return hash(("Some", self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing(Generic[T]):
    """Empty option."""

    __slots__ = ()

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError("Called unwrap() on Nothing")

    def unwrap_or(self, default: T) -> T:
        return default

    def to_optional(self) -> None:
        return None

    def map(self, func: Callable[[T], U]) -> "Nothing[U]":  # noqa: ARG002
        return NOTHING

    def and_then(self, func: "Callable[[T], Option[U]]") -> "Nothing[U]":  # noqa: ARG002
        return NOTHING

    def filter(self, predicate: Callable[[T], bool]) -> "Nothing[T]":  # noqa: ARG002
        return self

    def or_else(self, func: "Callable[[], Option[T]]") -> "Option[T]":
        return func()

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash("Nothing")

    def __repr__(self) -> str:
        return "Nothing"


NOTHING: Nothing = Nothing()


def from_optional(value: T | None) -> "Option[T]":
    """Lift a plain optional value into an Option."""
    return NOTHING if value is None else Some(value)


type Option[T] = Some[T] | Nothing[T]

__all__ = ["NOTHING", "Nothing", "Option", "Some", "from_optional"]
