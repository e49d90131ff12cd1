"""
Option - presence (`Some`) or absence (`Nothing`) of a value

Replaces bare `None` checks at domain boundaries. Once a value is wrapped,
`None` never crosses the boundary again: `Option.from_nullable(None)` is
`Nothing()`.

Author: TM3
Date: 2026-10-12
"""
from dataclasses import dataclass
from typing import Any, Callable, Generic, Tuple, TypeVar

from storefront.common.errors import OptionCannotGetValueOfNone
from storefront.common.result import Err, Ok, Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Option(Generic[T]):
    """
    Base type of the two variants `Some` and `Nothing`.

    Every combinator follows the same law: a `Nothing` anywhere
    short-circuits to `Nothing`, except `or_` / `or_else` which fall back to
    the other operand.
    """

    @staticmethod
    def some(value: T) -> "Option[T]":
        return Some(value)

    @staticmethod
    def none() -> "Option[Any]":
        return Nothing()

    @staticmethod
    def from_nullable(value: Any) -> "Option[Any]":
        """Wrap a value that may be None"""
        if value is None:
            return Nothing()
        return Some(value)

    def is_some(self) -> bool:
        raise NotImplementedError

    def is_none(self) -> bool:
        return not self.is_some()

    def match(self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:
        """Total eliminator"""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Extractors
    # ------------------------------------------------------------------

    def expect(self, message: str) -> T:
        """Return the value or raise OptionCannotGetValueOfNone(message)"""
        return self.match(lambda value: value, lambda: _raise(OptionCannotGetValueOfNone(message)))

    def unwrap(self) -> T:
        """
        Return the value or raise.

        Discouraged: prefer `match`, `unwrap_or` or `unwrap_or_else`.
        """
        return self.match(lambda value: value, lambda: _raise(OptionCannotGetValueOfNone()))

    def unwrap_or(self, default: U) -> Any:
        return self.match(lambda value: value, lambda: default)

    def unwrap_or_else(self, fn: Callable[[], U]) -> Any:
        return self.match(lambda value: value, fn)

    # ------------------------------------------------------------------
    # Functor / monad
    # ------------------------------------------------------------------

    def map(self, fn: Callable[[T], U]) -> "Option[U]":
        return self.match(lambda value: Some(fn(value)), Nothing)

    def map_or(self, default: U, fn: Callable[[T], U]) -> U:
        return self.match(fn, lambda: default)

    def map_or_else(self, fn: Callable[[T], U], default_fn: Callable[[], U]) -> U:
        return self.match(fn, default_fn)

    def flat_map(self, fn: Callable[[T], "Option[U]"]) -> "Option[U]":
        return self.match(fn, Nothing)

    def and_then(self, fn: Callable[[T], "Option[U]"]) -> "Option[U]":
        return self.flat_map(fn)

    def ok_or(self, error: E) -> Result[T, E]:
        """Lift into a Result, turning absence into `error`"""
        return self.match(Ok, lambda: Err(error))

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def and_(self, other: "Option[U]") -> "Option[U]":
        return self.match(lambda _: other, Nothing)

    def or_(self, other: "Option[U]") -> "Option[Any]":
        return self.match(lambda _: self, lambda: other)

    def or_else(self, fn: Callable[[], "Option[U]"]) -> "Option[Any]":
        return self.match(lambda _: self, fn)

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        return self.match(lambda value: self if predicate(value) else Nothing(), Nothing)

    def zip(self, other: "Option[U]") -> "Option[Tuple[T, U]]":
        return self.match(lambda value: other.map(lambda other_value: (value, other_value)), Nothing)

    def unzip(self) -> Tuple["Option[Any]", "Option[Any]"]:
        """Split `Some((a, b))` into `(Some(a), Some(b))`"""
        return self.match(
            lambda pair: (Some(pair[0]), Some(pair[1])),
            lambda: (Nothing(), Nothing()),
        )

    def unzip_with(self, fn: Callable[[T], Tuple[Any, Any]]) -> Tuple["Option[Any]", "Option[Any]"]:
        return self.map(fn).unzip()


@dataclass(frozen=True)
class Some(Option[T]):
    value: T

    @classmethod
    def of(cls, value: T) -> "Some[T]":
        return cls(value)

    def is_some(self) -> bool:
        return True

    def match(self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:
        return on_some(self.value)

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True)
class Nothing(Option[Any]):
    def is_some(self) -> bool:
        return False

    def match(self, on_some: Callable[[Any], U], on_none: Callable[[], U]) -> U:
        return on_none()

    def __repr__(self) -> str:
        return "Nothing()"


def _raise(error: Exception):
    raise error
