"""
Either - exactly one of two unrelated variants

Unlike Result, neither side means failure. It is used where an input may
legitimately have one of two shapes, e.g. a date supplied either as an
already parsed DateTime (Left) or as a raw string (Right).

Author: TM3
Date: 2026-10-12
"""
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from storefront.common.errors import EitherCannotUnwrapLeft, EitherCannotUnwrapRight
from storefront.common.option import Nothing, Option, Some

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")
V = TypeVar("V")


class Either(Generic[L, R]):
    """Base type of the two variants `Left` and `Right`"""

    def is_left(self) -> bool:
        raise NotImplementedError

    def is_right(self) -> bool:
        return not self.is_left()

    def match(self, on_left: Callable[[L], U], on_right: Callable[[R], U]) -> U:
        """Total eliminator"""
        raise NotImplementedError

    def map_left(self, fn: Callable[[L], U]) -> "Either[U, R]":
        return self.match(lambda value: Left(fn(value)), lambda _: self)

    def map_right(self, fn: Callable[[R], U]) -> "Either[L, U]":
        return self.match(lambda _: self, lambda value: Right(fn(value)))

    def map(self, fn: Callable[[R], U]) -> "Either[L, U]":
        return self.map_right(fn)

    def map_either(self, on_left: Callable[[L], U], on_right: Callable[[R], V]) -> "Either[U, V]":
        return self.match(lambda value: Left(on_left(value)), lambda value: Right(on_right(value)))

    def flip(self) -> "Either[R, L]":
        return self.match(Right, Left)

    def left(self) -> Option[L]:
        return self.match(Some, lambda _: Nothing())

    def right(self) -> Option[R]:
        return self.match(lambda _: Nothing(), Some)

    def unwrap_left(self) -> L:
        """Raises EitherCannotUnwrapLeft on a Right: calling it is a caller bug"""
        if self.is_left():
            return self.value
        raise EitherCannotUnwrapLeft()

    def unwrap_right(self) -> R:
        """Raises EitherCannotUnwrapRight on a Left: calling it is a caller bug"""
        if self.is_right():
            return self.value
        raise EitherCannotUnwrapRight()


@dataclass(frozen=True)
class Left(Either[L, Any]):
    value: L

    @classmethod
    def of(cls, value: L) -> "Left[L]":
        return cls(value)

    def is_left(self) -> bool:
        return True

    def match(self, on_left: Callable[[L], U], on_right: Callable[[Any], U]) -> U:
        return on_left(self.value)

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@dataclass(frozen=True)
class Right(Either[Any, R]):
    value: R

    @classmethod
    def of(cls, value: R) -> "Right[R]":
        return cls(value)

    def is_left(self) -> bool:
        return False

    def match(self, on_left: Callable[[Any], U], on_right: Callable[[R], U]) -> U:
        return on_right(self.value)

    def __repr__(self) -> str:
        return f"Right({self.value!r})"
