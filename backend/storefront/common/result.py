"""
Result - success-with-value or failure-with-error

Every fallible domain operation returns a Result. Expected failures (bad
email, weak password, future date...) are values carried by `Err`; only
programmer errors (reading the wrong side) raise.

Usage:
    result = Email.create("john@doe.com")
    message = result.match(
        lambda error: f"invalid: {error.value}",
        lambda email: f"hello {email.props.value}",
    )

Author: TM3
Date: 2026-10-12
"""
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar

from storefront.common.errors import ResultCannotGetErrorOfSuccess, ResultCannotGetValueOfFailure

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class Result(Generic[T, E]):
    """
    Base type of the two variants `Ok` and `Err`.

    Construct with `Result.ok(value)` / `Result.fail(error)` (or `Ok.of` /
    `Err.of`). Prefer `match` to extract a value: it forces both paths to be
    handled.
    """

    @staticmethod
    def ok(value: Any = None) -> "Result[Any, Any]":
        return Ok(value)

    @staticmethod
    def fail(error: Any) -> "Result[Any, Any]":
        return Err(error)

    @staticmethod
    def combine(*results: "Result[Any, Any]") -> "Result[List[Any], Any]":
        """
        Merge independent results into one.

        Scans left to right and returns the first failure unchanged. When
        every result succeeds, returns a success wrapping the list of their
        values in input order.

        Example:
            Result.combine(Ok.of(1), Err.of("A"), Err.of("B")).error == "A"
            Result.combine(Ok.of(1), Ok.of(2)).value == [1, 2]
        """
        values = []
        for result in results:
            if result.is_failure:
                return result
            values.append(result.value)
        return Ok(values)

    # ------------------------------------------------------------------
    # Discriminant
    # ------------------------------------------------------------------

    @property
    def is_success(self) -> bool:
        raise NotImplementedError

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def is_ok(self) -> bool:
        return self.is_success

    def is_err(self) -> bool:
        return self.is_failure

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def value(self) -> T:
        raise NotImplementedError

    @property
    def error(self) -> E:
        raise NotImplementedError

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: U) -> Any:
        return self.value if self.is_success else default

    # ------------------------------------------------------------------
    # Eliminators
    # ------------------------------------------------------------------

    def match(self, on_failure: Callable[[E], U], on_success: Callable[[T], U]) -> U:
        """Total eliminator, failure callback first"""
        if self.is_success:
            return on_success(self.value)
        return on_failure(self.error)

    def match_obj(
        self,
        fail: Optional[Callable[[E], U]] = None,
        ok: Optional[Callable[[T], U]] = None,
    ) -> Optional[U]:
        """Like `match` with optional named callbacks; a missing callback yields None"""
        if self.is_success:
            return ok(self.value) if ok is not None else None
        return fail(self.error) if fail is not None else None

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def map(self, fn: Callable[[T], U]) -> "Result[U, E]":
        if self.is_success:
            return Ok(fn(self.value))
        return self

    def map_err(self, fn: Callable[[E], F]) -> "Result[T, F]":
        if self.is_failure:
            return Err(fn(self.error))
        return self

    def and_(self, other: "Result[U, E]") -> "Result[U, E]":
        """Returns `other` when this is a success, otherwise this failure"""
        if self.is_success:
            return other
        return self

    def and_then(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        if self.is_success:
            return fn(self.value)
        return self

    def or_else(self, fn: Callable[[E], "Result[T, F]"]) -> "Result[T, F]":
        if self.is_failure:
            return fn(self.error)
        return self

    def ok_value(self):
        """Project the success side to an Option"""
        from storefront.common.option import Nothing, Some

        return Some(self.value) if self.is_success else Nothing()

    def err_value(self):
        """Project the failure side to an Option"""
        from storefront.common.option import Nothing, Some

        return Some(self.error) if self.is_failure else Nothing()


@dataclass(frozen=True)
class Ok(Result[T, E]):
    """Success variant"""

    _value: T = None

    @classmethod
    def of(cls, value: T = None) -> "Ok[T, Any]":
        return cls(value)

    @property
    def is_success(self) -> bool:
        return True

    @property
    def value(self) -> T:
        return self._value

    @property
    def error(self) -> E:
        raise ResultCannotGetErrorOfSuccess()

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


@dataclass(frozen=True)
class Err(Result[T, E]):
    """Failure variant"""

    _error: E

    @classmethod
    def of(cls, error: E) -> "Err[Any, E]":
        return cls(error)

    @property
    def is_success(self) -> bool:
        return False

    @property
    def value(self) -> T:
        raise ResultCannotGetValueOfFailure()

    @property
    def error(self) -> E:
        return self._error

    def __repr__(self) -> str:
        return f"Err({self._error!r})"
