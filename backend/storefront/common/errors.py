"""
Programmer-error exceptions

These are raised (never returned) when a caller reads the wrong side of a
sum type without checking its discriminant first. Expected domain failures
are never modelled with these classes; they travel inside a Result.

Author: TM3
Date: 2026-10-12
"""


class DomainError(Exception):
    """Base class for contract violations in the domain layer"""

    def __init__(self, message: str, name: str = "DomainError"):
        super().__init__(message)
        self.name = name


class ResultCannotGetValueOfFailure(DomainError):
    def __init__(self):
        super().__init__("Cannot get value of a failure result.", "ResultCannotGetValueOfFailure")


class ResultCannotGetErrorOfSuccess(DomainError):
    def __init__(self):
        super().__init__("Cannot get error of a success result.", "ResultCannotGetErrorOfSuccess")


class OptionCannotGetValueOfNone(DomainError):
    def __init__(self, message: str = "Called `Option.unwrap()` on a `Nothing` value"):
        super().__init__(message, "OptionCannotGetValueOfNone")


class EitherCannotUnwrapLeft(DomainError):
    def __init__(self):
        super().__init__("Called `Either.unwrap_left()` on a `Right` value", "EitherCannotUnwrapLeft")


class EitherCannotUnwrapRight(DomainError):
    def __init__(self):
        super().__init__("Called `Either.unwrap_right()` on a `Left` value", "EitherCannotUnwrapRight")
