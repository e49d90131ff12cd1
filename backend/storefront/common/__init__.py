"""
Common functional runtime: Result, Option, Either and their errors
"""
from storefront.common.errors import (
    DomainError,
    EitherCannotUnwrapLeft,
    EitherCannotUnwrapRight,
    OptionCannotGetValueOfNone,
    ResultCannotGetErrorOfSuccess,
    ResultCannotGetValueOfFailure,
)
from storefront.common.result import Err, Ok, Result
from storefront.common.option import Nothing, Option, Some
from storefront.common.either import Either, Left, Right

__all__ = [
    'Result', 'Ok', 'Err',
    'Option', 'Some', 'Nothing',
    'Either', 'Left', 'Right',
    'DomainError',
    'ResultCannotGetValueOfFailure',
    'ResultCannotGetErrorOfSuccess',
    'OptionCannotGetValueOfNone',
    'EitherCannotUnwrapLeft',
    'EitherCannotUnwrapRight',
]
