"""
Formatting helpers used by domain string representations

Author: TM3
Date: 2026-10-12
"""
from datetime import date, datetime
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def to_string_debug(value: Any) -> Any:
    """
    Render a value for debug output.

    Booleans and numbers are returned untouched, strings are quoted,
    callables render as `Function name()`, dates as ISO-8601 and any other
    object through its own `__str__`, quoted.
    """
    if value is None:
        return None
    if isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if callable(value):
        name = getattr(value, "__name__", "")
        if not name or name == "<lambda>":
            name = "anonymous"
        return f"Function {name}()"
    return f'"{value}"'


def identity(value: T) -> T:
    return value


def identity_curry(value: T) -> Callable[[], T]:
    """Returns a function that always returns `value`"""
    return lambda: value
