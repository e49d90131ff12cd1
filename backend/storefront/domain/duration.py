"""
Duration - signed span of time stored as an integer count of microseconds

All unit conversions are derived from the microsecond count with floor
division. Month and year durations use an average month of 365.25 / 12 days:
they are approximations and should not be used for calendar arithmetic that
needs exact month boundaries.

Author: TM3
Date: 2026-10-14
"""
from typing import Callable, Optional, Union

Number = Union[int, float]

IMPRECISE_MONTHS_MESSAGE = (
    "Be careful when you work with months. Durations use an average month length "
    "since months do not have the same number of days every month, every year."
)
IMPRECISE_YEARS_MESSAGE = (
    "Be careful when you work with years. Durations use an average year length "
    "since years do not have the same number of days every year."
)


def _two_digits(n: int) -> str:
    return str(n).rjust(2, "0")


def _six_digits(n: int) -> str:
    return str(n).rjust(6, "0")


class Duration:
    """Immutable span of time with microsecond resolution"""

    __slots__ = ("_duration",)

    # Constants
    MICROSECONDS_PER_MILLISECOND = 1000
    MILLISECONDS_PER_SECOND = 1000
    SECONDS_PER_MINUTE = 60
    MINUTES_PER_HOUR = 60
    HOURS_PER_DAY = 24
    DAYS_PER_MONTH = 365.25 / 12
    MONTHS_PER_YEAR = 12

    MICROSECONDS_PER_SECOND = MICROSECONDS_PER_MILLISECOND * MILLISECONDS_PER_SECOND
    MICROSECONDS_PER_MINUTE = MICROSECONDS_PER_SECOND * SECONDS_PER_MINUTE
    MICROSECONDS_PER_HOUR = MICROSECONDS_PER_MINUTE * MINUTES_PER_HOUR
    MICROSECONDS_PER_DAY = MICROSECONDS_PER_HOUR * HOURS_PER_DAY
    MICROSECONDS_PER_MONTH = int(MICROSECONDS_PER_DAY * DAYS_PER_MONTH)
    MICROSECONDS_PER_YEAR = MICROSECONDS_PER_MONTH * MONTHS_PER_YEAR

    MILLISECONDS_PER_MINUTE = MILLISECONDS_PER_SECOND * SECONDS_PER_MINUTE
    MILLISECONDS_PER_HOUR = MILLISECONDS_PER_MINUTE * MINUTES_PER_HOUR
    MILLISECONDS_PER_DAY = MILLISECONDS_PER_HOUR * HOURS_PER_DAY
    SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
    SECONDS_PER_DAY = SECONDS_PER_HOUR * HOURS_PER_DAY
    MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY

    zero: "Duration"

    def __init__(
        self,
        microseconds: Number = 0,
        milliseconds: Number = 0,
        seconds: Number = 0,
        minutes: Number = 0,
        hours: Number = 0,
        days: Number = 0,
        months: Number = 0,
        years: Number = 0,
    ):
        total = (
            microseconds
            + milliseconds * self.MICROSECONDS_PER_MILLISECOND
            + seconds * self.MICROSECONDS_PER_SECOND
            + minutes * self.MICROSECONDS_PER_MINUTE
            + hours * self.MICROSECONDS_PER_HOUR
            + days * self.MICROSECONDS_PER_DAY
            + months * self.MICROSECONDS_PER_MONTH
            + years * self.MICROSECONDS_PER_YEAR
        )
        object.__setattr__(self, "_duration", int(round(total)))

    def __setattr__(self, name, value):
        raise AttributeError("Duration is immutable")

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def microseconds(cls, microseconds: Number) -> "Duration":
        return cls(microseconds=microseconds)

    @classmethod
    def milliseconds(cls, milliseconds: Number) -> "Duration":
        return cls(milliseconds=milliseconds)

    @classmethod
    def seconds(cls, seconds: Number) -> "Duration":
        return cls(seconds=seconds)

    @classmethod
    def minutes(cls, minutes: Number) -> "Duration":
        return cls(minutes=minutes)

    @classmethod
    def hours(cls, hours: Number) -> "Duration":
        return cls(hours=hours)

    @classmethod
    def days(cls, days: Number) -> "Duration":
        return cls(days=days)

    @classmethod
    def months(cls, months: Number, on_imprecise: Optional[Callable[[str], None]] = None) -> "Duration":
        """
        Duration of `months` average months.

        Args:
            months: Number of months
            on_imprecise: Optional callback receiving a precision warning,
                e.g. `logger.warning`
        """
        if on_imprecise is not None:
            on_imprecise(IMPRECISE_MONTHS_MESSAGE)
        return cls(months=months)

    @classmethod
    def years(cls, years: Number, on_imprecise: Optional[Callable[[str], None]] = None) -> "Duration":
        """Same as `months`, for average years"""
        if on_imprecise is not None:
            on_imprecise(IMPRECISE_YEARS_MESSAGE)
        return cls(years=years)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    @property
    def in_years(self) -> int:
        return self._duration // self.MICROSECONDS_PER_YEAR

    @property
    def in_months(self) -> int:
        return self._duration // self.MICROSECONDS_PER_MONTH

    @property
    def in_days(self) -> int:
        return self._duration // self.MICROSECONDS_PER_DAY

    @property
    def in_hours(self) -> int:
        return self._duration // self.MICROSECONDS_PER_HOUR

    @property
    def in_minutes(self) -> int:
        return self._duration // self.MICROSECONDS_PER_MINUTE

    @property
    def in_seconds(self) -> int:
        return self._duration // self.MICROSECONDS_PER_SECOND

    @property
    def in_milliseconds(self) -> int:
        return self._duration // self.MICROSECONDS_PER_MILLISECOND

    @property
    def in_microseconds(self) -> int:
        return self._duration

    @property
    def is_negative(self) -> bool:
        return self._duration < 0

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def abs(self) -> "Duration":
        if not self.is_negative:
            return self
        return Duration(microseconds=-self._duration)

    def opposite(self) -> "Duration":
        return Duration(microseconds=-self._duration)

    def add(self, other: "Duration") -> "Duration":
        return Duration(microseconds=self._duration + other._duration)

    def subtract(self, other: "Duration") -> "Duration":
        return Duration(microseconds=self._duration - other._duration)

    def multiply(self, factor: Number) -> "Duration":
        return Duration(microseconds=self._duration * factor)

    def divide(self, factor: Number) -> "Duration":
        return Duration(microseconds=self._duration // factor)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def is_lesser_than(self, other: "Duration") -> bool:
        return self._duration < other._duration

    def is_lesser_than_or_equal(self, other: "Duration") -> bool:
        return self._duration <= other._duration

    def is_equal(self, other: "Duration") -> bool:
        return self._duration == other._duration

    def is_greater_than(self, other: "Duration") -> bool:
        return self._duration > other._duration

    def is_greater_than_or_equal(self, other: "Duration") -> bool:
        return self._duration >= other._duration

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Duration) and self.is_equal(other)

    def __lt__(self, other: "Duration") -> bool:
        return self.is_lesser_than(other)

    def __le__(self, other: "Duration") -> bool:
        return self.is_lesser_than_or_equal(other)

    def __hash__(self) -> int:
        return hash(self._duration)

    def __add__(self, other: "Duration") -> "Duration":
        return self.add(other)

    def __sub__(self, other: "Duration") -> "Duration":
        return self.subtract(other)

    def __neg__(self) -> "Duration":
        return self.opposite()

    def __str__(self) -> str:
        """`H:MM:SS.ffffff`, prefixed with `-` when negative"""
        if self._duration < 0:
            return f"-{self.abs()}"
        minutes = _two_digits(self.in_minutes % self.MINUTES_PER_HOUR)
        seconds = _two_digits(self.in_seconds % self.SECONDS_PER_MINUTE)
        micros = _six_digits(self._duration % self.MICROSECONDS_PER_SECOND)
        return f"{self.in_hours}:{minutes}:{seconds}.{micros}"

    def __repr__(self) -> str:
        return f"Duration({self})"


Duration.zero = Duration()
