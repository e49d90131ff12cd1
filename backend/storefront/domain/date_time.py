"""
DateTime - immutable, timezone-aware point in time

Wraps an aware `datetime` (UTC unless built from an aware datetime in
another zone) and offers component accessors, comparisons, arithmetic with
`Duration`, ISO-8601 serialization and the calendar helpers used to render
month views (weeks run Monday to Sunday).

Author: TM3
Date: 2026-10-14
"""
import calendar
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import List, Optional, Union

from dateutil import parser as date_parser

from storefront.common.option import Nothing, Option, Some
from storefront.common.result import Err, Ok, Result
from storefront.domain.duration import Duration

_ONE_MICROSECOND = timedelta(microseconds=1)


class DateTimeExceptions(str, Enum):
    CANNOT_PARSE = "DateTimeCannotParse"


class DateTime:
    """
    Point in time with millisecond-and-below precision.

    Components given to the constructor are interpreted in `tz` (UTC by
    default). Instances never change; every operation returns a new one.
    """

    __slots__ = ("_dt",)

    # Months
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    # Days
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    DAYS_PER_WEEK = 7
    MONTHS_PER_YEAR = 12

    def __init__(
        self,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        microsecond: int = 0,
        tz: timezone = timezone.utc,
    ):
        value = datetime(year, month, day, hour, minute, second, millisecond * 1000 + microsecond, tzinfo=tz)
        object.__setattr__(self, "_dt", value)

    def __setattr__(self, name, value):
        raise AttributeError("DateTime is immutable")

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_datetime(cls, value: datetime) -> "DateTime":
        """Wrap a stdlib datetime; naive values are taken as UTC"""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_dt", value)
        return instance

    @classmethod
    def from_milliseconds_since_epoch(cls, milliseconds: int) -> "DateTime":
        epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
        return cls.from_datetime(epoch + timedelta(milliseconds=milliseconds))

    @classmethod
    def now(cls) -> "DateTime":
        return cls.from_datetime(datetime.now(timezone.utc))

    @classmethod
    def parse(cls, formatted: str) -> Result["DateTime", DateTimeExceptions]:
        """
        Parse an ISO-8601 string such as `2021-01-01T00:00:00.000Z`.

        Strings without an offset are read as UTC.

        Returns:
            Ok(DateTime), or Err(DateTimeExceptions.CANNOT_PARSE)
        """
        try:
            value = date_parser.isoparse(formatted)
        except (ValueError, OverflowError, TypeError):
            return Err(DateTimeExceptions.CANNOT_PARSE)
        return Ok(cls.from_datetime(value))

    @classmethod
    def try_parse(cls, formatted: str) -> Option["DateTime"]:
        return cls.parse(formatted).match(lambda _: Nothing(), Some)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self._dt.year

    @property
    def month(self) -> int:
        return self._dt.month

    @property
    def day(self) -> int:
        return self._dt.day

    @property
    def hour(self) -> int:
        return self._dt.hour

    @property
    def minute(self) -> int:
        return self._dt.minute

    @property
    def second(self) -> int:
        return self._dt.second

    @property
    def millisecond(self) -> int:
        return self._dt.microsecond // 1000

    @property
    def microsecond(self) -> int:
        return self._dt.microsecond

    @property
    def weekday(self) -> int:
        """1 (Monday) to 7 (Sunday)"""
        return self._dt.isoweekday()

    @property
    def microseconds_since_epoch(self) -> int:
        return (self._dt - datetime(1970, 1, 1, tzinfo=timezone.utc)) // _ONE_MICROSECOND

    @property
    def milliseconds_since_epoch(self) -> int:
        return self.microseconds_since_epoch // 1000

    @property
    def time_zone_name(self) -> Optional[str]:
        return self._dt.tzname()

    @property
    def time_zone_offset(self) -> Duration:
        offset = self._dt.utcoffset() or timedelta(0)
        return Duration(microseconds=offset // _ONE_MICROSECOND)

    def to_datetime(self) -> datetime:
        return self._dt

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, duration: Duration) -> "DateTime":
        return self._shifted(duration.in_microseconds)

    def subtract(self, duration: Duration) -> "DateTime":
        return self._shifted(-duration.in_microseconds)

    def difference(self, other: "DateTime") -> Duration:
        """Signed duration from `other` to this moment"""
        return Duration(microseconds=(self._dt - other._dt) // _ONE_MICROSECOND)

    def set(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        hour: Optional[int] = None,
        minute: Optional[int] = None,
        second: Optional[int] = None,
        millisecond: Optional[int] = None,
    ) -> "DateTime":
        """Copy with some components replaced"""
        return DateTime(
            year=self.year if year is None else year,
            month=self.month if month is None else month,
            day=self.day if day is None else day,
            hour=self.hour if hour is None else hour,
            minute=self.minute if minute is None else minute,
            second=self.second if second is None else second,
            millisecond=self.millisecond if millisecond is None else millisecond,
            microsecond=self._dt.microsecond % 1000 if millisecond is None else 0,
            tz=self._dt.tzinfo,
        )

    def _shifted(self, microseconds: int) -> "DateTime":
        # Shift in UTC so wall-clock gaps in the zone cannot break add/subtract symmetry
        shifted = self._dt.astimezone(timezone.utc) + timedelta(microseconds=microseconds)
        return DateTime.from_datetime(shifted.astimezone(self._dt.tzinfo))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def is_before(self, other: "DateTime") -> bool:
        return self._dt < other._dt

    def is_after(self, other: "DateTime") -> bool:
        return self._dt > other._dt

    def is_at_same_moment_as(self, other: "DateTime") -> bool:
        return self._dt == other._dt

    def is_same_or_before(self, other: "DateTime") -> bool:
        return self._dt <= other._dt

    def is_same_or_after(self, other: "DateTime") -> bool:
        return self._dt >= other._dt

    def is_between(self, first: "DateTime", second: "DateTime") -> bool:
        """Inclusive on both ends, in either order"""
        return (self.is_same_or_after(first) and self.is_same_or_before(second)) or (
            self.is_same_or_before(first) and self.is_same_or_after(second)
        )

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DateTime) and self.is_at_same_moment_as(other)

    def __lt__(self, other: "DateTime") -> bool:
        return self.is_before(other)

    def __le__(self, other: "DateTime") -> bool:
        return self.is_same_or_before(other)

    def __hash__(self) -> int:
        return hash(self.microseconds_since_epoch)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_iso8601_string(self) -> str:
        """`YYYY-MM-DDTHH:MM:SS.mmm` followed by `Z` or the `+HH:MM` offset"""
        base = (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}.{self.millisecond:03d}"
        )
        offset = self.time_zone_offset
        if offset.in_microseconds == 0:
            return f"{base}Z"
        sign = "-" if offset.is_negative else "+"
        minutes = offset.abs().in_minutes
        return f"{base}{sign}{minutes // 60:02d}:{minutes % 60:02d}"

    def __str__(self) -> str:
        return self.to_iso8601_string()

    def __repr__(self) -> str:
        return f"DateTime({self.to_iso8601_string()})"

    # ------------------------------------------------------------------
    # Calendar utils
    # ------------------------------------------------------------------

    def first_day_of_month_week(self) -> "DateTime":
        """Monday of the week holding the first day of this month"""
        first = self.set(day=1)
        return first.subtract(Duration.days(first.weekday - self.MONDAY))

    def last_day_of_month_week(self) -> "DateTime":
        """Sunday of the week holding the last day of this month"""
        last = self.set(day=calendar.monthrange(self.year, self.month)[1])
        return last.add(Duration.days(self.SUNDAY - last.weekday))

    def days_in_month(self) -> List["DateTime"]:
        """
        Every day of the full weeks spanning this month, Monday first.

        The list always holds a multiple of seven days, starting with
        `first_day_of_month_week()` and ending with `last_day_of_month_week()`.
        """
        current = self.first_day_of_month_week()
        last = self.last_day_of_month_week()
        days = [current]
        while current.is_before(last):
            current = current.add(Duration.days(1))
            days.append(current)
        return days

    def is_in_same_month(self, other: "DateTime") -> bool:
        return self.month == other.month and self.year == other.year

    def is_today(self) -> bool:
        today = DateTime.from_datetime(datetime.now(self._dt.tzinfo))
        return self.is_in_same_month(today) and today.day == self.day


DateTimeInput = Union[DateTime, str]
