# The MIT License (MIT)
#
# Copyright (c) Chronos contributors
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

# Maintainer's notes:
#
# - Why are Moment and Interval in one file?
#   - They 'know' about each other: moments produce intervals (diff)
#     and consume them (add). One file avoids circular imports.
#   - Calendar helpers without knowledge of either class live in _math.py.
# - Every "mutating" method returns a new instance. Instances are never
#   modified after construction, which is why copy() and friends return self.
from __future__ import annotations

__version__ = "1.0.0"

import enum
import re
from datetime import (
    date as _date,
    datetime as _datetime,
    time as _time,
    timedelta as _timedelta,
    tzinfo as _tzinfo,
)
from struct import pack, unpack
from time import time_ns
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    ClassVar,
    Iterable,
    Iterator,
    no_type_check,
)
from zoneinfo import ZoneInfo

from . import _config, _math
from ._common import (
    DAYS_PER_WEEK,
    MONTHS_PER_YEAR,
    SECS_PER_HOUR,
    SECS_PER_MINUTE,
    UTC as _UTC,
    YEARS_PER_CENTURY,
    YEARS_PER_DECADE,
    Weekday,
    as_weekday,
    check_utc_bounds,
    mk_fixed_tzinfo,
    resolve_wall_time,
)
from ._tz import InvalidTimezone, TzLike, resolve_tz, tz_abbreviation, tz_name

__all__ = [
    # Core types
    "Moment",
    "Interval",
    "Field",
    # Interval factories
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    # Configuration
    "get_week_starts_at",
    "set_week_starts_at",
    "get_week_ends_at",
    "set_week_ends_at",
    "get_weekend_days",
    "set_weekend_days",
    "get_to_string_format",
    "set_to_string_format",
    "reset_to_string_format",
    "get_default_timezone",
    "set_default_timezone",
    "set_test_now",
    "get_test_now",
    "has_test_now",
    "reset_settings",
    # Exceptions
    "InvalidTimezone",
    "InvalidFormat",
    "UnknownField",
    # Constants
    "SUNDAY",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "Weekday",
]

SUNDAY = Weekday.SUNDAY
MONDAY = Weekday.MONDAY
TUESDAY = Weekday.TUESDAY
WEDNESDAY = Weekday.WEDNESDAY
THURSDAY = Weekday.THURSDAY
FRIDAY = Weekday.FRIDAY
SATURDAY = Weekday.SATURDAY

# Helpers that pre-compute/lookup as much as possible
_object_new = object.__new__
_fromtimestamp = _datetime.fromtimestamp
_fromisoformat = _datetime.fromisoformat
_EPOCH = _datetime(1970, 1, 1, tzinfo=_UTC)
_ONE_SECOND = _timedelta(seconds=1)
_DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
_MONTH_NAMES = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class _ImmutableBase:
    __slots__ = ()

    # Immutable classes don't need to be copied
    @no_type_check
    def __copy__(self):
        return self

    @no_type_check
    def __deepcopy__(self, _):
        return self


if TYPE_CHECKING:
    from typing import final
else:

    def final(cls):

        def init_subclass_not_allowed(cls, **kwargs):  # pragma: no cover
            raise TypeError("Subclassing not allowed")

        cls.__init_subclass__ = init_subclass_not_allowed
        return cls


class InvalidFormat(ValueError):
    """A string doesn't match the format it is parsed with"""


class UnknownField(ValueError):
    """A field name isn't one of the names listed in :class:`Field`"""


class Field(enum.Enum):
    """The fields readable through :meth:`Moment.get`.

    Each value is the name of the corresponding :class:`Moment` property.
    """

    YEAR = "year"
    YEAR_ISO = "year_iso"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MICROSECOND = "microsecond"
    DAY_OF_WEEK = "day_of_week"
    DAY_OF_YEAR = "day_of_year"
    WEEK_OF_YEAR = "week_of_year"
    WEEK_OF_MONTH = "week_of_month"
    DAYS_IN_MONTH = "days_in_month"
    TIMESTAMP = "timestamp"
    AGE = "age"
    QUARTER = "quarter"
    OFFSET = "offset"
    OFFSET_HOURS = "offset_hours"
    DST = "dst"
    LOCAL = "local"
    UTC = "utc"
    TIMEZONE = "timezone"
    TIMEZONE_NAME = "timezone_name"


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(map(str.capitalize, rest))


# Both snake_case and camelCase spellings are accepted,
# plus the short aliases the properties themselves offer.
_FIELD_LOOKUP: dict[str, Field] = {
    **{f.value: f for f in Field},
    **{_camel(f.value): f for f in Field},
    "micro": Field.MICROSECOND,
    "tz": Field.TIMEZONE,
    "tz_name": Field.TIMEZONE_NAME,
    "tzName": Field.TIMEZONE_NAME,
}


@final
class Interval(_ImmutableBase):
    """A signed duration made up of calendar fields
    (years, months, weeks, days, hours, minutes, and seconds).

    Fields are never carried into each other: 90 seconds stay 90 seconds.
    The ``invert`` flag negates the whole interval.

    Example
    -------
    >>> Interval(years=1, weeks=2, hours=3)
    Interval(P1Y2WT3H)
    >>> Interval.create(4, 3, 6, 7, 8, 10, 11).add(Interval(days=5))
    Interval(P4Y3M54DT8H10M11S)

    Intervals produced by :meth:`Moment.diff` have a different shape:
    their fields are a calendar breakdown of the span between two moments,
    and :attr:`total_days` holds the full span in days.
    """

    __slots__ = (
        "_years",
        "_months",
        "_weeks",
        "_days",
        "_hours",
        "_minutes",
        "_seconds",
        "_invert",
        "_total_days",
    )

    ZERO: ClassVar[Interval]
    """An interval of zero"""

    def __init__(
        self,
        *,
        years: int = 0,
        months: int = 0,
        weeks: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        invert: bool = False,
    ) -> None:
        self._years = _check_int("years", years)
        self._months = _check_int("months", months)
        self._weeks = _check_int("weeks", weeks)
        self._days = _check_int("days", days)
        self._hours = _check_int("hours", hours)
        self._minutes = _check_int("minutes", minutes)
        self._seconds = _check_int("seconds", seconds)
        self._invert = bool(invert)
        self._total_days: int | None = None

    @classmethod
    def create(
        cls,
        years: int = 0,
        months: int = 0,
        weeks: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
    ) -> Interval:
        """Create an interval from positional fields, largest unit first.

        >>> Interval.create(4, 3, 6, 7, 8, 10, 11)
        Interval(P4Y3M6W7DT8H10M11S)
        """
        return cls(
            years=years,
            months=months,
            weeks=weeks,
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
        )

    @classmethod
    def year(cls, n: int = 1, /) -> Interval:
        return cls(years=n)

    @classmethod
    def month(cls, n: int = 1, /) -> Interval:
        return cls(months=n)

    @classmethod
    def week(cls, n: int = 1, /) -> Interval:
        return cls(weeks=n)

    @classmethod
    def day(cls, n: int = 1, /) -> Interval:
        return cls(days=n)

    @classmethod
    def hour(cls, n: int = 1, /) -> Interval:
        return cls(hours=n)

    @classmethod
    def minute(cls, n: int = 1, /) -> Interval:
        return cls(minutes=n)

    @classmethod
    def second(cls, n: int = 1, /) -> Interval:
        return cls(seconds=n)

    @classmethod
    def _from_diff(cls, fields: _math.CalendarDiff, invert: bool) -> Interval:
        years, months, days, hours, minutes, seconds, _, total_days = fields
        self = _object_new(cls)
        self._years = years
        self._months = months
        self._weeks = 0
        self._days = days
        self._hours = hours
        self._minutes = minutes
        self._seconds = seconds
        self._invert = invert
        self._total_days = total_days
        return self

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def weeks(self) -> int:
        return self._weeks

    @property
    def days(self) -> int:
        """The days field, not including the weeks"""
        return self._days

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def invert(self) -> bool:
        """Whether the interval points backwards in time"""
        return self._invert

    @property
    def total_days(self) -> int:
        """Weeks and days expressed in days. For intervals created
        by :meth:`Moment.diff`, the full span in days."""
        if self._total_days is None:
            return self._weeks * DAYS_PER_WEEK + self._days
        return self._total_days

    @property
    def is_diff(self) -> bool:
        """Whether this interval was produced by :meth:`Moment.diff`"""
        return self._total_days is not None

    def _signed_fields(self) -> tuple[int, int, int, int, int, int]:
        # The effective (years, months, days, hours, minutes, seconds).
        # A diff's years and months are already part of its day span.
        sign = -1 if self._invert else 1
        if self._total_days is None:
            return (
                sign * self._years,
                sign * self._months,
                sign * (self._weeks * DAYS_PER_WEEK + self._days),
                sign * self._hours,
                sign * self._minutes,
                sign * self._seconds,
            )
        return (
            0,
            0,
            sign * self._total_days,
            sign * self._hours,
            sign * self._minutes,
            sign * self._seconds,
        )

    def add(self, other: Interval, /) -> Interval:
        """Combine two intervals field by field.

        Weeks are folded into days, each operand's sign is applied to its
        own fields, and like fields are summed. No field carries into
        another, so the result may hold e.g. 70 days or 90 seconds.

        Example
        -------
        >>> Interval.create(4, 3, 6, 7, 8, 10, 11).add(
        ...     Interval.parse_common_iso("P2Y1M5DT22H33M44S")
        ... )
        Interval(P6Y4M54DT30H43M55S)
        """
        if not isinstance(other, Interval):
            raise TypeError(f"Can only add an Interval, got {other!r}")
        y1, mo1, d1, h1, mi1, s1 = self._signed_fields()
        y2, mo2, d2, h2, mi2, s2 = other._signed_fields()
        return Interval(
            years=y1 + y2,
            months=mo1 + mo2,
            days=d1 + d2,
            hours=h1 + h2,
            minutes=mi1 + mi2,
            seconds=s1 + s2,
        )

    def subtract(self, other: Interval, /) -> Interval:
        """Like :meth:`add`, with the other interval negated

        >>> Interval(days=10).subtract(Interval(weeks=1))
        Interval(P3D)
        """
        if not isinstance(other, Interval):
            raise TypeError(f"Can only subtract an Interval, got {other!r}")
        return self.add(-other)

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.add(-other)

    def __neg__(self) -> Interval:
        """Flip the direction of the interval

        >>> -Interval(days=3)
        Interval(-P3D)
        """
        new = _object_new(Interval)
        new._years = self._years
        new._months = self._months
        new._weeks = self._weeks
        new._days = self._days
        new._hours = self._hours
        new._minutes = self._minutes
        new._seconds = self._seconds
        new._invert = not self._invert
        new._total_days = self._total_days
        return new

    def __pos__(self) -> Interval:
        return self

    def __bool__(self) -> bool:
        """True if the interval has any non-zero effect

        >>> bool(Interval())
        False
        >>> bool(Interval(weeks=1, days=-7))
        False
        """
        return any(self._signed_fields())

    def __eq__(self, other: object) -> bool:
        """Compare the effective fields, with weeks counted as days
        and the invert flag applied.

        >>> Interval(weeks=1) == Interval(days=7)
        True
        >>> Interval(days=2, invert=True) == Interval(days=-2)
        True
        >>> Interval(hours=24) == Interval(days=1)
        False
        """
        if not isinstance(other, Interval):
            return NotImplemented
        return self._signed_fields() == other._signed_fields()

    def __hash__(self) -> int:
        return hash(self._signed_fields())

    def format_common_iso(self) -> str:
        """Format as an ISO 8601 duration, e.g. ``P1Y2M3W4DT5H6M7S``.

        Inverted intervals are prefixed with ``-``. Negative fields
        are written with their own sign (``P1M-2D``), which ISO 8601
        itself doesn't allow but :meth:`parse_common_iso` accepts.
        """
        date = "".join(
            f"{value}{unit}" * bool(value)
            for value, unit in (
                (self._years, "Y"),
                (self._months, "M"),
                (self._weeks, "W"),
                (self._days, "D"),
            )
        )
        time = "".join(
            f"{value}{unit}" * bool(value)
            for value, unit in (
                (self._hours, "H"),
                (self._minutes, "M"),
                (self._seconds, "S"),
            )
        )
        body = date + ("T" + time if time else "")
        return "-" * self._invert + "P" + (body or "0D")

    __str__ = format_common_iso

    @classmethod
    def parse_common_iso(cls, s: str, /) -> Interval:
        """Parse an ISO 8601 duration such as ``P2Y1M5DT22H33M44S``.

        A leading ``-`` sets the invert flag.

        Example
        -------
        >>> Interval.parse_common_iso("P1W3D")
        Interval(P1W3D)
        >>> Interval.parse_common_iso("-PT90S")
        Interval(-PT90S)
        """
        if not isinstance(s, str):
            raise TypeError(f"Expected a string, got {s!r}")
        match = _match_iso_duration(s)
        if match is None or s.endswith("T"):
            raise InvalidFormat(f"Invalid ISO 8601 duration: {s!r}")
        sign, *fields = match.groups()
        if all(f is None for f in fields):
            raise InvalidFormat(f"Invalid ISO 8601 duration: {s!r}")
        y, mo, w, d, h, mi, sec = (int(f) if f else 0 for f in fields)
        return cls(
            years=y,
            months=mo,
            weeks=w,
            days=d,
            hours=h,
            minutes=mi,
            seconds=sec,
            invert=sign == "-",
        )

    def __repr__(self) -> str:
        return f"Interval({self})"

    @no_type_check
    def __reduce__(self):
        return (
            _unpkl_interval,
            (
                self._years,
                self._months,
                self._weeks,
                self._days,
                self._hours,
                self._minutes,
                self._seconds,
                self._invert,
                self._total_days,
            ),
        )


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
@no_type_check
def _unpkl_interval(*args) -> Interval:
    self = _object_new(Interval)
    (
        self._years,
        self._months,
        self._weeks,
        self._days,
        self._hours,
        self._minutes,
        self._seconds,
        self._invert,
        self._total_days,
    ) = args
    return self


_match_iso_duration = re.compile(
    r"([-+]?)P(?:(-?\d+)Y)?(?:(-?\d+)M)?(?:(-?\d+)W)?(?:(-?\d+)D)?"
    r"(?:T(?:(-?\d+)H)?(?:(-?\d+)M)?(?:(-?\d+)S)?)?",
    re.ASCII,
).fullmatch


def _check_int(name: str, value: int) -> int:
    if type(value) is not int:
        raise TypeError(f"{name} must be an int, got {value!r}")
    return value


Interval.ZERO = Interval()


@final
class Moment(_ImmutableBase):
    """A point in time in a specific timezone, with calendar arithmetic.

    Example
    -------
    >>> Moment(2024, 1, 31, 10, 30, tz="Europe/Amsterdam")
    Moment(2024-01-31 10:30:00+01:00[Europe/Amsterdam])
    >>> _.add_month()
    Moment(2024-03-02 10:30:00+01:00[Europe/Amsterdam])
    >>> _.sub_month_no_overflow()
    Moment(2024-02-02 10:30:00+01:00[Europe/Amsterdam])

    Methods named after an operation (``add_days``, ``start_of_month``,
    ``with_year``, ...) return a new instance. The receiver never changes.

    The ``tz`` argument accepted throughout may be an IANA timezone key,
    a fixed offset like ``"+02:00"``, a :class:`~datetime.tzinfo`, or
    ``None`` for the default timezone (see :func:`set_default_timezone`).
    """

    __slots__ = ("_py_dt",)
    _py_dt: _datetime

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        microsecond: int = 0,
        tz: TzLike = None,
    ) -> None:
        self._py_dt = resolve_wall_time(
            _datetime(
                year,
                month,
                day,
                hour,
                minute,
                second,
                microsecond,
                resolve_tz(tz),
            ),
            None,
        )

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def now(cls, tz: TzLike = None) -> Moment:
        """The current time, or the pinned time set by :func:`set_test_now`"""
        zone = resolve_tz(tz)
        pinned = _config.pinned_now()
        if pinned is not None:
            return cls._from_py_unchecked(pinned.astimezone(zone))
        secs, nanos = divmod(time_ns(), 1_000_000_000)
        return cls._from_py_unchecked(
            _fromtimestamp(secs, zone).replace(microsecond=nanos // 1_000)
        )

    @classmethod
    def today(cls, tz: TzLike = None) -> Moment:
        return cls.now(tz).start_of_day()

    @classmethod
    def tomorrow(cls, tz: TzLike = None) -> Moment:
        return cls.today(tz).add_day()

    @classmethod
    def yesterday(cls, tz: TzLike = None) -> Moment:
        return cls.today(tz).sub_day()

    @classmethod
    def max_value(cls) -> Moment:
        """The greatest supported moment"""
        return cls._from_py_unchecked(_datetime.max.replace(tzinfo=_UTC))

    @classmethod
    def min_value(cls) -> Moment:
        """The lowest supported moment"""
        return cls._from_py_unchecked(_datetime.min.replace(tzinfo=_UTC))

    @classmethod
    def create(
        cls,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        tz: TzLike = None,
    ) -> Moment:
        """Create a moment from components, filling in the blanks from now.

        Missing date fields take today's values. If ``hour`` is missing,
        the whole time of day is taken from now; otherwise missing minutes
        and seconds are zero. Out-of-range values roll over into the
        neighbouring units, so ``create(2015, 2, 31)`` is March 3rd.
        """
        now = cls.now(tz)
        if hour is None:
            hour = now.hour
            minute = now.minute if minute is None else minute
            second = now.second if second is None else second
        else:
            minute = minute or 0
            second = second or 0
        return now._with_wall(
            _math.rollover_time(
                _math.rollover_date(
                    now.year if year is None else year,
                    now.month if month is None else month,
                    now.day if day is None else day,
                ),
                hour,
                minute,
                second,
            )
        )

    @classmethod
    def create_from_date(
        cls,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        tz: TzLike = None,
    ) -> Moment:
        """Create a moment on the given date, at the current time of day"""
        return cls.create(year, month, day, None, None, None, tz)

    @classmethod
    def create_from_time(
        cls,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        tz: TzLike = None,
    ) -> Moment:
        """Create a moment today, at the given time of day"""
        return cls.create(None, None, None, hour, minute, second, tz)

    @classmethod
    def create_from_format(cls, fmt: str, s: str, tz: TzLike = None) -> Moment:
        """Parse a string with a :meth:`~datetime.datetime.strptime` pattern.

        An offset parsed from the string (``%z``) takes precedence over ``tz``.

        Example
        -------
        >>> Moment.create_from_format("%d/%m/%Y %H:%M", "15/08/2020 23:12")
        Moment(2020-08-15 23:12:00+00:00[UTC])
        """
        zone = resolve_tz(tz)
        try:
            parsed = _datetime.strptime(s, fmt)
        except ValueError as e:
            raise InvalidFormat(
                f"Cannot parse {s!r} with format {fmt!r}: {e}"
            ) from None
        if parsed.tzinfo is not None:
            return cls._from_py_unchecked(check_utc_bounds(parsed))
        return cls._from_py_unchecked(
            resolve_wall_time(parsed.replace(tzinfo=zone), None)
        )

    @classmethod
    def parse(cls, s: str, /, tz: TzLike = None) -> Moment:
        """Parse an ISO 8601 string. Strings without an offset
        are read as wall time in ``tz``.

        >>> Moment.parse("2020-08-15T23:12:09+02:00")
        Moment(2020-08-15 23:12:09+02:00[+02:00])
        """
        zone = resolve_tz(tz)
        try:
            parsed = _fromisoformat(s)
        except ValueError as e:
            raise InvalidFormat(
                f"Invalid ISO 8601 string {s!r}: {e}"
            ) from None
        if parsed.tzinfo is not None:
            return cls._from_py_unchecked(check_utc_bounds(parsed))
        return cls._from_py_unchecked(
            resolve_wall_time(parsed.replace(tzinfo=zone), None)
        )

    @classmethod
    def create_from_timestamp(cls, ts: float, /, tz: TzLike = None) -> Moment:
        """Create a moment from a UNIX timestamp (in seconds)"""
        return cls._from_py_unchecked(_fromtimestamp(ts, resolve_tz(tz)))

    @classmethod
    def create_from_timestamp_utc(cls, ts: float, /) -> Moment:
        return cls._from_py_unchecked(_fromtimestamp(ts, _UTC))

    @classmethod
    def from_py_datetime(cls, d: _datetime, /, tz: TzLike = None) -> Moment:
        """Create a moment from a standard library datetime.

        Naive datetimes are read as wall time in ``tz``; aware ones keep
        their own timezone and ``tz`` is ignored.
        """
        if not isinstance(d, _datetime):
            raise TypeError(f"Expected a datetime, got {d!r}")
        d = _strip_subclasses(d)
        if d.tzinfo is None:
            return cls._from_py_unchecked(
                resolve_wall_time(d.replace(tzinfo=resolve_tz(tz)), None)
            )
        # This ensures skipped times are disambiguated according to the fold.
        return cls._from_py_unchecked(
            check_utc_bounds(d).astimezone(_UTC).astimezone(d.tzinfo)
        )

    @classmethod
    def instance(cls, value: Moment | _datetime, /) -> Moment:
        """A moment equal to the given moment or datetime"""
        if isinstance(value, Moment):
            return value
        return cls.from_py_datetime(value)

    def copy(self) -> Moment:
        return self

    def py_datetime(self) -> _datetime:
        """The underlying standard library datetime"""
        return self._py_dt

    def date(self) -> _date:
        return self._py_dt.date()

    def time(self) -> _time:
        return self._py_dt.time()

    @classmethod
    def _from_py_unchecked(cls, d: _datetime, /) -> Moment:
        assert d.tzinfo is not None
        self = _object_new(cls)
        self._py_dt = d
        return self

    def _with_wall(self, naive: _datetime) -> Moment:
        # Same timezone, different wall-clock reading. The current offset
        # is kept where the new reading is ambiguous.
        return self._from_py_unchecked(
            resolve_wall_time(
                naive.replace(tzinfo=self._py_dt.tzinfo),
                self._py_dt.utcoffset(),
            )
        )

    def _with_date(self, d: _date) -> Moment:
        return self._with_wall(_datetime.combine(d, self._py_dt.time()))

    def _shift_exact(self, delta: _timedelta) -> Moment:
        return self._from_py_unchecked(
            (self._py_dt.astimezone(_UTC) + delta).astimezone(
                self._py_dt.tzinfo
            )
        )

    def _or_now(self, other: Moment | None) -> Moment:
        if other is None:
            return Moment.now(self._py_dt.tzinfo)
        return _check_moment(other)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self._py_dt.year

    @property
    def year_iso(self) -> int:
        """The ISO 8601 week-numbering year"""
        return self._py_dt.isocalendar()[0]

    @property
    def month(self) -> int:
        return self._py_dt.month

    @property
    def day(self) -> int:
        return self._py_dt.day

    @property
    def hour(self) -> int:
        return self._py_dt.hour

    @property
    def minute(self) -> int:
        return self._py_dt.minute

    @property
    def second(self) -> int:
        return self._py_dt.second

    @property
    def microsecond(self) -> int:
        return self._py_dt.microsecond

    @property
    def day_of_week(self) -> Weekday:
        """The day of the week, from Sunday (0) to Saturday (6)"""
        return Weekday(_math.day_of_week(self._py_dt))

    @property
    def day_of_year(self) -> int:
        """The day of the year, counting from 0 on January 1st"""
        return self._py_dt.timetuple().tm_yday - 1

    @property
    def week_of_year(self) -> int:
        """The ISO 8601 week number"""
        return self._py_dt.isocalendar()[1]

    @property
    def week_of_month(self) -> int:
        return (self._py_dt.day + DAYS_PER_WEEK - 1) // DAYS_PER_WEEK

    @property
    def days_in_month(self) -> int:
        return _math.days_in_month(self._py_dt.year, self._py_dt.month)

    @property
    def timestamp(self) -> int:
        """The UNIX timestamp in whole seconds, rounded down"""
        return (self._py_dt - _EPOCH) // _ONE_SECOND

    @property
    def age(self) -> int:
        """Whole years between this moment and now"""
        return self.diff_in_years()

    @property
    def quarter(self) -> int:
        return (self._py_dt.month + 2) // 3

    @property
    def offset(self) -> int:
        """The UTC offset in seconds"""
        return self._py_dt.utcoffset() // _ONE_SECOND  # type: ignore[operator]

    @property
    def offset_hours(self) -> float:
        return self.offset / SECS_PER_HOUR

    @property
    def dst(self) -> bool:
        """Whether daylight saving time is in effect"""
        return bool(self._py_dt.dst())

    @property
    def local(self) -> bool:
        """Whether the offset matches that of the default timezone"""
        default_tz = _config.current().default_tz
        return (
            self._py_dt.utcoffset()
            == self._py_dt.astimezone(default_tz).utcoffset()
        )

    @property
    def utc(self) -> bool:
        """Whether the offset is zero"""
        return not self._py_dt.utcoffset()

    @property
    def timezone(self) -> _tzinfo:
        return self._py_dt.tzinfo  # type: ignore[return-value]

    tz = timezone

    @property
    def timezone_name(self) -> str:
        return tz_name(self._py_dt.tzinfo)  # type: ignore[arg-type]

    tz_name = timezone_name

    def get(self, field: Field | str, /) -> Any:
        """Read a field by its :class:`Field` or name.

        >>> m = Moment(2024, 5, 17, tz="Europe/Paris")
        >>> m.get(Field.QUARTER)
        2
        >>> m.get("dayOfWeek")
        <Weekday.FRIDAY: 5>
        >>> m.get("nonsense")
        Traceback (most recent call last):
          ...
        chronos.UnknownField: Unknown getter 'nonsense'
        """
        if not isinstance(field, Field):
            try:
                field = _FIELD_LOOKUP[field]
            except (KeyError, TypeError):
                raise UnknownField(f"Unknown getter {field!r}") from None
        return getattr(self, field.value)

    @staticmethod
    def has(field: Field | str, /) -> bool:
        """Whether :meth:`get` recognizes the given field"""
        try:
            return isinstance(field, Field) or field in _FIELD_LOOKUP
        except TypeError:
            return False

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def with_year(self, value: int, /) -> Moment:
        return self.set_date(value, self.month, self.day)

    def with_month(self, value: int, /) -> Moment:
        return self.set_date(self.year, value, self.day)

    def with_day(self, value: int, /) -> Moment:
        return self.set_date(self.year, self.month, value)

    def with_hour(self, value: int, /) -> Moment:
        return self.set_time(value, self.minute, self.second)

    def with_minute(self, value: int, /) -> Moment:
        return self.set_time(self.hour, value, self.second)

    def with_second(self, value: int, /) -> Moment:
        return self.set_time(self.hour, self.minute, value)

    def set_date(self, year: int, month: int, day: int) -> Moment:
        """Set the date, keeping the time of day.

        Values out of range roll over, e.g. February 30th becomes
        March 1st or 2nd and month 13 becomes January of the next year.
        """
        return self._with_date(_math.rollover_date(year, month, day))

    def set_time(self, hour: int, minute: int, second: int = 0) -> Moment:
        """Set the time of day, keeping the date and the microseconds.
        Values out of range roll over into the neighbouring days."""
        return self._with_wall(
            _math.rollover_time(
                self._py_dt.date(),
                hour,
                minute,
                second,
                self._py_dt.microsecond,
            )
        )

    def set_date_time(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int = 0,
    ) -> Moment:
        return self.set_date(year, month, day).set_time(hour, minute, second)

    def with_timestamp(self, ts: float, /) -> Moment:
        """The moment at the given UNIX timestamp, in the same timezone"""
        return self._from_py_unchecked(
            _fromtimestamp(ts, self._py_dt.tzinfo)
        )

    def with_timezone(self, tz: TzLike, /) -> Moment:
        """The same moment, expressed in another timezone"""
        return self._from_py_unchecked(
            self._py_dt.astimezone(resolve_tz(tz))
        )

    in_timezone = with_timezone

    def replace(self, **kwargs: Any) -> Moment:
        """Construct a new instance with the given fields replaced.

        Unlike the ``with_*`` setters, values must be in range.
        Passing ``tz`` reinterprets the wall time in another timezone.
        """
        if not _no_tzinfo_or_fold(kwargs):
            raise TypeError("tzinfo and fold are not allowed arguments")
        prev_offset = self._py_dt.utcoffset()
        if "tz" in kwargs:
            kwargs["tzinfo"] = zone = resolve_tz(kwargs.pop("tz"))
            if zone is not self._py_dt.tzinfo:
                prev_offset = None
        return self._from_py_unchecked(
            resolve_wall_time(self._py_dt.replace(**kwargs), prev_offset)
        )

    # ------------------------------------------------------------------
    # Additions and subtractions
    # ------------------------------------------------------------------

    def add_years(self, value: int) -> Moment:
        """Add years, keeping the month and day. A February 29th
        rolls over to March 1st in non-leap years."""
        return self.set_date(self.year + value, self.month, self.day)

    def add_year(self, value: int = 1) -> Moment:
        return self.add_years(value)

    def sub_years(self, value: int) -> Moment:
        return self.add_years(-value)

    def sub_year(self, value: int = 1) -> Moment:
        return self.sub_years(value)

    def add_months(self, value: int) -> Moment:
        """Add months, keeping the day of the month. If the target month
        is too short, the excess days roll over into the following month.

        >>> Moment(2015, 1, 31).add_months(1)
        Moment(2015-03-03 00:00:00+00:00[UTC])
        """
        return self.set_date(self.year, self.month + value, self.day)

    def add_month(self, value: int = 1) -> Moment:
        return self.add_months(value)

    def sub_months(self, value: int) -> Moment:
        return self.add_months(-value)

    def sub_month(self, value: int = 1) -> Moment:
        return self.sub_months(value)

    def add_months_no_overflow(self, value: int) -> Moment:
        """Add months, snapping to the end of the target month
        instead of rolling over into the next one. A snapped result
        is at 23:59:59, like :meth:`end_of_month`.

        >>> Moment(2015, 1, 31, 10, 30).add_months_no_overflow(1)
        Moment(2015-02-28 23:59:59+00:00[UTC])
        >>> Moment(2015, 1, 30, 10, 30).add_months_no_overflow(2)
        Moment(2015-03-30 10:30:00+00:00[UTC])
        """
        moved = self.add_months(value)
        if moved.day == self.day:
            return moved
        return moved.with_day(1).sub_month().end_of_month()

    def add_month_no_overflow(self, value: int = 1) -> Moment:
        return self.add_months_no_overflow(value)

    def sub_months_no_overflow(self, value: int) -> Moment:
        return self.add_months_no_overflow(-value)

    def sub_month_no_overflow(self, value: int = 1) -> Moment:
        return self.sub_months_no_overflow(value)

    def add_weeks(self, value: int) -> Moment:
        return self.add_days(value * DAYS_PER_WEEK)

    def add_week(self, value: int = 1) -> Moment:
        return self.add_weeks(value)

    def sub_weeks(self, value: int) -> Moment:
        return self.add_weeks(-value)

    def sub_week(self, value: int = 1) -> Moment:
        return self.sub_weeks(value)

    def add_days(self, value: int) -> Moment:
        """Add calendar days, keeping the wall-clock time of day"""
        return self._with_date(self._py_dt.date() + _timedelta(days=value))

    def add_day(self, value: int = 1) -> Moment:
        return self.add_days(value)

    def sub_days(self, value: int) -> Moment:
        return self.add_days(-value)

    def sub_day(self, value: int = 1) -> Moment:
        return self.sub_days(value)

    def add_weekdays(self, value: int) -> Moment:
        """Add days from Monday to Friday, skipping weekends.

        A start on a weekend counts from the neighbouring weekday in the
        direction of travel, so Saturday plus one weekday is Monday.
        """
        return self._with_date(_math.add_weekdays(self._py_dt.date(), value))

    def add_weekday(self, value: int = 1) -> Moment:
        return self.add_weekdays(value)

    def sub_weekdays(self, value: int) -> Moment:
        return self.add_weekdays(-value)

    def sub_weekday(self, value: int = 1) -> Moment:
        return self.sub_weekdays(value)

    def add_hours(self, value: int) -> Moment:
        """Add exact hours, regardless of DST transitions"""
        return self._shift_exact(_timedelta(hours=value))

    def add_hour(self, value: int = 1) -> Moment:
        return self.add_hours(value)

    def sub_hours(self, value: int) -> Moment:
        return self.add_hours(-value)

    def sub_hour(self, value: int = 1) -> Moment:
        return self.sub_hours(value)

    def add_minutes(self, value: int) -> Moment:
        return self._shift_exact(_timedelta(minutes=value))

    def add_minute(self, value: int = 1) -> Moment:
        return self.add_minutes(value)

    def sub_minutes(self, value: int) -> Moment:
        return self.add_minutes(-value)

    def sub_minute(self, value: int = 1) -> Moment:
        return self.sub_minutes(value)

    def add_seconds(self, value: int) -> Moment:
        return self._shift_exact(_timedelta(seconds=value))

    def add_second(self, value: int = 1) -> Moment:
        return self.add_seconds(value)

    def sub_seconds(self, value: int) -> Moment:
        return self.add_seconds(-value)

    def sub_second(self, value: int = 1) -> Moment:
        return self.sub_seconds(value)

    def add(self, interval: Interval, /) -> Moment:
        """Add an interval. Years, months, and days are applied to the
        wall-clock date (rolling over like :meth:`add_months`), after which
        hours, minutes, and seconds are added as exact time.

        >>> Moment(2020, 8, 15).add(Interval(months=1, days=2, hours=3))
        Moment(2020-09-17 03:00:00+00:00[UTC])
        """
        if not isinstance(interval, Interval):
            raise TypeError(f"Can only add an Interval, got {interval!r}")
        years, months, days, hours, minutes, seconds = (
            interval._signed_fields()
        )
        moved = self
        if years or months or days:
            moved = moved.set_date(
                self.year + years, self.month + months, self.day + days
            )
        if hours or minutes or seconds:
            moved = moved._shift_exact(
                _timedelta(hours=hours, minutes=minutes, seconds=seconds)
            )
        return moved

    def sub(self, interval: Interval, /) -> Moment:
        if not isinstance(interval, Interval):
            raise TypeError(f"Can only subtract an Interval, got {interval!r}")
        return self.add(-interval)

    def __add__(self, interval: Interval) -> Moment:
        if not isinstance(interval, Interval):
            return NotImplemented
        return self.add(interval)

    def __sub__(self, other: Interval | Moment) -> Any:
        """Subtract an interval, or get the :meth:`diff` from another moment

        >>> Moment(2024, 3, 1) - Moment(2024, 1, 31)
        Interval(P1M1D)
        """
        if isinstance(other, Interval):
            return self.add(-other)
        elif isinstance(other, Moment):
            return other.diff(self)
        return NotImplemented

    # ------------------------------------------------------------------
    # Boundaries
    # ------------------------------------------------------------------

    def start_of_day(self) -> Moment:
        """Midnight of the same day. Microseconds are left as they are."""
        return self.set_time(0, 0, 0)

    def end_of_day(self) -> Moment:
        """23:59:59 of the same day. Microseconds are left as they are."""
        return self.set_time(23, 59, 59)

    def start_of_month(self) -> Moment:
        return self.start_of_day().with_day(1)

    def end_of_month(self) -> Moment:
        return self.with_day(self.days_in_month).end_of_day()

    def start_of_year(self) -> Moment:
        return self.with_month(1).start_of_month()

    def end_of_year(self) -> Moment:
        return self.with_month(MONTHS_PER_YEAR).end_of_month()

    def start_of_decade(self) -> Moment:
        return self.start_of_year().with_year(
            self.year - self.year % YEARS_PER_DECADE
        )

    def end_of_decade(self) -> Moment:
        return self.end_of_year().with_year(
            self.year - self.year % YEARS_PER_DECADE + YEARS_PER_DECADE - 1
        )

    def start_of_century(self) -> Moment:
        return self.start_of_year().with_year(
            self.year - self.year % YEARS_PER_CENTURY
        )

    def end_of_century(self) -> Moment:
        return self.end_of_year().with_year(
            self.year - self.year % YEARS_PER_CENTURY + YEARS_PER_CENTURY - 1
        )

    def start_of_week(self) -> Moment:
        """The start of the week, according to :func:`get_week_starts_at`"""
        week_start = _config.current().week_starts_at
        moment = self
        if moment.day_of_week != week_start:
            moment = moment.previous(week_start)
        return moment.start_of_day()

    def end_of_week(self) -> Moment:
        """The end of the week, according to :func:`get_week_ends_at`"""
        week_end = _config.current().week_ends_at
        moment = self
        if moment.day_of_week != week_end:
            moment = moment.next(week_end)
        return moment.end_of_day()

    def next(self, day_of_week: int | None = None) -> Moment:
        """The start of the next given day of the week (by default, the
        current one). Never returns the same day.

        >>> Moment(2024, 5, 17, 15).next(MONDAY)
        Moment(2024-05-20 00:00:00+00:00[UTC])
        """
        dow = self.day_of_week if day_of_week is None else day_of_week
        start = self.start_of_day()
        return start._with_date(
            _math.next_weekday(self._py_dt.date(), as_weekday(dow))
        )

    def previous(self, day_of_week: int | None = None) -> Moment:
        """The start of the previous given day of the week (by default, the
        current one). Never returns the same day."""
        dow = self.day_of_week if day_of_week is None else day_of_week
        start = self.start_of_day()
        return start._with_date(
            _math.previous_weekday(self._py_dt.date(), as_weekday(dow))
        )

    def first_of_month(self, day_of_week: int | None = None) -> Moment:
        """The start of the first day of the month, or of the first
        occurrence of the given day of the week in this month."""
        start = self.start_of_day()
        if day_of_week is None:
            return start.with_day(1)
        return start._with_date(
            _math.first_weekday_of_month(
                self.year, self.month, as_weekday(day_of_week)
            )
        )

    def last_of_month(self, day_of_week: int | None = None) -> Moment:
        """The start of the last day of the month, or of the last
        occurrence of the given day of the week in this month."""
        start = self.start_of_day()
        if day_of_week is None:
            return start.with_day(self.days_in_month)
        return start._with_date(
            _math.last_weekday_of_month(
                self.year, self.month, as_weekday(day_of_week)
            )
        )

    def nth_of_month(self, nth: int, day_of_week: int) -> Moment | None:
        """The start of the ``nth`` occurrence of a day of the week
        in this month, or ``None`` if the month doesn't have that many.

        >>> Moment(2024, 5, 17).nth_of_month(3, FRIDAY)
        Moment(2024-05-17 00:00:00+00:00[UTC])
        >>> Moment(2024, 5, 17).nth_of_month(5, FRIDAY) is None
        True
        """
        start = self.first_of_month()
        target = _nth_weekday(start.date(), nth, as_weekday(day_of_week))
        if target is None or (target.year, target.month) != (
            start.year,
            start.month,
        ):
            return None
        return start._with_date(target)

    def first_of_quarter(self, day_of_week: int | None = None) -> Moment:
        return (
            self.with_day(1)
            .with_month(self.quarter * 3 - 2)
            .first_of_month(day_of_week)
        )

    def last_of_quarter(self, day_of_week: int | None = None) -> Moment:
        return (
            self.with_day(1)
            .with_month(self.quarter * 3)
            .last_of_month(day_of_week)
        )

    def nth_of_quarter(self, nth: int, day_of_week: int) -> Moment | None:
        """Like :meth:`nth_of_month`, counting from the start of the quarter"""
        start = self.first_of_quarter()
        target = _nth_weekday(start.date(), nth, as_weekday(day_of_week))
        if (
            target is None
            or target.year != start.year
            or (target.month + 2) // 3 != self.quarter
        ):
            return None
        return start._with_date(target)

    def first_of_year(self, day_of_week: int | None = None) -> Moment:
        return self.with_month(1).first_of_month(day_of_week)

    def last_of_year(self, day_of_week: int | None = None) -> Moment:
        return self.with_month(MONTHS_PER_YEAR).last_of_month(day_of_week)

    def nth_of_year(self, nth: int, day_of_week: int) -> Moment | None:
        """Like :meth:`nth_of_month`, counting from the start of the year"""
        start = self.first_of_year()
        target = _nth_weekday(start.date(), nth, as_weekday(day_of_week))
        if target is None or target.year != start.year:
            return None
        return start._with_date(target)

    # ------------------------------------------------------------------
    # Differences
    # ------------------------------------------------------------------

    def diff(
        self, other: Moment | None = None, /, absolute: bool = False
    ) -> Interval:
        """The calendar difference from this moment to another (default: now).

        The result is inverted if ``other`` lies before this moment,
        unless ``absolute`` is set. Both moments are compared on the
        wall clock of this moment's timezone.

        >>> Moment(2024, 1, 31).diff(Moment(2024, 3, 1, 12))
        Interval(P1M1DT12H)
        """
        other = self._or_now(other)
        fields, inverted = _math.calendar_diff(
            self._py_dt.replace(tzinfo=None),
            other._py_dt.astimezone(self._py_dt.tzinfo).replace(tzinfo=None),
        )
        return Interval._from_diff(fields, inverted and not absolute)

    def diff_in_years(
        self, other: Moment | None = None, /, absolute: bool = True
    ) -> int:
        diff = self.diff(other, absolute)
        return -diff.years if diff.invert else diff.years

    def diff_in_months(
        self, other: Moment | None = None, /, absolute: bool = True
    ) -> int:
        diff = self.diff(other, absolute)
        months = diff.years * MONTHS_PER_YEAR + diff.months
        return -months if diff.invert else months

    def diff_in_weeks(
        self, other: Moment | None = None, /, absolute: bool = True
    ) -> int:
        return _div_trunc(self.diff_in_days(other, absolute), DAYS_PER_WEEK)

    def diff_in_days(
        self, other: Moment | None = None, /, absolute: bool = True
    ) -> int:
        diff = self.diff(other, absolute)
        return -diff.total_days if diff.invert else diff.total_days

    def diff_in_hours(
        self, other: Moment | None = None, /, absolute: bool = True
    ) -> int:
        return _div_trunc(self.diff_in_seconds(other, absolute), SECS_PER_HOUR)

    def diff_in_minutes(
        self, other: Moment | None = None, /, absolute: bool = True
    ) -> int:
        return _div_trunc(
            self.diff_in_seconds(other, absolute), SECS_PER_MINUTE
        )

    def diff_in_seconds(
        self, other: Moment | None = None, /, absolute: bool = True
    ) -> int:
        value = self._or_now(other).timestamp - self.timestamp
        return abs(value) if absolute else value

    def diff_filtered(
        self,
        interval: Interval,
        predicate: Callable[[Moment], bool],
        other: Moment | None = None,
        /,
        absolute: bool = True,
    ) -> int:
        """Count the steps of ``interval`` between two moments for which
        ``predicate`` holds.

        Stepping starts at the earlier moment (included) and stops before
        the later one. If ``other`` lies before this moment the count is
        negative, unless ``absolute`` is set.

        >>> Moment(2024, 5, 1).diff_filtered(
        ...     Interval.day(), Moment.is_weekend, Moment(2024, 6, 1)
        ... )
        8
        """
        start, end = self, self._or_now(other)
        inverse = end < start
        if inverse:
            start, end = end, start
        count = sum(1 for m in _walk(start, interval, end) if predicate(m))
        return -count if inverse and not absolute else count

    def diff_in_days_filtered(
        self,
        predicate: Callable[[Moment], bool],
        other: Moment | None = None,
        /,
        absolute: bool = True,
    ) -> int:
        return self.diff_filtered(Interval.day(), predicate, other, absolute)

    def diff_in_hours_filtered(
        self,
        predicate: Callable[[Moment], bool],
        other: Moment | None = None,
        /,
        absolute: bool = True,
    ) -> int:
        return self.diff_filtered(Interval.hour(), predicate, other, absolute)

    def diff_in_weekdays(
        self, other: Moment | None = None, /, absolute: bool = True
    ) -> int:
        return self.diff_in_days_filtered(Moment.is_weekday, other, absolute)

    def diff_in_weekend_days(
        self, other: Moment | None = None, /, absolute: bool = True
    ) -> int:
        return self.diff_in_days_filtered(Moment.is_weekend, other, absolute)

    def seconds_since_midnight(self) -> int:
        return self.diff_in_seconds(self.start_of_day())

    def seconds_until_end_of_day(self) -> int:
        return self.diff_in_seconds(self.end_of_day())

    def average(self, other: Moment | None = None, /) -> Moment:
        """The moment halfway between this one and another (default: now)"""
        return self.add_seconds(
            _div_trunc(self.diff_in_seconds(other, absolute=False), 2)
        )

    # ------------------------------------------------------------------
    # Comparisons
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Check if two moments represent the same point in time,
        regardless of their timezones.

        >>> Moment(2020, 8, 15, 23, tz="+02:00") == Moment(2020, 8, 15, 21)
        True
        """
        if not isinstance(other, Moment):
            return NotImplemented
        # Plain equality ignores the fold between datetimes sharing a tzinfo
        # (peps.python.org/pep-0495/#aware-datetime-equality-comparison),
        # so we normalize to UTC.
        return self._py_dt.astimezone(_UTC) == other._py_dt.astimezone(_UTC)

    def __lt__(self, other: Moment) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._py_dt.astimezone(_UTC) < other._py_dt.astimezone(_UTC)

    def __le__(self, other: Moment) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._py_dt.astimezone(_UTC) <= other._py_dt.astimezone(_UTC)

    def __gt__(self, other: Moment) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._py_dt.astimezone(_UTC) > other._py_dt.astimezone(_UTC)

    def __ge__(self, other: Moment) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._py_dt.astimezone(_UTC) >= other._py_dt.astimezone(_UTC)

    def __hash__(self) -> int:
        return hash(self._py_dt.astimezone(_UTC))

    def exact_eq(self, other: Moment, /) -> bool:
        """Equal in time *and* in timezone and offset"""
        other = _check_moment(other)
        return (
            self == other
            and self._py_dt.tzinfo is other._py_dt.tzinfo
            and self._py_dt.utcoffset() == other._py_dt.utcoffset()
        )

    def eq(self, other: Moment, /) -> bool:
        return self == _check_moment(other)

    def ne(self, other: Moment, /) -> bool:
        return not self.eq(other)

    def gt(self, other: Moment, /) -> bool:
        return self > _check_moment(other)

    def gte(self, other: Moment, /) -> bool:
        return self >= _check_moment(other)

    def lt(self, other: Moment, /) -> bool:
        return self < _check_moment(other)

    def lte(self, other: Moment, /) -> bool:
        return self <= _check_moment(other)

    def between(self, a: Moment, b: Moment, /, equal: bool = True) -> bool:
        """Whether this moment lies between two others, in either order.
        The bounds are included unless ``equal`` is false."""
        if _check_moment(a) > _check_moment(b):
            a, b = b, a
        if equal:
            return a <= self <= b
        return a < self < b

    def min(self, other: Moment | None = None, /) -> Moment:
        """The earlier of this moment and another (default: now)"""
        other = self._or_now(other)
        return self if self < other else other

    def max(self, other: Moment | None = None, /) -> Moment:
        """The later of this moment and another (default: now)"""
        other = self._or_now(other)
        return self if self > other else other

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_weekday(self) -> bool:
        return not self.is_weekend()

    def is_weekend(self) -> bool:
        """Whether this day is one of the :func:`get_weekend_days`"""
        return self.day_of_week in _config.current().weekend_days

    def is_yesterday(self) -> bool:
        return self.date() == Moment.yesterday(self._py_dt.tzinfo).date()

    def is_today(self) -> bool:
        return self.date() == Moment.now(self._py_dt.tzinfo).date()

    def is_tomorrow(self) -> bool:
        return self.date() == Moment.tomorrow(self._py_dt.tzinfo).date()

    def is_future(self) -> bool:
        return self > Moment.now(self._py_dt.tzinfo)

    def is_past(self) -> bool:
        return self < Moment.now(self._py_dt.tzinfo)

    def is_leap_year(self) -> bool:
        return _math.is_leap(self._py_dt.year)

    def is_same_day(self, other: Moment, /) -> bool:
        """Whether both moments fall on the same date, each
        read in its own timezone"""
        return self.date() == _check_moment(other).date()

    def is_birthday(self, other: Moment | None = None, /) -> bool:
        """Whether both moments share the month and day (default: today)"""
        other = self._or_now(other)
        return (self.month, self.day) == (other.month, other.day)

    def is_sunday(self) -> bool:
        return self.day_of_week == SUNDAY

    def is_monday(self) -> bool:
        return self.day_of_week == MONDAY

    def is_tuesday(self) -> bool:
        return self.day_of_week == TUESDAY

    def is_wednesday(self) -> bool:
        return self.day_of_week == WEDNESDAY

    def is_thursday(self) -> bool:
        return self.day_of_week == THURSDAY

    def is_friday(self) -> bool:
        return self.day_of_week == FRIDAY

    def is_saturday(self) -> bool:
        return self.day_of_week == SATURDAY

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, fmt: str, /) -> str:
        """Format with a :meth:`~datetime.datetime.strftime` pattern"""
        return self._py_dt.strftime(fmt)

    def __str__(self) -> str:
        """Format with the pattern set by :func:`set_to_string_format`"""
        return self._py_dt.strftime(_config.current().to_string_format)

    def __repr__(self) -> str:
        return (
            f"Moment({self.to_date_string()} {self._py_dt.isoformat()[11:]}"
            f"[{self.timezone_name}])"
        )

    def _offset_str(self, sep: str) -> str:
        secs = self.offset
        sign = "-" if secs < 0 else "+"
        hrs, mins = divmod(abs(secs) // 60, 60)
        return f"{sign}{hrs:02d}{sep}{mins:02d}"

    def _day_abbr(self) -> str:
        return _DAY_NAMES[self.day_of_week][:3]

    def _month_abbr(self) -> str:
        return _MONTH_NAMES[self.month][:3]

    def to_date_string(self) -> str:
        """e.g. ``2024-05-17``"""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def to_formatted_date_string(self) -> str:
        """e.g. ``May 17, 2024``"""
        return f"{self._month_abbr()} {self.day}, {self.year:04d}"

    def to_time_string(self) -> str:
        """e.g. ``15:04:05``"""
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    def to_date_time_string(self) -> str:
        """e.g. ``2024-05-17 15:04:05``"""
        return f"{self.to_date_string()} {self.to_time_string()}"

    def to_day_date_time_string(self) -> str:
        """e.g. ``Fri, May 17, 2024 3:04 PM``"""
        hour12 = self.hour % 12 or 12
        meridiem = "AM" if self.hour < 12 else "PM"
        return (
            f"{self._day_abbr()}, {self.to_formatted_date_string()} "
            f"{hour12}:{self.minute:02d} {meridiem}"
        )

    def to_atom_string(self) -> str:
        """e.g. ``2024-05-17T15:04:05+02:00``"""
        return (
            f"{self.to_date_string()}T{self.to_time_string()}"
            f"{self._offset_str(':')}"
        )

    def to_cookie_string(self) -> str:
        """e.g. ``Friday, 17-May-2024 15:04:05 CEST``"""
        return (
            f"{_DAY_NAMES[self.day_of_week]}, {self.day:02d}-"
            f"{self._month_abbr()}-{self.year:04d} {self.to_time_string()} "
            f"{tz_abbreviation(self._py_dt)}"
        )

    def to_iso8601_string(self) -> str:
        """e.g. ``2024-05-17T15:04:05+0200``"""
        return (
            f"{self.to_date_string()}T{self.to_time_string()}"
            f"{self._offset_str('')}"
        )

    def to_rfc822_string(self) -> str:
        """e.g. ``Fri, 17 May 24 15:04:05 +0200``"""
        return (
            f"{self._day_abbr()}, {self.day:02d} {self._month_abbr()} "
            f"{self.year % 100:02d} {self.to_time_string()} "
            f"{self._offset_str('')}"
        )

    def to_rfc850_string(self) -> str:
        """e.g. ``Friday, 17-May-24 15:04:05 CEST``"""
        return (
            f"{_DAY_NAMES[self.day_of_week]}, {self.day:02d}-"
            f"{self._month_abbr()}-{self.year % 100:02d} "
            f"{self.to_time_string()} {tz_abbreviation(self._py_dt)}"
        )

    def to_rfc1036_string(self) -> str:
        """e.g. ``Fri, 17 May 24 15:04:05 +0200``"""
        return self.to_rfc822_string()

    def to_rfc1123_string(self) -> str:
        """e.g. ``Fri, 17 May 2024 15:04:05 +0200``"""
        return (
            f"{self._day_abbr()}, {self.day:02d} {self._month_abbr()} "
            f"{self.year:04d} {self.to_time_string()} {self._offset_str('')}"
        )

    def to_rfc2822_string(self) -> str:
        return self.to_rfc1123_string()

    def to_rfc3339_string(self) -> str:
        return self.to_atom_string()

    def to_rss_string(self) -> str:
        return self.to_rfc1123_string()

    def to_w3c_string(self) -> str:
        return self.to_atom_string()

    # a custom pickle implementation with a smaller payload
    def __reduce__(self) -> tuple[object, ...]:
        """Zones are pickled by their IANA key. Any other tzinfo is
        pickled as the fixed UTC offset it has at this moment: the instant
        survives, but the rules of a custom tzinfo do not."""
        tzinfo = self._py_dt.tzinfo
        return (
            _unpkl_moment,
            (
                pack(
                    "<HBBBBBIl",
                    *self._py_dt.timetuple()[:6],
                    self._py_dt.microsecond,
                    self.offset,
                ),
                tzinfo.key if isinstance(tzinfo, ZoneInfo) else None,
            ),
        )


# A separate function is needed for unpickling, because the
# constructor doesn't accept an offset to disambiguate with.
# Also, it allows backwards-compatible changes to the pickling format.
def _unpkl_moment(data: bytes, tz: str | None) -> Moment:
    *args, micros, offset_secs = unpack("<HBBBBBIl", data)
    zone = mk_fixed_tzinfo(offset_secs) if tz is None else ZoneInfo(tz)
    dt = _datetime(*args, micros, zone)
    if dt.utcoffset() != _timedelta(seconds=offset_secs):
        dt = dt.replace(fold=1)
    return Moment._from_py_unchecked(dt)


def _check_moment(obj: Any) -> Moment:
    if not isinstance(obj, Moment):
        raise TypeError(f"Expected a Moment, got {obj!r}")
    return obj


def _nth_weekday(start: _date, nth: int, dow: Weekday) -> _date | None:
    try:
        return _math.nth_weekday_from(start, nth, dow)
    except OverflowError:
        return None


def _walk(start: Moment, interval: Interval, end: Moment) -> Iterator[Moment]:
    current = start
    while current < end:
        yield current
        following = current.add(interval)
        if following <= current:
            raise ValueError(
                f"Interval {interval} doesn't move forward from {current!r}"
            )
        current = following


def _div_trunc(a: int, b: int) -> int:
    # integer division rounding toward zero, so results are symmetric
    # under swapping the operands of a difference
    q = abs(a) // b
    return -q if a < 0 else q


_no_tzinfo_or_fold = {"tzinfo", "fold"}.isdisjoint


# Use this to strip any incoming datetime classes down to instances
# of the datetime.datetime class exactly.
def _strip_subclasses(dt: _datetime) -> _datetime:
    if type(dt) is _datetime:
        return dt
    else:
        return _datetime(
            dt.year,
            dt.month,
            dt.day,
            dt.hour,
            dt.minute,
            dt.second,
            dt.microsecond,
            dt.tzinfo,
            fold=dt.fold,
        )


def years(i: int, /) -> Interval:
    """Create an :class:`~Interval` with the given number of years.
    ``years(1) == Interval(years=1)``
    """
    return Interval(years=i)


def months(i: int, /) -> Interval:
    """Create an :class:`~Interval` with the given number of months.
    ``months(1) == Interval(months=1)``
    """
    return Interval(months=i)


def weeks(i: int, /) -> Interval:
    """Create an :class:`~Interval` with the given number of weeks.
    ``weeks(1) == Interval(weeks=1)``
    """
    return Interval(weeks=i)


def days(i: int, /) -> Interval:
    """Create an :class:`~Interval` with the given number of days.
    ``days(1) == Interval(days=1)``
    """
    return Interval(days=i)


def hours(i: int, /) -> Interval:
    """Create an :class:`~Interval` with the given number of hours.
    ``hours(1) == Interval(hours=1)``
    """
    return Interval(hours=i)


def minutes(i: int, /) -> Interval:
    """Create an :class:`~Interval` with the given number of minutes.
    ``minutes(1) == Interval(minutes=1)``
    """
    return Interval(minutes=i)


def seconds(i: int, /) -> Interval:
    """Create an :class:`~Interval` with the given number of seconds.
    ``seconds(1) == Interval(seconds=1)``
    """
    return Interval(seconds=i)


# ----------------------------------------------------------------------
# Process-wide configuration
# ----------------------------------------------------------------------


def get_week_starts_at() -> Weekday:
    """The first day of the week, used by :meth:`Moment.start_of_week`"""
    return _config.current().week_starts_at


def set_week_starts_at(day: int, /) -> None:
    _config.update(week_starts_at=as_weekday(day))


def get_week_ends_at() -> Weekday:
    """The last day of the week, used by :meth:`Moment.end_of_week`"""
    return _config.current().week_ends_at


def set_week_ends_at(day: int, /) -> None:
    _config.update(week_ends_at=as_weekday(day))


def get_weekend_days() -> tuple[Weekday, ...]:
    return _config.current().weekend_days


def set_weekend_days(days: Iterable[int], /) -> None:
    """Set which days count as the weekend, e.g. ``[FRIDAY, SATURDAY]``"""
    if isinstance(days, (int, str)):
        raise TypeError("weekend days must be an iterable of days")
    _config.update(weekend_days=tuple(map(as_weekday, days)))


def get_to_string_format() -> str:
    return _config.current().to_string_format


def set_to_string_format(fmt: str, /) -> None:
    """Set the :meth:`~datetime.datetime.strftime` pattern used by ``str()``"""
    if not isinstance(fmt, str):
        raise TypeError(f"Format must be a string, got {fmt!r}")
    _config.update(to_string_format=fmt)


def reset_to_string_format() -> None:
    _config.update(to_string_format=_config.DEFAULT_TO_STRING_FORMAT)


def get_default_timezone() -> _tzinfo:
    """The timezone used wherever ``tz`` is omitted (by default, UTC)"""
    return _config.current().default_tz


def set_default_timezone(tz: str | _tzinfo | None, /) -> None:
    """Set the timezone used wherever ``tz`` is omitted.
    ``None`` restores the default of UTC."""
    _config.update(default_tz=_UTC if tz is None else resolve_tz(tz))


def set_test_now(moment: Moment | None = None, /) -> None:
    """Pin the result of :meth:`Moment.now` and the other "current time"
    constructors to the given moment, or unpin it with ``None``.

    Intended for tests. See also :func:`~chronos.patch_current_time`,
    which restores the previous state automatically.
    """
    _pin_test_now(moment, keep_ticking=False)


def get_test_now() -> Moment | None:
    """The pinned current time, if any"""
    pinned = _config.pinned_now()
    return None if pinned is None else Moment._from_py_unchecked(pinned)


def has_test_now() -> bool:
    return _config.current().test_now is not None


def reset_settings() -> None:
    """Restore every process-wide setting to its default. Call this in the
    teardown of tests that change settings."""
    _config.reset()


def _pin_test_now(moment: Moment | None, keep_ticking: bool) -> None:
    if moment is None:
        _config.update(test_now=None, test_now_ticking_since=None)
        return
    _config.update(
        test_now=_check_moment(moment)._py_dt,
        test_now_ticking_since=time_ns() if keep_ticking else None,
    )


# We expose the public members in the root of the module.
# For clarity, we remove the "_pychronos" part from the names,
# since this is an implementation detail.
for name in __all__:
    member = locals()[name]
    if getattr(member, "__module__", None) == __name__:  # pragma: no branch
        member.__module__ = "chronos"

# clear up loop variables so they don't leak into the namespace
del name
del member

_unpkl_moment.__module__ = "chronos"
_unpkl_interval.__module__ = "chronos"

# disable further subclassing
final(_ImmutableBase)
