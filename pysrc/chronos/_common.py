from __future__ import annotations

import enum
from datetime import (
    datetime as _datetime,
    timedelta as _timedelta,
    timezone as _timezone,
)
from functools import lru_cache


class Weekday(enum.IntEnum):
    """The days of the week, counting from Sunday (0) to Saturday (6)"""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


def as_weekday(value: int, /) -> Weekday:
    try:
        return Weekday(value)
    except ValueError:
        raise ValueError(f"Invalid day of the week: {value!r}") from None


UTC = _timezone.utc
SECS_PER_MINUTE = 60
SECS_PER_HOUR = 3_600
SECS_PER_DAY = 86_400
DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12
YEARS_PER_DECADE = 10
YEARS_PER_CENTURY = 100


# Fixed-offset tzinfo objects are cached to avoid duplicate instances.
# It's very common to only have whole-hour offsets, so this helps a lot.
@lru_cache
def mk_fixed_tzinfo(secs: int, /) -> _timezone:
    return _timezone(_timedelta(seconds=secs))


def check_utc_bounds(dt: _datetime) -> _datetime:
    try:
        dt.astimezone(UTC)
    except (OverflowError, ValueError):
        raise ValueError("Moment out of range")
    return dt


def resolve_wall_time(
    dt: _datetime, prev_offset: _timedelta | None
) -> _datetime:
    """Pin an aware wall-clock datetime to a real instant in its own zone.

    Ambiguous times keep ``prev_offset`` if it is one of the candidates,
    otherwise the earlier offset is used. Skipped times are moved forward
    by the length of the gap.
    """
    if prev_offset is not None:
        if prev_offset == dt.utcoffset():
            pass
        elif prev_offset == dt.replace(fold=not dt.fold).utcoffset():
            dt = dt.replace(fold=not dt.fold)
        else:
            dt = dt.replace(fold=0)
    else:
        dt = dt.replace(fold=0)
    # This roundtrip ensures skipped times are shifted
    return check_utc_bounds(dt).astimezone(UTC).astimezone(dt.tzinfo)
