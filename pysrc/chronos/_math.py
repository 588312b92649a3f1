"""Date, calendar, and time arithmetic helpers."""

from datetime import (
    date as _date,
    datetime as _datetime,
    time as _time,
    timedelta as _timedelta,
)

from ._common import DAYS_PER_WEEK, MONTHS_PER_YEAR

# Fields of a calendar-aware difference:
# years, months, days, hours, minutes, seconds, microseconds, total days
CalendarDiff = tuple[int, int, int, int, int, int, int, int]


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


# 1-indexed days per month
_MONTHDAYS = [0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def days_in_month(year: int, month: int) -> int:
    return _MONTHDAYS[month] + (month == 2 and is_leap(year))


def day_of_week(d: _date) -> int:
    """Day of the week, 0 (Sunday) through 6 (Saturday)"""
    return d.isoweekday() % DAYS_PER_WEEK


def rollover_date(year: int, month: int, day: int) -> _date:
    """Build a date, carrying out-of-range months into years and
    out-of-range days into the neighbouring months.

    >>> rollover_date(2015, 2, 31)
    datetime.date(2015, 3, 3)
    >>> rollover_date(2015, 13, 0)
    datetime.date(2015, 12, 31)
    """
    year_delta, month0 = divmod(month - 1, MONTHS_PER_YEAR)
    return _date(year + year_delta, month0 + 1, 1) + _timedelta(day - 1)


def rollover_time(
    d: _date, hour: int, minute: int, second: int, microsecond: int = 0
) -> _datetime:
    """Naive datetime from a date and time components which may overflow
    into neighbouring days."""
    return _datetime.combine(d, _time()) + _timedelta(
        hours=hour, minutes=minute, seconds=second, microseconds=microsecond
    )


def add_months_clamped(d: _date, months: int) -> _date:
    year_delta, month0_new = divmod(d.month - 1 + months, MONTHS_PER_YEAR)
    year_new = d.year + year_delta
    month_new = month0_new + 1
    try:
        return d.replace(year=year_new, month=month_new)
    except ValueError:
        # only happens when we move to a month with fewer days
        return d.replace(
            year=year_new,
            month=month_new,
            day=days_in_month(year_new, month_new),
        )


def add_weekdays(d: _date, n: int) -> _date:
    """Move ``n`` business days (Monday-Friday), skipping weekends.

    A start on a weekend counts from the adjacent weekday in the
    direction of travel: Saturday + 1 is Monday, Sunday - 1 is Friday.
    """
    if n == 0:
        return d
    sign = 1 if n > 0 else -1
    isodow = d.isoweekday()
    if isodow > 5:
        # snap to Friday (forwards) or Monday (backwards)
        d += _timedelta(5 - isodow if sign > 0 else 8 - isodow)
    weeks, rest = divmod(abs(n), 5)
    d += _timedelta(sign * weeks * DAYS_PER_WEEK)
    for _ in range(rest):
        d += _timedelta(sign)
        while d.isoweekday() > 5:
            d += _timedelta(sign)
    return d


def next_weekday(d: _date, dow: int) -> _date:
    """The nearest date strictly after ``d`` falling on ``dow``"""
    return d + _timedelta((dow - day_of_week(d) - 1) % DAYS_PER_WEEK + 1)


def previous_weekday(d: _date, dow: int) -> _date:
    """The nearest date strictly before ``d`` falling on ``dow``"""
    return d - _timedelta((day_of_week(d) - dow - 1) % DAYS_PER_WEEK + 1)


def nth_weekday_from(d: _date, nth: int, dow: int) -> _date:
    """The ``nth`` date falling on ``dow``, counting from ``d`` inclusive.

    The first occurrence on or after ``d`` is number 1.
    """
    first = d + _timedelta((dow - day_of_week(d)) % DAYS_PER_WEEK)
    return first + _timedelta((nth - 1) * DAYS_PER_WEEK)


def first_weekday_of_month(year: int, month: int, dow: int) -> _date:
    return nth_weekday_from(_date(year, month, 1), 1, dow)


def last_weekday_of_month(year: int, month: int, dow: int) -> _date:
    last = _date(year, month, days_in_month(year, month))
    return last - _timedelta((day_of_week(last) - dow) % DAYS_PER_WEEK)


def calendar_diff(a: _datetime, b: _datetime) -> tuple[CalendarDiff, bool]:
    """Difference between two wall-clock datetimes, broken down
    into calendar fields. Returns the fields and whether ``b`` lies
    before ``a`` (the fields themselves are always non-negative).

    Months are counted first. The earlier datetime moved by a number of
    months is clamped to the last day of a shorter month, and a month
    counts once the later datetime reaches that anchor. So Feb 29 to the
    next Feb 28 is one year, and Jan 31 to Mar 1 is one month and one day.
    """
    assert a.tzinfo is None and b.tzinfo is None
    inverted = b < a
    if inverted:
        a, b = b, a

    months = (b.year - a.year) * MONTHS_PER_YEAR + b.month - a.month
    anchor = _datetime.combine(add_months_clamped(a.date(), months), a.time())
    if anchor > b:
        months -= 1
        anchor = _datetime.combine(
            add_months_clamped(a.date(), months), a.time()
        )
    rest = b - anchor
    secs = rest.seconds
    total = b - a
    return (
        (
            months // MONTHS_PER_YEAR,
            months % MONTHS_PER_YEAR,
            rest.days,
            secs // 3600,
            secs % 3600 // 60,
            secs % 60,
            rest.microseconds,
            total.days,
        ),
        inverted,
    )
