import logging
from datetime import timezone as py_timezone
from zoneinfo import ZoneInfo

import pytest

from chronos import (
    FRIDAY,
    MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    InvalidTimezone,
    Moment,
    Weekday,
    get_default_timezone,
    get_test_now,
    get_to_string_format,
    get_week_ends_at,
    get_week_starts_at,
    get_weekend_days,
    has_test_now,
    reset_settings,
    reset_to_string_format,
    set_default_timezone,
    set_test_now,
    set_to_string_format,
    set_week_ends_at,
    set_week_starts_at,
    set_weekend_days,
)


def test_defaults():
    assert get_week_starts_at() is MONDAY
    assert get_week_ends_at() is SUNDAY
    assert get_weekend_days() == (SATURDAY, SUNDAY)
    assert get_to_string_format() == "%Y-%m-%d %H:%M:%S"
    assert get_default_timezone() is py_timezone.utc
    assert not has_test_now()
    assert get_test_now() is None


class TestWeek:
    def test_set(self):
        set_week_starts_at(SUNDAY)
        set_week_ends_at(SATURDAY)
        assert get_week_starts_at() is SUNDAY
        assert get_week_ends_at() is SATURDAY

    def test_plain_ints(self):
        set_week_starts_at(4)
        assert get_week_starts_at() is THURSDAY
        assert isinstance(get_week_starts_at(), Weekday)

    @pytest.mark.parametrize("value", [7, -1])
    def test_invalid(self, value):
        with pytest.raises(ValueError, match="day of the week"):
            set_week_starts_at(value)
        with pytest.raises(ValueError, match="day of the week"):
            set_week_ends_at(value)
        assert get_week_starts_at() is MONDAY

    def test_weekend_days(self):
        set_weekend_days([FRIDAY, SATURDAY])
        assert get_weekend_days() == (FRIDAY, SATURDAY)
        set_weekend_days([])
        assert get_weekend_days() == ()
        assert Moment(2024, 5, 18).is_weekday()

    def test_weekend_days_invalid(self):
        with pytest.raises(TypeError):
            set_weekend_days(5)  # type: ignore[arg-type]
        with pytest.raises(ValueError):
            set_weekend_days([SATURDAY, 9])
        assert get_weekend_days() == (SATURDAY, SUNDAY)


class TestToStringFormat:
    def test_set_and_reset(self):
        set_to_string_format("%H:%M")
        assert get_to_string_format() == "%H:%M"
        assert str(Moment(2024, 5, 17, 15, 4)) == "15:04"
        reset_to_string_format()
        assert str(Moment(2024, 5, 17, 15, 4)) == "2024-05-17 15:04:00"

    def test_invalid(self):
        with pytest.raises(TypeError):
            set_to_string_format(None)  # type: ignore[arg-type]


class TestDefaultTimezone:
    def test_set(self):
        set_default_timezone("Europe/Amsterdam")
        assert get_default_timezone() == ZoneInfo("Europe/Amsterdam")
        assert Moment(2024, 5, 17).offset == 7200
        assert Moment.now().timezone_name == "Europe/Amsterdam"

    def test_reset_with_none(self):
        set_default_timezone("Asia/Tokyo")
        set_default_timezone(None)
        assert get_default_timezone() is py_timezone.utc

    def test_invalid(self):
        with pytest.raises(InvalidTimezone):
            set_default_timezone("Not/AZone")
        assert get_default_timezone() is py_timezone.utc


class TestTestNow:
    def test_set_and_clear(self):
        m = Moment(2024, 5, 17, 15, tz="Europe/Paris")
        set_test_now(m)
        assert has_test_now()
        assert get_test_now().exact_eq(m)  # type: ignore[union-attr]
        assert Moment.now("Europe/Paris").exact_eq(m)
        set_test_now(None)
        assert not has_test_now()
        assert Moment.now() != m

    def test_rejects_non_moments(self):
        with pytest.raises(TypeError):
            set_test_now("2024-05-17")  # type: ignore[arg-type]


def test_reset_settings():
    set_week_starts_at(SUNDAY)
    set_weekend_days([FRIDAY])
    set_to_string_format("%Y")
    set_default_timezone("Asia/Tokyo")
    set_test_now(Moment(2000, 1, 1))
    reset_settings()
    test_defaults()


def test_changes_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="chronos")
    set_week_starts_at(SUNDAY)
    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["Updated settings: week_starts_at"]
    assert all(r.name.startswith("chronos") for r in caplog.records)


def test_pinning_is_logged_once(caplog):
    caplog.set_level(logging.DEBUG, logger="chronos")
    set_test_now(Moment(2000, 1, 1))
    set_test_now(None)
    assert [r.getMessage() for r in caplog.records] == [
        "Updated settings: test_now, test_now_ticking_since",
        "Updated settings: test_now, test_now_ticking_since",
    ]


def test_library_is_silent_by_default():
    logger = logging.getLogger("chronos")
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
