"""Process-wide settings shared by all moments.

The settings are kept in a single frozen snapshot. Readers take the current
snapshot without locking; writers swap in a new snapshot under a lock, so
concurrent readers never observe a half-applied change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import (
    datetime as _datetime,
    timedelta as _timedelta,
    tzinfo as _tzinfo,
)
from threading import Lock
from time import time_ns
from typing import Any

from ._common import UTC, Weekday

__all__ = [
    "DEFAULT_TO_STRING_FORMAT",
    "Settings",
    "current",
    "update",
    "reset",
    "pinned_now",
]

logger = logging.getLogger(__name__)

DEFAULT_TO_STRING_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Settings:
    week_starts_at: Weekday = Weekday.MONDAY
    week_ends_at: Weekday = Weekday.SUNDAY
    weekend_days: tuple[Weekday, ...] = (Weekday.SATURDAY, Weekday.SUNDAY)
    to_string_format: str = DEFAULT_TO_STRING_FORMAT
    default_tz: _tzinfo = UTC
    # The pinned "current" time, and (if it keeps ticking) the
    # value of the real clock at the moment it was pinned.
    test_now: _datetime | None = None
    test_now_ticking_since: int | None = None


_DEFAULTS = Settings()
_settings = _DEFAULTS
_settings_lock = Lock()


def current() -> Settings:
    return _settings


def update(**changes: Any) -> Settings:
    global _settings
    with _settings_lock:
        _settings = new = replace(_settings, **changes)
    logger.debug("Updated settings: %s", ", ".join(sorted(changes)))
    return new


def reset() -> None:
    global _settings
    with _settings_lock:
        _settings = _DEFAULTS
    logger.debug("Reset all settings to their defaults")


def pinned_now() -> _datetime | None:
    """The overridden current time, if any"""
    settings = _settings
    pinned = settings.test_now
    if pinned is None or settings.test_now_ticking_since is None:
        return pinned
    elapsed_us = (time_ns() - settings.test_now_ticking_since) // 1_000
    return (
        pinned.astimezone(UTC) + _timedelta(microseconds=elapsed_us)
    ).astimezone(pinned.tzinfo)
