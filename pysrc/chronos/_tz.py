"""Timezone lookup for the values accepted wherever a ``tz`` is expected."""

from __future__ import annotations

import re
from datetime import datetime as _datetime, tzinfo as _tzinfo
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from . import _config
from ._common import UTC, mk_fixed_tzinfo

__all__ = [
    "InvalidTimezone",
    "TzLike",
    "resolve_tz",
    "tz_name",
    "tz_abbreviation",
]

TzLike = Union[str, _tzinfo, None]

_OFFSET_RE = re.compile(r"([+-])([0-2]\d):?([0-5]\d)").fullmatch


class InvalidTimezone(ValueError):
    """A timezone identifier or object isn't recognized"""


def resolve_tz(tz: TzLike, /) -> _tzinfo:
    """Turn a timezone argument into a ``tzinfo``.

    ``None`` selects the configured default timezone. Strings are either
    IANA keys (``"Europe/Amsterdam"``) or fixed offsets (``"+02:00"``).
    """
    if tz is None:
        return _config.current().default_tz
    elif isinstance(tz, _tzinfo):
        return tz
    elif isinstance(tz, str):
        if tz == "UTC":
            return UTC
        if match := _OFFSET_RE(tz):
            sign, hrs, mins = match.groups()
            secs = int(hrs) * 3600 + int(mins) * 60
            if secs >= 86_400:
                raise InvalidTimezone(f"Unknown or bad timezone ({tz})")
            return mk_fixed_tzinfo(-secs if sign == "-" else secs)
        try:
            return ZoneInfo(tz)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            raise InvalidTimezone(f"Unknown or bad timezone ({tz})") from None
    raise InvalidTimezone(f"Unknown or bad timezone ({tz!r})")


def tz_name(tz: _tzinfo, /) -> str:
    """The identifier of a timezone: the IANA key, or the offset/name
    of fixed-offset zones"""
    if isinstance(tz, ZoneInfo):
        return tz.key
    # fixed offsets render as e.g. "UTC+02:00"; the host uses "+02:00"
    name = tz.tzname(None) or ""
    return name[3:] if name.startswith("UTC") and len(name) > 3 else name


def tz_abbreviation(dt: _datetime, /) -> str:
    """The abbreviation of a datetime's timezone (e.g. ``CEST``). Fixed
    offsets without a name render as the offset itself."""
    name = dt.tzname() or ""
    return name[3:] if name.startswith("UTC") and len(name) > 3 else name
