"""Parsing of human-friendly duration strings such as ``"1h 30m"``."""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Final

from .errors import ConfigurationError

_SECONDS_PER_DAY: Final[float] = 86_400.0

# Unit names are case sensitive: "M" is a month while "m" is a minute.
_UNIT_SECONDS: Final[dict[str, float]] = {
    "nanos": 1e-9,
    "nsec": 1e-9,
    "ns": 1e-9,
    "micros": 1e-6,
    "usec": 1e-6,
    "us": 1e-6,
    "millis": 1e-3,
    "msec": 1e-3,
    "ms": 1e-3,
    "seconds": 1.0,
    "second": 1.0,
    "secs": 1.0,
    "sec": 1.0,
    "s": 1.0,
    "minutes": 60.0,
    "minute": 60.0,
    "mins": 60.0,
    "min": 60.0,
    "m": 60.0,
    "hours": 3_600.0,
    "hour": 3_600.0,
    "hrs": 3_600.0,
    "hr": 3_600.0,
    "h": 3_600.0,
    "days": _SECONDS_PER_DAY,
    "day": _SECONDS_PER_DAY,
    "d": _SECONDS_PER_DAY,
    "weeks": 7 * _SECONDS_PER_DAY,
    "week": 7 * _SECONDS_PER_DAY,
    "w": 7 * _SECONDS_PER_DAY,
    "months": 30.44 * _SECONDS_PER_DAY,
    "month": 30.44 * _SECONDS_PER_DAY,
    "M": 30.44 * _SECONDS_PER_DAY,
    "years": 365.25 * _SECONDS_PER_DAY,
    "year": 365.25 * _SECONDS_PER_DAY,
    "y": 365.25 * _SECONDS_PER_DAY,
}

_TOKEN = re.compile(r"\s*(\d+)\s*([A-Za-z]+)\s*")


def parse_duration(value: str) -> timedelta:
    """Parse a duration made of ``<number><unit>`` tokens, e.g. ``"2h 15m"``.

    Raises :class:`ConfigurationError` when the string is empty, contains an
    unknown unit or has trailing garbage.
    """

    text = value.strip()
    if not text:
        raise ConfigurationError("Duration must not be empty")

    total_seconds = 0.0
    position = 0
    while position < len(text):
        match = _TOKEN.match(text, position)
        if match is None:
            raise ConfigurationError(f"Invalid duration {value!r}")
        amount, unit = match.groups()
        factor = _UNIT_SECONDS.get(unit)
        if factor is None:
            raise ConfigurationError(f"Unknown duration unit {unit!r} in {value!r}")
        total_seconds += int(amount) * factor
        position = match.end()

    return timedelta(seconds=total_seconds)
