"""
Duration string handling for configuration values.

Refresh intervals are written in configuration files as compact duration
strings such as ``"1h"``, ``"90m"`` or ``"1h30m"``. This module converts
between those strings and ``datetime.timedelta``.
"""

import logging
import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..exceptions.config_exceptions import InvalidDurationError


logger = logging.getLogger(__name__)

# Unit sizes expressed in microseconds, the resolution of timedelta
UNIT_MICROSECONDS = {
    "ns": Decimal("0.001"),
    "us": Decimal(1),
    "µs": Decimal(1),  # U+00B5 micro sign
    "μs": Decimal(1),  # U+03BC greek mu
    "ms": Decimal(1_000),
    "s": Decimal(1_000_000),
    "m": Decimal(60_000_000),
    "h": Decimal(3_600_000_000),
    "d": Decimal(86_400_000_000),
    "w": Decimal(604_800_000_000),
}

_COMPONENT = re.compile(r"(\d+\.?\d*|\.\d+)([^\d.]+)")
_DURATION = re.compile(r"^(?:(?:\d+\.?\d*|\.\d+)[^\d.]+)+$")

_MICROSECOND = timedelta(microseconds=1)
_US_PER_MS = 1_000
_US_PER_SECOND = 1_000_000
_US_PER_MINUTE = 60 * _US_PER_SECOND
_US_PER_HOUR = 60 * _US_PER_MINUTE


def parse_duration(value: str, field_name: Optional[str] = None) -> timedelta:
    """
    Parse a duration string into a timedelta.

    A duration is an optionally signed sequence of decimal numbers, each with
    an optional fraction and a unit suffix, e.g. ``"300ms"``, ``"-1.5h"`` or
    ``"2h45m"``. Valid units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``,
    ``m``, ``h``, ``d`` and ``w``. Precision below one microsecond is
    truncated, except that a non-zero duration never becomes zero.

    Args:
        value: Duration string
        field_name: Configuration field being parsed, for error reporting

    Returns:
        Parsed duration

    Raises:
        InvalidDurationError: If the string is not a valid duration
    """
    if not isinstance(value, str):
        raise InvalidDurationError(
            f"Duration must be a string, got {type(value).__name__}",
            value,
            field_name
        )

    text = value.strip()
    sign = 1
    if text[:1] in ("-", "+"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]

    if text == "0":
        return timedelta(0)

    if not text or not _DURATION.match(text):
        raise InvalidDurationError(f"Invalid duration: {value!r}", value, field_name)

    total = Decimal(0)
    for number, unit in _COMPONENT.findall(text):
        if unit not in UNIT_MICROSECONDS:
            raise InvalidDurationError(
                f"Unknown unit {unit!r} in duration {value!r}",
                value,
                field_name
            )
        try:
            total += Decimal(number) * UNIT_MICROSECONDS[unit]
        except InvalidOperation as e:
            raise InvalidDurationError(f"Invalid duration: {value!r}", value, field_name) from e

    micros = int(total)
    if micros == 0 and total:
        # Non-zero amounts below timedelta resolution keep their sign
        micros = 1

    try:
        return timedelta(microseconds=sign * micros)
    except OverflowError as e:
        raise InvalidDurationError(f"Duration out of range: {value!r}", value, field_name) from e


def _with_fraction(whole: int, fraction: int, digits: int) -> str:
    text = str(whole)
    if fraction:
        text += "." + f"{fraction:0{digits}d}".rstrip("0")
    return text


def format_duration(value: timedelta) -> str:
    """
    Format a timedelta as a duration string.

    Durations of one second or more are written as hours, minutes and
    seconds (``"1h0m0s"``, ``"1m30s"``, ``"1.5s"``); shorter ones use the
    largest fitting sub-second unit (``"500ms"``, ``"20µs"``).
    """
    micros = value // _MICROSECOND
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < _US_PER_MS:
        return f"{sign}{micros}µs"
    if micros < _US_PER_SECOND:
        return f"{sign}{_with_fraction(micros // _US_PER_MS, micros % _US_PER_MS, 3)}ms"

    hours, rest = divmod(micros, _US_PER_HOUR)
    minutes, rest = divmod(rest, _US_PER_MINUTE)
    seconds = _with_fraction(rest // _US_PER_SECOND, rest % _US_PER_SECOND, 6)

    text = f"{seconds}s"
    if hours or minutes:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return sign + text


def coerce_duration(value: Any, field_name: Optional[str] = None) -> timedelta:
    """
    Convert a deserialized configuration value into a timedelta.

    Accepts a timedelta, a duration string or a number of seconds.

    Raises:
        InvalidDurationError: If the value has an unsupported type or format
    """
    if isinstance(value, timedelta):
        return value
    # bool is an int subclass and never a meaningful duration
    if isinstance(value, bool):
        raise InvalidDurationError(
            f"Duration must be a string or number of seconds, got {value!r}",
            value,
            field_name
        )
    if isinstance(value, (int, float)):
        try:
            result = timedelta(seconds=value)
        except (OverflowError, ValueError) as e:
            raise InvalidDurationError(
                f"Duration out of range: {value!r}",
                value,
                field_name
            ) from e
        if not result and value:
            return timedelta(microseconds=1 if value > 0 else -1)
        return result
    if isinstance(value, str):
        return parse_duration(value, field_name)

    raise InvalidDurationError(
        f"Duration must be a string or number of seconds, got {type(value).__name__}",
        value,
        field_name
    )
