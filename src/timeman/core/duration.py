"""ISO 8601 durations.

Durations are exact :class:`timedelta` spans. Text is read with
:mod:`isodate`; calendar units are given fixed lengths so that a printed
duration always reads back to the same span:

* a year is 365 days
* a month is a twelfth of a year (30 days 10 hours)
* a week is 7 days
"""

from __future__ import annotations

import logging
from datetime import timedelta
from enum import Flag

import isodate

from timeman.core.exceptions import DurationParseError

logger = logging.getLogger(__name__)

YEAR_IN_SECONDS = 31_536_000
MONTH_IN_SECONDS = YEAR_IN_SECONDS // 12
WEEK_IN_SECONDS = 604_800
DAY_IN_SECONDS = 86_400
HOUR_IN_SECONDS = 3_600
MINUTE_IN_SECONDS = 60


class DurationFlags(Flag):
    """Units shown when a duration is printed."""

    YEAR = 1 << 0
    MONTH = 1 << 1
    WEEK = 1 << 2
    DAY = 1 << 3
    HOUR = 1 << 4
    MINUTE = 1 << 5
    SECOND = 1 << 6
    NANOS = 1 << 7
    NONE = 0
    ALL = YEAR | MONTH | WEEK | DAY | HOUR | MINUTE | SECOND | NANOS

    @classmethod
    def parse(cls, value: str | None) -> "DurationFlags":
        """Build flags from letters ``YMWDhmsn``.

        Unknown letters are ignored. No letters at all means every unit.
        """
        flags = cls.NONE
        for char in value or "":
            flags |= _FLAG_LETTERS.get(char, cls.NONE)
        return flags or cls.ALL


_FLAG_LETTERS: dict[str, DurationFlags] = {
    "Y": DurationFlags.YEAR,
    "M": DurationFlags.MONTH,
    "W": DurationFlags.WEEK,
    "D": DurationFlags.DAY,
    "h": DurationFlags.HOUR,
    "m": DurationFlags.MINUTE,
    "s": DurationFlags.SECOND,
    "n": DurationFlags.NANOS,
}

# (flag, seconds per unit, ISO designator, human name)
_DATE_UNITS = (
    (DurationFlags.YEAR, YEAR_IN_SECONDS, "Y", "Year"),
    (DurationFlags.MONTH, MONTH_IN_SECONDS, "M", "Month"),
    (DurationFlags.WEEK, WEEK_IN_SECONDS, "W", "Week"),
    (DurationFlags.DAY, DAY_IN_SECONDS, "D", "Day"),
)
_TIME_UNITS = (
    (DurationFlags.HOUR, HOUR_IN_SECONDS, "H", "Hour"),
    (DurationFlags.MINUTE, MINUTE_IN_SECONDS, "M", "Minute"),
)
_TIME_SECTION = DurationFlags.HOUR | DurationFlags.MINUTE | DurationFlags.SECOND


def parse_duration(value: str) -> timedelta:
    """Parse ISO 8601 duration text such as ``"PT8M15S"`` or ``"-P1DT2H"``.

    Raises:
        DurationParseError: If *value* is not a duration.
    """
    text = value.strip()
    try:
        parsed = isodate.parse_duration(text)
    except (isodate.ISO8601Error, ValueError, TypeError):
        raise DurationParseError(
            f"Invalid duration {value!r}, expected ISO 8601 text like PT8M15S. "
            "Run `timeman help-duration`"
        ) from None
    except OverflowError:
        raise DurationParseError(f"Duration {value!r} is out of range") from None

    if isinstance(parsed, isodate.Duration):
        fixed = float(parsed.years) * YEAR_IN_SECONDS + float(parsed.months) * MONTH_IN_SECONDS
        try:
            parsed = parsed.tdelta + timedelta(seconds=fixed)
        except OverflowError:
            raise DurationParseError(f"Duration {value!r} is out of range") from None

    logger.debug("Parsed duration %r as %s", value, parsed)
    return parsed


def _split(
    delta: timedelta, flags: DurationFlags
) -> tuple[bool, list[tuple[str, str, int]], list[tuple[str, str, int]], int, int]:
    """Break *delta* into the enabled units, largest first.

    Returns:
        ``(negative, date_units, time_units, seconds, microseconds)`` where
        each unit list holds non-zero ``(designator, name, amount)`` entries
        and the seconds left over are returned separately.
    """
    negative = delta < timedelta(0)
    total_us = abs(delta) // timedelta(microseconds=1)
    seconds, micros = divmod(total_us, 1_000_000)

    parts: tuple[list[tuple[str, str, int]], list[tuple[str, str, int]]] = ([], [])
    for units, out in zip((_DATE_UNITS, _TIME_UNITS), parts):
        for flag, size, designator, name in units:
            if flag not in flags:
                continue
            amount, seconds = divmod(seconds, size)
            if amount:
                out.append((designator, name, amount))

    return negative, parts[0], parts[1], seconds, micros


def _seconds_text(seconds: int, micros: int, flags: DurationFlags) -> str:
    if micros and DurationFlags.NANOS in flags:
        return f"{seconds}.{micros:06d}".rstrip("0")
    return str(seconds)


def format_duration(delta: timedelta, flags: DurationFlags = DurationFlags.ALL) -> str:
    """Print *delta* as ISO 8601 duration text.

    Only the units in *flags* are used and whatever is left below the
    smallest enabled unit is dropped. ``timedelta(seconds=495)`` prints
    ``PT8M15S``.
    """
    negative, date_units, time_units, seconds, micros = _split(delta, flags)

    out = "-" if negative else ""
    out += "P"
    out += "".join(f"{amount}{designator}" for designator, _, amount in date_units)

    if flags & _TIME_SECTION:
        out += "T"
        out += "".join(f"{amount}{designator}" for designator, _, amount in time_units)

    if DurationFlags.SECOND in flags:
        out += f"{_seconds_text(seconds, micros, flags)}S"

    return out


def humanize(delta: timedelta, flags: DurationFlags = DurationFlags.ALL) -> str:
    """Readable form of a duration, e.g. ``"8 Minutes, 15 Seconds"``."""
    negative, date_units, time_units, seconds, micros = _split(delta, flags)

    words = [
        f"{amount} {name}{'' if amount == 1 else 's'}"
        for _, name, amount in date_units + time_units
    ]
    if DurationFlags.SECOND in flags and (seconds or micros or not words):
        text = _seconds_text(seconds, micros, flags)
        words.append(f"{text} Second{'' if text == '1' else 's'}")

    return ("-" if negative else "") + ", ".join(words)


DURATION_HELP = """\
Durations are written as ISO 8601 duration text:

  [-]P[nY][nM][nW][nD][T[nH][nM][nS]]

  Y : Years (365 days)
  M : Months (1/12 of a year) before T, minutes after T
  W : Weeks
  D : Days
  H : Hours
  S : Seconds, may have a fraction like 15.5S

Examples: PT8M15S, P1DT2H, -PT30S, P2W

The commands `since` and `sub` take optional duration flags choosing the
units used for the result:

  Y : Year
  M : Month
  W : Week
  D : Day
  h : Hour
  m : Minute
  s : Second
  n : Fraction of a second

"YMWDhmsn" includes every unit (the default).
"sn" stores everything in seconds and fractions, which is the most
portable choice for scripts.
"""


__all__ = [
    "DURATION_HELP",
    "DurationFlags",
    "format_duration",
    "humanize",
    "parse_duration",
]
