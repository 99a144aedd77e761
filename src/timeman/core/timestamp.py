"""Timestamp parsing and arithmetic.

Timestamps are timezone-aware :class:`datetime` values with a fixed UTC
offset. All calendar work is done by :mod:`datetime`.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from timeman.core.duration import format_duration
from timeman.core.exceptions import DurationParseError, OffsetParseError, TimestampParseError
from timeman.core.formatter import FormatString, to_strptime

logger = logging.getLogger(__name__)


def local_offset() -> timezone:
    """The host's current UTC offset as a fixed timezone."""
    offset = datetime.now().astimezone().utcoffset() or timedelta(0)
    return timezone(offset)


def parse_offset(value: str) -> timezone:
    """Parse a UTC offset such as ``"+03:00"``, ``"-0530"`` or ``"Z"``.

    Raises:
        OffsetParseError: If *value* is not an offset.
    """
    try:
        parsed = datetime.strptime(value.strip(), "%z")
    except ValueError:
        raise OffsetParseError(
            f"Invalid offset {value!r}. The offset should look like \"+00:00\""
        ) from None

    return timezone(parsed.utcoffset() or timedelta(0))


def now(offset: timezone | None = None) -> datetime:
    """Current instant, expressed in *offset* (local offset if None)."""
    return datetime.now(offset or local_offset())


def parse_timestamp(value: str, format_string: FormatString, field: str = "date") -> datetime:
    """Parse *value* with a tokenised format.

    Args:
        value: Text to parse, e.g. ``"Tue, 23 Apr 2024 11:48:52 +0300"``
        format_string: Format the text is written in
        field: Argument name used in error messages

    Returns:
        Timezone-aware datetime carrying the parsed offset.

    Raises:
        InvalidFormatError: If the format contains directives that cannot
            be parsed.
        TimestampParseError: If *value* does not match the format, or the
            format has no UTC offset.
    """
    pattern = to_strptime(format_string)

    if not format_string.has_offset:
        raise TimestampParseError(
            f"Cannot parse the time offset for `{field}`: "
            f"the format `{format_string}` needs `%z` or `%:z` in it"
        )

    try:
        parsed = datetime.strptime(value.strip(), pattern)
    except ValueError:
        raise TimestampParseError(
            f"Cannot parse `{field}` {value!r}, "
            f"the date should be in this format: `{format_string}`"
        ) from None

    logger.debug("Parsed %s %r as %s", field, value, parsed.isoformat())
    return parsed


def subtract(ts: datetime, other: datetime) -> timedelta:
    """Elapsed time from *other* to *ts* (``ts - other``)."""
    return ts - other


def add(ts: datetime, duration: timedelta) -> datetime:
    """*ts* moved forward by *duration*.

    Raises:
        DurationParseError: If the result is outside the supported dates.
    """
    try:
        return ts + duration
    except OverflowError:
        raise DurationParseError(
            f"Adding {format_duration(duration)} to {ts.isoformat()} is out of range"
        ) from None


def subtract_duration(ts: datetime, duration: timedelta) -> datetime:
    try:
        return ts - duration
    except OverflowError:
        raise DurationParseError(
            f"Subtracting {format_duration(duration)} from {ts.isoformat()} is out of range"
        ) from None


def convert(ts: datetime, offset: timezone) -> datetime:
    """Same instant expressed in another UTC offset."""
    try:
        return ts.astimezone(offset)
    except OverflowError:
        raise TimestampParseError(f"{ts.isoformat()} is out of range in offset {offset}") from None


__all__ = [
    "add",
    "convert",
    "local_offset",
    "now",
    "parse_offset",
    "parse_timestamp",
    "subtract",
    "subtract_duration",
]
