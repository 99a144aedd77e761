"""Format directive table.

Every placeholder timeman understands in a format string is registered here
together with a human description, a renderer and the ``strptime`` fragment
used when the same format is used to read a timestamp back in.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Callable, Mapping

from timeman.core.exceptions import DirectiveNotFoundError

ESCAPE = "%"


@dataclass(frozen=True)
class Directive:
    """A single format placeholder.

    Attributes:
        token: Placeholder including the escape marker (``"%A"``, ``"%:z"``)
        description: Help text; the first line is the summary
        render: Produces the directive's text for a timestamp
        parse_as: ``strptime`` fragment for parsing, or None if the
            directive cannot be read back
    """

    token: str
    description: str
    render: Callable[[datetime], str]
    parse_as: str | None = None

    @property
    def summary(self) -> str:
        """First line of the description."""
        return self.description.splitlines()[0] if self.description else ""

    @property
    def parsable(self) -> bool:
        return self.parse_as is not None


# =============================================================================
# Renderers
# =============================================================================


def _hour12(dt: datetime) -> int:
    return dt.hour % 12 or 12


def _strftime(code: str) -> Callable[[datetime], str]:
    """Renderer delegating to :meth:`datetime.strftime`.

    Only for codes every platform pads the same way. Years, space padded
    fields and ISO week fields are built by hand.
    """
    return lambda dt: dt.strftime(code)


def _utc_offset(dt: datetime, sep: str = "", seconds: bool = False, minutes: bool = True) -> str:
    """Render the UTC offset of *dt* as ``+HH[sep]MM[sep]SS``."""
    offset = dt.utcoffset() or timedelta(0)
    sign = "-" if offset < timedelta(0) else "+"
    total = abs(int(offset.total_seconds()))
    hours, rest = divmod(total, 3600)
    mins, secs = divmod(rest, 60)

    out = f"{sign}{hours:02d}"
    if minutes:
        out += f"{sep}{mins:02d}"
    if seconds:
        out += f"{sep}{secs:02d}"
    return out


def _nanos(dt: datetime) -> int:
    # datetime stores microseconds; the remaining digits are always zero
    return dt.microsecond * 1000


def _date(dt: datetime) -> str:
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"


def _time(dt: datetime) -> str:
    return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"


# =============================================================================
# Table
# =============================================================================


_DIRECTIVES: tuple[Directive, ...] = (
    # Year
    Directive("%Y", "Year like: 2024", lambda dt: f"{dt.year:04d}", "%Y"),
    Directive(
        "%C",
        "Gregorian year divided by 100 like: 20. Implies the non-negative year.",
        lambda dt: f"{dt.year // 100:02d}",
    ),
    Directive("%y", "Year mod 100 like: 24", _strftime("%y"), "%y"),
    Directive(
        "%G",
        "ISO year like: 2024\n\nThe year the ISO week (%V) belongs to.",
        lambda dt: f"{dt.isocalendar()[0]:04d}",
        "%G",
    ),
    Directive(
        "%g",
        "ISO year mod 100 like: 24",
        lambda dt: f"{dt.isocalendar()[0] % 100:02d}",
    ),
    # Month
    Directive("%m", "Month zero pad like: 04", _strftime("%m"), "%m"),
    Directive(
        "%b",
        "Short name of month like: Apr",
        _strftime("%b"),
        "%b",
    ),
    Directive(
        "%B",
        "Full month names like: April\n\n"
        "Prints a full name in the title case, reads either a short or full name in any case.",
        _strftime("%B"),
        "%B",
    ),
    Directive(
        "%h",
        "Short name of month like: Apr\n\nSame as format: \"%b\"",
        _strftime("%b"),
        "%b",
    ),
    # Day
    Directive("%d", "Day of the month zero pad like: 07", _strftime("%d"), "%d"),
    Directive("%e", "Day of the month space pad like:  7", lambda dt: f"{dt.day:2d}", "%d"),
    Directive(
        "%j",
        "Day of the year zero pad like: 013",
        _strftime("%j"),
        "%j",
    ),
    # Week
    Directive(
        "%U",
        "Week of the year like: 16\n\nWeeks start on Sunday; days before the first Sunday are week 00.",
        _strftime("%U"),
        "%U",
    ),
    Directive(
        "%V",
        "ISO week of the year like: 17",
        lambda dt: f"{dt.isocalendar()[1]:02d}",
        "%V",
    ),
    Directive(
        "%a",
        "Short name of the day of the week, is 3 letters like: Mon",
        _strftime("%a"),
        "%a",
    ),
    Directive(
        "%A",
        "Full day of the week names like: Monday\n\n"
        "Prints a full name in the title case, reads either a short or full name in any case.",
        _strftime("%A"),
        "%A",
    ),
    Directive(
        "%u",
        "Day of the week, where Monday = 1 as Sunday = 7 like: 1",
        lambda dt: str(dt.isoweekday()),
        "%u",
    ),
    Directive(
        "%w",
        "Day of the week, where Sunday = 0 and Saturday = 6 like: 1",
        _strftime("%w"),
        "%w",
    ),
    # Composite dates
    Directive(
        "%D",
        "Date in format: 04/22/24\n\nSame as format: \"%m/%d/%y\"",
        _strftime("%m/%d/%y"),
        "%m/%d/%y",
    ),
    Directive(
        "%F",
        "Date in format: 2024-04-22\n\nSame as format: \"%Y-%m-%d\"",
        _date,
        "%Y-%m-%d",
    ),
    Directive(
        "%v",
        "Date like: 22-Apr-2024\n\nSame as format: \"%e-%b-%Y\"",
        lambda dt: f"{dt.day:2d}-{dt.strftime('%b')}-{dt.year:04d}",
        "%d-%b-%Y",
    ),
    # Hour, minute, second
    Directive("%H", "Hour 00-23 zero pad like: 07", _strftime("%H"), "%H"),
    Directive("%k", "Hour 0-23 space pad like:  7", lambda dt: f"{dt.hour:2d}", "%H"),
    Directive("%I", "Hour 01-12 zero pad like: 06", _strftime("%I"), "%I"),
    Directive("%l", "Hour 1-12 space pad like:  6", lambda dt: f"{_hour12(dt):2d}", "%I"),
    Directive("%M", "Minute 00-59 zero pad like: 05", _strftime("%M"), "%M"),
    Directive("%S", "Second 00-59 zero pad like: 06", _strftime("%S"), "%S"),
    Directive("%P", "pm/am", lambda dt: dt.strftime("%p").lower(), "%p"),
    Directive("%p", "AM/PM", _strftime("%p"), "%p"),
    # Composite times
    Directive(
        "%R",
        "Hour 0-24 and minute like: 17:00\n\nSame as format: \"%H:%M\"",
        _strftime("%H:%M"),
        "%H:%M",
    ),
    Directive(
        "%T",
        "Time like: 17:46:05\n\nSame as format: \"%H:%M:%S\"",
        _time,
        "%H:%M:%S",
    ),
    Directive(
        "%r",
        "Time like: 07:08:29 PM\n\nSame as format: \"%I:%M:%S %p\"",
        _strftime("%I:%M:%S %p"),
        "%I:%M:%S %p",
    ),
    Directive(
        "%+",
        "Date and time like: 2024-04-22T18:20:29.306665+03:00\n\n"
        "Is from RFC3339\nSame as format: \"%FT%T%.6f%:z\"",
        lambda dt: f"{_date(dt)}T{_time(dt)}.{dt.microsecond:06d}{_utc_offset(dt, ':')}",
        "%Y-%m-%dT%H:%M:%S.%f%z",
    ),
    Directive(
        "%s",
        "Timestamp like: 1713799229\n\n"
        "The number of non-leap seconds since the midnight UTC on January 1, 1970.",
        lambda dt: str(calendar.timegm(dt.utctimetuple())),
    ),
    # Fractional seconds
    Directive(
        "%f",
        "Nanoseconds zero pad like: 306665000",
        lambda dt: f"{_nanos(dt):09d}",
    ),
    Directive(
        "%.3f",
        "Nanoseconds 3 digits like: .467",
        lambda dt: f".{dt.microsecond // 1000:03d}",
        ".%f",
    ),
    Directive(
        "%.6f",
        "Nanoseconds 6 digits like: .467312",
        lambda dt: f".{dt.microsecond:06d}",
        ".%f",
    ),
    Directive(
        "%.9f",
        "Nanoseconds 9 digits like: .467312000",
        lambda dt: f".{_nanos(dt):09d}",
    ),
    Directive(
        "%3f",
        "Nanoseconds 3 digits like: 467",
        lambda dt: f"{dt.microsecond // 1000:03d}",
        "%f",
    ),
    Directive(
        "%6f",
        "Nanoseconds 6 digits like: 467312",
        lambda dt: f"{dt.microsecond:06d}",
        "%f",
    ),
    Directive(
        "%9f",
        "Nanoseconds 9 digits like: 467312000",
        lambda dt: f"{_nanos(dt):09d}",
    ),
    # Offsets
    Directive("%z", "Timezone offset like: +0300", lambda dt: _utc_offset(dt), "%z"),
    Directive("%:z", "Timezone offset like: +03:00", lambda dt: _utc_offset(dt, ":"), "%z"),
    Directive(
        "%::z",
        "Timezone offset like: +03:00:00",
        lambda dt: _utc_offset(dt, ":", seconds=True),
        "%z",
    ),
    Directive(
        "%:::z",
        "Timezone offset like: +03",
        lambda dt: _utc_offset(dt, minutes=False),
    ),
    Directive(
        "%Z",
        "Time zone name like: +03:00, don't use!\n\nThis cannot be parsed use \"%:z\"",
        lambda dt: _utc_offset(dt, ":"),
    ),
    # Literals
    Directive("%n", "New line like \"\\n\"", lambda dt: "\n", "\n"),
    Directive("%t", "Tab like: \"\\t\"", lambda dt: "\t", "\t"),
    Directive("%%", "Literal % like: %", lambda dt: ESCAPE, "%%"),
)


def _build_table(directives: tuple[Directive, ...]) -> Mapping[str, Directive]:
    table: dict[str, Directive] = {}
    for directive in directives:
        if not directive.token.startswith(ESCAPE):
            raise ValueError(f"Directive {directive.token!r} must start with {ESCAPE!r}")
        if directive.token in table:
            raise ValueError(f"Duplicate directive: {directive.token}")
        table[directive.token] = directive
    return MappingProxyType(table)


_TABLE: Mapping[str, Directive] = _build_table(_DIRECTIVES)

# Longest first so "%:::z" wins over "%:z" when scanning a format string
TOKENS_BY_LENGTH: tuple[str, ...] = tuple(sorted(_TABLE, key=len, reverse=True))


def all_directives() -> tuple[Directive, ...]:
    """All directives in declaration order."""
    return _DIRECTIVES


def get_directive(token: str) -> Directive:
    """Look up a directive by its token.

    Args:
        token: Full token including the escape marker, e.g. ``"%A"``

    Raises:
        DirectiveNotFoundError: If the token is not registered.
    """
    try:
        return _TABLE[token]
    except KeyError:
        raise DirectiveNotFoundError(
            f"Unknown directive {token!r}, run `timeman help-format` for the list"
        ) from None


def describe(token: str) -> str:
    """Description of the directive *token*."""
    return get_directive(token).description


def is_directive(token: str) -> bool:
    return token in _TABLE


__all__ = [
    "ESCAPE",
    "Directive",
    "TOKENS_BY_LENGTH",
    "all_directives",
    "describe",
    "get_directive",
    "is_directive",
]
