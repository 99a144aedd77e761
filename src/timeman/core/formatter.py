"""Format string interpreter.

A format string is a mix of literal text and directives introduced by ``%``.
It is tokenised once with :func:`parse_format`; the resulting
:class:`FormatString` renders timestamps and converts to a ``strptime``
pattern for reading them.

The escape marker itself is written by doubling it: ``%%``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Union

from timeman.core.directives import ESCAPE, TOKENS_BY_LENGTH, Directive, get_directive
from timeman.core.exceptions import InvalidFormatError

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "%a, %d %b %Y %T %z"


@dataclass(frozen=True)
class Literal:
    """Literal text copied through unchanged."""

    text: str


FormatItem = Union[Literal, Directive]


@dataclass(frozen=True)
class FormatString:
    """A tokenised format string."""

    source: str
    items: tuple[FormatItem, ...]

    def __iter__(self) -> Iterator[FormatItem]:
        return iter(self.items)

    def __str__(self) -> str:
        return self.source

    @property
    def directives(self) -> tuple[Directive, ...]:
        return tuple(item for item in self.items if isinstance(item, Directive))

    @property
    def has_offset(self) -> bool:
        """True if parsing with this format yields a UTC offset."""
        return any(d.parse_as and "%z" in d.parse_as for d in self.directives)


def _match_token(fmt: str, pos: int) -> str | None:
    for token in TOKENS_BY_LENGTH:
        if fmt.startswith(token, pos):
            return token
    return None


def parse_format(fmt: str) -> FormatString:
    """Tokenise a format string.

    Args:
        fmt: Format string such as ``"%a, %d %b %Y %T %z"``

    Returns:
        The tokenised :class:`FormatString`.

    Raises:
        InvalidFormatError: On an unknown directive or a trailing ``%``.
    """
    items: list[FormatItem] = []
    literal: list[str] = []
    pos = 0

    while pos < len(fmt):
        char = fmt[pos]
        if char != ESCAPE:
            literal.append(char)
            pos += 1
            continue

        if pos + 1 >= len(fmt):
            raise InvalidFormatError(
                f"Invalid format {fmt!r}: trailing {ESCAPE!r} at position {pos}, "
                f"use {ESCAPE * 2!r} for a literal {ESCAPE!r}"
            )

        token = _match_token(fmt, pos)
        if token is None:
            raise InvalidFormatError(
                f"Invalid format {fmt!r}: unknown directive {fmt[pos:pos + 2]!r} "
                f"at position {pos}, run `timeman help-format`"
            )

        if literal:
            items.append(Literal("".join(literal)))
            literal.clear()
        items.append(get_directive(token))
        pos += len(token)

    if literal:
        items.append(Literal("".join(literal)))

    logger.debug("Parsed format %r into %d items", fmt, len(items))
    return FormatString(source=fmt, items=tuple(items))


def render(format_string: FormatString, ts: datetime) -> str:
    """Render *ts* using a tokenised format."""
    parts: list[str] = []
    for item in format_string:
        if isinstance(item, Literal):
            parts.append(item.text)
        else:
            parts.append(item.render(ts))
    return "".join(parts)


def expand(fmt: str, ts: datetime) -> str:
    """Expand every directive in *fmt* with its value for *ts*.

    ``expand("", ts)`` is always ``""``.
    """
    return render(parse_format(fmt), ts)


# strptime reads an ISO week date only from %G, %V and a weekday together
_ISO_WEEK_FIELDS = frozenset("GV")
_WEEKDAY_FIELDS = frozenset("aAuw")
_STRPTIME_FIELD = re.compile(r"%(.)")


def to_strptime(format_string: FormatString) -> str:
    """Build the :func:`datetime.strptime` pattern equivalent to a format.

    Each field may be read only once, so ``"%d %e"`` or ``"%z %:z"`` are
    rejected even though both render fine.

    Raises:
        InvalidFormatError: If a directive cannot be used for parsing, or the
            directives cannot be read together.
    """
    parts: list[str] = []
    seen: dict[str, Directive] = {}
    for item in format_string:
        if isinstance(item, Literal):
            parts.append(item.text.replace("%", "%%"))
            continue
        if item.parse_as is None:
            raise InvalidFormatError(
                f"Directive {item.token!r} in {format_string.source!r} cannot be used "
                f"to read a date, see `timeman help-format {item.token}`"
            )
        for field in _STRPTIME_FIELD.findall(item.parse_as):
            if field == ESCAPE:
                continue
            if field in seen:
                raise InvalidFormatError(
                    f"Directive {item.token!r} in {format_string.source!r} reads the same "
                    f"field as {seen[field].token!r}, a date can only be read with each "
                    "field once"
                )
            seen[field] = item
        parts.append(item.parse_as)

    iso_fields = _ISO_WEEK_FIELDS & seen.keys()
    if iso_fields and not (iso_fields == _ISO_WEEK_FIELDS and _WEEKDAY_FIELDS & seen.keys()):
        raise InvalidFormatError(
            f"Format {format_string.source!r} cannot be read: %G and %V need each other "
            "and a weekday directive such as %u"
        )

    return "".join(parts)


__all__ = [
    "DEFAULT_FORMAT",
    "FormatItem",
    "FormatString",
    "Literal",
    "expand",
    "parse_format",
    "render",
    "to_strptime",
]
