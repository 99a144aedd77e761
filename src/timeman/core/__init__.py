"""Core models and operations for timeman."""

from .directives import Directive, all_directives, describe, get_directive
from .duration import DurationFlags, format_duration, humanize, parse_duration
from .exceptions import (
    ConfigError,
    DirectiveNotFoundError,
    DurationParseError,
    InvalidFormatError,
    OffsetParseError,
    ParseError,
    TimeManError,
    TimestampParseError,
)
from .formatter import DEFAULT_FORMAT, FormatString, expand, parse_format, render
from .help import HelpMode, HelpResult, lookup

__all__ = [
    # Exceptions
    "ConfigError",
    "DirectiveNotFoundError",
    "DurationParseError",
    "InvalidFormatError",
    "OffsetParseError",
    "ParseError",
    "TimeManError",
    "TimestampParseError",
    # Directives
    "Directive",
    "all_directives",
    "describe",
    "get_directive",
    # Formatting
    "DEFAULT_FORMAT",
    "FormatString",
    "expand",
    "parse_format",
    "render",
    # Help
    "HelpMode",
    "HelpResult",
    "lookup",
    # Durations
    "DurationFlags",
    "format_duration",
    "humanize",
    "parse_duration",
]
