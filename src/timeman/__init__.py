"""timeman: date and time arithmetic for the command line."""

from timeman.core.config import TimeManConfig, find_config_file, load_config
from timeman.core.directives import Directive, all_directives, describe, get_directive
from timeman.core.duration import DurationFlags, format_duration, humanize, parse_duration
from timeman.core.exceptions import (
    ConfigError,
    DirectiveNotFoundError,
    DurationParseError,
    InvalidFormatError,
    OffsetParseError,
    ParseError,
    TimeManError,
    TimestampParseError,
)
from timeman.core.formatter import DEFAULT_FORMAT, FormatString, expand, parse_format, render
from timeman.core.help import HelpMode, HelpResult, lookup
from timeman.core.timestamp import (
    add,
    convert,
    local_offset,
    now,
    parse_offset,
    parse_timestamp,
    subtract,
    subtract_duration,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Config
    "TimeManConfig",
    "find_config_file",
    "load_config",
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
    # Timestamps
    "add",
    "convert",
    "local_offset",
    "now",
    "parse_offset",
    "parse_timestamp",
    "subtract",
    "subtract_duration",
    # Durations
    "DurationFlags",
    "format_duration",
    "humanize",
    "parse_duration",
    # Exceptions
    "TimeManError",
    "ParseError",
    "TimestampParseError",
    "OffsetParseError",
    "DurationParseError",
    "InvalidFormatError",
    "DirectiveNotFoundError",
    "ConfigError",
]
