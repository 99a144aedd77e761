"""Custom exceptions for timeman."""


class TimeManError(Exception):
    """Base exception for timeman."""

    exit_code = 1


class ParseError(TimeManError):
    """Error parsing user supplied text."""


class TimestampParseError(ParseError):
    """Timestamp does not match the expected format."""

    exit_code = 5


class OffsetParseError(ParseError):
    """UTC offset is not of the form ``+HH:MM``."""


class DurationParseError(ParseError):
    """Duration is not valid ISO 8601 duration text."""

    exit_code = 10


class InvalidFormatError(TimeManError):
    """Format string contains an unknown or unusable directive."""

    exit_code = 11


class DirectiveNotFoundError(TimeManError):
    """Directive token is not in the directive table."""

    exit_code = 12


class ConfigError(TimeManError):
    """Error in configuration."""

    exit_code = 2
