"""Main CLI entry point using rich-click."""

from __future__ import annotations

import logging
from datetime import timezone
from pathlib import Path
from typing import Any, Optional

import rich_click as click
from rich.console import Console
from rich.logging import RichHandler

from timeman.core.config import TimeManConfig, load_config
from timeman.core.exceptions import TimeManError
from timeman.core.formatter import FormatString, parse_format
from timeman.core.timestamp import local_offset, parse_offset

# Configure rich-click
click.rich_click.SHOW_ARGUMENTS = True

# Subcommand aliases
ALIASES: dict[str, str] = {
    "s": "since",
    "sd": "sub-duration",
    "ad": "add-duration",
    "+d": "add-duration",
    "t": "translate",
}


def out(text: str) -> None:
    """Print a result line exactly as computed, with no rich rendering."""
    click.echo(text)


class TimeManClickError(click.ClickException):
    """Carries a :class:`TimeManError` out through click with its exit code."""

    def __init__(self, error: TimeManError) -> None:
        super().__init__(str(error))
        self.exit_code = error.exit_code


class AliasedGroup(click.RichGroup):
    """Group resolving short command aliases and reporting timeman errors."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, ALIASES.get(cmd_name, cmd_name))

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except TimeManError as e:
            raise TimeManClickError(e) from e


# Context object to pass state between commands
class Context:
    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.format: Optional[str] = None
        self.offset_text: Optional[str] = None
        self.verbose: bool = False
        self._config: Optional[TimeManConfig] = None
        self._format_string: Optional[FormatString] = None
        self._offset: Optional[timezone] = None

    @property
    def config(self) -> TimeManConfig:
        """Loaded configuration (file, then environment)."""
        if self._config is None:
            self._config = load_config(self.config_path)
        return self._config

    @property
    def format_string(self) -> FormatString:
        """The tokenised ``--format``, or the configured default."""
        if self._format_string is None:
            fmt = self.format if self.format is not None else self.config.format
            self._format_string = parse_format(fmt)
        return self._format_string

    @property
    def offset(self) -> timezone:
        """The ``--offset``, the configured offset, or the local offset."""
        if self._offset is None:
            text = self.offset_text or self.config.offset
            self._offset = parse_offset(text) if text else local_offset()
        return self._offset


pass_context = click.make_pass_decorator(Context, ensure=True)


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("timeman")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)


@click.group(cls=AliasedGroup)
@click.option(
    "--format", "-f", "fmt",
    type=str,
    help="Date format used to read and print timestamps (see help-format)",
)
@click.option(
    "--offset", "-o",
    type=str,
    help="UTC offset like +03:00 for now/since (default: local offset)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(package_name="timeman")
@pass_context
def cli(
    ctx: Context,
    fmt: Optional[str],
    offset: Optional[str],
    config: Optional[Path],
    verbose: bool,
) -> None:
    """A simple date and time calculator.

    Get the time, see how much time elapsed since a date, subtract dates to
    get a duration and add or subtract durations from dates.

    Dates are read and printed with the format (default
    "%a, %d %b %Y %T %z"), durations use ISO 8601 text like PT8M15S.
    """
    ctx.format = fmt
    ctx.offset_text = offset
    ctx.config_path = config
    ctx.verbose = verbose
    _configure_logging(verbose)


# Import and register subcommands
from timeman.cli.config import config_cmd
from timeman.cli.durations import add_duration, since, sub, sub_duration
from timeman.cli.help import help_duration, help_format
from timeman.cli.now import now
from timeman.cli.translate import translate

cli.add_command(now)
cli.add_command(since)
cli.add_command(sub)
cli.add_command(sub_duration)
cli.add_command(add_duration)
cli.add_command(translate)
cli.add_command(help_format)
cli.add_command(help_duration)
cli.add_command(config_cmd, name="config")


def main() -> None:
    """Entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
