"""Duration commands - elapsed time between dates and date +/- duration."""

from datetime import timedelta
from typing import Optional

import rich_click as click

from timeman.cli.main import Context, out, pass_context


def _print_duration(ctx: Context, delta: timedelta, flags: Optional[str], pretty: bool) -> None:
    from timeman.core.duration import DurationFlags, format_duration, humanize

    duration_flags = DurationFlags.parse(flags if flags is not None else ctx.config.duration_flags)
    if pretty or ctx.config.pretty:
        out(humanize(delta, duration_flags))
    else:
        out(format_duration(delta, duration_flags))


@click.command()
@click.argument("date")
@click.argument("duration_flags", required=False)
@click.option("--pretty", "-p", is_flag=True, help="Print a readable duration")
@pass_context
def since(ctx: Context, date: str, duration_flags: Optional[str], pretty: bool) -> None:
    """Print the time elapsed from DATE until now.

    Alias: s

        timeman since "Tue, 23 Apr 2024 11:40:37 +0300"
    """
    from timeman.core.timestamp import now, parse_timestamp, subtract

    start = parse_timestamp(date, ctx.format_string, "date")
    _print_duration(ctx, subtract(now(ctx.offset), start), duration_flags, pretty)


@click.command()
@click.argument("from_date")
@click.argument("date")
@click.argument("duration_flags", required=False)
@click.option("--pretty", "-p", is_flag=True, help="Print a readable duration")
@pass_context
def sub(
    ctx: Context,
    from_date: str,
    date: str,
    duration_flags: Optional[str],
    pretty: bool,
) -> None:
    """Print FROM_DATE minus DATE as a duration.

        timeman sub "Tue, 23 Apr 2024 11:48:52 +0300" "Tue, 23 Apr 2024 11:40:37 +0300"
    """
    from timeman.core.timestamp import parse_timestamp, subtract

    end = parse_timestamp(from_date, ctx.format_string, "from_date")
    start = parse_timestamp(date, ctx.format_string, "date")
    _print_duration(ctx, subtract(end, start), duration_flags, pretty)


@click.command("sub-duration")
@click.argument("from_date")
@click.argument("duration")
@pass_context
def sub_duration(ctx: Context, from_date: str, duration: str) -> None:
    """Print FROM_DATE minus DURATION.

    Alias: sd. Put negative durations after "--".
    """
    from timeman.core.duration import parse_duration
    from timeman.core.formatter import render
    from timeman.core.timestamp import parse_timestamp, subtract_duration

    start = parse_timestamp(from_date, ctx.format_string, "from_date")
    delta = parse_duration(duration)
    out(render(ctx.format_string, subtract_duration(start, delta)))


@click.command("add-duration")
@click.argument("from_date")
@click.argument("duration")
@pass_context
def add_duration(ctx: Context, from_date: str, duration: str) -> None:
    """Print FROM_DATE plus DURATION.

    Aliases: ad, +d. Put negative durations after "--".

        timeman add-duration "Tue, 23 Apr 2024 11:40:37 +0300" PT8M15S
    """
    from timeman.core.duration import parse_duration
    from timeman.core.formatter import render
    from timeman.core.timestamp import add, parse_timestamp

    start = parse_timestamp(from_date, ctx.format_string, "from_date")
    delta = parse_duration(duration)
    out(render(ctx.format_string, add(start, delta)))
