"""Translate command - reformat a date."""

from typing import Optional

import rich_click as click

from timeman.cli.main import Context, out, pass_context


@click.command()
@click.argument("date")
@click.option("--to-format", "-F", help="Format to print DATE in (default: the input format)")
@click.option("--to-offset", "-O", help="UTC offset to convert DATE to, like +00:00")
@pass_context
def translate(
    ctx: Context,
    date: str,
    to_format: Optional[str],
    to_offset: Optional[str],
) -> None:
    """Read DATE with the date format and print it in another format or offset.

    Alias: t

        timeman translate -F "%+" -O +00:00 "Tue, 23 Apr 2024 11:40:37 +0300"
    """
    from timeman.core.formatter import parse_format, render
    from timeman.core.timestamp import convert, parse_offset, parse_timestamp

    ts = parse_timestamp(date, ctx.format_string, "date")
    output_format = parse_format(to_format) if to_format is not None else ctx.format_string

    if to_offset:
        ts = convert(ts, parse_offset(to_offset))

    out(render(output_format, ts))
