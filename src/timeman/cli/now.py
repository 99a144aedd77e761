"""Now command - print the current time."""

import rich_click as click

from timeman.cli.main import Context, out, pass_context


@click.command()
@pass_context
def now(ctx: Context) -> None:
    """Print the current time.

    Uses the date format and the UTC offset given before the command:

        timeman -o +00:00 -f "%F %T" now
    """
    from timeman.core.formatter import render
    from timeman.core.timestamp import now as current_time

    out(render(ctx.format_string, current_time(ctx.offset)))
