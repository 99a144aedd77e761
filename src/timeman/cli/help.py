"""Help commands - format directives and duration syntax."""

from typing import Optional

import rich_click as click

from timeman.cli.main import out


@click.command("help-format")
@click.argument("get_or_search", required=False)
def help_format(get_or_search: Optional[str]) -> None:
    """Describe the date format directives.

    With no argument every directive is listed. If GET_OR_SEARCH is a
    directive like %A its full description is shown, otherwise the
    directives whose description contains the text are listed.
    """
    from timeman.core.help import lookup, render_listing

    for line in render_listing(lookup(get_or_search)):
        out(line)


@click.command("help-duration")
def help_duration() -> None:
    """Describe the duration syntax and duration flags."""
    from timeman.core.duration import DURATION_HELP

    out(DURATION_HELP.rstrip("\n"))
