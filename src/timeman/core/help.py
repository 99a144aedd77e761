"""Directive help: list, exact lookup and description search."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from timeman.core.directives import Directive, all_directives, get_directive, is_directive


class HelpMode(Enum):
    """How a help query was answered."""

    LIST = auto()  # No query, every directive
    EXACT = auto()  # Query is a token
    SEARCH = auto()  # Query matched against descriptions


@dataclass(frozen=True)
class HelpResult:
    """Directives answering a help query, in table order."""

    mode: HelpMode
    query: str | None
    directives: tuple[Directive, ...]

    def __len__(self) -> int:
        return len(self.directives)

    @property
    def empty(self) -> bool:
        return not self.directives


def search(text: str) -> tuple[Directive, ...]:
    """Directives whose description contains *text*, ignoring case."""
    needle = text.lower()
    if not needle:
        return ()
    return tuple(d for d in all_directives() if needle in d.description.lower())


def lookup(query: str | None = None) -> HelpResult:
    """Answer a ``help-format`` query.

    * ``None`` lists every directive.
    * A registered token (``"%A"``) returns that directive.
    * Anything else searches the descriptions. No match is an empty result,
      not an error. So is an empty query.
    """
    if query is None:
        return HelpResult(HelpMode.LIST, None, all_directives())

    query = query.strip()
    if is_directive(query):
        return HelpResult(HelpMode.EXACT, query, (get_directive(query),))

    return HelpResult(HelpMode.SEARCH, query, search(query))


def render_listing(result: HelpResult) -> list[str]:
    """Format a help result as text lines.

    Exact lookups show the full description; listings show one summary line
    per directive with tokens padded to a common width.
    """
    if result.mode is HelpMode.EXACT:
        directive = result.directives[0]
        return [f"{directive.token} : {directive.description}"]

    pad = max((len(d.token) for d in result.directives), default=0)
    return [f"{d.token.ljust(pad)} : {d.summary}" for d in result.directives]


__all__ = ["HelpMode", "HelpResult", "lookup", "render_listing", "search"]
