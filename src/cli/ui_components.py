"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- The renderer builds a `rich.text.Text` and never prints; the command decides
  where it goes. `Text.plain` gives the uncolored output for tests and pipes.
"""

from __future__ import annotations

from typing import Sequence

from rich.text import Text

from core.domain.models import GravityMatch, ListMatch, SearchType

QUERY_STYLE = "blue"
DOMAIN_STYLE = "green"
ADLIST_STYLE = "blue"


def _header(count: int, noun: str, search_type: SearchType, domain: str) -> Text:
    return Text.assemble(
        f"Found {count} {noun} {search_type} matching '",
        (domain, QUERY_STYLE),
        "'.\n\n",
    )


def render_search_results(
    domain: str,
    search_type: SearchType,
    list_view: Sequence[ListMatch],
    gravity_view: Sequence[GravityMatch],
) -> Text:
    """Format both views: allow/deny list matches first, then adlists."""

    out = Text()

    out.append_text(_header(len(list_view), "domains", search_type, domain))
    for match in list_view:
        out.append("  - ")
        out.append(match.domain, style=DOMAIN_STYLE)
        out.append(f" (type: exact {match.type} domain)\n\n")

    out.append_text(_header(len(gravity_view), "adlists", search_type, domain))
    for group in gravity_view:
        out.append("  - ")
        out.append(group.address, style=ADLIST_STYLE)
        out.append("\n\n")
        for matched in group.domains:
            out.append("    - ")
            out.append(matched, style=DOMAIN_STYLE)
            out.append("\n")
        out.append("\n\n")

    return out
