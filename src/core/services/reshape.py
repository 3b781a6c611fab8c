"""Reshape a raw FTL search response into the two views the CLI prints.

- list view: one `ListMatch` per `search.domains` entry, API order kept.
- gravity view: `search.gravity` grouped by adlist `address`; groups in order
  of first appearance, domains deduplicated in order of first appearance.

Addresses are compared verbatim (no case folding). The JSON fields are the
source of truth; nothing is re-joined into delimited strings.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from core.domain.errors import MalformedResponseError
from core.domain.models import GravityMatch, ListMatch, SearchPayload


def parse_search_payload(body: Any) -> SearchPayload:
    if not isinstance(body, dict):
        raise MalformedResponseError("Search response is not a JSON object")
    try:
        return SearchPayload.model_validate(body)
    except ValidationError as exc:
        raise MalformedResponseError(
            f"Search response lacks the expected search.domains/search.gravity arrays ({exc.error_count()} errors)"
        ) from exc


def reshape_search_response(body: Any) -> tuple[list[ListMatch], list[GravityMatch]]:
    """Pure transformation; raises `MalformedResponseError` on an unexpected shape."""

    payload = parse_search_payload(body)

    list_view = [ListMatch(domain=entry.domain, type=entry.type) for entry in payload.search.domains]

    groups: dict[str, GravityMatch] = {}
    seen: set[tuple[str, str]] = set()
    for entry in payload.search.gravity:
        group = groups.get(entry.address)
        if group is None:
            group = groups[entry.address] = GravityMatch(address=entry.address)
        key = (entry.address, entry.domain)
        if key not in seen:
            seen.add(key)
            group.domains.append(entry.domain)

    return list_view, list(groups.values())
