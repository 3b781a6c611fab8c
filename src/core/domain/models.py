"""Domain models (Pydantic v2).

Two families live here:
- `SearchRequest`: the immutable per-run configuration built once by the CLI.
- The search payload as FTL returns it (`SearchPayload` and friends) and the
  two grouped views the renderer works with (`ListMatch`, `GravityMatch`).

These models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

from typing import Literal
from urllib.parse import quote

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

SearchType = Literal["exactly", "partially"]


class SearchRequest(BaseModel):
    """One search against the FTL `/search` endpoint."""

    model_config = ConfigDict(frozen=True)

    domain: str = Field(
        ...,
        min_length=1,
        description="Normalized (IDNA encoded, lowercase) domain to look up.",
    )
    max_results: int = Field(
        default=20,
        gt=0,
        description="Result cap (`N`); FTL enforces its own hard limit on top.",
    )
    partial: bool = Field(
        default=False,
        description="Substring search instead of exact matching.",
    )

    @property
    def search_type(self) -> SearchType:
        return "partially" if self.partial else "exactly"

    @property
    def path(self) -> str:
        # Fully escaped so "?", "#" and "/" stay part of the search term.
        return f"/search/{quote(self.domain, safe='')}"

    def query_params(self) -> dict[str, str]:
        """Query string for the search endpoint, booleans spelled the way FTL expects."""

        return {"N": str(self.max_results), "partial": "true" if self.partial else "false"}


class RawListEntry(BaseModel):
    """An entry of `search.domains` (allow/deny list hit)."""

    domain: str
    type: str


class RawGravityEntry(BaseModel):
    """An entry of `search.gravity` (adlist hit)."""

    domain: str
    address: str


class SearchSection(BaseModel):
    domains: list[RawListEntry]
    gravity: list[RawGravityEntry]


class SearchPayload(BaseModel):
    """Top-level shape of a search response; unknown keys are ignored."""

    search: SearchSection


class ListMatch(BaseModel):
    """A domain found in the user's own allow/deny lists."""

    model_config = ConfigDict(frozen=True)

    domain: str
    type: str


class GravityMatch(BaseModel):
    """All matched domains of one adlist, in order of first appearance."""

    address: str = Field(..., description="Adlist source URL, kept verbatim.")
    domains: list[str] = Field(default_factory=list)
