"""Search orchestration.

normalize -> probe -> search -> (authenticate -> search again) -> reshape
-> render, with the session torn down on every path. The pipeline knows
nothing about the terminal: rendering is injected by the caller, and printing
stays in the CLI.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence, TypeVar

from core.domain.errors import AuthFailure, NoDomainError
from core.domain.models import GravityMatch, ListMatch, SearchRequest, SearchType
from core.domain.normalize import normalize_domain
from core.interfaces.api_client import ApiResult, AuthRequired, SearchApiClient
from core.services.reshape import reshape_search_response

logger = logging.getLogger(__name__)

T = TypeVar("T")

Renderer = Callable[[str, SearchType, Sequence[ListMatch], Sequence[GravityMatch]], T]


def build_search_request(raw_domain: str | None, *, partial: bool, max_results: int) -> SearchRequest:
    """Validate and normalize the user input into an immutable `SearchRequest`."""

    if raw_domain is None or not raw_domain.strip():
        raise NoDomainError()
    return SearchRequest(
        domain=normalize_domain(raw_domain),
        max_results=max_results,
        partial=partial,
    )


def _search(client: SearchApiClient, request: SearchRequest) -> ApiResult:
    logger.debug("GET %s N=%s partial=%s", request.path, request.max_results, request.partial)
    return client.request(request.path, request.query_params())


def run_search(
    raw_domain: str | None,
    *,
    partial: bool,
    max_results: int,
    client: SearchApiClient,
    render: Renderer[T],
) -> T:
    """Run one search and return whatever `render` builds from the result.

    The search endpoint is tried without a session first, since FTL can be
    configured to serve it unauthenticated. A 401 triggers exactly one login
    and one retry; a second 401 is an `AuthFailure`.
    """

    request = build_search_request(raw_domain, partial=partial, max_results=max_results)

    try:
        client.probe_availability()

        result = _search(client, request)
        if isinstance(result, AuthRequired):
            logger.info("Search endpoint requires authentication, logging in")
            client.authenticate()
            result = _search(client, request)
            if isinstance(result, AuthRequired):
                raise AuthFailure("The API still requires authentication after logging in")

        list_view, gravity_view = reshape_search_response(result.body)
        logger.debug("Found %d list matches and %d adlists", len(list_view), len(gravity_view))
        return render(request.domain, request.search_type, list_view, gravity_view)
    finally:
        client.teardown_session()
