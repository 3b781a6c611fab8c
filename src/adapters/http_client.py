"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and TLS verification for every API call.
- Eases testing: tests hand `FTLApiClient` a client built on `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create a blocking `httpx.Client` with the application's defaults.

    Why a builder:
    - Every request to FTL shares the same timeout, User-Agent and TLS policy.
    - `transport` lets tests swap the network for a mock without patching.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        verify=settings.verify_tls,
        transport=transport,
    )
