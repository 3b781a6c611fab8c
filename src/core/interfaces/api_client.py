"""Contract of the API Session Client.

Why Protocol:
- The orchestrator only needs four operations; tests drive it with a fake
  while the CLI wires in the httpx-backed `FTLApiClient`.
- `request` returns a discriminated result instead of a status-code sentinel,
  so "authentication required" is a type, not a magic value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Union, runtime_checkable


@dataclass(frozen=True)
class ApiSuccess:
    """A 2xx response with its decoded JSON body."""

    body: Any


@dataclass(frozen=True)
class AuthRequired:
    """The daemon answered 401: this endpoint needs a session."""

    status_code: int = 401


ApiResult = Union[ApiSuccess, AuthRequired]


@runtime_checkable
class SearchApiClient(Protocol):
    """Minimal client the search pipeline depends on.

    Design rules:
    - Calls are blocking; one run issues them strictly in sequence.
    - `teardown_session` must be safe to call when no session exists.
    """

    def probe_availability(self) -> None:
        """Raise `UpstreamUnavailableError` when the API cannot be reached."""

        ...

    def request(self, path: str, params: dict[str, str] | None = None) -> ApiResult:
        """GET `path`, attaching the session when one exists."""

        ...

    def authenticate(self) -> None:
        """Open a session or raise `AuthFailure`."""

        ...

    def teardown_session(self) -> None:
        """Close the session if one was opened."""

        ...
