"""API Session Client for the Pi-hole FTL REST API.

Implements `core.interfaces.SearchApiClient` on top of a blocking
`httpx.Client`:

- the base URL comes from settings, FTL's ``local.api.ftl`` TXT record, or the
  configured fallback, and is picked by probing ``GET <base>/auth``;
- sessions are opened with ``POST <base>/auth`` and closed with
  ``DELETE <base>/auth``, the session id travelling in ``X-FTL-SID``;
- transport errors become `UpstreamUnavailableError` here, so the core never
  sees httpx exceptions.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterator

import httpx
from pydantic import BaseModel

from adapters.api_discovery import discover_api_urls
from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import AuthFailure, MalformedResponseError, UpstreamUnavailableError
from core.interfaces.api_client import ApiResult, ApiSuccess, AuthRequired

logger = logging.getLogger(__name__)

SID_HEADER = "X-FTL-SID"

# Receives a label ("Password", "2FA code") and returns what the user typed.
SecretPrompt = Callable[[str], str]
Discoverer = Callable[[str, float], list[str]]


class FTLSession(BaseModel):
    """The ``session`` object of an ``/auth`` response."""

    valid: bool = False
    totp: bool = False
    sid: str | None = None
    message: str | None = None


def _error_message(payload: Any) -> str | None:
    """Pull FTL's ``error.message`` (or ``session.message``) out of a JSON body."""

    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    session = payload.get("session")
    if isinstance(session, dict) and isinstance(session.get("message"), str):
        return session["message"]
    return None


def read_password_file(path: Path) -> str | None:
    """Return the CLI password stored by FTL, or None when it cannot be read."""

    try:
        password = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        logger.debug("CLI password file %s not readable: %s", path, exc)
        return None
    return password or None


class FTLApiClient:
    """Blocking FTL API client holding at most one session."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
        prompt: SecretPrompt | None = None,
        discover: Discoverer = discover_api_urls,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_http = http_client is None
        self._http = http_client or build_client(self._settings)
        self._prompt = prompt
        self._discover = discover
        self._base_url: str | None = None
        self._sid: str | None = None

    def __enter__(self) -> "FTLApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def base_url(self) -> str | None:
        return self._base_url

    @property
    def has_session(self) -> bool:
        return self._sid is not None

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    # -- availability -----------------------------------------------------

    def candidate_urls(self) -> list[str]:
        if self._settings.api_url:
            return [self._settings.api_url]
        urls = self._discover(self._settings.discovery_server, self._settings.discovery_timeout_seconds)
        return urls or [self._settings.fallback_api_url]

    def probe_availability(self) -> str:
        for base_url in self.candidate_urls():
            try:
                response = self._http.get(self._url(base_url, "/auth"))
            except httpx.HTTPError as exc:
                logger.debug("API at %s not reachable: %s", base_url, exc)
                continue
            # 200: no password set, 401: password required. Both mean the API is up.
            if response.status_code in (200, 401):
                logger.debug("Using API at %s", base_url)
                self._base_url = base_url
                return base_url
            logger.debug("API at %s answered HTTP %s", base_url, response.status_code)
        raise UpstreamUnavailableError()

    # -- requests ---------------------------------------------------------

    def request(self, path: str, params: dict[str, str] | None = None) -> ApiResult:
        try:
            response = self._http.get(self._api_url(path), params=params, headers=self._session_headers())
        except httpx.HTTPError as exc:
            raise UpstreamUnavailableError(f"Request to {path} failed: {exc}") from exc

        if response.status_code == 401:
            return AuthRequired()

        payload = self._json(response)
        if not response.is_success:
            detail = _error_message(payload) or response.reason_phrase
            raise MalformedResponseError(f"API returned HTTP {response.status_code} for {path}: {detail}")
        return ApiSuccess(payload)

    # -- sessions ---------------------------------------------------------

    def authenticate(self) -> None:
        last_message: str | None = None
        for source, password in self._passwords():
            session = self._login(password)
            if not session.valid and session.totp:
                session = self._login(password, totp=self._ask("2FA code"))
            if session.valid:
                logger.info("Authenticated with %s password", source)
                self._sid = session.sid
                return
            last_message = session.message
            logger.info("Login with %s password failed: %s", source, session.message)
        raise AuthFailure(f"Authentication failed: {last_message}" if last_message else None)

    def teardown_session(self) -> None:
        if self._sid is None:
            return
        headers = self._session_headers()
        self._sid = None
        try:
            response = self._http.delete(self._api_url("/auth"), headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("Could not delete API session: %s", exc)
            return
        if response.is_success:
            logger.debug("API session deleted")
        else:
            logger.warning("Deleting API session returned HTTP %s", response.status_code)

    def _passwords(self) -> Iterator[tuple[str, str]]:
        if self._settings.password:
            yield "configured", self._settings.password
            return
        cli_password = read_password_file(self._settings.password_file)
        if cli_password:
            yield "CLI", cli_password
        if self._prompt is not None:
            yield "entered", self._ask("Password")

    def _ask(self, label: str) -> str:
        if self._prompt is None:
            raise AuthFailure(f"{label} required but no interactive prompt is available")
        return self._prompt(label).strip()

    def _login(self, password: str, *, totp: str | None = None) -> FTLSession:
        body: dict[str, Any] = {"password": password}
        if totp:
            if not totp.isdigit():
                raise AuthFailure("2FA code must be numeric")
            body["totp"] = int(totp)
        try:
            response = self._http.post(self._api_url("/auth"), json=body)
        except httpx.HTTPError as exc:
            raise UpstreamUnavailableError(f"Login request failed: {exc}") from exc

        payload = self._json(response)
        if response.status_code not in (200, 401):
            detail = _error_message(payload) or response.reason_phrase
            raise AuthFailure(f"Login rejected with HTTP {response.status_code}: {detail}")
        if not isinstance(payload, dict) or not isinstance(payload.get("session"), dict):
            raise MalformedResponseError("Login response has no session object")
        return FTLSession.model_validate(payload["session"])

    # -- helpers ----------------------------------------------------------

    def _api_url(self, path: str) -> str:
        base_url = self._base_url or self.probe_availability()
        return self._url(base_url, path)

    @staticmethod
    def _url(base_url: str, path: str) -> str:
        return base_url.rstrip("/") + "/" + path.lstrip("/")

    def _session_headers(self) -> dict[str, str]:
        return {SID_HEADER: self._sid} if self._sid else {}

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"API returned invalid JSON (HTTP {response.status_code})") from exc
