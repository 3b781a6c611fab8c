"""Shared fixtures: a scripted API client and sample search payloads."""

from __future__ import annotations

import copy

import pytest

from core.domain.errors import UpstreamUnavailableError
from core.interfaces.api_client import ApiResult, ApiSuccess, AuthRequired


SCENARIO_BODY = {
    "search": {
        "domains": [{"domain": "example.com", "type": "deny"}],
        "gravity": [
            {"domain": "example.com", "address": "http://list1"},
            {"domain": "example.com", "address": "http://list1"},
            {"domain": "sub.example.com", "address": "http://list2"},
        ],
    }
}

EMPTY_BODY = {"search": {"domains": [], "gravity": []}}


class FakeApiClient:
    """Scripted `SearchApiClient`: replays `responses`, repeating the last one."""

    def __init__(self, responses: list[ApiResult], *, available: bool = True, auth_error: Exception | None = None):
        self.responses = list(responses)
        self.available = available
        self.auth_error = auth_error
        self.events: list[str] = []
        self.searches: list[tuple[str, dict | None, bool]] = []
        self.auth_calls = 0
        self.teardown_calls = 0
        self.session = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.events.append("close")

    def probe_availability(self) -> None:
        self.events.append("probe")
        if not self.available:
            raise UpstreamUnavailableError()

    def request(self, path, params=None):
        self.events.append("search")
        self.searches.append((path, params, self.session))
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]

    def authenticate(self) -> None:
        self.events.append("auth")
        self.auth_calls += 1
        if self.auth_error is not None:
            raise self.auth_error
        self.session = True

    def teardown_session(self) -> None:
        self.events.append("teardown")
        self.teardown_calls += 1
        self.session = False


@pytest.fixture
def scenario_body():
    return copy.deepcopy(SCENARIO_BODY)


@pytest.fixture
def empty_body():
    return copy.deepcopy(EMPTY_BODY)


@pytest.fixture
def make_client():
    def _make(*responses: ApiResult, **kwargs) -> FakeApiClient:
        return FakeApiClient(list(responses), **kwargs)

    return _make


__all__ = ["ApiSuccess", "AuthRequired", "FakeApiClient"]
