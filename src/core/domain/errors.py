"""Error taxonomy for adlist searches.

Every failure the CLI can report is an `AdlistSearchError`. Each subclass
carries its own process exit code so the CLI maps errors to exits in one
place instead of scattering `sys.exit` calls through the core.
"""

from __future__ import annotations


class AdlistSearchError(Exception):
    """Base class for user-visible failures."""

    exit_code: int = 1
    default_message: str = "Adlist search failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NoDomainError(AdlistSearchError):
    """No domain was given on the command line."""

    exit_code = 1
    default_message = "No domain specified"


class InvalidDomainError(AdlistSearchError):
    """The domain is empty or cannot be converted to its ASCII form."""

    exit_code = 1
    default_message = "Invalid domain"


class UpstreamUnavailableError(AdlistSearchError):
    """The FTL API could not be reached."""

    exit_code = 2
    default_message = "API not available. Please check FTL is running and the API is reachable"


class AuthFailure(AdlistSearchError):
    """Authentication failed, or the search was rejected after authenticating."""

    exit_code = 3
    default_message = "Authentication failed"


class MalformedResponseError(AdlistSearchError):
    """The API answered with something that is not a search result."""

    exit_code = 4
    default_message = "Unexpected response from the API"


class ConfigurationError(AdlistSearchError):
    """Settings from the environment or a .env file failed validation."""

    exit_code = 5
    default_message = "Invalid configuration"
