"""Interfaces/abstractions of the core.

The core depends on these contracts; adapters provide the implementations.
"""

from core.interfaces.api_client import ApiResult, ApiSuccess, AuthRequired, SearchApiClient

__all__ = ["ApiResult", "ApiSuccess", "AuthRequired", "SearchApiClient"]
