"""Error types raised by the dispatch layer.

Validation failures are the caller's fault and map to HTTP 400. Upstream
failures are the backend's fault and map to a generic HTTP 500; their cause is
logged but never returned to the caller. Capability gaps are not errors at all
and have no exception type.
"""

from typing import Optional


class ShowcaseError(Exception):
    """Base class for all dispatch-layer errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ShowcaseError):
    """Caller input failed a structural precondition (missing text, missing file, wrong MIME type)."""


class UpstreamError(ShowcaseError):
    """The selected backend call failed for any reason."""

    def __init__(self, provider: str, message: Optional[str] = None):
        self.provider = provider
        super().__init__(message or f"{provider} request failed")


class ProviderNotConfiguredError(UpstreamError):
    """The selected provider has no API key configured."""

    def __init__(self, provider: str, env_var: str):
        self.env_var = env_var
        super().__init__(provider, f"{provider} is not configured: missing {env_var}")
