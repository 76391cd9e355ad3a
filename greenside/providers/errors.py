from __future__ import annotations

from greenside.errors import ExternalServiceFailure


class ProviderError(ExternalServiceFailure):
    """A third-party HTTP provider failed or answered with unusable data."""


__all__ = ["ProviderError"]
