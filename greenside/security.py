"""Request identity for the HTTP surface."""

from __future__ import annotations

import os
from typing import Set

from fastapi import Header, HTTPException, Query, status

from greenside.errors import NotAuthenticated
from greenside.storage import require_user


def _allowed_keys() -> Set[str]:
    keys = {key.strip() for key in os.getenv("API_KEYS", "").split(",") if key.strip()}
    primary = os.getenv("API_KEY")
    if primary:
        keys.add(primary)
    return keys


def require_api_key(
    x_api_key: str | None = Header(default=None, alias="x-api-key"),
    api_key_query: str | None = Query(default=None, alias="apiKey"),
) -> str | None:
    """Require a matching API key header when enabled via env.

    Returns the resolved API key so it can double as the caller identity when
    no user header is sent.
    """

    candidate = x_api_key or api_key_query

    if os.getenv("REQUIRE_API_KEY", "0") != "1":
        return candidate

    allowed_keys = _allowed_keys()
    if not allowed_keys or candidate not in allowed_keys:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid api key",
        )

    return candidate


def current_user(user_id: str | None, api_key: str | None = None) -> str:
    """Explicit user header first, then the API key; no identity is an error."""
    candidate = user_id or api_key
    if not candidate:
        raise NotAuthenticated("You need to be signed in to save data.")
    return require_user(candidate)


__all__ = ["current_user", "require_api_key"]
