from __future__ import annotations

from fastapi import Depends

from greenside.api.user_header import UserIdHeader
from greenside.security import current_user, require_api_key


def get_user_id(
    api_key: str | None = Depends(require_api_key),
    user_id: UserIdHeader = None,
) -> str:
    return current_user(user_id, api_key)


__all__ = ["get_user_id"]
