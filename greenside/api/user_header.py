from __future__ import annotations

from typing import Annotated, Optional

from fastapi import Header

UserIdHeader = Annotated[Optional[str], Header(alias="x-user-id")]
