from __future__ import annotations

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from greenside.api.deps import get_user_id
from greenside.club_distance import (
    ClubKeyStats,
    ShotLogService,
    TrackedShot,
    get_shot_log_service,
)

router = APIRouter(prefix="/api/shots", tags=["shots"])


class ShotIn(BaseModel):
    club: str = ""
    distance: float | None = None
    timestamp: datetime | None = Field(
        default=None, validation_alias=AliasChoices("timestamp", "recordedAt")
    )

    model_config = ConfigDict(populate_by_name=True)


@router.post("", response_model=TrackedShot, status_code=status.HTTP_201_CREATED)
def track_shot(
    payload: ShotIn,
    user_id: str = Depends(get_user_id),
    service: ShotLogService = Depends(get_shot_log_service),
) -> TrackedShot:
    return service.track_shot(
        user_id,
        club=payload.club,
        distance=payload.distance,
        timestamp=payload.timestamp,
    )


@router.get("", response_model=List[TrackedShot])
def list_shots(
    user_id: str = Depends(get_user_id),
    service: ShotLogService = Depends(get_shot_log_service),
) -> List[TrackedShot]:
    return service.list_shots(user_id)


@router.get("/summary", response_model=List[ClubKeyStats])
def shot_summary(
    user_id: str = Depends(get_user_id),
    service: ShotLogService = Depends(get_shot_log_service),
) -> List[ClubKeyStats]:
    return service.summary(user_id)


@router.delete("/{shot_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_shot(
    shot_id: str,
    user_id: str = Depends(get_user_id),
    service: ShotLogService = Depends(get_shot_log_service),
) -> Response:
    if not service.delete_shot(user_id, shot_id):
        raise HTTPException(status_code=404, detail="shot not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router", "delete_shot", "list_shots", "shot_summary", "track_shot"]
