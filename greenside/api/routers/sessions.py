from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from greenside.api.deps import get_user_id
from greenside.courses import Hole
from greenside.geometry import GeoPoint
from greenside.rounds import RoundSessionService, SessionView, get_round_session_service

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


class StartSessionIn(BaseModel):
    holes: List[Hole] = Field(default_factory=list)
    tee_name: str | None = Field(
        default=None, validation_alias=AliasChoices("tee_name", "teeName")
    )
    course_name: str | None = Field(
        default=None, validation_alias=AliasChoices("course_name", "courseName")
    )

    model_config = ConfigDict(populate_by_name=True)


@router.post("", response_model=SessionView, status_code=status.HTTP_201_CREATED)
def start_session(
    payload: StartSessionIn,
    user_id: str = Depends(get_user_id),
    service: RoundSessionService = Depends(get_round_session_service),
) -> SessionView:
    session = service.start(
        user_id,
        holes=payload.holes,
        tee_name=payload.tee_name,
        course_name=payload.course_name,
    )
    return service.view(session.id, user_id)


@router.get("/{session_id}", response_model=SessionView)
def get_session(
    session_id: str,
    user_id: str = Depends(get_user_id),
    service: RoundSessionService = Depends(get_round_session_service),
) -> SessionView:
    return service.view(session_id, user_id)


@router.post("/{session_id}/advance", response_model=SessionView)
def advance_hole(
    session_id: str,
    user_id: str = Depends(get_user_id),
    service: RoundSessionService = Depends(get_round_session_service),
) -> SessionView:
    return service.advance(session_id, user_id)


@router.post("/{session_id}/retreat", response_model=SessionView)
def retreat_hole(
    session_id: str,
    user_id: str = Depends(get_user_id),
    service: RoundSessionService = Depends(get_round_session_service),
) -> SessionView:
    return service.retreat(session_id, user_id)


@router.post("/{session_id}/target", response_model=SessionView)
def set_target(
    session_id: str,
    point: GeoPoint,
    user_id: str = Depends(get_user_id),
    service: RoundSessionService = Depends(get_round_session_service),
) -> SessionView:
    return service.set_target(session_id, user_id, point)


@router.post("/{session_id}/location", response_model=SessionView)
def update_location(
    session_id: str,
    point: GeoPoint,
    user_id: str = Depends(get_user_id),
    service: RoundSessionService = Depends(get_round_session_service),
) -> SessionView:
    return service.update_location(session_id, user_id, point)


@router.post("/{session_id}/wind", response_model=SessionView)
def refresh_wind(
    session_id: str,
    user_id: str = Depends(get_user_id),
    service: RoundSessionService = Depends(get_round_session_service),
) -> SessionView:
    return service.refresh_wind(session_id, user_id)


@router.post("/{session_id}/clubs", response_model=SessionView)
def reload_clubs(
    session_id: str,
    user_id: str = Depends(get_user_id),
    service: RoundSessionService = Depends(get_round_session_service),
) -> SessionView:
    return service.reload_clubs(session_id, user_id)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def end_session(
    session_id: str,
    user_id: str = Depends(get_user_id),
    service: RoundSessionService = Depends(get_round_session_service),
) -> Response:
    service.end(session_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = [
    "router",
    "advance_hole",
    "end_session",
    "get_session",
    "refresh_wind",
    "reload_clubs",
    "retreat_hole",
    "set_target",
    "start_session",
    "update_location",
]
