from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from greenside.api.deps import get_user_id
from greenside.bag import ClubBook, PlayerClubService, get_player_club_service

router = APIRouter(prefix="/api/clubs", tags=["clubs"])


class ClubDistanceIn(BaseModel):
    distance: float


class SuggestionOut(BaseModel):
    distance: float
    suggested_club: str = Field(
        validation_alias=AliasChoices("suggested_club", "suggestedClub"),
        serialization_alias="suggestedClub",
    )

    model_config = ConfigDict(populate_by_name=True)


@router.get("", response_model=ClubBook)
def get_clubs(
    user_id: str = Depends(get_user_id),
    service: PlayerClubService = Depends(get_player_club_service),
) -> ClubBook:
    return service.load_book(user_id)


@router.get("/suggest", response_model=SuggestionOut)
def suggest_club(
    distance: float = Query(...),
    user_id: str = Depends(get_user_id),
    service: PlayerClubService = Depends(get_player_club_service),
) -> SuggestionOut:
    book = service.load_book(user_id)
    return SuggestionOut(distance=distance, suggested_club=book.suggest(distance))


@router.put("/{name}", response_model=ClubBook)
def update_club_distance(
    name: str,
    payload: ClubDistanceIn,
    user_id: str = Depends(get_user_id),
    service: PlayerClubService = Depends(get_player_club_service),
) -> ClubBook:
    return service.update_distance(user_id, name, payload.distance)


__all__ = ["router", "get_clubs", "suggest_club", "update_club_distance"]
