from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, Depends
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from greenside.api.deps import get_user_id
from greenside.bag import Club, PlayerClubService, get_player_club_service
from greenside.club_distance import ShotLogService, TrackedShot, get_shot_log_service
from greenside.scorecards import ScorecardEntry, ScorecardService, get_scorecard_service

router = APIRouter(prefix="/api", tags=["profile"])


class ProfileOut(BaseModel):
    user_id: str = Field(
        validation_alias=AliasChoices("user_id", "userId"),
        serialization_alias="userId",
    )
    clubs: List[Club]
    shot_averages: Dict[str, int] = Field(
        validation_alias=AliasChoices("shot_averages", "shotAverages"),
        serialization_alias="shotAverages",
    )
    shots: List[TrackedShot]
    scorecards: List[ScorecardEntry]

    model_config = ConfigDict(populate_by_name=True)


@router.get("/profile", response_model=ProfileOut)
def get_profile(
    user_id: str = Depends(get_user_id),
    clubs: PlayerClubService = Depends(get_player_club_service),
    shots: ShotLogService = Depends(get_shot_log_service),
    scorecards: ScorecardService = Depends(get_scorecard_service),
) -> ProfileOut:
    history = shots.list_shots(user_id)
    return ProfileOut(
        user_id=user_id,
        clubs=clubs.load_book(user_id).clubs,
        shot_averages=shots.learned_averages(user_id),
        shots=history,
        scorecards=scorecards.list(user_id),
    )


__all__ = ["router", "get_profile"]
