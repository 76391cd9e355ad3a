from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from greenside.api.deps import get_user_id
from greenside.api.user_header import UserIdHeader
from greenside.rounds import RoundSessionService, get_round_session_service
from greenside.scorecards import (
    ScorecardEntry,
    ScorecardLedger,
    ScorecardService,
    add_player,
    clear_scores,
    from_entry,
    get_scorecard_service,
    remove_player,
    rename_player,
    set_score,
    total_for,
)
from greenside.security import current_user, require_api_key

router = APIRouter(prefix="/api/scorecards", tags=["scorecards"])


class PlayerTotal(BaseModel):
    name: str
    total: int


class AddPlayerIn(BaseModel):
    ledger: ScorecardLedger
    session_id: str | None = Field(
        default=None, validation_alias=AliasChoices("session_id", "sessionId")
    )

    model_config = ConfigDict(populate_by_name=True)


class PlayerEditIn(BaseModel):
    ledger: ScorecardLedger
    player_index: int = Field(
        validation_alias=AliasChoices("player_index", "playerIndex")
    )
    name: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class ScoreIn(BaseModel):
    ledger: ScorecardLedger
    player_index: int = Field(
        validation_alias=AliasChoices("player_index", "playerIndex")
    )
    hole_index: int = Field(validation_alias=AliasChoices("hole_index", "holeIndex"))
    # Whatever the user typed; coerced by the ledger.
    value: Any = None

    model_config = ConfigDict(populate_by_name=True)


@router.post("", response_model=ScorecardEntry, status_code=status.HTTP_201_CREATED)
def save_scorecard(
    ledger: ScorecardLedger,
    user_id: str = Depends(get_user_id),
    service: ScorecardService = Depends(get_scorecard_service),
) -> ScorecardEntry:
    return service.save(user_id, ledger)


@router.get("", response_model=List[ScorecardEntry])
def list_scorecards(
    user_id: str = Depends(get_user_id),
    service: ScorecardService = Depends(get_scorecard_service),
) -> List[ScorecardEntry]:
    return service.list(user_id)


@router.post("/total", response_model=List[PlayerTotal])
def scorecard_totals(ledger: ScorecardLedger) -> List[PlayerTotal]:
    return [
        PlayerTotal(name=player.name, total=total_for(player))
        for player in ledger.players
    ]


@router.post("/ledger/players", response_model=ScorecardLedger)
def add_ledger_player(
    payload: AddPlayerIn,
    api_key: str | None = Depends(require_api_key),
    user_id: UserIdHeader = None,
    rounds: RoundSessionService = Depends(get_round_session_service),
) -> ScorecardLedger:
    hole_count = None
    if payload.session_id:
        session = rounds.get(payload.session_id, current_user(user_id, api_key))
        hole_count = len(session.holes) or None
    return add_player(payload.ledger, hole_count)


@router.post("/ledger/players/remove", response_model=ScorecardLedger)
def remove_ledger_player(payload: PlayerEditIn) -> ScorecardLedger:
    return remove_player(payload.ledger, payload.player_index)


@router.post("/ledger/players/rename", response_model=ScorecardLedger)
def rename_ledger_player(payload: PlayerEditIn) -> ScorecardLedger:
    return rename_player(payload.ledger, payload.player_index, payload.name or "")


@router.post("/ledger/scores", response_model=ScorecardLedger)
def set_ledger_score(payload: ScoreIn) -> ScorecardLedger:
    return set_score(
        payload.ledger, payload.player_index, payload.hole_index, payload.value
    )


@router.post("/ledger/clear", response_model=ScorecardLedger)
def clear_ledger(ledger: ScorecardLedger) -> ScorecardLedger:
    return clear_scores(ledger)


@router.get("/{scorecard_id}/ledger", response_model=ScorecardLedger)
def load_scorecard(
    scorecard_id: str,
    user_id: str = Depends(get_user_id),
    service: ScorecardService = Depends(get_scorecard_service),
) -> ScorecardLedger:
    for entry in service.list(user_id):
        if entry.id == scorecard_id:
            return from_entry(entry)
    raise HTTPException(status_code=404, detail="scorecard not found")


@router.delete("/{scorecard_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_scorecard(
    scorecard_id: str,
    user_id: str = Depends(get_user_id),
    service: ScorecardService = Depends(get_scorecard_service),
) -> Response:
    if not service.delete(user_id, scorecard_id):
        raise HTTPException(status_code=404, detail="scorecard not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = [
    "router",
    "add_ledger_player",
    "clear_ledger",
    "delete_scorecard",
    "list_scorecards",
    "load_scorecard",
    "remove_ledger_player",
    "rename_ledger_player",
    "save_scorecard",
    "scorecard_totals",
    "set_ledger_score",
]
