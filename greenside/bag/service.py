from __future__ import annotations

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Dict, List

from pydantic import ValidationError

from greenside.club_distance.service import ShotLogService, get_shot_log_service
from greenside.errors import ExternalServiceFailure
from greenside.storage import PersistenceStore, get_store, require_user

from .book import ClubBook
from .defaults import default_clubs
from .models import ClubEdit

logger = logging.getLogger(__name__)

_COLLECTION = "clubs"


class PlayerClubService:
    """Builds each player's club book from defaults, shot history and edits.

    Load failures never surface to the caller: the book falls back to the
    built-in defaults so distance readouts keep working.
    """

    def __init__(
        self,
        store: PersistenceStore | None = None,
        shots: ShotLogService | None = None,
    ) -> None:
        self._store = store or get_store()
        self._shots = shots or ShotLogService(self._store)

    def _load_edits(self, user: str) -> Dict[str, float]:
        edits: Dict[str, float] = {}
        for raw in self._store.list(user, _COLLECTION):
            try:
                edit = ClubEdit.model_validate(raw)
            except ValidationError:
                logger.warning("skipping malformed club edit", extra={"id": raw.get("id")})
                continue
            edits[edit.club] = edit.distance
        return edits

    def list_edits(self, user_id: str | None) -> List[ClubEdit]:
        user = require_user(user_id)
        return [
            ClubEdit(club=club, distance=distance)
            for club, distance in self._load_edits(user).items()
        ]

    def load_book(self, user_id: str | None) -> ClubBook:
        user = require_user(user_id)
        try:
            learned = self._shots.learned_averages(user)
            edits = self._load_edits(user)
        except ExternalServiceFailure:
            logger.warning(
                "club book fell back to defaults", extra={"user_id": user}, exc_info=True
            )
            return ClubBook.build(default_clubs(), {})
        return ClubBook.build(default_clubs(), learned).apply_overrides(edits)

    def update_distance(
        self, user_id: str | None, name: str, distance: float
    ) -> ClubBook:
        user = require_user(user_id)
        book = self.load_book(user).update_distance(name, distance)
        edit = ClubEdit(
            club=name, distance=distance, updated_at=datetime.now(timezone.utc)
        )
        self._store.upsert(user, _COLLECTION, name, edit.model_dump(mode="json"))
        logger.info("club_distance_updated", extra={"club": name, "distance": distance})
        return book


@lru_cache(maxsize=1)
def get_player_club_service() -> PlayerClubService:
    return PlayerClubService(shots=get_shot_log_service())


__all__ = ["PlayerClubService", "get_player_club_service"]
