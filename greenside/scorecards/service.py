from __future__ import annotations

import logging
from functools import lru_cache
from typing import List

from pydantic import ValidationError

from greenside.storage import PersistenceStore, get_store, require_user

from .ledger import to_entry
from .models import ScorecardEntry, ScorecardLedger

logger = logging.getLogger(__name__)

_COLLECTION = "scorecards"


class ScorecardService:
    def __init__(self, store: PersistenceStore | None = None) -> None:
        self._store = store or get_store()

    def save(self, user_id: str | None, ledger: ScorecardLedger) -> ScorecardEntry:
        user = require_user(user_id)
        entry = to_entry(ledger)
        self._store.upsert(user, _COLLECTION, entry.id, entry.model_dump(mode="json"))
        logger.info(
            "scorecard_saved",
            extra={"scorecard_id": entry.id, "players": len(entry.players)},
        )
        return entry

    def list(self, user_id: str | None) -> List[ScorecardEntry]:
        user = require_user(user_id)
        entries: List[ScorecardEntry] = []
        for raw in self._store.list(user, _COLLECTION):
            try:
                entries.append(ScorecardEntry.model_validate(raw))
            except ValidationError:
                logger.warning(
                    "skipping malformed scorecard", extra={"scorecard_id": raw.get("id")}
                )
        entries.sort(key=lambda entry: entry.date, reverse=True)
        return entries

    def delete(self, user_id: str | None, scorecard_id: str) -> bool:
        user = require_user(user_id)
        return self._store.delete(user, _COLLECTION, scorecard_id)


@lru_cache(maxsize=1)
def get_scorecard_service() -> ScorecardService:
    return ScorecardService()


__all__ = ["ScorecardService", "get_scorecard_service"]
