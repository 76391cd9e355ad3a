from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from functools import lru_cache
from typing import List

from pydantic import ValidationError

from greenside.errors import InvalidInput
from greenside.storage import PersistenceStore, get_store, require_user

from .aggregate import aggregate, summarize
from .models import ClubKeyStats, TrackedShot

logger = logging.getLogger(__name__)

_COLLECTION = "shots"


class ShotLogService:
    def __init__(self, store: PersistenceStore | None = None) -> None:
        self._store = store or get_store()

    def track_shot(
        self,
        user_id: str | None,
        *,
        club: str,
        distance: float,
        timestamp: datetime | None = None,
    ) -> TrackedShot:
        user = require_user(user_id)
        label = (club or "").strip()
        if not label:
            raise InvalidInput("Please enter a club name.")
        if distance is None or distance <= 0:
            raise InvalidInput("Invalid club or distance.")

        shot = TrackedShot(
            id=str(uuid.uuid4()),
            club=label,
            distance=float(distance),
            timestamp=timestamp or datetime.now(timezone.utc),
        )
        self._store.upsert(user, _COLLECTION, shot.id, shot.model_dump(mode="json"))
        logger.info(
            "shot_tracked", extra={"club": shot.club, "distance": shot.distance}
        )
        return shot

    def list_shots(self, user_id: str | None) -> List[TrackedShot]:
        user = require_user(user_id)
        shots: List[TrackedShot] = []
        for raw in self._store.list(user, _COLLECTION):
            try:
                shots.append(TrackedShot.model_validate(raw))
            except ValidationError:
                logger.warning("skipping malformed shot", extra={"id": raw.get("id")})
        shots.sort(key=lambda shot: shot.timestamp)
        return shots

    def delete_shot(self, user_id: str | None, shot_id: str) -> bool:
        user = require_user(user_id)
        return self._store.delete(user, _COLLECTION, shot_id)

    def learned_averages(self, user_id: str | None) -> dict[str, int]:
        return aggregate(self.list_shots(user_id))

    def summary(self, user_id: str | None) -> List[ClubKeyStats]:
        return summarize(self.list_shots(user_id))


@lru_cache(maxsize=1)
def get_shot_log_service() -> ShotLogService:
    return ShotLogService()


__all__ = ["ShotLogService", "get_shot_log_service"]
