from .aggregate import RunningStats, aggregate, club_key, summarize
from .models import ClubKeyStats, TrackedShot
from .service import ShotLogService, get_shot_log_service

__all__ = [
    "ClubKeyStats",
    "RunningStats",
    "ShotLogService",
    "TrackedShot",
    "aggregate",
    "club_key",
    "get_shot_log_service",
    "summarize",
]
