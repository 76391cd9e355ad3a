from __future__ import annotations

import math
import re
from collections import defaultdict
from datetime import datetime
from typing import Dict, Iterable, List

from greenside.utils import round_half_up

from .models import ClubKeyStats, TrackedShot

_DIGITS = re.compile(r"\d+")


def club_key(label: str) -> str:
    """Bucket a free-form club label.

    "7I", "7 iron" and "7i" all share the key "7"; labels without digits use
    their first two characters upper-cased, so "PW" and "pw" land together.
    """
    text = label.strip()
    match = _DIGITS.search(text)
    if match:
        return match.group(0)
    return text[:2].upper()


class RunningStats:
    def __init__(self) -> None:
        self.count = 0
        self.mean = 0.0
        self.m2 = 0.0
        self.last_updated: datetime | None = None

    def update(self, value: float, timestamp: datetime | None = None) -> None:
        self.count += 1
        delta = value - self.mean
        self.mean += delta / self.count
        delta2 = value - self.mean
        self.m2 += delta * delta2
        if timestamp is not None:
            self.last_updated = (
                timestamp
                if self.last_updated is None
                else max(self.last_updated, timestamp)
            )

    @property
    def variance(self) -> float:
        if self.count <= 1:
            return 0.0
        return self.m2 / (self.count - 1)

    @property
    def stddev(self) -> float | None:
        if self.count <= 1:
            return None
        return math.sqrt(self.variance)


def _group(shots: Iterable[TrackedShot]) -> Dict[str, RunningStats]:
    groups: Dict[str, RunningStats] = defaultdict(RunningStats)
    for shot in shots:
        if shot.distance <= 0:
            continue
        groups[club_key(shot.club)].update(shot.distance, shot.timestamp)
    return groups


def aggregate(shots: Iterable[TrackedShot]) -> Dict[str, int]:
    """Average carry per club key, rounded to whole yards."""
    return {key: round_half_up(stats.mean) for key, stats in _group(shots).items()}


def summarize(shots: Iterable[TrackedShot]) -> List[ClubKeyStats]:
    summary = [
        ClubKeyStats(
            key=key,
            samples=stats.count,
            average_yards=round_half_up(stats.mean),
            std_dev_yards=(
                round(stats.stddev, 1) if stats.stddev is not None else None
            ),
            last_updated=stats.last_updated,
        )
        for key, stats in _group(shots).items()
    ]
    summary.sort(key=lambda item: item.key)
    return summary


__all__ = ["RunningStats", "aggregate", "club_key", "summarize"]
