"""Scorecard editing for one round: players, hole cells and totals.

Every function returns a new ledger and leaves its input untouched. Cell
values are whatever the user typed; blanks, text and negatives all count as
"unset" (0) in totals and in what gets stored.
"""

from __future__ import annotations

import uuid
from datetime import date
from typing import Any, Iterable, List

from greenside.errors import InvalidIndex, InvalidInput
from greenside.utils import coerce_non_negative_int

from .models import PersistedPlayer, Player, ScorecardEntry, ScorecardLedger

UNSET = 0


def coerce_score(value: Any) -> int:
    return coerce_non_negative_int(value)


def _check_player(ledger: ScorecardLedger, index: int) -> None:
    if not 0 <= index < len(ledger.players):
        raise InvalidIndex(f"No player at position {index}")


def add_player(ledger: ScorecardLedger, hole_count: int | None = None) -> ScorecardLedger:
    """Append ``Player N`` with an empty row.

    ``hole_count`` is the active round's hole count; without one the ledger's
    own count applies, which defaults to 18. The first player added fixes the
    ledger to the round's count; later rows never shrink it.
    """
    count = hole_count or ledger.hole_count
    updated = ledger.model_copy(deep=True)
    if ledger.players:
        updated.hole_count = max(updated.hole_count, count)
    else:
        updated.hole_count = count
    updated.players.append(
        Player(name=f"Player {len(ledger.players) + 1}", hole_scores=[UNSET] * count)
    )
    return updated


def remove_player(ledger: ScorecardLedger, index: int) -> ScorecardLedger:
    _check_player(ledger, index)
    updated = ledger.model_copy(deep=True)
    del updated.players[index]
    return updated


def rename_player(ledger: ScorecardLedger, index: int, name: str) -> ScorecardLedger:
    _check_player(ledger, index)
    updated = ledger.model_copy(deep=True)
    updated.players[index].name = name
    return updated


def set_score(
    ledger: ScorecardLedger, player_index: int, hole_index: int, value: Any
) -> ScorecardLedger:
    _check_player(ledger, player_index)
    if not 0 <= hole_index < ledger.hole_count:
        raise InvalidIndex(f"No hole at position {hole_index}")
    updated = ledger.model_copy(deep=True)
    row = updated.players[player_index].hole_scores
    if len(row) <= hole_index:
        row.extend([UNSET] * (hole_index + 1 - len(row)))
    row[hole_index] = coerce_score(value)
    return updated


def clear_scores(ledger: ScorecardLedger) -> ScorecardLedger:
    updated = ledger.model_copy(deep=True)
    for player in updated.players:
        player.hole_scores = [UNSET] * updated.hole_count
    return updated


def total_for(player: Player) -> int:
    return sum(coerce_score(score) for score in player.hole_scores)


def to_persistable_players(players: Iterable[Player]) -> List[PersistedPlayer]:
    return [
        PersistedPlayer(
            name=player.name,
            scores=[coerce_score(score) for score in player.hole_scores],
        )
        for player in players
    ]


def to_entry(
    ledger: ScorecardLedger,
    *,
    entry_id: str | None = None,
    on: date | None = None,
) -> ScorecardEntry:
    course = ledger.course.strip()
    if not course:
        raise InvalidInput("Please enter a course name.")
    if not ledger.players:
        raise InvalidInput("A scorecard needs at least one player.")
    return ScorecardEntry(
        id=entry_id or str(uuid.uuid4()),
        course=course,
        date=on or date.today(),
        players=to_persistable_players(ledger.players),
    )


def from_entry(entry: ScorecardEntry) -> ScorecardLedger:
    """Load a saved scorecard back into an editable ledger."""
    longest = max((len(player.scores) for player in entry.players), default=0)
    ledger = ScorecardLedger(course=entry.course, players=[])
    if longest:
        ledger.hole_count = longest
    ledger.players = [
        Player(
            name=player.name or "Unknown",
            hole_scores=list(player.scores) + [UNSET] * (ledger.hole_count - len(player.scores)),
        )
        for player in entry.players
    ]
    return ledger


__all__ = [
    "UNSET",
    "add_player",
    "clear_scores",
    "coerce_score",
    "from_entry",
    "remove_player",
    "rename_player",
    "set_score",
    "to_entry",
    "to_persistable_players",
    "total_for",
]
