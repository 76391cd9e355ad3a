from .ledger import (
    add_player,
    clear_scores,
    from_entry,
    remove_player,
    rename_player,
    set_score,
    to_entry,
    to_persistable_players,
    total_for,
)
from .models import PersistedPlayer, Player, ScorecardEntry, ScorecardLedger
from .service import ScorecardService, get_scorecard_service

__all__ = [
    "PersistedPlayer",
    "Player",
    "ScorecardEntry",
    "ScorecardLedger",
    "ScorecardService",
    "add_player",
    "clear_scores",
    "from_entry",
    "get_scorecard_service",
    "remove_player",
    "rename_player",
    "set_score",
    "to_entry",
    "to_persistable_players",
    "total_for",
]
