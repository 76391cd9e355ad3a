from __future__ import annotations

from datetime import date

import pytest

from greenside.errors import InvalidIndex, InvalidInput
from greenside.scorecards import (
    Player,
    ScorecardLedger,
    add_player,
    clear_scores,
    from_entry,
    remove_player,
    rename_player,
    set_score,
    to_entry,
    total_for,
)


def _ledger_with_players(count: int = 2) -> ScorecardLedger:
    ledger = ScorecardLedger(course="Pebble Beach")
    for _ in range(count):
        ledger = add_player(ledger)
    return ledger


def test_add_player_names_and_row_width():
    ledger = _ledger_with_players(2)
    assert [p.name for p in ledger.players] == ["Player 1", "Player 2"]
    assert ledger.players[0].hole_scores == [0] * 18


def test_add_player_uses_round_hole_count():
    ledger = add_player(ScorecardLedger(), hole_count=9)
    assert len(ledger.players[0].hole_scores) == 9


def test_operations_leave_input_untouched():
    ledger = _ledger_with_players(1)
    updated = set_score(ledger, 0, 0, 4)
    assert ledger.players[0].hole_scores[0] == 0
    assert updated.players[0].hole_scores[0] == 4


@pytest.mark.parametrize(
    "raw, stored",
    [("", 0), ("7", 7), (" 5 ", 5), ("abc", 0), (-3, 0), ("4.9", 4), (None, 0)],
)
def test_set_score_coerces_input(raw, stored):
    ledger = set_score(_ledger_with_players(1), 0, 3, raw)
    assert ledger.players[0].hole_scores[3] == stored


def test_set_score_rejects_bad_positions():
    ledger = _ledger_with_players(1)
    with pytest.raises(InvalidIndex):
        set_score(ledger, 1, 0, 4)
    with pytest.raises(InvalidIndex):
        set_score(ledger, 0, 18, 4)


def test_total_ignores_blank_and_junk_cells():
    player = Player(name="Sam", hole_scores=[4, 5, "", 3])
    assert total_for(player) == 12
    assert total_for(Player(name="Lee", hole_scores=["x", -2, "6"])) == 6


def test_remove_and_rename_player():
    ledger = rename_player(_ledger_with_players(2), 1, "Alex")
    assert ledger.players[1].name == "Alex"
    ledger = remove_player(ledger, 0)
    assert [p.name for p in ledger.players] == ["Alex"]
    with pytest.raises(InvalidIndex):
        remove_player(ledger, 3)
    with pytest.raises(InvalidIndex):
        rename_player(ledger, -1, "Nobody")


def test_clear_scores_resets_every_cell():
    ledger = set_score(_ledger_with_players(2), 1, 5, 6)
    cleared = clear_scores(ledger)
    assert all(score == 0 for p in cleared.players for score in p.hole_scores)
    assert [p.name for p in cleared.players] == ["Player 1", "Player 2"]


def test_to_entry_requires_course_and_players():
    with pytest.raises(InvalidInput, match="Please enter a course name."):
        to_entry(add_player(ScorecardLedger(course="  ")))
    with pytest.raises(InvalidInput):
        to_entry(ScorecardLedger(course="Pebble Beach"))


def test_entry_round_trip_normalizes_cells():
    ledger = _ledger_with_players(1)
    ledger = set_score(ledger, 0, 0, "7")
    ledger.players[0].hole_scores[1] = ""
    entry = to_entry(ledger, entry_id="card-1", on=date(2024, 5, 1))
    assert entry.id == "card-1"
    assert entry.players[0].scores[:2] == [7, 0]

    reloaded = from_entry(entry)
    assert reloaded.course == "Pebble Beach"
    assert reloaded.hole_count == 18
    assert reloaded.players[0].hole_scores[:2] == [7, 0]


def test_first_player_adopts_round_hole_count():
    ledger = add_player(ScorecardLedger(course="Nine"), hole_count=9)
    assert ledger.hole_count == 9
    ledger = add_player(ledger)
    assert len(ledger.players[1].hole_scores) == 9
    with pytest.raises(InvalidIndex):
        set_score(ledger, 0, 9, 4)
