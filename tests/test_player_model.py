import pytest
from pydantic import ValidationError

from draftrec.models import LineupSlot, PickMeta, PlayerRow, PlayersByPosition, PlayerWithPick, RankedPlayer


def test_player_row_is_frozen():
    row = PlayerRow(player_id="p1", name="Test Player", position="RB")

    with pytest.raises((TypeError, ValidationError)):
        row.player_id = "p2"  # type: ignore[misc]


def test_player_row_omits_unset_optional_fields():
    row = PlayerRow(player_id="p1", name="Test Player", position="WR", team=None, bye_week=None)

    assert row.to_dict() == {
        "player_id": "p1",
        "name": "Test Player",
        "position": "WR",
        "team": None,
        "bye_week": None,
    }


def test_pick_meta_serializes_camel_case():
    meta = PickMeta(overall=15, round_pick=5, drafter_id="3")

    assert meta.to_dict() == {"overall": 15, "roundPick": 5, "drafterId": "3"}


def test_player_with_pick_accepts_alias():
    row = PlayerWithPick.model_validate(
        {"player_id": "p1", "name": "A", "picked": {"overall": 1}, "draftedByMe": True}
    )

    assert row.is_drafted
    assert row.drafted_by_me is True
    assert row.picked is not None and row.picked.overall == 1


def test_ranked_player_generic_rank_fills_missing_fields():
    player = RankedPlayer.model_validate({"player_id": "p1", "position": "RB", "rank": 4, "fantasyProsEcr": 9})

    assert player.boris_chen_rank == 4
    assert player.fantasy_pros_ecr == 9


def test_players_by_position_defaults_id_and_position_from_table():
    players = PlayersByPosition.model_validate({"WR": {"w1": {"rank": 2}}, "FLEX": {"ignored": {}}})

    player = players.WR["w1"]
    assert player.player_id == "w1"
    assert player.position == "WR"
    assert players.RB == {}


def test_lineup_slot_dict_uses_player_id_alias():
    slot = LineupSlot(position="-", slot="FLEX1", player_id="empty-FLEX-1")

    assert slot.is_empty
    assert slot.to_dict() == {"position": "-", "slot": "FLEX1", "playerId": "empty-FLEX-1"}
