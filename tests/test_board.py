from draftrec.board import build_draft_board
from draftrec.pool import AvailabilityCriteria


BORIS_CHEN = [
    {"player_id": "1", "name": "Quinn Passer", "position": "QB", "team": "buf", "rank": 1},
    {"player_id": "2", "name": "Rob Runner", "position": "RB", "rank": 2},
    {"player_id": "3", "name": "Wes Wideout", "position": "WR", "rank": 3},
    {"player_id": "4", "name": "Ty Tight", "position": "TE", "rank": 4},
    {"player_id": "5", "name": "Ray Reserve", "position": "RB"},
]
FANTASY_PROS = [
    {"player_id": "2", "name": "Rob Runner", "position": "RB", "rank": 1},
    {"player_id": "3", "name": "Wes Wideout", "position": "WR", "rank": 5},
]
PICKS = [
    {"player_id": "2", "round": 1, "pick_in_round": 1, "roster_id": 7},
    {"player_id": "1", "round": 1, "pick_in_round": 2, "roster_id": 3},
    {"round": 1, "pick_in_round": 3},
]


def _board(**overrides):
    kwargs = dict(
        picks=PICKS,
        boris_chen=BORIS_CHEN,
        fantasy_pros=FANTASY_PROS,
        slot_types=["QB", "RB", "FLEX"],
        drafter_ids=["7"],
        teams=10,
    )
    kwargs.update(overrides)
    return build_draft_board(**kwargs)


def test_board_hides_drafted_and_unranked_by_default():
    board = _board()

    assert [row.player_id for row in board.available] == ["3", "4"]
    assert board.picks_made == 2
    assert board.next_pick == "1.03"


def test_board_marks_my_players_and_lineups():
    board = _board()

    assert [row.player_id for row in board.my_players] == ["2"]
    assert board.my_players[0].drafted_by_me
    assert [(slot.slot, slot.player_id) for slot in board.lineups.boris_chen] == [
        ("QB1", "empty-QB-1"),
        ("RB1", "2"),
        ("FLEX1", "empty-FLEX-1"),
    ]
    assert board.needs.needs == {"QB": 1, "RB": 0, "FLEX": 1}
    assert board.needs.counts["RB"] == 1


def test_board_top_available_skips_drafted_and_unranked():
    board = _board(top_limit=1)

    assert [row.player_id for row in board.top_available["WR"]] == ["3"]
    assert board.top_available["RB"] == []
    assert board.top_available["QB"] == []


def test_board_respects_criteria():
    board = _board(criteria=AvailabilityCriteria(show_drafted=True, show_unranked=True, position="RB"))

    assert [row.player_id for row in board.available] == ["2", "5"]


def test_board_to_dict_uses_wire_keys():
    data = _board().to_dict()

    assert set(data) == {
        "available",
        "myPlayers",
        "topAvailable",
        "lineups",
        "needs",
        "positionCounts",
        "picksMade",
        "nextPick",
    }
    assert data["myPlayers"][0]["picked"] == {"overall": 1, "round": 1, "roundPick": 1, "drafterId": "7"}
    assert data["myPlayers"][0]["draftedByMe"] is True
    assert data["lineups"]["fantasyPros"][1] == {"position": "RB", "slot": "RB1", "playerId": "2"}


def test_board_without_team_count_has_no_next_pick():
    board = _board(teams=None)

    assert board.next_pick == "—"
    assert board.my_players[0].picked.overall is None
