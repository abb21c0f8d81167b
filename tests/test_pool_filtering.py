from draftrec.models import PickMeta, PlayerWithPick
from draftrec.pool import (
    AvailabilityCriteria,
    filter_available_rows,
    filter_undrafted,
    group_by_position,
    is_drafted,
    top_available_by_position,
)


def _row(player_id: str, position: str = "RB", rank=None, picked: bool = False) -> PlayerWithPick:
    data = {"player_id": player_id, "name": f"Player {player_id}", "position": position}
    if rank is not None:
        data["rank"] = rank
    if picked:
        data["picked"] = PickMeta(overall=1)
    return PlayerWithPick(**data)


def _base() -> list[PlayerWithPick]:
    return [
        _row("b", "WR", rank=2),
        _row("a", "RB", rank=1),
        _row("c", "TE", picked=True),
        _row("d", "QB"),
        _row("e", "RB", rank=3, picked=True),
    ]


def _ids(rows) -> list[str]:
    return [row.player_id for row in rows]


def test_drafted_unranked_survives_unranked_filter():
    out = filter_available_rows(_base(), show_drafted=True, show_unranked=False)

    assert _ids(out) == ["a", "b", "e", "c"]


def test_drafted_excluded_regardless_of_unranked_toggle():
    for show_unranked in (True, False):
        out = filter_available_rows(_base(), show_drafted=False, show_unranked=show_unranked)
        assert "c" not in _ids(out)
        assert "e" not in _ids(out)


def test_show_everything_sorts_unranked_last_stably():
    out = filter_available_rows(_base(), show_drafted=True, show_unranked=True)

    assert _ids(out) == ["a", "b", "e", "c", "d"]


def test_hide_drafted_and_unranked():
    out = filter_available_rows(_base(), AvailabilityCriteria())

    assert _ids(out) == ["a", "b"]


def test_rank_field_does_not_imply_drafted():
    row = _row("x", rank=1)

    assert not is_drafted(row)
    assert filter_undrafted([row, _row("y", picked=True)]) == [row]


def test_position_filter():
    rows = _base()

    assert _ids(filter_available_rows(rows, show_drafted=True, show_unranked=True, position="RB/WR")) == ["a", "b", "e"]
    assert _ids(filter_available_rows(rows, AvailabilityCriteria(show_unranked=True, position="QB"))) == ["d"]


def test_filter_is_idempotent():
    criteria = AvailabilityCriteria(show_drafted=True, show_unranked=False)
    once = filter_available_rows(_base(), criteria)

    assert filter_available_rows(once, criteria) == once


def test_group_and_top_available_by_position():
    groups = group_by_position(_base() + [_row("f", "RB", rank=0.5)])

    assert _ids(groups["RB"]) == ["f", "a", "e"]
    assert groups["K"] == []

    top = top_available_by_position(groups, 2)
    assert _ids(top["RB"]) == ["f", "a"]
    assert top_available_by_position(groups, -1)["RB"] == []
