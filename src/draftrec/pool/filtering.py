"""Helpers for slicing the fused player pool into the visible board."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Literal, Mapping, Optional, Sequence

from draftrec.ingest.common import ensure_list
from draftrec.models import POSITIONS, PlayerRow


PositionFilter = Literal["ALL", "QB", "RB", "WR", "TE", "K", "DEF", "RB/WR"]

UNRANKED_SENTINEL = 1e9


@dataclass(frozen=True)
class AvailabilityCriteria:
    """Visibility toggles for the available-players board."""

    show_drafted: bool = False
    show_unranked: bool = False
    position: PositionFilter = "ALL"


def is_drafted(row: PlayerRow) -> bool:
    # The pick overlay is authoritative; ranking fields never imply drafted.
    return getattr(row, "picked", None) is not None


def filter_undrafted(rows: Iterable[PlayerRow]) -> List[PlayerRow]:
    return [row for row in rows if not is_drafted(row)]


def _rank_key(row: PlayerRow) -> float:
    if row.rank is None:
        return UNRANKED_SENTINEL
    try:
        return float(row.rank)
    except OverflowError:
        return UNRANKED_SENTINEL if row.rank > 0 else -UNRANKED_SENTINEL


def _matches_position(row: PlayerRow, position: PositionFilter) -> bool:
    if position == "ALL":
        return True
    if position == "RB/WR":
        return row.position in {"RB", "WR"}
    return row.position == position


def filter_available_rows(
    rows: Sequence[PlayerRow],
    criteria: Optional[AvailabilityCriteria] = None,
    *,
    show_drafted: Optional[bool] = None,
    show_unranked: Optional[bool] = None,
    position: Optional[PositionFilter] = None,
) -> List[PlayerRow]:
    """Return the visible rows, sorted by rank with unranked rows last.

    The unranked filter runs before the drafted filter: a drafted row with
    no rank survives ``show_unranked=False`` but is still removed by
    ``show_drafted=False``.
    """

    criteria = criteria or AvailabilityCriteria()
    overrides = {
        key: value
        for key, value in (
            ("show_drafted", show_drafted),
            ("show_unranked", show_unranked),
            ("position", position),
        )
        if value is not None
    }
    if overrides:
        criteria = replace(criteria, **overrides)

    filtered = [row for row in ensure_list(rows, "rows") if _matches_position(row, criteria.position)]

    if not criteria.show_unranked:
        filtered = [row for row in filtered if row.rank is not None or is_drafted(row)]

    if not criteria.show_drafted:
        filtered = [row for row in filtered if not is_drafted(row)]

    return sorted(filtered, key=_rank_key)


def group_by_position(rows: Iterable[PlayerRow]) -> Dict[str, List[PlayerRow]]:
    """Bucket rows by position, each bucket rank-sorted with unranked last."""

    groups: Dict[str, List[PlayerRow]] = {position: [] for position in POSITIONS}
    for row in rows:
        if row.position is None:
            continue
        groups[row.position].append(row)
    return {position: sorted(bucket, key=_rank_key) for position, bucket in groups.items()}


def top_available_by_position(
    groups: Mapping[str, Sequence[PlayerRow]],
    limit: int,
) -> Dict[str, List[PlayerRow]]:
    limit = max(0, limit)
    return {position: list(bucket[:limit]) for position, bucket in groups.items()}


__all__ = [
    "AvailabilityCriteria",
    "PositionFilter",
    "UNRANKED_SENTINEL",
    "filter_available_rows",
    "filter_undrafted",
    "group_by_position",
    "is_drafted",
    "top_available_by_position",
]
