"""Compose picks, rankings and roster shape into one draft board snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from draftrec.ingest import build_pick_overlay, map_to_player_rows, overlay_picks, round_pick_label
from draftrec.models import LineupOutput, PlayerWithPick
from draftrec.optimizer import PositionNeeds, calculate_position_needs, determine_recommended_roster, fuse_rankings
from draftrec.pool import AvailabilityCriteria, filter_available_rows, filter_undrafted, group_by_position, top_available_by_position


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DraftBoard:
    available: List[PlayerWithPick]
    my_players: List[PlayerWithPick]
    top_available: Dict[str, List[PlayerWithPick]]
    lineups: LineupOutput
    needs: PositionNeeds
    picks_made: int
    next_pick: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "available": [row.to_dict() for row in self.available],
            "myPlayers": [row.to_dict() for row in self.my_players],
            "topAvailable": {
                position: [row.to_dict() for row in rows] for position, rows in self.top_available.items()
            },
            "lineups": self.lineups.to_dict(),
            "needs": dict(self.needs.needs),
            "positionCounts": dict(self.needs.counts),
            "picksMade": self.picks_made,
            "nextPick": self.next_pick,
        }


def _requirements(slot_types: Iterable[str]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for slot in slot_types:
        counts[slot] = counts.get(slot, 0) + 1
    return counts


def build_draft_board(
    *,
    picks: Sequence[Any],
    boris_chen: Sequence[Any],
    fantasy_pros: Sequence[Any] = (),
    extras: Optional[Mapping[str, Any]] = None,
    slot_types: Sequence[str] = (),
    drafter_ids: Iterable[str] = (),
    teams: Optional[int] = None,
    criteria: Optional[AvailabilityCriteria] = None,
    top_limit: int = 3,
) -> DraftBoard:
    """Run the whole recommendation pipeline over one consistent snapshot.

    ``boris_chen`` rows drive the board (their ``rank`` is the primary
    rank); both sources feed the lineup optimizer.
    """

    drafter_ids = [str(drafter) for drafter in drafter_ids]
    overlay = build_pick_overlay(picks, teams=teams)
    bc_rows = map_to_player_rows(boris_chen, extras)
    fp_rows = map_to_player_rows(fantasy_pros, extras)

    board_rows = overlay_picks(bc_rows, overlay, my_drafter_ids=drafter_ids)
    available = filter_available_rows(board_rows, criteria)
    my_players = [row for row in board_rows if row.drafted_by_me]

    mine = set(drafter_ids)
    owned_ids = [
        player_id
        for player_id, meta in overlay.items()
        if meta.drafter_id is not None and meta.drafter_id in mine
    ]
    lineups = determine_recommended_roster(owned_ids, fuse_rankings(bc_rows, fp_rows), slot_types)
    needs = calculate_position_needs(_requirements(slot_types), (row.position for row in my_players))

    ranked_undrafted = [row for row in filter_undrafted(board_rows) if row.rank is not None]
    top_available = top_available_by_position(group_by_position(ranked_undrafted), top_limit)

    logger.debug("Built draft board: %d picks, %d available, %d owned", len(overlay), len(available), len(owned_ids))
    return DraftBoard(
        available=available,
        my_players=my_players,
        top_available=top_available,
        lineups=lineups,
        needs=needs,
        picks_made=len(overlay),
        next_pick=round_pick_label(len(overlay) + 1, teams),
    )
