"""Normalize draft-feed pick records and overlay them on player rows."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from draftrec.models import NormalizedPick, PickMeta, PlayerRow, PlayerWithPick

from .common import as_id, coerce_number, ensure_list, first_present


logger = logging.getLogger(__name__)


class RawPickMetadata(BaseModel):
    player_id: Optional[Union[str, int]] = None
    timestamp: Optional[Union[int, float, str]] = None

    model_config = ConfigDict(extra="ignore")


class RawPick(BaseModel):
    """Superset of the pick shapes seen across draft feeds."""

    player_id: Optional[Union[str, int]] = None
    round: Optional[int] = Field(default=None, gt=0)
    pick_no: Optional[int] = Field(default=None, gt=0)
    pick: Optional[int] = Field(default=None, gt=0)
    overall: Optional[int] = Field(default=None, gt=0)
    pick_in_round: Optional[int] = Field(default=None, gt=0)
    draft_slot: Optional[int] = Field(default=None, gt=0)
    slot: Optional[int] = Field(default=None, gt=0)
    picked_by: Optional[str] = None
    roster_id: Optional[Union[int, str]] = None
    user_id: Optional[str] = None
    metadata: Optional[RawPickMetadata] = None

    model_config = ConfigDict(extra="ignore")


def normalize_pick(raw: Any, *, teams: Optional[int] = None) -> Optional[NormalizedPick]:
    """Convert one raw pick into a :class:`NormalizedPick`.

    Returns ``None`` when the record does not validate or carries no player
    id (e.g. a forfeited pick). ``overall`` is taken from the first explicit
    global pick number, or derived from ``round``/in-round position when
    ``teams`` is known; it is never guessed.
    """

    try:
        pick = RawPick.model_validate(raw)
    except ValidationError as exc:
        logger.debug("Dropping unparseable pick %r: %s", raw, exc.errors())
        return None

    metadata = pick.metadata or RawPickMetadata()
    player_id = as_id(pick.player_id) or as_id(metadata.player_id)
    if player_id is None:
        return None

    round_number = pick.round
    round_pick = first_present(pick.pick_in_round, pick.draft_slot, pick.slot)

    overall = first_present(pick.pick_no, pick.pick, pick.overall)
    if overall is None and round_number and round_pick and teams and teams > 0:
        overall = (round_number - 1) * teams + round_pick

    drafter_id = first_present(as_id(pick.picked_by), as_id(pick.roster_id), pick.user_id)

    resolved = {
        "overall": overall,
        "round": round_number,
        "round_pick": round_pick,
        "drafter_id": drafter_id,
        "slot": first_present(pick.draft_slot, pick.slot),
        "ts": coerce_number(metadata.timestamp),
    }
    meta = PickMeta(**{key: value for key, value in resolved.items() if value is not None})
    return NormalizedPick(player_id=player_id, meta=meta)


def build_pick_overlay(raw_picks: Sequence[Any], *, teams: Optional[int] = None) -> Dict[str, PickMeta]:
    """Map player id to pick metadata; a later pick for the same player wins."""

    overlay: Dict[str, PickMeta] = {}
    dropped = 0
    for raw in ensure_list(raw_picks, "raw_picks"):
        normalized = normalize_pick(raw, teams=teams)
        if normalized is None:
            dropped += 1
            continue
        overlay[normalized.player_id] = normalized.meta
    logger.debug("Built pick overlay with %d picks (%d dropped)", len(overlay), dropped)
    return overlay


def overlay_picks(
    rows: Iterable[PlayerRow],
    overlay: Mapping[str, PickMeta],
    *,
    my_drafter_ids: Iterable[str] = (),
) -> List[PlayerWithPick]:
    """Attach the authoritative pick (if any) to every fused row."""

    mine = {str(drafter) for drafter in my_drafter_ids}
    result: List[PlayerWithPick] = []
    for row in rows:
        picked = overlay.get(row.player_id) if row.player_id else None
        data = row.model_dump(exclude_unset=True)
        if picked is not None:
            data["picked"] = picked
        data["drafted_by_me"] = bool(
            picked is not None and picked.drafter_id is not None and picked.drafter_id in mine
        )
        result.append(PlayerWithPick(**data))
    return result


def compute_round_pick(overall: int, teams: int) -> Tuple[int, int]:
    """Return ``(round, pick_in_round)`` for a global pick number."""

    if not teams or teams <= 0 or not overall or overall <= 0:
        return 0, 0
    round_number = math.ceil(overall / teams)
    pick_in_round = ((overall - 1) % teams) + 1
    return round_number, pick_in_round


def round_pick_label(overall: Optional[int], teams: Optional[int]) -> str:
    """Format a pick as ``R.PP`` (pick zero-padded to the width of ``teams``)."""

    if not overall or not teams:
        return "—"
    round_number, pick_in_round = compute_round_pick(overall, teams)
    if not round_number:
        return "—"
    width = len(str(teams))
    return f"{round_number}.{str(pick_in_round).zfill(width)}"
