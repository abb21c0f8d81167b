"""Greedy, eligibility-aware starting lineup recommendation."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping as MappingABC
from typing import Any, Callable, Dict, Iterable, List, Mapping, Sequence, Set, Tuple, Union

from pydantic import ValidationError

from draftrec.config import eligible_positions, is_flex_slot
from draftrec.ingest.common import ensure_list
from draftrec.models import (
    EMPTY_POSITION,
    POSITIONS,
    LineupOutput,
    LineupSlot,
    PlayerRow,
    PlayersByPosition,
    RankedPlayer,
)


logger = logging.getLogger(__name__)

# Primary ranking field per lineup, paired with its tie-break field.
RANKING_FIELDS: Mapping[str, Tuple[str, str]] = {
    "fantasy_pros": ("fantasy_pros_ecr", "boris_chen_rank"),
    "boris_chen": ("boris_chen_rank", "fantasy_pros_ecr"),
}


def _rank_or_inf(value: Union[int, float, None]) -> float:
    if value is None:
        return math.inf
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _candidate_key(primary: str, secondary: str) -> Callable[[RankedPlayer], Tuple[float, float, str]]:
    def key(player: RankedPlayer) -> Tuple[float, float, str]:
        return (
            _rank_or_inf(getattr(player, primary)),
            _rank_or_inf(getattr(player, secondary)),
            player.player_id,
        )

    return key


def order_slots(slot_types: Iterable[str]) -> List[str]:
    """Stable reorder putting single-position (and unknown) slots before flex-like ones."""

    slots = list(slot_types)
    return [slot for slot in slots if not is_flex_slot(slot)] + [slot for slot in slots if is_flex_slot(slot)]


def _coerce_table(position: str, table: Any) -> Dict[str, RankedPlayer]:
    if not isinstance(table, MappingABC):
        raise TypeError(f"{position} table must be a mapping of player id to player, got {type(table).__name__}")
    players: Dict[str, RankedPlayer] = {}
    for player_id, entry in table.items():
        if isinstance(entry, RankedPlayer):
            players[player_id] = entry
            continue
        if isinstance(entry, MappingABC):
            entry = {"player_id": player_id, "position": position, **entry}
        try:
            players[player_id] = RankedPlayer.model_validate(entry)
        except ValidationError as exc:
            logger.debug("Dropping unparseable %s entry %r: %s", position, player_id, exc.errors())
    return players


def _coerce_players(all_players: Any) -> PlayersByPosition:
    """Build position tables, skipping entries that fail validation."""

    if isinstance(all_players, PlayersByPosition):
        return all_players
    if not isinstance(all_players, MappingABC):
        raise TypeError(f"all_players must be a mapping of position tables, got {type(all_players).__name__}")
    tables = {
        position: _coerce_table(position, all_players[position])
        for position in POSITIONS
        if all_players.get(position) is not None
    }
    return PlayersByPosition(**tables)


def classify_owned(owned_ids: Iterable[str], players: PlayersByPosition) -> Dict[str, List[RankedPlayer]]:
    """Bucket owned players by the first position table (QB..DEF) listing them."""

    buckets: Dict[str, List[RankedPlayer]] = {position: [] for position in POSITIONS}
    for player_id in owned_ids:
        for position in POSITIONS:
            player = players.table(position).get(player_id)
            if player is not None:
                buckets[position].append(player)
                break
        else:
            logger.debug("Owned player %s not found in any position table", player_id)
    return buckets


def _placeholder(slot_type: str, occurrence: int) -> LineupSlot:
    return LineupSlot(
        position=EMPTY_POSITION,
        slot=f"{slot_type}{occurrence}",
        player_id=f"empty-{slot_type}-{occurrence}",
    )


def build_lineup(
    buckets: Mapping[str, Sequence[RankedPlayer]],
    ordered_slots: Sequence[str],
    ranking: str,
) -> List[LineupSlot]:
    """Fill ``ordered_slots`` in order with the best unused eligible player."""

    primary, secondary = RANKING_FIELDS[ranking]
    sort_key = _candidate_key(primary, secondary)
    used: Set[str] = set()
    counters: Dict[str, int] = {}
    lineup: List[LineupSlot] = []

    for slot_type in ordered_slots:
        counters[slot_type] = counters.get(slot_type, 0) + 1
        occurrence = counters[slot_type]

        candidates = [
            player
            for position in eligible_positions(slot_type)
            for player in buckets.get(position, ())
            if player.player_id not in used
        ]
        if not candidates:
            lineup.append(_placeholder(slot_type, occurrence))
            continue

        best = min(candidates, key=sort_key)
        used.add(best.player_id)
        lineup.append(
            LineupSlot(
                position=best.position,
                slot=f"{slot_type}{occurrence}",
                player_id=best.player_id,
            )
        )
    return lineup


def determine_recommended_roster(
    owned_ids: Sequence[str],
    all_players: Union[PlayersByPosition, Mapping[str, Any]],
    slot_types: Sequence[str] = (),
) -> LineupOutput:
    """Recommend a starting lineup for each ranking source.

    Dedicated slots are allocated before flex-like slots and the returned
    lineups follow that allocation order. Slots nobody can fill, and slot
    types with no eligibility definition, get an ``empty-<slot>-<n>``
    placeholder so both lineups always have one entry per slot.
    """

    owned = ensure_list(owned_ids, "owned_ids")
    slots = ensure_list(slot_types, "slot_types")
    players = _coerce_players(all_players)

    buckets = classify_owned((str(player_id) for player_id in owned), players)
    ordered = order_slots(str(slot) for slot in slots)

    output = LineupOutput(
        fantasy_pros=build_lineup(buckets, ordered, "fantasy_pros"),
        boris_chen=build_lineup(buckets, ordered, "boris_chen"),
    )
    logger.debug(
        "Recommended lineups for %d owned players across %d slots",
        sum(len(bucket) for bucket in buckets.values()),
        len(ordered),
    )
    return output


def fuse_rankings(
    boris_chen_rows: Iterable[PlayerRow],
    fantasy_pros_rows: Iterable[PlayerRow],
) -> PlayersByPosition:
    """Merge two fused-row sources into per-position optimizer tables."""

    merged: Dict[str, Dict[str, Any]] = {}
    for rows, field in ((boris_chen_rows, "boris_chen_rank"), (fantasy_pros_rows, "fantasy_pros_ecr")):
        for row in rows:
            if not row.player_id:
                continue
            entry = merged.setdefault(row.player_id, {"player_id": row.player_id, "position": None})
            if entry["position"] is None:
                entry["position"] = row.position
            if entry.get(field) is None and row.rank is not None:
                entry[field] = row.rank

    tables: Dict[str, Dict[str, RankedPlayer]] = {position: {} for position in POSITIONS}
    for player_id, entry in merged.items():
        if entry["position"] is None:
            logger.debug("Skipping %s: no recognised position in any source", player_id)
            continue
        tables[entry["position"]][player_id] = RankedPlayer(**entry)
    return PlayersByPosition(**tables)
