"""Remaining roster requirements for a drafting team."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional

from draftrec.config import eligible_positions, is_flex_slot
from draftrec.models import POSITIONS


@dataclass(frozen=True)
class PositionNeeds:
    needs: Dict[str, int]
    counts: Dict[str, int]


def calculate_position_needs(
    requirements: Mapping[str, int],
    positions: Iterable[Optional[str]],
) -> PositionNeeds:
    """Subtract rostered players from slot requirements.

    Each player fills its dedicated slot first, then the first flex-like
    slot (in requirement order) that accepts its position. Needs never go
    below zero; surplus players only show up in ``counts``.
    """

    needs = {slot: max(0, int(count)) for slot, count in requirements.items()}
    counts = {position: 0 for position in POSITIONS}
    flex_slots = [slot for slot in needs if is_flex_slot(slot)]

    for position in positions:
        if position not in counts:
            continue
        counts[position] += 1
        if needs.get(position, 0) > 0:
            needs[position] -= 1
            continue
        for slot in flex_slots:
            if needs[slot] > 0 and position in eligible_positions(slot):
                needs[slot] -= 1
                break

    return PositionNeeds(needs=needs, counts=counts)
