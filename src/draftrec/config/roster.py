"""Roster slot eligibility and league roster presets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple


SLOT_ELIGIBILITY: Mapping[str, Tuple[str, ...]] = {
    "QB": ("QB",),
    "RB": ("RB",),
    "WR": ("WR",),
    "TE": ("TE",),
    "K": ("K",),
    "DEF": ("DEF",),
    "FLEX": ("RB", "WR", "TE"),
    "SUPERFLEX": ("QB", "RB", "WR", "TE"),
    "WR_FLEX": ("WR", "RB"),
    "TE_FLEX": ("TE", "WR", "RB"),
}


def eligible_positions(slot_type: str) -> Tuple[str, ...]:
    """Positions allowed in ``slot_type``; empty for unknown slot types."""

    return SLOT_ELIGIBILITY.get(slot_type, ())


def is_flex_slot(slot_type: str) -> bool:
    return len(eligible_positions(slot_type)) > 1


@dataclass(frozen=True)
class RosterRules:
    name: str
    roster_order: Tuple[str, ...]

    @property
    def slot_positions(self) -> Mapping[str, Tuple[str, ...]]:
        return {slot: eligible_positions(slot) for slot in dict.fromkeys(self.roster_order)}

    @property
    def requirements(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for slot in self.roster_order:
            counts[slot] = counts.get(slot, 0) + 1
        return counts


_ROSTER_RULES: Dict[str, RosterRules] = {
    "STANDARD": RosterRules(
        name="STANDARD",
        roster_order=("QB", "RB", "RB", "WR", "WR", "TE", "FLEX", "K", "DEF"),
    ),
    "SUPERFLEX": RosterRules(
        name="SUPERFLEX",
        roster_order=("QB", "RB", "RB", "WR", "WR", "TE", "FLEX", "SUPERFLEX", "K", "DEF"),
    ),
    "THREE_WR": RosterRules(
        name="THREE_WR",
        roster_order=("QB", "RB", "RB", "WR", "WR", "WR", "TE", "FLEX", "K", "DEF"),
    ),
    "TE_PREMIUM": RosterRules(
        name="TE_PREMIUM",
        roster_order=("QB", "RB", "RB", "WR", "WR", "TE", "TE_FLEX", "FLEX", "K", "DEF"),
    ),
}


def iter_rules() -> Iterable[RosterRules]:
    """Return an iterator of all configured roster presets."""

    return _ROSTER_RULES.values()


def get_rules(name: str) -> RosterRules:
    """Fetch a roster preset by name, raising KeyError if missing."""

    key = name.upper()
    if key not in _ROSTER_RULES:
        raise KeyError(f"No roster rules configured for name={name!r}")
    return _ROSTER_RULES[key]
