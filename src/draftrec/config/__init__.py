"""Configuration helpers for roster slots and presets."""

from .roster import (
    SLOT_ELIGIBILITY,
    RosterRules,
    eligible_positions,
    get_rules,
    is_flex_slot,
    iter_rules,
)

__all__ = [
    "SLOT_ELIGIBILITY",
    "RosterRules",
    "eligible_positions",
    "get_rules",
    "is_flex_slot",
    "iter_rules",
]
