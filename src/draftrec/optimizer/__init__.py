"""Lineup recommendation built on the fused ranking tables."""

from .needs import PositionNeeds, calculate_position_needs
from .service import (
    RANKING_FIELDS,
    build_lineup,
    classify_owned,
    determine_recommended_roster,
    fuse_rankings,
    order_slots,
)

__all__ = [
    "PositionNeeds",
    "RANKING_FIELDS",
    "build_lineup",
    "calculate_position_needs",
    "classify_owned",
    "determine_recommended_roster",
    "fuse_rankings",
    "order_slots",
]
