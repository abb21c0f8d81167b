"""Player pool utilities (availability filtering, grouping)."""

from .filtering import (
    AvailabilityCriteria,
    PositionFilter,
    filter_available_rows,
    filter_undrafted,
    group_by_position,
    is_drafted,
    top_available_by_position,
)

__all__ = [
    "AvailabilityCriteria",
    "PositionFilter",
    "filter_available_rows",
    "filter_undrafted",
    "group_by_position",
    "is_drafted",
    "top_available_by_position",
]
