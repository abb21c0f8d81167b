"""Input adapters that normalize raw draft-feed and ranking records."""

from .picks import (
    RawPick,
    build_pick_overlay,
    compute_round_pick,
    normalize_pick,
    overlay_picks,
    round_pick_label,
)
from .players import (
    PlayerExtras,
    RawPlayer,
    map_to_player_rows,
    normalize_player_name,
    normalize_position,
)

__all__ = [
    "PlayerExtras",
    "RawPick",
    "RawPlayer",
    "build_pick_overlay",
    "compute_round_pick",
    "map_to_player_rows",
    "normalize_pick",
    "normalize_player_name",
    "normalize_position",
    "overlay_picks",
    "round_pick_label",
]
