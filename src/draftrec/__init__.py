"""Real-time fantasy draft recommendation engine."""

from draftrec.ingest import map_to_player_rows, normalize_pick
from draftrec.optimizer import determine_recommended_roster
from draftrec.pool import filter_available_rows

__version__ = "0.1.0"

__all__ = [
    "determine_recommended_roster",
    "filter_available_rows",
    "map_to_player_rows",
    "normalize_pick",
]
