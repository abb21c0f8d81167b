"""Pydantic models for rows, picks and lineups."""

from .draft import NormalizedPick, PickMeta
from .lineup import EMPTY_POSITION, LineupOutput, LineupSlot
from .player import (
    POSITIONS,
    UNKNOWN_NAME,
    PlayerRow,
    PlayersByPosition,
    PlayerWithPick,
    Position,
    RankedPlayer,
)

__all__ = [
    "EMPTY_POSITION",
    "LineupOutput",
    "LineupSlot",
    "NormalizedPick",
    "PickMeta",
    "POSITIONS",
    "PlayerRow",
    "PlayerWithPick",
    "PlayersByPosition",
    "Position",
    "RankedPlayer",
    "UNKNOWN_NAME",
]
