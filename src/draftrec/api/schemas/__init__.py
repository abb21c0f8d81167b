"""Pydantic models for API I/O."""

from .requests import (
    AvailableRowsRequest,
    DraftViewModelRequest,
    NormalizePicksRequest,
    PlayerRowsRequest,
    RecommendedLineupRequest,
)
from .responses import DraftViewModelResponse

__all__ = [
    "AvailableRowsRequest",
    "DraftViewModelRequest",
    "DraftViewModelResponse",
    "NormalizePicksRequest",
    "PlayerRowsRequest",
    "RecommendedLineupRequest",
]
