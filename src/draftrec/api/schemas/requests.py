from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from draftrec.models import PlayerWithPick
from draftrec.pool import PositionFilter


class _Request(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NormalizePicksRequest(_Request):
    picks: List[Any]
    teams: Optional[int] = Field(default=None, ge=1)


class PlayerRowsRequest(_Request):
    players: List[Any]
    extras: Optional[Dict[str, Any]] = None


class AvailableRowsRequest(_Request):
    rows: List[PlayerWithPick]
    show_drafted: bool = False
    show_unranked: bool = False
    position: PositionFilter = "ALL"


class RecommendedLineupRequest(_Request):
    owned_ids: List[str]
    all_players: Dict[str, Any]
    slot_types: List[str] = Field(default_factory=list)


class DraftViewModelRequest(_Request):
    picks: List[Any] = Field(default_factory=list)
    boris_chen: List[Any] = Field(default_factory=list)
    fantasy_pros: List[Any] = Field(default_factory=list)
    extras: Optional[Dict[str, Any]] = None
    roster: Union[str, List[str]] = "STANDARD"
    drafter_ids: List[str] = Field(default_factory=list)
    teams: Optional[int] = Field(default=None, ge=1)
    show_drafted: bool = False
    show_unranked: bool = False
    position: PositionFilter = "ALL"
    top_limit: int = Field(default=3, ge=0, le=50)
