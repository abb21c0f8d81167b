"""Lineup models returned by the recommendation optimizer."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from .player import Position


EMPTY_POSITION = "-"


class LineupSlot(BaseModel):
    position: Union[Position, Literal["-"]]
    slot: str
    player_id: str

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @property
    def is_empty(self) -> bool:
        return self.position == EMPTY_POSITION

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class LineupOutput(BaseModel):
    """One lineup per ranking source, each aligned with the allocated slot order."""

    fantasy_pros: List[LineupSlot] = Field(default_factory=list)
    boris_chen: List[LineupSlot] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
