"""Draft pick models produced by the pick normalizer."""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class PickMeta(BaseModel):
    """Canonical metadata for one draft pick; only resolved fields are set."""

    overall: Optional[int] = Field(default=None, gt=0)
    round: Optional[int] = Field(default=None, gt=0)
    round_pick: Optional[int] = Field(default=None, gt=0)
    drafter_id: Optional[str] = None
    slot: Optional[int] = Field(default=None, gt=0)
    ts: Optional[Union[int, float]] = None

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


class NormalizedPick(BaseModel):
    player_id: str = Field(..., min_length=1)
    meta: PickMeta

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)
