"""Canonical player models shared across ingestion, pool and optimizer layers."""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from .draft import PickMeta


Position = Literal["QB", "RB", "WR", "TE", "K", "DEF"]
POSITIONS: Tuple[Position, ...] = ("QB", "RB", "WR", "TE", "K", "DEF")

Number = Union[int, float]

UNKNOWN_NAME = "—"


class PlayerRow(BaseModel):
    """Fused per-player row built from one raw ranking record.

    Optional ranking and provenance fields are only *set* when a source
    supplied them, so ``to_dict`` omits them instead of emitting nulls.
    """

    player_id: str = ""
    name: str = UNKNOWN_NAME
    position: Optional[Position] = None
    team: Optional[str] = None
    bye_week: Optional[int] = Field(default=None, ge=1, le=18)
    rank: Optional[Number] = None
    tier: Optional[Number] = None
    val: Optional[Number] = None
    ps: Optional[Number] = None
    ecr_round_pick: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


class PlayerWithPick(PlayerRow):
    """A fused row overlaid with the draft pick that took the player, if any."""

    picked: Optional[PickMeta] = None
    drafted_by_me: bool = Field(default=False, alias="draftedByMe")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def is_drafted(self) -> bool:
        return self.picked is not None


class RankedPlayer(BaseModel):
    """Optimizer input: one player with both ranking fields."""

    player_id: str = Field(..., min_length=1)
    position: Position
    boris_chen_rank: Optional[Number] = None
    fantasy_pros_ecr: Optional[Number] = None

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _fill_from_generic_rank(cls, data: Any) -> Any:
        # A bare ``rank`` stands in for whichever ranking field is absent.
        if not isinstance(data, dict) or data.get("rank") is None:
            return data
        data = dict(data)
        rank = data.pop("rank")
        for snake, camel in (
            ("boris_chen_rank", "borisChenRank"),
            ("fantasy_pros_ecr", "fantasyProsEcr"),
        ):
            if data.get(snake) is None and data.get(camel) is None:
                data[camel] = rank
        return data


class PlayersByPosition(BaseModel):
    """Every known player, one fixed table per position keyed by player id."""

    QB: Dict[str, RankedPlayer] = Field(default_factory=dict)
    RB: Dict[str, RankedPlayer] = Field(default_factory=dict)
    WR: Dict[str, RankedPlayer] = Field(default_factory=dict)
    TE: Dict[str, RankedPlayer] = Field(default_factory=dict)
    K: Dict[str, RankedPlayer] = Field(default_factory=dict)
    DEF: Dict[str, RankedPlayer] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _default_ids_and_positions(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        filled: Dict[str, Any] = dict(data)
        for position in POSITIONS:
            table = data.get(position)
            if not isinstance(table, dict):
                continue
            entries: Dict[str, Any] = {}
            for player_id, player in table.items():
                if isinstance(player, dict):
                    player = {"player_id": player_id, "position": position, **player}
                entries[player_id] = player
            filled[position] = entries
        return filled

    def table(self, position: Position) -> Dict[str, RankedPlayer]:
        return getattr(self, position)
