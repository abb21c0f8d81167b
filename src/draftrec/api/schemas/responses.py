from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from draftrec.models import LineupOutput, PlayerWithPick


class DraftViewModelResponse(BaseModel):
    available: List[PlayerWithPick]
    my_players: List[PlayerWithPick]
    top_available: Dict[str, List[PlayerWithPick]]
    lineups: LineupOutput
    needs: Dict[str, int]
    position_counts: Dict[str, int]
    picks_made: int
    next_pick: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
