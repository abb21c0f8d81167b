"""REST API for the draft recommendation engine."""

from __future__ import annotations

import logging
from typing import Any, List

from fastapi import FastAPI, HTTPException

from draftrec.api.schemas import (
    AvailableRowsRequest,
    DraftViewModelRequest,
    DraftViewModelResponse,
    NormalizePicksRequest,
    PlayerRowsRequest,
    RecommendedLineupRequest,
)
from draftrec.board import build_draft_board
from draftrec.config import get_rules
from draftrec.ingest import map_to_player_rows, normalize_pick
from draftrec.models import LineupOutput, NormalizedPick, PlayerRow, PlayerWithPick
from draftrec.optimizer import determine_recommended_roster
from draftrec.pool import AvailabilityCriteria, filter_available_rows


logger = logging.getLogger(__name__)


def _resolve_slot_types(roster: Any) -> List[str]:
    if isinstance(roster, str):
        try:
            return list(get_rules(roster).roster_order)
        except KeyError as exc:
            raise HTTPException(status_code=400, detail=str(exc.args[0])) from exc
    return list(roster)


def create_app() -> FastAPI:
    app = FastAPI(title="draftrec recommendation engine")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(
        "/picks/normalize",
        response_model=List[NormalizedPick],
        response_model_exclude_unset=True,
    )
    async def normalize_picks(payload: NormalizePicksRequest) -> List[NormalizedPick]:
        normalized = [normalize_pick(raw, teams=payload.teams) for raw in payload.picks]
        return [pick for pick in normalized if pick is not None]

    @app.post(
        "/players/rows",
        response_model=List[PlayerRow],
        response_model_exclude_unset=True,
    )
    async def player_rows(payload: PlayerRowsRequest) -> List[PlayerRow]:
        return map_to_player_rows(payload.players, payload.extras)

    @app.post(
        "/players/available",
        response_model=List[PlayerWithPick],
        response_model_exclude_unset=True,
    )
    async def available_rows(payload: AvailableRowsRequest) -> List[PlayerRow]:
        criteria = AvailabilityCriteria(
            show_drafted=payload.show_drafted,
            show_unranked=payload.show_unranked,
            position=payload.position,
        )
        return filter_available_rows(payload.rows, criteria)

    @app.post("/lineups/recommended", response_model=LineupOutput)
    async def recommended_lineups(payload: RecommendedLineupRequest) -> LineupOutput:
        try:
            return determine_recommended_roster(payload.owned_ids, payload.all_players, payload.slot_types)
        except (TypeError, ValueError) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post(
        "/draft/view-model",
        response_model=DraftViewModelResponse,
        response_model_exclude_unset=True,
    )
    async def draft_view_model(payload: DraftViewModelRequest) -> DraftViewModelResponse:
        slot_types = _resolve_slot_types(payload.roster)
        try:
            board = build_draft_board(
                picks=payload.picks,
                boris_chen=payload.boris_chen,
                fantasy_pros=payload.fantasy_pros,
                extras=payload.extras,
                slot_types=slot_types,
                drafter_ids=payload.drafter_ids,
                teams=payload.teams,
                criteria=AvailabilityCriteria(
                    show_drafted=payload.show_drafted,
                    show_unranked=payload.show_unranked,
                    position=payload.position,
                ),
                top_limit=payload.top_limit,
            )
        except (TypeError, ValueError) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        logger.info("View model: %d picks made, next pick %s", board.picks_made, board.next_pick)
        return DraftViewModelResponse.model_validate(board.to_dict())

    return app
