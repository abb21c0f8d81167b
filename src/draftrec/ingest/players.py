"""Fuse heterogeneous ranking records into canonical player rows."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ValidationError
from pydantic.config import ConfigDict

from draftrec.models import POSITIONS, UNKNOWN_NAME, PlayerRow, Position

from .common import as_id, coerce_number, ensure_list, first_present


logger = logging.getLogger(__name__)

RawNumber = Optional[Union[int, float, str]]
RawId = Optional[Union[str, int]]

_NAME_SUFFIX_TOKENS = {"jr", "sr", "ii", "iii", "iv", "v"}
_NAME_ALIASES = {
    "elijah mitchell": "eli mitchell",
    "ken walker": "kenneth walker",
    "hollywood brown": "marquise brown",
    "chigoziem okonkwo": "chig okonkwo",
    "gabriel davis": "gabe davis",
}
_POSITION_ALIASES = {
    "DST": "DEF",
    "D/ST": "DEF",
    "D": "DEF",
    "DEFENSE": "DEF",
    "PK": "K",
}


class RawNestedPlayer(BaseModel):
    id: RawId = None
    full_name: Optional[str] = None
    position: Optional[str] = None
    rank: RawNumber = None
    tier: RawNumber = None
    team: Optional[str] = None
    bye_week: RawNumber = None

    model_config = ConfigDict(extra="ignore")


class RawPlayer(BaseModel):
    """Union of the flat, nested and drafted-player shapes."""

    player_id: RawId = None
    id: RawId = None
    name: Optional[str] = None
    full_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    position: Optional[str] = None
    pos: Optional[str] = None
    rank: RawNumber = None
    tier: RawNumber = None
    team: Optional[str] = None
    pro_team: Optional[str] = None
    nfl_team: Optional[str] = None
    bye_week: RawNumber = None
    bye: RawNumber = None
    val: RawNumber = None
    ps: RawNumber = None
    ecr_round_pick: Optional[str] = None
    player: Optional[RawNestedPlayer] = None

    model_config = ConfigDict(extra="ignore")


class PlayerExtras(BaseModel):
    val: RawNumber = None
    ps: RawNumber = None
    ecr_round_pick: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


def normalize_player_name(name: str) -> str:
    """Case, whitespace and punctuation insensitive key for a player name."""

    lowered = name.lower()
    cleaned = re.sub(r"[.']", "", lowered)
    cleaned = re.sub(r"[^a-z0-9]+", " ", cleaned)
    tokens = [tok for tok in cleaned.split() if tok and tok not in _NAME_SUFFIX_TOKENS]
    joined = " ".join(tokens)
    joined = _NAME_ALIASES.get(joined, joined)
    return joined.replace(" ", "")


def normalize_position(position: Optional[str]) -> Optional[Position]:
    if not position:
        return None
    token = position.strip().upper()
    token = _POSITION_ALIASES.get(token, token)
    if token in POSITIONS:
        return token  # type: ignore[return-value]
    return None


def _text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    text = value.strip()
    return text or None


def _resolve_name(raw: RawPlayer, nested: RawNestedPlayer) -> str:
    name = first_present(_text(raw.name), _text(raw.full_name), _text(nested.full_name))
    if name is not None:
        return name
    first, last = _text(raw.first_name), _text(raw.last_name)
    if first and last:
        return f"{first} {last}"
    return UNKNOWN_NAME


def _parse_bye(value: RawNumber) -> Optional[int]:
    number = coerce_number(value)
    if number is None or float(number) != int(number):
        return None
    week = int(number)
    return week if 1 <= week <= 18 else None


def _build_extras_index(extras: Mapping[str, Any]) -> Dict[str, Any]:
    index: Dict[str, Any] = {}
    for key, value in extras.items():
        index.setdefault(normalize_player_name(str(key)), value)
    return index


def _lookup_extras(
    player_id: str,
    name: str,
    extras: Mapping[str, Any],
    by_name: Mapping[str, Any],
) -> Optional[PlayerExtras]:
    candidates = []
    if player_id:
        candidates.append(extras.get(player_id))
    if name != UNKNOWN_NAME:
        candidates.append(by_name.get(normalize_player_name(name)))

    for found in candidates:
        if found is None:
            continue
        if isinstance(found, PlayerExtras):
            return found
        try:
            return PlayerExtras.model_validate(found)
        except ValidationError as exc:
            logger.debug("Ignoring malformed extras for %s: %s", player_id or name, exc.errors())
    return None


def _fuse_row(raw: RawPlayer, extras: Mapping[str, Any], by_name: Mapping[str, Any]) -> PlayerRow:
    nested = raw.player or RawNestedPlayer()
    name = _resolve_name(raw, nested)
    player_id = first_present(as_id(raw.player_id), as_id(raw.id), as_id(nested.id)) or ""
    team = first_present(_text(raw.team), _text(raw.pro_team), _text(raw.nfl_team), _text(nested.team))

    data: Dict[str, Any] = {
        "player_id": player_id,
        "name": name,
        "position": normalize_position(first_present(raw.position, raw.pos, nested.position)),
        "team": team,
        "bye_week": _parse_bye(first_present(raw.bye_week, raw.bye, nested.bye_week)),
    }

    optional = {
        "rank": coerce_number(first_present(raw.rank, nested.rank)),
        "tier": coerce_number(first_present(raw.tier, nested.tier)),
        "val": coerce_number(raw.val),
        "ps": coerce_number(raw.ps),
        "ecr_round_pick": _text(raw.ecr_round_pick),
    }
    found = _lookup_extras(player_id, name, extras, by_name) if extras else None
    if found is not None:
        if _text(found.ecr_round_pick):
            optional["ecr_round_pick"] = _text(found.ecr_round_pick)
        if coerce_number(found.val) is not None:
            optional["val"] = coerce_number(found.val)
        if coerce_number(found.ps) is not None:
            optional["ps"] = coerce_number(found.ps)

    data.update({key: value for key, value in optional.items() if value is not None})
    return PlayerRow(**data)


def map_to_player_rows(
    raw_players: Sequence[Any],
    extras: Optional[Mapping[str, Any]] = None,
) -> List[PlayerRow]:
    """Convert player-like records from any ranking source into :class:`PlayerRow`.

    Records matching none of the recognised shapes are skipped; order of the
    remaining rows is preserved. ``extras`` is keyed by player id or player
    name; an id match wins over a name match.
    """

    extras = extras or {}
    by_name = _build_extras_index(extras) if extras else {}
    rows: List[PlayerRow] = []
    dropped = 0
    for raw in ensure_list(raw_players, "raw_players"):
        if isinstance(raw, BaseModel):
            raw = raw.model_dump(exclude_unset=True)
        try:
            parsed = RawPlayer.model_validate(raw)
        except ValidationError as exc:
            dropped += 1
            logger.debug("Dropping unparseable player record %r: %s", raw, exc.errors())
            continue
        rows.append(_fuse_row(parsed, extras, by_name))
    logger.debug("Fused %d player rows (%d dropped)", len(rows), dropped)
    return rows
