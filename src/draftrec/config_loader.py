"""Persist and load CLI draft profiles."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from draftrec.config import get_rules


logger = logging.getLogger(__name__)

_DEFAULT_TEAMS_ENV = "DRAFTREC_DEFAULT_TEAMS"
_LOG_LEVEL_ENV = "DRAFTREC_LOG_LEVEL"


def _env_int(name: str, default: Optional[int], *, min_value: Optional[int] = None) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %s", name, raw, default)
        return default
    if min_value is not None and value < min_value:
        logger.warning("%s must be at least %d, got %d; using default %s", name, min_value, value, default)
        return default
    return value


def default_teams() -> Optional[int]:
    return _env_int(_DEFAULT_TEAMS_ENV, None, min_value=1)


def log_level() -> str:
    return os.getenv(_LOG_LEVEL_ENV, "WARNING").upper()


@dataclass
class DraftProfile:
    teams: Optional[int] = None
    roster: Union[str, List[str]] = "STANDARD"
    drafter_ids: List[str] = field(default_factory=list)
    show_drafted: bool = False
    show_unranked: bool = False

    def slot_types(self) -> Tuple[str, ...]:
        """Resolve ``roster`` as a preset name or an explicit slot list."""

        if isinstance(self.roster, str):
            return get_rules(self.roster).roster_order
        return tuple(self.roster)

    @classmethod
    def load(cls, path: Path) -> "DraftProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            teams=data.get("teams"),
            roster=data.get("roster", "STANDARD"),
            drafter_ids=[str(value) for value in data.get("drafter_ids", [])],
            show_drafted=bool(data.get("show_drafted", False)),
            show_unranked=bool(data.get("show_unranked", False)),
        )

    def save(self, path: Path) -> None:
        payload = {
            "teams": self.teams,
            "roster": self.roster,
            "drafter_ids": self.drafter_ids,
            "show_drafted": self.show_drafted,
            "show_unranked": self.show_unranked,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
