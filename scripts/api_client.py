"""Lightweight REST client for the draftrec API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

import httpx


def _load(path: Path | None, default: Any) -> Any:
    if path is None:
        return default
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the draftrec REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("boris_chen", type=Path, help="Primary ranking JSON")
    parser.add_argument("--fantasy-pros", type=Path, help="Second ranking JSON")
    parser.add_argument("--picks", type=Path, help="Draft picks JSON")
    parser.add_argument("--extras", type=Path, help="Extras JSON keyed by player id or name")
    parser.add_argument("--roster", default="STANDARD", help="Roster preset or comma-separated slot types")
    parser.add_argument("--teams", type=int, default=None, help="Number of teams in the league")
    parser.add_argument("--drafter-id", action="append", default=[], help="Your roster or user id")
    parser.add_argument("--show-drafted", action="store_true", help="Include drafted players")
    parser.add_argument("--show-unranked", action="store_true", help="Include unranked players")
    args = parser.parse_args()

    roster: str | list[str] = args.roster
    if "," in args.roster:
        roster = [slot.strip() for slot in args.roster.split(",") if slot.strip()]

    payload = {
        "picks": _load(args.picks, []),
        "borisChen": _load(args.boris_chen, []),
        "fantasyPros": _load(args.fantasy_pros, []),
        "extras": _load(args.extras, None),
        "roster": roster,
        "drafterIds": args.drafter_id,
        "teams": args.teams,
        "showDrafted": args.show_drafted,
        "showUnranked": args.show_unranked,
    }

    with httpx.Client(base_url=args.base_url) as client:
        resp = client.post("/draft/view-model", json=payload)
        if resp.status_code == 400:
            raise SystemExit(f"Request rejected: {resp.json().get('detail')}")
        resp.raise_for_status()
        board = resp.json()

    print(f"Picks made: {board['picksMade']}  next pick: {board['nextPick']}")
    print(json.dumps(board["lineups"], indent=2))
    print(f"{len(board['available'])} players available")


if __name__ == "__main__":
    main()
