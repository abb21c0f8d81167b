"""Command-line interface for draft recommendations from local JSON snapshots."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from draftrec.board import build_draft_board
from draftrec.config_loader import DraftProfile, default_teams, log_level
from draftrec.pool import AvailabilityCriteria


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Recommend draft targets and a starting lineup")
    parser.add_argument("boris_chen", type=Path, help="Path to the primary ranking JSON (list of players)")
    parser.add_argument("--fantasy-pros", type=Path, default=None, help="Optional second ranking JSON")
    parser.add_argument("--picks", type=Path, default=None, help="Draft picks JSON (list of picks)")
    parser.add_argument("--extras", type=Path, default=None, help="Extras JSON keyed by player id or name")
    parser.add_argument(
        "--roster",
        default=None,
        help="Roster preset (e.g., STANDARD, SUPERFLEX) or comma-separated slot types",
    )
    parser.add_argument("--teams", type=int, default=None, help="Number of teams in the league")
    parser.add_argument(
        "--drafter-id",
        action="append",
        default=None,
        help="Roster or user id that identifies your picks (repeatable)",
    )
    parser.add_argument("--show-drafted", action="store_true", default=None, help="Include drafted players")
    parser.add_argument("--show-unranked", action="store_true", default=None, help="Include unranked players")
    parser.add_argument(
        "--position",
        default="ALL",
        choices=["ALL", "QB", "RB", "WR", "TE", "K", "DEF", "RB/WR"],
        help="Restrict the available board to one position",
    )
    parser.add_argument("--top", type=int, default=3, help="Top available players listed per position")
    parser.add_argument("--limit", type=int, default=20, help="Available players to print")
    parser.add_argument("--load-profile", type=Path, help="Load draft profile JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save draft profile JSON", default=None)
    parser.add_argument("--output", type=Path, default=None, help="Write the full board JSON here")
    return parser.parse_args(argv)


def _read_json(path: Optional[Path], default: Any) -> Any:
    if path is None:
        return default
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise SystemExit(f"File not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc


def _build_profile(args: argparse.Namespace) -> DraftProfile:
    profile = DraftProfile.load(args.load_profile) if args.load_profile else DraftProfile()
    if args.teams is not None:
        profile.teams = args.teams
    if profile.teams is None:
        profile.teams = default_teams()
    if args.roster:
        if "," in args.roster:
            profile.roster = [slot.strip().upper() for slot in args.roster.split(",") if slot.strip()]
        else:
            profile.roster = args.roster.strip().upper()
    if args.drafter_id:
        profile.drafter_ids = list(args.drafter_id)
    if args.show_drafted:
        profile.show_drafted = True
    if args.show_unranked:
        profile.show_unranked = True
    return profile


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=log_level(), format="%(levelname)s %(name)s: %(message)s")

    profile = _build_profile(args)
    if args.save_profile:
        profile.save(args.save_profile)
        print(f"Saved draft profile to {args.save_profile}")

    try:
        slot_types = profile.slot_types()
    except KeyError as exc:
        raise SystemExit(str(exc.args[0])) from exc

    try:
        board = build_draft_board(
            picks=_read_json(args.picks, []),
            boris_chen=_read_json(args.boris_chen, []),
            fantasy_pros=_read_json(args.fantasy_pros, []),
            extras=_read_json(args.extras, None),
            slot_types=slot_types,
            drafter_ids=profile.drafter_ids,
            teams=profile.teams,
            criteria=AvailabilityCriteria(
                show_drafted=profile.show_drafted,
                show_unranked=profile.show_unranked,
                position=args.position,
            ),
            top_limit=args.top,
        )
    except (TypeError, ValueError) as exc:
        raise SystemExit(f"Invalid input: {exc}") from exc

    print(f"Picks made: {board.picks_made}  next pick: {board.next_pick}")
    for label, lineup in (("FantasyPros", board.lineups.fantasy_pros), ("Boris Chen", board.lineups.boris_chen)):
        print(f"{label} lineup:")
        for slot in lineup:
            print(f"  {slot.slot:<12} {slot.position:<4} {'-' if slot.is_empty else slot.player_id}")
    open_needs = {slot: count for slot, count in board.needs.needs.items() if count}
    print("Open needs:", ", ".join(f"{slot} x{count}" for slot, count in open_needs.items()) or "none")
    for row in board.available[: max(args.limit, 0)]:
        rank = "-" if row.rank is None else row.rank
        print(f"  {rank!s:>6} {row.position or '-':<4} {row.name} ({row.team or '-'})")

    if args.output:
        args.output.write_text(json.dumps(board.to_dict(), indent=2), encoding="utf-8")
        print(f"Wrote board to {args.output}")


if __name__ == "__main__":
    main()
