"""
Split a roster into two balanced teams from the command line.

The roster is a JSON list of players: {"id": 1, "skill": 95, "name": "Cesc", "position": "Mid"}.
Accepted splits are recorded in the matchup history so the next run avoids
repeating the same teams.

Usage:
  python make_teams.py --roster sample_roster.json
  python make_teams.py --roster sample_roster.json --ids 1,2,3,4,5,6,7,8
  python make_teams.py --roster sample_roster.json --db-path history.db --seed 7 --dry-run
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys

from config import HISTORY_DB_PATH
from domain.models.player import Player
from infrastructure.service_container import ServiceConfig, ServiceContainer
from services.roster_service import RosterService
from utils.formatting import format_split_summary

logger = logging.getLogger("fair_teams")


def _load_roster(path: str) -> list[Player]:
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return [
        Player(
            id=int(entry["id"]),
            skill=entry["skill"],
            name=entry.get("name"),
            position=entry.get("position"),
        )
        for entry in raw
    ]


def _parse_ids(raw: str) -> list[int]:
    return [int(x.strip()) for x in raw.split(",") if x.strip()]


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(description="Split selected players into two balanced teams.")
    parser.add_argument("--roster", required=True, help="Path to a JSON roster file")
    parser.add_argument("--ids", help="Comma-separated player ids to include (default: whole roster)")
    parser.add_argument("--db-path", default=HISTORY_DB_PATH, help="SQLite matchup history (default: HISTORY_DB_PATH)")
    parser.add_argument("--seed", type=int, help="Seed for tie-breaking, for reproducible output")
    parser.add_argument("--dry-run", action="store_true", help="Show the teams without recording them")
    parser.add_argument("--verbose", action="store_true", help="Log the top candidate splits")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        roster = RosterService(_load_roster(args.roster))
    except (OSError, ValueError, KeyError, TypeError) as exc:
        print(f"Could not read roster {args.roster}: {exc}", file=sys.stderr)
        return 1

    if args.ids:
        try:
            ids = _parse_ids(args.ids)
        except ValueError:
            print(f"Invalid --ids value: {args.ids}", file=sys.stderr)
            return 1
        selection = roster.select(ids)
        if not selection:
            print(selection.error, file=sys.stderr)
            return 1
        players = selection.value
    else:
        players = roster.get_sorted_players()

    container = ServiceContainer(ServiceConfig(db_path=args.db_path))
    container.initialize()
    service = container.team_generation_service

    rng = random.Random(args.seed) if args.seed is not None else None
    result = service.generate_teams(players, rng=rng)
    if not result:
        print(f"Error ({result.error_code}): {result.error}", file=sys.stderr)
        return 1

    split = result.value
    print(format_split_summary(split))

    if args.dry_run:
        print("\nDRY RUN: matchup not recorded.")
    else:
        service.accept(split)
        print(f"\nRecorded matchup {split.signature}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
