"""
Standalone script to divide a saved roster into two teams.
Respects the DB_PATH environment variable if set; otherwise uses the default.
"""

import argparse
import logging
import sys

from config import DB_PATH
from repositories.roster_repository import RosterRepository
from services.roster_service import RosterService
from shuffler import LaneShuffler
from utils.formatting import format_division_for_clipboard, format_division_table_summary, format_tab_label

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("lane_divider")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Divide a saved roster into two teams.")
    parser.add_argument("server_id", help="Server/session id the roster was saved under")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible results")
    parser.add_argument("--budget", type=int, default=None, help="Number of search trials")
    parser.add_argument("--workers", type=int, default=None, help="Worker threads")
    args = parser.parse_args(argv)

    print(f"Using database path: {DB_PATH}")
    roster = RosterService(
        roster_repo=RosterRepository(DB_PATH),
        shuffler=LaneShuffler(trial_budget=args.budget, workers=args.workers),
    )

    loaded = roster.load(args.server_id)
    if not loaded:
        print(f"Error: {loaded.error}", file=sys.stderr)
        return 1

    result = roster.divide_teams(seed=args.seed)
    if not result:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    table = result.value
    print(format_division_table_summary(table))
    best = table.best()
    if best is None:
        print("No valid assignment found. Check the role-locked players.")
        return 1

    mismatch_count, division = best
    print()
    print(f"[{format_tab_label(mismatch_count)}] score {division.evaluation_score:.1f}")
    print(format_division_for_clipboard(division))
    return 0


if __name__ == "__main__":
    sys.exit(main())
