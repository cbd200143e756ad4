"""
Centralized configuration for the Lane Divider.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _parse_optional_float(env_var: str) -> float | None:
    raw = os.getenv(env_var)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _parse_bool(env_var: str, default: bool) -> bool:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


DB_PATH = os.getenv("DB_PATH", "lane_divider.db")

TEAM_SIZE = 5
PARTICIPANT_COUNT = TEAM_SIZE * 2
ROSTER_MAX_PLAYERS = _parse_int("ROSTER_MAX_PLAYERS", 50)
PLAYERS_JSON_VERSION = "1.0"

# New players start participating so a freshly entered roster of ten can be divided
NEW_PLAYER_PARTICIPATING = _parse_bool("NEW_PLAYER_PARTICIPATING", True)

# Search budget is a heuristic, not a convergence bound
SEARCH_TRIAL_BUDGET = _parse_int("SEARCH_TRIAL_BUDGET", 100_000)
SEARCH_WORKERS = max(1, _parse_int("SEARCH_WORKERS", 1))
SEARCH_EARLY_EXIT_SCORE = _parse_optional_float("SEARCH_EARLY_EXIT_SCORE")
SEARCH_DEADLINE_SECONDS = _parse_optional_float("SEARCH_DEADLINE_SECONDS")

SCORE_WEIGHTS: dict[str, float] = {
    "total": _parse_float("SCORE_WEIGHT_TOTAL", 0.3),
    "lane": _parse_float("SCORE_WEIGHT_LANE", 0.5),
    "pair": _parse_float("SCORE_WEIGHT_PAIR", 0.2),
}

DEFAULT_TIER = os.getenv("DEFAULT_TIER", "GOLD")
DEFAULT_RANK = os.getenv("DEFAULT_RANK", "II")
