"""
Centralized configuration for the Fair Teams splitter.
"""

from __future__ import annotations

import os
from typing import Any

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


HISTORY_DB_PATH = os.getenv("HISTORY_DB_PATH", "team_history.db")

# Matchup history: how many signatures are kept, and how many trailing ones
# are treated as "too recent" for the next shuffle
MAX_HISTORY = _parse_int("MAX_HISTORY", 50)
NO_REPEAT_LAST_N = _parse_int("NO_REPEAT_LAST_N", 1)

# Product rule layered above the engine (the engine itself only needs 2)
MIN_PLAYERS_FOR_TEAMS = _parse_int("MIN_PLAYERS_FOR_TEAMS", 8)

SHUFFLER_SETTINGS: dict[str, Any] = {
    "elite_threshold": _parse_float("ELITE_SKILL_THRESHOLD", 85.0),
    "top_k": _parse_int("TOP_K_PLAYERS", 4),
    "total_diff_weight": _parse_float("TOTAL_DIFF_WEIGHT", 10000.0),
    "avg_diff_weight": _parse_float("AVG_DIFF_WEIGHT", 100.0),
    "top_diff_weight": _parse_float("TOP_DIFF_WEIGHT", 50.0),
    "elite_count_diff_weight": _parse_float("ELITE_COUNT_DIFF_WEIGHT", 1200.0),
    "elite_stack_penalty_weight": _parse_float("ELITE_STACK_PENALTY_WEIGHT", 3000.0),
    # Stacking kicks in at 3 elites on one team; each elite beyond 2 costs 2 units.
    # Hardcoded - not configurable via env var
    "elite_stack_start": 3,
    "elite_stack_unit": 2,
}
