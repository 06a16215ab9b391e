"""
Pytest fixtures for tests.

Provides the sample roster, a player factory and history storage fixtures so
individual test modules don't redefine them.
"""

import random

import pytest

from domain.models.player import Player
from repositories.matchup_history_repository import (
    InMemoryMatchupHistoryRepository,
    MatchupHistoryRepository,
)
from services.matchup_history_service import MatchupHistory
from shuffler import BalancedShuffler

SAMPLE_ROSTER = [
    (1, "Cesc", 95, "Mid"),
    (2, "Ben", 85, "Mid"),
    (3, "Soufiane", 85, "Fwd"),
    (4, "Burhan", 85, "Fwd"),
    (5, "Bryan", 85, "Mid"),
    (6, "Carl", 60, "Def"),
    (7, "Hongfei", 40, "Def"),
    (8, "Chloe", 85, "Mid"),
    (9, "Patrick", 40, "Def"),
    (10, "Keivon", 40, "Def"),
    (11, "Gabriela", 80, "Mid"),
    (12, "Kio", 75, "Mid"),
    (13, "Meghan", 50, "Mid"),
    (14, "Donald", 60, "Def"),
    (15, "Ernesto", 70, "Def"),
    (16, "Bamba", 70, "Def"),
]


@pytest.fixture
def sample_players():
    """The full 16-player roster."""
    return [
        Player(id=pid, name=name, skill=skill, position=position)
        for pid, name, skill, position in SAMPLE_ROSTER
    ]


@pytest.fixture
def make_players():
    """Factory: build players with ids 1..n from a list of skills."""

    def _make(skills: list[float]) -> list[Player]:
        return [Player(id=i + 1, skill=skill, name=f"Player{i + 1}") for i, skill in enumerate(skills)]

    return _make


@pytest.fixture
def shuffler():
    """Shuffler with default weights and candidate logging turned off."""
    return BalancedShuffler(log_top_k=0)


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def history_db_path(tmp_path):
    """Path to a fresh SQLite file for history tests."""
    return str(tmp_path / "history.db")


@pytest.fixture
def sqlite_history_repo(history_db_path):
    return MatchupHistoryRepository(history_db_path)


@pytest.fixture
def memory_history():
    """In-memory matchup history with the default cap and no-repeat window."""
    return MatchupHistory(InMemoryMatchupHistoryRepository(), max_history=50, no_repeat_last_n=1)
