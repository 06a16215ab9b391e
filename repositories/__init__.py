"""
Repository layer for data access abstraction.
"""

from repositories.base_repository import BaseRepository
from repositories.interfaces import IMatchupHistoryRepository
from repositories.matchup_history_repository import (
    InMemoryMatchupHistoryRepository,
    MatchupHistoryRepository,
)

__all__ = [
    "BaseRepository",
    "IMatchupHistoryRepository",
    "InMemoryMatchupHistoryRepository",
    "MatchupHistoryRepository",
]
