"""
Repositories for matchup history storage.
"""

import logging

from repositories.base_repository import BaseRepository
from repositories.interfaces import IMatchupHistoryRepository

logger = logging.getLogger("fair_teams.repositories.matchup_history")


class MatchupHistoryRepository(BaseRepository, IMatchupHistoryRepository):
    """
    SQLite-backed matchup history.

    Rows are ordered by their autoincrement id, which is the append order.
    """

    def get_recent(self, limit: int) -> list[str]:
        if limit <= 0:
            return []
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT signature FROM matchup_history ORDER BY id DESC LIMIT ?",
                (limit,),
            )
            rows = cursor.fetchall()
        return [row["signature"] for row in reversed(rows)]

    def get_all(self) -> list[str]:
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT signature FROM matchup_history ORDER BY id ASC")
            return [row["signature"] for row in cursor.fetchall()]

    def append(self, signature: str, max_entries: int) -> None:
        with self.atomic_transaction() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO matchup_history (signature) VALUES (?)",
                (signature,),
            )
            cursor.execute(
                """
                DELETE FROM matchup_history
                WHERE id NOT IN (
                    SELECT id FROM matchup_history ORDER BY id DESC LIMIT ?
                )
                """,
                (max(max_entries, 0),),
            )
            if cursor.rowcount > 0:
                logger.debug(f"Trimmed {cursor.rowcount} old matchup signature(s)")

    def count(self) -> int:
        with self.connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) AS total FROM matchup_history")
            return cursor.fetchone()["total"]

    def clear(self) -> None:
        with self.connection() as conn:
            conn.execute("DELETE FROM matchup_history")


class InMemoryMatchupHistoryRepository(IMatchupHistoryRepository):
    """Process-local matchup history, for tests and throwaway sessions."""

    def __init__(self, signatures: list[str] | None = None):
        self._signatures: list[str] = list(signatures or [])

    def get_recent(self, limit: int) -> list[str]:
        if limit <= 0:
            return []
        return self._signatures[-limit:]

    def get_all(self) -> list[str]:
        return list(self._signatures)

    def append(self, signature: str, max_entries: int) -> None:
        self._signatures.append(signature)
        overflow = len(self._signatures) - max(max_entries, 0)
        if overflow > 0:
            del self._signatures[:overflow]

    def count(self) -> int:
        return len(self._signatures)

    def clear(self) -> None:
        self._signatures.clear()
