"""
Matchup history: a bounded, ordered record of accepted team splits.
"""

import logging
import threading

from config import MAX_HISTORY, NO_REPEAT_LAST_N
from repositories.interfaces import IMatchupHistoryRepository

logger = logging.getLogger("fair_teams.services.history")


class MatchupHistory:
    """
    Keeps the signatures of accepted splits so the shuffler can avoid repeats.

    Storage is injected; build one instance per session and pass it to whoever
    needs it. A lock serialises reads and appends so the append order and the
    size cap hold when several threads share the instance.
    """

    def __init__(
        self,
        history_repo: IMatchupHistoryRepository,
        max_history: int | None = None,
        no_repeat_last_n: int | None = None,
    ):
        self.history_repo = history_repo
        self.max_history = max_history if max_history is not None else MAX_HISTORY
        self.no_repeat_last_n = (
            no_repeat_last_n if no_repeat_last_n is not None else NO_REPEAT_LAST_N
        )
        if self.max_history < 1:
            raise ValueError(f"max_history must be at least 1, got {self.max_history}")
        self._lock = threading.Lock()

    def recent(self, k: int) -> list[str]:
        """
        Return the last k signatures, oldest to newest.

        Fewer are returned when the history is shorter; k <= 0 gives an empty list.
        """
        if k <= 0:
            return []
        with self._lock:
            return self.history_repo.get_recent(k)

    def record(self, signature: str) -> None:
        """Append a signature, evicting the oldest entries beyond max_history."""
        with self._lock:
            self.history_repo.append(signature, self.max_history)
        logger.info(f"Recorded matchup {signature}")

    def forbidden_signatures(self) -> list[str]:
        """Signatures the next shuffle should avoid."""
        return self.recent(self.no_repeat_last_n)

    def all(self) -> list[str]:
        with self._lock:
            return self.history_repo.get_all()

    def clear(self) -> None:
        with self._lock:
            self.history_repo.clear()
        logger.info("Cleared matchup history")

    def __len__(self) -> int:
        with self._lock:
            return self.history_repo.count()
