"""
Abstract repository interfaces for data access.

These interfaces define the contracts implemented by concrete repositories.
"""

from abc import ABC, abstractmethod


class IMatchupHistoryRepository(ABC):
    """Ordered storage of matchup signatures, oldest first."""

    @abstractmethod
    def get_recent(self, limit: int) -> list[str]:
        """Return up to `limit` most recent signatures, oldest to newest."""

    @abstractmethod
    def get_all(self) -> list[str]: ...

    @abstractmethod
    def append(self, signature: str, max_entries: int) -> None:
        """Append a signature and drop the oldest entries beyond max_entries."""

    @abstractmethod
    def count(self) -> int: ...

    @abstractmethod
    def clear(self) -> None: ...
