"""
Team domain model.
"""

from collections.abc import Iterable

from domain.models.player import Player


class Team:
    """
    Represents one side of a split.

    Membership is unordered as far as the engine is concerned; callers may
    re-sort players for display with sorted_by_skill().
    """

    def __init__(self, players: Iterable[Player]):
        self.players: tuple[Player, ...] = tuple(players)

    @property
    def size(self) -> int:
        return len(self.players)

    @property
    def ids(self) -> list[int]:
        """Player IDs in ascending order."""
        return sorted(p.id for p in self.players)

    @property
    def total(self) -> float:
        """Sum of player skills."""
        return sum(p.skill for p in self.players)

    @property
    def average(self) -> float:
        """Mean player skill (0 for an empty team)."""
        if not self.players:
            return 0
        return self.total / len(self.players)

    def elite_count(self, threshold: float) -> int:
        """Count players whose skill is at or above the threshold."""
        return sum(1 for p in self.players if p.is_elite(threshold))

    def top_k_total(self, k: int) -> float:
        """
        Sum the skills of the k strongest players.

        Uses every player when the team has fewer than k.
        """
        return sum(sorted((p.skill for p in self.players), reverse=True)[:k])

    def sorted_by_skill(self) -> list[Player]:
        """Players ordered by skill descending (stable for equal skills)."""
        return sorted(self.players, key=lambda p: p.skill, reverse=True)

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self):
        return iter(self.players)

    def __contains__(self, player: object) -> bool:
        return player in self.players

    def __str__(self) -> str:
        player_names = ", ".join(str(p) for p in self.sorted_by_skill())
        return f"Team: {player_names}"
