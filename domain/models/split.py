"""
Split domain model and matchup signatures.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from domain.models.team import Team

SIGNATURE_ID_SEPARATOR = "-"
SIGNATURE_TEAM_SEPARATOR = "|"


def signature_for_ids(team_a_ids: Iterable[int], team_b_ids: Iterable[int]) -> str:
    """
    Build the canonical matchup signature for two groups of player IDs.

    Each side is rendered as its ascending IDs joined by "-"; the two sides are
    joined by "|" with the lexicographically smaller string first, so neither
    internal order nor the A/B labelling affects the result.
    """
    a = SIGNATURE_ID_SEPARATOR.join(str(i) for i in sorted(team_a_ids))
    b = SIGNATURE_ID_SEPARATOR.join(str(i) for i in sorted(team_b_ids))
    return f"{a}{SIGNATURE_TEAM_SEPARATOR}{b}" if a < b else f"{b}{SIGNATURE_TEAM_SEPARATOR}{a}"


def signature_for_teams(team_a: Team, team_b: Team) -> str:
    """Canonical matchup signature for two teams."""
    return signature_for_ids((p.id for p in team_a), (p.id for p in team_b))


@dataclass(frozen=True)
class Split:
    """A two-team partition of a roster together with its derived stats."""

    team_a: Team
    team_b: Team
    score: float = 0.0

    @property
    def total_a(self) -> float:
        return self.team_a.total

    @property
    def total_b(self) -> float:
        return self.team_b.total

    @property
    def avg_a(self) -> float:
        return self.team_a.average

    @property
    def avg_b(self) -> float:
        return self.team_b.average

    @property
    def total_diff(self) -> float:
        return abs(self.total_a - self.total_b)

    @property
    def avg_diff(self) -> float:
        return abs(self.avg_a - self.avg_b)

    @property
    def signature(self) -> str:
        return signature_for_teams(self.team_a, self.team_b)

    def swapped(self) -> "Split":
        """Return the same split with the A/B labels exchanged."""
        return Split(team_a=self.team_b, team_b=self.team_a, score=self.score)

    def to_dict(self) -> dict:
        """Flatten the split into plain data for callers outside the engine."""
        return {
            "team_a": [p.id for p in self.team_a.sorted_by_skill()],
            "team_b": [p.id for p in self.team_b.sorted_by_skill()],
            "total_a": self.total_a,
            "total_b": self.total_b,
            "avg_a": self.avg_a,
            "avg_b": self.avg_b,
            "signature": self.signature,
        }
