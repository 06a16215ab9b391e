"""
Team balancing domain service.

Handles the fairness score used to rank candidate splits.
"""

from dataclasses import dataclass

from config import SHUFFLER_SETTINGS
from domain.models.team import Team


@dataclass(frozen=True)
class ScoreWeights:
    """
    Fairness policy table.

    Large multiplicative gaps make total-skill balance dominate, with average
    balance as a secondary factor; the elite terms act as strong correctives
    against one team collecting several top-rated players.
    """

    total_diff: float = 10000.0
    avg_diff: float = 100.0
    top_diff: float = 50.0
    elite_count_diff: float = 1200.0
    elite_stack_penalty: float = 3000.0
    elite_threshold: float = 85.0
    top_k: int = 4
    elite_stack_start: int = 3
    elite_stack_unit: int = 2

    @classmethod
    def from_settings(cls, settings: dict | None = None) -> "ScoreWeights":
        """Build the policy table from SHUFFLER_SETTINGS (or an override dict)."""
        settings = settings if settings is not None else SHUFFLER_SETTINGS
        return cls(
            total_diff=settings["total_diff_weight"],
            avg_diff=settings["avg_diff_weight"],
            top_diff=settings["top_diff_weight"],
            elite_count_diff=settings["elite_count_diff_weight"],
            elite_stack_penalty=settings["elite_stack_penalty_weight"],
            elite_threshold=settings["elite_threshold"],
            top_k=settings["top_k"],
            elite_stack_start=settings["elite_stack_start"],
            elite_stack_unit=settings["elite_stack_unit"],
        )


@dataclass(frozen=True)
class SplitScore:
    """Score breakdown for one candidate split. Lower is better."""

    total_diff: float
    avg_diff: float
    top_diff: float
    elite_count_diff: int
    elite_stack_penalty: int
    score: float


class TeamBalancingService:
    """
    Pure domain service for team balancing logic.

    Responsibilities:
    - Compare two teams on total, average and top-end skill
    - Measure how elite players are spread
    - Combine everything into a single weighted score
    """

    def __init__(self, weights: ScoreWeights | None = None):
        """
        Initialize team balancing service.

        Args:
            weights: Policy table; defaults to the configured SHUFFLER_SETTINGS
        """
        self.weights = weights if weights is not None else ScoreWeights.from_settings()

    def calculate_elite_stack_penalty(self, elite_count: int) -> int:
        """
        Penalty units for a single team's elite count.

        Teams below the stacking start contribute nothing; above it, each
        elite beyond (start - 1) costs elite_stack_unit.
        """
        w = self.weights
        if elite_count < w.elite_stack_start:
            return 0
        return (elite_count - (w.elite_stack_start - 1)) * w.elite_stack_unit

    def score(self, team_a: Team, team_b: Team) -> SplitScore:
        """
        Score a candidate split.

        Args:
            team_a: First team
            team_b: The complementary team

        Returns:
            SplitScore with every component and the weighted total
        """
        w = self.weights

        total_diff = abs(team_a.total - team_b.total)
        avg_diff = abs(team_a.average - team_b.average)
        top_diff = abs(team_a.top_k_total(w.top_k) - team_b.top_k_total(w.top_k))

        elite_a = team_a.elite_count(w.elite_threshold)
        elite_b = team_b.elite_count(w.elite_threshold)
        elite_count_diff = abs(elite_a - elite_b)
        elite_stack_penalty = self.calculate_elite_stack_penalty(
            elite_a
        ) + self.calculate_elite_stack_penalty(elite_b)

        score = (
            total_diff * w.total_diff
            + avg_diff * w.avg_diff
            + top_diff * w.top_diff
            + elite_count_diff * w.elite_count_diff
            + elite_stack_penalty * w.elite_stack_penalty
        )

        return SplitScore(
            total_diff=total_diff,
            avg_diff=avg_diff,
            top_diff=top_diff,
            elite_count_diff=elite_count_diff,
            elite_stack_penalty=elite_stack_penalty,
            score=score,
        )
