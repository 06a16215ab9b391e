"""
Domain services containing pure business logic.
"""

from domain.services.team_balancing_service import ScoreWeights, SplitScore, TeamBalancingService

__all__ = ["ScoreWeights", "SplitScore", "TeamBalancingService"]
