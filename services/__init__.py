"""
Application services layer.

Services orchestrate business operations using repositories and domain services.
"""

from services.matchup_history_service import MatchupHistory
from services.result import Result
from services.roster_service import RosterService
from services.team_generation_service import TeamGenerationService

__all__ = [
    "MatchupHistory",
    "Result",
    "RosterService",
    "TeamGenerationService",
]
