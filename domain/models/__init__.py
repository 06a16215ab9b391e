"""
Domain models - pure data structures representing business entities.
"""

from domain.models.player import Player
from domain.models.split import Split, signature_for_ids, signature_for_teams
from domain.models.team import Team

__all__ = ["Player", "Team", "Split", "signature_for_ids", "signature_for_teams"]
