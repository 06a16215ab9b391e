"""
Service for generating teams from a selected roster.
"""

import logging
import random

from config import MIN_PLAYERS_FOR_TEAMS
from domain.errors import InvalidInputError, NoSolutionError
from domain.models.player import Player
from domain.models.split import Split
from services.error_codes import INSUFFICIENT_PLAYERS, INVALID_INPUT, NO_SOLUTION
from services.matchup_history_service import MatchupHistory
from services.result import Result
from shuffler import BalancedShuffler

logger = logging.getLogger("fair_teams.services.team_generation")


class TeamGenerationService:
    """
    Ties the shuffler to the matchup history.

    Responsibilities:
    - Enforce the minimum roster size for making teams
    - Feed recent matchups to the shuffler as forbidden signatures
    - Record accepted splits
    """

    def __init__(
        self,
        shuffler: BalancedShuffler,
        history: MatchupHistory,
        min_players: int | None = None,
    ):
        self.shuffler = shuffler
        self.history = history
        self.min_players = min_players if min_players is not None else MIN_PLAYERS_FOR_TEAMS

    def generate_teams(
        self,
        players: list[Player],
        rng: random.Random | None = None,
    ) -> Result[Split]:
        """
        Build the best split for the selected players without recording it.

        Args:
            players: Selected players
            rng: Optional random source for tie-breaking

        Returns:
            Result containing the Split, or a failure with an error code
        """
        if len(players) < self.min_players:
            return Result.fail(
                f"Select at least {self.min_players} players to make teams (got {len(players)})",
                code=INSUFFICIENT_PLAYERS,
            )

        forbidden = self.history.forbidden_signatures()
        try:
            split = self.shuffler.shuffle(players, forbidden_signatures=forbidden, rng=rng)
        except InvalidInputError as exc:
            return Result.fail(str(exc), code=INVALID_INPUT)
        except NoSolutionError as exc:
            logger.exception("Shuffler produced no candidate splits")
            return Result.fail(str(exc), code=NO_SOLUTION)

        return Result.ok(split)

    def accept(self, split: Split) -> Result[str]:
        """Record a split as the latest matchup and return its signature."""
        signature = split.signature
        self.history.record(signature)
        return Result.ok(signature)

    def generate_and_accept(
        self,
        players: list[Player],
        rng: random.Random | None = None,
    ) -> Result[Split]:
        """Generate teams and immediately record the result."""
        result = self.generate_teams(players, rng=rng)
        if result:
            self.accept(result.value)
        return result
