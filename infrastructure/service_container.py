"""
Service container for dependency injection and initialization.

Centralizes creation and wiring of the history storage, the shuffler and the
services built on top of them.

Usage:
    container = ServiceContainer(ServiceConfig(db_path="history.db"))
    container.initialize()

    result = container.team_generation_service.generate_teams(players)
"""

import logging
from dataclasses import dataclass

from config import HISTORY_DB_PATH, MAX_HISTORY, MIN_PLAYERS_FOR_TEAMS, NO_REPEAT_LAST_N
from domain.services.team_balancing_service import ScoreWeights, TeamBalancingService
from infrastructure.schema_manager import SchemaManager
from repositories.interfaces import IMatchupHistoryRepository
from repositories.matchup_history_repository import (
    InMemoryMatchupHistoryRepository,
    MatchupHistoryRepository,
)
from services.matchup_history_service import MatchupHistory
from services.team_generation_service import TeamGenerationService
from shuffler import BalancedShuffler

logger = logging.getLogger("fair_teams.infrastructure.container")


@dataclass
class ServiceConfig:
    """Configuration for service initialization."""

    # History storage; None keeps history in memory for this process only
    db_path: str | None = HISTORY_DB_PATH
    max_history: int = MAX_HISTORY
    no_repeat_last_n: int = NO_REPEAT_LAST_N

    # Product rule for making teams
    min_players: int = MIN_PLAYERS_FOR_TEAMS

    # Scoring policy; None uses SHUFFLER_SETTINGS
    weights: ScoreWeights | None = None


class ServiceContainer:
    """
    Central container for application services.

    Example:
        container = ServiceContainer(config)
        container.initialize()
        history = container.matchup_history
    """

    def __init__(self, config: ServiceConfig | None = None):
        self.config = config or ServiceConfig()
        self._initialized = False
        self._history_repo: IMatchupHistoryRepository | None = None
        self._shuffler: BalancedShuffler | None = None
        self._matchup_history: MatchupHistory | None = None
        self._team_generation_service: TeamGenerationService | None = None

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """
        Initialize all services in correct order.

        This method is idempotent - calling it multiple times has no effect.
        """
        if self._initialized:
            logger.debug("ServiceContainer already initialized, skipping")
            return

        logger.info("Initializing ServiceContainer...")
        self._init_repositories()
        self._init_services()
        self._initialized = True
        logger.info("ServiceContainer initialization complete")

    def _init_repositories(self) -> None:
        if self.config.db_path:
            logger.debug(f"Using SQLite matchup history at {self.config.db_path}")
            SchemaManager(self.config.db_path).initialize()
            self._history_repo = MatchupHistoryRepository(self.config.db_path)
        else:
            logger.debug("Using in-memory matchup history")
            self._history_repo = InMemoryMatchupHistoryRepository()

    def _init_services(self) -> None:
        self._shuffler = BalancedShuffler(TeamBalancingService(self.config.weights))
        self._matchup_history = MatchupHistory(
            self._history_repo,
            max_history=self.config.max_history,
            no_repeat_last_n=self.config.no_repeat_last_n,
        )
        self._team_generation_service = TeamGenerationService(
            self._shuffler,
            self._matchup_history,
            min_players=self.config.min_players,
        )

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("ServiceContainer not initialized. Call initialize() first.")

    @property
    def history_repo(self) -> IMatchupHistoryRepository:
        self._require_initialized()
        return self._history_repo

    @property
    def shuffler(self) -> BalancedShuffler:
        self._require_initialized()
        return self._shuffler

    @property
    def matchup_history(self) -> MatchupHistory:
        self._require_initialized()
        return self._matchup_history

    @property
    def team_generation_service(self) -> TeamGenerationService:
        self._require_initialized()
        return self._team_generation_service
