"""
Service container for dependency injection and initialization.

This module centralizes creation and wiring of the repository, the lane
shuffler and the per-server roster services.

Usage:
    container = ServiceContainer(config)
    await container.initialize()

    roster = container.get_roster_service("my-server")
    roster.add_player("Alice", "GOLD", "II")
"""

import logging
from dataclasses import dataclass, field

from config import (
    DB_PATH,
    ROSTER_MAX_PLAYERS,
    SCORE_WEIGHTS,
    SEARCH_DEADLINE_SECONDS,
    SEARCH_EARLY_EXIT_SCORE,
    SEARCH_TRIAL_BUDGET,
    SEARCH_WORKERS,
)
from domain.services.team_balancing_service import ScoreWeights
from infrastructure.schema_manager import SchemaManager
from rating_system import TierRatingSystem
from repositories.roster_repository import RosterRepository
from services.roster_service import RosterService
from shuffler import LaneShuffler

logger = logging.getLogger("lane_divider.infrastructure.container")


@dataclass
class ServiceConfig:
    """Configuration for service initialization."""

    # Database
    db_path: str = DB_PATH

    # Roster settings
    max_players: int = ROSTER_MAX_PLAYERS

    # Search settings
    trial_budget: int = SEARCH_TRIAL_BUDGET
    workers: int = SEARCH_WORKERS
    weights: ScoreWeights = field(default_factory=lambda: ScoreWeights.from_settings(SCORE_WEIGHTS))
    early_exit_score: float | None = SEARCH_EARLY_EXIT_SCORE
    deadline_seconds: float | None = SEARCH_DEADLINE_SECONDS


class ServiceContainer:
    """
    Central container for application services.

    Handles proper initialization order and dependency injection.
    Roster services are created per server id and cached.
    """

    def __init__(self, config: ServiceConfig | None = None):
        """
        Initialize the container with configuration.

        Args:
            config: Service configuration (uses defaults if None)
        """
        self.config = config or ServiceConfig()
        self._initialized = False
        self._roster_repo: RosterRepository | None = None
        self._shuffler: LaneShuffler | None = None
        self._rating_system: TierRatingSystem | None = None
        self._roster_services: dict[str, RosterService] = {}

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """
        Initialize all services in correct order.

        This method is idempotent - calling it multiple times has no effect.
        """
        if self._initialized:
            logger.debug("ServiceContainer already initialized, skipping")
            return

        logger.info("Initializing ServiceContainer...")

        logger.debug(f"Initializing database at {self.config.db_path}")
        SchemaManager(self.config.db_path).initialize()

        self._roster_repo = RosterRepository(self.config.db_path)
        self._rating_system = TierRatingSystem()
        self._shuffler = LaneShuffler(
            trial_budget=self.config.trial_budget,
            weights=self.config.weights,
            workers=self.config.workers,
            early_exit_score=self.config.early_exit_score,
            deadline_seconds=self.config.deadline_seconds,
        )

        self._initialized = True
        logger.info("ServiceContainer initialization complete")

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("ServiceContainer.initialize() must be awaited first")

    def create_roster_service(self) -> RosterService:
        """Create a roster service that is not bound to any server id."""
        self._require_initialized()
        return RosterService(
            roster_repo=self._roster_repo,
            shuffler=self._shuffler,
            rating_system=self._rating_system,
            max_players=self.config.max_players,
        )

    def get_roster_service(self, server_id: str) -> RosterService:
        """
        Get the cached roster service for a server, loading its saved roster
        the first time it is requested.
        """
        self._require_initialized()
        server_id = RosterRepository.normalize_server_id(server_id)
        service = self._roster_services.get(server_id)
        if service is None:
            service = self.create_roster_service()
            result = service.load(server_id)
            if not result:
                logger.debug(f"Starting empty roster for {server_id}: {result.error}")
            self._roster_services[server_id] = service
        return service

    # =========================================================================
    # Service accessors
    # =========================================================================

    @property
    def roster_repo(self) -> RosterRepository | None:
        return self._roster_repo

    @property
    def shuffler(self) -> LaneShuffler | None:
        return self._shuffler

    @property
    def rating_system(self) -> TierRatingSystem | None:
        return self._rating_system
