"""
Tests for ServiceContainer wiring.
"""

import pytest

from domain.services.team_balancing_service import ScoreWeights
from infrastructure.service_container import ServiceConfig, ServiceContainer
from repositories.matchup_history_repository import (
    InMemoryMatchupHistoryRepository,
    MatchupHistoryRepository,
)


def test_access_before_initialize_raises():
    container = ServiceContainer(ServiceConfig(db_path=None))
    assert not container.is_initialized
    with pytest.raises(RuntimeError):
        _ = container.team_generation_service


def test_in_memory_history_when_no_db_path():
    container = ServiceContainer(ServiceConfig(db_path=None))
    container.initialize()
    assert isinstance(container.history_repo, InMemoryMatchupHistoryRepository)


def test_sqlite_history_with_db_path(history_db_path):
    container = ServiceContainer(ServiceConfig(db_path=history_db_path))
    container.initialize()
    assert isinstance(container.history_repo, MatchupHistoryRepository)


def test_initialize_is_idempotent():
    container = ServiceContainer(ServiceConfig(db_path=None))
    container.initialize()
    service = container.team_generation_service
    container.initialize()
    assert container.team_generation_service is service


def test_config_values_are_wired():
    weights = ScoreWeights(total_diff=1)
    container = ServiceContainer(
        ServiceConfig(db_path=None, max_history=5, no_repeat_last_n=2, min_players=4, weights=weights)
    )
    container.initialize()
    assert container.matchup_history.max_history == 5
    assert container.matchup_history.no_repeat_last_n == 2
    assert container.team_generation_service.min_players == 4
    assert container.shuffler.balancing_service.weights is weights
    assert container.team_generation_service.history is container.matchup_history


def test_end_to_end_generation(sample_players):
    container = ServiceContainer(ServiceConfig(db_path=None))
    container.initialize()
    service = container.team_generation_service

    first = service.generate_and_accept(sample_players[:10]).unwrap()
    second = service.generate_and_accept(sample_players[:10]).unwrap()

    assert container.matchup_history.all() == [first.signature, second.signature]
