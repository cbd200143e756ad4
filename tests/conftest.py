"""
Pytest fixtures for tests.

Uses a session-scoped schema template: migrations run once and each
repository test gets a file copy of the resulting database.
"""

import shutil

import pytest

from domain.models.player import Player
from infrastructure.schema_manager import SchemaManager
from repositories.roster_repository import RosterRepository

TEST_SERVER_ID = "test-server"
"""Standard server id for single-roster tests."""


@pytest.fixture(scope="session")
def _schema_template_path(tmp_path_factory):
    """Create a schema template database once per test session."""
    template_dir = tmp_path_factory.mktemp("schema_template")
    template_path = str(template_dir / "template.db")
    SchemaManager(template_path).initialize()
    yield template_path


@pytest.fixture
def temp_db_path(tmp_path):
    """Create a temporary database path (no schema)."""
    path = str(tmp_path / "temp.db")
    yield path


@pytest.fixture
def repo_db_path(_schema_template_path, tmp_path):
    """Create a temporary database with initialized schema for repository tests."""
    test_db_path = str(tmp_path / "test.db")
    shutil.copy2(_schema_template_path, test_db_path)
    yield test_db_path


@pytest.fixture
def roster_repository(repo_db_path):
    """Create a roster repository with temp database."""
    return RosterRepository(repo_db_path)


@pytest.fixture
def sample_players():
    """Ten participating players with distinct ratings and open lane preferences."""
    return [Player(name=f"Player{i}", rating=1000 + i * 100) for i in range(10)]
