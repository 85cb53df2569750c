# ABOUTME: Shared pytest fixtures for portfolio showcase tests.
# ABOUTME: Provides a temporary database and one handler per entity.

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from portfolio_showcase.database import DatabaseService
from portfolio_showcase.handlers import (
    ContactMessageHandler,
    ProfileHandler,
    ProjectHandler,
    SkillHandler,
)


@pytest.fixture
def temp_db_path() -> Generator[Path, None, None]:
    """Create a temporary database path for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def db_service(temp_db_path: Path) -> Generator[DatabaseService, None, None]:
    """Create a DatabaseService with tables on a temporary database."""
    service = DatabaseService(db_path=temp_db_path)
    service.init_db()
    yield service
    service.dispose()


@pytest.fixture
def project_handler(db_service: DatabaseService) -> ProjectHandler:
    return ProjectHandler(db_service)


@pytest.fixture
def skill_handler(db_service: DatabaseService) -> SkillHandler:
    return SkillHandler(db_service)


@pytest.fixture
def contact_handler(db_service: DatabaseService) -> ContactMessageHandler:
    return ContactMessageHandler(db_service)


@pytest.fixture
def profile_handler(db_service: DatabaseService) -> ProfileHandler:
    return ProfileHandler(db_service)
