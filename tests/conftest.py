"""
Shared fixtures for the department tests.

Storage fixtures never touch a real database file: SQL tests run
against an in-memory SQLite engine pinned to one connection.
"""

import pytest
from fastapi.testclient import TestClient

from app.application.departments.department_service import DepartmentService
from app.core.config import Settings
from app.infrastructure.departments.in_memory_repository import (
    InMemoryDepartmentRepository,
    InMemoryDepartmentStore,
)
from app.infrastructure.departments.schema import create_schema
from app.infrastructure.departments.sql_repository import SqlDepartmentRepository
from app.interfaces.departments.dependencies import build_engine
from app.main import create_app

IN_MEMORY_SQLITE_URL = "sqlite://"


def _isolated_settings(**overrides) -> Settings:
    """Build settings that ignore any local .env file."""
    values = {
        "database_url": IN_MEMORY_SQLITE_URL,
        "rate_limit_default": "1000/minute",
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def make_settings():
    """Factory for isolated settings, with keyword overrides."""
    return _isolated_settings


@pytest.fixture
def store() -> InMemoryDepartmentStore:
    return InMemoryDepartmentStore()


@pytest.fixture
def memory_repo(store: InMemoryDepartmentStore) -> InMemoryDepartmentRepository:
    return InMemoryDepartmentRepository(store)


@pytest.fixture
def service(memory_repo: InMemoryDepartmentRepository) -> DepartmentService:
    """DepartmentService over the in-memory test double."""
    return DepartmentService(memory_repo)


@pytest.fixture
def engine():
    """A fresh in-memory SQLite engine with the departments schema."""
    engine = build_engine(IN_MEMORY_SQLITE_URL)
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_repo(engine):
    repo = SqlDepartmentRepository(engine)
    yield repo
    repo.close()


@pytest.fixture
def client():
    """API client over a fresh app backed by in-memory SQLite."""
    app = create_app(_isolated_settings())
    with TestClient(app) as test_client:
        yield test_client
