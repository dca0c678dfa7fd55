"""
Dependency injection for the departments bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into the DepartmentService via constructor injection.
This is the composition root for the departments context: the
storage engine is built here from settings and handed to the
repository explicitly.
"""

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from app.application.departments.department_service import DepartmentService
from app.core.config import Settings
from app.domain.departments.ports import DepartmentRepository
from app.infrastructure.departments.in_memory_repository import (
    InMemoryDepartmentRepository,
)
from app.infrastructure.departments.sql_repository import SqlDepartmentRepository


def build_engine(database_url: str) -> Engine:
    """Build a SQLAlchemy engine for the given URL.

    SQLite connections are shared across the request thread pool, and an
    in-memory SQLite database is pinned to a single connection so that
    every session sees the same data.
    """
    url = make_url(database_url)
    kwargs: dict = {"pool_pre_ping": True}
    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def get_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return request.app.state.settings


def get_department_repository(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> Iterator[DepartmentRepository]:
    """Yield a request-scoped repository and close it afterwards."""
    if settings.storage_backend == "memory":
        repository = InMemoryDepartmentRepository(request.app.state.memory_store)
    else:
        repository = SqlDepartmentRepository(engine=request.app.state.engine)

    try:
        yield repository
    finally:
        repository.close()


def get_department_service(
    repository: DepartmentRepository = Depends(get_department_repository),
    settings: Settings = Depends(get_settings),
) -> DepartmentService:
    """Build DepartmentService with its infrastructure dependencies."""
    return DepartmentService(
        repository=repository,
        collect_all_violations=settings.collect_all_violations,
    )
