"""
Adapter: SQL department repository.

Implements DepartmentRepository port on top of a SQLAlchemy engine.
Works with any database SQLAlchemy supports (SQLite by default,
PostgreSQL in deployment).

Each repository instance owns one connection. Writes run inside the
connection's open transaction and only become durable on commit().
"""

import logging
from dataclasses import replace
from typing import Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError

from app.domain.departments.entities import Department
from app.domain.departments.errors import DuplicateDepartmentNameError
from app.domain.departments.ports import DepartmentRepository
from app.infrastructure.departments.schema import departments

logger = logging.getLogger(__name__)


def _is_unique_violation(exc: IntegrityError) -> bool:
    """Return True if the integrity error came from a unique constraint."""
    text = str(exc.orig).lower()
    return "unique" in text or "duplicate" in text


def _to_entity(row) -> Department:
    return Department(id=row.id, name=row.name, description=row.description)


class SqlDepartmentRepository(DepartmentRepository):
    """Persists departments to a relational database.

    Implements the DepartmentRepository port defined in the domain layer.
    Call close() when done; uncommitted work is rolled back.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._connection: Optional[Connection] = None
        self._pending_rows = 0

    def _conn(self) -> Connection:
        if self._connection is None:
            self._connection = self._engine.connect()
        return self._connection

    def _discard_pending(self) -> None:
        if self._connection is not None:
            self._connection.rollback()
        self._pending_rows = 0

    # ── Writes ───────────────────────────────────────────────────────

    def add(self, department: Department) -> Department:
        """Insert a department inside the open transaction.

        Returns:
            A copy of the department carrying the database-assigned id.

        Raises:
            DuplicateDepartmentNameError: If the unique name index rejects it.
        """
        stmt = insert(departments).values(
            name=department.name,
            description=department.description or "",
        )
        try:
            result = self._conn().execute(stmt)
        except IntegrityError as exc:
            if not _is_unique_violation(exc):
                raise
            self._discard_pending()
            raise DuplicateDepartmentNameError(department.name) from exc

        self._pending_rows += result.rowcount
        new_id = result.inserted_primary_key[0]
        logger.debug("Staged insert of department %s as id=%d.", department.name, new_id)
        return replace(department, id=new_id)

    def update(self, department: Department) -> Department:
        """Update name and description of an existing department.

        Raises:
            DuplicateDepartmentNameError: If the unique name index rejects it.
        """
        stmt = (
            update(departments)
            .where(departments.c.id == department.id)
            .values(name=department.name, description=department.description or "")
        )
        try:
            result = self._conn().execute(stmt)
        except IntegrityError as exc:
            if not _is_unique_violation(exc):
                raise
            self._discard_pending()
            raise DuplicateDepartmentNameError(department.name) from exc

        self._pending_rows += result.rowcount
        logger.debug("Staged update of department id=%d.", department.id)
        return replace(department)

    def delete(self, department_id: int) -> bool:
        """Delete a department by id.

        Returns:
            True if a row was removed.
        """
        result = self._conn().execute(
            delete(departments).where(departments.c.id == department_id)
        )
        self._pending_rows += result.rowcount
        logger.debug("Staged delete of department id=%d.", department_id)
        return result.rowcount > 0

    def commit(self) -> int:
        """Commit the open transaction.

        Returns:
            Number of rows inserted, updated or deleted since the last commit.
        """
        if self._connection is None:
            return 0

        self._connection.commit()
        affected, self._pending_rows = self._pending_rows, 0
        logger.debug("Committed %d department row(s).", affected)
        return affected

    def rollback(self) -> None:
        """Discard all uncommitted changes."""
        self._discard_pending()

    def close(self) -> None:
        """Release the connection, rolling back anything uncommitted."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
        self._pending_rows = 0

    # ── Reads ────────────────────────────────────────────────────────

    def get_by_id(self, department_id: int) -> Optional[Department]:
        """Return a department by id, or None."""
        row = self._conn().execute(
            select(departments).where(departments.c.id == department_id)
        ).first()
        return _to_entity(row) if row is not None else None

    def get_by_name(self, name: str) -> Optional[Department]:
        """Return the department whose name matches ignoring case, or None."""
        row = self._conn().execute(
            select(departments)
            .where(func.lower(departments.c.name) == func.lower(name))
            .limit(1)
        ).first()
        return _to_entity(row) if row is not None else None

    def get_all(self) -> list[Department]:
        """Return all departments ordered by name."""
        rows = self._conn().execute(
            select(departments).order_by(departments.c.name, departments.c.id)
        ).fetchall()
        return [_to_entity(row) for row in rows]

    def search_by_name(self, keyword: str) -> list[Department]:
        """Return departments whose lowercased name contains the keyword."""
        rows = self._conn().execute(
            select(departments)
            .where(
                func.lower(departments.c.name).contains(
                    keyword.lower(), autoescape=True
                )
            )
            .order_by(departments.c.name, departments.c.id)
        ).fetchall()
        logger.debug("Search for %r matched %d department(s).", keyword, len(rows))
        return [_to_entity(row) for row in rows]

    def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Return True if a department other than exclude_id uses this name."""
        stmt = select(departments.c.id).where(
            func.lower(departments.c.name) == func.lower(name)
        )
        if exclude_id is not None:
            stmt = stmt.where(departments.c.id != exclude_id)
        return self._conn().execute(stmt.limit(1)).first() is not None
