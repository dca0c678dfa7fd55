"""
Adapter: In-memory department repository.

Implements DepartmentRepository port over a process-local store.
Used as the test double for the DepartmentService and as a storage
backend for local runs without a database.

Ids come from a counter that only moves forward, so sequential adds
without rollbacks receive consecutive ids. Changes are staged per
repository instance and applied to the shared store on commit().
"""

import logging
import threading
from dataclasses import replace
from typing import Optional

from app.domain.departments.entities import Department
from app.domain.departments.errors import DuplicateDepartmentNameError
from app.domain.departments.ports import DepartmentRepository

logger = logging.getLogger(__name__)


class InMemoryDepartmentStore:
    """Committed department state shared by repository instances.

    Request handlers run in a thread pool, so id allocation and commits
    are serialized on the store lock.
    """

    def __init__(self) -> None:
        self.records: dict[int, Department] = {}
        self.lock = threading.Lock()
        self._last_id = 0

    def next_id(self) -> int:
        with self.lock:
            self._last_id += 1
            return self._last_id

    def __len__(self) -> int:
        return len(self.records)


class InMemoryDepartmentRepository(DepartmentRepository):
    """Keeps departments in a dict. Reads see committed state only."""

    def __init__(self, store: Optional[InMemoryDepartmentStore] = None) -> None:
        self._store = store if store is not None else InMemoryDepartmentStore()
        self._pending: list[tuple[str, Department]] = []

    @property
    def store(self) -> InMemoryDepartmentStore:
        return self._store

    # ── Writes ───────────────────────────────────────────────────────

    def add(self, department: Department) -> Department:
        staged = replace(department, id=self._store.next_id())
        self._pending.append(("add", staged))
        return replace(staged)

    def update(self, department: Department) -> Department:
        staged = replace(department)
        self._pending.append(("update", staged))
        return replace(staged)

    def delete(self, department_id: int) -> bool:
        if department_id not in self._store.records:
            return False
        self._pending.append(("delete", Department(name=None, id=department_id)))
        return True

    def commit(self) -> int:
        """Apply staged changes to the store.

        Raises:
            DuplicateDepartmentNameError: If applying the changes would leave
                two departments with the same name ignoring case. Nothing is
                applied in that case.
        """
        pending, self._pending = self._pending, []
        affected = 0

        with self._store.lock:
            records = dict(self._store.records)
            for action, department in pending:
                if action == "add":
                    records[department.id] = department
                    affected += 1
                elif action == "update" and department.id in records:
                    records[department.id] = department
                    affected += 1
                elif action == "delete" and records.pop(department.id, None) is not None:
                    affected += 1

            seen: set[str] = set()
            for department in records.values():
                key = department.name.lower()
                if key in seen:
                    raise DuplicateDepartmentNameError(department.name)
                seen.add(key)

            self._store.records = records

        logger.debug("Committed %d in-memory department change(s).", affected)
        return affected

    def rollback(self) -> None:
        self._pending = []

    def close(self) -> None:
        self.rollback()

    # ── Reads ────────────────────────────────────────────────────────

    def get_by_id(self, department_id: int) -> Optional[Department]:
        department = self._store.records.get(department_id)
        return replace(department) if department is not None else None

    def get_by_name(self, name: str) -> Optional[Department]:
        key = name.lower()
        for department in self._ordered():
            if department.name.lower() == key:
                return replace(department)
        return None

    def get_all(self) -> list[Department]:
        return [replace(d) for d in self._ordered()]

    def search_by_name(self, keyword: str) -> list[Department]:
        key = keyword.lower()
        return [replace(d) for d in self._ordered() if key in d.name.lower()]

    def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        key = name.lower()
        return any(
            d.name.lower() == key and d.id != exclude_id
            for d in self._store.records.values()
        )

    def _ordered(self) -> list[Department]:
        return sorted(self._store.records.values(), key=lambda d: (d.name, d.id))
