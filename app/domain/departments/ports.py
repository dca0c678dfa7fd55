"""
Port interfaces (ABCs) for the departments bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.departments.entities import Department


class DepartmentRepository(ABC):
    """Port for storing and querying Department records.

    Mutations are staged and become durable on ``commit``. Name lookups
    compare case-insensitively. Listing methods order by name ascending.
    """

    @abstractmethod
    def add(self, department: Department) -> Department:
        """Stage a new department and return a copy carrying its new id."""
        raise NotImplementedError

    @abstractmethod
    def update(self, department: Department) -> Department:
        """Stage new name/description values for an existing department."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, department_id: int) -> bool:
        """Stage removal of a department.

        Returns:
            True if the department existed, False otherwise.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, department_id: int) -> Optional[Department]:
        """Return a department by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Department]:
        """Return the department whose name matches ignoring case, or None."""
        raise NotImplementedError

    @abstractmethod
    def get_all(self) -> list[Department]:
        """Return all departments ordered by name ascending."""
        raise NotImplementedError

    @abstractmethod
    def search_by_name(self, keyword: str) -> list[Department]:
        """Return departments whose name contains the keyword, ignoring case.

        Returns:
            List of Department ordered by name ascending.
        """
        raise NotImplementedError

    @abstractmethod
    def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Return True if another department already uses this name.

        Args:
            name: Name to look up, compared ignoring case.
            exclude_id: Optional department ID to leave out of the check,
                so that a record does not conflict with itself on update.
        """
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> int:
        """Make staged changes durable.

        Returns:
            Number of rows affected since the previous commit.
        """
        raise NotImplementedError
