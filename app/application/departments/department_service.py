"""
Department Service: admission control over Department mutations.

Input: Department records (create/update) and identifiers (read/delete).
Output: Persisted Department records, or None for lookups that miss.
Side effects: One staged change plus one commit per successful mutation.
Failure cases:
    - InvalidDepartmentError: absent record, blank/oversized fields, id <= 0.
    - DepartmentNotFoundError: update/delete of a missing record.
    - DuplicateDepartmentNameError: name already taken, ignoring case.
    - DepartmentPersistenceError: storage raised or committed zero rows.

Checks run in a fixed order and the first failure is the only one
reported: record present, id positive (update), name blank, name length,
description length, record exists (update), name unique, persistence.
"""

import logging
from typing import Optional

from app.domain.departments.entities import Department
from app.domain.departments.errors import (
    DepartmentDomainError,
    DepartmentNotFoundError,
    DepartmentPersistenceError,
    DuplicateDepartmentNameError,
    InvalidDepartmentError,
)
from app.domain.departments.ports import DepartmentRepository
from app.domain.departments.validation import (
    require_not_blank,
    require_positive_id,
    validate_department,
)

logger = logging.getLogger(__name__)

MISSING_DEPARTMENT_MESSAGE = "Department cannot be null."


class DepartmentService:
    """Validates department input, enforces name uniqueness and
    delegates persistence to a DepartmentRepository.

    Reads pass straight through to the repository after light argument
    checks. Storage errors raised while writing are wrapped in
    DepartmentPersistenceError with the original chained as its cause;
    domain errors are never rewrapped.
    """

    def __init__(
        self,
        repository: DepartmentRepository,
        collect_all_violations: bool = False,
    ) -> None:
        """Initialize the service.

        Args:
            repository: The persistence gateway to delegate to.
            collect_all_violations: Report every field violation at once,
                headlined by the first, instead of stopping at the first.
        """
        if repository is None:
            raise ValueError("repository is required")
        self._repository = repository
        self._collect_all_violations = collect_all_violations

    # ── Mutations ────────────────────────────────────────────────────

    def add_department(self, department: Department) -> Department:
        """Validate and persist a new department.

        Args:
            department: The record to add. Its id is set on success.

        Returns:
            The same department, now carrying its storage-assigned id.

        Raises:
            InvalidDepartmentError: If the record is absent or a field is invalid.
            DuplicateDepartmentNameError: If the name is already in use.
            DepartmentPersistenceError: If storage fails or adds nothing.
        """
        logger.info("Starting add_department operation")

        self._validate_input(department)
        self._ensure_name_available(department.name)

        try:
            stored = self._repository.add(department)
            affected_rows = self._repository.commit()
        except DepartmentDomainError:
            raise
        except Exception as exc:
            logger.error(
                "Unexpected error occurred while adding department %s",
                department.name,
                exc_info=True,
            )
            raise DepartmentPersistenceError(
                "An unexpected error occurred while adding the department.",
                operation="add",
            ) from exc

        if affected_rows == 0:
            logger.warning(
                "No rows were affected when adding department %s", department.name
            )
            raise DepartmentPersistenceError(
                "Failed to add department to database.", operation="add"
            )

        department.id = stored.id
        logger.info(
            "Successfully added department %s with ID %d",
            department.name,
            department.id,
        )
        return department

    def update_department(self, department: Department) -> Department:
        """Validate and persist new name/description for a department.

        A department may keep its current name (in any casing) without
        tripping the uniqueness rule.

        Raises:
            InvalidDepartmentError: If the record is absent, the id is not
                positive, or a field is invalid.
            DepartmentNotFoundError: If no department has this id.
            DuplicateDepartmentNameError: If another department holds the name.
            DepartmentPersistenceError: If storage fails or updates nothing.
        """
        if department is None:
            raise InvalidDepartmentError(
                MISSING_DEPARTMENT_MESSAGE, field="department"
            )

        logger.info("Starting update_department operation for ID %s", department.id)

        require_positive_id(department.id)
        self._validate_input(department)

        if self._repository.get_by_id(department.id) is None:
            logger.warning("Update requested for missing department %d", department.id)
            raise DepartmentNotFoundError(department.id)

        self._ensure_name_available(department.name, exclude_id=department.id)

        try:
            stored = self._repository.update(department)
            affected_rows = self._repository.commit()
        except DepartmentDomainError:
            raise
        except Exception as exc:
            logger.error(
                "Unexpected error occurred while updating department %d",
                department.id,
                exc_info=True,
            )
            raise DepartmentPersistenceError(
                "An unexpected error occurred while updating the department.",
                operation="update",
            ) from exc

        if affected_rows == 0:
            logger.warning(
                "No rows were affected when updating department %d", department.id
            )
            raise DepartmentPersistenceError(
                "Failed to update department in database.", operation="update"
            )

        logger.info("Successfully updated department %d", department.id)
        return stored

    def delete_department(self, department_id: int) -> None:
        """Remove a department and commit the change.

        Raises:
            InvalidDepartmentError: If the id is not positive.
            DepartmentNotFoundError: If no department has this id.
            DepartmentPersistenceError: If storage fails or deletes nothing.
        """
        logger.info("Starting delete_department operation for ID %s", department_id)

        require_positive_id(department_id)

        if self._repository.get_by_id(department_id) is None:
            logger.warning("Delete requested for missing department %d", department_id)
            raise DepartmentNotFoundError(department_id)

        try:
            if not self._repository.delete(department_id):
                raise DepartmentNotFoundError(department_id)
            affected_rows = self._repository.commit()
        except DepartmentDomainError:
            raise
        except Exception as exc:
            logger.error(
                "Unexpected error occurred while deleting department %d",
                department_id,
                exc_info=True,
            )
            raise DepartmentPersistenceError(
                "An unexpected error occurred while deleting the department.",
                operation="delete",
            ) from exc

        if affected_rows == 0:
            logger.warning(
                "No rows were affected when deleting department %d", department_id
            )
            raise DepartmentPersistenceError(
                "Failed to delete department from database.", operation="delete"
            )

        logger.info("Successfully deleted department %d", department_id)

    # ── Queries ──────────────────────────────────────────────────────

    def get_department_by_id(self, department_id: int) -> Optional[Department]:
        """Return the department with this id, or None if there is none."""
        require_positive_id(department_id)
        logger.debug("Getting department by ID: %d", department_id)
        return self._repository.get_by_id(department_id)

    def get_department_by_name(self, name: str) -> Optional[Department]:
        """Return the department with this name (ignoring case), or None."""
        require_not_blank(name, "name")
        logger.debug("Getting department by name: %s", name)
        return self._repository.get_by_name(name)

    def search_departments_by_name(self, keyword: str) -> list[Department]:
        """Return departments whose name contains the keyword, ordered by name."""
        require_not_blank(keyword, "keyword")
        logger.debug("Searching departments by keyword: %s", keyword)
        return self._repository.search_by_name(keyword)

    def get_all_departments(self) -> list[Department]:
        """Return every department ordered by name."""
        logger.debug("Getting all departments")
        return self._repository.get_all()

    # ── Rules ────────────────────────────────────────────────────────

    def _validate_input(self, department: Department) -> None:
        if department is None:
            logger.warning("Department operation called without a department")
            raise InvalidDepartmentError(
                MISSING_DEPARTMENT_MESSAGE, field="department"
            )

        try:
            validate_department(department, collect_all=self._collect_all_violations)
        except InvalidDepartmentError as exc:
            logger.warning(
                "Department validation failed (%d violation(s)): %s",
                len(exc.violations),
                exc.message,
            )
            raise

    def _ensure_name_available(
        self, name: str, exclude_id: Optional[int] = None
    ) -> None:
        if exclude_id is None:
            taken = self._repository.exists_by_name(name)
        else:
            taken = self._repository.exists_by_name(name, exclude_id=exclude_id)

        if taken:
            logger.warning("Attempt to use duplicate department name: %s", name)
            raise DuplicateDepartmentNameError(name)
