"""
Domain-specific errors for the departments bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FieldViolation:
    """A single failed field rule.

    Attributes:
        field: Name of the offending attribute (name, description, id).
        message: Human-readable reason, suitable for API responses.
    """

    field: str
    message: str


class DepartmentDomainError(Exception):
    """Base error for all departments domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidDepartmentError(DepartmentDomainError):
    """Raised when caller input is malformed (InvalidInput).

    The headline message is the first violation. When validation runs in
    collect mode every violation is kept in ``violations``, in rule order.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        violations: Optional[list[FieldViolation]] = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        if violations is None:
            violations = [FieldViolation(field or "department", message)]
        self.violations = violations

    @classmethod
    def from_violations(
        cls, violations: list[FieldViolation]
    ) -> "InvalidDepartmentError":
        """Build an error headlined by the first of several violations."""
        first = violations[0]
        return cls(first.message, field=first.field, violations=list(violations))


class DepartmentNotFoundError(DepartmentDomainError):
    """Raised when a referenced department does not exist (NotFound)."""

    def __init__(self, department_id: int) -> None:
        super().__init__(f"Department with ID {department_id} does not exist.")
        self.department_id = department_id


class DepartmentNameNotFoundError(DepartmentDomainError):
    """Raised when no department has the requested name (NotFound)."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Department with name '{name}' does not exist.")
        self.name = name


class DuplicateDepartmentNameError(DepartmentDomainError):
    """Raised when a name is already taken, ignoring case (Conflict)."""

    def __init__(self, name: str) -> None:
        super().__init__(f"A department with name '{name}' already exists.")
        self.name = name


class DepartmentPersistenceError(DepartmentDomainError):
    """Raised when storage fails or reports no effect (PersistenceFailure).

    The underlying exception, if any, is chained as ``__cause__``.
    """

    def __init__(self, message: str, operation: str) -> None:
        super().__init__(message)
        self.operation = operation
