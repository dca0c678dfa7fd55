"""
Field validation for Department records.

Pure business logic. The rules run in a fixed order:

    1. name is not blank
    2. name length is within NAME_MAX_LENGTH
    3. description length is within DESCRIPTION_MAX_LENGTH

Fail-fast mode stops at the first broken rule. Collect mode evaluates
every rule and reports all violations, headlined by the first one.
"""

from typing import Callable, NamedTuple

from app.domain.departments.entities import (
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    Department,
)
from app.domain.departments.errors import FieldViolation, InvalidDepartmentError

NAME_BLANK_MESSAGE = "Department name cannot be null or empty."
NAME_TOO_LONG_MESSAGE = (
    f"Department name cannot exceed {NAME_MAX_LENGTH} characters."
)
DESCRIPTION_TOO_LONG_MESSAGE = (
    f"Department description cannot exceed {DESCRIPTION_MAX_LENGTH} characters."
)
INVALID_ID_MESSAGE = "Department ID must be greater than zero."


class FieldRule(NamedTuple):
    """A single ordered rule. ``broken`` returns True when the rule fails."""

    field: str
    broken: Callable[[Department], bool]
    message: str


def is_blank(value: object) -> bool:
    """Return True for None, non-strings and whitespace-only strings."""
    return not isinstance(value, str) or not value.strip()


def _name_too_long(department: Department) -> bool:
    return not is_blank(department.name) and len(department.name) > NAME_MAX_LENGTH


def _description_too_long(department: Department) -> bool:
    return len(department.description or "") > DESCRIPTION_MAX_LENGTH


FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("name", lambda d: is_blank(d.name), NAME_BLANK_MESSAGE),
    FieldRule("name", _name_too_long, NAME_TOO_LONG_MESSAGE),
    FieldRule("description", _description_too_long, DESCRIPTION_TOO_LONG_MESSAGE),
)


def collect_violations(department: Department) -> list[FieldViolation]:
    """Evaluate every field rule and return the violations in rule order."""
    return [
        FieldViolation(rule.field, rule.message)
        for rule in FIELD_RULES
        if rule.broken(department)
    ]


def validate_department(department: Department, collect_all: bool = False) -> None:
    """Validate a department's fields.

    Args:
        department: The record to check. Must not be None.
        collect_all: Evaluate every rule instead of stopping at the first.

    Raises:
        InvalidDepartmentError: If any rule is broken.
    """
    if collect_all:
        violations = collect_violations(department)
        if violations:
            raise InvalidDepartmentError.from_violations(violations)
        return

    for rule in FIELD_RULES:
        if rule.broken(department):
            raise InvalidDepartmentError(rule.message, field=rule.field)


def require_positive_id(department_id: int) -> None:
    """Raise InvalidDepartmentError unless the identifier is a positive int."""
    if (
        not isinstance(department_id, int)
        or isinstance(department_id, bool)
        or department_id <= 0
    ):
        raise InvalidDepartmentError(INVALID_ID_MESSAGE, field="id")


def require_not_blank(value: str, field: str) -> None:
    """Raise InvalidDepartmentError when a lookup argument is blank."""
    if is_blank(value):
        raise InvalidDepartmentError(
            f"{field.capitalize()} cannot be null or empty.", field=field
        )
