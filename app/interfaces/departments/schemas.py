"""
Pydantic schemas for department API request/response validation.

These schemas enforce the request shape and define the API contract.
Field rules (blank names, lengths) and uniqueness are left to the
service, so they are reported in rule order as 400 responses.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.domain.departments.entities import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH

NAME_DESCRIPTION = (
    f"Department name, up to {NAME_MAX_LENGTH} characters, unique ignoring case"
)


class DepartmentWriteRequest(BaseModel):
    """Request schema shared by create and update.

    Attributes:
        name: Department name, checked against the field rules.
        description: Optional description, checked against the field rules.
    """

    name: str = Field(
        ...,
        min_length=1,
        description=NAME_DESCRIPTION,
    )
    description: str | None = Field(
        default=None,
        description=f"Free-text description, up to {DESCRIPTION_MAX_LENGTH} characters",
    )


class CreateDepartmentRequest(DepartmentWriteRequest):
    """Request schema for creating a department."""


class UpdateDepartmentRequest(DepartmentWriteRequest):
    """Request schema for updating a department's name and description."""


class DepartmentResponse(BaseModel):
    """A single department in a response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str


class FieldViolationResponse(BaseModel):
    """One broken field rule."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error response schema.

    violations is only present when more than one field rule failed.
    """

    error: str
    detail: str | None = None
    violations: list[FieldViolationResponse] | None = None


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    version: str
