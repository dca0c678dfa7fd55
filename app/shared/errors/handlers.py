"""
Centralized error handlers for FastAPI.

Maps department domain errors to HTTP responses:
    InvalidDepartmentError       -> 400
    DepartmentNotFoundError      -> 404
    DepartmentNameNotFoundError  -> 404
    DuplicateDepartmentNameError -> 409
    DepartmentPersistenceError   -> 500
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.departments.errors import (
    DepartmentDomainError,
    DepartmentNameNotFoundError,
    DepartmentNotFoundError,
    DepartmentPersistenceError,
    DuplicateDepartmentNameError,
    InvalidDepartmentError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500


def _error_response(
    status_code: int,
    error: str,
    detail: str | None = None,
    violations: list[dict[str, str]] | None = None,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict = {"error": error}
    if detail:
        body["detail"] = detail
    if violations:
        body["violations"] = violations
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(InvalidDepartmentError)
    async def handle_invalid_department(
        _request: Request, exc: InvalidDepartmentError
    ) -> JSONResponse:
        """Handle malformed department input."""
        logger.warning("Invalid department input: %s", exc.message)
        violations = None
        if len(exc.violations) > 1:
            violations = [
                {"field": v.field, "message": v.message} for v in exc.violations
            ]
        return _error_response(HTTP_400, "Invalid input", exc.message, violations)

    @app.exception_handler(DepartmentNotFoundError)
    async def handle_department_not_found(
        _request: Request, exc: DepartmentNotFoundError
    ) -> JSONResponse:
        """Handle missing department errors."""
        logger.warning("Department not found: %s", exc.department_id)
        return _error_response(HTTP_404, "Department not found", exc.message)

    @app.exception_handler(DepartmentNameNotFoundError)
    async def handle_department_name_not_found(
        _request: Request, exc: DepartmentNameNotFoundError
    ) -> JSONResponse:
        logger.warning("Department not found by name: %s", exc.name)
        return _error_response(HTTP_404, "Department not found", exc.message)

    @app.exception_handler(DuplicateDepartmentNameError)
    async def handle_duplicate_name(
        _request: Request, exc: DuplicateDepartmentNameError
    ) -> JSONResponse:
        """Handle name uniqueness conflicts."""
        logger.warning("Duplicate department name: %s", exc.name)
        return _error_response(HTTP_409, "Department already exists", exc.message)

    @app.exception_handler(DepartmentPersistenceError)
    async def handle_persistence_failure(
        _request: Request, exc: DepartmentPersistenceError
    ) -> JSONResponse:
        """Handle storage failures. The cause is logged, never returned."""
        logger.error(
            "Persistence failure during %s: %s (cause: %r)",
            exc.operation,
            exc.message,
            exc.__cause__,
        )
        return _error_response(HTTP_500, "Persistence failure")

    @app.exception_handler(DepartmentDomainError)
    async def handle_department_domain(
        _request: Request, exc: DepartmentDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled department domain errors."""
        logger.error("Unhandled department domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
