"""
FastAPI router for the departments bounded context.

All routes delegate to the DepartmentService. No business logic here.
Request shape validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import (
    APIRouter,
    Depends,
    Query,
    Request,
    Response,
    status,
)

from app.application.departments.department_service import DepartmentService
from app.domain.departments.entities import NAME_MAX_LENGTH, Department
from app.domain.departments.errors import (
    DepartmentNameNotFoundError,
    DepartmentNotFoundError,
)
from app.interfaces.departments.dependencies import get_department_service
from app.interfaces.departments.schemas import (
    CreateDepartmentRequest,
    DepartmentResponse,
    ErrorResponse,
    UpdateDepartmentRequest,
)

router = APIRouter(prefix="/departments", tags=["departments"])


def _to_response(department: Department) -> DepartmentResponse:
    return DepartmentResponse.model_validate(department)


@router.get(
    "",
    response_model=list[DepartmentResponse],
    summary="List departments",
    description="Return every department ordered by name.",
)
def list_departments(
    service: DepartmentService = Depends(get_department_service),
) -> list[DepartmentResponse]:
    """List all departments."""
    return [_to_response(d) for d in service.get_all_departments()]


@router.get(
    "/search",
    response_model=list[DepartmentResponse],
    responses={400: {"model": ErrorResponse}},
    summary="Search departments by name",
    description="Case-insensitive substring search on department names.",
)
def search_departments(
    keyword: str = Query(..., min_length=1, max_length=NAME_MAX_LENGTH),
    service: DepartmentService = Depends(get_department_service),
) -> list[DepartmentResponse]:
    """Search departments whose name contains the keyword."""
    return [_to_response(d) for d in service.search_departments_by_name(keyword)]


@router.get(
    "/by-name/{name}",
    response_model=DepartmentResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get a department by name",
)
def get_department_by_name(
    name: str,
    service: DepartmentService = Depends(get_department_service),
) -> DepartmentResponse:
    """Return the department with this name, ignoring case."""
    department = service.get_department_by_name(name)
    if department is None:
        raise DepartmentNameNotFoundError(name)
    return _to_response(department)


@router.get(
    "/{department_id}",
    response_model=DepartmentResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get a department by ID",
)
def get_department(
    department_id: int,
    service: DepartmentService = Depends(get_department_service),
) -> DepartmentResponse:
    """Return a single department."""
    department = service.get_department_by_id(department_id)
    if department is None:
        raise DepartmentNotFoundError(department_id)
    return _to_response(department)


@router.post(
    "",
    response_model=DepartmentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Create a department",
)
def create_department(
    request: CreateDepartmentRequest,
    http_request: Request,
    response: Response,
    service: DepartmentService = Depends(get_department_service),
) -> DepartmentResponse:
    """Create a department and return it with its new ID."""
    department = service.add_department(
        Department(name=request.name, description=request.description)
    )
    response.headers["Location"] = str(
        http_request.url_for("get_department", department_id=department.id)
    )
    return _to_response(department)


@router.put(
    "/{department_id}",
    response_model=DepartmentResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Update a department",
)
def update_department(
    department_id: int,
    request: UpdateDepartmentRequest,
    service: DepartmentService = Depends(get_department_service),
) -> DepartmentResponse:
    """Replace a department's name and description."""
    department = service.update_department(
        Department(
            id=department_id,
            name=request.name,
            description=request.description,
        )
    )
    return _to_response(department)


@router.delete(
    "/{department_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete a department",
)
def delete_department(
    department_id: int,
    service: DepartmentService = Depends(get_department_service),
) -> Response:
    """Delete a department."""
    service.delete_department(department_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
