"""Employee CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeSummaryResponse,
    EmployeeUpdate,
    MessageResponse,
)
from app.application.services import EmployeeService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_employee_service

router = APIRouter(prefix="/employees", tags=["Employees"])


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> list[EmployeeResponse]:
    """Retrieve every employee."""
    employees = await service.list_employees()
    return [EmployeeResponse.model_validate(e, from_attributes=True) for e in employees]


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    data: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """Create an employee; the id is normally generated by the client."""
    employee = await service.create_employee(data)
    return EmployeeResponse.model_validate(employee, from_attributes=True)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: str,
    data: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """Replace every field of an existing employee."""
    try:
        employee = await service.update_employee(employee_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return EmployeeResponse.model_validate(employee, from_attributes=True)


@router.delete("/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> MessageResponse:
    """Delete an employee. Their assembly records keep the dangling employeeId."""
    try:
        await service.delete_employee(employee_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(message="Employee deleted")


@router.get("/{employee_id}/summary", response_model=EmployeeSummaryResponse)
async def employee_summary(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeSummaryResponse:
    """Total earnings and units assembled by one employee."""
    try:
        aggregate = await service.summarize_employee(employee_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return EmployeeSummaryResponse(
        employee_id=employee_id,
        total_earnings=aggregate.total_earnings,
        total_units_assembled=aggregate.total_units_assembled,
    )
