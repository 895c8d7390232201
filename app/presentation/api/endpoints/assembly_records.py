"""Assembly record endpoints, including the atomic batch insert."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import (
    AssemblyRecordCreate,
    AssemblyRecordResponse,
    AssemblyRecordUpdate,
    MessageResponse,
)
from app.application.services import AssemblyRecordService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_assembly_record_service

router = APIRouter(prefix="/assembly-records", tags=["Assembly Records"])


@router.get("", response_model=list[AssemblyRecordResponse])
async def list_records(
    employee_id: str | None = Query(None, alias="employeeId", description="Filter by employee"),
    service: AssemblyRecordService = Depends(get_assembly_record_service),
) -> list[AssemblyRecordResponse]:
    """Retrieve assembly records with their items decoded."""
    records = await service.list_records(employee_id=employee_id)
    return [AssemblyRecordResponse.model_validate(r, from_attributes=True) for r in records]


@router.post("", response_model=AssemblyRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_record(
    data: AssemblyRecordCreate,
    service: AssemblyRecordService = Depends(get_assembly_record_service),
) -> AssemblyRecordResponse:
    """Create one record; quantity is derived from the submitted items."""
    record = await service.create_record(data)
    return AssemblyRecordResponse.model_validate(record, from_attributes=True)


@router.post(
    "/batch",
    response_model=list[AssemblyRecordResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_records_batch(
    data: list[AssemblyRecordCreate],
    service: AssemblyRecordService = Depends(get_assembly_record_service),
) -> list[AssemblyRecordResponse]:
    """Create several records in one transaction, all of them or none."""
    records = await service.create_records(data)
    return [AssemblyRecordResponse.model_validate(r, from_attributes=True) for r in records]


@router.put("/{record_id}", response_model=AssemblyRecordResponse)
async def update_record(
    record_id: str,
    data: AssemblyRecordUpdate,
    service: AssemblyRecordService = Depends(get_assembly_record_service),
) -> AssemblyRecordResponse:
    """Replace items, notes and totals of an existing record."""
    try:
        record = await service.update_record(record_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return AssemblyRecordResponse.model_validate(record, from_attributes=True)


@router.delete("/{record_id}", response_model=MessageResponse)
async def delete_record(
    record_id: str,
    service: AssemblyRecordService = Depends(get_assembly_record_service),
) -> MessageResponse:
    try:
        await service.delete_record(record_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(message="Assembly record deleted")
