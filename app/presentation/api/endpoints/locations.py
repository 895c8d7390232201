"""Location CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import (
    LocationCreate,
    LocationResponse,
    LocationUpdate,
    MessageResponse,
)
from app.application.services import LocationService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_location_service

router = APIRouter(prefix="/locations", tags=["Locations"])


@router.get("", response_model=list[LocationResponse])
async def list_locations(
    service: LocationService = Depends(get_location_service),
) -> list[LocationResponse]:
    locations = await service.list_locations()
    return [LocationResponse.model_validate(loc, from_attributes=True) for loc in locations]


@router.post("", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
async def create_location(
    data: LocationCreate,
    service: LocationService = Depends(get_location_service),
) -> LocationResponse:
    location = await service.create_location(data)
    return LocationResponse.model_validate(location, from_attributes=True)


@router.put("/{location_id}", response_model=LocationResponse)
async def update_location(
    location_id: str,
    data: LocationUpdate,
    service: LocationService = Depends(get_location_service),
) -> LocationResponse:
    try:
        location = await service.update_location(location_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return LocationResponse.model_validate(location, from_attributes=True)


@router.delete("/{location_id}", response_model=MessageResponse)
async def delete_location(
    location_id: str,
    service: LocationService = Depends(get_location_service),
) -> MessageResponse:
    try:
        await service.delete_location(location_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(message="Location deleted")
