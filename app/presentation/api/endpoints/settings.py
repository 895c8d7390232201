"""Settings API — the company name and price deduction percentage."""

from fastapi import APIRouter, Depends

from app.application.schemas import AppSettingsResponse, AppSettingsUpdate
from app.application.services import AppSettingsService
from app.infrastructure.dependencies import get_app_settings_service

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", response_model=AppSettingsResponse)
async def get_app_settings(
    service: AppSettingsService = Depends(get_app_settings_service),
) -> AppSettingsResponse:
    """Return the settings row, seeding defaults on first access."""
    current = await service.get_settings()
    return AppSettingsResponse.model_validate(current, from_attributes=True)


@router.put("", response_model=AppSettingsResponse)
async def put_app_settings(
    body: AppSettingsUpdate,
    service: AppSettingsService = Depends(get_app_settings_service),
) -> AppSettingsResponse:
    """Update both settings. Invalid payloads never reach storage (400)."""
    updated = await service.update_settings(body)
    return AppSettingsResponse.model_validate(updated, from_attributes=True)
