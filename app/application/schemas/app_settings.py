"""Pydantic DTOs for the application settings singleton."""

from pydantic import Field, field_validator

from app.application.schemas.base import CamelModel


class AppSettingsUpdate(CamelModel):
    """Payload for ``PUT /settings``; rejected as a whole if any field is invalid."""

    company_name: str = Field(..., examples=["FurniTrack"])
    default_percentage: float = Field(..., ge=0, le=100, allow_inf_nan=False, examples=[20])

    @field_validator("company_name")
    @classmethod
    def _non_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("companyName must not be empty")
        return value


class AppSettingsResponse(CamelModel):
    """Current settings."""

    company_name: str
    default_percentage: float
