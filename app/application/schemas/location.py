"""Pydantic DTOs (Data Transfer Objects) for the Location feature."""

from datetime import datetime

from pydantic import Field

from app.application.schemas.base import CamelModel


class LocationUpdate(CamelModel):
    """Schema for a full-record replace of a location."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Riverside flat"])
    address: str = Field(..., min_length=1, examples=["12 River St, apt 4"])
    contact_person: str | None = Field(None, max_length=255)
    contact_info: str | None = Field(None, max_length=255)
    notes: str | None = None


class LocationCreate(LocationUpdate):
    """Schema for creating a location; the client normally supplies the id."""

    id: str | None = Field(None, min_length=1, max_length=64)


class LocationResponse(CamelModel):
    """Schema returned to the client."""

    id: str
    name: str
    address: str
    contact_person: str | None
    contact_info: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime
