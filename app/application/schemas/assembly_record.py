"""Pydantic DTOs (Data Transfer Objects) for the AssemblyRecord feature."""

import datetime as dt
from uuid import uuid4

from pydantic import Field, field_validator

from app.application.schemas.base import CamelModel


class AssemblyRecordItemSchema(CamelModel):
    """One priced furniture line, as submitted and as returned."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str = Field(..., min_length=1, examples=["Wardrobe PAX"])
    quantity: int = Field(..., gt=0, examples=[2])
    price: float = Field(..., ge=0, allow_inf_nan=False, examples=[100.0])
    price_with_tax: float = Field(..., allow_inf_nan=False, examples=[80.0])
    total_item_price_with_tax: float = Field(..., allow_inf_nan=False, examples=[160.0])


class AssemblyRecordUpdate(CamelModel):
    """Schema for a full replace of an assembly record.

    ``quantity`` is accepted for compatibility but ignored: the server
    always derives it from ``items``. ``total_price`` is stored as sent;
    when omitted it is derived from the item totals.
    """

    employee_id: str = Field(..., min_length=1)
    location_id: str | None = None
    date: dt.date = Field(..., examples=["2025-05-14"])
    items: list[AssemblyRecordItemSchema] = Field(default_factory=list)
    total_price: float | None = Field(None, allow_inf_nan=False, examples=[210.0])
    notes: str | None = None
    quantity: int | None = None

    @field_validator("location_id")
    @classmethod
    def _blank_location_is_none(cls, value: str | None) -> str | None:
        # The browser form sends "" when no location is picked
        if value is not None and not value.strip():
            return None
        return value


class AssemblyRecordCreate(AssemblyRecordUpdate):
    """Schema for creating an assembly record; the client normally supplies the id."""

    id: str | None = Field(None, min_length=1, max_length=64)


class AssemblyRecordResponse(CamelModel):
    """Schema returned to the client."""

    id: str
    employee_id: str
    location_id: str | None
    date: dt.date
    items: list[AssemblyRecordItemSchema]
    total_price: float
    notes: str | None
    quantity: int
    created_at: dt.datetime
    updated_at: dt.datetime
