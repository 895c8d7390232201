"""Pydantic DTOs (Data Transfer Objects) for the Employee feature."""

import datetime as dt

from pydantic import Field

from app.application.schemas.base import CamelModel


class EmployeeUpdate(CamelModel):
    """Schema for a full-record replace of an employee."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Ivan Petrov"])
    position: str | None = Field(None, max_length=255, examples=["Assembler"])
    rate: float | None = Field(None, ge=0, allow_inf_nan=False, examples=[350.0])
    hire_date: dt.date | None = Field(None, examples=["2024-03-01"])
    contact_info: str | None = Field(None, max_length=255)


class EmployeeCreate(EmployeeUpdate):
    """Schema for creating an employee; the client normally supplies the id."""

    id: str | None = Field(None, min_length=1, max_length=64)


class EmployeeResponse(CamelModel):
    """Schema returned to the client."""

    id: str
    name: str
    position: str | None
    rate: float | None
    hire_date: dt.date | None
    contact_info: str | None
    created_at: dt.datetime
    updated_at: dt.datetime


class EmployeeSummaryResponse(CamelModel):
    """Earnings and output of one employee across all their records."""

    employee_id: str
    total_earnings: float
    total_units_assembled: int
