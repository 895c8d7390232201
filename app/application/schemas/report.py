"""Pydantic DTOs for dashboard figures."""

from app.application.schemas.base import CamelModel


class PerformerResponse(CamelModel):
    employee_id: str
    name: str
    units_assembled: int
    total_value: float


class FurnitureCountResponse(CamelModel):
    name: str
    quantity: int


class DashboardSummaryResponse(CamelModel):
    """Overall totals plus the top employees and furniture by units."""

    total_units_assembled: int
    total_earnings: float
    records_this_month: int
    top_performers: list[PerformerResponse]
    top_furniture: list[FurnitureCountResponse]
