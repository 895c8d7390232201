"""Read-only reports: dashboard figures and CSV export."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from app.application.schemas import (
    DashboardSummaryResponse,
    FurnitureCountResponse,
    PerformerResponse,
)
from app.application.services import ExportRange, ReportService
from app.infrastructure.dependencies import get_report_service

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/dashboard", response_model=DashboardSummaryResponse)
async def dashboard(
    service: ReportService = Depends(get_report_service),
) -> DashboardSummaryResponse:
    summary = await service.dashboard()
    return DashboardSummaryResponse(
        total_units_assembled=summary.total_units_assembled,
        total_earnings=summary.total_earnings,
        records_this_month=summary.records_this_month,
        top_performers=[
            PerformerResponse.model_validate(p, from_attributes=True)
            for p in summary.top_performers
        ],
        top_furniture=[
            FurnitureCountResponse(name=name, quantity=quantity)
            for name, quantity in summary.top_furniture
        ],
    )


@router.get("/assembly-records.csv")
async def export_assembly_records(
    export_range: ExportRange = Query(ExportRange.ALL, alias="range"),
    service: ReportService = Depends(get_report_service),
) -> Response:
    """Download records of the chosen period as CSV."""
    content = await service.export_csv(export_range)
    return Response(
        content=content,
        media_type="text/csv",
        headers={
            "Content-Disposition": (
                f"attachment; filename=assembly-records-{export_range.value}.csv"
            )
        },
    )
