"""Unit tests for the ReportService (dashboard and CSV export)."""

import csv
import io
from datetime import date

import pytest

from app.application.services import ExportRange, ReportService
from app.application.services.report_service import CSV_HEADER, period_start
from app.domain.entities import AssemblyRecord, AssemblyRecordItem, Employee

TODAY = date(2025, 5, 31)


def _record(employee_id: str, on: date, name: str, quantity: int, total: float):
    item = AssemblyRecordItem(
        name=name,
        quantity=quantity,
        price=total,
        price_with_tax=total / quantity,
        total_item_price_with_tax=total,
    )
    return AssemblyRecord(
        employee_id=employee_id, date=on, items=[item], total_price=total, quantity=quantity
    )


async def _seeded_service(employee_repo, record_repo) -> ReportService:
    await employee_repo.create(Employee(id="e1", name="Anna"))
    await record_repo.create(_record("e1", date(2025, 5, 2), "Wardrobe", 2, 160.0))
    await record_repo.create(_record("e1", date(2025, 1, 10), "Shelf", 1, 50.0))
    await record_repo.create(_record("gone", date(2024, 2, 29), "Bed", 1, 300.0))
    await record_repo.create(_record("e1", date(2025, 6, 3), "Desk", 1, 70.0))
    return ReportService(record_repo, employee_repo)


def _rows(content: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(content)))


@pytest.mark.parametrize(
    ("export_range", "expected"),
    [
        (ExportRange.ALL, None),
        (ExportRange.MONTH, date(2025, 4, 30)),
        (ExportRange.QUARTER, date(2025, 2, 28)),
        (ExportRange.YEAR, date(2024, 5, 31)),
    ],
)
def test_period_start(export_range, expected):
    assert period_start(export_range, TODAY) == expected


def test_period_start_crosses_year_boundary():
    assert period_start(ExportRange.QUARTER, date(2025, 1, 15)) == date(2024, 10, 15)


@pytest.mark.asyncio
async def test_dashboard(employee_repo, record_repo):
    service = await _seeded_service(employee_repo, record_repo)
    summary = await service.dashboard(today=TODAY)

    assert summary.total_units_assembled == 5
    assert summary.total_earnings == 580.0
    assert summary.records_this_month == 1
    assert summary.top_performers[0].name == "Anna"
    assert summary.top_performers[0].units_assembled == 4


@pytest.mark.asyncio
async def test_export_all_is_sorted_and_skips_future_records(employee_repo, record_repo):
    service = await _seeded_service(employee_repo, record_repo)
    rows = _rows(await service.export_csv(ExportRange.ALL, today=TODAY))

    assert rows[0] == CSV_HEADER
    assert [r[0] for r in rows[1:]] == ["2024-02-29", "2025-01-10", "2025-05-02"]


@pytest.mark.asyncio
async def test_export_shows_unknown_for_deleted_employee(employee_repo, record_repo):
    service = await _seeded_service(employee_repo, record_repo)
    rows = _rows(await service.export_csv(ExportRange.ALL, today=TODAY))

    assert rows[1] == ["2024-02-29", "Unknown", "Bed (x1)", "1", "300.00"]
    assert rows[3] == ["2025-05-02", "Anna", "Wardrobe (x2)", "2", "160.00"]


@pytest.mark.asyncio
async def test_export_month_range(employee_repo, record_repo):
    service = await _seeded_service(employee_repo, record_repo)
    rows = _rows(await service.export_csv(ExportRange.MONTH, today=TODAY))
    assert [r[0] for r in rows[1:]] == ["2025-05-02"]


@pytest.mark.asyncio
async def test_export_quarter_range(employee_repo, record_repo):
    service = await _seeded_service(employee_repo, record_repo)
    rows = _rows(await service.export_csv(ExportRange.QUARTER, today=TODAY))
    assert [r[0] for r in rows[1:]] == ["2025-05-02"]


@pytest.mark.asyncio
async def test_export_year_range(employee_repo, record_repo):
    service = await _seeded_service(employee_repo, record_repo)
    rows = _rows(await service.export_csv(ExportRange.YEAR, today=TODAY))
    assert [r[0] for r in rows[1:]] == ["2025-01-10", "2025-05-02"]
