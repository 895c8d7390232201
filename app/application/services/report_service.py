"""Application service for read-only reports over assembly records."""

import calendar
import csv
import io
import logging
from datetime import date
from enum import Enum

from app.application.interfaces import AssemblyRecordRepository, EmployeeRepository
from app.domain.pricing import DashboardSummary, compute_record_quantity, summarize_records

logger = logging.getLogger(__name__)

UNKNOWN_EMPLOYEE = "Unknown"

CSV_HEADER = ["Date", "Employee", "Items", "Quantity", "Total"]


class ExportRange(str, Enum):
    """How far back from today an export reaches."""

    ALL = "all"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


_MONTHS_BACK = {
    ExportRange.MONTH: 1,
    ExportRange.QUARTER: 3,
    ExportRange.YEAR: 12,
}


def period_start(export_range: ExportRange, today: date) -> date | None:
    """First day included in the export, or None for no lower bound."""
    months = _MONTHS_BACK.get(export_range)
    if months is None:
        return None
    month_index = today.year * 12 + (today.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    # Clamp e.g. 31 March minus one month to the last day of February
    day = min(today.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


class ReportService:
    """Builds dashboard figures and CSV exports from stored records."""

    def __init__(
        self,
        record_repository: AssemblyRecordRepository,
        employee_repository: EmployeeRepository,
    ):
        self._records = record_repository
        self._employees = employee_repository

    async def dashboard(self, today: date | None = None) -> DashboardSummary:
        records = await self._records.get_all()
        employees = await self._employees.get_all()
        return summarize_records(records, employees, today or date.today())

    async def export_csv(
        self, export_range: ExportRange = ExportRange.ALL, today: date | None = None
    ) -> str:
        """Render records within the range as CSV, oldest first.

        Records whose employee has been deleted are exported with the
        employee shown as "Unknown".
        """
        today = today or date.today()
        start = period_start(export_range, today)
        names = {e.id: e.name for e in await self._employees.get_all()}
        records = [
            r
            for r in await self._records.get_all()
            if (start is None or r.date >= start) and r.date <= today
        ]
        records.sort(key=lambda r: r.date)

        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(CSV_HEADER)
        for record in records:
            writer.writerow([
                record.date.isoformat(),
                names.get(record.employee_id, UNKNOWN_EMPLOYEE),
                ", ".join(f"{item.name} (x{item.quantity})" for item in record.items),
                compute_record_quantity(record.items),
                f"{record.total_price:.2f}",
            ])
        logger.info("Exported %d assembly records (range=%s)", len(records), export_range.value)
        return output.getvalue()
