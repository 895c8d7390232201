"""Client-side application state and its selectors."""

from dataclasses import dataclass

from app.application.schemas import (
    AppSettingsResponse,
    AssemblyRecordResponse,
    EmployeeResponse,
    LocationResponse,
)
from app.domain.pricing import EmployeeAggregate, aggregate_by_employee

DEFAULT_TAX_RATE = 20.0


@dataclass(frozen=True)
class AppState:
    """Immutable snapshot of everything the views render.

    Collections only ever hold server-confirmed data.
    """

    employees: tuple[EmployeeResponse, ...] = ()
    locations: tuple[LocationResponse, ...] = ()
    assembly_records: tuple[AssemblyRecordResponse, ...] = ()
    settings: AppSettingsResponse | None = None
    is_loading: bool = False
    error: str | None = None


def employee_records(state: AppState, employee_id: str) -> list[AssemblyRecordResponse]:
    return [r for r in state.assembly_records if r.employee_id == employee_id]


def employee_totals(state: AppState, employee_id: str) -> EmployeeAggregate:
    """Earnings and units of one employee over the loaded records."""
    return aggregate_by_employee(state.assembly_records, employee_id)


def tax_rate(state: AppState) -> float:
    """Deduction percentage; the default applies until settings are loaded."""
    if state.settings is None:
        return DEFAULT_TAX_RATE
    return state.settings.default_percentage
