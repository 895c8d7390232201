"""Client-side API access and state store."""

from .api_client import ApiClient, ApiError
from .state import AppState, employee_records, employee_totals, tax_rate
from .store import StateStore
from .record_builder import build_assembly_record

__all__ = [
    "ApiClient",
    "ApiError",
    "AppState",
    "StateStore",
    "build_assembly_record",
    "employee_records",
    "employee_totals",
    "tax_rate",
]
