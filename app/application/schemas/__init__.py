from .base import CamelModel, ErrorResponse, MessageResponse
from .employee import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeResponse,
    EmployeeSummaryResponse,
)
from .location import LocationCreate, LocationUpdate, LocationResponse
from .assembly_record import (
    AssemblyRecordItemSchema,
    AssemblyRecordCreate,
    AssemblyRecordUpdate,
    AssemblyRecordResponse,
)
from .app_settings import AppSettingsUpdate, AppSettingsResponse
from .report import DashboardSummaryResponse, FurnitureCountResponse, PerformerResponse

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "MessageResponse",
    "EmployeeCreate",
    "EmployeeUpdate",
    "EmployeeResponse",
    "EmployeeSummaryResponse",
    "LocationCreate",
    "LocationUpdate",
    "LocationResponse",
    "AssemblyRecordItemSchema",
    "AssemblyRecordCreate",
    "AssemblyRecordUpdate",
    "AssemblyRecordResponse",
    "AppSettingsUpdate",
    "AppSettingsResponse",
    "DashboardSummaryResponse",
    "FurnitureCountResponse",
    "PerformerResponse",
]
