from .employee_service import EmployeeService
from .location_service import LocationService
from .assembly_record_service import AssemblyRecordService
from .settings_service import AppSettingsService
from .report_service import ExportRange, ReportService

__all__ = [
    "EmployeeService",
    "LocationService",
    "AssemblyRecordService",
    "AppSettingsService",
    "ExportRange",
    "ReportService",
]
