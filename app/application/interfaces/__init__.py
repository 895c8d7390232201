from .employee_repository import EmployeeRepository
from .location_repository import LocationRepository
from .assembly_record_repository import AssemblyRecordRepository
from .app_settings_repository import AppSettingsRepository

__all__ = [
    "EmployeeRepository",
    "LocationRepository",
    "AssemblyRecordRepository",
    "AppSettingsRepository",
]
