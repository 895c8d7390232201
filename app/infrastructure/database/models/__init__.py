from .employee import EmployeeModel
from .location import LocationModel
from .assembly_record import AssemblyRecordModel
from .app_settings import AppSettingsModel

__all__ = [
    "EmployeeModel",
    "LocationModel",
    "AssemblyRecordModel",
    "AppSettingsModel",
]
