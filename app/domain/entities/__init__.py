from .employee import Employee
from .location import Location
from .assembly_record import AssemblyRecord, AssemblyRecordItem
from .app_settings import AppSettings, SINGLETON_ID

__all__ = [
    "Employee",
    "Location",
    "AssemblyRecord",
    "AssemblyRecordItem",
    "AppSettings",
    "SINGLETON_ID",
]
