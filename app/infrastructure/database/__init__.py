from .base import Base
from .session import engine, async_session_factory, create_tables_if_absent, get_db_session
from .models import AssemblyRecordModel, AppSettingsModel, EmployeeModel, LocationModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "create_tables_if_absent",
    "get_db_session",
    "AssemblyRecordModel",
    "AppSettingsModel",
    "EmployeeModel",
    "LocationModel",
]
