from .employee_repository import SQLAlchemyEmployeeRepository
from .location_repository import SQLAlchemyLocationRepository
from .assembly_record_repository import SQLAlchemyAssemblyRecordRepository
from .app_settings_repository import SQLAlchemyAppSettingsRepository

__all__ = [
    "SQLAlchemyEmployeeRepository",
    "SQLAlchemyLocationRepository",
    "SQLAlchemyAssemblyRecordRepository",
    "SQLAlchemyAppSettingsRepository",
]
