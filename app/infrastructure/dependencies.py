"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.application.services import (
    AppSettingsService,
    AssemblyRecordService,
    EmployeeService,
    LocationService,
    ReportService,
)
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import (
    SQLAlchemyAppSettingsRepository,
    SQLAlchemyAssemblyRecordRepository,
    SQLAlchemyEmployeeRepository,
    SQLAlchemyLocationRepository,
)


async def get_employee_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[EmployeeService, None]:
    """Provides an EmployeeService with the employee and record repositories."""
    yield EmployeeService(
        SQLAlchemyEmployeeRepository(session),
        record_repository=SQLAlchemyAssemblyRecordRepository(session),
    )


async def get_location_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[LocationService, None]:
    """Provides a LocationService instance with its repository wired up."""
    yield LocationService(SQLAlchemyLocationRepository(session))


async def get_assembly_record_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AssemblyRecordService, None]:
    """Provides an AssemblyRecordService instance with its repository wired up."""
    yield AssemblyRecordService(SQLAlchemyAssemblyRecordRepository(session))


async def get_app_settings_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AppSettingsService, None]:
    """Provides an AppSettingsService seeded with the configured defaults."""
    settings = get_settings()
    yield AppSettingsService(
        SQLAlchemyAppSettingsRepository(session),
        default_company_name=settings.default_company_name,
        default_percentage=settings.default_percentage,
    )


async def get_report_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ReportService, None]:
    """Provides a ReportService over the record and employee repositories."""
    yield ReportService(
        SQLAlchemyAssemblyRecordRepository(session),
        SQLAlchemyEmployeeRepository(session),
    )
