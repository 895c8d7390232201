"""Concrete repository implementation for the AppSettings singleton."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import AppSettingsRepository
from app.domain.entities import SINGLETON_ID, AppSettings
from app.infrastructure.database.errors import storage_errors
from app.infrastructure.database.models import AppSettingsModel


class SQLAlchemyAppSettingsRepository(AppSettingsRepository):
    """Implements the AppSettingsRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: AppSettingsModel) -> AppSettings:
        return AppSettings(
            id=model.id,
            company_name=model.company_name,
            default_percentage=model.default_percentage,
            updated_at=model.updated_at,
        )

    async def get(self) -> AppSettings | None:
        model = await self._session.get(AppSettingsModel, SINGLETON_ID)
        return self._to_entity(model) if model else None

    async def save(self, settings: AppSettings) -> AppSettings:
        model = await self._session.get(AppSettingsModel, SINGLETON_ID)
        with storage_errors("Save settings"):
            if model is None:
                model = AppSettingsModel(
                    id=SINGLETON_ID,
                    company_name=settings.company_name,
                    default_percentage=settings.default_percentage,
                    updated_at=settings.updated_at,
                )
                self._session.add(model)
            else:
                model.company_name = settings.company_name
                model.default_percentage = settings.default_percentage
            await self._session.flush()
        return self._to_entity(model)
