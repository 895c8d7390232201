"""Application service for the application settings singleton.

The row is seeded from configuration defaults on first access and is
only ever updated in place. Updates are validated by the
``AppSettingsUpdate`` schema before they reach this service.
"""

import logging

from app.application.interfaces import AppSettingsRepository
from app.application.schemas import AppSettingsUpdate
from app.domain.entities import AppSettings

logger = logging.getLogger(__name__)


class AppSettingsService:
    """Reads and updates the single settings row."""

    def __init__(
        self,
        repository: AppSettingsRepository,
        *,
        default_company_name: str,
        default_percentage: float,
    ):
        self._repository = repository
        self._default_company_name = default_company_name
        self._default_percentage = default_percentage

    async def ensure_defaults(self) -> AppSettings:
        """Return the settings row, creating it with defaults if missing."""
        current = await self._repository.get()
        if current is not None:
            return current
        seeded = await self._repository.save(
            AppSettings(
                company_name=self._default_company_name,
                default_percentage=self._default_percentage,
            )
        )
        logger.info(
            "Seeded default settings: company=%r, percentage=%s",
            seeded.company_name,
            seeded.default_percentage,
        )
        return seeded

    async def get_settings(self) -> AppSettings:
        return await self.ensure_defaults()

    async def update_settings(self, data: AppSettingsUpdate) -> AppSettings:
        """Overwrite both fields, then read the row back."""
        current = await self.ensure_defaults()
        current.company_name = data.company_name
        current.default_percentage = data.default_percentage
        await self._repository.save(current)
        logger.info(
            "Settings updated: company=%r, percentage=%s",
            data.company_name,
            data.default_percentage,
        )
        return await self.ensure_defaults()
