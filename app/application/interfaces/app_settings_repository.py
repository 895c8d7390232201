"""Abstract repository interface (port) for the AppSettings singleton."""

from abc import ABC, abstractmethod

from app.domain.entities import AppSettings


class AppSettingsRepository(ABC):
    """Port for the single settings row."""

    @abstractmethod
    async def get(self) -> AppSettings | None:
        """Return the settings row, or None before it has been seeded."""
        ...

    @abstractmethod
    async def save(self, settings: AppSettings) -> AppSettings:
        """Insert the row if absent, otherwise update it in place."""
        ...
