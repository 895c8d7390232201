"""Abstract repository interface (port) for Location persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import Location


class LocationRepository(ABC):
    """Port for location persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, location_id: str) -> Location | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Location]:
        ...

    @abstractmethod
    async def create(self, location: Location) -> Location:
        ...

    @abstractmethod
    async def update(self, location: Location) -> Location:
        ...

    @abstractmethod
    async def delete(self, location_id: str) -> bool:
        """Delete a location. Returns True if deleted, False if not found."""
        ...
