"""Application service (use case) for Location operations."""

import logging

from app.application.interfaces import LocationRepository
from app.application.schemas import LocationCreate, LocationUpdate
from app.domain.entities import Location
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class LocationService:
    """Orchestrates location CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: LocationRepository):
        self._repository = repository

    async def get_location(self, location_id: str) -> Location:
        location = await self._repository.get_by_id(location_id)
        if location is None:
            raise EntityNotFoundError("Location", location_id)
        return location

    async def list_locations(self) -> list[Location]:
        return await self._repository.get_all()

    async def create_location(self, data: LocationCreate) -> Location:
        location = Location(
            name=data.name,
            address=data.address,
            contact_person=data.contact_person,
            contact_info=data.contact_info,
            notes=data.notes,
        )
        if data.id:
            location.id = data.id
        created = await self._repository.create(location)
        logger.info("Location created: %s", created.id)
        return created

    async def update_location(self, location_id: str, data: LocationUpdate) -> Location:
        location = await self.get_location(location_id)
        location.replace_fields(
            name=data.name,
            address=data.address,
            contact_person=data.contact_person,
            contact_info=data.contact_info,
            notes=data.notes,
        )
        updated = await self._repository.update(location)
        logger.info("Location updated: %s", location_id)
        return updated

    async def delete_location(self, location_id: str) -> bool:
        """Delete a location. Records pointing at it keep their locationId."""
        deleted = await self._repository.delete(location_id)
        if not deleted:
            raise EntityNotFoundError("Location", location_id)
        logger.info("Location deleted: %s", location_id)
        return deleted
