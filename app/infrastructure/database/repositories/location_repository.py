"""Concrete repository implementation for Location backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import LocationRepository
from app.domain.entities import Location
from app.infrastructure.database.errors import storage_errors
from app.infrastructure.database.models import LocationModel


class SQLAlchemyLocationRepository(LocationRepository):
    """Implements the LocationRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: LocationModel) -> Location:
        return Location(
            id=model.id,
            name=model.name,
            address=model.address,
            contact_person=model.contact_person,
            contact_info=model.contact_info,
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Location) -> LocationModel:
        return LocationModel(
            id=entity.id,
            name=entity.name,
            address=entity.address,
            contact_person=entity.contact_person,
            contact_info=entity.contact_info,
            notes=entity.notes,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, location_id: str) -> Location | None:
        result = await self._session.get(LocationModel, location_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Location]:
        stmt = select(LocationModel).order_by(LocationModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, location: Location) -> Location:
        model = self._to_model(location)
        with storage_errors("Insert location"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def update(self, location: Location) -> Location:
        model = await self._session.get(LocationModel, location.id)
        if model is None:
            raise ValueError(f"Location {location.id} not found in database")
        model.name = location.name
        model.address = location.address
        model.contact_person = location.contact_person
        model.contact_info = location.contact_info
        model.notes = location.notes
        model.updated_at = location.updated_at
        with storage_errors("Update location"):
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, location_id: str) -> bool:
        model = await self._session.get(LocationModel, location_id)
        if model is None:
            return False
        with storage_errors("Delete location"):
            await self._session.delete(model)
            await self._session.flush()
        return True
