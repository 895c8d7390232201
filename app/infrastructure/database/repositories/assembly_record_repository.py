"""Concrete repository implementation for AssemblyRecord backed by SQLAlchemy.

Line items are stored as a JSON text blob using the same camelCase keys
the API speaks, and are decoded back into ``AssemblyRecordItem`` objects
on every read.
"""

import json
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import AssemblyRecordRepository
from app.domain.entities import AssemblyRecord, AssemblyRecordItem
from app.infrastructure.database.errors import storage_errors
from app.infrastructure.database.models import AssemblyRecordModel


def serialize_items(items: list[AssemblyRecordItem]) -> str:
    """Encode line items into the stored blob."""
    return json.dumps(
        [
            {
                "id": item.id,
                "name": item.name,
                "quantity": item.quantity,
                "price": item.price,
                "priceWithTax": item.price_with_tax,
                "totalItemPriceWithTax": item.total_item_price_with_tax,
            }
            for item in items
        ],
        ensure_ascii=False,
    )


def deserialize_items(blob: str | None) -> list[AssemblyRecordItem]:
    """Decode the stored blob; NULL or empty reads as no items."""
    if not blob:
        return []
    raw: list[dict[str, Any]] = json.loads(blob)
    return [
        AssemblyRecordItem(
            id=str(entry.get("id", "")),
            name=entry.get("name", ""),
            quantity=entry.get("quantity", 0),
            price=entry.get("price", 0.0),
            price_with_tax=entry.get("priceWithTax", 0.0),
            total_item_price_with_tax=entry.get("totalItemPriceWithTax", 0.0),
        )
        for entry in raw
    ]


class SQLAlchemyAssemblyRecordRepository(AssemblyRecordRepository):
    """Implements the AssemblyRecordRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: AssemblyRecordModel) -> AssemblyRecord:
        """Map ORM model → domain entity."""
        return AssemblyRecord(
            id=model.id,
            employee_id=model.employee_id,
            location_id=model.location_id,
            date=model.date,
            items=deserialize_items(model.items),
            notes=model.notes,
            quantity=model.quantity,
            total_price=model.total_price,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: AssemblyRecord) -> AssemblyRecordModel:
        """Map domain entity → ORM model (for creation)."""
        return AssemblyRecordModel(
            id=entity.id,
            employee_id=entity.employee_id,
            location_id=entity.location_id,
            date=entity.date,
            items=serialize_items(entity.items),
            notes=entity.notes,
            quantity=entity.quantity,
            total_price=entity.total_price,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, record_id: str) -> AssemblyRecord | None:
        result = await self._session.get(AssemblyRecordModel, record_id)
        return self._to_entity(result) if result else None

    async def get_all(self, *, employee_id: str | None = None) -> list[AssemblyRecord]:
        stmt = select(AssemblyRecordModel)
        if employee_id is not None:
            stmt = stmt.where(AssemblyRecordModel.employee_id == employee_id)
        stmt = stmt.order_by(AssemblyRecordModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, record: AssemblyRecord) -> AssemblyRecord:
        model = self._to_model(record)
        with storage_errors("Insert assembly record"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def create_many(self, records: list[AssemblyRecord]) -> list[AssemblyRecord]:
        models = [self._to_model(record) for record in records]
        try:
            with storage_errors("Batch insert assembly records"):
                self._session.add_all(models)
                await self._session.flush()
        except Exception:
            # Discard every pending row of the batch, not only the failing one
            await self._session.rollback()
            raise
        return [self._to_entity(model) for model in models]

    async def update(self, record: AssemblyRecord) -> AssemblyRecord:
        model = await self._session.get(AssemblyRecordModel, record.id)
        if model is None:
            raise ValueError(f"AssemblyRecord {record.id} not found in database")
        model.employee_id = record.employee_id
        model.location_id = record.location_id
        model.date = record.date
        model.items = serialize_items(record.items)
        model.notes = record.notes
        model.quantity = record.quantity
        model.total_price = record.total_price
        model.updated_at = record.updated_at
        with storage_errors("Update assembly record"):
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, record_id: str) -> bool:
        model = await self._session.get(AssemblyRecordModel, record_id)
        if model is None:
            return False
        with storage_errors("Delete assembly record"):
            await self._session.delete(model)
            await self._session.flush()
        return True
