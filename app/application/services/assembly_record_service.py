"""Application service (use case) for AssemblyRecord operations.

The service is the only place that derives ``quantity``: whatever the
client sends is discarded and the sum of the submitted item quantities
is stored instead. ``total_price`` stays client-trusted; it is derived
only when the client leaves it out.
"""

import logging
import math

from app.application.interfaces import AssemblyRecordRepository
from app.application.schemas import (
    AssemblyRecordCreate,
    AssemblyRecordItemSchema,
    AssemblyRecordUpdate,
)
from app.domain.entities import AssemblyRecord, AssemblyRecordItem
from app.domain.exceptions import EntityNotFoundError
from app.domain.pricing import compute_record_quantity, compute_record_total

logger = logging.getLogger(__name__)


def _to_items(items: list[AssemblyRecordItemSchema]) -> list[AssemblyRecordItem]:
    return [
        AssemblyRecordItem(
            id=item.id,
            name=item.name,
            quantity=item.quantity,
            price=item.price,
            price_with_tax=item.price_with_tax,
            total_item_price_with_tax=item.total_item_price_with_tax,
        )
        for item in items
    ]


def _resolve_total(
    submitted: float | None, items: list[AssemblyRecordItem], record_id: str | None
) -> float:
    derived = compute_record_total(items)
    if submitted is None:
        return derived
    if not math.isclose(submitted, derived, abs_tol=0.005):
        logger.warning(
            "Assembly record %s: submitted totalPrice %.2f differs from item sum %.2f",
            record_id or "<new>",
            submitted,
            derived,
        )
    return submitted


class AssemblyRecordService:
    """Orchestrates assembly record logic. Depends on the repository port (DI)."""

    def __init__(self, repository: AssemblyRecordRepository):
        self._repository = repository

    def _build_record(self, data: AssemblyRecordCreate) -> AssemblyRecord:
        items = _to_items(data.items)
        record = AssemblyRecord(
            employee_id=data.employee_id,
            location_id=data.location_id,
            date=data.date,
            items=items,
            notes=data.notes,
            quantity=compute_record_quantity(items),
            total_price=_resolve_total(data.total_price, items, data.id),
        )
        if data.id:
            record.id = data.id
        return record

    async def get_record(self, record_id: str) -> AssemblyRecord:
        record = await self._repository.get_by_id(record_id)
        if record is None:
            raise EntityNotFoundError("AssemblyRecord", record_id)
        return record

    async def list_records(self, *, employee_id: str | None = None) -> list[AssemblyRecord]:
        return await self._repository.get_all(employee_id=employee_id)

    async def create_record(self, data: AssemblyRecordCreate) -> AssemblyRecord:
        created = await self._repository.create(self._build_record(data))
        logger.info(
            "Assembly record created: %s (%d items, quantity=%d)",
            created.id,
            len(created.items),
            created.quantity,
        )
        return created

    async def create_records(self, batch: list[AssemblyRecordCreate]) -> list[AssemblyRecord]:
        """Create all records in one atomic insert, preserving submission order."""
        records = [self._build_record(data) for data in batch]
        created = await self._repository.create_many(records)
        logger.info("Assembly records batch created: %d rows", len(created))
        return created

    async def update_record(
        self, record_id: str, data: AssemblyRecordUpdate
    ) -> AssemblyRecord:
        record = await self.get_record(record_id)
        items = _to_items(data.items)
        record.replace_fields(
            employee_id=data.employee_id,
            location_id=data.location_id,
            date=data.date,
            items=items,
            notes=data.notes,
            total_price=_resolve_total(data.total_price, items, record_id),
            quantity=compute_record_quantity(items),
        )
        updated = await self._repository.update(record)
        logger.info("Assembly record updated: %s", record_id)
        return updated

    async def delete_record(self, record_id: str) -> bool:
        deleted = await self._repository.delete(record_id)
        if not deleted:
            raise EntityNotFoundError("AssemblyRecord", record_id)
        logger.info("Assembly record deleted: %s", record_id)
        return deleted
