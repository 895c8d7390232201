"""Domain entities — an assembly job and its priced line items."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import uuid4


@dataclass
class AssemblyRecordItem:
    """One furniture line inside an assembly record.

    ``price_with_tax`` and ``total_item_price_with_tax`` are a snapshot
    taken at submission time and are never recomputed afterwards.
    """

    name: str
    quantity: int
    price: float
    price_with_tax: float
    total_item_price_with_tax: float
    id: str = field(default_factory=lambda: str(uuid4()))


@dataclass
class AssemblyRecord:
    """Core domain entity for one job entry of one employee."""

    employee_id: str
    date: date
    items: list[AssemblyRecordItem] = field(default_factory=list)
    total_price: float = 0.0
    quantity: int = 0
    location_id: str | None = None
    notes: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def replace_fields(
        self,
        *,
        employee_id: str,
        location_id: str | None,
        date: date,
        items: list[AssemblyRecordItem],
        notes: str | None,
        total_price: float,
        quantity: int,
    ) -> None:
        """Full replace of the submitted fields; refreshes updated_at."""
        self.employee_id = employee_id
        self.location_id = location_id
        self.date = date
        self.items = items
        self.notes = notes
        self.total_price = total_price
        self.quantity = quantity
        self.updated_at = datetime.now(timezone.utc)
