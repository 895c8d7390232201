"""Turns the assembly form's raw entries into a record ready to submit."""

import datetime as dt
from collections.abc import Iterable, Mapping
from typing import Any

from app.application.schemas import AssemblyRecordCreate, AssemblyRecordItemSchema
from app.domain.pricing import compute_record_total, price_items


def compose_notes(first_item_name: str, extra_notes: str | None) -> str:
    """``"<first item> - <extra notes>"``, or whichever part is present."""
    extra = (extra_notes or "").strip()
    if first_item_name and extra:
        return f"{first_item_name} - {extra}"
    return first_item_name or extra


def build_assembly_record(
    employee_id: str,
    location_id: str | None,
    date: dt.date,
    entries: Iterable[Mapping[str, Any]],
    tax_rate: float,
    notes: str | None = None,
) -> AssemblyRecordCreate:
    """Price the form entries at ``tax_rate`` percent and total them.

    Entries without a name or with a non-positive quantity are skipped.

    Raises:
        ValueError: No employee was chosen, or no valid entry remains.
    """
    if not employee_id:
        raise ValueError("An employee must be selected")
    items = price_items(entries, tax_rate)
    if not items:
        raise ValueError("Add at least one item with a name and a positive quantity")

    return AssemblyRecordCreate(
        employee_id=employee_id,
        location_id=location_id or None,
        date=date,
        items=[AssemblyRecordItemSchema.model_validate(item) for item in items],
        total_price=compute_record_total(items),
        notes=compose_notes(items[0].name, notes),
    )
