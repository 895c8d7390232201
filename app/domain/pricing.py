"""Pricing and aggregation rules for assembly records.

Pure functions only, without I/O or framework imports. Amounts are computed
in ``Decimal`` and rounded half-up to cents at the final step, never at
intermediate steps, then handed back as ``float`` for JSON transport.

Example:
    >>> compute_item_pricing(100, 2, 20)
    ItemPricing(price_with_tax=80.0, total_item_price_with_tax=160.0)
"""

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from app.domain.entities import AssemblyRecord, AssemblyRecordItem, Employee

_CENT = Decimal("0.01")
_HUNDRED = Decimal(100)


@dataclass(frozen=True)
class ItemPricing:
    """Tax-adjusted unit price and line total for one item."""

    price_with_tax: float
    total_item_price_with_tax: float


@dataclass(frozen=True)
class EmployeeAggregate:
    """Totals over all records of one employee."""

    total_earnings: float
    total_units_assembled: int


@dataclass(frozen=True)
class PerformerSummary:
    employee_id: str
    name: str
    units_assembled: int
    total_value: float


@dataclass(frozen=True)
class DashboardSummary:
    """Figures shown on the dashboard."""

    total_units_assembled: int
    total_earnings: float
    records_this_month: int
    top_performers: list[PerformerSummary] = field(default_factory=list)
    top_furniture: list[tuple[str, int]] = field(default_factory=list)


def _to_decimal(value: Any) -> Decimal:
    # str() keeps 19.99 as 19.99 instead of its binary expansion
    return Decimal(str(value))


def _round_cents(value: Decimal) -> float:
    return float(value.quantize(_CENT, rounding=ROUND_HALF_UP))


def _quantity_of(item: Any) -> int:
    """Read an item's quantity, treating missing or non-numeric values as 0."""
    raw = item.get("quantity") if isinstance(item, Mapping) else getattr(item, "quantity", None)
    if isinstance(raw, bool) or raw is None:
        return 0
    try:
        number = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        return 0
    if not number.is_finite():
        return 0
    return int(number)


def _item_total_of(item: Any) -> Decimal:
    if isinstance(item, Mapping):
        raw = item.get("totalItemPriceWithTax", item.get("total_item_price_with_tax", 0))
    else:
        raw = item.total_item_price_with_tax
    return _to_decimal(raw or 0)


def compute_item_pricing(
    price: float, quantity: int, tax_rate_percent: float
) -> ItemPricing:
    """Apply the percentage deduction to a unit price and total it.

    ``price_with_tax = price - price * rate / 100`` and
    ``total = price_with_tax * quantity``; both rounded to 2 decimals,
    the total from the unrounded unit price.
    """
    unit = _to_decimal(price)
    deducted = unit - unit * _to_decimal(tax_rate_percent) / _HUNDRED
    total = deducted * _to_decimal(quantity)
    return ItemPricing(
        price_with_tax=_round_cents(deducted),
        total_item_price_with_tax=_round_cents(total),
    )


def compute_record_total(items: Iterable[Any]) -> float:
    """Sum of every item's ``total_item_price_with_tax``."""
    total = sum((_item_total_of(item) for item in items), Decimal(0))
    return _round_cents(total)


def compute_record_quantity(items: Iterable[Any] | None) -> int:
    """Sum of item quantities. Accepts entities or raw JSON dicts."""
    if not items:
        return 0
    return sum(_quantity_of(item) for item in items)


def aggregate_by_employee(
    records: Iterable[AssemblyRecord], employee_id: str
) -> EmployeeAggregate:
    """Total earnings and assembled units across one employee's records."""
    earnings = Decimal(0)
    units = 0
    for record in records:
        if record.employee_id != employee_id:
            continue
        earnings += _to_decimal(record.total_price or 0)
        units += compute_record_quantity(record.items)
    return EmployeeAggregate(
        total_earnings=_round_cents(earnings),
        total_units_assembled=units,
    )


def price_items(
    entries: Iterable[Mapping[str, Any]], tax_rate_percent: float
) -> list[AssemblyRecordItem]:
    """Turn raw form entries into priced items.

    Entries without a name or with a non-positive quantity are dropped.
    Each entry may carry ``id``, ``name``, ``quantity`` and ``price``.
    """
    items: list[AssemblyRecordItem] = []
    for entry in entries:
        name = str(entry.get("name") or "").strip()
        quantity = _quantity_of(entry)
        if not name or quantity <= 0:
            continue
        price = float(entry.get("price") or 0)
        pricing = compute_item_pricing(price, quantity, tax_rate_percent)
        item = AssemblyRecordItem(
            name=name,
            quantity=quantity,
            price=price,
            price_with_tax=pricing.price_with_tax,
            total_item_price_with_tax=pricing.total_item_price_with_tax,
        )
        if entry.get("id"):
            item.id = str(entry["id"])
        items.append(item)
    return items


def summarize_records(
    records: list[AssemblyRecord],
    employees: list[Employee],
    today: date,
    *,
    top_n: int = 5,
) -> DashboardSummary:
    """Build dashboard figures: overall totals, leaders and popular items."""
    performers = []
    for employee in employees:
        aggregate = aggregate_by_employee(records, employee.id)
        performers.append(
            PerformerSummary(
                employee_id=employee.id,
                name=employee.name,
                units_assembled=aggregate.total_units_assembled,
                total_value=aggregate.total_earnings,
            )
        )
    # sorted() is stable, so ties keep the employee list order
    performers = sorted(performers, key=lambda p: p.units_assembled, reverse=True)

    furniture: Counter[str] = Counter()
    for record in records:
        for item in record.items:
            furniture[item.name] += _quantity_of(item)

    this_month = sum(
        1
        for record in records
        if record.date.year == today.year and record.date.month == today.month
    )

    return DashboardSummary(
        total_units_assembled=sum(compute_record_quantity(r.items) for r in records),
        total_earnings=_round_cents(
            sum((_to_decimal(r.total_price or 0) for r in records), Decimal(0))
        ),
        records_this_month=this_month,
        top_performers=performers[:top_n],
        top_furniture=furniture.most_common(top_n),
    )
