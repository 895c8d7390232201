"""Unit tests for the pricing and aggregation rules."""

import random
from datetime import date

import pytest

from app.domain.entities import AssemblyRecord, AssemblyRecordItem, Employee
from app.domain.pricing import (
    aggregate_by_employee,
    compute_item_pricing,
    compute_record_quantity,
    compute_record_total,
    price_items,
    summarize_records,
)


def _item(name: str, quantity: int, total: float) -> AssemblyRecordItem:
    return AssemblyRecordItem(
        name=name,
        quantity=quantity,
        price=total / quantity,
        price_with_tax=total / quantity,
        total_item_price_with_tax=total,
    )


def _record(employee_id: str, items: list, total: float, on: date = date(2025, 5, 14)):
    return AssemblyRecord(
        employee_id=employee_id,
        date=on,
        items=items,
        total_price=total,
        quantity=compute_record_quantity(items),
    )


# ── compute_item_pricing ────────────────────────────────────────────


def test_item_pricing_applies_deduction():
    pricing = compute_item_pricing(100, 2, 20)
    assert pricing.price_with_tax == 80.0
    assert pricing.total_item_price_with_tax == 160.0


def test_item_pricing_rounds_half_up():
    # 0.125 is exact in decimal; banker's rounding would give 0.12
    pricing = compute_item_pricing(0.125, 1, 0)
    assert pricing.price_with_tax == 0.13


def test_item_pricing_total_uses_unrounded_unit_price():
    # unit = 3.3333.. ; total from rounded unit would be 9.99
    pricing = compute_item_pricing(10, 3, 66.666666)
    assert pricing.price_with_tax == 3.33
    assert pricing.total_item_price_with_tax == 10.0


def test_item_pricing_with_zero_rate_keeps_price():
    pricing = compute_item_pricing(19.99, 3, 0)
    assert pricing.price_with_tax == 19.99
    assert pricing.total_item_price_with_tax == 59.97


def test_item_pricing_with_full_rate_is_free():
    pricing = compute_item_pricing(250, 4, 100)
    assert pricing.price_with_tax == 0.0
    assert pricing.total_item_price_with_tax == 0.0


@pytest.mark.parametrize("seed", range(5))
def test_item_pricing_never_exceeds_price(seed):
    rng = random.Random(seed)
    for _ in range(200):
        price = round(rng.uniform(0, 5000), 2)
        quantity = rng.randint(1, 50)
        rate = round(rng.uniform(0, 100), 2)
        pricing = compute_item_pricing(price, quantity, rate)
        assert pricing.price_with_tax <= price
        assert pricing.total_item_price_with_tax >= 0


# ── compute_record_total / compute_record_quantity ──────────────────


def test_record_total_of_scenario_b():
    items = [_item("Wardrobe", 2, 160.0), _item("Shelf", 1, 50.0)]
    assert compute_record_total(items) == 210.0
    assert compute_record_quantity(items) == 3


def test_record_total_accepts_raw_dicts():
    items = [
        {"name": "Wardrobe", "quantity": 2, "totalItemPriceWithTax": 160.0},
        {"name": "Shelf", "quantity": 1, "totalItemPriceWithTax": 50.0},
    ]
    assert compute_record_total(items) == 210.0


def test_record_total_avoids_float_drift():
    items = [_item("a", 1, 0.1), _item("b", 1, 0.2)]
    assert compute_record_total(items) == 0.3


def test_record_total_of_no_items_is_zero():
    assert compute_record_total([]) == 0.0


def test_record_quantity_of_none_or_empty_is_zero():
    assert compute_record_quantity(None) == 0
    assert compute_record_quantity([]) == 0


def test_record_quantity_treats_bad_values_as_zero():
    items = [
        {"quantity": 2},
        {"quantity": "abc"},
        {"quantity": None},
        {},
        {"quantity": "3"},
        {"quantity": float("nan")},
        {"quantity": True},
    ]
    assert compute_record_quantity(items) == 5


def test_record_quantity_is_order_invariant():
    items = [{"quantity": q} for q in (1, 7, 3, 0, 12)]
    shuffled = list(reversed(items))
    assert compute_record_quantity(items) == compute_record_quantity(shuffled) == 23


# ── aggregate_by_employee ───────────────────────────────────────────


def test_aggregate_by_employee_filters_and_sums():
    records = [
        _record("e1", [_item("Wardrobe", 2, 160.0)], 160.0),
        _record("e1", [_item("Shelf", 1, 50.0), _item("Desk", 3, 90.0)], 140.0),
        _record("e2", [_item("Bed", 1, 300.0)], 300.0),
    ]
    aggregate = aggregate_by_employee(records, "e1")
    assert aggregate.total_earnings == 300.0
    assert aggregate.total_units_assembled == 6


def test_aggregate_by_employee_without_records():
    aggregate = aggregate_by_employee([], "nobody")
    assert aggregate.total_earnings == 0.0
    assert aggregate.total_units_assembled == 0


# ── price_items ─────────────────────────────────────────────────────


def test_price_items_drops_unnamed_and_non_positive_entries():
    entries = [
        {"name": "Wardrobe", "quantity": 2, "price": 100},
        {"name": "  ", "quantity": 1, "price": 10},
        {"name": "Shelf", "quantity": 0, "price": 10},
        {"name": "Desk", "quantity": -1, "price": 10},
    ]
    items = price_items(entries, 20)
    assert [i.name for i in items] == ["Wardrobe"]
    assert items[0].price_with_tax == 80.0
    assert items[0].total_item_price_with_tax == 160.0


def test_price_items_keeps_given_id():
    items = price_items([{"id": "item-1", "name": "Shelf", "quantity": 1, "price": 50}], 0)
    assert items[0].id == "item-1"


# ── summarize_records ───────────────────────────────────────────────


def test_summarize_records():
    employees = [Employee(name="Anna", id="e1"), Employee(name="Boris", id="e2")]
    records = [
        _record("e1", [_item("Wardrobe", 2, 160.0)], 160.0, date(2025, 5, 1)),
        _record("e2", [_item("Shelf", 5, 250.0)], 250.0, date(2025, 5, 20)),
        _record("e2", [_item("Wardrobe", 1, 80.0)], 80.0, date(2025, 4, 30)),
        # deleted employee still counts towards the totals
        _record("gone", [_item("Bed", 1, 300.0)], 300.0, date(2025, 3, 3)),
    ]

    summary = summarize_records(records, employees, date(2025, 5, 25))

    assert summary.total_units_assembled == 9
    assert summary.total_earnings == 790.0
    assert summary.records_this_month == 2
    assert [p.employee_id for p in summary.top_performers] == ["e2", "e1"]
    assert summary.top_performers[0].units_assembled == 6
    assert summary.top_performers[0].total_value == 330.0
    assert summary.top_furniture[0] == ("Shelf", 5)
    assert ("Wardrobe", 3) in summary.top_furniture


def test_summarize_records_limits_leaders():
    employees = [Employee(name=f"E{i}", id=f"e{i}") for i in range(8)]
    summary = summarize_records([], employees, date(2025, 1, 1), top_n=5)
    assert len(summary.top_performers) == 5
    # ties keep the original employee order
    assert [p.employee_id for p in summary.top_performers] == ["e0", "e1", "e2", "e3", "e4"]
