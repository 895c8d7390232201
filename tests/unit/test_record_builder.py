"""Unit tests for building an assembly record from form entries."""

from datetime import date

import pytest

from app.client.record_builder import build_assembly_record, compose_notes

ENTRIES = [
    {"name": "Wardrobe", "quantity": 2, "price": 100},
    {"name": "Shelf", "quantity": 1, "price": 62.5},
    {"name": "", "quantity": 3, "price": 10},
]


def test_builds_priced_record():
    record = build_assembly_record(
        "emp-1", "loc-1", date(2025, 5, 14), ENTRIES, tax_rate=20, notes="second floor"
    )

    assert record.employee_id == "emp-1"
    assert record.location_id == "loc-1"
    assert [i.name for i in record.items] == ["Wardrobe", "Shelf"]
    assert record.items[0].price_with_tax == 80.0
    assert record.items[0].total_item_price_with_tax == 160.0
    assert record.items[1].total_item_price_with_tax == 50.0
    assert record.total_price == 210.0
    assert record.notes == "Wardrobe - second floor"


def test_blank_location_becomes_none():
    record = build_assembly_record("emp-1", "", date(2025, 5, 14), ENTRIES, tax_rate=0)
    assert record.location_id is None
    assert record.notes == "Wardrobe"


def test_rejects_form_without_valid_entries():
    with pytest.raises(ValueError):
        build_assembly_record(
            "emp-1", None, date(2025, 5, 14), [{"name": "Desk", "quantity": 0}], tax_rate=20
        )


def test_rejects_missing_employee():
    with pytest.raises(ValueError):
        build_assembly_record("", None, date(2025, 5, 14), ENTRIES, tax_rate=20)


@pytest.mark.parametrize(
    ("first", "extra", "expected"),
    [
        ("Wardrobe", "fast job", "Wardrobe - fast job"),
        ("Wardrobe", None, "Wardrobe"),
        ("Wardrobe", "   ", "Wardrobe"),
        ("", "only notes", "only notes"),
    ],
)
def test_compose_notes(first, extra, expected):
    assert compose_notes(first, extra) == expected
