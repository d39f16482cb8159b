"""Tests for checkout input validation."""

from datetime import date
from decimal import Decimal

import pytest

from eventia.cart.dtos import Location
from eventia.cart.validation import validate_checkout
from eventia.errors import ValidationError

VALID = {
    "event_type": "Wedding",
    "budget": 5000,
    "guest_count": 120,
    "preferred_location": {"city": "Colombo", "district": "Colombo"},
    "event_date": "2026-12-20",
}


def test_valid_checkout():
    details = validate_checkout(**VALID, notes="Outdoor")

    assert details.event_type == "Wedding"
    assert details.budget == Decimal("5000.00")
    assert details.guest_count == 120
    assert details.preferred_location == Location(city="Colombo", district="Colombo")
    assert details.event_date == date(2026, 12, 20)
    assert details.notes == "Outdoor"


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("event_type", None),
        ("event_type", "wedding"),
        ("event_type", "Funeral"),
        ("budget", None),
        ("budget", 0),
        ("budget", -10),
        ("budget", "abc"),
        ("budget", True),
        ("budget", "NaN"),
        ("guest_count", None),
        ("guest_count", 0),
        ("guest_count", 2.5),
        ("guest_count", "many"),
        ("preferred_location", None),
        ("preferred_location", "Colombo"),
        ("preferred_location", {"city": "Colombo"}),
        ("preferred_location", {"city": " ", "district": "Colombo"}),
        ("event_date", None),
        ("event_date", "20/12/2026"),
        ("event_date", ""),
        ("event_date", 20261220),
    ],
)
def test_invalid_field_is_reported(field, value):
    with pytest.raises(ValidationError) as exc_info:
        validate_checkout(**{**VALID, field: value})

    assert exc_info.value.field == field
    assert exc_info.value.status_code == 400


@pytest.mark.parametrize("budget", ["Infinity", "1e30"])
def test_budget_too_large_to_store(budget):
    with pytest.raises(ValidationError) as exc_info:
        validate_checkout(**{**VALID, "budget": budget})

    assert exc_info.value.field == "budget"


def test_first_failing_field_wins():
    with pytest.raises(ValidationError) as exc_info:
        validate_checkout(event_type="Wedding", budget=-1, guest_count=0, preferred_location=None, event_date=None)

    assert exc_info.value.field == "budget"


def test_all_fields_missing_reports_event_type():
    with pytest.raises(ValidationError) as exc_info:
        validate_checkout(None, None, None, None, None)

    assert exc_info.value.field == "event_type"
    assert "Wedding" in exc_info.value.message


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2026-12-20", date(2026, 12, 20)),
        ("2026-12-20T18:30:00", date(2026, 12, 20)),
        ("2026-12-20T18:30:00Z", date(2026, 12, 20)),
        (date(2026, 12, 20), date(2026, 12, 20)),
    ],
)
def test_event_date_formats(value, expected):
    assert validate_checkout(**{**VALID, "event_date": value}).event_date == expected


def test_numeric_strings_are_accepted():
    details = validate_checkout(**{**VALID, "budget": "1500.5", "guest_count": "40"})

    assert details.budget == Decimal("1500.50")
    assert details.guest_count == 40


def test_location_is_trimmed():
    details = validate_checkout(**{**VALID, "preferred_location": {"city": " Kandy ", "district": "Kandy "}})

    assert details.preferred_location == Location(city="Kandy", district="Kandy")
