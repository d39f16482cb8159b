"""Checkout input validation.

Fields are checked in a fixed order and the first failure wins, so clients
always learn about ``event_type`` before ``budget`` and so on. Nothing here
touches the database.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from eventia.cart.dtos import CheckoutDTO, Location
from eventia.catalog.dtos import EventType, to_money
from eventia.errors import ValidationError

ALLOWED_EVENT_TYPES = [e.value for e in EventType]


def _positive_decimal(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not number.is_finite() or number <= 0:
        return None
    return number


def _positive_int(value: Any) -> int | None:
    number = _positive_decimal(value)
    if number is None or number != number.to_integral_value():
        return None
    return int(number)


def _parse_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def validate_checkout(
    event_type: Any,
    budget: Any,
    guest_count: Any,
    preferred_location: Any,
    event_date: Any,
    notes: str | None = None,
) -> CheckoutDTO:
    if event_type not in ALLOWED_EVENT_TYPES:
        raise ValidationError(
            "event_type", f"Invalid event_type. Allowed: {', '.join(ALLOWED_EVENT_TYPES)}"
        )

    parsed_budget = _positive_decimal(budget)
    if parsed_budget is None:
        raise ValidationError("budget", "budget must be a positive number")

    parsed_guests = _positive_int(guest_count)
    if parsed_guests is None:
        raise ValidationError("guest_count", "guest_count must be a positive integer")

    city = district = None
    if isinstance(preferred_location, dict):
        city = preferred_location.get("city")
        district = preferred_location.get("district")
    if not city or not district or not str(city).strip() or not str(district).strip():
        raise ValidationError(
            "preferred_location",
            "preferred_location.city and preferred_location.district are required",
        )

    parsed_date = _parse_date(event_date)
    if parsed_date is None:
        raise ValidationError("event_date", "event_date must be a valid date")

    return CheckoutDTO(
        event_type=event_type,
        budget=to_money(parsed_budget, "budget"),
        guest_count=parsed_guests,
        preferred_location=Location(city=str(city).strip(), district=str(district).strip()),
        event_date=parsed_date,
        notes=notes,
    )
