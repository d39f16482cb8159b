from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

from eventia.catalog.dtos import to_money
from eventia.errors import ValidationError

if TYPE_CHECKING:
    from eventia.cart.repository.orm_models import EventPlan


class EventPlanStatus(str, Enum):
    PLANNING = "Planning"
    CONFIRMED = "Confirmed"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


BOOKING_STATUSES = (
    EventPlanStatus.CONFIRMED,
    EventPlanStatus.COMPLETED,
    EventPlanStatus.CANCELLED,
)


class LineItemKind(str, Enum):
    SERVICE = "service"
    PACKAGE = "package"


@dataclass(frozen=True)
class LineItemRequest:
    """A request to put a service or a package into the cart.

    Use ``LineItemRequest.service`` / ``LineItemRequest.package`` rather than
    the constructor so the kind-specific fields are checked up front.
    """

    kind: LineItemKind
    item_id: UUID
    vendor_id: UUID
    price: Decimal
    quantity: int = 1
    notes: str | None = None

    @classmethod
    def service(
        cls,
        service_id: UUID,
        vendor_id: UUID,
        price: Decimal | float,
        quantity: int = 1,
        notes: str | None = None,
    ) -> "LineItemRequest":
        return cls._build(LineItemKind.SERVICE, "service_id", service_id, vendor_id, price, quantity, notes)

    @classmethod
    def package(
        cls,
        package_id: UUID,
        vendor_id: UUID,
        price: Decimal | float,
        quantity: int = 1,
        notes: str | None = None,
    ) -> "LineItemRequest":
        return cls._build(LineItemKind.PACKAGE, "package_id", package_id, vendor_id, price, quantity, notes)

    @classmethod
    def _build(cls, kind, id_field, item_id, vendor_id, price, quantity, notes) -> "LineItemRequest":
        if item_id is None:
            raise ValidationError(id_field, f"{id_field} is required")
        if vendor_id is None:
            raise ValidationError("vendor_id", "vendor_id is required")
        if price is None:
            raise ValidationError("price", "price must be a non-negative number")
        price = to_money(price, "price")
        if price < 0:
            raise ValidationError("price", "price must be a non-negative number")
        if quantity is None or quantity < 1:
            raise ValidationError("quantity", "quantity must be a positive integer")
        return cls(
            kind=kind,
            item_id=item_id,
            vendor_id=vendor_id,
            price=price,
            quantity=quantity,
            notes=notes,
        )


@dataclass(frozen=True)
class LineItemDTO:
    kind: LineItemKind
    item_id: UUID
    vendor_id: UUID
    price: Decimal
    quantity: int
    notes: str | None = None

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


@dataclass(frozen=True)
class Location:
    city: str
    district: str


@dataclass(frozen=True)
class CheckoutDTO:
    """Event metadata that has already passed checkout validation."""

    event_type: str
    budget: Decimal
    guest_count: int
    preferred_location: Location
    event_date: date
    notes: str | None = None


@dataclass(frozen=True)
class EventPlanDTO:
    id: UUID
    owner_id: UUID
    status: EventPlanStatus
    service_lines: list[LineItemDTO] = field(default_factory=list)
    package_lines: list[LineItemDTO] = field(default_factory=list)
    total_cost: Decimal = Decimal("0.00")
    event_type: str | None = None
    budget: Decimal | None = None
    guest_count: int | None = None
    preferred_location: Location | None = None
    event_date: date | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_empty(self) -> bool:
        return not self.service_lines and not self.package_lines

    @classmethod
    def from_plan(cls, plan: "EventPlan") -> "EventPlanDTO":
        location = None
        if plan.preferred_city or plan.preferred_district:
            location = Location(city=plan.preferred_city or "", district=plan.preferred_district or "")
        return cls(
            id=plan.uuid,
            owner_id=plan.owner_id,
            status=EventPlanStatus(plan.status),
            service_lines=[
                LineItemDTO(
                    kind=LineItemKind.SERVICE,
                    item_id=line.service_id,
                    vendor_id=line.vendor_id,
                    price=line.price,
                    quantity=line.quantity,
                    notes=line.notes,
                )
                for line in plan.service_lines
            ],
            package_lines=[
                LineItemDTO(
                    kind=LineItemKind.PACKAGE,
                    item_id=line.package_id,
                    vendor_id=line.vendor_id,
                    price=line.price,
                    quantity=line.quantity,
                    notes=line.notes,
                )
                for line in plan.package_lines
            ],
            total_cost=plan.total_cost,
            event_type=plan.event_type,
            budget=plan.budget,
            guest_count=plan.guest_count,
            preferred_location=location,
            event_date=plan.event_date,
            notes=plan.notes,
            created_at=plan.created_at,
            updated_at=plan.updated_at,
        )


@dataclass(frozen=True)
class PlanFilters:
    status: EventPlanStatus | None = None
    search: str | None = None
