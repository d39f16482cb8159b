from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

from eventia.errors import ValidationError

if TYPE_CHECKING:
    from eventia.catalog.repository.orm_models import Package, Service


class EventType(str, Enum):
    WEDDING = "Wedding"
    BIRTHDAY = "Birthday"
    CORPORATE = "Corporate"
    ANNIVERSARY = "Anniversary"
    OTHER = "Other"


@dataclass(frozen=True)
class ListingRefDTO:
    """The slice of a catalog entry the cart needs: who owns it and whether it can be sold."""

    id: UUID
    vendor_id: UUID
    is_active: bool
    price: Decimal | None = None


@dataclass(frozen=True)
class ServiceDTO:
    id: UUID
    vendor_id: UUID
    title: str
    description: str
    event_type: str
    service_category: str
    price_min: Decimal
    price_max: Decimal
    city: str | None = None
    district: str | None = None
    capacity: int | None = None
    is_active: bool = True
    created_at: datetime | None = None

    @classmethod
    def from_service(cls, service: "Service") -> "ServiceDTO":
        return cls(
            id=service.uuid,
            vendor_id=service.vendor_id,
            title=service.title,
            description=service.description,
            event_type=service.event_type,
            service_category=service.service_category,
            price_min=service.price_min,
            price_max=service.price_max,
            city=service.city,
            district=service.district,
            capacity=service.capacity,
            is_active=service.is_active,
            created_at=service.created_at,
        )


@dataclass(frozen=True)
class PackageDTO:
    id: UUID
    vendor_id: UUID
    title: str
    description: str
    event_type: str
    price: Decimal
    services: list[str] = field(default_factory=list)
    city: str | None = None
    district: str | None = None
    capacity: int | None = None
    is_active: bool = True
    created_at: datetime | None = None

    @classmethod
    def from_package(cls, package: "Package") -> "PackageDTO":
        return cls(
            id=package.uuid,
            vendor_id=package.vendor_id,
            title=package.title,
            description=package.description,
            event_type=package.event_type,
            price=package.price,
            services=list(package.services or []),
            city=package.city,
            district=package.district,
            capacity=package.capacity,
            is_active=package.is_active,
            created_at=package.created_at,
        )


@dataclass(frozen=True)
class ServiceCreateDTO:
    title: str
    description: str
    event_type: str
    service_category: str
    price_min: Decimal
    price_max: Decimal
    city: str | None = None
    district: str | None = None
    capacity: int | None = None
    is_active: bool = True


@dataclass(frozen=True)
class PackageCreateDTO:
    title: str
    description: str
    event_type: str
    price: Decimal
    services: list[str]
    city: str | None = None
    district: str | None = None
    capacity: int | None = None
    is_active: bool = True


@dataclass(frozen=True)
class ListingFilters:
    """Browse filters shared by services and packages. ``None`` means "don't filter"."""

    event_type: str | None = None
    service_categories: list[str] = field(default_factory=list)
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    location: str | None = None
    search: str | None = None
    vendor_id: UUID | None = None
    active: bool | None = True


@dataclass(frozen=True)
class RecommendationCriteria:
    """What an event plan asks of a listing: its event type, budget, head count and city."""

    event_type: str
    budget: Decimal
    guest_count: int
    city: str


@dataclass(frozen=True)
class RecommendationsDTO:
    services: list[ServiceDTO] = field(default_factory=list)
    packages: list[PackageDTO] = field(default_factory=list)


CENT = Decimal("0.01")
# Largest amount a Numeric(12, 2) column holds
MAX_AMOUNT = Decimal("9999999999.99")


def to_money(value: float | int | str | Decimal, field: str = "price") -> Decimal:
    """Decimal amount rounded to cents. Floats go through ``str`` to avoid binary noise.

    Infinities, NaN and amounts too large to store are rejected as a
    ``ValidationError`` on ``field``.
    """
    try:
        amount = Decimal(str(value)).quantize(CENT)
        if abs(amount) <= MAX_AMOUNT:
            return amount
    except InvalidOperation:
        pass
    raise ValidationError(field, f"{field} must be a finite amount no greater than {MAX_AMOUNT}")
