from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from eventia.cart.dtos import EventPlanDTO, EventPlanStatus, LineItemDTO
from eventia.catalog.dtos import RecommendationsDTO
from eventia.catalog.schemas import PackageResponse, ServiceResponse
from eventia.pagination import PaginationResponse


class ServiceLineResponse(BaseModel):
    service_id: UUID
    vendor_id: UUID
    price: float
    quantity: int
    notes: str | None = None
    subtotal: float

    @classmethod
    def from_dto(cls, dto: LineItemDTO) -> "ServiceLineResponse":
        return cls(
            service_id=dto.item_id,
            vendor_id=dto.vendor_id,
            price=float(dto.price),
            quantity=dto.quantity,
            notes=dto.notes,
            subtotal=float(dto.subtotal),
        )


class PackageLineResponse(BaseModel):
    package_id: UUID
    vendor_id: UUID
    price: float
    quantity: int
    notes: str | None = None
    subtotal: float

    @classmethod
    def from_dto(cls, dto: LineItemDTO) -> "PackageLineResponse":
        return cls(
            package_id=dto.item_id,
            vendor_id=dto.vendor_id,
            price=float(dto.price),
            quantity=dto.quantity,
            notes=dto.notes,
            subtotal=float(dto.subtotal),
        )


class LocationResponse(BaseModel):
    city: str
    district: str


class EventPlanResponse(BaseModel):
    id: UUID
    owner_id: UUID
    status: EventPlanStatus
    selected_vendors: list[ServiceLineResponse]
    selected_packages: list[PackageLineResponse]
    total_cost: float
    event_type: str | None = None
    budget: float | None = None
    guest_count: int | None = None
    preferred_location: LocationResponse | None = None
    event_date: date | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dto(cls, dto: EventPlanDTO) -> "EventPlanResponse":
        return cls(
            id=dto.id,
            owner_id=dto.owner_id,
            status=dto.status,
            selected_vendors=[ServiceLineResponse.from_dto(line) for line in dto.service_lines],
            selected_packages=[PackageLineResponse.from_dto(line) for line in dto.package_lines],
            total_cost=float(dto.total_cost),
            event_type=dto.event_type,
            budget=float(dto.budget) if dto.budget is not None else None,
            guest_count=dto.guest_count,
            preferred_location=(
                LocationResponse(city=dto.preferred_location.city, district=dto.preferred_location.district)
                if dto.preferred_location
                else None
            ),
            event_date=dto.event_date,
            notes=dto.notes,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class CartResponse(BaseModel):
    cart: EventPlanResponse
    total_cost: float


class CartMutationResponse(BaseModel):
    message: str
    cart: EventPlanResponse


class AddServiceRequest(BaseModel):
    # Presence is checked by the line item itself so missing fields are a 400, not a 422
    service_id: UUID | None = None
    vendor_id: UUID | None = None
    price: float | None = None
    quantity: int = 1
    notes: str | None = None


class AddPackageRequest(BaseModel):
    package_id: UUID | None = None
    vendor_id: UUID | None = None
    price: float | None = None
    quantity: int = 1
    notes: str | None = None


class CheckoutRequest(BaseModel):
    event_type: Any = None
    budget: Any = None
    guest_count: Any = None
    preferred_location: Any = None
    event_date: Any = None
    notes: str | None = None


class BookingResponse(BaseModel):
    booking: EventPlanResponse
    message: str | None = None


class BookingListResponse(BaseModel):
    bookings: list[EventPlanResponse]
    pagination: PaginationResponse


class StatusUpdateRequest(BaseModel):
    status: EventPlanStatus


class RecommendationsResponse(BaseModel):
    services: list[ServiceResponse]
    packages: list[PackageResponse]

    @classmethod
    def from_dto(cls, dto: RecommendationsDTO) -> "RecommendationsResponse":
        return cls(
            services=[ServiceResponse.from_dto(s) for s in dto.services],
            packages=[PackageResponse.from_dto(p) for p in dto.packages],
        )
