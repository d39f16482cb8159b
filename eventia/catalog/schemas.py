from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from eventia.catalog.dtos import EventType, PackageDTO, ServiceDTO
from eventia.pagination import PaginationResponse


class ServiceResponse(BaseModel):
    id: UUID
    vendor_id: UUID
    title: str
    description: str
    event_type: str
    service_category: str
    price_min: float
    price_max: float
    city: str | None = None
    district: str | None = None
    capacity: int | None = None
    is_active: bool
    created_at: datetime | None = None

    @classmethod
    def from_dto(cls, dto: ServiceDTO) -> "ServiceResponse":
        return cls(
            id=dto.id,
            vendor_id=dto.vendor_id,
            title=dto.title,
            description=dto.description,
            event_type=dto.event_type,
            service_category=dto.service_category,
            price_min=float(dto.price_min),
            price_max=float(dto.price_max),
            city=dto.city,
            district=dto.district,
            capacity=dto.capacity,
            is_active=dto.is_active,
            created_at=dto.created_at,
        )


class PackageResponse(BaseModel):
    id: UUID
    vendor_id: UUID
    title: str
    description: str
    event_type: str
    price: float
    services: list[str]
    city: str | None = None
    district: str | None = None
    capacity: int | None = None
    is_active: bool
    created_at: datetime | None = None

    @classmethod
    def from_dto(cls, dto: PackageDTO) -> "PackageResponse":
        return cls(
            id=dto.id,
            vendor_id=dto.vendor_id,
            title=dto.title,
            description=dto.description,
            event_type=dto.event_type,
            price=float(dto.price),
            services=dto.services,
            city=dto.city,
            district=dto.district,
            capacity=dto.capacity,
            is_active=dto.is_active,
            created_at=dto.created_at,
        )


class ServiceListResponse(BaseModel):
    services: list[ServiceResponse]
    pagination: PaginationResponse


class PackageListResponse(BaseModel):
    packages: list[PackageResponse]
    pagination: PaginationResponse


class ServiceDetailResponse(BaseModel):
    service: ServiceResponse
    message: str | None = None


class PackageDetailResponse(BaseModel):
    package: PackageResponse
    message: str | None = None


class ServiceCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    event_type: EventType
    service_category: str = Field(min_length=1, max_length=100)
    price_min: float = Field(ge=0, allow_inf_nan=False)
    price_max: float = Field(ge=0, allow_inf_nan=False)
    city: str | None = None
    district: str | None = None
    capacity: int | None = Field(default=None, ge=1)
    is_active: bool = True


class ServiceUpdateRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    event_type: EventType | None = None
    service_category: str | None = None
    price_min: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    price_max: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    city: str | None = None
    district: str | None = None
    capacity: int | None = Field(default=None, ge=1)
    is_active: bool | None = None


class PackageCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    event_type: EventType
    price: float = Field(ge=0, allow_inf_nan=False)
    services: list[str] = Field(min_length=1)
    city: str | None = None
    district: str | None = None
    capacity: int | None = Field(default=None, ge=1)
    is_active: bool = True


class PackageUpdateRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    event_type: EventType | None = None
    price: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    services: list[str] | None = None
    city: str | None = None
    district: str | None = None
    capacity: int | None = Field(default=None, ge=1)
    is_active: bool | None = None

