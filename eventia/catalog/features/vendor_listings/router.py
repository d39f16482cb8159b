from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from eventia.auth.dependencies import require_vendor
from eventia.auth.dtos import Identity
from eventia.catalog.dtos import ListingFilters, PackageCreateDTO, ServiceCreateDTO, to_money
from eventia.catalog.features.browse.router import get_catalog_read_model
from eventia.catalog.repository.read_models import CatalogReadModel
from eventia.catalog.repository.write_models import CatalogWriteModel, SqlCatalogWriteModel
from eventia.catalog.schemas import (
    PackageCreateRequest,
    PackageDetailResponse,
    PackageListResponse,
    PackageResponse,
    PackageUpdateRequest,
    ServiceCreateRequest,
    ServiceDetailResponse,
    ServiceListResponse,
    ServiceResponse,
    ServiceUpdateRequest,
)
from eventia.config.settings import settings
from eventia.pagination import PaginationResponse
from eventia.schemas import MessageResponse

router = APIRouter()

VENDOR_SERVICES_URL = "/api/v1/vendor/services"
VENDOR_SERVICE_URL = "/api/v1/vendor/services/{service_id}"
VENDOR_PACKAGES_URL = "/api/v1/vendor/packages"
VENDOR_PACKAGE_URL = "/api/v1/vendor/packages/{package_id}"

MONEY_FIELDS = ("price", "price_min", "price_max")


def get_catalog_write_model() -> CatalogWriteModel:
    """Dependency to get catalog write model instance."""
    return SqlCatalogWriteModel()


def to_changes(request: BaseModel) -> dict[str, Any]:
    """Fields the caller actually sent, with enums flattened and money as Decimal."""
    changes = request.model_dump(exclude_none=True, mode="json")
    for key in MONEY_FIELDS:
        if key in changes:
            changes[key] = to_money(changes[key], key)
    return changes


@router.post(VENDOR_SERVICES_URL, response_model=ServiceDetailResponse, status_code=201)
async def create_service(
    request: ServiceCreateRequest,
    identity: Identity = Depends(require_vendor),
    write_model: CatalogWriteModel = Depends(get_catalog_write_model),
) -> ServiceDetailResponse:
    service = await write_model.create_service(
        identity.id,
        ServiceCreateDTO(
            title=request.title,
            description=request.description,
            event_type=request.event_type.value,
            service_category=request.service_category,
            price_min=to_money(request.price_min, "price_min"),
            price_max=to_money(request.price_max, "price_max"),
            city=request.city,
            district=request.district,
            capacity=request.capacity,
            is_active=request.is_active,
        ),
    )
    return ServiceDetailResponse(service=ServiceResponse.from_dto(service), message="Service created successfully")


@router.get(VENDOR_SERVICES_URL, response_model=ServiceListResponse)
async def list_own_services(
    search: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    identity: Identity = Depends(require_vendor),
    read_model: CatalogReadModel = Depends(get_catalog_read_model),
) -> ServiceListResponse:
    """All of the vendor's services, including inactive ones."""
    result = await read_model.search_services(
        ListingFilters(search=search, vendor_id=identity.id, active=None), page, limit
    )
    return ServiceListResponse(
        services=[ServiceResponse.from_dto(s) for s in result.items],
        pagination=PaginationResponse.from_page(result),
    )


@router.put(VENDOR_SERVICE_URL, response_model=ServiceDetailResponse)
async def update_service(
    service_id: UUID,
    request: ServiceUpdateRequest,
    identity: Identity = Depends(require_vendor),
    write_model: CatalogWriteModel = Depends(get_catalog_write_model),
) -> ServiceDetailResponse:
    service = await write_model.update_service(identity.id, service_id, to_changes(request))
    return ServiceDetailResponse(service=ServiceResponse.from_dto(service), message="Service updated successfully")


@router.delete(VENDOR_SERVICE_URL, response_model=MessageResponse)
async def delete_service(
    service_id: UUID,
    identity: Identity = Depends(require_vendor),
    write_model: CatalogWriteModel = Depends(get_catalog_write_model),
) -> MessageResponse:
    await write_model.delete_service(identity.id, service_id)
    return MessageResponse(message="Service deleted successfully")


@router.post(VENDOR_PACKAGES_URL, response_model=PackageDetailResponse, status_code=201)
async def create_package(
    request: PackageCreateRequest,
    identity: Identity = Depends(require_vendor),
    write_model: CatalogWriteModel = Depends(get_catalog_write_model),
) -> PackageDetailResponse:
    package = await write_model.create_package(
        identity.id,
        PackageCreateDTO(
            title=request.title,
            description=request.description,
            event_type=request.event_type.value,
            price=to_money(request.price),
            services=request.services,
            city=request.city,
            district=request.district,
            capacity=request.capacity,
            is_active=request.is_active,
        ),
    )
    return PackageDetailResponse(package=PackageResponse.from_dto(package), message="Package created successfully")


@router.get(VENDOR_PACKAGES_URL, response_model=PackageListResponse)
async def list_own_packages(
    search: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    identity: Identity = Depends(require_vendor),
    read_model: CatalogReadModel = Depends(get_catalog_read_model),
) -> PackageListResponse:
    result = await read_model.search_packages(
        ListingFilters(search=search, vendor_id=identity.id, active=None), page, limit
    )
    return PackageListResponse(
        packages=[PackageResponse.from_dto(p) for p in result.items],
        pagination=PaginationResponse.from_page(result),
    )


@router.put(VENDOR_PACKAGE_URL, response_model=PackageDetailResponse)
async def update_package(
    package_id: UUID,
    request: PackageUpdateRequest,
    identity: Identity = Depends(require_vendor),
    write_model: CatalogWriteModel = Depends(get_catalog_write_model),
) -> PackageDetailResponse:
    package = await write_model.update_package(identity.id, package_id, to_changes(request))
    return PackageDetailResponse(package=PackageResponse.from_dto(package), message="Package updated successfully")


@router.delete(VENDOR_PACKAGE_URL, response_model=MessageResponse)
async def delete_package(
    package_id: UUID,
    identity: Identity = Depends(require_vendor),
    write_model: CatalogWriteModel = Depends(get_catalog_write_model),
) -> MessageResponse:
    await write_model.delete_package(identity.id, package_id)
    return MessageResponse(message="Package deleted successfully")
