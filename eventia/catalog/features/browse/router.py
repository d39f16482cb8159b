from uuid import UUID

from fastapi import APIRouter, Depends, Query

from eventia.catalog.dtos import ListingFilters, to_money
from eventia.catalog.repository.read_models import CatalogReadModel, SqlCatalogReadModel
from eventia.catalog.schemas import (
    PackageDetailResponse,
    PackageListResponse,
    PackageResponse,
    ServiceDetailResponse,
    ServiceListResponse,
    ServiceResponse,
)
from eventia.config.settings import settings
from eventia.errors import NotFoundError
from eventia.pagination import PaginationResponse

router = APIRouter()

SERVICES_URL = "/api/v1/services"
SERVICE_URL = "/api/v1/services/{service_id}"
PACKAGES_URL = "/api/v1/packages"
PACKAGE_URL = "/api/v1/packages/{package_id}"


def get_catalog_read_model() -> CatalogReadModel:
    """Dependency to get catalog read model instance."""
    return SqlCatalogReadModel()


def split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


@router.get(SERVICES_URL, response_model=ServiceListResponse)
async def list_services(
    event_type: str | None = None,
    service_category: str | None = None,
    min_price: float | None = Query(default=None, ge=0, allow_inf_nan=False),
    max_price: float | None = Query(default=None, ge=0, allow_inf_nan=False),
    location: str | None = None,
    search: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    read_model: CatalogReadModel = Depends(get_catalog_read_model),
) -> ServiceListResponse:
    """Active services, newest first.

    ``service_category`` accepts a comma-separated list; a service matches if
    its category matches any of them.
    """
    filters = ListingFilters(
        event_type=event_type,
        service_categories=split_csv(service_category),
        min_price=to_money(min_price, "min_price") if min_price is not None else None,
        max_price=to_money(max_price, "max_price") if max_price is not None else None,
        location=location,
        search=search,
    )
    result = await read_model.search_services(filters, page, limit)
    return ServiceListResponse(
        services=[ServiceResponse.from_dto(s) for s in result.items],
        pagination=PaginationResponse.from_page(result),
    )


@router.get(SERVICE_URL, response_model=ServiceDetailResponse)
async def get_service(
    service_id: UUID,
    read_model: CatalogReadModel = Depends(get_catalog_read_model),
) -> ServiceDetailResponse:
    service = await read_model.get_service(service_id)
    if service is None or not service.is_active:
        raise NotFoundError("Service not found")
    return ServiceDetailResponse(service=ServiceResponse.from_dto(service))


@router.get(PACKAGES_URL, response_model=PackageListResponse)
async def list_packages(
    event_type: str | None = None,
    min_price: float | None = Query(default=None, ge=0, allow_inf_nan=False),
    max_price: float | None = Query(default=None, ge=0, allow_inf_nan=False),
    location: str | None = None,
    search: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    read_model: CatalogReadModel = Depends(get_catalog_read_model),
) -> PackageListResponse:
    filters = ListingFilters(
        event_type=event_type,
        min_price=to_money(min_price, "min_price") if min_price is not None else None,
        max_price=to_money(max_price, "max_price") if max_price is not None else None,
        location=location,
        search=search,
    )
    result = await read_model.search_packages(filters, page, limit)
    return PackageListResponse(
        packages=[PackageResponse.from_dto(p) for p in result.items],
        pagination=PaginationResponse.from_page(result),
    )


@router.get(PACKAGE_URL, response_model=PackageDetailResponse)
async def get_package(
    package_id: UUID,
    read_model: CatalogReadModel = Depends(get_catalog_read_model),
) -> PackageDetailResponse:
    package = await read_model.get_package(package_id)
    if package is None or not package.is_active:
        raise NotFoundError("Package not found")
    return PackageDetailResponse(package=PackageResponse.from_dto(package))
