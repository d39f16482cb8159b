from uuid import UUID

from fastapi import APIRouter, Depends, Query

from eventia.admin.schemas import ToggleRequest
from eventia.auth.dependencies import require_admin
from eventia.auth.dtos import Identity
from eventia.catalog.dtos import ListingFilters
from eventia.catalog.features.browse.router import get_catalog_read_model
from eventia.catalog.features.vendor_listings.router import get_catalog_write_model
from eventia.catalog.repository.read_models import CatalogReadModel
from eventia.catalog.repository.write_models import CatalogWriteModel
from eventia.catalog.schemas import (
    PackageDetailResponse,
    PackageListResponse,
    PackageResponse,
    ServiceDetailResponse,
    ServiceListResponse,
    ServiceResponse,
)
from eventia.config.settings import settings
from eventia.pagination import PaginationResponse

router = APIRouter()

ADMIN_SERVICES_URL = "/api/v1/admin/services"
ADMIN_SERVICE_TOGGLE_URL = "/api/v1/admin/services/{service_id}/toggle"
ADMIN_PACKAGES_URL = "/api/v1/admin/packages"
ADMIN_PACKAGE_TOGGLE_URL = "/api/v1/admin/packages/{package_id}/toggle"


@router.get(ADMIN_SERVICES_URL, response_model=ServiceListResponse)
async def list_all_services(
    search: str | None = None,
    active: bool | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    _: Identity = Depends(require_admin),
    read_model: CatalogReadModel = Depends(get_catalog_read_model),
) -> ServiceListResponse:
    result = await read_model.search_services(ListingFilters(search=search, active=active), page, limit)
    return ServiceListResponse(
        services=[ServiceResponse.from_dto(s) for s in result.items],
        pagination=PaginationResponse.from_page(result),
    )


@router.put(ADMIN_SERVICE_TOGGLE_URL, response_model=ServiceDetailResponse)
async def toggle_service(
    service_id: UUID,
    request: ToggleRequest,
    _: Identity = Depends(require_admin),
    write_model: CatalogWriteModel = Depends(get_catalog_write_model),
) -> ServiceDetailResponse:
    service = await write_model.set_service_active(service_id, request.active)
    return ServiceDetailResponse(
        service=ServiceResponse.from_dto(service),
        message=f"Service {'activated' if request.active else 'deactivated'}",
    )


@router.get(ADMIN_PACKAGES_URL, response_model=PackageListResponse)
async def list_all_packages(
    search: str | None = None,
    active: bool | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    _: Identity = Depends(require_admin),
    read_model: CatalogReadModel = Depends(get_catalog_read_model),
) -> PackageListResponse:
    result = await read_model.search_packages(ListingFilters(search=search, active=active), page, limit)
    return PackageListResponse(
        packages=[PackageResponse.from_dto(p) for p in result.items],
        pagination=PaginationResponse.from_page(result),
    )


@router.put(ADMIN_PACKAGE_TOGGLE_URL, response_model=PackageDetailResponse)
async def toggle_package(
    package_id: UUID,
    request: ToggleRequest,
    _: Identity = Depends(require_admin),
    write_model: CatalogWriteModel = Depends(get_catalog_write_model),
) -> PackageDetailResponse:
    package = await write_model.set_package_active(package_id, request.active)
    return PackageDetailResponse(
        package=PackageResponse.from_dto(package),
        message=f"Package {'activated' if request.active else 'deactivated'}",
    )
