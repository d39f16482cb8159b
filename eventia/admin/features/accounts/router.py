from uuid import UUID

from fastapi import APIRouter, Depends, Query

from eventia.admin.dtos import VendorApprovalFilter
from eventia.admin.features.dashboard.router import get_admin_read_model
from eventia.admin.repository.read_models import AdminReadModel
from eventia.admin.repository.write_models import AdminWriteModel, SqlAdminWriteModel
from eventia.admin.schemas import (
    ApproveVendorRequest,
    UserListResponse,
    VendorListResponse,
    VendorResponse,
)
from eventia.auth.dependencies import require_admin
from eventia.auth.dtos import Identity
from eventia.auth.schemas import UserResponse
from eventia.config.settings import settings
from eventia.pagination import PaginationResponse
from eventia.schemas import MessageResponse

router = APIRouter()

ADMIN_VENDORS_URL = "/api/v1/admin/vendors"
ADMIN_VENDOR_URL = "/api/v1/admin/vendors/{vendor_id}"
ADMIN_VENDOR_APPROVE_URL = "/api/v1/admin/vendors/{vendor_id}/approve"
ADMIN_USERS_URL = "/api/v1/admin/users"
ADMIN_USER_URL = "/api/v1/admin/users/{user_id}"


def get_admin_write_model() -> AdminWriteModel:
    """Dependency to get admin write model instance."""
    return SqlAdminWriteModel()


@router.get(ADMIN_VENDORS_URL, response_model=VendorListResponse)
async def list_vendors(
    status: VendorApprovalFilter | None = None,
    search: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    _: Identity = Depends(require_admin),
    read_model: AdminReadModel = Depends(get_admin_read_model),
) -> VendorListResponse:
    result = await read_model.list_vendors(status, search, page, limit)
    return VendorListResponse(
        vendors=[UserResponse.from_dto(v) for v in result.items],
        pagination=PaginationResponse.from_page(result),
    )


@router.put(ADMIN_VENDOR_APPROVE_URL, response_model=VendorResponse)
async def approve_vendor(
    vendor_id: UUID,
    request: ApproveVendorRequest,
    _: Identity = Depends(require_admin),
    write_model: AdminWriteModel = Depends(get_admin_write_model),
) -> VendorResponse:
    vendor = await write_model.approve_vendor(vendor_id, request.approve, request.reason)
    return VendorResponse(
        message=f"Vendor {'approved' if request.approve else 'rejected'}",
        vendor=UserResponse.from_dto(vendor),
    )


@router.delete(ADMIN_VENDOR_URL, response_model=MessageResponse)
async def delete_vendor(
    vendor_id: UUID,
    _: Identity = Depends(require_admin),
    write_model: AdminWriteModel = Depends(get_admin_write_model),
) -> MessageResponse:
    await write_model.delete_vendor(vendor_id)
    return MessageResponse(message="Vendor deleted successfully")


@router.get(ADMIN_USERS_URL, response_model=UserListResponse)
async def list_users(
    search: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    _: Identity = Depends(require_admin),
    read_model: AdminReadModel = Depends(get_admin_read_model),
) -> UserListResponse:
    result = await read_model.list_users(search, page, limit)
    return UserListResponse(
        users=[UserResponse.from_dto(u) for u in result.items],
        pagination=PaginationResponse.from_page(result),
    )


@router.delete(ADMIN_USER_URL, response_model=MessageResponse)
async def delete_user(
    user_id: UUID,
    _: Identity = Depends(require_admin),
    write_model: AdminWriteModel = Depends(get_admin_write_model),
) -> MessageResponse:
    await write_model.delete_user(user_id)
    return MessageResponse(message="User deleted successfully")
