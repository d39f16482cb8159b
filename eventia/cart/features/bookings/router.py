from uuid import UUID

from fastapi import APIRouter, Depends, Query

from eventia.auth.dependencies import require_role, require_user
from eventia.auth.dtos import Identity, Role
from eventia.cart.dtos import EventPlanStatus
from eventia.cart.features.manage_cart.router import get_event_plan_write_model
from eventia.cart.repository.read_models import EventPlanReadModel, SqlEventPlanReadModel
from eventia.cart.repository.write_models import EventPlanWriteModel
from eventia.cart.schemas import (
    BookingListResponse,
    BookingResponse,
    EventPlanResponse,
    StatusUpdateRequest,
)
from eventia.config.settings import settings
from eventia.pagination import PaginationResponse

router = APIRouter()

BOOKINGS_URL = "/api/v1/bookings"
BOOKING_URL = "/api/v1/bookings/{plan_id}"
BOOKING_STATUS_URL = "/api/v1/bookings/{plan_id}/status"

require_owner_or_admin = require_role(Role.USER, Role.ADMIN)


def get_event_plan_read_model() -> EventPlanReadModel:
    """Dependency to get event plan read model instance."""
    return SqlEventPlanReadModel()


@router.get(BOOKINGS_URL, response_model=BookingListResponse)
async def list_bookings(
    status: EventPlanStatus | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    identity: Identity = Depends(require_user),
    read_model: EventPlanReadModel = Depends(get_event_plan_read_model),
) -> BookingListResponse:
    result = await read_model.list_bookings(identity.id, status, page, limit)
    return BookingListResponse(
        bookings=[EventPlanResponse.from_dto(plan) for plan in result.items],
        pagination=PaginationResponse.from_page(result),
    )


@router.get(BOOKING_URL, response_model=BookingResponse)
async def get_booking(
    plan_id: UUID,
    identity: Identity = Depends(require_owner_or_admin),
    read_model: EventPlanReadModel = Depends(get_event_plan_read_model),
) -> BookingResponse:
    booking = await read_model.get_plan(identity, plan_id)
    return BookingResponse(booking=EventPlanResponse.from_dto(booking))


@router.put(BOOKING_STATUS_URL, response_model=BookingResponse)
async def update_booking_status(
    plan_id: UUID,
    request: StatusUpdateRequest,
    identity: Identity = Depends(require_owner_or_admin),
    write_model: EventPlanWriteModel = Depends(get_event_plan_write_model),
) -> BookingResponse:
    booking = await write_model.update_status(identity, plan_id, request.status)
    return BookingResponse(
        message="Booking status updated successfully", booking=EventPlanResponse.from_dto(booking)
    )
