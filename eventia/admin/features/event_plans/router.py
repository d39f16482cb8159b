from uuid import UUID

from fastapi import APIRouter, Depends, Query

from eventia.admin.schemas import EventPlanListResponse
from eventia.auth.dependencies import require_admin
from eventia.auth.dtos import Identity
from eventia.cart.dtos import EventPlanStatus, PlanFilters
from eventia.cart.features.bookings.router import get_event_plan_read_model
from eventia.cart.features.manage_cart.router import get_event_plan_write_model
from eventia.cart.repository.read_models import EventPlanReadModel
from eventia.cart.repository.write_models import EventPlanWriteModel
from eventia.cart.schemas import BookingResponse, EventPlanResponse, StatusUpdateRequest
from eventia.config.settings import settings
from eventia.pagination import PaginationResponse

router = APIRouter()

ADMIN_EVENT_PLANS_URL = "/api/v1/admin/event-plans"
ADMIN_EVENT_PLAN_STATUS_URL = "/api/v1/admin/event-plans/{plan_id}/status"


@router.get(ADMIN_EVENT_PLANS_URL, response_model=EventPlanListResponse)
async def list_event_plans(
    status: EventPlanStatus | None = None,
    search: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    _: Identity = Depends(require_admin),
    read_model: EventPlanReadModel = Depends(get_event_plan_read_model),
) -> EventPlanListResponse:
    """Every event plan, carts included."""
    result = await read_model.list_all_plans(PlanFilters(status=status, search=search), page, limit)
    return EventPlanListResponse(
        event_plans=[EventPlanResponse.from_dto(plan) for plan in result.items],
        pagination=PaginationResponse.from_page(result),
    )


@router.put(ADMIN_EVENT_PLAN_STATUS_URL, response_model=BookingResponse)
async def update_event_plan_status(
    plan_id: UUID,
    request: StatusUpdateRequest,
    identity: Identity = Depends(require_admin),
    write_model: EventPlanWriteModel = Depends(get_event_plan_write_model),
) -> BookingResponse:
    booking = await write_model.update_status(identity, plan_id, request.status)
    return BookingResponse(
        message="Event plan status updated successfully", booking=EventPlanResponse.from_dto(booking)
    )
