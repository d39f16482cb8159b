from fastapi import APIRouter, Depends, Query

from eventia.auth.dependencies import require_vendor
from eventia.auth.dtos import Identity
from eventia.cart.dtos import EventPlanStatus
from eventia.cart.features.bookings.router import get_event_plan_read_model
from eventia.cart.repository.read_models import EventPlanReadModel
from eventia.cart.schemas import BookingListResponse, EventPlanResponse
from eventia.config.settings import settings
from eventia.pagination import PaginationResponse

router = APIRouter()

VENDOR_BOOKINGS_URL = "/api/v1/vendor/bookings"


@router.get(VENDOR_BOOKINGS_URL, response_model=BookingListResponse)
async def list_vendor_bookings(
    status: EventPlanStatus | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    identity: Identity = Depends(require_vendor),
    read_model: EventPlanReadModel = Depends(get_event_plan_read_model),
) -> BookingListResponse:
    """Bookings that include at least one of the vendor's services or packages."""
    result = await read_model.list_vendor_bookings(identity.id, status, page, limit)
    return BookingListResponse(
        bookings=[EventPlanResponse.from_dto(plan) for plan in result.items],
        pagination=PaginationResponse.from_page(result),
    )
