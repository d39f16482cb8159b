from fastapi import APIRouter, Depends

from eventia.auth.dependencies import require_user
from eventia.auth.dtos import Identity
from eventia.cart.features.manage_cart.router import get_event_plan_write_model
from eventia.cart.repository.write_models import EventPlanWriteModel
from eventia.cart.schemas import BookingResponse, CheckoutRequest, EventPlanResponse
from eventia.cart.validation import validate_checkout

router = APIRouter()

CHECKOUT_URL = "/api/v1/cart/checkout"


@router.post(CHECKOUT_URL, response_model=BookingResponse)
async def checkout(
    request: CheckoutRequest,
    identity: Identity = Depends(require_user),
    write_model: EventPlanWriteModel = Depends(get_event_plan_write_model),
) -> BookingResponse:
    """
    Turn the caller's cart into a confirmed booking.

    The event details are validated before the cart is looked up, so a bad
    request never reports "Cart not found" or "Cart is empty".
    """
    details = validate_checkout(
        event_type=request.event_type,
        budget=request.budget,
        guest_count=request.guest_count,
        preferred_location=request.preferred_location,
        event_date=request.event_date,
        notes=request.notes,
    )
    booking = await write_model.checkout(identity.id, details)
    return BookingResponse(message="Booking confirmed successfully", booking=EventPlanResponse.from_dto(booking))
