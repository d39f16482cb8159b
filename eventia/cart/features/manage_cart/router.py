from uuid import UUID

from fastapi import APIRouter, Depends

from eventia.auth.dependencies import require_user
from eventia.auth.dtos import Identity
from eventia.cart.dtos import LineItemKind, LineItemRequest
from eventia.cart.repository.write_models import EventPlanWriteModel, SqlEventPlanWriteModel
from eventia.cart.schemas import (
    AddPackageRequest,
    AddServiceRequest,
    CartMutationResponse,
    CartResponse,
    EventPlanResponse,
)
from eventia.errors import ValidationError

router = APIRouter()

CART_URL = "/api/v1/cart"
CART_SERVICES_URL = "/api/v1/cart/services"
CART_SERVICE_URL = "/api/v1/cart/services/{service_id}"
CART_PACKAGES_URL = "/api/v1/cart/packages"
CART_PACKAGE_URL = "/api/v1/cart/packages/{package_id}"


def get_event_plan_write_model() -> EventPlanWriteModel:
    """Dependency to get event plan write model instance."""
    return SqlEventPlanWriteModel()


def _require_vendor_id(vendor_id: UUID | None) -> UUID:
    if vendor_id is None:
        raise ValidationError("vendor_id", "vendor_id is required")
    return vendor_id


@router.get(CART_URL, response_model=CartResponse)
async def get_cart(
    identity: Identity = Depends(require_user),
    write_model: EventPlanWriteModel = Depends(get_event_plan_write_model),
) -> CartResponse:
    """The caller's cart. An empty one is created on first access."""
    cart = await write_model.get_or_create_cart(identity.id)
    return CartResponse(cart=EventPlanResponse.from_dto(cart), total_cost=float(cart.total_cost))


@router.post(CART_SERVICES_URL, response_model=CartMutationResponse)
async def add_service(
    request: AddServiceRequest,
    identity: Identity = Depends(require_user),
    write_model: EventPlanWriteModel = Depends(get_event_plan_write_model),
) -> CartMutationResponse:
    item = LineItemRequest.service(
        service_id=request.service_id,
        vendor_id=request.vendor_id,
        price=request.price,
        quantity=request.quantity,
        notes=request.notes,
    )
    cart = await write_model.add_line(identity.id, item)
    return CartMutationResponse(message="Service added to cart successfully", cart=EventPlanResponse.from_dto(cart))


@router.post(CART_PACKAGES_URL, response_model=CartMutationResponse)
async def add_package(
    request: AddPackageRequest,
    identity: Identity = Depends(require_user),
    write_model: EventPlanWriteModel = Depends(get_event_plan_write_model),
) -> CartMutationResponse:
    item = LineItemRequest.package(
        package_id=request.package_id,
        vendor_id=request.vendor_id,
        price=request.price,
        quantity=request.quantity,
        notes=request.notes,
    )
    cart = await write_model.add_line(identity.id, item)
    return CartMutationResponse(message="Package added to cart successfully", cart=EventPlanResponse.from_dto(cart))


@router.delete(CART_SERVICE_URL, response_model=CartMutationResponse)
async def remove_service(
    service_id: UUID,
    vendor_id: UUID | None = None,
    identity: Identity = Depends(require_user),
    write_model: EventPlanWriteModel = Depends(get_event_plan_write_model),
) -> CartMutationResponse:
    cart = await write_model.remove_line(
        identity.id, LineItemKind.SERVICE, service_id, _require_vendor_id(vendor_id)
    )
    return CartMutationResponse(
        message="Service removed from cart successfully", cart=EventPlanResponse.from_dto(cart)
    )


@router.delete(CART_PACKAGE_URL, response_model=CartMutationResponse)
async def remove_package(
    package_id: UUID,
    vendor_id: UUID | None = None,
    identity: Identity = Depends(require_user),
    write_model: EventPlanWriteModel = Depends(get_event_plan_write_model),
) -> CartMutationResponse:
    cart = await write_model.remove_line(
        identity.id, LineItemKind.PACKAGE, package_id, _require_vendor_id(vendor_id)
    )
    return CartMutationResponse(
        message="Package removed from cart successfully", cart=EventPlanResponse.from_dto(cart)
    )
