from uuid import UUID

from fastapi import APIRouter, Depends

from eventia.auth.dependencies import require_user
from eventia.auth.dtos import Identity
from eventia.cart.features.bookings.router import get_event_plan_read_model
from eventia.cart.repository.read_models import EventPlanReadModel
from eventia.cart.schemas import RecommendationsResponse
from eventia.catalog.dtos import RecommendationCriteria
from eventia.catalog.features.browse.router import get_catalog_read_model
from eventia.catalog.repository.read_models import CatalogReadModel
from eventia.errors import ValidationError

router = APIRouter()

RECOMMENDATIONS_URL = "/api/v1/bookings/{plan_id}/recommendations"


@router.get(RECOMMENDATIONS_URL, response_model=RecommendationsResponse)
async def get_recommendations(
    plan_id: UUID,
    identity: Identity = Depends(require_user),
    plan_read_model: EventPlanReadModel = Depends(get_event_plan_read_model),
    catalog_read_model: CatalogReadModel = Depends(get_catalog_read_model),
) -> RecommendationsResponse:
    """Listings that fit one of the caller's checked-out plans."""
    plan = await plan_read_model.get_plan(identity, plan_id)
    # Carts carry no event details until checkout
    if not (plan.event_type and plan.budget is not None and plan.guest_count and plan.preferred_location):
        raise ValidationError("plan_id", "Event plan has no event details to match against")

    recommendations = await catalog_read_model.recommend(
        RecommendationCriteria(
            event_type=plan.event_type,
            budget=plan.budget,
            guest_count=plan.guest_count,
            city=plan.preferred_location.city,
        )
    )
    return RecommendationsResponse.from_dto(recommendations)
