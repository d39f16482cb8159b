from uuid import UUID

from fastapi import APIRouter, Depends, Query

from eventia.auth.dependencies import require_admin, require_authenticated
from eventia.auth.dtos import Identity
from eventia.config.settings import settings
from eventia.errors import NotFoundError
from eventia.moderation.dtos import TestimonialCreateDTO
from eventia.moderation.repository.read_models import ModerationReadModel, SqlModerationReadModel
from eventia.moderation.repository.write_models import ModerationWriteModel, SqlModerationWriteModel
from eventia.moderation.schemas import (
    ApproveRequest,
    TestimonialDetailResponse,
    TestimonialListResponse,
    TestimonialRequest,
    TestimonialResponse,
)
from eventia.pagination import PaginationResponse
from eventia.schemas import MessageResponse

router = APIRouter()

TESTIMONIALS_URL = "/api/v1/testimonials"
TESTIMONIAL_URL = "/api/v1/testimonials/{testimonial_id}"
ADMIN_TESTIMONIALS_URL = "/api/v1/admin/testimonials"
ADMIN_TESTIMONIAL_URL = "/api/v1/admin/testimonials/{testimonial_id}"
ADMIN_TESTIMONIAL_APPROVE_URL = "/api/v1/admin/testimonials/{testimonial_id}/approve"


def get_moderation_read_model() -> ModerationReadModel:
    """Dependency to get moderation read model instance."""
    return SqlModerationReadModel()


def get_moderation_write_model() -> ModerationWriteModel:
    """Dependency to get moderation write model instance."""
    return SqlModerationWriteModel()


@router.get(TESTIMONIALS_URL, response_model=TestimonialListResponse)
async def list_testimonials(
    event_type: str | None = None,
    limit: int = Query(default=10, ge=1, le=settings.max_page_size),
    read_model: ModerationReadModel = Depends(get_moderation_read_model),
) -> TestimonialListResponse:
    testimonials = await read_model.list_published_testimonials(event_type, limit)
    return TestimonialListResponse(testimonials=[TestimonialResponse.from_dto(t) for t in testimonials])


@router.get(TESTIMONIAL_URL, response_model=TestimonialDetailResponse)
async def get_testimonial(
    testimonial_id: UUID,
    read_model: ModerationReadModel = Depends(get_moderation_read_model),
) -> TestimonialDetailResponse:
    testimonial = await read_model.get_published_testimonial(testimonial_id)
    if testimonial is None:
        raise NotFoundError("Testimonial not found")
    return TestimonialDetailResponse(testimonial=TestimonialResponse.from_dto(testimonial))


@router.post(TESTIMONIALS_URL, response_model=TestimonialDetailResponse, status_code=201)
async def submit_testimonial(
    request: TestimonialRequest,
    identity: Identity = Depends(require_authenticated),
    write_model: ModerationWriteModel = Depends(get_moderation_write_model),
) -> TestimonialDetailResponse:
    testimonial = await write_model.submit_testimonial(
        identity.id,
        TestimonialCreateDTO(
            customer_name=request.customer_name,
            customer_role=request.customer_role,
            event_type=request.event_type,
            rating=request.rating,
            testimonial=request.testimonial,
            vendor_id=request.vendor_id,
        ),
    )
    return TestimonialDetailResponse(
        testimonial=TestimonialResponse.from_dto(testimonial),
        message="Testimonial submitted successfully and pending approval",
    )


@router.get(ADMIN_TESTIMONIALS_URL, response_model=TestimonialListResponse)
async def admin_list_testimonials(
    status: str | None = Query(default=None, pattern="^(approved|pending)$"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    _: Identity = Depends(require_admin),
    read_model: ModerationReadModel = Depends(get_moderation_read_model),
) -> TestimonialListResponse:
    approved = None if status is None else status == "approved"
    result = await read_model.list_testimonials(approved, page, limit)
    return TestimonialListResponse(
        testimonials=[TestimonialResponse.from_dto(t) for t in result.items],
        pagination=PaginationResponse.from_page(result),
    )


@router.put(ADMIN_TESTIMONIAL_APPROVE_URL, response_model=TestimonialDetailResponse)
async def approve_testimonial(
    testimonial_id: UUID,
    request: ApproveRequest,
    _: Identity = Depends(require_admin),
    write_model: ModerationWriteModel = Depends(get_moderation_write_model),
) -> TestimonialDetailResponse:
    testimonial = await write_model.set_testimonial_approval(testimonial_id, request.approve)
    return TestimonialDetailResponse(
        testimonial=TestimonialResponse.from_dto(testimonial),
        message=f"Testimonial {'approved' if request.approve else 'rejected'}",
    )


@router.delete(ADMIN_TESTIMONIAL_URL, response_model=MessageResponse)
async def delete_testimonial(
    testimonial_id: UUID,
    _: Identity = Depends(require_admin),
    write_model: ModerationWriteModel = Depends(get_moderation_write_model),
) -> MessageResponse:
    await write_model.delete_testimonial(testimonial_id)
    return MessageResponse(message="Testimonial deleted successfully")
