from uuid import UUID

from fastapi import APIRouter, Depends, Query

from eventia.auth.dependencies import require_admin
from eventia.auth.dtos import Identity
from eventia.config.settings import settings
from eventia.moderation.dtos import ContactCreateDTO, ContactStatus
from eventia.moderation.features.testimonials.router import (
    get_moderation_read_model,
    get_moderation_write_model,
)
from eventia.moderation.repository.read_models import ModerationReadModel
from eventia.moderation.repository.write_models import ModerationWriteModel
from eventia.moderation.schemas import (
    ContactDetailResponse,
    ContactListResponse,
    ContactRequest,
    ContactResponse,
    ContactStatusRequest,
    ContactSubmittedResponse,
)
from eventia.pagination import PaginationResponse
from eventia.schemas import MessageResponse

router = APIRouter()

CONTACT_URL = "/api/v1/contact"
ADMIN_CONTACTS_URL = "/api/v1/admin/contacts"
ADMIN_CONTACT_URL = "/api/v1/admin/contacts/{contact_id}"
ADMIN_CONTACT_STATUS_URL = "/api/v1/admin/contacts/{contact_id}/status"


@router.post(CONTACT_URL, response_model=ContactSubmittedResponse, status_code=201)
async def submit_contact(
    request: ContactRequest,
    write_model: ModerationWriteModel = Depends(get_moderation_write_model),
) -> ContactSubmittedResponse:
    contact = await write_model.create_contact(
        ContactCreateDTO(
            name=request.name or "",
            email=request.email or "",
            subject=request.subject or "",
            message=request.message or "",
            phone=request.phone,
        )
    )
    return ContactSubmittedResponse(
        message="Contact form submitted successfully. We'll get back to you soon!",
        contact_id=contact.id,
    )


@router.get(ADMIN_CONTACTS_URL, response_model=ContactListResponse)
async def list_contacts(
    status: ContactStatus | None = None,
    search: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    _: Identity = Depends(require_admin),
    read_model: ModerationReadModel = Depends(get_moderation_read_model),
) -> ContactListResponse:
    result = await read_model.list_contacts(status, search, page, limit)
    return ContactListResponse(
        contacts=[ContactResponse.from_dto(c) for c in result.items],
        pagination=PaginationResponse.from_page(result),
    )


@router.put(ADMIN_CONTACT_STATUS_URL, response_model=ContactDetailResponse)
async def update_contact_status(
    contact_id: UUID,
    request: ContactStatusRequest,
    _: Identity = Depends(require_admin),
    write_model: ModerationWriteModel = Depends(get_moderation_write_model),
) -> ContactDetailResponse:
    contact = await write_model.update_contact_status(contact_id, request.status, request.admin_notes)
    return ContactDetailResponse(
        contact=ContactResponse.from_dto(contact), message="Contact status updated successfully"
    )


@router.delete(ADMIN_CONTACT_URL, response_model=MessageResponse)
async def delete_contact(
    contact_id: UUID,
    _: Identity = Depends(require_admin),
    write_model: ModerationWriteModel = Depends(get_moderation_write_model),
) -> MessageResponse:
    await write_model.delete_contact(contact_id)
    return MessageResponse(message="Contact message deleted successfully")
