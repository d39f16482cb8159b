from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from eventia.moderation.dtos import ContactMessageDTO, ContactStatus, TestimonialDTO
from eventia.moderation.repository.orm_models import TESTIMONIAL_MAX_LENGTH
from eventia.pagination import PaginationResponse


class TestimonialResponse(BaseModel):
    id: UUID
    customer_name: str
    customer_role: str
    event_type: str
    rating: int
    testimonial: str
    vendor_id: UUID | None = None
    is_approved: bool
    created_at: datetime | None = None

    @classmethod
    def from_dto(cls, dto: TestimonialDTO) -> "TestimonialResponse":
        return cls(
            id=dto.id,
            customer_name=dto.customer_name,
            customer_role=dto.customer_role,
            event_type=dto.event_type,
            rating=dto.rating,
            testimonial=dto.testimonial,
            vendor_id=dto.vendor_id,
            is_approved=dto.is_approved,
            created_at=dto.created_at,
        )


class TestimonialRequest(BaseModel):
    customer_name: str = Field(min_length=1, max_length=255)
    customer_role: str = Field(min_length=1, max_length=255)
    event_type: str = Field(min_length=1, max_length=50)
    rating: int = Field(ge=1, le=5)
    testimonial: str = Field(min_length=1, max_length=TESTIMONIAL_MAX_LENGTH)
    vendor_id: UUID | None = None


class TestimonialDetailResponse(BaseModel):
    testimonial: TestimonialResponse
    message: str | None = None


class TestimonialListResponse(BaseModel):
    testimonials: list[TestimonialResponse]
    pagination: PaginationResponse | None = None


class ApproveRequest(BaseModel):
    approve: bool


class ContactRequest(BaseModel):
    # Required fields are checked by the write model so a missing one is a 400
    name: str | None = None
    email: EmailStr | None = None
    phone: str | None = None
    subject: str | None = None
    message: str | None = None


class ContactResponse(BaseModel):
    id: UUID
    name: str
    email: str
    phone: str | None = None
    subject: str
    message: str
    status: ContactStatus
    admin_notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dto(cls, dto: ContactMessageDTO) -> "ContactResponse":
        return cls(
            id=dto.id,
            name=dto.name,
            email=dto.email,
            phone=dto.phone,
            subject=dto.subject,
            message=dto.message,
            status=dto.status,
            admin_notes=dto.admin_notes,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class ContactSubmittedResponse(BaseModel):
    message: str
    contact_id: UUID


class ContactListResponse(BaseModel):
    contacts: list[ContactResponse]
    pagination: PaginationResponse


class ContactDetailResponse(BaseModel):
    contact: ContactResponse
    message: str | None = None


class ContactStatusRequest(BaseModel):
    status: ContactStatus
    admin_notes: str | None = None

