from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from eventia.moderation.repository.orm_models import ContactMessage, Testimonial


class ContactStatus(str, Enum):
    NEW = "New"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


@dataclass(frozen=True)
class TestimonialDTO:
    id: UUID
    author_id: UUID | None
    customer_name: str
    customer_role: str
    event_type: str
    rating: int
    testimonial: str
    vendor_id: UUID | None = None
    is_approved: bool = False
    created_at: datetime | None = None

    @classmethod
    def from_testimonial(cls, row: "Testimonial") -> "TestimonialDTO":
        return cls(
            id=row.uuid,
            author_id=row.author_id,
            customer_name=row.customer_name,
            customer_role=row.customer_role,
            event_type=row.event_type,
            rating=row.rating,
            testimonial=row.testimonial,
            vendor_id=row.vendor_id,
            is_approved=row.is_approved,
            created_at=row.created_at,
        )


@dataclass(frozen=True)
class TestimonialCreateDTO:
    customer_name: str
    customer_role: str
    event_type: str
    rating: int
    testimonial: str
    vendor_id: UUID | None = None


@dataclass(frozen=True)
class ContactMessageDTO:
    id: UUID
    name: str
    email: str
    subject: str
    message: str
    status: ContactStatus
    phone: str | None = None
    admin_notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_contact(cls, row: "ContactMessage") -> "ContactMessageDTO":
        return cls(
            id=row.uuid,
            name=row.name,
            email=row.email,
            subject=row.subject,
            message=row.message,
            status=ContactStatus(row.status),
            phone=row.phone,
            admin_notes=row.admin_notes,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )


@dataclass(frozen=True)
class ContactCreateDTO:
    name: str
    email: str
    subject: str
    message: str
    phone: str | None = None
