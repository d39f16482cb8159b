"""Testimonial and contact message write models."""

import logging
from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventia.config.database import async_session_manager
from eventia.errors import NotFoundError, ValidationError
from eventia.moderation.dtos import (
    ContactCreateDTO,
    ContactMessageDTO,
    ContactStatus,
    TestimonialCreateDTO,
    TestimonialDTO,
)
from eventia.moderation.repository.orm_models import (
    CONTACT_MESSAGE_MAX_LENGTH,
    TESTIMONIAL_MAX_LENGTH,
    ContactMessage,
    Testimonial,
)

logger = logging.getLogger(__name__)


class ModerationWriteModel(ABC):
    @abstractmethod
    async def submit_testimonial(self, author_id: UUID, data: TestimonialCreateDTO) -> TestimonialDTO:
        """Store a testimonial. It stays hidden until an admin approves it."""
        raise NotImplementedError

    @abstractmethod
    async def set_testimonial_approval(self, testimonial_id: UUID, approve: bool) -> TestimonialDTO:
        raise NotImplementedError

    @abstractmethod
    async def delete_testimonial(self, testimonial_id: UUID) -> None:
        raise NotImplementedError

    @abstractmethod
    async def create_contact(self, data: ContactCreateDTO) -> ContactMessageDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_contact_status(
        self, contact_id: UUID, status: ContactStatus, admin_notes: str | None = None
    ) -> ContactMessageDTO:
        raise NotImplementedError

    @abstractmethod
    async def delete_contact(self, contact_id: UUID) -> None:
        raise NotImplementedError


class SqlModerationWriteModel(ModerationWriteModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def _get_testimonial(self, session: AsyncSession, testimonial_id: UUID) -> Testimonial:
        result = await session.execute(select(Testimonial).where(Testimonial.uuid == testimonial_id))
        testimonial = result.scalar_one_or_none()
        if testimonial is None:
            raise NotFoundError("Testimonial not found")
        return testimonial

    async def _get_contact(self, session: AsyncSession, contact_id: UUID) -> ContactMessage:
        result = await session.execute(select(ContactMessage).where(ContactMessage.uuid == contact_id))
        contact = result.scalar_one_or_none()
        if contact is None:
            raise NotFoundError("Contact message not found")
        return contact

    async def submit_testimonial(self, author_id: UUID, data: TestimonialCreateDTO) -> TestimonialDTO:
        if not 1 <= data.rating <= 5:
            raise ValidationError("rating", "rating must be between 1 and 5")
        if len(data.testimonial) > TESTIMONIAL_MAX_LENGTH:
            raise ValidationError("testimonial", f"testimonial must be at most {TESTIMONIAL_MAX_LENGTH} characters")

        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            testimonial = Testimonial(
                author_id=author_id,
                customer_name=data.customer_name.strip(),
                customer_role=data.customer_role.strip(),
                event_type=data.event_type.strip(),
                rating=data.rating,
                testimonial=data.testimonial.strip(),
                vendor_id=data.vendor_id,
                is_approved=False,
            )
            session.add(testimonial)
            await session.flush()
            logger.info("Testimonial %s submitted by %s", testimonial.uuid, author_id)
            return TestimonialDTO.from_testimonial(testimonial)

    async def set_testimonial_approval(self, testimonial_id: UUID, approve: bool) -> TestimonialDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            testimonial = await self._get_testimonial(session, testimonial_id)
            testimonial.is_approved = approve
            await session.flush()
            logger.info("Testimonial %s %s", testimonial_id, "approved" if approve else "rejected")
            return TestimonialDTO.from_testimonial(testimonial)

    async def delete_testimonial(self, testimonial_id: UUID) -> None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            testimonial = await self._get_testimonial(session, testimonial_id)
            await session.delete(testimonial)
            logger.info("Testimonial %s deleted", testimonial_id)

    async def create_contact(self, data: ContactCreateDTO) -> ContactMessageDTO:
        for field in ("name", "email", "subject", "message"):
            if not (getattr(data, field) or "").strip():
                raise ValidationError(field, "All required fields must be provided")
        if len(data.message) > CONTACT_MESSAGE_MAX_LENGTH:
            raise ValidationError("message", f"message must be at most {CONTACT_MESSAGE_MAX_LENGTH} characters")

        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            contact = ContactMessage(
                name=data.name.strip(),
                email=data.email.strip().lower(),
                phone=data.phone,
                subject=data.subject.strip(),
                message=data.message.strip(),
                status=ContactStatus.NEW,
            )
            session.add(contact)
            await session.flush()
            logger.info("Contact message %s received", contact.uuid)
            return ContactMessageDTO.from_contact(contact)

    async def update_contact_status(
        self, contact_id: UUID, status: ContactStatus, admin_notes: str | None = None
    ) -> ContactMessageDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            contact = await self._get_contact(session, contact_id)
            contact.status = status
            if admin_notes is not None:
                contact.admin_notes = admin_notes
            await session.flush()
            logger.info("Contact message %s marked %s", contact_id, status.value)
            return ContactMessageDTO.from_contact(contact)

    async def delete_contact(self, contact_id: UUID) -> None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            contact = await self._get_contact(session, contact_id)
            await session.delete(contact)
            logger.info("Contact message %s deleted", contact_id)
