import abc
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventia.config.database import async_session_manager
from eventia.moderation.dtos import ContactMessageDTO, ContactStatus, TestimonialDTO
from eventia.moderation.repository.orm_models import ContactMessage, Testimonial
from eventia.pagination import Page, page_offset


class ModerationReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_published_testimonials(self, event_type: str | None, limit: int) -> list[TestimonialDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_published_testimonial(self, testimonial_id: UUID) -> TestimonialDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_testimonials(self, approved: bool | None, page: int, limit: int) -> Page[TestimonialDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_contacts(
        self, status: ContactStatus | None, search: str | None, page: int, limit: int
    ) -> Page[ContactMessageDTO]:
        raise NotImplementedError


class SqlModerationReadModel(ModerationReadModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def list_published_testimonials(self, event_type: str | None, limit: int) -> list[TestimonialDTO]:
        query = select(Testimonial).where(Testimonial.is_approved.is_(True))
        if event_type:
            query = query.where(func.lower(Testimonial.event_type) == event_type.strip().lower())
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(query.order_by(Testimonial.created_at.desc()).limit(limit))
            return [TestimonialDTO.from_testimonial(t) for t in result.scalars().all()]

    async def get_published_testimonial(self, testimonial_id: UUID) -> TestimonialDTO | None:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(
                select(Testimonial).where(
                    Testimonial.uuid == testimonial_id,
                    Testimonial.is_approved.is_(True),
                )
            )
            testimonial = result.scalar_one_or_none()
            return TestimonialDTO.from_testimonial(testimonial) if testimonial else None

    async def list_testimonials(self, approved: bool | None, page: int, limit: int) -> Page[TestimonialDTO]:
        conditions = []
        if approved is not None:
            conditions.append(Testimonial.is_approved.is_(approved))

        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            total = await session.scalar(select(func.count()).select_from(Testimonial).where(*conditions))
            result = await session.execute(
                select(Testimonial)
                .where(*conditions)
                .order_by(Testimonial.created_at.desc())
                .offset(page_offset(page, limit))
                .limit(limit)
            )
            return Page(
                items=[TestimonialDTO.from_testimonial(t) for t in result.scalars().all()],
                page=page,
                limit=limit,
                total_count=total or 0,
            )

    async def list_contacts(
        self, status: ContactStatus | None, search: str | None, page: int, limit: int
    ) -> Page[ContactMessageDTO]:
        conditions = []
        if status is not None:
            conditions.append(ContactMessage.status == status)
        if search:
            term = f"%{search.strip()}%"
            conditions.append(
                or_(
                    ContactMessage.name.ilike(term),
                    ContactMessage.email.ilike(term),
                    ContactMessage.subject.ilike(term),
                    ContactMessage.message.ilike(term),
                )
            )

        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            total = await session.scalar(select(func.count()).select_from(ContactMessage).where(*conditions))
            result = await session.execute(
                select(ContactMessage)
                .where(*conditions)
                .order_by(ContactMessage.created_at.desc())
                .offset(page_offset(page, limit))
                .limit(limit)
            )
            return Page(
                items=[ContactMessageDTO.from_contact(c) for c in result.scalars().all()],
                page=page,
                limit=limit,
                total_count=total or 0,
            )
