import abc

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventia.admin.dtos import DashboardDTO, VendorApprovalFilter
from eventia.auth.dtos import Role, UserDTO
from eventia.cart.repository.orm_models import EventPlan
from eventia.catalog.repository.orm_models import Package, Service
from eventia.config.database import async_session_manager
from eventia.models.user import User
from eventia.moderation.dtos import ContactStatus
from eventia.moderation.repository.orm_models import ContactMessage, Testimonial
from eventia.pagination import Page, page_offset

RECENT_VENDORS = 5


class AdminReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_dashboard(self) -> DashboardDTO:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_vendors(
        self, approval: VendorApprovalFilter | None, search: str | None, page: int, limit: int
    ) -> Page[UserDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_users(self, search: str | None, page: int, limit: int) -> Page[UserDTO]:
        raise NotImplementedError


class SqlAdminReadModel(AdminReadModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def get_dashboard(self) -> DashboardDTO:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:

            async def count(model, *conditions) -> int:
                return await session.scalar(select(func.count()).select_from(model).where(*conditions)) or 0

            recent = await session.execute(
                select(User).where(User.role == Role.VENDOR).order_by(User.created_at.desc()).limit(RECENT_VENDORS)
            )
            return DashboardDTO(
                total_users=await count(User, User.role == Role.USER),
                total_vendors=await count(User, User.role == Role.VENDOR),
                pending_vendors=await count(User, User.role == Role.VENDOR, User.is_approved.is_(False)),
                approved_vendors=await count(User, User.role == Role.VENDOR, User.is_approved.is_(True)),
                total_services=await count(Service),
                total_packages=await count(Package),
                total_event_plans=await count(EventPlan),
                new_contacts=await count(ContactMessage, ContactMessage.status == ContactStatus.NEW),
                pending_testimonials=await count(Testimonial, Testimonial.is_approved.is_(False)),
                recent_vendors=[UserDTO.from_user(u) for u in recent.scalars().all()],
            )

    async def _list_role(self, conditions: list, search: str | None, page: int, limit: int) -> Page[UserDTO]:
        if search:
            term = f"%{search.strip()}%"
            conditions.append(or_(User.name.ilike(term), User.email.ilike(term)))

        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            total = await session.scalar(select(func.count()).select_from(User).where(*conditions))
            result = await session.execute(
                select(User)
                .where(*conditions)
                .order_by(User.created_at.desc())
                .offset(page_offset(page, limit))
                .limit(limit)
            )
            return Page(
                items=[UserDTO.from_user(u) for u in result.scalars().all()],
                page=page,
                limit=limit,
                total_count=total or 0,
            )

    async def list_vendors(
        self, approval: VendorApprovalFilter | None, search: str | None, page: int, limit: int
    ) -> Page[UserDTO]:
        conditions = [User.role == Role.VENDOR]
        if approval is not None:
            conditions.append(User.is_approved.is_(approval == VendorApprovalFilter.APPROVED))
        return await self._list_role(conditions, search, page, limit)

    async def list_users(self, search: str | None, page: int, limit: int) -> Page[UserDTO]:
        return await self._list_role([User.role == Role.USER], search, page, limit)
