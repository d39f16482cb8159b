import abc
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventia.auth.dtos import Identity
from eventia.cart.dtos import BOOKING_STATUSES, EventPlanDTO, EventPlanStatus, PlanFilters
from eventia.cart.repository.orm_models import CartPackageLine, CartServiceLine, EventPlan
from eventia.config.database import async_session_manager
from eventia.errors import ForbiddenError, NotFoundError
from eventia.models.user import User
from eventia.pagination import Page, page_offset


class EventPlanReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_cart(self, owner_id: UUID) -> EventPlanDTO | None:
        """The owner's ``Planning`` plan, if there is one."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_plan(self, identity: Identity, plan_id: UUID) -> EventPlanDTO:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_bookings(
        self, owner_id: UUID, status: EventPlanStatus | None, page: int, limit: int
    ) -> Page[EventPlanDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_vendor_bookings(
        self, vendor_id: UUID, status: EventPlanStatus | None, page: int, limit: int
    ) -> Page[EventPlanDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_all_plans(self, filters: PlanFilters, page: int, limit: int) -> Page[EventPlanDTO]:
        raise NotImplementedError


class SqlEventPlanReadModel(EventPlanReadModel):
    """SQL implementation of the event plan read model."""

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def _page(self, session: AsyncSession, conditions: list, page: int, limit: int) -> Page[EventPlanDTO]:
        total = await session.scalar(select(func.count()).select_from(EventPlan).where(*conditions))
        result = await session.execute(
            select(EventPlan)
            .where(*conditions)
            .order_by(EventPlan.created_at.desc())
            .offset(page_offset(page, limit))
            .limit(limit)
        )
        return Page(
            items=[EventPlanDTO.from_plan(plan) for plan in result.scalars().all()],
            page=page,
            limit=limit,
            total_count=total or 0,
        )

    async def get_cart(self, owner_id: UUID) -> EventPlanDTO | None:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(
                select(EventPlan).where(
                    EventPlan.owner_id == owner_id,
                    EventPlan.status == EventPlanStatus.PLANNING,
                )
            )
            plan = result.scalar_one_or_none()
            return EventPlanDTO.from_plan(plan) if plan else None

    async def get_plan(self, identity: Identity, plan_id: UUID) -> EventPlanDTO:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(EventPlan).where(EventPlan.uuid == plan_id))
            plan = result.scalar_one_or_none()
            if plan is None:
                raise NotFoundError("Booking not found")
            if plan.owner_id != identity.id and not identity.is_admin:
                raise ForbiddenError("Not authorized to view this booking")
            return EventPlanDTO.from_plan(plan)

    async def list_bookings(
        self, owner_id: UUID, status: EventPlanStatus | None, page: int, limit: int
    ) -> Page[EventPlanDTO]:
        conditions = [EventPlan.owner_id == owner_id]
        if status is not None and status in BOOKING_STATUSES:
            conditions.append(EventPlan.status == status)
        else:
            # A cart is not a booking, even when asked for explicitly
            conditions.append(EventPlan.status.in_(BOOKING_STATUSES))

        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            return await self._page(session, conditions, page, limit)

    async def list_vendor_bookings(
        self, vendor_id: UUID, status: EventPlanStatus | None, page: int, limit: int
    ) -> Page[EventPlanDTO]:
        conditions = [
            or_(
                EventPlan.uuid.in_(select(CartServiceLine.plan_id).where(CartServiceLine.vendor_id == vendor_id)),
                EventPlan.uuid.in_(select(CartPackageLine.plan_id).where(CartPackageLine.vendor_id == vendor_id)),
            )
        ]
        if status is not None:
            conditions.append(EventPlan.status == status)
        else:
            conditions.append(EventPlan.status.in_(BOOKING_STATUSES))

        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            return await self._page(session, conditions, page, limit)

    async def list_all_plans(self, filters: PlanFilters, page: int, limit: int) -> Page[EventPlanDTO]:
        conditions = []
        if filters.status is not None:
            conditions.append(EventPlan.status == filters.status)
        if filters.search:
            term = f"%{filters.search.strip()}%"
            conditions.append(
                or_(
                    EventPlan.event_type.ilike(term),
                    EventPlan.preferred_city.ilike(term),
                    EventPlan.preferred_district.ilike(term),
                    EventPlan.notes.ilike(term),
                    EventPlan.owner_id.in_(
                        select(User.uuid).where(or_(User.name.ilike(term), User.email.ilike(term)))
                    ),
                )
            )

        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            return await self._page(session, conditions, page, limit)
