"""Cart and booking write models.

Every mutation is a read-modify-write of one ``EventPlan`` row and its line
rows. The plan row is rewritten on each mutation so its ``version`` column is
checked; a concurrent writer makes the flush fail and the whole cycle is
replayed in a fresh transaction.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from decimal import Decimal
from typing import TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from eventia.auth.dtos import Identity
from eventia.cart.dtos import (
    CheckoutDTO,
    EventPlanDTO,
    EventPlanStatus,
    LineItemKind,
    LineItemRequest,
)
from eventia.cart.repository.orm_models import CartPackageLine, CartServiceLine, EventPlan
from eventia.catalog.repository.read_models import CatalogReadModel, SqlCatalogReadModel
from eventia.config.database import async_session_manager
from eventia.config.settings import settings
from eventia.errors import (
    ConflictError,
    EmptyCartError,
    ForbiddenError,
    NotFoundError,
    UnavailableError,
    ValidationError,
)
from eventia.models.base import utcnow

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EventPlanWriteModel(ABC):
    @abstractmethod
    async def get_or_create_cart(self, owner_id: UUID) -> EventPlanDTO:
        raise NotImplementedError

    @abstractmethod
    async def add_line(self, owner_id: UUID, item: LineItemRequest) -> EventPlanDTO:
        """Put a service or package into the owner's cart.

        Re-adding the same item from the same vendor adds to the existing
        line's quantity. The price is stored as given.
        """
        raise NotImplementedError

    @abstractmethod
    async def remove_line(
        self, owner_id: UUID, kind: LineItemKind, item_id: UUID, vendor_id: UUID
    ) -> EventPlanDTO:
        raise NotImplementedError

    @abstractmethod
    async def checkout(self, owner_id: UUID, details: CheckoutDTO) -> EventPlanDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_status(
        self, identity: Identity, plan_id: UUID, status: EventPlanStatus
    ) -> EventPlanDTO:
        raise NotImplementedError


class SqlEventPlanWriteModel(EventPlanWriteModel):
    """SQL implementation of cart and booking write operations."""

    def __init__(
        self,
        catalog: CatalogReadModel | None = None,
        session_overwrite: AsyncSession | None = None,
        retries: int | None = None,
    ) -> None:
        self.catalog = catalog or SqlCatalogReadModel(session_overwrite=session_overwrite)
        self.session_overwrite = session_overwrite
        self.retries = max(1, retries if retries is not None else settings.cart_write_retries)

    async def _with_retry(self, owner_id: UUID, operation: Callable[[], Awaitable[T]]) -> T:
        for attempt in range(1, self.retries + 1):
            try:
                return await operation()
            except (StaleDataError, IntegrityError) as e:
                # An injected session cannot be replayed, its transaction belongs to the caller
                if self.session_overwrite is not None or attempt == self.retries:
                    logger.warning("Giving up on cart write for %s after %d attempt(s): %s", owner_id, attempt, e)
                    raise ConflictError("The event plan was modified concurrently, please retry") from e
                logger.warning("Concurrent cart write for %s, retrying (%d/%d)", owner_id, attempt, self.retries)
        raise AssertionError("unreachable")

    async def _find_cart(self, session: AsyncSession, owner_id: UUID) -> EventPlan | None:
        result = await session.execute(
            select(EventPlan).where(
                EventPlan.owner_id == owner_id,
                EventPlan.status == EventPlanStatus.PLANNING,
            )
        )
        return result.scalar_one_or_none()

    async def _find_or_create_cart(self, session: AsyncSession, owner_id: UUID) -> EventPlan:
        plan = await self._find_cart(session, owner_id)
        if plan is None:
            plan = EventPlan(
                owner_id=owner_id,
                status=EventPlanStatus.PLANNING,
                total_cost=Decimal("0.00"),
                service_lines=[],
                package_lines=[],
            )
            session.add(plan)
            await session.flush()
            logger.info("Created cart %s for %s", plan.uuid, owner_id)
        return plan

    @staticmethod
    def _touch(plan: EventPlan) -> None:
        """Recompute the total and force an UPDATE of the plan row so the version check runs."""
        plan.recompute_total()
        plan.updated_at = utcnow()

    async def _check_listing(self, item: LineItemRequest) -> None:
        if item.kind == LineItemKind.SERVICE:
            ref = await self.catalog.get_service_ref(item.item_id)
            label = "Service"
        else:
            ref = await self.catalog.get_package_ref(item.item_id)
            label = "Package"

        if ref is None or not ref.is_active:
            raise UnavailableError(f"{label} unavailable")
        if ref.vendor_id != item.vendor_id:
            raise ValidationError("vendor_id", f"{label}/vendor mismatch")

    async def get_or_create_cart(self, owner_id: UUID) -> EventPlanDTO:
        async def operation() -> EventPlanDTO:
            async with async_session_manager(session_overwrite=self.session_overwrite) as session:
                plan = await self._find_or_create_cart(session, owner_id)
                return EventPlanDTO.from_plan(plan)

        return await self._with_retry(owner_id, operation)

    async def add_line(self, owner_id: UUID, item: LineItemRequest) -> EventPlanDTO:
        await self._check_listing(item)

        async def operation() -> EventPlanDTO:
            async with async_session_manager(session_overwrite=self.session_overwrite) as session:
                plan = await self._find_or_create_cart(session, owner_id)
                if item.kind == LineItemKind.SERVICE:
                    lines = plan.service_lines
                    existing = next(
                        (line for line in lines if line.service_id == item.item_id and line.vendor_id == item.vendor_id),
                        None,
                    )
                else:
                    lines = plan.package_lines
                    existing = next(
                        (line for line in lines if line.package_id == item.item_id and line.vendor_id == item.vendor_id),
                        None,
                    )

                if existing is not None:
                    existing.quantity += item.quantity
                elif item.kind == LineItemKind.SERVICE:
                    lines.append(
                        CartServiceLine(
                            service_id=item.item_id,
                            vendor_id=item.vendor_id,
                            price=item.price,
                            quantity=item.quantity,
                            notes=item.notes,
                        )
                    )
                else:
                    lines.append(
                        CartPackageLine(
                            package_id=item.item_id,
                            vendor_id=item.vendor_id,
                            price=item.price,
                            quantity=item.quantity,
                            notes=item.notes,
                        )
                    )

                self._touch(plan)
                await session.flush()
                logger.info(
                    "Added %s %s x%d to cart %s (total %s)",
                    item.kind.value,
                    item.item_id,
                    item.quantity,
                    plan.uuid,
                    plan.total_cost,
                )
                return EventPlanDTO.from_plan(plan)

        return await self._with_retry(owner_id, operation)

    async def remove_line(
        self, owner_id: UUID, kind: LineItemKind, item_id: UUID, vendor_id: UUID
    ) -> EventPlanDTO:
        async def operation() -> EventPlanDTO:
            async with async_session_manager(session_overwrite=self.session_overwrite) as session:
                plan = await self._find_cart(session, owner_id)
                if plan is None:
                    raise NotFoundError("Cart not found")

                if kind == LineItemKind.SERVICE:
                    lines = plan.service_lines
                    matches = [line for line in lines if line.service_id == item_id and line.vendor_id == vendor_id]
                else:
                    lines = plan.package_lines
                    matches = [line for line in lines if line.package_id == item_id and line.vendor_id == vendor_id]
                for line in matches:
                    lines.remove(line)

                self._touch(plan)
                await session.flush()
                if matches:
                    logger.info("Removed %s %s from cart %s", kind.value, item_id, plan.uuid)
                return EventPlanDTO.from_plan(plan)

        return await self._with_retry(owner_id, operation)

    async def checkout(self, owner_id: UUID, details: CheckoutDTO) -> EventPlanDTO:
        async def operation() -> EventPlanDTO:
            async with async_session_manager(session_overwrite=self.session_overwrite) as session:
                plan = await self._find_cart(session, owner_id)
                if plan is None:
                    raise NotFoundError("Cart not found")
                if not plan.service_lines and not plan.package_lines:
                    raise EmptyCartError()

                plan.event_type = details.event_type
                plan.budget = details.budget
                plan.guest_count = details.guest_count
                plan.preferred_city = details.preferred_location.city
                plan.preferred_district = details.preferred_location.district
                plan.event_date = details.event_date
                plan.notes = details.notes
                plan.status = EventPlanStatus.CONFIRMED
                self._touch(plan)
                await session.flush()
                logger.info("Checked out cart %s for %s (total %s)", plan.uuid, owner_id, plan.total_cost)
                return EventPlanDTO.from_plan(plan)

        return await self._with_retry(owner_id, operation)

    async def update_status(
        self, identity: Identity, plan_id: UUID, status: EventPlanStatus
    ) -> EventPlanDTO:
        # No transition table: owners and admins may set any status
        async def operation() -> EventPlanDTO:
            async with async_session_manager(session_overwrite=self.session_overwrite) as session:
                result = await session.execute(select(EventPlan).where(EventPlan.uuid == plan_id))
                plan = result.scalar_one_or_none()
                if plan is None:
                    raise NotFoundError("Booking not found")
                if plan.owner_id != identity.id and not identity.is_admin:
                    raise ForbiddenError("Not authorized to update this booking")

                previous = plan.status
                plan.status = status
                plan.updated_at = utcnow()
                await session.flush()
                logger.info(
                    "%s %s moved plan %s from %s to %s",
                    identity.role.value,
                    identity.id,
                    plan_id,
                    EventPlanStatus(previous).value,
                    status.value,
                )
                return EventPlanDTO.from_plan(plan)

        return await self._with_retry(identity.id, operation)
