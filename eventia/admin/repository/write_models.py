"""Admin write models - vendor approval and account removal."""

import logging
from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import exists, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventia.auth.dtos import Role, UserDTO
from eventia.cart.repository.orm_models import CartPackageLine, CartServiceLine, EventPlan
from eventia.catalog.repository.orm_models import Package, Service
from eventia.config.database import async_session_manager
from eventia.errors import ConflictError, NotFoundError
from eventia.models.base import utcnow
from eventia.models.user import User

logger = logging.getLogger(__name__)


class AdminWriteModel(ABC):
    @abstractmethod
    async def approve_vendor(self, vendor_id: UUID, approve: bool, reason: str | None = None) -> UserDTO:
        """Approve or reject a vendor.

        The vendor's existing tokens keep their role; the change shows up on
        their next login.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete_vendor(self, vendor_id: UUID) -> None:
        raise NotImplementedError

    @abstractmethod
    async def delete_user(self, user_id: UUID) -> None:
        raise NotImplementedError


class SqlAdminWriteModel(AdminWriteModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def _get_with_role(self, session: AsyncSession, user_id: UUID, role: Role) -> User:
        result = await session.execute(select(User).where(User.uuid == user_id, User.role == role))
        user = result.scalar_one_or_none()
        if user is None:
            raise NotFoundError(f"{role.value} not found")
        return user

    async def approve_vendor(self, vendor_id: UUID, approve: bool, reason: str | None = None) -> UserDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            vendor = await self._get_with_role(session, vendor_id, Role.VENDOR)
            vendor.is_approved = approve
            if reason:
                vendor.approval_reason = reason
            if approve:
                vendor.approved_at = utcnow()
            await session.flush()
            logger.info("Vendor %s %s", vendor_id, "approved" if approve else "rejected")
            return UserDTO.from_user(vendor)

    async def delete_vendor(self, vendor_id: UUID) -> None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            vendor = await self._get_with_role(session, vendor_id, Role.VENDOR)

            has_listings = await session.scalar(
                select(
                    or_(
                        exists().where(Service.vendor_id == vendor_id),
                        exists().where(Package.vendor_id == vendor_id),
                    )
                )
            )
            has_bookings = await session.scalar(
                select(
                    or_(
                        exists().where(CartServiceLine.vendor_id == vendor_id),
                        exists().where(CartPackageLine.vendor_id == vendor_id),
                    )
                )
            )
            if has_listings or has_bookings:
                raise ConflictError(
                    "Cannot delete vendor with listings or bookings. "
                    "Deactivate listings and resolve bookings first."
                )

            await session.delete(vendor)
            logger.info("Vendor %s deleted", vendor_id)

    async def delete_user(self, user_id: UUID) -> None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            user = await self._get_with_role(session, user_id, Role.USER)

            has_plans = await session.scalar(select(exists().where(EventPlan.owner_id == user_id)))
            if has_plans:
                raise ConflictError("Cannot delete user with existing event plans or bookings")

            await session.delete(user)
            logger.info("User %s deleted", user_id)
