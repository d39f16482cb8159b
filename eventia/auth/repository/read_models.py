import abc
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventia.auth.dtos import UserDTO
from eventia.config.database import async_session_manager
from eventia.models.user import User


class IdentityReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_by_id(self, user_id: UUID) -> UserDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_by_email(self, email: str) -> UserDTO | None:
        raise NotImplementedError


class SqlIdentityReadModel(IdentityReadModel):
    """SQL implementation of the identity read model."""

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def get_by_id(self, user_id: UUID) -> UserDTO | None:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(User).where(User.uuid == user_id))
            user = result.scalar_one_or_none()
            return UserDTO.from_user(user) if user else None

    async def get_by_email(self, email: str) -> UserDTO | None:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(User).where(User.email == email.lower()))
            user = result.scalar_one_or_none()
            return UserDTO.from_user(user) if user else None
