"""Identity write models - register, login and profile updates. Return DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eventia.auth.dtos import AuthResultDTO, ProfileUpdateDTO, Role, UserDTO
from eventia.auth.security import create_access_token, hash_password, verify_password
from eventia.config.database import async_session_manager
from eventia.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from eventia.models.user import User

logger = logging.getLogger(__name__)


class IdentityWriteModel(ABC):
    @abstractmethod
    async def register(
        self,
        name: str,
        email: str,
        password: str,
        role: Role = Role.USER,
        business_registration: str | None = None,
    ) -> AuthResultDTO:
        """Create a user and issue a token for it.

        Vendors start unapproved and must supply a business registration.
        The Admin role cannot be self-assigned.
        """
        raise NotImplementedError

    @abstractmethod
    async def login(self, email: str, password: str) -> AuthResultDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_profile(self, user_id: UUID, update: ProfileUpdateDTO) -> UserDTO:
        raise NotImplementedError


class SqlIdentityWriteModel(IdentityWriteModel):
    """SQL implementation of identity write operations."""

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        role: Role = Role.USER,
        business_registration: str | None = None,
    ) -> AuthResultDTO:
        if role == Role.ADMIN:
            raise ValidationError("role", "Admin accounts cannot be self-registered")
        if role == Role.VENDOR and not (business_registration or "").strip():
            raise ValidationError("business_registration", "business_registration is required for vendors")

        email = email.lower()
        try:
            async with async_session_manager(session_overwrite=self.session_overwrite) as session:
                if await self._email_taken(session, email):
                    raise ConflictError("User already exists")

                user = User(
                    name=name.strip(),
                    email=email,
                    hashed_password=hash_password(password),
                    role=role,
                    business_registration=business_registration if role == Role.VENDOR else None,
                    # Vendors need approval
                    is_approved=role != Role.VENDOR,
                )
                session.add(user)
                await session.flush()
                logger.info("Registered %s %s", role.value, user.uuid)
                result = AuthResultDTO(
                    token=create_access_token(user.uuid, role),
                    user=UserDTO.from_user(user),
                )
        except IntegrityError as e:
            # A concurrent registration took the email between the check and the insert
            logger.warning("Registration race on %s: %s", email, e)
            raise ConflictError("User already exists") from e
        return result

    async def _email_taken(self, session: AsyncSession, email: str) -> bool:
        existing = await session.execute(select(User.uuid).where(User.email == email))
        return existing.first() is not None

    async def login(self, email: str, password: str) -> AuthResultDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(User).where(User.email == email.lower()))
            user = result.scalar_one_or_none()

            if user is None or not user.is_active or not verify_password(password, user.hashed_password):
                raise ValidationError("credentials", "Invalid credentials")

            if user.role == Role.VENDOR and not user.is_approved:
                raise ForbiddenError("Vendor approval pending")

            return AuthResultDTO(
                token=create_access_token(user.uuid, Role(user.role)),
                user=UserDTO.from_user(user),
            )

    async def update_profile(self, user_id: UUID, update: ProfileUpdateDTO) -> UserDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(User).where(User.uuid == user_id))
            user = result.scalar_one_or_none()
            if user is None:
                raise NotFoundError("User not found")

            changed = False
            if update.name is not None and update.name.strip():
                user.name = update.name.strip()
                changed = True
            if update.phone is not None:
                user.phone = update.phone.strip() or None
                changed = True
            if update.address is not None:
                user.address = update.address.strip() or None
                changed = True
            if update.business_registration and user.role == Role.VENDOR:
                user.business_registration = update.business_registration.strip()
                changed = True

            if not changed:
                raise ValidationError("profile", "No valid fields provided for update")

            await session.flush()
            return UserDTO.from_user(user)
