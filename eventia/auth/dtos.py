from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from eventia.models.user import User


class Role(str, Enum):
    USER = "User"
    VENDOR = "Vendor"
    ADMIN = "Admin"


@dataclass(frozen=True)
class Identity:
    """Who is calling, as asserted by the bearer token.

    The role is a claim: it is not re-read from the users table on each
    request, so a role or approval change only shows up after a new token is
    issued.
    """

    id: UUID
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


@dataclass(frozen=True)
class UserDTO:
    """DTO for user data. Never carries the password hash."""

    id: UUID
    name: str
    email: str
    role: Role
    is_approved: bool
    business_registration: str | None = None
    phone: str | None = None
    address: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_user(cls, user: "User") -> "UserDTO":
        return cls(
            id=user.uuid,
            name=user.name,
            email=user.email,
            role=Role(user.role),
            is_approved=user.is_approved,
            business_registration=user.business_registration,
            phone=user.phone,
            address=user.address,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True)
class AuthResultDTO:
    """DTO returned by register and login."""

    token: str
    user: UserDTO


@dataclass(frozen=True)
class ProfileUpdateDTO:
    """Profile fields a user may change. ``None`` means "leave as is"."""

    name: str | None = None
    phone: str | None = None
    address: str | None = None
    business_registration: str | None = None
