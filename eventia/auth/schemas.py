from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from eventia.auth.dtos import Role, UserDTO


class UserResponse(BaseModel):
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
    def from_dto(cls, dto: UserDTO) -> "UserResponse":
        return cls(
            id=dto.id,
            name=dto.name,
            email=dto.email,
            role=dto.role,
            is_approved=dto.is_approved,
            business_registration=dto.business_registration,
            phone=dto.phone,
            address=dto.address,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserResponse
