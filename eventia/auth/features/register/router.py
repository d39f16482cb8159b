from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from eventia.auth.dtos import Role
from eventia.auth.repository.write_models import IdentityWriteModel, SqlIdentityWriteModel
from eventia.auth.schemas import AuthResponse, UserResponse

router = APIRouter()

REGISTER_URL = "/api/v1/auth/register"


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=6)
    role: Role = Role.USER
    business_registration: str | None = None


def get_identity_write_model() -> IdentityWriteModel:
    """Dependency to get identity write model instance."""
    return SqlIdentityWriteModel()


@router.post(REGISTER_URL, response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    write_model: IdentityWriteModel = Depends(get_identity_write_model),
) -> AuthResponse:
    """
    Register a User or Vendor account and return a bearer token.
    Vendors can only log in again once an admin approves them.
    """
    result = await write_model.register(
        name=request.name,
        email=request.email,
        password=request.password,
        role=request.role,
        business_registration=request.business_registration,
    )
    return AuthResponse(
        message="Registration successful",
        token=result.token,
        user=UserResponse.from_dto(result.user),
    )
