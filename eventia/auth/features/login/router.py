from fastapi import APIRouter, Depends
from pydantic import BaseModel, EmailStr

from eventia.auth.features.register.router import get_identity_write_model
from eventia.auth.repository.write_models import IdentityWriteModel
from eventia.auth.schemas import AuthResponse, UserResponse

router = APIRouter()

LOGIN_URL = "/api/v1/auth/login"


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


@router.post(LOGIN_URL, response_model=AuthResponse)
async def login(
    request: LoginRequest,
    write_model: IdentityWriteModel = Depends(get_identity_write_model),
) -> AuthResponse:
    result = await write_model.login(email=request.email, password=request.password)
    return AuthResponse(
        message="Login successful",
        token=result.token,
        user=UserResponse.from_dto(result.user),
    )
