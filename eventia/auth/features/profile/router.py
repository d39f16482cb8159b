from fastapi import APIRouter, Depends
from pydantic import BaseModel

from eventia.auth.dependencies import require_authenticated
from eventia.auth.dtos import Identity, ProfileUpdateDTO
from eventia.auth.features.register.router import get_identity_write_model
from eventia.auth.repository.read_models import IdentityReadModel, SqlIdentityReadModel
from eventia.auth.repository.write_models import IdentityWriteModel
from eventia.auth.schemas import UserResponse
from eventia.errors import NotFoundError

router = APIRouter()

PROFILE_URL = "/api/v1/users/profile"


class ProfileResponse(BaseModel):
    user: UserResponse
    message: str | None = None


class ProfileUpdateRequest(BaseModel):
    name: str | None = None
    phone: str | None = None
    address: str | None = None
    business_registration: str | None = None


def get_identity_read_model() -> IdentityReadModel:
    """Dependency to get identity read model instance."""
    return SqlIdentityReadModel()


@router.get(PROFILE_URL, response_model=ProfileResponse)
async def get_profile(
    identity: Identity = Depends(require_authenticated),
    read_model: IdentityReadModel = Depends(get_identity_read_model),
) -> ProfileResponse:
    user = await read_model.get_by_id(identity.id)
    if user is None:
        raise NotFoundError("User not found")
    return ProfileResponse(user=UserResponse.from_dto(user))


@router.put(PROFILE_URL, response_model=ProfileResponse)
async def update_profile(
    request: ProfileUpdateRequest,
    identity: Identity = Depends(require_authenticated),
    write_model: IdentityWriteModel = Depends(get_identity_write_model),
) -> ProfileResponse:
    user = await write_model.update_profile(
        identity.id,
        ProfileUpdateDTO(
            name=request.name,
            phone=request.phone,
            address=request.address,
            business_registration=request.business_registration,
        ),
    )
    return ProfileResponse(user=UserResponse.from_dto(user), message="Profile updated successfully")
