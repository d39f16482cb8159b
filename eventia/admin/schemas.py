from pydantic import BaseModel

from eventia.admin.dtos import DashboardDTO
from eventia.auth.schemas import UserResponse
from eventia.cart.schemas import EventPlanResponse
from eventia.pagination import PaginationResponse


class VendorCounts(BaseModel):
    total: int
    pending: int
    approved: int


class UserCounts(BaseModel):
    total: int
    vendors: VendorCounts


class ListingCounts(BaseModel):
    services: int
    packages: int
    event_plans: int


class AdminTasks(BaseModel):
    new_contacts: int
    pending_testimonials: int


class DashboardResponse(BaseModel):
    users: UserCounts
    listings: ListingCounts
    admin_tasks: AdminTasks
    recent_vendors: list[UserResponse]

    @classmethod
    def from_dto(cls, dto: DashboardDTO) -> "DashboardResponse":
        return cls(
            users=UserCounts(
                total=dto.total_users,
                vendors=VendorCounts(
                    total=dto.total_vendors,
                    pending=dto.pending_vendors,
                    approved=dto.approved_vendors,
                ),
            ),
            listings=ListingCounts(
                services=dto.total_services,
                packages=dto.total_packages,
                event_plans=dto.total_event_plans,
            ),
            admin_tasks=AdminTasks(
                new_contacts=dto.new_contacts,
                pending_testimonials=dto.pending_testimonials,
            ),
            recent_vendors=[UserResponse.from_dto(v) for v in dto.recent_vendors],
        )


class VendorListResponse(BaseModel):
    vendors: list[UserResponse]
    pagination: PaginationResponse


class UserListResponse(BaseModel):
    users: list[UserResponse]
    pagination: PaginationResponse


class ApproveVendorRequest(BaseModel):
    approve: bool
    reason: str | None = None


class VendorResponse(BaseModel):
    message: str
    vendor: UserResponse


class ToggleRequest(BaseModel):
    active: bool


class EventPlanListResponse(BaseModel):
    event_plans: list[EventPlanResponse]
    pagination: PaginationResponse
