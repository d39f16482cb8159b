from dataclasses import dataclass, field
from enum import Enum

from eventia.auth.dtos import UserDTO


class VendorApprovalFilter(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"


@dataclass(frozen=True)
class DashboardDTO:
    total_users: int
    total_vendors: int
    pending_vendors: int
    approved_vendors: int
    total_services: int
    total_packages: int
    total_event_plans: int
    new_contacts: int
    pending_testimonials: int
    recent_vendors: list[UserDTO] = field(default_factory=list)
