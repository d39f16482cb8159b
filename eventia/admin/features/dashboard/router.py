from fastapi import APIRouter, Depends

from eventia.admin.repository.read_models import AdminReadModel, SqlAdminReadModel
from eventia.admin.schemas import DashboardResponse
from eventia.auth.dependencies import require_admin
from eventia.auth.dtos import Identity

router = APIRouter()

DASHBOARD_URL = "/api/v1/admin/dashboard"


def get_admin_read_model() -> AdminReadModel:
    """Dependency to get admin read model instance."""
    return SqlAdminReadModel()


@router.get(DASHBOARD_URL, response_model=DashboardResponse)
async def get_dashboard(
    _: Identity = Depends(require_admin),
    read_model: AdminReadModel = Depends(get_admin_read_model),
) -> DashboardResponse:
    return DashboardResponse.from_dto(await read_model.get_dashboard())
