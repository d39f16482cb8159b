from fastapi import APIRouter

from .features.accounts.router import router as accounts_router
from .features.dashboard.router import router as dashboard_router
from .features.event_plans.router import router as event_plans_router
from .features.listings.router import router as listings_router

router = APIRouter()

router.include_router(dashboard_router)
router.include_router(accounts_router)
router.include_router(listings_router)
router.include_router(event_plans_router)
