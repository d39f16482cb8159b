from fastapi import APIRouter

from .features.browse.router import router as browse_router
from .features.vendor_listings.router import router as vendor_listings_router

router = APIRouter()

router.include_router(browse_router)
router.include_router(vendor_listings_router)
