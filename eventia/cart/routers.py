from fastapi import APIRouter

from .features.bookings.router import router as bookings_router
from .features.checkout.router import router as checkout_router
from .features.manage_cart.router import router as manage_cart_router
from .features.recommendations.router import router as recommendations_router
from .features.vendor_bookings.router import router as vendor_bookings_router

router = APIRouter()

router.include_router(checkout_router)
router.include_router(manage_cart_router)
router.include_router(bookings_router)
router.include_router(recommendations_router)
router.include_router(vendor_bookings_router)
