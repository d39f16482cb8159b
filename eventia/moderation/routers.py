from fastapi import APIRouter

from .features.contact.router import router as contact_router
from .features.testimonials.router import router as testimonials_router

router = APIRouter()

router.include_router(testimonials_router)
router.include_router(contact_router)
