"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.mutations import router as mutations_router
from api.v1.routes.profiles import router as profiles_router
from api.v1.routes.selection import router as selection_router

router = APIRouter()
router.include_router(profiles_router)
router.include_router(mutations_router)
router.include_router(selection_router)
