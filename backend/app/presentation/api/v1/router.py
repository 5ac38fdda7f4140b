"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints.health import router as health_router
from app.presentation.api.v1.endpoints.village_info import router as village_info_router
from app.presentation.api.v1.endpoints.village_master import router as village_master_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(village_info_router)
router.include_router(village_master_router)
