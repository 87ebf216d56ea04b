from fastapi import APIRouter
from app.api.endpoints import changes_router, health_router

router = APIRouter()

router.include_router(health_router, prefix="/health", tags=["health"])
router.include_router(changes_router, prefix="/changes", tags=["changes"])
