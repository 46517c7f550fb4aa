from fastapi import APIRouter, Depends

from app.cargohub.core.config import settings
from app.cargohub.core.deps import require_api_key
from app.cargohub.routers.catalog import router as catalog_router
from app.cargohub.routers.docks import router as docks_router
from app.cargohub.routers.health import router as health_router
from app.cargohub.routers.metrics import router as metrics_router
from app.cargohub.routers.transfers import router as transfers_router

api_router = APIRouter()
api_router.include_router(health_router, tags=["ops"])

_guarded = [Depends(require_api_key)]
api_router.include_router(transfers_router, prefix="/api", tags=["transfers"], dependencies=_guarded)
api_router.include_router(docks_router, prefix="/api", tags=["docks"], dependencies=_guarded)
api_router.include_router(catalog_router, prefix="/api", tags=["catalog"], dependencies=_guarded)
if settings.METRICS_ENABLED:
    api_router.include_router(metrics_router, tags=["ops"])
