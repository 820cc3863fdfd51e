"""Router principal v1."""
from fastapi import APIRouter

from condominio_analytics.interfaces.api.v1.endpoints import (
    cache,
    dashboard,
    health,
    propiedades,
    reportes,
)

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(dashboard.router)
api_router.include_router(reportes.router)
api_router.include_router(propiedades.router)
api_router.include_router(cache.router)
