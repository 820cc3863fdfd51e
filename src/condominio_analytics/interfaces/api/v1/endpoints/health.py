"""Endpoint de health check."""
from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from condominio_analytics.infrastructure.cache.redis_cache import redis_cache
from condominio_analytics.infrastructure.config.settings import get_settings
from condominio_analytics.infrastructure.database.connection import db_manager
from condominio_analytics.interfaces.api.v1.schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Estado del servicio y de sus dependencias.

    `degraded` si la base o Redis no responden; sin Redis el servicio
    sigue atendiendo, solo que sin caché.
    """
    settings = get_settings()

    try:
        await db_manager.verificar()
        db_status = "connected"
    except (SQLAlchemyError, OSError, RuntimeError):
        db_status = "disconnected"

    redis_status = "connected" if await redis_cache.ping() else "disconnected"

    status = "healthy" if db_status == redis_status == "connected" else "degraded"

    return HealthResponse(
        status=status,
        service=settings.app_name,
        version=settings.app_version,
        database=db_status,
        redis=redis_status,
    )
