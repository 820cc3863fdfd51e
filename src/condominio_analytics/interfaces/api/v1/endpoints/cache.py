"""Endpoints de administración del caché."""
from fastapi import APIRouter, Query

from condominio_analytics.domain.value_objects.periodo_referencia import PeriodoReferencia
from condominio_analytics.infrastructure.cache.redis_cache import redis_cache
from condominio_analytics.interfaces.api.v1.schemas import (
    CacheClearResponse,
    ErrorResponse,
    EventoLibroRequest,
)

router = APIRouter(prefix="/cache", tags=["Caché"])


@router.post(
    "/ledger-events",
    response_model=CacheClearResponse,
    responses={400: {"model": ErrorResponse, "description": "Período inválido"}},
)
async def registrar_evento_libro(evento: EventoLibroRequest):
    """
    Invalida el caché afectado por un cambio en el libro de pagos.

    Lo llama el servicio que registra, edita o elimina pagos.
    """

    periodo = PeriodoReferencia(año=evento.referenceYear, mes=evento.referenceMonth)

    deleted = await redis_cache.invalidar_por_pago(evento.propertyId, periodo)

    return CacheClearResponse(
        message=f"Caché invalidado para propiedad {evento.propertyId} en {periodo}",
        keys_deleted=deleted,
    )


@router.delete("/clear", response_model=CacheClearResponse)
async def limpiar_cache(
    pattern: str = Query(
        "*",
        description="Patrón de keys a eliminar"
    )
):
    """Limpia el caché por patrón."""

    deleted = await redis_cache.clear_pattern(pattern)

    return CacheClearResponse(
        message="Cache limpiado exitosamente",
        keys_deleted=deleted,
    )
