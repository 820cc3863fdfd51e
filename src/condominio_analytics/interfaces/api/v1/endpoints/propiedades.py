"""Endpoints por propiedad."""
from datetime import date

from fastapi import APIRouter, Depends, Query

from condominio_analytics.application.ports.libro_pagos_repository import LibroPagosRepository
from condominio_analytics.application.use_cases.obtener_estado_mora import ObtenerEstadoMora
from condominio_analytics.infrastructure.cache.redis_cache import redis_cache
from condominio_analytics.interfaces.api.dependencies import (
    obtener_fecha_corte,
    obtener_libro_pagos,
)
from condominio_analytics.interfaces.api.v1.schemas import EstadoMoraResponse, ErrorResponse

router = APIRouter(prefix="/properties", tags=["Propiedades"])


@router.get(
    "/{propiedad_id}/arrears",
    response_model=EstadoMoraResponse,
    responses={404: {"model": ErrorResponse, "description": "Propiedad inexistente"}},
)
async def obtener_estado_mora(
    propiedad_id: int,
    lookback: int | None = Query(None, ge=1, le=60, description="Meses a revisar hacia atrás"),
    fecha_corte: date = Depends(obtener_fecha_corte),
    libro: LibroPagosRepository = Depends(obtener_libro_pagos),
):
    """
    Estado de mora de una propiedad.

    El escaneo retrocede desde el mes actual y se detiene en el primer mes
    pagado; la ventana es acotada, por lo que una propiedad sin historial
    reporta exactamente `lookback` meses.
    """

    cache_key = f"mora:{propiedad_id}:{fecha_corte}:{lookback or 'default'}"
    cached = await redis_cache.get(cache_key)
    if cached:
        return EstadoMoraResponse(**cached)

    resultado = await ObtenerEstadoMora(libro).execute(
        propiedad_id,
        fecha_corte,
        meses_retroactivos=lookback,
    )

    await redis_cache.set(cache_key, resultado, ttl=300)

    return EstadoMoraResponse(**resultado)
