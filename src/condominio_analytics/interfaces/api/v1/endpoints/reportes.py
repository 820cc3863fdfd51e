"""Endpoints de reportes."""
from datetime import date

from fastapi import APIRouter, Depends, Path, Query

from condominio_analytics.application.ports.libro_pagos_repository import LibroPagosRepository
from condominio_analytics.application.use_cases.obtener_deudores import ObtenerDeudores
from condominio_analytics.application.use_cases.obtener_historial_propiedad import (
    ObtenerHistorialPropiedad,
)
from condominio_analytics.application.use_cases.obtener_reporte_mensual import ObtenerReporteMensual
from condominio_analytics.domain.value_objects.periodo_referencia import PeriodoReferencia
from condominio_analytics.infrastructure.cache.redis_cache import redis_cache
from condominio_analytics.interfaces.api.dependencies import (
    obtener_fecha_corte,
    obtener_libro_pagos,
)
from condominio_analytics.interfaces.api.v1.endpoints.dashboard import PATRON_ORDEN_DEUDORES
from condominio_analytics.interfaces.api.v1.schemas import (
    DeudoresResponse,
    ErrorResponse,
    HistorialPropiedadResponse,
    ReporteMensualResponse,
)

router = APIRouter(prefix="/reports", tags=["Reportes"])


@router.get(
    "/monthly/{year}/{month}",
    response_model=ReporteMensualResponse,
    responses={400: {"model": ErrorResponse, "description": "Mes o año inválido"}},
)
async def obtener_reporte_mensual(
    year: int = Path(..., description="Año de referencia"),
    month: int = Path(..., description="Mes de referencia (1-12)"),
    libro: LibroPagosRepository = Depends(obtener_libro_pagos),
):
    """
    Reporte de un mes de referencia.

    Retorna:
    - Total recaudado para el período
    - Totales por concepto
    - Pagos ordenados por propiedad
    """

    # PeriodoInvalido se traduce a 400 antes de tocar caché o libro
    periodo = PeriodoReferencia(año=year, mes=month)

    cache_key = f"reporte:{periodo}"
    cached = await redis_cache.get(cache_key)
    if cached:
        return ReporteMensualResponse(**cached)

    resultado = await ObtenerReporteMensual(libro).execute(año=year, mes=month)

    # Caché 30 minutos - datos históricos
    await redis_cache.set(cache_key, resultado, ttl=1800)

    return ReporteMensualResponse(**resultado)


@router.get(
    "/history/{propiedad_id}",
    response_model=HistorialPropiedadResponse,
    responses={404: {"model": ErrorResponse, "description": "Propiedad inexistente"}},
)
async def obtener_historial_propiedad(
    propiedad_id: int,
    libro: LibroPagosRepository = Depends(obtener_libro_pagos),
):
    """Historial completo de pagos de una propiedad con su total pagado."""

    cache_key = f"historial:{propiedad_id}"
    cached = await redis_cache.get(cache_key)
    if cached:
        return HistorialPropiedadResponse(**cached)

    resultado = await ObtenerHistorialPropiedad(libro).execute(propiedad_id)

    # Caché 10 minutos
    await redis_cache.set(cache_key, resultado, ttl=600)

    return HistorialPropiedadResponse(**resultado)


@router.get(
    "/debtors",
    response_model=DeudoresResponse,
    responses={503: {"model": ErrorResponse, "description": "Falla del libro de pagos"}},
)
async def obtener_reporte_deudores(
    sort: str | None = Query(
        None,
        pattern=PATRON_ORDEN_DEUDORES,
        description="Orden opcional: 'meses' (más meses primero) o 'numero'",
    ),
    fecha_corte: date = Depends(obtener_fecha_corte),
    libro: LibroPagosRepository = Depends(obtener_libro_pagos),
):
    """Reporte de deudores; usa el mismo escáner que el dashboard."""

    cache_key = f"deudores:{fecha_corte}:{sort or 'none'}"
    cached = await redis_cache.get(cache_key)
    if cached:
        return DeudoresResponse(**cached)

    resultado = await ObtenerDeudores(libro).execute(fecha_corte, ordenar_por=sort)

    await redis_cache.set(cache_key, resultado, ttl=300)

    return DeudoresResponse(**resultado)
