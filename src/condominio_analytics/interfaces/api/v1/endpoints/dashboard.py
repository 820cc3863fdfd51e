"""Endpoints del dashboard financiero."""
from datetime import date

from fastapi import APIRouter, Depends, Query

from condominio_analytics.application.ports.libro_pagos_repository import LibroPagosRepository
from condominio_analytics.application.use_cases.obtener_deudores import ObtenerDeudores
from condominio_analytics.application.use_cases.obtener_resumen_cartera import ObtenerResumenCartera
from condominio_analytics.application.use_cases.obtener_resumen_dashboard import (
    ObtenerResumenDashboard,
)
from condominio_analytics.application.use_cases.obtener_tendencias_pago import ObtenerTendenciasPago
from condominio_analytics.infrastructure.cache.redis_cache import redis_cache
from condominio_analytics.interfaces.api.dependencies import (
    obtener_fecha_corte,
    obtener_libro_pagos,
)
from condominio_analytics.interfaces.api.v1.schemas import (
    DeudoresResponse,
    ErrorResponse,
    ResumenCarteraResponse,
    ResumenDashboardResponse,
    TendenciasPagoResponse,
)

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
    responses={503: {"model": ErrorResponse, "description": "Falla del libro de pagos"}},
)

PATRON_ORDEN_DEUDORES = "^(meses|numero)$"


@router.get("/summary", response_model=ResumenDashboardResponse)
async def obtener_resumen(
    fecha_corte: date = Depends(obtener_fecha_corte),
    libro: LibroPagosRepository = Depends(obtener_libro_pagos),
):
    """
    Resumen del mes en curso.

    - Recaudo del mes por fecha real de pago
    - Cantidad de deudores del período actual
    - Porcentaje de cumplimiento
    """

    cache_key = f"resumen:{fecha_corte}"
    cached = await redis_cache.get(cache_key)
    if cached:
        return ResumenDashboardResponse(**cached)

    resultado = await ObtenerResumenDashboard(libro).execute(fecha_corte)

    await redis_cache.set(cache_key, resultado, ttl=300)

    return ResumenDashboardResponse(**resultado)


@router.get("/payment-trends", response_model=TendenciasPagoResponse)
async def obtener_tendencias(
    months: int | None = Query(None, ge=1, le=60, description="Largo de la ventana en meses"),
    fecha_corte: date = Depends(obtener_fecha_corte),
    libro: LibroPagosRepository = Depends(obtener_libro_pagos),
):
    """
    Datos para gráficos de recaudo.

    - Tendencia mensual por período de referencia (ventana móvil)
    - Distribución histórica por concepto
    """

    cache_key = f"tendencias:{fecha_corte}:{months or 'default'}"
    cached = await redis_cache.get(cache_key)
    if cached:
        return TendenciasPagoResponse(**cached)

    resultado = await ObtenerTendenciasPago(libro).execute(fecha_corte, meses=months)

    # Caché 10 minutos
    await redis_cache.set(cache_key, resultado, ttl=600)

    return TendenciasPagoResponse(**resultado)


@router.get("/debtors", response_model=DeudoresResponse)
async def obtener_deudores_dashboard(
    sort: str | None = Query(
        None,
        pattern=PATRON_ORDEN_DEUDORES,
        description="Orden opcional: 'meses' (más meses primero) o 'numero'",
    ),
    fecha_corte: date = Depends(obtener_fecha_corte),
    libro: LibroPagosRepository = Depends(obtener_libro_pagos),
):
    """Propiedades activas sin pago del período actual, con su racha impaga."""

    cache_key = f"deudores:{fecha_corte}:{sort or 'none'}"
    cached = await redis_cache.get(cache_key)
    if cached:
        return DeudoresResponse(**cached)

    resultado = await ObtenerDeudores(libro).execute(fecha_corte, ordenar_por=sort)

    await redis_cache.set(cache_key, resultado, ttl=300)

    return DeudoresResponse(**resultado)


@router.get("/portfolio", response_model=ResumenCarteraResponse)
async def obtener_resumen_cartera(
    fecha_corte: date = Depends(obtener_fecha_corte),
    libro: LibroPagosRepository = Depends(obtener_libro_pagos),
):
    """Resumen completo de la cartera calculado en una sola pasada."""

    cache_key = f"cartera:{fecha_corte}"
    cached = await redis_cache.get(cache_key)
    if cached:
        return ResumenCarteraResponse(**cached)

    resultado = await ObtenerResumenCartera(libro).execute(fecha_corte)

    await redis_cache.set(cache_key, resultado, ttl=300)

    return ResumenCarteraResponse(**resultado)
