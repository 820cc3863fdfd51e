"""Acceso acotado al libro de pagos: tiempo máximo y ejecución en paralelo."""
import asyncio
from collections.abc import Awaitable
from typing import Any, TypeVar

from condominio_analytics.domain.exceptions import AgregacionFallida, ErrorLibroPagos
from condominio_analytics.infrastructure.config.logging import logger

T = TypeVar("T")


async def consultar_libro(descripcion: str, consulta: Awaitable[T], timeout: float) -> T:
    """
    Espera una consulta al libro con tiempo máximo.

    Args:
        descripcion: Texto para logs y mensaje de error
        consulta: Corrutina o futuro que consulta el libro
        timeout: Segundos antes de abortar

    Raises:
        AgregacionFallida: si el libro falla o se agota el tiempo (encadena la causa)
    """
    try:
        return await asyncio.wait_for(consulta, timeout=timeout)
    except asyncio.TimeoutError as exc:
        logger.error(f"Consulta '{descripcion}' excedió {timeout}s")
        raise AgregacionFallida(f"Tiempo agotado calculando {descripcion}") from exc
    except ErrorLibroPagos as exc:
        logger.error(f"Consulta '{descripcion}' falló: {exc}")
        raise AgregacionFallida(f"Error del libro de pagos calculando {descripcion}") from exc


async def en_paralelo(*pasos: Awaitable[Any]) -> list[Any]:
    """
    Ejecuta los pasos concurrentemente y devuelve sus resultados en orden.

    Ante la primera excepción cancela los pasos que siguen pendientes y espera
    a que terminen de cancelarse antes de propagarla: ninguna consulta queda
    corriendo después de que la llamada falló.
    """
    tareas = [asyncio.ensure_future(paso) for paso in pasos]
    try:
        return await asyncio.gather(*tareas)
    finally:
        pendientes = [t for t in tareas if not t.done()]
        for tarea in pendientes:
            tarea.cancel()
        if pendientes:
            await asyncio.gather(*pendientes, return_exceptions=True)
