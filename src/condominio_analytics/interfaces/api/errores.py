"""Traducción de excepciones de dominio a respuestas HTTP."""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from condominio_analytics.domain.exceptions import (
    AgregacionFallida,
    PeriodoInvalido,
    PropiedadNoEncontrada,
)
from condominio_analytics.infrastructure.config.logging import logger

CODIGOS_HTTP = {
    PropiedadNoEncontrada: status.HTTP_404_NOT_FOUND,
    PeriodoInvalido: status.HTTP_400_BAD_REQUEST,
    AgregacionFallida: status.HTTP_503_SERVICE_UNAVAILABLE,
}


async def manejar_error_dominio(request: Request, exc: Exception) -> JSONResponse:
    """Responde `{"detail": ...}` con el código asociado a la excepción."""
    codigo = CODIGOS_HTTP.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    if codigo >= 500:
        logger.error(f"{request.method} {request.url.path} falló: {exc}")

    return JSONResponse(status_code=codigo, content={"detail": str(exc)})


def registrar_manejadores(app: FastAPI) -> None:
    """Registra los manejadores de excepciones de dominio."""
    for excepcion in CODIGOS_HTTP:
        app.add_exception_handler(excepcion, manejar_error_dominio)
