"""Schemas de la API v1."""
from condominio_analytics.interfaces.api.v1.schemas.dashboard import (
    DeudoresResponse,
    ResumenCarteraResponse,
    ResumenDashboardResponse,
    TendenciasPagoResponse,
)
from condominio_analytics.interfaces.api.v1.schemas.reportes import (
    EstadoMoraResponse,
    HistorialPropiedadResponse,
    ReporteMensualResponse,
)
from condominio_analytics.interfaces.api.v1.schemas.requests import EventoLibroRequest
from condominio_analytics.interfaces.api.v1.schemas.responses import (
    CacheClearResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "DeudoresResponse",
    "ResumenCarteraResponse",
    "ResumenDashboardResponse",
    "TendenciasPagoResponse",
    "EstadoMoraResponse",
    "HistorialPropiedadResponse",
    "ReporteMensualResponse",
    "EventoLibroRequest",
    "CacheClearResponse",
    "ErrorResponse",
    "HealthResponse",
]
