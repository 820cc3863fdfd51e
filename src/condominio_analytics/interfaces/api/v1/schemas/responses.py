"""Schemas de response."""
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response del health check."""

    status: str = Field(..., examples=["healthy"])
    service: str = Field(..., examples=["Condominio Analytics"])
    version: str = Field(..., examples=["0.1.0"])
    database: str = Field(..., examples=["connected"])
    redis: str = Field(..., examples=["connected"])


class CacheClearResponse(BaseModel):
    """Respuesta de limpieza de cache."""

    message: str = Field(..., description="Mensaje de confirmación")
    keys_deleted: int = Field(..., description="Cantidad de keys eliminadas", ge=0)


class ErrorResponse(BaseModel):
    """Error de dominio devuelto al cliente."""

    detail: str = Field(..., examples=["Propiedad 99 no encontrada"])
