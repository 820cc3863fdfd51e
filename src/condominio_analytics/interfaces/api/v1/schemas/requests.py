"""Schemas de request."""
from pydantic import BaseModel, Field


class EventoLibroRequest(BaseModel):
    """Notificación de alta, cambio o baja de un pago en el libro."""

    propertyId: int = Field(..., description="ID de la propiedad del pago", examples=[12])
    referenceMonth: int = Field(..., description="Mes de referencia del pago", examples=[6])
    referenceYear: int = Field(..., description="Año de referencia del pago", examples=[2024])
