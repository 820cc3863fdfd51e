"""Schemas Pydantic para reportes."""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# ============================================================================
# REPORTE MENSUAL
# ============================================================================

class PagoReporte(BaseModel):
    """Pago listado en el reporte mensual."""
    id: int = Field(..., description="ID del pago")
    property: str = Field(..., description="Número de la unidad")
    owner: str = Field(..., description="Propietario")
    concept: str = Field(..., description="Concepto")
    amount: float = Field(..., description="Monto", ge=0)
    paymentDate: str = Field(..., description="Fecha real de pago (YYYY-MM-DD)")
    paymentMethod: str = Field(..., description="Medio de pago", examples=["transfer"])
    observations: Optional[str] = Field(None, description="Observaciones")


class TotalConceptoReporte(BaseModel):
    """Cantidad y total de un concepto dentro del mes."""
    count: int = Field(..., ge=0)
    total: float = Field(...)


class ReporteMensualResponse(BaseModel):
    """Reporte de recaudo de un período de referencia."""
    period: str = Field(..., description="Período (YYYY-MM)", examples=["2024-06"])
    totalCollected: float = Field(..., description="Total recaudado para el período")
    conceptBreakdown: Dict[str, TotalConceptoReporte] = Field(..., description="Totales por concepto")
    payments: List[PagoReporte] = Field(..., description="Pagos del período ordenados por propiedad")


# ============================================================================
# HISTORIAL DE PROPIEDAD
# ============================================================================

class PropiedadResponse(BaseModel):
    """Datos de una propiedad."""
    id: int
    propertyNumber: str
    ownerName: str
    contactEmail: Optional[str] = None
    contactPhone: Optional[str] = None
    parkingSpaces: int = 0
    status: str = Field(..., examples=["active"])


class PagoHistorial(BaseModel):
    """Pago dentro del historial de una propiedad."""
    id: int
    propertyId: int
    concept: str
    amount: float
    paymentDate: str
    referenceMonth: int = Field(..., ge=1, le=12)
    referenceYear: int
    paymentMethod: str
    observations: Optional[str] = None


class HistorialPropiedadResponse(BaseModel):
    """Historial completo de pagos de una propiedad."""
    property: PropiedadResponse = Field(..., description="Propiedad consultada")
    payments: List[PagoHistorial] = Field(..., description="Pagos del más reciente al más antiguo")
    totalPaid: float = Field(..., description="Total pagado histórico")


# ============================================================================
# ESTADO DE MORA
# ============================================================================

class EstadoMoraResponse(BaseModel):
    """Resultado del escáner de mora para una propiedad."""
    propertyId: int = Field(..., description="ID de la propiedad")
    propertyNumber: str = Field(..., description="Número de la unidad")
    active: bool = Field(..., description="Si la propiedad está activa")
    isCurrent: bool = Field(..., description="Si el período actual está pagado")
    oldestUnpaidPeriod: Optional[str] = Field(None, description="Período impago más antiguo (YYYY-MM)")
    monthsInArrears: int = Field(..., description="Meses consecutivos en mora", ge=0)
    estimatedDebt: str = Field(..., description="Deuda estimada con dos decimales", examples=["0.00"])
