"""Schemas Pydantic para endpoints del dashboard financiero."""
from typing import List, Optional

from pydantic import BaseModel, Field


# ============================================================================
# RESUMEN DEL MES
# ============================================================================

class ResumenDashboardResponse(BaseModel):
    """Resumen financiero del mes en curso."""
    totalCollectedThisMonth: float = Field(..., description="Recaudo por fecha real de pago en el mes")
    debtorCount: int = Field(..., description="Propiedades activas sin pago del período actual", ge=0)
    creditCount: int = Field(..., description="Propiedades con saldo a favor (no registrado aún)", ge=0)
    compliancePercentage: int = Field(..., description="Porcentaje de cumplimiento", ge=0, le=100)


# ============================================================================
# TENDENCIAS
# ============================================================================

class TendenciaMes(BaseModel):
    """Total recaudado para un período de referencia."""
    month: str = Field(..., description="Período (YYYY-MM)", examples=["2024-06"])
    total: float = Field(..., description="Total recaudado")


class DistribucionConcepto(BaseModel):
    """Cantidad y total por concepto de pago."""
    concept: str = Field(..., description="Concepto", examples=["monthly_fee"])
    count: int = Field(..., description="Cantidad de pagos", ge=0)
    total: float = Field(..., description="Total recaudado")


class TendenciasPagoResponse(BaseModel):
    """Respuesta de tendencias para gráficos."""
    monthlyTrend: List[TendenciaMes] = Field(..., description="Ventana mensual ascendente")
    conceptDistribution: List[DistribucionConcepto] = Field(..., description="Histórico por concepto")


# ============================================================================
# DEUDORES
# ============================================================================

class DeudorResponse(BaseModel):
    """Propiedad en mora con su racha impaga."""
    propertyId: int = Field(..., description="ID de la propiedad")
    propertyNumber: str = Field(..., description="Número de la unidad")
    ownerName: str = Field(..., description="Propietario")
    contactEmail: Optional[str] = Field(None, description="Email de contacto")
    contactPhone: Optional[str] = Field(None, description="Teléfono de contacto")
    oldestUnpaidPeriod: str = Field(..., description="Período impago más antiguo (YYYY-MM)", examples=["2024-05"])
    monthsInArrears: int = Field(..., description="Meses consecutivos en mora", ge=1)
    estimatedDebt: str = Field(..., description="Deuda estimada con dos decimales", examples=["100.00"])


class DeudoresResponse(BaseModel):
    """Listado de deudores."""
    debtors: List[DeudorResponse] = Field(..., description="Deudores (sin orden salvo que se pida)")


# ============================================================================
# RESUMEN COMPLETO DE CARTERA
# ============================================================================

class ResumenCarteraResponse(BaseModel):
    """Resumen completo de la cartera a la fecha de corte."""
    period: str = Field(..., description="Período actual (YYYY-MM)")
    totalCollectedThisPeriod: float = Field(..., description="Recaudo por fecha real de pago en el mes")
    activeCount: int = Field(..., description="Propiedades activas", ge=0)
    compliantCount: int = Field(..., description="Propiedades al día", ge=0)
    debtorCount: int = Field(..., description="Propiedades sin pago del período actual", ge=0)
    compliancePercentage: int = Field(..., description="Porcentaje de cumplimiento", ge=0, le=100)
    debtors: List[DeudorResponse] = Field(..., description="Deudores con detalle de mora")
    monthlyTrend: List[TendenciaMes] = Field(..., description="Ventana mensual ascendente")
    conceptDistribution: List[DistribucionConcepto] = Field(..., description="Histórico por concepto")
