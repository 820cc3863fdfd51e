"""Entidades del dominio."""
from condominio_analytics.domain.entities.pago import Pago
from condominio_analytics.domain.entities.propiedad import Propiedad
from condominio_analytics.domain.entities.resultado_mora import Deudor, ResultadoMora
from condominio_analytics.domain.entities.resumen_cartera import (
    Cumplimiento,
    ResumenCartera,
    TotalConcepto,
    TotalPeriodo,
)

__all__ = [
    "Pago",
    "Propiedad",
    "Deudor",
    "ResultadoMora",
    "Cumplimiento",
    "ResumenCartera",
    "TotalConcepto",
    "TotalPeriodo",
]
