"""Entidades de agregación de cartera."""
from dataclasses import dataclass, field
from decimal import Decimal

from condominio_analytics.domain.entities.propiedad import Propiedad
from condominio_analytics.domain.entities.resultado_mora import Deudor
from condominio_analytics.domain.value_objects.concepto_pago import ConceptoPago
from condominio_analytics.domain.value_objects.periodo_referencia import PeriodoReferencia


@dataclass(frozen=True)
class TotalPeriodo:
    """Total recaudado para un período de referencia."""

    periodo: PeriodoReferencia
    total: Decimal


@dataclass(frozen=True)
class TotalConcepto:
    """Cantidad de pagos y total recaudado para un concepto."""

    concepto: ConceptoPago
    cantidad: int
    total: Decimal


@dataclass(frozen=True)
class Cumplimiento:
    """Resultado de la verificación del período actual sobre las propiedades activas."""

    total_activas: int
    al_dia: int
    porcentaje: int
    pendientes: list[Propiedad] = field(default_factory=list)

    @property
    def deudores(self) -> int:
        return self.total_activas - self.al_dia


@dataclass(frozen=True)
class ResumenCartera:
    """Resumen financiero de todo el conjunto a una fecha de corte."""

    periodo: PeriodoReferencia
    total_cobrado_mes: Decimal
    cumplimiento: Cumplimiento
    lista_deudores: list[Deudor]
    tendencia_mensual: list[TotalPeriodo]
    distribucion_conceptos: list[TotalConcepto]

    @property
    def deudores(self) -> int:
        return self.cumplimiento.deudores

    @property
    def al_dia(self) -> int:
        return self.cumplimiento.al_dia

    @property
    def porcentaje_cumplimiento(self) -> int:
        return self.cumplimiento.porcentaje
