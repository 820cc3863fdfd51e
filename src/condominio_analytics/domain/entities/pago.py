"""Entidad de pago registrado en el libro."""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from condominio_analytics.domain.value_objects.concepto_pago import ConceptoPago, MetodoPago
from condominio_analytics.domain.value_objects.periodo_referencia import PeriodoReferencia


@dataclass(frozen=True)
class Pago:
    """Pago de una propiedad para un período de referencia y un concepto."""

    id: int
    propiedad_id: int
    concepto: ConceptoPago
    monto: Decimal
    fecha_pago: date
    mes_referencia: int
    año_referencia: int
    metodo_pago: MetodoPago
    observaciones: str | None = None

    @property
    def periodo(self) -> PeriodoReferencia:
        """Período de referencia que satisface el pago."""
        return PeriodoReferencia(año=self.año_referencia, mes=self.mes_referencia)
