"""Value Objects del dominio."""
from condominio_analytics.domain.value_objects.concepto_pago import (
    ConceptoPago,
    EstadoPropiedad,
    MetodoPago,
)
from condominio_analytics.domain.value_objects.periodo_referencia import PeriodoReferencia

__all__ = ["ConceptoPago", "EstadoPropiedad", "MetodoPago", "PeriodoReferencia"]
