"""Entidades derivadas del escaneo de mora."""
from dataclasses import dataclass
from decimal import Decimal

from condominio_analytics.domain.entities.propiedad import Propiedad
from condominio_analytics.domain.value_objects.periodo_referencia import PeriodoReferencia


@dataclass(frozen=True)
class ResultadoMora:
    """Estado de mora de una propiedad a una fecha de corte. No se persiste."""

    propiedad_id: int
    periodo_mas_antiguo: PeriodoReferencia | None
    meses_en_mora: int
    deuda_estimada: Decimal
    al_dia: bool


@dataclass(frozen=True)
class Deudor:
    """Resultado de mora enriquecido con los datos de contacto de la propiedad."""

    propiedad: Propiedad
    resultado: ResultadoMora

    @property
    def periodo_mas_antiguo(self) -> PeriodoReferencia | None:
        return self.resultado.periodo_mas_antiguo

    @property
    def meses_en_mora(self) -> int:
        return self.resultado.meses_en_mora

    @property
    def deuda_estimada(self) -> Decimal:
        return self.resultado.deuda_estimada
