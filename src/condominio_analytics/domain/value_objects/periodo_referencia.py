"""Value Object para el período de referencia (mes, año) de una obligación."""
import calendar
from dataclasses import dataclass
from datetime import date

from condominio_analytics.domain.exceptions import PeriodoInvalido

AÑO_MINIMO = 1900
AÑO_MAXIMO = 2100


@dataclass(frozen=True, order=True)
class PeriodoReferencia:
    """Mes calendario al que aplica un pago, independiente de la fecha real de pago."""

    año: int
    mes: int

    def __post_init__(self) -> None:
        if not 1 <= self.mes <= 12:
            raise PeriodoInvalido(f"Mes fuera de rango: {self.mes}")
        if not AÑO_MINIMO <= self.año <= AÑO_MAXIMO:
            raise PeriodoInvalido(f"Año fuera de rango: {self.año}")

    @classmethod
    def desde_fecha(cls, fecha: date) -> "PeriodoReferencia":
        """Período que contiene la fecha dada."""
        return cls(año=fecha.year, mes=fecha.month)

    @classmethod
    def desde_indice(cls, indice: int) -> "PeriodoReferencia":
        return cls(año=indice // 12, mes=indice % 12 + 1)

    @property
    def indice(self) -> int:
        """Cantidad absoluta de meses (año * 12 + mes - 1)."""
        return self.año * 12 + self.mes - 1

    @property
    def primer_dia(self) -> date:
        return date(self.año, self.mes, 1)

    @property
    def ultimo_dia(self) -> date:
        return date(self.año, self.mes, calendar.monthrange(self.año, self.mes)[1])

    def desplazar(self, meses: int) -> "PeriodoReferencia":
        """Período desplazado N meses (negativo hacia atrás)."""
        return PeriodoReferencia.desde_indice(self.indice + meses)

    def anterior(self) -> "PeriodoReferencia":
        return self.desplazar(-1)

    def meses_hasta(self, otro: "PeriodoReferencia") -> int:
        """Diferencia en meses desde este período hasta `otro`."""
        return otro.indice - self.indice

    def __str__(self) -> str:
        return f"{self.año:04d}-{self.mes:02d}"
