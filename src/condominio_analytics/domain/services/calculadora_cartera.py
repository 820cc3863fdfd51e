"""Servicio de dominio para cálculos financieros de la cartera."""
from decimal import ROUND_HALF_UP, Decimal

from condominio_analytics.domain.value_objects.periodo_referencia import PeriodoReferencia

CENTAVOS = Decimal("0.01")


class CalculadoraCartera:
    """Calcula deuda estimada, meses en mora y porcentaje de cumplimiento."""

    @staticmethod
    def redondear_monto(monto: Decimal) -> Decimal:
        """Redondea un monto a dos decimales."""
        return Decimal(monto).quantize(CENTAVOS, rounding=ROUND_HALF_UP)

    @staticmethod
    def calcular_meses_en_mora(
        periodo_mas_antiguo: PeriodoReferencia,
        periodo_actual: PeriodoReferencia,
    ) -> int:
        """
        Meses calendario entre el período impago más antiguo y el actual, ambos incluidos.

        Args:
            periodo_mas_antiguo: Primer período de la racha impaga
            periodo_actual: Período que contiene la fecha de corte

        Returns:
            Diferencia en meses + 1
        """
        return periodo_mas_antiguo.meses_hasta(periodo_actual) + 1

    @staticmethod
    def calcular_deuda_estimada(meses_en_mora: int, cuota_mensual: Decimal) -> Decimal:
        """
        Estimación gruesa de la deuda.

        Fórmula:
        Deuda = meses_en_mora × cuota_mensual

        No suma los montos reales por concepto; usa una cuota plana configurada.
        """
        return CalculadoraCartera.redondear_monto(Decimal(meses_en_mora) * Decimal(cuota_mensual))

    @staticmethod
    def calcular_porcentaje_cumplimiento(al_dia: int, total_activas: int) -> int:
        """
        Porcentaje de propiedades activas con pago del período actual.

        Args:
            al_dia: Propiedades con pago registrado en el período actual
            total_activas: Total de propiedades activas

        Returns:
            Entero entre 0 y 100 (redondeo half-up); 0 si no hay propiedades activas
        """
        if total_activas == 0:
            return 0

        porcentaje = Decimal(al_dia) * 100 / Decimal(total_activas)
        return int(porcentaje.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
