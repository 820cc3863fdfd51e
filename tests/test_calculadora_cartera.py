"""Pruebas de la calculadora de cartera."""
from decimal import Decimal

import pytest

from condominio_analytics.domain.services.calculadora_cartera import CalculadoraCartera
from condominio_analytics.domain.value_objects.periodo_referencia import PeriodoReferencia


class TestPorcentajeCumplimiento:

    def test_sin_propiedades_activas(self) -> None:
        assert CalculadoraCartera.calcular_porcentaje_cumplimiento(0, 0) == 0

    def test_tres_de_cinco(self) -> None:
        assert CalculadoraCartera.calcular_porcentaje_cumplimiento(3, 5) == 60

    @pytest.mark.parametrize(
        ("al_dia", "total", "esperado"),
        [(1, 8, 13), (1, 3, 33), (2, 3, 67), (1, 200, 1), (5, 5, 100)],
    )
    def test_redondeo_half_up(self, al_dia: int, total: int, esperado: int) -> None:
        # 12.5 sube a 13, no redondeo bancario
        assert CalculadoraCartera.calcular_porcentaje_cumplimiento(al_dia, total) == esperado


class TestMontos:

    def test_deuda_es_meses_por_cuota(self) -> None:
        assert CalculadoraCartera.calcular_deuda_estimada(2, Decimal("50")) == Decimal("100.00")

    def test_deuda_exacta_a_dos_decimales(self) -> None:
        deuda = CalculadoraCartera.calcular_deuda_estimada(3, Decimal("33.335"))
        assert deuda == Decimal("100.01")
        assert str(deuda) == "100.01"

    def test_redondear_monto(self) -> None:
        assert CalculadoraCartera.redondear_monto(Decimal("0.005")) == Decimal("0.01")
        assert str(CalculadoraCartera.redondear_monto(Decimal("7"))) == "7.00"

    def test_meses_en_mora_incluye_ambos_extremos(self) -> None:
        assert CalculadoraCartera.calcular_meses_en_mora(
            PeriodoReferencia(2024, 5), PeriodoReferencia(2024, 6)
        ) == 2
        assert CalculadoraCartera.calcular_meses_en_mora(
            PeriodoReferencia(2024, 6), PeriodoReferencia(2024, 6)
        ) == 1
