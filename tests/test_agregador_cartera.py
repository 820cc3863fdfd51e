"""Pruebas del agregador de cartera."""
import asyncio
from datetime import date
from decimal import Decimal

import pytest

from condominio_analytics.application.services.agregador_cartera import (
    AgregadorCartera,
    ordenar_deudores,
)
from condominio_analytics.domain.exceptions import AgregacionFallida, ErrorLibroPagos
from condominio_analytics.domain.value_objects.concepto_pago import ConceptoPago
from condominio_analytics.domain.value_objects.periodo_referencia import PeriodoReferencia
from condominio_analytics.infrastructure.config.settings import Settings


@pytest.fixture
def agregador(libro_con_cartera, settings: Settings) -> AgregadorCartera:
    return AgregadorCartera(libro_con_cartera, settings=settings)


class TestCumplimiento:
    """Propiedades activas al día con el período actual."""

    async def test_tres_de_cinco_activas(self, agregador: AgregadorCartera, fecha_corte: date) -> None:
        cumplimiento = await agregador.cumplimiento(fecha_corte)

        assert cumplimiento.total_activas == 5
        assert cumplimiento.al_dia == 3
        assert cumplimiento.deudores == 2
        assert cumplimiento.porcentaje == 60
        assert [p.numero for p in cumplimiento.pendientes] == ["104", "105"]

    async def test_sin_propiedades_activas(self, libro, settings: Settings, fecha_corte: date) -> None:
        cumplimiento = await AgregadorCartera(libro, settings=settings).cumplimiento(fecha_corte)

        assert cumplimiento.total_activas == 0
        assert cumplimiento.porcentaje == 0

    async def test_pagos_de_inactivas_no_cuentan(
        self, libro_con_cartera, settings: Settings, fecha_corte: date
    ) -> None:
        inactiva = libro_con_cartera.propiedades[6]
        libro_con_cartera.registrar_pago(inactiva, 2024, 6)

        cumplimiento = await AgregadorCartera(libro_con_cartera, settings=settings).cumplimiento(
            fecha_corte
        )

        assert cumplimiento.al_dia == 3
        assert cumplimiento.porcentaje == 60


class TestDeudores:
    """Escaneo de mora sobre las propiedades pendientes."""

    async def test_detalle_de_deudores(self, agregador: AgregadorCartera, fecha_corte: date) -> None:
        deudores = await agregador.deudores(fecha_corte, ordenar_por="numero")

        assert [d.propiedad.numero for d in deudores] == ["104", "105"]

        d104, d105 = deudores
        assert d104.periodo_mas_antiguo == PeriodoReferencia(2024, 5)
        assert d104.meses_en_mora == 2
        assert d104.deuda_estimada == Decimal("100.00")
        assert d105.periodo_mas_antiguo == PeriodoReferencia(2023, 7)
        assert d105.meses_en_mora == 12
        assert d105.deuda_estimada == Decimal("600.00")

    async def test_orden_por_meses(self, agregador: AgregadorCartera, fecha_corte: date) -> None:
        deudores = await agregador.deudores(fecha_corte, ordenar_por="meses")

        assert [d.propiedad.numero for d in deudores] == ["105", "104"]

    async def test_cantidad_coincide_con_cumplimiento(
        self, agregador: AgregadorCartera, fecha_corte: date
    ) -> None:
        deudores = await agregador.deudores(fecha_corte)
        cumplimiento = await agregador.cumplimiento(fecha_corte)

        assert len(deudores) == cumplimiento.deudores

    async def test_una_consulta_por_propiedad_pendiente(
        self, agregador: AgregadorCartera, libro_con_cartera, fecha_corte: date
    ) -> None:
        await agregador.deudores(fecha_corte)

        assert libro_con_cartera.consultas_periodos == 2

    async def test_ventana_configurable(self, libro_con_cartera, fecha_corte: date) -> None:
        settings = Settings(db_password="test", meses_retroactivos_mora=6)
        deudores = await AgregadorCartera(libro_con_cartera, settings=settings).deudores(
            fecha_corte, ordenar_por="numero"
        )

        assert deudores[1].meses_en_mora == 6
        assert deudores[1].periodo_mas_antiguo == PeriodoReferencia(2024, 1)

    def test_orden_no_soportado(self) -> None:
        with pytest.raises(ValueError):
            ordenar_deudores([], "monto")

    def test_sin_orden_conserva_la_lista(self) -> None:
        assert ordenar_deudores([], None) == []


class TestEscanearPropiedad:

    async def test_propiedad_al_dia(self, agregador: AgregadorCartera, fecha_corte: date) -> None:
        resultado = await agregador.escanear_propiedad(1, fecha_corte)

        assert resultado.al_dia is True
        assert resultado.meses_en_mora == 0

    async def test_lookback_explicito(self, agregador: AgregadorCartera, fecha_corte: date) -> None:
        resultado = await agregador.escanear_propiedad(5, fecha_corte, meses_retroactivos=3)

        assert resultado.meses_en_mora == 3
        assert resultado.periodo_mas_antiguo == PeriodoReferencia(2024, 4)

    async def test_tiempo_agotado(self, libro_con_cartera, fecha_corte: date) -> None:
        libro_con_cartera.demoras["obtener_periodos_pagados"] = 1.0
        settings = Settings(db_password="test", timeout_libro_segundos=0.05)

        with pytest.raises(AgregacionFallida):
            await AgregadorCartera(libro_con_cartera, settings=settings).escanear_propiedad(
                4, fecha_corte
            )

    async def test_error_del_libro(
        self, agregador: AgregadorCartera, libro_con_cartera, fecha_corte: date
    ) -> None:
        libro_con_cartera.fallas["obtener_periodos_pagados"] = ErrorLibroPagos("caído")

        with pytest.raises(AgregacionFallida) as exc_info:
            await agregador.escanear_propiedad(4, fecha_corte)

        assert isinstance(exc_info.value.__cause__, ErrorLibroPagos)


class TestTotalesYTendencia:

    async def test_total_cobrado_por_fecha_real(
        self, agregador: AgregadorCartera, fecha_corte: date
    ) -> None:
        # El pago de 103 para junio se hizo el 30 de mayo
        assert await agregador.total_cobrado(fecha_corte) == Decimal("120.00")

    async def test_tendencia_ventana_completa_ascendente(
        self, agregador: AgregadorCartera, fecha_corte: date
    ) -> None:
        tendencia = await agregador.tendencia_mensual(fecha_corte)

        periodos = [t.periodo for t in tendencia]
        assert len(periodos) == 12
        assert periodos[0] == PeriodoReferencia(2023, 7)
        assert periodos[-1] == PeriodoReferencia(2024, 6)
        assert periodos == sorted(set(periodos))

        totales = {str(t.periodo): t.total for t in tendencia}
        assert totales["2024-06"] == Decimal("170.00")
        assert totales["2024-04"] == Decimal("30.00")
        assert totales["2024-05"] == Decimal("0.00")

    async def test_tendencia_ventana_corta(self, agregador: AgregadorCartera, fecha_corte: date) -> None:
        tendencia = await agregador.tendencia_mensual(fecha_corte, meses=3)

        assert [str(t.periodo) for t in tendencia] == ["2024-04", "2024-05", "2024-06"]

    async def test_distribucion_en_orden_de_concepto(self, agregador: AgregadorCartera) -> None:
        distribucion = await agregador.distribucion_conceptos()

        assert [d.concepto for d in distribucion] == [
            ConceptoPago.CUOTA_MENSUAL,
            ConceptoPago.AGUA,
            ConceptoPago.PARQUEADERO,
        ]
        assert distribucion[0].cantidad == 3
        assert distribucion[0].total == Decimal("150.00")


class TestAgregar:
    """Resumen completo y manejo de fallas."""

    async def test_resumen_completo(self, agregador: AgregadorCartera, fecha_corte: date) -> None:
        resumen = await agregador.agregar(fecha_corte)

        assert resumen.periodo == PeriodoReferencia(2024, 6)
        assert resumen.total_cobrado_mes == Decimal("120.00")
        assert resumen.al_dia == 3
        assert resumen.deudores == 2
        assert resumen.porcentaje_cumplimiento == 60
        assert len(resumen.lista_deudores) == resumen.deudores
        assert len(resumen.tendencia_mensual) == 12

    async def test_error_del_libro_aborta(
        self, agregador: AgregadorCartera, libro_con_cartera, fecha_corte: date
    ) -> None:
        libro_con_cartera.falla = ErrorLibroPagos("conexión perdida")

        with pytest.raises(AgregacionFallida) as exc_info:
            await agregador.agregar(fecha_corte)

        assert isinstance(exc_info.value.__cause__, ErrorLibroPagos)

    async def test_tiempo_agotado(self, libro_con_cartera, fecha_corte: date) -> None:
        libro_con_cartera.demora = 0.5
        settings = Settings(db_password="test", timeout_libro_segundos=0.05)

        with pytest.raises(AgregacionFallida):
            await AgregadorCartera(libro_con_cartera, settings=settings).deudores(fecha_corte)

    async def test_falla_cancela_las_demas_consultas(
        self, agregador: AgregadorCartera, libro_con_cartera, fecha_corte: date
    ) -> None:
        libro_con_cartera.fallas["obtener_totales_por_concepto"] = ErrorLibroPagos("caído")
        libro_con_cartera.demoras["obtener_propiedades_activas"] = 0.2

        with pytest.raises(AgregacionFallida):
            await agregador.agregar(fecha_corte)

        # Ninguna consulta hermana termina después de abortar
        await asyncio.sleep(0.4)
        assert "obtener_propiedades_activas" not in libro_con_cartera.completadas

    async def test_falla_cancela_escaneos_en_curso(
        self, agregador: AgregadorCartera, libro_con_cartera, fecha_corte: date
    ) -> None:
        libro_con_cartera.fallas["sumar_cobrado"] = ErrorLibroPagos("caído")
        libro_con_cartera.demoras["sumar_cobrado"] = 0.05
        libro_con_cartera.demoras["obtener_periodos_pagados"] = 0.3

        with pytest.raises(AgregacionFallida):
            await agregador.agregar(fecha_corte)

        await asyncio.sleep(0.5)
        assert "obtener_periodos_pagados" not in libro_con_cartera.completadas
