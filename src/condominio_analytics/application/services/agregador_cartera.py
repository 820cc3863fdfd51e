"""Servicio de aplicación: escaneo de mora y agregación de la cartera."""
import asyncio
from collections.abc import Awaitable
from datetime import date
from decimal import Decimal
from typing import TypeVar

from condominio_analytics.application.ports.libro_pagos_repository import LibroPagosRepository
from condominio_analytics.application.services.consulta_libro import consultar_libro, en_paralelo
from condominio_analytics.domain.entities.propiedad import Propiedad
from condominio_analytics.domain.entities.resultado_mora import Deudor, ResultadoMora
from condominio_analytics.domain.entities.resumen_cartera import (
    Cumplimiento,
    ResumenCartera,
    TotalConcepto,
    TotalPeriodo,
)
from condominio_analytics.domain.services.calculadora_cartera import CalculadoraCartera
from condominio_analytics.domain.services.escaner_mora import EscanerMora
from condominio_analytics.domain.value_objects.concepto_pago import ConceptoPago
from condominio_analytics.domain.value_objects.periodo_referencia import PeriodoReferencia
from condominio_analytics.infrastructure.config.logging import logger
from condominio_analytics.infrastructure.config.settings import Settings, get_settings

T = TypeVar("T")

ORDENES_DEUDORES = ("meses", "numero")


def ordenar_deudores(deudores: list[Deudor], ordenar_por: str | None) -> list[Deudor]:
    """
    Ordena la lista de deudores a pedido del llamador.

    Args:
        deudores: Lista producida por el agregador (sin orden garantizado)
        ordenar_por: None (sin ordenar), "meses" (más meses primero) o "numero"

    Returns:
        Nueva lista ordenada
    """
    if ordenar_por is None:
        return list(deudores)
    if ordenar_por == "meses":
        return sorted(deudores, key=lambda d: (-d.meses_en_mora, d.propiedad.numero))
    if ordenar_por == "numero":
        return sorted(deudores, key=lambda d: d.propiedad.numero)
    raise ValueError(f"Orden no soportado: {ordenar_por}")


class AgregadorCartera:
    """
    Orquesta el escáner de mora sobre todas las propiedades activas y calcula
    los acumulados de la cartera.

    Cada paso es independiente y puede ejecutarse en paralelo. Cualquier error
    del libro de pagos, o que la consulta exceda `timeout_libro_segundos`,
    aborta la llamada completa con `AgregacionFallida`; no se devuelven
    resultados parciales.
    """

    def __init__(self, libro: LibroPagosRepository, settings: Settings | None = None):
        self.libro = libro
        self.settings = settings or get_settings()

    # ------------------------------------------------------------------
    # Escáner por propiedad
    # ------------------------------------------------------------------

    async def escanear_propiedad(
        self,
        propiedad_id: int,
        fecha_corte: date,
        meses_retroactivos: int | None = None,
    ) -> ResultadoMora:
        """
        Escanea la racha impaga de una propiedad.

        Una sola consulta trae los períodos pagados de la ventana; el recorrido
        mes a mes lo hace `EscanerMora`. La consulta está sujeta a
        `timeout_libro_segundos`.

        Raises:
            AgregacionFallida: si el libro falla o no responde a tiempo
        """
        return await self._consultar(
            f"escaneo de propiedad {propiedad_id}",
            self._escanear(propiedad_id, fecha_corte, meses_retroactivos),
        )

    async def obtener_propiedad(self, propiedad_id: int) -> Propiedad | None:
        return await self._consultar(
            f"propiedad {propiedad_id}", self.libro.obtener_propiedad(propiedad_id)
        )

    async def _escanear(
        self,
        propiedad_id: int,
        fecha_corte: date,
        meses_retroactivos: int | None = None,
    ) -> ResultadoMora:
        meses = (
            meses_retroactivos
            if meses_retroactivos is not None
            else self.settings.meses_retroactivos_mora
        )
        desde, hasta = EscanerMora.ventana(fecha_corte, meses)

        pagados = await self.libro.obtener_periodos_pagados(propiedad_id, desde, hasta)

        resultado = EscanerMora.escanear(
            propiedad_id=propiedad_id,
            fecha_corte=fecha_corte,
            periodos_pagados=pagados,
            meses_retroactivos=meses,
            cuota_estimada=self.settings.cuota_mensual_estimada,
        )
        logger.debug(
            f"Escaneo propiedad={propiedad_id} al_dia={resultado.al_dia} "
            f"meses_en_mora={resultado.meses_en_mora}"
        )
        return resultado

    # ------------------------------------------------------------------
    # Pasos de la agregación
    # ------------------------------------------------------------------

    async def total_cobrado(self, fecha_corte: date) -> Decimal:
        return await self._consultar("total cobrado", self._calcular_total_cobrado(fecha_corte))

    async def cumplimiento(self, fecha_corte: date) -> Cumplimiento:
        return await self._consultar("cumplimiento", self._calcular_cumplimiento(fecha_corte))

    async def deudores(self, fecha_corte: date, ordenar_por: str | None = None) -> list[Deudor]:
        async def calcular() -> list[Deudor]:
            cumplimiento = await self._calcular_cumplimiento(fecha_corte)
            return await self._calcular_deudores(fecha_corte, cumplimiento.pendientes)

        deudores = await self._consultar("deudores", calcular())
        return ordenar_deudores(deudores, ordenar_por)

    async def tendencia_mensual(
        self,
        fecha_corte: date,
        meses: int | None = None,
    ) -> list[TotalPeriodo]:
        return await self._consultar(
            "tendencia mensual",
            self._calcular_tendencia(
                fecha_corte,
                meses if meses is not None else self.settings.meses_ventana_tendencia,
            ),
        )

    async def distribucion_conceptos(self) -> list[TotalConcepto]:
        return await self._consultar("distribución por concepto", self._calcular_distribucion())

    async def agregar(self, fecha_corte: date) -> ResumenCartera:
        """
        Calcula el resumen completo de la cartera a la fecha de corte.

        Los pasos se lanzan en paralelo y se unen antes de armar el resumen;
        si uno falla, los demás se cancelan.
        """

        async def cumplimiento_y_deudores() -> tuple[Cumplimiento, list[Deudor]]:
            cumplimiento = await self._calcular_cumplimiento(fecha_corte)
            deudores = await self._calcular_deudores(fecha_corte, cumplimiento.pendientes)
            return cumplimiento, deudores

        total, (cumplimiento, deudores), tendencia, distribucion = await self._consultar(
            "resumen de cartera",
            en_paralelo(
                self._calcular_total_cobrado(fecha_corte),
                cumplimiento_y_deudores(),
                self._calcular_tendencia(fecha_corte, self.settings.meses_ventana_tendencia),
                self._calcular_distribucion(),
            ),
        )

        logger.info(
            f"Cartera {PeriodoReferencia.desde_fecha(fecha_corte)}: "
            f"{cumplimiento.al_dia}/{cumplimiento.total_activas} al día, "
            f"{len(deudores)} deudores"
        )

        return ResumenCartera(
            periodo=PeriodoReferencia.desde_fecha(fecha_corte),
            total_cobrado_mes=total,
            cumplimiento=cumplimiento,
            lista_deudores=deudores,
            tendencia_mensual=tendencia,
            distribucion_conceptos=distribucion,
        )

    # ------------------------------------------------------------------
    # Implementación
    # ------------------------------------------------------------------

    async def _consultar(self, descripcion: str, consulta: Awaitable[T]) -> T:
        return await consultar_libro(descripcion, consulta, self.settings.timeout_libro_segundos)

    async def _calcular_total_cobrado(self, fecha_corte: date) -> Decimal:
        periodo = PeriodoReferencia.desde_fecha(fecha_corte)
        total = await self.libro.sumar_cobrado(periodo.primer_dia, periodo.ultimo_dia)
        return CalculadoraCartera.redondear_monto(total)

    async def _calcular_cumplimiento(self, fecha_corte: date) -> Cumplimiento:
        periodo = PeriodoReferencia.desde_fecha(fecha_corte)

        activas, con_pago = await en_paralelo(
            self.libro.obtener_propiedades_activas(),
            self.libro.obtener_propiedades_con_pago(periodo),
        )

        # Solo cuentan pagos de propiedades activas
        pendientes = [p for p in activas if p.id not in con_pago]
        al_dia = len(activas) - len(pendientes)

        return Cumplimiento(
            total_activas=len(activas),
            al_dia=al_dia,
            porcentaje=CalculadoraCartera.calcular_porcentaje_cumplimiento(al_dia, len(activas)),
            pendientes=pendientes,
        )

    async def _calcular_deudores(
        self,
        fecha_corte: date,
        pendientes: list[Propiedad],
    ) -> list[Deudor]:
        semaforo = asyncio.Semaphore(self.settings.escaneos_concurrentes)

        async def escanear(propiedad: Propiedad) -> tuple[Propiedad, ResultadoMora]:
            async with semaforo:
                return propiedad, await self._escanear(propiedad.id, fecha_corte)

        resultados = await en_paralelo(*(escanear(p) for p in pendientes))

        return [
            Deudor(propiedad=propiedad, resultado=resultado)
            for propiedad, resultado in resultados
            if not resultado.al_dia
        ]

    async def _calcular_tendencia(self, fecha_corte: date, meses: int) -> list[TotalPeriodo]:
        if meses < 1:
            raise ValueError(f"La ventana de tendencia debe ser >= 1, recibido {meses}")

        hasta = PeriodoReferencia.desde_fecha(fecha_corte)
        desde = hasta.desplazar(-(meses - 1))

        totales = await self.libro.obtener_totales_por_periodo(desde, hasta)

        # Una entrada por mes de la ventana, en orden ascendente
        return [
            TotalPeriodo(
                periodo=periodo,
                total=CalculadoraCartera.redondear_monto(totales.get(periodo, 0)),
            )
            for periodo in (desde.desplazar(i) for i in range(meses))
        ]

    async def _calcular_distribucion(self) -> list[TotalConcepto]:
        totales = await self.libro.obtener_totales_por_concepto()
        orden = list(ConceptoPago)
        return sorted(
            (
                TotalConcepto(
                    concepto=t.concepto,
                    cantidad=t.cantidad,
                    total=CalculadoraCartera.redondear_monto(t.total),
                )
                for t in totales
            ),
            key=lambda t: orden.index(t.concepto),
        )
