"""Puerto (interfaz) para el libro de pagos y el padrón de propiedades."""
from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal

from condominio_analytics.domain.entities.pago import Pago
from condominio_analytics.domain.entities.propiedad import Propiedad
from condominio_analytics.domain.entities.resumen_cartera import TotalConcepto
from condominio_analytics.domain.value_objects.periodo_referencia import PeriodoReferencia


class LibroPagosRepository(ABC):
    """
    Interfaz de solo lectura sobre el libro de pagos.

    Las implementaciones deben traducir sus errores de acceso a datos en
    `ErrorLibroPagos`.
    """

    @abstractmethod
    async def obtener_propiedad(self, propiedad_id: int) -> Propiedad | None:
        """Obtiene una propiedad por ID."""
        pass

    @abstractmethod
    async def obtener_propiedades_activas(self) -> list[Propiedad]:
        """Obtiene todas las propiedades en estado activo."""
        pass

    @abstractmethod
    async def obtener_periodos_pagados(
        self,
        propiedad_id: int,
        desde: PeriodoReferencia,
        hasta: PeriodoReferencia,
    ) -> set[PeriodoReferencia]:
        """Períodos (ambos extremos incluidos) con al menos un pago de la propiedad."""
        pass

    @abstractmethod
    async def obtener_propiedades_con_pago(self, periodo: PeriodoReferencia) -> set[int]:
        """IDs de propiedades con al menos un pago para el período de referencia."""
        pass

    @abstractmethod
    async def sumar_cobrado(self, fecha_inicio: date, fecha_fin: date) -> Decimal:
        """Suma de montos cuya fecha real de pago cae en [fecha_inicio, fecha_fin]."""
        pass

    @abstractmethod
    async def obtener_totales_por_periodo(
        self,
        desde: PeriodoReferencia,
        hasta: PeriodoReferencia,
    ) -> dict[PeriodoReferencia, Decimal]:
        """Suma de montos agrupada por período de referencia dentro del rango."""
        pass

    @abstractmethod
    async def obtener_totales_por_concepto(self) -> list[TotalConcepto]:
        """Cantidad y suma de pagos por concepto, histórico completo."""
        pass

    @abstractmethod
    async def obtener_pagos_periodo(
        self,
        periodo: PeriodoReferencia,
    ) -> list[tuple[Pago, Propiedad]]:
        """Pagos de un período de referencia con su propiedad, ordenados por propiedad."""
        pass

    @abstractmethod
    async def obtener_pagos_propiedad(self, propiedad_id: int) -> list[Pago]:
        """Historial de pagos de una propiedad, del período más reciente al más antiguo."""
        pass
