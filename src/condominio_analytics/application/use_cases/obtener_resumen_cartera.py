"""Caso de uso: Resumen completo de la cartera."""
from datetime import date

from condominio_analytics.application.formato import (
    concepto_a_dict,
    deudor_a_dict,
    monto,
    tendencia_a_dict,
)
from condominio_analytics.application.ports.libro_pagos_repository import LibroPagosRepository
from condominio_analytics.application.services.agregador_cartera import AgregadorCartera


class ObtenerResumenCartera:
    """Caso de uso que ejecuta todos los pasos del agregador en una sola llamada."""

    def __init__(self, libro: LibroPagosRepository):
        self.agregador = AgregadorCartera(libro)

    async def execute(self, fecha_corte: date) -> dict:
        """Ejecuta el caso de uso."""

        resumen = await self.agregador.agregar(fecha_corte)

        return {
            "period": str(resumen.periodo),
            "totalCollectedThisPeriod": monto(resumen.total_cobrado_mes),
            "activeCount": resumen.cumplimiento.total_activas,
            "compliantCount": resumen.al_dia,
            "debtorCount": resumen.deudores,
            "compliancePercentage": resumen.porcentaje_cumplimiento,
            "debtors": [deudor_a_dict(d) for d in resumen.lista_deudores],
            "monthlyTrend": [tendencia_a_dict(t) for t in resumen.tendencia_mensual],
            "conceptDistribution": [concepto_a_dict(c) for c in resumen.distribucion_conceptos],
        }
