"""Caso de uso: Obtener resumen financiero del dashboard."""
from datetime import date

from condominio_analytics.application.formato import monto
from condominio_analytics.application.ports.libro_pagos_repository import LibroPagosRepository
from condominio_analytics.application.services.agregador_cartera import AgregadorCartera
from condominio_analytics.application.services.consulta_libro import en_paralelo
from condominio_analytics.infrastructure.config.settings import Settings


class ObtenerResumenDashboard:
    """Caso de uso para el resumen del mes: recaudo, deudores y cumplimiento."""

    def __init__(self, libro: LibroPagosRepository, settings: Settings | None = None):
        self.agregador = AgregadorCartera(libro, settings=settings)

    async def execute(self, fecha_corte: date) -> dict:
        """Ejecuta el caso de uso."""

        total, cumplimiento = await en_paralelo(
            self.agregador.total_cobrado(fecha_corte),
            self.agregador.cumplimiento(fecha_corte),
        )

        return {
            "totalCollectedThisMonth": monto(total),
            "debtorCount": cumplimiento.deudores,
            # Los saldos a favor no se registran todavía
            "creditCount": 0,
            "compliancePercentage": cumplimiento.porcentaje,
        }
