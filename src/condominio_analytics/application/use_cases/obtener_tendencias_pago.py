"""Caso de uso: Tendencias de recaudo para gráficos."""
from datetime import date

from condominio_analytics.application.formato import concepto_a_dict, tendencia_a_dict
from condominio_analytics.application.ports.libro_pagos_repository import LibroPagosRepository
from condominio_analytics.application.services.agregador_cartera import AgregadorCartera
from condominio_analytics.application.services.consulta_libro import en_paralelo


class ObtenerTendenciasPago:
    """Caso de uso para la tendencia mensual y la distribución por concepto."""

    def __init__(self, libro: LibroPagosRepository):
        self.agregador = AgregadorCartera(libro)

    async def execute(self, fecha_corte: date, meses: int | None = None) -> dict:
        """
        Ejecuta el caso de uso.

        Args:
            fecha_corte: Fecha de referencia de la ventana
            meses: Largo de la ventana (default: configuración)
        """

        tendencia, distribucion = await en_paralelo(
            self.agregador.tendencia_mensual(fecha_corte, meses),
            self.agregador.distribucion_conceptos(),
        )

        return {
            "monthlyTrend": [tendencia_a_dict(t) for t in tendencia],
            "conceptDistribution": [concepto_a_dict(c) for c in distribucion],
        }
