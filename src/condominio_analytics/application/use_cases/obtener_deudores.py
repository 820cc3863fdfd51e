"""Caso de uso: Listado de deudores con detalle de mora."""
from datetime import date

from condominio_analytics.application.formato import deudor_a_dict
from condominio_analytics.application.ports.libro_pagos_repository import LibroPagosRepository
from condominio_analytics.application.services.agregador_cartera import AgregadorCartera


class ObtenerDeudores:
    """Caso de uso compartido por el dashboard y el reporte de deudores."""

    def __init__(self, libro: LibroPagosRepository):
        self.agregador = AgregadorCartera(libro)

    async def execute(self, fecha_corte: date, ordenar_por: str | None = None) -> dict:
        """Ejecuta el caso de uso."""

        deudores = await self.agregador.deudores(fecha_corte, ordenar_por=ordenar_por)

        return {"debtors": [deudor_a_dict(d) for d in deudores]}
