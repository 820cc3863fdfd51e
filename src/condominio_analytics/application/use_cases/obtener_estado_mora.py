"""Caso de uso: Estado de mora de una propiedad."""
from datetime import date

from condominio_analytics.application.ports.libro_pagos_repository import LibroPagosRepository
from condominio_analytics.application.services.agregador_cartera import AgregadorCartera
from condominio_analytics.domain.exceptions import PropiedadNoEncontrada
from condominio_analytics.infrastructure.config.settings import Settings


class ObtenerEstadoMora:
    """Caso de uso para consultar el escáner de mora sobre una sola propiedad."""

    def __init__(self, libro: LibroPagosRepository, settings: Settings | None = None):
        self.agregador = AgregadorCartera(libro, settings=settings)

    async def execute(
        self,
        propiedad_id: int,
        fecha_corte: date,
        meses_retroactivos: int | None = None,
    ) -> dict:
        """
        Ejecuta el escáner para una propiedad.

        Las propiedades inactivas también se escanean; el payload lo indica en
        `active` para que el llamador decida.

        Raises:
            PropiedadNoEncontrada: si el ID no existe
            AgregacionFallida: si el libro falla o no responde a tiempo
        """

        propiedad = await self.agregador.obtener_propiedad(propiedad_id)
        if propiedad is None:
            raise PropiedadNoEncontrada(propiedad_id)

        resultado = await self.agregador.escanear_propiedad(
            propiedad.id,
            fecha_corte,
            meses_retroactivos=meses_retroactivos,
        )

        return {
            "propertyId": propiedad.id,
            "propertyNumber": propiedad.numero,
            "active": propiedad.esta_activa,
            "isCurrent": resultado.al_dia,
            "oldestUnpaidPeriod": (
                str(resultado.periodo_mas_antiguo) if resultado.periodo_mas_antiguo else None
            ),
            "monthsInArrears": resultado.meses_en_mora,
            "estimatedDebt": f"{resultado.deuda_estimada:.2f}",
        }
