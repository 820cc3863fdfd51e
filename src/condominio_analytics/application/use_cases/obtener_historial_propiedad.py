"""Caso de uso: Obtener historial completo de pagos de una propiedad."""
from decimal import Decimal

from condominio_analytics.application.formato import monto, pago_a_dict, propiedad_a_dict
from condominio_analytics.application.ports.libro_pagos_repository import LibroPagosRepository
from condominio_analytics.application.services.consulta_libro import consultar_libro, en_paralelo
from condominio_analytics.domain.exceptions import PropiedadNoEncontrada
from condominio_analytics.infrastructure.config.settings import Settings, get_settings


class ObtenerHistorialPropiedad:
    """Caso de uso para el historial individual de una propiedad."""

    def __init__(self, libro: LibroPagosRepository, settings: Settings | None = None):
        self.libro = libro
        self.settings = settings or get_settings()

    async def execute(self, propiedad_id: int) -> dict:
        """
        Trae todos los pagos históricos de la propiedad y su total pagado.

        Raises:
            PropiedadNoEncontrada: si el ID no existe
            AgregacionFallida: si el libro falla o no responde a tiempo
        """

        propiedad, pagos = await consultar_libro(
            f"historial de propiedad {propiedad_id}",
            en_paralelo(
                self.libro.obtener_propiedad(propiedad_id),
                self.libro.obtener_pagos_propiedad(propiedad_id),
            ),
            self.settings.timeout_libro_segundos,
        )
        if propiedad is None:
            raise PropiedadNoEncontrada(propiedad_id)

        total_pagado = sum((p.monto for p in pagos), Decimal("0"))

        return {
            "property": propiedad_a_dict(propiedad),
            "payments": [pago_a_dict(p) for p in pagos],
            "totalPaid": monto(total_pagado),
        }
