"""Caso de uso: Reporte mensual de recaudo por período de referencia."""
import polars as pl

from condominio_analytics.application.formato import monto
from condominio_analytics.application.ports.libro_pagos_repository import LibroPagosRepository
from condominio_analytics.application.services.consulta_libro import consultar_libro
from condominio_analytics.domain.value_objects.periodo_referencia import PeriodoReferencia
from condominio_analytics.infrastructure.config.settings import Settings, get_settings


class ObtenerReporteMensual:
    """Caso de uso para el reporte de pagos de un mes de referencia."""

    def __init__(self, libro: LibroPagosRepository, settings: Settings | None = None):
        self.libro = libro
        self.settings = settings or get_settings()

    async def execute(self, año: int, mes: int) -> dict:
        """
        Genera el reporte de un mes.

        Args:
            año: Año de referencia (1900-2100)
            mes: Mes de referencia (1-12)

        Raises:
            PeriodoInvalido: si mes o año están fuera de rango
            AgregacionFallida: si el libro falla o no responde a tiempo
        """

        # Valida antes de consultar el libro
        periodo = PeriodoReferencia(año=año, mes=mes)

        pagos = await consultar_libro(
            f"reporte {periodo}",
            self.libro.obtener_pagos_periodo(periodo),
            self.settings.timeout_libro_segundos,
        )

        filas = [
            {
                "id": pago.id,
                "property": propiedad.numero,
                "owner": propiedad.propietario,
                "concept": pago.concepto.value,
                "amount": monto(pago.monto),
                "paymentDate": pago.fecha_pago.isoformat(),
                "paymentMethod": pago.metodo_pago.value,
                "observations": pago.observaciones,
            }
            for pago, propiedad in pagos
        ]

        if not filas:
            return {
                "period": str(periodo),
                "totalCollected": 0.0,
                "conceptBreakdown": {},
                "payments": [],
            }

        df = pl.DataFrame(
            {
                "concept": [f["concept"] for f in filas],
                "amount": [f["amount"] for f in filas],
            },
            schema={"concept": pl.Utf8, "amount": pl.Float64},
        )

        # Agrupar por concepto respetando el orden de aparición
        df_conceptos = df.group_by("concept", maintain_order=True).agg(
            pl.len().alias("count"),
            pl.col("amount").sum().round(2).alias("total"),
        )

        return {
            "period": str(periodo),
            "totalCollected": round(df["amount"].sum(), 2),
            "conceptBreakdown": {
                fila["concept"]: {"count": fila["count"], "total": fila["total"]}
                for fila in df_conceptos.to_dicts()
            },
            "payments": filas,
        }
