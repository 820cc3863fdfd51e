"""Casos de uso de la aplicación."""
from condominio_analytics.application.use_cases.obtener_deudores import ObtenerDeudores
from condominio_analytics.application.use_cases.obtener_estado_mora import ObtenerEstadoMora
from condominio_analytics.application.use_cases.obtener_historial_propiedad import (
    ObtenerHistorialPropiedad,
)
from condominio_analytics.application.use_cases.obtener_reporte_mensual import ObtenerReporteMensual
from condominio_analytics.application.use_cases.obtener_resumen_cartera import ObtenerResumenCartera
from condominio_analytics.application.use_cases.obtener_resumen_dashboard import (
    ObtenerResumenDashboard,
)
from condominio_analytics.application.use_cases.obtener_tendencias_pago import ObtenerTendenciasPago

__all__ = [
    "ObtenerDeudores",
    "ObtenerEstadoMora",
    "ObtenerHistorialPropiedad",
    "ObtenerReporteMensual",
    "ObtenerResumenCartera",
    "ObtenerResumenDashboard",
    "ObtenerTendenciasPago",
]
