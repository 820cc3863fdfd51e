"""Jerarquía de excepciones del dominio."""


class CondominioAnalyticsError(Exception):
    """Excepción base de la aplicación."""


class PropiedadNoEncontrada(CondominioAnalyticsError):
    """La propiedad referenciada no existe."""

    def __init__(self, propiedad_id: int):
        self.propiedad_id = propiedad_id
        super().__init__(f"Propiedad {propiedad_id} no encontrada")


class PeriodoInvalido(CondominioAnalyticsError, ValueError):
    """Mes o año de referencia fuera de rango."""


class ErrorLibroPagos(CondominioAnalyticsError):
    """Falla al consultar el libro de pagos."""


class AgregacionFallida(CondominioAnalyticsError):
    """La agregación de cartera no pudo completarse."""
