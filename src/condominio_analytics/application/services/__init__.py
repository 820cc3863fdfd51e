"""Servicios de aplicación."""
from condominio_analytics.application.services.agregador_cartera import (
    AgregadorCartera,
    ordenar_deudores,
)
from condominio_analytics.application.services.consulta_libro import consultar_libro, en_paralelo

__all__ = ["AgregadorCartera", "ordenar_deudores", "consultar_libro", "en_paralelo"]
