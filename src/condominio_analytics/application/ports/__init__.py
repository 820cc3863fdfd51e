"""Puertos de la aplicación."""
from condominio_analytics.application.ports.libro_pagos_repository import LibroPagosRepository

__all__ = ["LibroPagosRepository"]
