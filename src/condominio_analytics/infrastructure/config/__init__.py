"""Módulo de configuración."""
from condominio_analytics.infrastructure.config.settings import get_settings
from condominio_analytics.infrastructure.config.logging import setup_logging, logger

__all__ = ["get_settings", "setup_logging", "logger"]
