"""Implementaciones de repositorios."""
from condominio_analytics.infrastructure.database.repositories.libro_pagos_repository_impl import (
    LibroPagosRepositoryImpl,
)

__all__ = ["LibroPagosRepositoryImpl"]
