"""Dependencias compartidas de FastAPI."""
from datetime import date

from condominio_analytics.application.ports.libro_pagos_repository import LibroPagosRepository
from condominio_analytics.infrastructure.database.connection import db_manager
from condominio_analytics.infrastructure.database.repositories.libro_pagos_repository_impl import (
    LibroPagosRepositoryImpl,
)


def obtener_fecha_corte() -> date:
    """
    Reloj de la aplicación: la fecha "hoy" de todos los cálculos.

    Se inyecta como dependencia para poder fijarla en pruebas con
    `app.dependency_overrides`.
    """
    return date.today()


def obtener_libro_pagos() -> LibroPagosRepository:
    """Libro de pagos respaldado por la base de datos."""
    return LibroPagosRepositoryImpl(db_manager.session_factory)
