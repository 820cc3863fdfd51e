"""Implementación del libro de pagos sobre SQLAlchemy."""
from contextlib import asynccontextmanager
from datetime import date
from decimal import Decimal
from typing import AsyncGenerator

from sqlalchemy import and_, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from condominio_analytics.application.ports.libro_pagos_repository import LibroPagosRepository
from condominio_analytics.domain.entities.pago import Pago
from condominio_analytics.domain.entities.propiedad import Propiedad
from condominio_analytics.domain.entities.resumen_cartera import TotalConcepto
from condominio_analytics.domain.exceptions import ErrorLibroPagos
from condominio_analytics.domain.value_objects.concepto_pago import (
    ConceptoPago,
    EstadoPropiedad,
    MetodoPago,
)
from condominio_analytics.domain.value_objects.periodo_referencia import PeriodoReferencia
from condominio_analytics.infrastructure.config.logging import logger
from condominio_analytics.infrastructure.database.models import Payment, Property

# Índice absoluto de mes, comparable con PeriodoReferencia.indice
INDICE_PERIODO = Payment.reference_year * 12 + Payment.reference_month - 1


def _a_decimal(valor) -> Decimal:
    if valor is None:
        return Decimal("0.00")
    return Decimal(str(valor))


def _a_propiedad(fila: Property) -> Propiedad:
    return Propiedad(
        id=fila.id,
        numero=fila.property_number,
        propietario=fila.owner_name,
        correo=fila.contact_email,
        telefono=fila.contact_phone,
        puestos_parqueo=fila.parking_spaces or 0,
        estado=EstadoPropiedad(fila.status),
    )


def _a_pago(fila: Payment) -> Pago:
    return Pago(
        id=fila.id,
        propiedad_id=fila.property_id,
        concepto=ConceptoPago(fila.concept),
        monto=_a_decimal(fila.amount),
        fecha_pago=fila.payment_date,
        mes_referencia=fila.reference_month,
        año_referencia=fila.reference_year,
        metodo_pago=MetodoPago(fila.payment_method),
        observaciones=fila.observations,
    )


class LibroPagosRepositoryImpl(LibroPagosRepository):
    """
    Implementación de solo lectura del libro de pagos.

    Recibe la fábrica de sesiones y no una sesión: el agregador lanza
    consultas en paralelo y una AsyncSession no admite operaciones
    concurrentes.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _sesion(self) -> AsyncGenerator[AsyncSession, None]:
        try:
            async with self.session_factory() as session:
                yield session
        except SQLAlchemyError as exc:
            logger.error(f"Error consultando el libro de pagos: {exc}")
            raise ErrorLibroPagos(str(exc)) from exc

    async def obtener_propiedad(self, propiedad_id: int) -> Propiedad | None:
        """Obtiene una propiedad por ID."""
        async with self._sesion() as session:
            fila = await session.get(Property, propiedad_id)
            return _a_propiedad(fila) if fila else None

    async def obtener_propiedades_activas(self) -> list[Propiedad]:
        """Obtiene todas las propiedades activas ordenadas por ID."""
        query = (
            select(Property)
            .where(Property.status == EstadoPropiedad.ACTIVA.value)
            .order_by(Property.id)
        )
        async with self._sesion() as session:
            result = await session.execute(query)
            return [_a_propiedad(fila) for fila in result.scalars().all()]

    async def obtener_periodos_pagados(
        self,
        propiedad_id: int,
        desde: PeriodoReferencia,
        hasta: PeriodoReferencia,
    ) -> set[PeriodoReferencia]:
        """Períodos con al menos un pago, sin importar concepto ni monto."""
        query = (
            select(Payment.reference_year, Payment.reference_month)
            .where(
                and_(
                    Payment.property_id == propiedad_id,
                    INDICE_PERIODO >= desde.indice,
                    INDICE_PERIODO <= hasta.indice,
                )
            )
            .distinct()
        )
        async with self._sesion() as session:
            result = await session.execute(query)
            return {
                PeriodoReferencia(año=row.reference_year, mes=row.reference_month)
                for row in result.all()
            }

    async def obtener_propiedades_con_pago(self, periodo: PeriodoReferencia) -> set[int]:
        """IDs de propiedades con pago para el período de referencia."""
        query = (
            select(Payment.property_id)
            .where(
                and_(
                    Payment.reference_month == periodo.mes,
                    Payment.reference_year == periodo.año,
                )
            )
            .group_by(Payment.property_id)
        )
        async with self._sesion() as session:
            result = await session.execute(query)
            return set(result.scalars().all())

    async def sumar_cobrado(self, fecha_inicio: date, fecha_fin: date) -> Decimal:
        """Suma por fecha real de pago, no por período de referencia."""
        query = select(func.coalesce(func.sum(Payment.amount), 0)).where(
            Payment.payment_date.between(fecha_inicio, fecha_fin)
        )
        async with self._sesion() as session:
            result = await session.execute(query)
            return _a_decimal(result.scalar_one())

    async def obtener_totales_por_periodo(
        self,
        desde: PeriodoReferencia,
        hasta: PeriodoReferencia,
    ) -> dict[PeriodoReferencia, Decimal]:
        """Suma de montos agrupada por (año, mes) de referencia."""
        query = (
            select(
                Payment.reference_year,
                Payment.reference_month,
                func.sum(Payment.amount).label("total"),
            )
            .where(
                and_(
                    INDICE_PERIODO >= desde.indice,
                    INDICE_PERIODO <= hasta.indice,
                )
            )
            .group_by(Payment.reference_year, Payment.reference_month)
            .order_by(Payment.reference_year, Payment.reference_month)
        )
        async with self._sesion() as session:
            result = await session.execute(query)
            return {
                PeriodoReferencia(año=row.reference_year, mes=row.reference_month): _a_decimal(
                    row.total
                )
                for row in result.all()
            }

    async def obtener_totales_por_concepto(self) -> list[TotalConcepto]:
        """Cantidad y suma por concepto sobre todo el histórico."""
        query = select(
            Payment.concept,
            func.count(Payment.id).label("cantidad"),
            func.sum(Payment.amount).label("total"),
        ).group_by(Payment.concept)
        async with self._sesion() as session:
            result = await session.execute(query)
            return [
                TotalConcepto(
                    concepto=ConceptoPago(row.concept),
                    cantidad=int(row.cantidad),
                    total=_a_decimal(row.total),
                )
                for row in result.all()
            ]

    async def obtener_pagos_periodo(
        self,
        periodo: PeriodoReferencia,
    ) -> list[tuple[Pago, Propiedad]]:
        """Pagos del período con su propiedad, ordenados por propiedad."""
        query = (
            select(Payment, Property)
            .join(Property, Payment.property_id == Property.id)
            .where(
                and_(
                    Payment.reference_month == periodo.mes,
                    Payment.reference_year == periodo.año,
                )
            )
            .order_by(Payment.property_id, Payment.id)
        )
        async with self._sesion() as session:
            result = await session.execute(query)
            return [(_a_pago(pago), _a_propiedad(prop)) for pago, prop in result.all()]

    async def obtener_pagos_propiedad(self, propiedad_id: int) -> list[Pago]:
        """Historial de la propiedad, del período más reciente al más antiguo."""
        query = (
            select(Payment)
            .where(Payment.property_id == propiedad_id)
            .order_by(
                Payment.reference_year.desc(),
                Payment.reference_month.desc(),
                Payment.id.desc(),
            )
        )
        async with self._sesion() as session:
            result = await session.execute(query)
            return [_a_pago(fila) for fila in result.scalars().all()]
