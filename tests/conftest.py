"""Configuración de pytest y fixtures compartidas."""
import asyncio
import os
from collections.abc import Iterator
from datetime import date
from decimal import Decimal

import pytest

# Settings exige password; debe existir antes de importar la app
os.environ.setdefault("DB_PASSWORD", "test")

from fastapi.testclient import TestClient  # noqa: E402

from condominio_analytics.application.ports.libro_pagos_repository import (  # noqa: E402
    LibroPagosRepository,
)
from condominio_analytics.domain.entities.pago import Pago  # noqa: E402
from condominio_analytics.domain.entities.propiedad import Propiedad  # noqa: E402
from condominio_analytics.domain.entities.resumen_cartera import TotalConcepto  # noqa: E402
from condominio_analytics.domain.value_objects.concepto_pago import (  # noqa: E402
    ConceptoPago,
    EstadoPropiedad,
    MetodoPago,
)
from condominio_analytics.domain.value_objects.periodo_referencia import (  # noqa: E402
    PeriodoReferencia,
)
from condominio_analytics.infrastructure.config.settings import Settings  # noqa: E402


class LibroPagosEnMemoria(LibroPagosRepository):
    """Libro de pagos en memoria para pruebas de aplicación y API."""

    def __init__(self) -> None:
        self.propiedades: dict[int, Propiedad] = {}
        self.pagos: list[Pago] = []
        self.falla: Exception | None = None
        self.demora: float = 0.0
        # Falla y demora por consulta, por nombre de método del puerto
        self.fallas: dict[str, Exception] = {}
        self.demoras: dict[str, float] = {}
        self.completadas: list[str] = []
        self.consultas_periodos: int = 0

    # Helpers de armado -------------------------------------------------

    def agregar_propiedad(
        self,
        numero: str,
        propietario: str = "Propietario",
        estado: EstadoPropiedad = EstadoPropiedad.ACTIVA,
        **kwargs,
    ) -> Propiedad:
        propiedad = Propiedad(
            id=len(self.propiedades) + 1,
            numero=numero,
            propietario=propietario,
            estado=estado,
            **kwargs,
        )
        self.propiedades[propiedad.id] = propiedad
        return propiedad

    def registrar_pago(
        self,
        propiedad: Propiedad,
        año: int,
        mes: int,
        monto: str = "50.00",
        concepto: ConceptoPago = ConceptoPago.CUOTA_MENSUAL,
        fecha_pago: date | None = None,
        metodo_pago: MetodoPago = MetodoPago.TRANSFERENCIA,
    ) -> Pago:
        pago = Pago(
            id=len(self.pagos) + 1,
            propiedad_id=propiedad.id,
            concepto=concepto,
            monto=Decimal(monto),
            fecha_pago=fecha_pago or date(año, mes, 5),
            mes_referencia=mes,
            año_referencia=año,
            metodo_pago=metodo_pago,
        )
        self.pagos.append(pago)
        return pago

    async def _acceder(self, consulta: str) -> None:
        demora = self.demoras.get(consulta, self.demora)
        if demora:
            await asyncio.sleep(demora)
        falla = self.fallas.get(consulta, self.falla)
        if falla is not None:
            raise falla
        self.completadas.append(consulta)

    # Puerto ------------------------------------------------------------

    async def obtener_propiedad(self, propiedad_id: int) -> Propiedad | None:
        await self._acceder("obtener_propiedad")
        return self.propiedades.get(propiedad_id)

    async def obtener_propiedades_activas(self) -> list[Propiedad]:
        await self._acceder("obtener_propiedades_activas")
        return [p for p in self.propiedades.values() if p.esta_activa]

    async def obtener_periodos_pagados(self, propiedad_id, desde, hasta):
        await self._acceder("obtener_periodos_pagados")
        self.consultas_periodos += 1
        return {
            p.periodo
            for p in self.pagos
            if p.propiedad_id == propiedad_id and desde <= p.periodo <= hasta
        }

    async def obtener_propiedades_con_pago(self, periodo):
        await self._acceder("obtener_propiedades_con_pago")
        return {p.propiedad_id for p in self.pagos if p.periodo == periodo}

    async def sumar_cobrado(self, fecha_inicio, fecha_fin):
        await self._acceder("sumar_cobrado")
        return sum(
            (p.monto for p in self.pagos if fecha_inicio <= p.fecha_pago <= fecha_fin),
            Decimal("0"),
        )

    async def obtener_totales_por_periodo(self, desde, hasta):
        await self._acceder("obtener_totales_por_periodo")
        totales: dict[PeriodoReferencia, Decimal] = {}
        for p in self.pagos:
            if desde <= p.periodo <= hasta:
                totales[p.periodo] = totales.get(p.periodo, Decimal("0")) + p.monto
        return totales

    async def obtener_totales_por_concepto(self):
        await self._acceder("obtener_totales_por_concepto")
        acumulado: dict[ConceptoPago, tuple[int, Decimal]] = {}
        for p in self.pagos:
            cantidad, total = acumulado.get(p.concepto, (0, Decimal("0")))
            acumulado[p.concepto] = (cantidad + 1, total + p.monto)
        return [
            TotalConcepto(concepto=c, cantidad=cantidad, total=total)
            for c, (cantidad, total) in acumulado.items()
        ]

    async def obtener_pagos_periodo(self, periodo):
        await self._acceder("obtener_pagos_periodo")
        pagos = sorted(
            (p for p in self.pagos if p.periodo == periodo),
            key=lambda p: (p.propiedad_id, p.id),
        )
        return [(p, self.propiedades[p.propiedad_id]) for p in pagos]

    async def obtener_pagos_propiedad(self, propiedad_id):
        await self._acceder("obtener_pagos_propiedad")
        return sorted(
            (p for p in self.pagos if p.propiedad_id == propiedad_id),
            key=lambda p: (p.año_referencia, p.mes_referencia, p.id),
            reverse=True,
        )


@pytest.fixture
def fecha_corte() -> date:
    """Fecha "hoy" fija para todos los cálculos."""
    return date(2024, 6, 1)


@pytest.fixture
def settings() -> Settings:
    """Configuración con los valores por defecto del motor."""
    return Settings(db_password="test")


@pytest.fixture
def libro() -> LibroPagosEnMemoria:
    """Libro de pagos vacío."""
    return LibroPagosEnMemoria()


@pytest.fixture
def libro_con_cartera(libro: LibroPagosEnMemoria) -> LibroPagosEnMemoria:
    """
    Cinco propiedades activas y una inactiva a junio de 2024.

    - 101, 102, 103 pagaron junio
    - 104 pagó abril pero no mayo ni junio
    - 105 no tiene pagos
    - 900 está inactiva y sin pagos
    """
    p101 = libro.agregar_propiedad("101", "Ana Gómez", correo="ana@example.com")
    p102 = libro.agregar_propiedad("102", "Luis Pérez")
    p103 = libro.agregar_propiedad("103", "Marta Ruiz")
    p104 = libro.agregar_propiedad("104", "Jorge Díaz", telefono="3001234567")
    libro.agregar_propiedad("105", "Sofía León")
    libro.agregar_propiedad("900", "Bodega", estado=EstadoPropiedad.INACTIVA)

    libro.registrar_pago(p101, 2024, 6)
    libro.registrar_pago(p101, 2024, 6, monto="20.00", concepto=ConceptoPago.AGUA)
    libro.registrar_pago(p102, 2024, 6)
    libro.registrar_pago(p103, 2024, 6, fecha_pago=date(2024, 5, 30))
    libro.registrar_pago(p104, 2024, 4, concepto=ConceptoPago.PARQUEADERO, monto="30.00")
    return libro


@pytest.fixture
def client(libro_con_cartera: LibroPagosEnMemoria, fecha_corte: date) -> Iterator[TestClient]:
    """Cliente HTTP con el libro en memoria y la fecha de corte fijada."""
    from condominio_analytics.interfaces.api.dependencies import (
        obtener_fecha_corte,
        obtener_libro_pagos,
    )
    from condominio_analytics.interfaces.api.main import app

    app.dependency_overrides[obtener_libro_pagos] = lambda: libro_con_cartera
    app.dependency_overrides[obtener_fecha_corte] = lambda: fecha_corte

    # Sin lifespan: ni base de datos ni Redis, el caché queda inactivo
    yield TestClient(app)

    app.dependency_overrides.clear()

