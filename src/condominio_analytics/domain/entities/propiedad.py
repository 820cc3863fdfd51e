"""Entidad de propiedad (unidad residencial)."""
from dataclasses import dataclass

from condominio_analytics.domain.value_objects.concepto_pago import EstadoPropiedad


@dataclass(frozen=True)
class Propiedad:
    """Unidad del conjunto residencial."""

    id: int
    numero: str
    propietario: str
    correo: str | None = None
    telefono: str | None = None
    puestos_parqueo: int = 0
    estado: EstadoPropiedad = EstadoPropiedad.ACTIVA

    @property
    def esta_activa(self) -> bool:
        """Solo las propiedades activas participan en la detección de mora."""
        return self.estado == EstadoPropiedad.ACTIVA
