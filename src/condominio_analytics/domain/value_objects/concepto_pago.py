"""Value Object para conceptos de pago."""
from enum import Enum


class ConceptoPago(str, Enum):
    """Categoría de cuota a la que corresponde un pago."""

    CUOTA_MENSUAL = "monthly_fee"
    AGUA = "water"
    CASA_COMUNAL = "communal_house"
    PARQUEADERO = "parking"

    @property
    def descripcion(self) -> str:
        """Descripción del concepto."""
        descripciones = {
            ConceptoPago.CUOTA_MENSUAL: "Cuota de administración mensual",
            ConceptoPago.AGUA: "Consumo de agua",
            ConceptoPago.CASA_COMUNAL: "Uso de casa comunal",
            ConceptoPago.PARQUEADERO: "Puesto de parqueadero",
        }
        return descripciones[self]


class MetodoPago(str, Enum):
    """Medio con el que se realizó el pago."""

    EFECTIVO = "cash"
    TRANSFERENCIA = "transfer"
    CONSIGNACION = "deposit"


class EstadoPropiedad(str, Enum):
    """Ciclo de vida de una propiedad."""

    ACTIVA = "active"
    INACTIVA = "inactive"
