"""Pruebas de la jerarquía de excepciones del dominio."""
import pytest

from condominio_analytics.domain.exceptions import (
    AgregacionFallida,
    CondominioAnalyticsError,
    ErrorLibroPagos,
    PeriodoInvalido,
    PropiedadNoEncontrada,
)


class TestJerarquia:

    @pytest.mark.parametrize(
        "excepcion",
        [AgregacionFallida, ErrorLibroPagos, PeriodoInvalido, PropiedadNoEncontrada],
    )
    def test_todas_derivan_de_la_base(self, excepcion: type) -> None:
        assert issubclass(excepcion, CondominioAnalyticsError)

    def test_propiedad_no_encontrada_guarda_el_id(self) -> None:
        error = PropiedadNoEncontrada(42)

        assert error.propiedad_id == 42
        assert str(error) == "Propiedad 42 no encontrada"
