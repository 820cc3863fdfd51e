"""Pruebas del acceso acotado al libro de pagos."""
import asyncio

import pytest

from condominio_analytics.application.services.consulta_libro import consultar_libro, en_paralelo
from condominio_analytics.domain.exceptions import AgregacionFallida, ErrorLibroPagos


async def _valor(valor, demora: float = 0.0, terminadas: list | None = None):
    await asyncio.sleep(demora)
    if terminadas is not None:
        terminadas.append(valor)
    return valor


async def _falla(demora: float = 0.0):
    await asyncio.sleep(demora)
    raise ErrorLibroPagos("caído")


async def _error_de_valor():
    raise ValueError("ventana inválida")


class TestEnParalelo:

    async def test_resultados_en_orden(self) -> None:
        assert await en_paralelo(_valor("a", 0.02), _valor("b")) == ["a", "b"]

    async def test_sin_pasos(self) -> None:
        assert await en_paralelo() == []

    async def test_primera_falla_cancela_pendientes(self) -> None:
        terminadas: list[str] = []

        with pytest.raises(ErrorLibroPagos):
            await en_paralelo(_valor("lenta", 0.2, terminadas), _falla())

        await asyncio.sleep(0.3)
        assert terminadas == []


class TestConsultarLibro:

    async def test_devuelve_el_resultado(self) -> None:
        assert await consultar_libro("valor", _valor(3), timeout=1.0) == 3

    async def test_error_del_libro(self) -> None:
        with pytest.raises(AgregacionFallida) as exc_info:
            await consultar_libro("falla", _falla(), timeout=1.0)

        assert isinstance(exc_info.value.__cause__, ErrorLibroPagos)

    async def test_tiempo_agotado_cancela_la_consulta(self) -> None:
        terminadas: list[str] = []

        with pytest.raises(AgregacionFallida):
            await consultar_libro("lenta", _valor("lenta", 1.0, terminadas), timeout=0.05)

        assert terminadas == []

    async def test_otras_excepciones_no_se_envuelven(self) -> None:
        with pytest.raises(ValueError):
            await consultar_libro("otra", en_paralelo(_valor(1), _error_de_valor()), timeout=1.0)
