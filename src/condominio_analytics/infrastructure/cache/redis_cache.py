"""Servicio de caché con Redis."""
import json
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

from condominio_analytics.domain.value_objects.periodo_referencia import PeriodoReferencia
from condominio_analytics.infrastructure.config.logging import logger
from condominio_analytics.infrastructure.config.settings import get_settings


class RedisCache:
    """Gestor de caché con Redis."""

    def __init__(self):
        self._client: redis.Redis | None = None

    async def initialize(self) -> None:
        """Inicializa conexión a Redis."""
        settings = get_settings()

        client = redis.Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            db=settings.redis_db,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_keepalive=True,
        )

        # Verificar conexión antes de publicar el cliente
        await client.ping()
        self._client = client

    async def close(self) -> None:
        """Cierra conexión."""
        if self._client:
            await self._client.aclose()

    async def ping(self) -> bool:
        """Indica si Redis responde."""
        if not self._client:
            return False
        try:
            return bool(await self._client.ping())
        except RedisError:
            return False

    async def get(self, key: str) -> Any | None:
        """Obtiene valor del caché."""
        if not self._client:
            return None

        try:
            value = await self._client.get(key)
            if value:
                return json.loads(value)
        except (RedisError, ValueError) as e:
            logger.warning(f"Error obteniendo de caché '{key}': {e}")

        return None

    async def set(
        self,
        key: str,
        value: Any,
        ttl: int | None = None,
    ) -> bool:
        """Guarda valor en caché."""
        if not self._client:
            return False

        try:
            settings = get_settings()
            ttl = ttl or settings.redis_ttl

            serialized = json.dumps(value, default=str)
            await self._client.setex(key, ttl, serialized)
            return True
        except (RedisError, TypeError) as e:
            logger.warning(f"Error guardando en caché '{key}': {e}")
            return False

    async def clear_pattern(self, pattern: str) -> int:
        """Elimina todas las keys que coincidan con el patrón."""
        if not self._client:
            return 0

        try:
            keys = []
            async for key in self._client.scan_iter(match=pattern):
                keys.append(key)

            if keys:
                return await self._client.delete(*keys)
            return 0
        except RedisError as e:
            logger.warning(f"Error limpiando patrón '{pattern}': {e}")
            return 0

    async def invalidar_por_pago(self, propiedad_id: int, periodo: PeriodoReferencia) -> int:
        """
        Invalida las respuestas afectadas por un alta, cambio o baja de pago.

        Los acumulados de cartera dependen de todo el libro y se limpian
        completos; los reportes por propiedad y por período solo en lo que
        tocan.
        """
        patrones = patrones_invalidacion(propiedad_id, periodo)

        eliminadas = 0
        for patron in patrones:
            eliminadas += await self.clear_pattern(patron)

        logger.info(
            f"Caché invalidado por pago propiedad={propiedad_id} periodo={periodo}: "
            f"{eliminadas} keys"
        )
        return eliminadas


def patrones_invalidacion(propiedad_id: int, periodo: PeriodoReferencia) -> list[str]:
    """Patrones de keys afectados por un pago de la propiedad en el período."""
    return [
        "resumen:*",
        "tendencias:*",
        "deudores:*",
        "cartera:*",
        f"reporte:{periodo}",
        f"historial:{propiedad_id}",
        f"mora:{propiedad_id}:*",
    ]


# Instancia global
redis_cache = RedisCache()
