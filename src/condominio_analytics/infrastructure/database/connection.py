"""Motor y fábrica de sesiones del libro de pagos."""
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from condominio_analytics.infrastructure.config.settings import Settings, get_settings


def _opciones_motor(settings: Settings) -> dict:
    """Opciones del engine según el dialecto de la URL configurada."""
    opciones = {"echo": settings.debug}

    # SQLite (pruebas locales) no usa pool de conexiones configurable
    if make_url(settings.database_url).get_backend_name() == "sqlite":
        return opciones

    return {
        **opciones,
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_recycle": settings.db_pool_recycle,
        "pool_pre_ping": True,
    }


class DatabaseManager:
    """
    Gestor del engine de solo lectura.

    El servicio nunca escribe: no hay commit ni rollback, cada consulta abre
    y cierra su propia sesión desde `session_factory`.
    """

    def __init__(self):
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    def initialize(self, settings: Settings | None = None) -> None:
        """Crea el engine y la fábrica de sesiones."""
        settings = settings or get_settings()

        self._engine = create_async_engine(settings.database_url, **_opciones_motor(settings))
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def close(self) -> None:
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Fábrica de sesiones; cada consulta concurrente abre la suya."""
        if not self._session_factory:
            raise RuntimeError("Database no inicializada")
        return self._session_factory

    async def verificar(self) -> None:
        """Ejecuta `SELECT 1`; propaga el error si la base no responde."""
        async with self.session_factory() as session:
            await session.execute(text("SELECT 1"))


# Instancia global
db_manager = DatabaseManager()
