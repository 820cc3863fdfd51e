"""Configuración de logging estructurado."""
import logging
import sys

NOMBRE_LOGGER = "condominio_analytics"

# Handler de stdout instalado por setup_logging
_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configura logging para toda la aplicación.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Logger configurado
    """
    global _handler

    log_format = (
        "%(asctime)s | %(levelname)-8s | %(name)-30s | "
        "%(funcName)-20s | %(message)s"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    # Evitar handlers duplicados si el lifespan se ejecuta más de una vez
    if _handler is None or _handler not in root_logger.handlers:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(log_format, datefmt="%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(_handler)

    # Reducir ruido de librerías externas
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)

    app_logger = logging.getLogger(NOMBRE_LOGGER)
    app_logger.setLevel(getattr(logging, level.upper()))

    return app_logger


# Logger global de la aplicación
logger = logging.getLogger(NOMBRE_LOGGER)
