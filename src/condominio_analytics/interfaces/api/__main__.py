"""Arranque del servicio con uvicorn."""
import uvicorn

from condominio_analytics.infrastructure.config.settings import get_settings


def main() -> None:
    settings = get_settings()

    uvicorn.run(
        "condominio_analytics.interfaces.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        workers=None if settings.api_reload else settings.api_workers,
    )


if __name__ == "__main__":
    main()
