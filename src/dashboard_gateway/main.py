"""Dashboard gateway entry point."""

import uvicorn

from .config import LoggingConfig, get_settings

# Configure logging based on environment
LoggingConfig.configure()

from .app import create_app

logger = LoggingConfig.get_logger(__name__)


def main() -> None:
    """Run the application."""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
        access_log=True,
        log_config=None,
    )


if __name__ == "__main__":
    main()
