"""Entry point for the catalog search server."""

import contextlib
import sys

import structlog
import uvicorn

from catalog.app import create_app
from catalog.config import Settings
from catalog.logging import configure_logging

logger = structlog.get_logger()


def main() -> None:
    """Entry point for python -m catalog.

    uvicorn handles SIGTERM/SIGINT, finishing in-flight requests for up
    to ``shutdown_timeout`` seconds before exiting.
    """
    settings = Settings()
    configure_logging(debug=settings.debug, json_logs=settings.log_json)

    app = create_app(settings)
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "warning",
        access_log=False,
        timeout_graceful_shutdown=int(settings.shutdown_timeout),
    )

    with contextlib.suppress(KeyboardInterrupt):
        uvicorn.Server(config).run()

    logger.info("server_exited")
    sys.exit(0)


if __name__ == "__main__":
    main()
