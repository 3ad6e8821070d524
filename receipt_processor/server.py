"""
Process entry-point: serve the API with uvicorn on the configured port.

A requested shutdown (Ctrl-C / SIGTERM) exits 0; failing to start or bind the
listening socket exits non-zero.
"""
import logging
import sys

import uvicorn

from receipt_processor.config import settings

logger = logging.getLogger(__name__)


def main() -> int:
    config = uvicorn.Config(
        "receipt_processor.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    server = uvicorn.Server(config)
    try:
        server.run()
    except SystemExit:
        # uvicorn exits with status 1 when it cannot bind the socket
        logger.error("Error starting server on %s:%s", settings.HOST, settings.PORT)
        return 1
    except OSError as exc:
        logger.error("Error starting server: %s", exc)
        return 1
    if not server.started:
        logger.error("Server failed to start on %s:%s", settings.HOST, settings.PORT)
        return 1
    logger.info("Server closed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
