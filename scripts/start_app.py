#!/usr/bin/env python3
"""Serve the qna API with uvicorn."""

import sys

import logfire
import uvicorn

from qna.config import Settings
from qna.util.logging import setup_logging
from qna.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Logfire first so configuration and boot failures are recorded
    configure_logfire(settings)
    setup_logging(settings)

    if settings.storage.backend == "memory" and settings.environment == "production":
        logfire.warn("Memory backend in production: records are lost on restart")

    try:
        uvicorn.run(
            "qna.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "qna failed to start",
            error=str(e),
            error_type=type(e).__name__,
            storage_backend=settings.storage.backend,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
