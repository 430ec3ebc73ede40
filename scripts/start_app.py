#!/usr/bin/env python3
"""Serve the comments API under uvicorn.

Logfire is configured first so failures during import and startup are
reported too.
"""

import sys

import logfire
import uvicorn

from social.config import Settings
from social.util.logging import setup_logging
from social.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting comments API",
        host=settings.api.host,
        port=settings.api.port,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            "social.interface.api.app:app",
            host=settings.api.host,
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Comments API failed to start",
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
