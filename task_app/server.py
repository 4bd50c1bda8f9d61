"""
Standalone server for the task service.

Runs the application on the configured host and port (``0.0.0.0:8080``)
with one thread per request. A failure to bind or serve is fatal: the
error is reported and the process exits with status 1.
"""

from __future__ import annotations

import logging
import os
import sys

from . import create_app

logger = logging.getLogger(__name__)


def main(config_name: str | None = None) -> int:
    """
    Serve the task service until interrupted.

    Uses the production profile unless one is named, here or in
    ``FLASK_ENV``, so the Werkzeug debugger is never on by default.
    """
    if config_name is None:
        config_name = os.getenv("FLASK_ENV", "production")
    app = create_app(config_name)
    host = app.config["HOST"]
    port = app.config["PORT"]

    logger.info("Starting task service on %s:%d", host, port)
    try:
        app.run(
            host=host,
            port=port,
            threaded=app.config["THREADED"],
            use_reloader=False,
        )
    except OSError as exc:
        logger.error("Server failed: %s", exc)
        print(f"Error starting server: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
