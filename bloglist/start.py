#!/usr/bin/env python3
"""
Bloglist Application Starter
Initializes the Application (database, services) then starts the API server.
"""

import logging
import signal
import sys

import uvicorn

from bloglist.app import application
from bloglist.helpers.logging_helper import configure_logging

# Configure logging once for the whole process
configure_logging(application.log_level)


def shutdown_handler(signum, frame):
    """Handle shutdown signals gracefully."""
    logging.info(f"Received signal {signum}, shutting down...")
    application.stop()
    sys.exit(0)


def main() -> None:
    signal.signal(signal.SIGTERM, shutdown_handler)
    signal.signal(signal.SIGINT, shutdown_handler)

    logging.info("[Application] Starting Bloglist...")
    application.start()
    logging.info(
        "Effective config: arango=%s db=%s api=%s:%d",
        application.arango_hosts,
        application.arango_db,
        application.api_host,
        application.api_port,
    )

    try:
        uvicorn.run(
            "bloglist.interfaces.api.api_app:api_app",
            host=application.api_host,
            port=application.api_port,
            log_level=application.log_level.lower(),
        )
    finally:
        logging.info("API server stopped, cleaning up...")
        application.stop()


if __name__ == "__main__":
    main()
