# File: storefront/core/logging.py

"""
Logging setup shared by the API process and the CLI entry point.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once.

    Calling it again only adjusts the level, so tests and the uvicorn
    reloader can import the app repeatedly without stacking handlers.
    """
    global _configured

    log_level = getattr(logging, level.upper(), logging.INFO)
    if not _configured:
        logging.basicConfig(level=log_level, format=LOG_FORMAT)
        _configured = True
    logging.getLogger().setLevel(log_level)
