# storefront/cli.py

"""
Console entry point: validate settings, then hand the app to uvicorn.

The app is passed as an import string so a bad PORT is reported before
anything touches the database.
"""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from storefront.core.config import get_settings
from storefront.core.logging import setup_logging

logger = logging.getLogger("storefront")


def main() -> None:
    setup_logging()
    try:
        settings = get_settings()
    except ValidationError as exc:
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
        if "port" in fields:
            logger.error("Invalid PORT value specified in environment variables.")
        else:
            logger.error("Invalid settings in environment variables: %s", ", ".join(fields))
        sys.exit(1)

    setup_logging(settings.log_level)
    logger.info("Server is listening on Port %s", settings.port)
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
