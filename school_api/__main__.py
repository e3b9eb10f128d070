"""Run the API server: ``python -m school_api``."""

import sys

import uvicorn

from school_api.exceptions import SchoolApiException
from school_api.utils.logger import configure_logger, get_logger

logger = get_logger(__name__)


def main() -> None:
    configure_logger()

    try:
        from school_api.config import settings
    except SchoolApiException as exc:
        logger.critical(
            "Error loading configuration", error=exc.message, details=exc.details
        )
        sys.exit(1)

    uvicorn.run("school_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
