import logging

import uvicorn

from volunteer_hours.api.dependencies import get_lookup_service
from volunteer_hours.api.main import app
from volunteer_hours.config import load_config
from volunteer_hours.logging_config.logging_config import setup_logging
from volunteer_hours.sheets.client import SheetError


# ruff: noqa: D103
def main() -> None:
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Starting Volunteer Hours API")

    config = load_config()

    # Warm the sheet cache so the first search doesn't wait on the download
    try:
        get_lookup_service().load()
    except SheetError:
        logger.exception("Initial sheet load failed, will retry on first search")

    uvicorn.run(app, host=config["HOST"], port=config["PORT"], log_config=None)


if __name__ == "__main__":
    main()
