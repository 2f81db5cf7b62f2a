import logging
import logging.handlers
import os
from pathlib import Path


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES = 10_000_000  # 10MB
LOG_BACKUPS = 5

# Third-party loggers that log every request at INFO
QUIET_LOGGERS = ("httpx", "googleapiclient.discovery_cache", "uvicorn.access")


def _rotating_file_handler(path: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(app_name: str = "volunteer-hours") -> list[logging.Handler]:
    """Send logs to the console, a rotating app log and a rotating error log

    ``LOG_DIR`` picks the log directory and ``LOG_LEVEL`` the minimum level
    for the console and app log. The error log always takes ERROR and above.

    Args:
        app_name: Name to use for log files

    Returns:
        The handlers added to the root logger

    """
    log_dir = Path(os.getenv("LOG_DIR", "/data/logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO

    formatter = logging.Formatter(LOG_FORMAT)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    handlers = [
        console_handler,
        _rotating_file_handler(log_dir / f"{app_name}.log", level, formatter),
        _rotating_file_handler(log_dir / f"{app_name}-error.log", logging.ERROR, formatter),
    ]

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in handlers:
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return handlers
