# storefront_e2e/config/logging_config.py

import json
import logging
import os
import sys
from datetime import datetime

SERVICE_NAME = "storefront-e2e"

logger = logging.getLogger(__name__)


class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for logging."""

    def format(self, record):
        # Base record fields
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).astimezone().isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            # Source location
            "module": record.name,
            "funcName": record.funcName,
            "lineno": record.lineno,
            # Process / thread (pytest-xdist workers each own a session)
            "process": record.process,
            "thread": record.thread,
            "threadName": record.threadName,
            "service": SERVICE_NAME,
        }

        # Extra context passed with the log record
        # logger.info("message", extra={'extra_context': {'selector': '#email'}})
        if hasattr(record, "extra_context") and isinstance(record.extra_context, dict):
            log_record.update(record.extra_context)

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_record["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_record, default=str)


TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str = None, fmt: str = None):
    """Configures the root logger with a JSON (default) or text formatter."""
    root_logger = logging.getLogger()

    # Level from argument or LOG_LEVEL (default INFO)
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicate logs
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    log_format = (fmt or os.getenv("LOG_FORMAT", "json")).lower()
    if log_format == "text":
        console_handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        console_handler.setFormatter(JsonFormatter())

    root_logger.addHandler(console_handler)

    # Selenium and urllib3 are chatty at DEBUG
    logging.getLogger("selenium").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("WDM").setLevel(logging.WARNING)

    logger.info("Logging configured with %s format.", log_format)
    return console_handler
