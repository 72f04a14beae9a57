import logging
import sys
from datetime import datetime
from pathlib import Path

from state_law_guidance.config import get_settings
from state_law_guidance.observability.middleware import (
    JsonRequestLogFormatter,
    RequestContextFilter,
)


def setup_logging(log_dir: Path | None = None, level: str | None = None) -> logging.Logger:
    """Configure logging for the application with JSON console logs.

    File logs keep a human-readable format for local debugging; console logs use JSON.
    Request-scoped fields (request_id, method, path, status, duration_ms) are added by
    RequestIdAndTimingMiddleware and defaulted by RequestContextFilter.
    """
    settings = get_settings()
    log_dir = Path(log_dir or settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    console_level = logging.getLevelName((level or settings.log_level).upper())
    if not isinstance(console_level, int):
        console_level = logging.INFO

    log_filename = log_dir / f"state_law_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

    file_handler = logging.FileHandler(log_filename, encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(request_id)s - %(message)s")
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.addFilter(RequestContextFilter())

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(JsonRequestLogFormatter())
    console_handler.setLevel(console_level)
    console_handler.addFilter(RequestContextFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove any existing handlers to avoid duplicate logs
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # Package loggers propagate to root; the access logger has its own filter
    for logger_name in ("state_law_guidance", "state_law_guidance.access"):
        logging.getLogger(logger_name).setLevel(logging.DEBUG)

    return root_logger
