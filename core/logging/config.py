"""Structlog configuration: JSON log file plus colored console."""

import logging
import logging.handlers
import os
from pathlib import Path

import structlog

from core.logging.processors import (
    add_process_info,
    add_service_context,
    console_renderer,
)

_SHARED_PRE_CHAIN = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    add_service_context,
]


def setup_logging() -> None:
    """Route stdlib and structlog records to a JSON file and the console.

    Environment Variables:
    - LOG_FILE_PATH: Path to log file (default: ./logs/social-service.log)
    - LOG_LEVEL: Logging level (default: INFO)
    - LOG_MAX_BYTES: Size at which the file rotates (default: 50MB)
    - LOG_BACKUP_COUNT: Rotated files kept (default: 10)
    - SERVICE_NAME / ENVIRONMENT: metadata added to every event
    """
    log_file_path = os.getenv("LOG_FILE_PATH", "./logs/social-service.log")
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)
    max_bytes = int(os.getenv("LOG_MAX_BYTES", str(50 * 1024 * 1024)))
    backup_count = int(os.getenv("LOG_BACKUP_COUNT", "10"))

    Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=[*_SHARED_PRE_CHAIN, add_process_info],
        )
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=_SHARED_PRE_CHAIN,
        )
    )

    structlog.configure(
        processors=[
            *_SHARED_PRE_CHAIN,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_process_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    root_logger.setLevel(log_level)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_file=log_file_path,
        log_level=log_level_name,
        max_bytes=max_bytes,
        backup_count=backup_count,
    )
