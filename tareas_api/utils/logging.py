"""Logging configuration for the task API."""

import logging
import logging.handlers
import sys
import time
from typing import Mapping, Optional

from fastapi import Request

from ..config import Settings


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support for console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record):
        """Format log record with colors for console output."""
        if record.levelname in self.COLORS:
            # Other handlers share the record
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = (
                f"{self.COLORS[record.levelname]}{record.levelname}"
                f"{self.COLORS['RESET']}"
            )

        return super().format(record)


def setup_logging(settings: Settings) -> None:
    """Setup logging for the application.

    Args:
        settings: Application settings containing logging configuration
    """
    level = getattr(logging, settings.log_level.upper())

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    # Console handler with colors
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    console_formatter = ColoredFormatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=settings.log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file

        file_formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    configure_module_loggers(settings)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {settings.log_level.upper()}")
    if settings.log_file is not None:
        logger.info(f"Log file: {settings.log_file.absolute()}")


def configure_module_loggers(settings: Settings) -> None:
    """Configure logging levels for specific modules.

    Args:
        settings: Application settings
    """
    level = getattr(logging, settings.log_level.upper())

    app_loggers = [
        'tareas_api.main',
        'tareas_api.middleware',
        'tareas_api.routes',
        'tareas_api.services',
        'tareas_api.utils',
    ]

    for logger_name in app_loggers:
        logging.getLogger(logger_name).setLevel(level)

    third_party_loggers = {
        'uvicorn': logging.INFO,
        'uvicorn.access': logging.WARNING,
        'fastapi': logging.INFO,
    }

    for logger_name, third_party_level in third_party_loggers.items():
        logging.getLogger(logger_name).setLevel(third_party_level)

    if settings.environment == "production":
        logging.getLogger('uvicorn.access').setLevel(logging.ERROR)


def configure_request_logging():
    """Build the request/response logging middleware."""

    async def log_requests(request: Request, call_next):
        """Middleware to log HTTP requests and responses."""
        logger = logging.getLogger("tareas_api.middleware.requests")

        start_time = time.time()
        logger.info(
            f"Request started: {request.method} {request.url} "
            f"from {request.client.host if request.client else 'unknown'}"
        )

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"Request completed: {request.method} {request.url} "
            f"-> {response.status_code} in {process_time:.3f}s"
        )

        return response

    return log_requests


def log_startup_info(settings: Settings, paths: Optional[Mapping] = None) -> None:
    """Log application startup information and the exposed routes.

    Args:
        settings: Application settings
        paths: The ``paths`` section of the application's OpenAPI schema
    """
    logger = logging.getLogger("tareas_api.startup")

    logger.info("=" * 60)
    logger.info(f"{settings.service_name} starting on port {settings.app_port}")
    logger.info("=" * 60)
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log Level: {settings.log_level.upper()}")

    for path, operations in (paths or {}).items():
        for method in sorted(operations):
            logger.info(f"{method.upper():<7} {path}")

    logger.info("=" * 60)


def log_shutdown_info():
    """Log application shutdown information."""
    logger = logging.getLogger("tareas_api.shutdown")

    logger.info("=" * 60)
    logger.info("Task API shutting down")
    logger.info("=" * 60)


__all__ = [
    'ColoredFormatter',
    'setup_logging',
    'configure_module_loggers',
    'configure_request_logging',
    'log_startup_info',
    'log_shutdown_info',
]
