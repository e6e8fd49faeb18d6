"""Logging configuration for the storefront.

Stdlib handlers carry the output, structlog renders it. ``configure_logging()``
is called once by the command line entry point; modules only ask structlog
for a logger and pass context as keywords.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

import structlog

LOG_FILE = "storefront.log"
ERROR_LOG_FILE = "storefront_error.log"

_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def get_environment() -> str:
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    """``LOG_LEVEL`` if set, else the default level of the environment."""
    return os.getenv("LOG_LEVEL", _LEVELS.get(get_environment(), "INFO"))


def _rotating_handler(path: Path, level: int | str) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(log_dir: Path) -> None:
    """Route the root logger to stdout, the storefront log and the error log."""
    level = get_log_level()
    log_dir.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [
        console,
        _rotating_handler(log_dir / LOG_FILE, level),
        _rotating_handler(log_dir / ERROR_LOG_FILE, logging.ERROR),
    ]

    # Protean and the event loop are chatty below WARNING
    for name in ("asyncio", "protean"):
        logging.getLogger(name).setLevel(logging.WARNING)


def _renderer() -> structlog.typing.Processor:
    if get_environment() in ("production", "staging"):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stdout.isatty(),
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=2),
    )


def setup_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(log_dir: str | Path | None = None) -> Path:
    """Configure stdlib and structlog logging; returns the log directory.

    ``log_dir`` defaults to ``STOREFRONT_LOG_DIR``, then ``logs``.
    """
    path = Path(log_dir or os.getenv("STOREFRONT_LOG_DIR", "logs"))
    setup_stdlib_logging(path)
    setup_structlog()
    return path
