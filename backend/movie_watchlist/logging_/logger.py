import logging
import os
import sys
from datetime import datetime
from typing import Any

from loguru import logger
from loguru._logger import Logger

from movie_watchlist.core.config import settings

# (file name, minimum level, retention); the debug sink only exists with DEBUG on
LOG_SINKS: list[tuple[str, str, str | None]] = [
    ("debug.log", "DEBUG", "7 days"),
    ("error.log", "ERROR", "30 days"),
    ("info.log", "INFO", None),
]


FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"
CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<blue>{line}</blue> | {message}"
)


def _with_tail(line_format: str, record: Any) -> str:
    # loguru needs the newline and traceback placeholders in a callable format
    tail = "\n{exception}" if record["exception"] else "\n"
    return line_format + tail


def file_formatter(record: Any) -> str:
    """File format; context bound with logger.bind() is rendered as one dict."""
    line_format = FILE_FORMAT
    if record.get("extra"):
        line_format += " | {extra}"
    return _with_tail(line_format, record)


def console_formatter(record: Any) -> str:
    return _with_tail(CONSOLE_FORMAT, record)


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logger(name: str, log_dir: str | None = None) -> Logger:
    today = datetime.now().strftime("%Y-%m-%d")
    log_path = os.path.join(log_dir or settings.LOG_DIR, today, name)
    os.makedirs(log_path, exist_ok=True)

    logger.remove()

    for file_name, level, retention in LOG_SINKS:
        if level == "DEBUG" and not settings.DEBUG:
            continue
        logger.add(
            os.path.join(log_path, file_name),
            format=file_formatter,
            level=level,
            rotation="00:00",
            compression="zip",
            enqueue=True,
            backtrace=True,
            diagnose=True,
            retention=retention,
        )

    logger.add(
        sys.stderr,
        format=console_formatter,
        level="DEBUG" if settings.DEBUG else "INFO",
        enqueue=True,
        backtrace=True,
        diagnose=True,
        colorize=True,
    )

    # Modules log through logging.getLogger(__name__), route those here
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for uvicorn_logger in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(uvicorn_logger).handlers = [InterceptHandler()]
        logging.getLogger(uvicorn_logger).propagate = False

    return logger  # type: ignore
