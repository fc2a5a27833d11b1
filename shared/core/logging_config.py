# core/logging_config.py

import logging
import os
from datetime import datetime
from logging import Logger, StreamHandler
from logging.handlers import TimedRotatingFileHandler

from colorlog import ColoredFormatter
from pythonjsonlogger.json import JsonFormatter

from shared.core.config import settings

# === Environment Configuration ===
ENVIRONMENT = settings.ENVIRONMENT.lower()
APPLICATION_NAME = settings.APP_NAME.replace(" ", "_")
LOG_LEVEL = settings.LOG_LEVEL.upper()

LOG_FILE_PATH = os.path.join(
    settings.LOG_DIR,
    f"{APPLICATION_NAME}_{datetime.now().strftime('%Y%m%d')}.log",
)

_INIT_MESSAGE_LOGGED = False


def _build_formatters() -> tuple[logging.Formatter, logging.Formatter]:
    if ENVIRONMENT in ("local", "development"):
        console_formatter: logging.Formatter = ColoredFormatter(
            "%(log_color)s%(asctime)s | %(levelname)-8s | %(name)s | "
            "%(filename)s:%(lineno)d | %(funcName)s() | %(message)s%(reset)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            reset=True,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
        file_formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        return console_formatter, file_formatter

    json_formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(pathname)s %(lineno)d",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return json_formatter, json_formatter


# === Logger Factory Function ===
def get_logger(name: str) -> Logger:
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger  # Avoid adding handlers multiple times

    logger.setLevel(getattr(logging, LOG_LEVEL, logging.DEBUG))
    console_formatter, file_formatter = _build_formatters()

    console_handler = StreamHandler()
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # No log files while testing
    if ENVIRONMENT != "testing":
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=LOG_FILE_PATH,
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    global _INIT_MESSAGE_LOGGED
    if not _INIT_MESSAGE_LOGGED:
        logger.info(
            f"Logging initialized for environment: {ENVIRONMENT.upper()}"
        )
        _INIT_MESSAGE_LOGGED = True

    return logger
