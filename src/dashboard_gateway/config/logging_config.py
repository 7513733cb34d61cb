"""Logging setup for the gateway process.

One console handler on stdout. LOG_LEVEL picks the root level, LOG_FORMAT
the line layout, and LOG_CACHE_EVENTS=false hides per-request cache
hit/miss lines without lowering the rest of the output.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LogFormat(str, Enum):
    """Line layouts."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}

# Per-request cache chatter.
CACHE_EVENT_LOGGERS = (
    "dashboard_gateway.platform.cache.application",
    "dashboard_gateway.platform.cache.infrastructure",
)

# Third-party clients that log every request at INFO.
NOISY_LIBRARIES = ("httpx", "httpcore", "asyncio")


def resolve_log_level(value: str) -> str:
    """Upper-cased level name, INFO when unknown."""
    name = value.strip().upper()
    return name if name in LEVEL_NAMES else "INFO"


def resolve_log_format(value: str) -> LogFormat:
    """Known format, SIMPLE when unknown."""
    try:
        return LogFormat(value.strip().lower())
    except ValueError:
        return LogFormat.SIMPLE


def build_logging_config(level: str, log_format: LogFormat, cache_events: bool = True) -> Dict[str, Any]:
    """dictConfig payload for the given options."""
    loggers: Dict[str, Any] = {
        name: {"level": "WARNING", "handlers": ["console"], "propagate": False}
        for name in NOISY_LIBRARIES
    }
    if not cache_events:
        for name in CACHE_EVENT_LOGGERS:
            loggers[name] = {"level": "WARNING"}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": FORMAT_STRINGS[log_format],
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": loggers,
    }


class LoggingConfig:
    """Applies the environment-driven logging setup."""

    @classmethod
    def configure(cls) -> None:
        """Configure logging from LOG_LEVEL, LOG_FORMAT and LOG_CACHE_EVENTS."""
        level = resolve_log_level(os.getenv("LOG_LEVEL", "INFO"))
        log_format = resolve_log_format(os.getenv("LOG_FORMAT", "simple"))
        cache_events = os.getenv("LOG_CACHE_EVENTS", "true").strip().lower() != "false"

        logging.config.dictConfig(build_logging_config(level, log_format, cache_events))
        logging.getLogger(__name__).debug(
            f"Logging configured: level={level}, format={log_format.value}, cache_events={cache_events}"
        )

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        return logging.getLogger(name)
