# dictionaries/shared/logging_config.py
import logging
import sys
from typing import Optional

import structlog

from dictionaries.shared.config import settings


def add_app_context(_, __, event_dict):
    """
    Processor to tag every entry with the application name and environment,
    so logs from several consumers sharing one collector stay attributable.
    """
    event_dict.setdefault("app", settings.APP_NAME)
    event_dict.setdefault("env", settings.APP_ENV.value)
    return event_dict


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configures structlog to emit structured JSON logs (Production) or
    colored text logs (Development).

    Logs go to stderr; stdout is reserved for command output.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    # 1. Define the chain of processors
    processors = [
        structlog.contextvars.merge_contextvars,
        add_app_context,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Determine the Output Format
    if (fmt or settings.LOG_FORMAT) == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # 3. Configure Structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # Not cached: configure_logging may run more than once per process (CLI, tests)
        cache_logger_on_first_use=False,
    )

    # 4. Keep stdlib logging (third-party libraries) on the same level and stream
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
    )
