"""Logging for the stm32-makeinfo CLI: structlog events rendered through stdlib logging."""

from __future__ import annotations

import logging
import os
import sys

import structlog


def setup_logging(level: str | None = None) -> None:
    """Route structlog events to stderr through the root stdlib logger.

    Reads from environment variables:
        STM32_MAKEINFO_LOG_LEVEL: log level (default: INFO)
        STM32_MAKEINFO_LOG_FORMAT: console | json (default: console)

    An explicit ``level`` wins over the environment. Calling it again
    replaces the previous handler, so repeated CLI invocations in one
    process do not stack output.
    """
    log_level = (level or os.environ.get("STM32_MAKEINFO_LOG_LEVEL", "INFO")).upper()
    log_format = os.environ.get("STM32_MAKEINFO_LOG_FORMAT", "console").lower()

    # Events carry only a name, a level and keyword fields; nothing binds context.
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # stderr keeps the JSON the CLI writes to stdout parseable.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(log_level)
