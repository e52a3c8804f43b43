from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


_CONFIGURED = False


def resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure structlog + stdlib logging for JSON output.

    Safe to call multiple times (no-op after first call).
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    numeric_level = resolve_level(level)

    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            *pre_chain,
            # Let ProcessorFormatter render JSON for stdlib log records too.
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(),
        # Store modules pass record ids through ``extra=``.
        foreign_pre_chain=[structlog.stdlib.ExtraAdder(), *pre_chain],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)

    # Keep uvicorn's own loggers consistent with our handler.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        logger.handlers = [handler]
        logger.propagate = False
        logger.setLevel(numeric_level)

    _CONFIGURED = True
