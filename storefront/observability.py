"""
Logging — structlog configuration with a stdlib bridge.

    from storefront.observability import configure_logging, get_logger

    configure_logging(get_settings())
    log = get_logger("promotions")
    log.info("promotion_apply_requested", cart_id=cart.id, code=code)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from storefront.config import CheckoutSettings, LogFormat

_CONFIGURED = False


def configure_logging(settings: CheckoutSettings) -> None:
    """
    One-shot structlog + stdlib configuration.

    Safe to call multiple times; only the first invocation takes effect.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    level = logging.getLevelName(settings.log_level.upper())
    renderer = _select_renderer(settings.log_format)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(component: str) -> Any:
    """Return a structlog logger pre-bound with the component name."""
    return structlog.get_logger(component=component)


def _select_renderer(log_format: LogFormat) -> Any:
    if log_format is LogFormat.JSON:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


__all__ = ("configure_logging", "get_logger")
