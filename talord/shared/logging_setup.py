"""
talord/shared/logging_setup.py
------------------------------

Central logging configuration for Talord.

Goals:
- Provide a single place to configure structlog rendering and level.
- Make it easy to get a logger in any module:
      import structlog
      logger = structlog.get_logger()
- Allow overrides via settings (environment variables):
      TALORD_LOG_LEVEL   (e.g. DEBUG, INFO, WARNING, ERROR)
      TALORD_LOG_FORMAT  (console | json)

Usage
=====

In your CLI script or application factory:

    from talord.shared.logging_setup import init_logging

    init_logging()

Implementation notes
====================

- Events are written to stderr so that stdout stays reserved for numeral
  names printed by the CLI.
- `init_logging` is idempotent; calling it multiple times is safe.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from talord.shared.config import LogFormat, settings

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[str]) -> int:
    """
    Map a level name to a logging level.
    Defaults to logging.INFO if the name is unknown.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def _build_renderer(fmt: Optional[str]):
    fmt_value = (fmt or settings.LOG_FORMAT.value).lower()
    if fmt_value == LogFormat.JSON.value:
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=False)


def init_logging(
    level: Optional[str] = None,
    fmt: Optional[str] = None,
    *,
    force: bool = False,
) -> None:
    """
    Initialize structlog (and the stdlib root logger it sits beside).

    Args:
        level:
            Level name (e.g. "DEBUG"). If None, settings.LOG_LEVEL is used.
        fmt:
            "console" or "json". If None, settings.LOG_FORMAT is used.
        force:
            If True, reconfigure logging even if it was already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    log_level = _resolve_level(level)

    # Libraries such as uvicorn log through stdlib logging.
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt=DEFAULT_DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt=DEFAULT_DATE_FORMAT),
            _build_renderer(fmt),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    _INITIALIZED = True


__all__ = ["init_logging"]
