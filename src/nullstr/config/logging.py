"""structlog rendering for the ``nullstr`` logger.

nullstr is a library: its modules log through stdlib ``logging`` under
the ``nullstr`` namespace and never touch the root logger or the global
structlog configuration. :func:`configure_logging` is opt-in and only
installs one handler on the ``nullstr`` logger, rendering its records
with structlog's ``ProcessorFormatter``:
- Human (default): console-formatted output to stderr
- JSON: Structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

from nullstr.config.settings import NullStrSettings, get_settings

LOGGER_NAME = "nullstr"


class _NullStrHandler(logging.StreamHandler):
    """Marker type so reconfiguration replaces only our own handler."""


def _build_formatter(log_json: bool) -> structlog.stdlib.ProcessorFormatter:
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    propagate: bool = False,
) -> logging.Handler:
    """Attach a structlog-rendering stderr handler to the ``nullstr`` logger.

    Calling again replaces the handler installed by the previous call;
    handlers added by the application are left in place.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        propagate: Also pass records up to the application's handlers.
            Off by default so records are not rendered twice.

    Returns:
        The installed handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    reset_logging()

    handler = _NullStrHandler(sys.stderr)
    handler.setFormatter(_build_formatter(log_json))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = propagate
    return handler


def reset_logging() -> None:
    """Remove the handler from :func:`configure_logging` and restore defaults."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in [h for h in logger.handlers if isinstance(h, _NullStrHandler)]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def configure_from_settings(settings: NullStrSettings | None = None) -> logging.Handler:
    """Apply the ``verbose`` / ``log_json`` knobs from *settings*."""
    settings = settings or get_settings()
    return configure_logging(verbose=settings.verbose, log_json=settings.log_json)
