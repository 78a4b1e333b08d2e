"""structlog configuration.

Logs go to stderr so stdout carries only the report lines. Events are
rendered by the colored console renderer unless ``log_json`` asks for one
JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route ``sub_pilot`` events to stderr.

    Args:
        verbose: Log at DEBUG, which includes every intermediate model state.
            Otherwise only WARNING and above reach the handler.
        log_json: Render JSON lines instead of console output.
    """
    processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)
    logging.getLogger("sub_pilot").setLevel(logging.DEBUG if verbose else logging.WARNING)
