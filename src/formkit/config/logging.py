"""structlog setup for formkit.

All log output goes to stderr so stdout carries only results. Log events
often quote Japanese validation messages, so the JSON renderer writes
non-ASCII text as-is.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "formkit"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    ``formkit.*`` loggers emit DEBUG with *verbose*, WARNING otherwise;
    every other logger stays at WARNING. Calling again replaces the handler.
    """
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_config_context(*, config_source: str, timezone: str | None) -> None:
    """Stamp later log events with where config came from and the zone in use."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(config_source=str(config_source), tz=timezone or "local")
