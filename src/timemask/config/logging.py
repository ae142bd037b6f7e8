"""structlog configuration for timemask.

Everything logs through stdlib ``logging`` and is rendered by structlog's
ProcessorFormatter on stderr, so stdout stays reserved for results:

- Human (default): ``ConsoleRenderer``, colored only on a TTY
- JSON (``--log-json``): one JSON object per line

The ``timemask`` logger level follows the CLI verbosity flags.
"""

from __future__ import annotations

import logging
import sys

import structlog

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def log_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Level for the ``timemask`` logger; ``verbose`` wins over ``quiet``."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """Route all logging to stderr through structlog.

    Safe to call repeatedly; the root handler is replaced each time.

    Args:
        verbose: DEBUG-level output for timemask loggers.
        quiet: Only ERROR and above for timemask loggers.
        log_json: Use the JSON renderer instead of the console renderer.
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
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

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("timemask").setLevel(log_level(verbose=verbose, quiet=quiet))
