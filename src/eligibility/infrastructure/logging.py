"""Log rendering for the command-line entry point.

Library modules log through plain ``logging`` loggers under the
``eligibility`` namespace and stay silent unless a handler is installed.
The CLI installs one that renders those records with structlog, either
for a terminal or as JSON lines, always on stderr.
"""

from __future__ import annotations

import logging
import sys

import structlog


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route log records to stderr.

    Only the ``eligibility`` loggers drop to DEBUG when *verbose*;
    everything else stays at WARNING.
    """
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_json),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("eligibility").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )
