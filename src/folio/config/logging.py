"""Logging for folio: stdlib loggers rendered through structlog.

folio modules log with ``logging.getLogger(__name__)``; one stderr handler
renders every record as a console line, or as a JSON object with
``--log-json``. While a content file is loaded or rendered,
:func:`content_context` binds its ``category`` and ``slug`` so each record
emitted inside names the file it concerns.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Generator
from contextlib import contextmanager

import structlog

FOLIO_LOGGER = "folio"
HANDLER_NAME = "folio-stderr"

# Third-party loggers kept at WARNING even under --verbose.
QUIET_LOGGERS = ("MARKDOWN", "markdown", "pygments")


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]


def _stderr_handler(log_json: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route folio logs to stderr; DEBUG with *verbose*, else WARNING.

    Safe to call repeatedly: the previous folio handler is replaced, and
    handlers installed by others (such as pytest's capture) are left alone.
    """
    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(_stderr_handler(log_json))
    root.setLevel(logging.WARNING)

    logging.getLogger(FOLIO_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@contextmanager
def content_context(category: str, slug: str) -> Generator[None]:
    """Bind ``category`` and ``slug`` to every log record emitted inside."""
    with structlog.contextvars.bound_contextvars(category=str(category), slug=slug):
        yield
