"""structlog loggers routed through stdlib logging; silent until configured."""
from __future__ import annotations

import logging
from typing import Union

import structlog

ROOT_LOGGER = "pinneaple_fixtures"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())

# event dicts are rendered by the handler's ProcessorFormatter, not here
_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def get_logger(name: str):
    """
    Return a structlog logger writing to the stdlib logger `name`.

    Records follow the stdlib level of the ``pinneaple_fixtures`` logger,
    so nothing below WARNING is emitted unless the application (or
    `configure_logging`) enables it. The global structlog configuration is
    left to the application.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level: Union[int, str] = "WARNING") -> None:
    """
    Send library events at `level` and above to stderr through a console renderer.

    Calling it again replaces the handler installed by the previous call.

    Parameters
    ----------
    level : int | str, optional
        Standard logging level name or number. Default is "WARNING", which
        keeps the per-call debug events silent.
    """
    if isinstance(level, str):
        level = level.upper()
    lib = logging.getLogger(ROOT_LOGGER)
    for h in [h for h in lib.handlers if getattr(h, "_pinneaple_fixtures", False)]:
        lib.removeHandler(h)
    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.dev.ConsoleRenderer(colors=False),
            ],
        )
    )
    handler._pinneaple_fixtures = True
    lib.addHandler(handler)
    lib.setLevel(level)
