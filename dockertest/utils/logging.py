"""Logging configuration for dockertest."""

# Standard library imports
import logging
import os
import sys

# Third-party imports
import structlog

# Local application imports
from ..config import settings

# Loggers of the libraries driving the engine and the database
THIRD_PARTY_LOGGERS = ("docker", "urllib3", "mysql.connector", "sqlalchemy.engine")


def setup_logging() -> None:
    """Configure structured logging for container lifecycle events.

    The pytest plugin calls this the first time a database fixture is used,
    unless the test suite configured structlog itself.
    """
    log_settings = settings.logging

    # Log to stderr so pytest reports it with the failing test
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_settings.level, logging.INFO),
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        add_test_worker,
    ]

    if log_settings.format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    quiet_third_party_loggers()


def quiet_third_party_loggers() -> None:
    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def add_test_worker(logger, method_name, event_dict):
    """Tag entries with the pytest-xdist worker that emitted them.

    Each worker starts its own containers, so the tag tells apart
    interleaved lifecycle events of parallel sessions.
    """
    worker = os.environ.get("PYTEST_XDIST_WORKER")
    if worker:
        event_dict["worker"] = worker
    return event_dict
