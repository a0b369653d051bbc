"""Fixed-delay retry helper."""

from typing import Callable, TypeVar

import structlog
from tenacity import Retrying, stop_after_attempt, wait_fixed

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def retry(attempts: int, delay: float, fn: Callable[[], T]) -> T:
    """Call ``fn`` until it succeeds, at most ``attempts`` times.

    Waits ``delay`` seconds between attempts. When every attempt fails the
    last exception is re-raised unchanged.
    """
    if attempts < 1:
        raise ValueError("attempts must be at least 1")

    def _log_failure(retry_state):
        exc = retry_state.outcome.exception()
        logger.debug(
            "Attempt failed, retrying",
            attempt=retry_state.attempt_number,
            max_attempts=attempts,
            delay=delay,
            error=str(exc),
        )

    for attempt in Retrying(
        stop=stop_after_attempt(attempts),
        wait=wait_fixed(delay),
        before_sleep=_log_failure,
        reraise=True,
    ):
        with attempt:
            return fn()
