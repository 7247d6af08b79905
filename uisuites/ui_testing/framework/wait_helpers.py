# ================================================================================
# Wait Helpers Module
# ================================================================================
#
# Polling primitives used by the interaction core and by page objects.
#
# Key Features:
#   - Fixed-interval wait conditions bounded by a timeout
#   - Predicate exceptions treated as "not yet satisfied"
#   - Tri-state outcome polling for asynchronous UI results (uploads, saves)
#   - Injectable clock/sleep so timing can be tested without real delays
#
# Usage:
#   handle = wait_until(WaitCondition(probe, timeout=10, poll_interval=0.5))
#   outcome = poll_for_outcome(check_upload, max_attempts=30)
#
# ================================================================================

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from loguru import logger

from .exceptions import ErrorKind, HarnessError


@dataclass
class WaitCondition:
    """
    A predicate evaluated repeatedly until it yields a truthy value.

    Attributes:
        predicate: Zero-argument callable; a truthy return value ends the wait
        timeout: Total time budget in seconds
        poll_interval: Delay between probes in seconds
        description: Human-readable description for logging and errors
    """
    predicate: Callable[[], Any]
    timeout: float
    poll_interval: float
    description: str = "condition"


def wait_until(
    condition: WaitCondition,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> Any:
    """
    Block until ``condition.predicate`` returns a truthy value.

    The first probe runs immediately. The last probe runs at the deadline, so a
    failing wait takes the full timeout and never more than one extra interval.

    Args:
        condition: The condition to evaluate
        clock: Monotonic time source in seconds
        sleep: Sleep function

    Returns:
        The truthy value returned by the predicate

    Raises:
        HarnessError: TIMEOUT_EXCEEDED, with the last predicate error as cause
    """
    start = clock()
    deadline = start + condition.timeout
    attempt = 0
    last_error: Optional[BaseException] = None

    while True:
        attempt += 1
        try:
            result = condition.predicate()
            if result:
                logger.debug(
                    f"Wait satisfied after {attempt} probe(s) "
                    f"({clock() - start:.2f}s): {condition.description}"
                )
                return result
        except Exception as e:
            last_error = e
            logger.debug(f"Probe {attempt} raised for {condition.description}: {e}")

        now = clock()
        if now >= deadline:
            break
        sleep(min(condition.poll_interval, deadline - now))

    message = (
        f"timed out after {clock() - start:.1f}s ({attempt} probes) "
        f"waiting for: {condition.description}"
    )
    raise HarnessError(ErrorKind.TIMEOUT_EXCEEDED, message, cause=last_error)


class Outcome(str, Enum):
    """Tri-state result of an asynchronous UI operation."""

    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.PENDING


def poll_for_outcome(
    check: Callable[[], Outcome],
    max_attempts: int,
    interval_seconds: float = 1.0,
    description: str = "outcome",
    sleep: Callable[[float], None] = time.sleep,
) -> Outcome:
    """
    Call ``check`` until it reports a terminal outcome.

    Args:
        check: Returns the current Outcome
        max_attempts: Upper bound on the number of calls to ``check``
        interval_seconds: Delay between calls
        description: Human-readable description for logging
        sleep: Sleep function

    Returns:
        The first terminal Outcome seen, or PENDING if attempts ran out
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

    for attempt in range(1, max_attempts + 1):
        outcome = check()
        if outcome.is_terminal:
            logger.info(f"{description}: {outcome.value} after {attempt} attempt(s)")
            return outcome
        if attempt < max_attempts:
            sleep(interval_seconds)

    logger.warning(f"{description}: still pending after {max_attempts} attempt(s)")
    return Outcome.PENDING


__all__ = [
    "Outcome",
    "WaitCondition",
    "poll_for_outcome",
    "wait_until",
]
