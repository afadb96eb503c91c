"""Bounded retry with per-attempt timeout and exponential backoff."""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

from marketfeed.constants import RETRY_BASE_DELAY_MS, RETRY_MAX_DELAY_MS
from marketfeed.services.errors import TimeoutExceededError, UpstreamCallFailedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 3
    base_delay_ms: int = RETRY_BASE_DELAY_MS
    max_delay_ms: int = RETRY_MAX_DELAY_MS

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")

    def delay_ms(self, attempt: int) -> int:
        """Backoff before the attempt following ``attempt`` (1-based)."""
        return min(self.base_delay_ms * 2 ** (attempt - 1), self.max_delay_ms)


async def execute_with_retry(
    operation: Callable[[], Awaitable[T]],
    label: str,
    policy: RetryPolicy,
    timeout_ms: int,
) -> T:
    """Run ``operation`` until it succeeds or ``policy.max_attempts`` is used up.

    Each attempt is raced against ``timeout_ms``. A timed-out attempt is
    abandoned, not awaited: work already handed to a worker thread may still
    finish, and its result is dropped.

    Raises UpstreamCallFailedError once every attempt has failed.
    """
    last_error: BaseException | None = None

    for attempt in range(1, policy.max_attempts + 1):
        start = time.monotonic()
        try:
            result = await asyncio.wait_for(operation(), timeout=timeout_ms / 1000)
        except asyncio.TimeoutError:
            last_error = TimeoutExceededError(timeout_ms)
        except Exception as exc:
            last_error = exc
        else:
            duration_ms = (time.monotonic() - start) * 1000
            logger.debug("API call: Yahoo Finance %s took %.0fms", label, duration_ms)
            return result

        if attempt == policy.max_attempts:
            break

        delay = policy.delay_ms(attempt)
        logger.warning(
            "Yahoo Finance API call failed, retrying in %dms (operation=%s, attempt=%d, error=%s)",
            delay, label, attempt, last_error,
        )
        await asyncio.sleep(delay / 1000)

    error = UpstreamCallFailedError(label, policy.max_attempts, last_error)
    logger.error("%s (last error: %s)", error, last_error)
    raise error from last_error
