r"""Computation of the delay between two attempts."""

from __future__ import annotations

__all__ = ["RetryStrategy"]

import logging
import random
from typing import TYPE_CHECKING

from jamfpro.backoff import ExponentialBackoff
from jamfpro.utils.retry_after import retry_after_delay

if TYPE_CHECKING:
    import httpx

    from jamfpro.backoff import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


class RetryStrategy:
    """Delay calculation with backoff, ``Retry-After`` and jitter.

    The base delay is the ``Retry-After`` value of a 429/503 response
    when present, else the backoff strategy value. It is then capped at
    ``max_wait_time`` and jitter is added on top.

    Args:
        backoff_strategy: Defaults to ``ExponentialBackoff()``.
        jitter_factor: Jitter is ``uniform(0, jitter_factor) * delay``.
        max_wait_time: Optional cap of the base delay.

    Example:
        ```pycon
        >>> from jamfpro.backoff import ExponentialBackoff
        >>> from jamfpro.retry import RetryStrategy
        >>> strategy = RetryStrategy(ExponentialBackoff(min_delay=0.5), max_wait_time=1.5)
        >>> [strategy.calculate_delay(attempt) for attempt in range(3)]
        [0.5, 1.0, 1.5]

        ```
    """

    def __init__(
        self,
        backoff_strategy: BaseBackoffStrategy | None = None,
        jitter_factor: float = 0.0,
        max_wait_time: float | None = None,
    ) -> None:
        self.backoff_strategy: BaseBackoffStrategy = (
            backoff_strategy if backoff_strategy is not None else ExponentialBackoff()
        )
        self.jitter_factor = jitter_factor
        self.max_wait_time = max_wait_time

    def calculate_delay(self, attempt: int, response: httpx.Response | None = None) -> float:
        """Return the delay in seconds before the next attempt.

        Args:
            attempt: The 0-indexed number of the attempt that failed.
            response: The response of that attempt, if any.
        """
        delay = retry_after_delay(response)
        if delay is not None:
            logger.debug(f"Using Retry-After header value: {delay:.2f}s")
        else:
            delay = self.backoff_strategy.calculate(attempt)

        if self.max_wait_time is not None and delay > self.max_wait_time:
            delay = self.max_wait_time

        if self.jitter_factor > 0:
            delay += random.uniform(0, self.jitter_factor) * delay  # noqa: S311
        return delay
