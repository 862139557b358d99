r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from jamfpro.backoff.base import BaseBackoffStrategy


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff clamped between a minimum and a maximum.

    The delay before retry ``n`` is ``min_delay * 2 ** n`` and never
    exceeds ``max_delay``. The defaults (1s, 30s) match the wait bounds
    Jamf Pro clients commonly use against cloud tenants.

    Args:
        min_delay: The delay before the first retry, in seconds.
        max_delay: The upper bound of any delay, in seconds.

    Example:
        ```pycon
        >>> from jamfpro.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(min_delay=1.0, max_delay=5.0)
        >>> [backoff.calculate(attempt) for attempt in range(5)]
        [1.0, 2.0, 4.0, 5.0, 5.0]

        ```
    """

    def __init__(self, min_delay: float = 1.0, max_delay: float = 30.0) -> None:
        if min_delay < 0:
            msg = f"min_delay must be non-negative, got {min_delay}"
            raise ValueError(msg)
        if max_delay < min_delay:
            msg = f"max_delay must be >= min_delay ({min_delay}), got {max_delay}"
            raise ValueError(msg)

        self.min_delay = min_delay
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(min_delay={self.min_delay}, max_delay={self.max_delay})"

    def calculate(self, attempt: int) -> float:
        # Large attempts overflow float pow long after hitting the cap.
        if attempt >= 64:
            return self.max_delay
        return min(self.min_delay * (2**attempt), self.max_delay)
