r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Compute how long to wait before the next attempt of a request."""

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Return the delay in seconds before retrying.

        Args:
            attempt: The number of the attempt that just failed
                (0-indexed), so ``attempt=0`` gives the delay before
                the first retry.
        """
