r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from jamfpro.backoff.base import BaseBackoffStrategy


class ConstantBackoff(BaseBackoffStrategy):
    """Wait the same amount of time before every retry.

    Mostly useful in tests, where ``ConstantBackoff(0.0)`` removes waits
    entirely.

    Args:
        delay: The fixed delay in seconds.

    Example:
        ```pycon
        >>> from jamfpro.backoff import ConstantBackoff
        >>> ConstantBackoff(delay=0.5).calculate(7)
        0.5

        ```
    """

    def __init__(self, delay: float = 1.0) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)
        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay
