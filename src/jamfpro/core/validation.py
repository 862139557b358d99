r"""Parameter validation for the client configuration."""

from __future__ import annotations

__all__ = ["validate_retry_params", "validate_status_codes", "validate_timeout"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    import httpx


def validate_timeout(timeout: float | httpx.Timeout | None) -> None:
    """Validate the timeout passed to the underlying ``httpx.Client``.

    Args:
        timeout: The timeout in seconds, an ``httpx.Timeout`` or ``None``
            to disable timeouts.

    Raises:
        ValueError: If ``timeout`` is a number <= 0.

    Example:
        ```pycon
        >>> from jamfpro.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_retry_params(
    max_retries: int,
    jitter_factor: float = 0.0,
    max_total_time: float | None = None,
    max_wait_time: float | None = None,
) -> None:
    """Validate the retry parameters.

    Args:
        max_retries: Maximum number of retries. ``0`` means a single
            attempt.
        jitter_factor: Factor of random jitter added to each delay.
        max_total_time: Optional time budget for all the attempts.
        max_wait_time: Optional cap of a single delay.

    Raises:
        ValueError: If ``max_retries`` or ``jitter_factor`` is negative,
            or if ``max_total_time`` or ``max_wait_time`` is not positive.
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    if jitter_factor < 0:
        msg = f"jitter_factor must be >= 0, got {jitter_factor}"
        raise ValueError(msg)
    if max_total_time is not None and max_total_time <= 0:
        msg = f"max_total_time must be > 0, got {max_total_time}"
        raise ValueError(msg)
    if max_wait_time is not None and max_wait_time <= 0:
        msg = f"max_wait_time must be > 0, got {max_wait_time}"
        raise ValueError(msg)


def validate_status_codes(name: str, status_codes: Iterable[int]) -> None:
    """Check that every status code is a valid HTTP status.

    Raises:
        ValueError: If a code is outside ``100..599``.
    """
    for code in status_codes:
        if not 100 <= code <= 599:
            msg = f"{name} must only contain HTTP status codes, got {code}"
            raise ValueError(msg)
