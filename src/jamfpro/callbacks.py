r"""Observability hooks for the request lifecycle.

Two hooks are available on ``ClientConfig``:

- ``on_request``: called before every attempt, including the first one.
- ``on_retry``: called once the retry policy decided to try again,
  right before sleeping.

Example:
    ```pycon
    >>> from jamfpro.callbacks import RetryInfo
    >>> from jamfpro.core import ClientConfig
    >>> def log_retry(info: RetryInfo) -> None:
    ...     print(f"retrying {info.method} {info.url} ({info.reason})")
    ...
    >>> config = ClientConfig(on_retry=log_retry)

    ```
"""

from __future__ import annotations

__all__ = ["RequestInfo", "RetryInfo", "invoke_on_request", "invoke_on_retry"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class RequestInfo:
    """Information passed to the ``on_request`` hook.

    Attributes:
        url: The absolute URL being requested.
        method: The HTTP method.
        attempt: The attempt number, starting at 1.
        max_retries: The maximum number of retries configured.
    """

    url: str
    method: str
    attempt: int
    max_retries: int


@dataclass
class RetryInfo:
    """Information passed to the ``on_retry`` hook.

    Attributes:
        url: The absolute URL being requested.
        method: The HTTP method.
        attempt: The number of the upcoming attempt, starting at 2.
        max_retries: The maximum number of retries configured.
        wait_time: The delay in seconds before the upcoming attempt.
        reason: Why the retry policy decided to retry.
        error: The transport error of the failed attempt, if any.
        status_code: The status code of the failed attempt, if any.
    """

    url: str
    method: str
    attempt: int
    max_retries: int
    wait_time: float
    reason: str
    error: Exception | None
    status_code: int | None


def invoke_on_request(
    on_request: Callable[[RequestInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
) -> None:
    """Invoke the ``on_request`` hook if provided.

    ``attempt`` is 0-indexed; the hook receives it 1-indexed.
    """
    if on_request is not None:
        on_request(RequestInfo(url=url, method=method, attempt=attempt + 1, max_retries=max_retries))


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
    wait_time: float,
    reason: str,
    error: Exception | None,
    status_code: int | None,
) -> None:
    """Invoke the ``on_retry`` hook if provided.

    ``attempt`` is the 0-indexed number of the attempt that failed; the
    hook receives the 1-indexed number of the next one.
    """
    if on_retry is not None:
        on_retry(
            RetryInfo(
                url=url,
                method=method,
                attempt=attempt + 2,
                max_retries=max_retries,
                wait_time=wait_time,
                reason=reason,
                error=error,
                status_code=status_code,
            )
        )
