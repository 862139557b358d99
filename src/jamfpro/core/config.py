r"""Configuration dataclass and defaults of the Jamf Pro clients.

The configuration is set once when a client is built. The only fields
the client copies into mutable state are ``disable_retries`` (see
``BaseClient.disable_retries``) and the hooks.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_MAX_WAIT_TIME",
    "DEFAULT_TIMEOUT",
    "FORM_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
    "OCTET_STREAM_CONTENT_TYPE",
    "RETRY_STATUS_CODES",
    "XML_CONTENT_TYPE",
    "ClientConfig",
]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from jamfpro.backoff import BaseBackoffStrategy, ExponentialBackoff
from jamfpro.core.validation import (
    validate_retry_params,
    validate_status_codes,
    validate_timeout,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from jamfpro.callbacks import RequestInfo, RetryInfo

# Default timeout in seconds of a single attempt
DEFAULT_TIMEOUT = 30.0

# Total attempts = max_retries + 1
DEFAULT_MAX_RETRIES = 4

# Longest single delay in seconds, Retry-After included
DEFAULT_MAX_WAIT_TIME = 60.0

# Status codes the baseline policy retries on
# 429: Too Many Requests
# 500: Internal Server Error
# 502: Bad Gateway
# 503: Service Unavailable
# 504: Gateway Timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)

XML_CONTENT_TYPE = "application/xml; charset=utf-8"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
OCTET_STREAM_CONTENT_TYPE = "application/octet-stream"


@dataclass
class ClientConfig:
    """Retry and transport configuration of a client.

    Args:
        max_retries: Maximum number of retries after the first attempt.
        backoff_strategy: Strategy computing the delay between attempts.
        jitter_factor: Factor of random jitter added to each delay.
        max_wait_time: Cap of a single delay, in seconds. It also caps
            ``Retry-After`` values sent by the server. ``None`` removes
            the cap.
        max_total_time: Optional time budget of all the attempts of a
            request, in seconds. Once spent, no new attempt is made and
            the last outcome is reported.
        retry_status_codes: Status codes the baseline policy retries on.
        retry_transport_errors: Whether the baseline policy retries on
            network errors (connection reset, timeout...).
        disable_retries: If ``True`` every request is attempted once.
        retry_failed_dependency: Whether a ``424 Failed Dependency``
            response is retried. Jamf Pro answers 424 while a dependent
            object is still being written.
        failed_dependency_ignores_disable: If ``True``, 424 responses are
            retried even when ``disable_retries`` is set.
        timeout: Timeout of the ``httpx.Client`` created by the client
            when none is injected.
        on_request: Optional hook called before every attempt.
        on_retry: Optional hook called before every retry.

    Example:
        ```pycon
        >>> from jamfpro.core import ClientConfig
        >>> config = ClientConfig(max_retries=2)
        >>> config.max_retries
        2
        >>> config.merge(max_retries=5).max_retries
        5
        >>> config.max_retries
        2

        ```
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    backoff_strategy: BaseBackoffStrategy = field(default_factory=ExponentialBackoff)
    jitter_factor: float = 0.0
    max_wait_time: float | None = DEFAULT_MAX_WAIT_TIME
    max_total_time: float | None = None
    retry_status_codes: tuple[int, ...] = RETRY_STATUS_CODES
    retry_transport_errors: bool = True
    disable_retries: bool = False
    retry_failed_dependency: bool = True
    failed_dependency_ignores_disable: bool = False
    timeout: float | httpx.Timeout | None = DEFAULT_TIMEOUT
    on_request: Callable[[RequestInfo], None] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None

    def __post_init__(self) -> None:
        validate_retry_params(
            max_retries=self.max_retries,
            jitter_factor=self.jitter_factor,
            max_total_time=self.max_total_time,
            max_wait_time=self.max_wait_time,
        )
        validate_status_codes("retry_status_codes", self.retry_status_codes)
        validate_timeout(self.timeout)
        self.retry_status_codes = tuple(self.retry_status_codes)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Return a copy of the config with some fields overridden.

        ``None`` overrides are ignored so optional arguments can be
        forwarded as-is.
        """
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a dictionary."""
        return {
            "max_retries": self.max_retries,
            "backoff_strategy": self.backoff_strategy,
            "jitter_factor": self.jitter_factor,
            "max_wait_time": self.max_wait_time,
            "max_total_time": self.max_total_time,
            "retry_status_codes": self.retry_status_codes,
            "retry_transport_errors": self.retry_transport_errors,
            "disable_retries": self.disable_retries,
            "retry_failed_dependency": self.retry_failed_dependency,
            "failed_dependency_ignores_disable": self.failed_dependency_ignores_disable,
            "timeout": self.timeout,
            "on_request": self.on_request,
            "on_retry": self.on_retry,
        }
