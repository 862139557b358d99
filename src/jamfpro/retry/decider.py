r"""Decision whether a failed attempt is worth another try.

The decision is taken in this order:

1. If retries are disabled, stop (unless configured to still retry on
   ``424 Failed Dependency``).
2. A ``424 Failed Dependency`` response is retried.
3. A response matching the consistency-failure predicate of the request
   is retried. Jamf Pro answers 404 for a short while after an object
   is created, and the predicate lets a call site wait for it.
4. Otherwise the baseline policy applies: network errors and the
   configured retryable statuses are retried.

Whether the final response is acceptable is decided later by
``validate_response``; the decider only tells whether to try again.
"""

from __future__ import annotations

__all__ = ["FAILED_DEPENDENCY", "RetryDecider"]

import logging
import ssl
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from jamfpro.core.request_spec import RequestSpec

logger: logging.Logger = logging.getLogger(__name__)

FAILED_DEPENDENCY = 424

# Retrying these cannot change the outcome.
NON_RETRYABLE_ERRORS: tuple[type[Exception], ...] = (httpx.UnsupportedProtocol,)


def _is_certificate_error(error: BaseException) -> bool:
    cause: BaseException | None = error
    while cause is not None:
        if isinstance(cause, ssl.SSLCertVerificationError):
            return True
        cause = cause.__cause__ or cause.__context__
    return False


class RetryDecider:
    """Decide whether an attempt should be retried.

    Args:
        retry_status_codes: Statuses retried by the baseline policy.
        retry_transport_errors: Whether the baseline policy retries on
            network errors.
        retry_failed_dependency: Whether 424 responses are retried.
        failed_dependency_ignores_disable: Whether 424 responses are
            retried even when retries are disabled.

    Example:
        ```pycon
        >>> import httpx
        >>> from jamfpro.core import HttpMethod, RequestSpec, Uri
        >>> from jamfpro.retry import RetryDecider
        >>> decider = RetryDecider(retry_status_codes=(503,))
        >>> spec = RequestSpec(HttpMethod.GET, Uri("/packages"), (200,))
        >>> decider.should_retry(httpx.Response(424), None, spec, disable_retries=False)
        (True, 'status 424')
        >>> decider.should_retry(httpx.Response(404), None, spec, disable_retries=False)
        (False, 'status 404')

        ```
    """

    def __init__(
        self,
        retry_status_codes: tuple[int, ...],
        retry_transport_errors: bool = True,
        retry_failed_dependency: bool = True,
        failed_dependency_ignores_disable: bool = False,
    ) -> None:
        self.retry_status_codes = retry_status_codes
        self.retry_transport_errors = retry_transport_errors
        self.retry_failed_dependency = retry_failed_dependency
        self.failed_dependency_ignores_disable = failed_dependency_ignores_disable

    def should_retry(
        self,
        response: httpx.Response | None,
        error: Exception | None,
        spec: RequestSpec,
        *,
        disable_retries: bool,
    ) -> tuple[bool, str]:
        """Decide whether the attempt should be retried.

        Args:
            response: The response of the attempt, or ``None`` after a
                transport error.
            error: The transport error of the attempt, if any.
            spec: The spec of the request.
            disable_retries: The current value of the client toggle.

        Returns:
            A ``(should_retry, reason)`` tuple.
        """
        failed_dependency = (
            self.retry_failed_dependency
            and response is not None
            and response.status_code == FAILED_DEPENDENCY
        )
        if disable_retries:
            if failed_dependency and self.failed_dependency_ignores_disable:
                return (True, f"status {FAILED_DEPENDENCY}")
            return (False, "retries disabled")

        if failed_dependency:
            return (True, f"status {FAILED_DEPENDENCY}")
        if (
            response is not None
            and spec.consistency_failure_func is not None
            and spec.consistency_failure_func(response)
        ):
            return (True, f"consistency failure (status {response.status_code})")
        return self.should_retry_baseline(response, error)

    def should_retry_baseline(
        self, response: httpx.Response | None, error: Exception | None
    ) -> tuple[bool, str]:
        """Apply the baseline policy shared by every request."""
        if error is not None:
            name = type(error).__name__
            if not self.retry_transport_errors:
                return (False, f"{name} (transport retries disabled)")
            if isinstance(error, NON_RETRYABLE_ERRORS) or _is_certificate_error(error):
                return (False, f"non-retryable {name}")
            return (True, name)
        if response is None:
            return (False, "no response")
        if response.status_code in self.retry_status_codes:
            return (True, f"status {response.status_code}")
        return (False, f"status {response.status_code}")
