r"""Retry loop shared by every request of a client."""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING

import httpx

from jamfpro.callbacks import invoke_on_request, invoke_on_retry
from jamfpro.core.response import close_response
from jamfpro.exceptions import TransportError
from jamfpro.retry.decider import RetryDecider
from jamfpro.retry.strategy import RetryStrategy

if TYPE_CHECKING:
    from collections.abc import Callable

    from jamfpro.core.config import ClientConfig
    from jamfpro.core.request_spec import RequestSpec

logger: logging.Logger = logging.getLogger(__name__)


def discard_response(response: httpx.Response, log: logging.Logger | None = None) -> None:
    """Drain and close the body of a response that will be retried."""
    try:
        response.read()
    except (httpx.HTTPError, httpx.StreamError) as exc:
        (log or logger).debug(f"Error draining response body before retry: {exc}")
    finally:
        close_response(response, log)


class RetryExecutor:
    """Send a request, retrying it until the decider gives up.

    The executor only decides whether to try again. The last response
    is returned as-is, whatever its status, and classifying it is left
    to ``validate_response``. Bodies of the intermediate responses are
    drained and closed before the next attempt.

    Args:
        config: The configuration of the client.
        log: Optional logger receiving the retry diagnostics.
    """

    def __init__(self, config: ClientConfig, log: logging.Logger | None = None) -> None:
        self.max_retries = config.max_retries
        self.max_total_time = config.max_total_time
        self.on_request = config.on_request
        self.on_retry = config.on_retry
        self.decider = RetryDecider(
            retry_status_codes=config.retry_status_codes,
            retry_transport_errors=config.retry_transport_errors,
            retry_failed_dependency=config.retry_failed_dependency,
            failed_dependency_ignores_disable=config.failed_dependency_ignores_disable,
        )
        self.strategy = RetryStrategy(
            backoff_strategy=config.backoff_strategy,
            jitter_factor=config.jitter_factor,
            max_wait_time=config.max_wait_time,
        )
        self.logger = log or logger

    def execute(
        self,
        send: Callable[[httpx.Request], httpx.Response | None],
        request: httpx.Request,
        spec: RequestSpec,
        *,
        disable_retries: bool = False,
    ) -> httpx.Response | None:
        """Run the attempts of a request.

        Args:
            send: The function performing one attempt.
            request: The fully prepared request. It is sent as-is on
                every attempt.
            spec: The spec of the request, for its consistency-failure
                predicate.
            disable_retries: The current value of the client toggle.

        Returns:
            The response of the last attempt, body still open, or
            ``None`` if ``send`` returned nothing.

        Raises:
            TransportError: If the last attempt failed without a
                response.
        """
        url = str(request.url)
        method = request.method
        start_time = time.monotonic()

        for attempt in range(self.max_retries + 1):
            invoke_on_request(
                self.on_request, url=url, method=method, attempt=attempt, max_retries=self.max_retries
            )
            response: httpx.Response | None = None
            error: httpx.TransportError | None = None
            try:
                response = send(request)
            except httpx.TransportError as exc:
                error = exc
                self.logger.debug(f"{method} request to {url} failed: {exc!r}")

            if response is None and error is None:
                return None

            try:
                should_retry, reason = self.decider.should_retry(
                    response, error, spec, disable_retries=disable_retries
                )
            except BaseException:
                if response is not None:
                    close_response(response, self.logger)
                raise
            if not should_retry:
                break
            if attempt >= self.max_retries:
                self.logger.debug(
                    f"{method} request to {url} still failing after {attempt + 1} attempts ({reason})"
                )
                break

            wait_time = self.strategy.calculate_delay(attempt, response)
            if self.max_total_time is not None:
                elapsed = time.monotonic() - start_time
                if elapsed + wait_time > self.max_total_time:
                    self.logger.debug(
                        f"{method} request to {url}: not retrying ({reason}), "
                        f"max_total_time of {self.max_total_time}s would be exceeded"
                    )
                    break

            status_code = response.status_code if response is not None else None
            if response is not None:
                discard_response(response, self.logger)
            self.logger.debug(
                f"{method} request to {url} will be retried in {wait_time:.2f}s "
                f"(attempt {attempt + 2}/{self.max_retries + 1}, {reason})"
            )
            invoke_on_retry(
                self.on_retry,
                url=url,
                method=method,
                attempt=attempt,
                max_retries=self.max_retries,
                wait_time=wait_time,
                reason=reason,
                error=error,
                status_code=status_code,
            )
            time.sleep(wait_time)

        if error is not None:
            if isinstance(error, httpx.TimeoutException):
                message = f"request timed out ({attempt + 1} attempts)"
            else:
                message = f"request failed after {attempt + 1} attempts: {error}"
            raise TransportError(method=method, url=url, message=message, cause=error) from error
        return response
