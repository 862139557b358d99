r"""Exception hierarchy for the Jamf Pro client.

Every error raised by the transport carries enough context (HTTP method,
URL, status code and, when available, the response body) for the caller
to tell which operation failed and why.
"""

from __future__ import annotations

__all__ = [
    "DecodeError",
    "InvalidBaseURLError",
    "JamfError",
    "JamfRequestError",
    "NilResponseError",
    "TransportError",
    "UnexpectedStatusError",
    "UnreadableBodyError",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class JamfError(Exception):
    r"""Base class of all the errors raised by this package."""


class InvalidBaseURLError(JamfError, ValueError):
    r"""Raised when a client is built with a malformed server URL."""


class DecodeError(JamfError):
    r"""Raised when a response body cannot be decoded into a model."""


class JamfRequestError(JamfError):
    """Exception raised when an HTTP request to the API fails.

    Args:
        method: The HTTP method of the failed request.
        url: The absolute URL of the failed request.
        message: A human readable description of the failure.
        status_code: The HTTP status code of the last response, if any.
        response: The last response object, if any. Its body is already
            closed.
        cause: The underlying exception, if any.

    Example:
        ```pycon
        >>> from jamfpro.exceptions import JamfRequestError
        >>> error = JamfRequestError(
        ...     method="GET",
        ...     url="https://example.jamfcloud.com/api/v1/scripts",
        ...     message="unexpected status 403 received with no body",
        ...     status_code=403,
        ... )
        >>> error.status_code
        403
        >>> str(error)
        'GET https://example.jamfcloud.com/api/v1/scripts: unexpected status 403 received with no body'

        ```
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status_code: int | None = None,
        response: httpx.Response | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(f"{method} {url}: {message}")
        self.method = method
        self.url = url
        self.message = message
        self.status_code = status_code
        self.response = response
        self.cause = cause


class TransportError(JamfRequestError):
    r"""Raised when the request could not be completed at the network
    level (DNS, TLS, connection reset, timeout...)."""


class NilResponseError(JamfRequestError):
    r"""Raised when the HTTP stack returns neither a response nor an
    error."""


class UnexpectedStatusError(JamfRequestError):
    """Raised when the response status is not accepted for the request.

    Args:
        method: The HTTP method of the failed request.
        url: The absolute URL of the failed request.
        message: A human readable description of the failure.
        status_code: The HTTP status code of the response.
        response: The response object. Its body is already closed.
        body: The decoded response body, or ``None`` if it could not
            be read.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status_code: int,
        response: httpx.Response | None = None,
        body: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            method=method,
            url=url,
            message=message,
            status_code=status_code,
            response=response,
            cause=cause,
        )
        self.body = body


class UnreadableBodyError(UnexpectedStatusError):
    r"""Raised when the status is not accepted and the response body
    could not be read."""
