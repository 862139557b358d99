r"""Classification of the final response of a request.

Once the retry loop is over, the response is either handed back to the
caller with its body still open, or turned into an
``UnexpectedStatusError``. On the failure path the body is always read
and closed here, so the caller never receives a half-open response.
"""

from __future__ import annotations

__all__ = ["close_response", "read_error_body", "read_response", "validate_response"]

import logging
from typing import TYPE_CHECKING

import httpx

from jamfpro.exceptions import TransportError, UnexpectedStatusError, UnreadableBodyError

if TYPE_CHECKING:
    from jamfpro.core.request_spec import RequestSpec

logger: logging.Logger = logging.getLogger(__name__)


def close_response(response: httpx.Response, log: logging.Logger | None = None) -> None:
    """Close a response, logging instead of raising on failure.

    Args:
        response: The response to close.
        log: The logger receiving the diagnostic. Defaults to the module
            logger.
    """
    try:
        response.close()
    except (httpx.HTTPError, httpx.StreamError, OSError) as exc:
        (log or logger).warning(f"Error closing response body: {exc}")


def read_response(response: httpx.Response, log: logging.Logger | None = None) -> bytes:
    """Read the whole body of a successful response and close it.

    Raises:
        TransportError: If the body could not be read.
    """
    try:
        return response.read()
    except (httpx.HTTPError, httpx.StreamError) as exc:
        request = response.request
        raise TransportError(
            method=request.method,
            url=str(request.url),
            message=f"could not read response body: {exc}",
            status_code=response.status_code,
            response=response,
            cause=exc,
        ) from exc
    finally:
        close_response(response, log)


def read_error_body(response: httpx.Response) -> str:
    """Read the whole body of a failed response.

    Raises:
        httpx.HTTPError: If the connection drops mid-body.
        httpx.StreamError: If the stream was already consumed or closed.
    """
    response.read()
    return response.text


def validate_response(
    response: httpx.Response,
    spec: RequestSpec,
    *,
    method: str,
    url: str,
    log: logging.Logger | None = None,
) -> httpx.Response:
    """Check the status of the final response of a request.

    The response is a success if its status is in
    ``spec.valid_status_codes`` or, failing that, if
    ``spec.valid_status_func`` accepts it. Otherwise the response is
    closed before the error is raised, and so it is when
    ``valid_status_func`` itself raises.

    Args:
        response: The final response, with its body not consumed yet.
        spec: The spec of the request.
        method: The HTTP method, for error messages.
        url: The absolute URL, for error messages.
        log: The logger receiving close diagnostics.

    Returns:
        The response, body still open, on success. The caller must close
        it.

    Raises:
        UnexpectedStatusError: If the status is not accepted. The message
            embeds the status and the body, or says the body is empty.
        UnreadableBodyError: If the status is not accepted and the body
            could not be read.
    """
    status = response.status_code
    if spec.is_valid_status(status):
        return response
    if spec.valid_status_func is not None:
        try:
            accepted = spec.valid_status_func(response)
        except BaseException:
            close_response(response, log)
            raise
        if accepted:
            logger.debug(f"{method} request to {url} accepted status {status} through valid_status_func")
            return response

    try:
        body = read_error_body(response)
    except (httpx.HTTPError, httpx.StreamError) as exc:
        raise UnreadableBodyError(
            method=method,
            url=url,
            message=f"unexpected status {status}, could not read response body",
            status_code=status,
            response=response,
            cause=exc,
        ) from exc
    finally:
        close_response(response, log)

    if not body:
        raise UnexpectedStatusError(
            method=method,
            url=url,
            message=f"unexpected status {status} received with no body",
            status_code=status,
            response=response,
            body=body,
        )
    raise UnexpectedStatusError(
        method=method,
        url=url,
        message=f"unexpected status {status} with response: {body}",
        status_code=status,
        response=response,
        body=body,
    )
