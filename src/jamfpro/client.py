r"""Shared HTTP transport of the Jamf Pro clients.

``BaseClient`` turns a ``RequestSpec`` into one completed HTTP exchange:
it builds the URL, sets the default headers, drives the request through
the retry loop and validates the final response. The Classic, Jamf Pro
and informal clients are thin layers on top of it.
"""

from __future__ import annotations

__all__ = ["BaseClient"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from jamfpro.core.config import JSON_CONTENT_TYPE, ClientConfig
from jamfpro.core.request_spec import HttpMethod, RequestSpec
from jamfpro.core.response import validate_response
from jamfpro.core.uri import Uri, build_uri, parse_base_url
from jamfpro.exceptions import NilResponseError
from jamfpro.retry import RetryExecutor

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self


class BaseClient:
    r"""Retrying HTTP transport bound to one API family of a server.

    The client can be used as a context manager, in two ways:

    **Injected client**: an ``httpx.Client`` opened by an outer ``with``
    block is passed in. ``BaseClient`` uses it and leaves it open on exit.

    .. code-block:: python

        with httpx.Client(verify=False) as http_client:
            with BaseClient("https://example.jamfcloud.com/api", client=http_client) as client:
                response = client.get(Uri("/v1/categories"), valid_status_codes=(200,))
        # http_client is closed here by the outer ``with`` block

    **Owned client**: no client is passed in. ``BaseClient`` creates one,
    opens it on enter and closes it on exit.

    The bearer token and the ``disable_retries`` toggle are plain
    attributes read on every call. They are not synchronized: changing
    them while other threads have requests in flight must be guarded by
    the caller.

    Args:
        base_url: The server URL, e.g. ``https://example.jamfcloud.com``.
        prefix: The fixed path prefix of the API family, e.g. ``/api``.
        config: Optional retry and transport configuration. If ``None``,
            a default ``ClientConfig`` is used.
        client: Optional ``httpx.Client`` used to send the requests. If
            ``None``, one is created with ``config.timeout``.
        default_content_type: The ``Content-Type`` of requests whose spec
            does not override it.
        logger: Optional logger receiving the diagnostics of the client.

    Raises:
        InvalidBaseURLError: If ``base_url`` is malformed.

    Example:
        ```pycon
        >>> from jamfpro.client import BaseClient
        >>> from jamfpro.core import Uri
        >>> with BaseClient("https://example.jamfcloud.com/api") as client:  # doctest: +SKIP
        ...     client.set_authorization_token("token")
        ...     response = client.get(Uri("/v1/scripts"), valid_status_codes=(200,))
        ...     try:
        ...         data = response.read()
        ...     finally:
        ...         response.close()
        ...

        ```
    """

    def __init__(
        self,
        base_url: str,
        *,
        prefix: str = "",
        config: ClientConfig | None = None,
        client: httpx.Client | None = None,
        default_content_type: str = JSON_CONTENT_TYPE,
        logger: logging.Logger | None = None,
    ) -> None:
        self.base_url: httpx.URL = parse_base_url(base_url, prefix)
        self.config: ClientConfig = config or ClientConfig()
        self.default_content_type = default_content_type
        self.logger: logging.Logger = logger if logger is not None else logging.getLogger(__name__)
        self.authorization_token: str | None = None
        self.disable_retries: bool = self.config.disable_retries
        self._client: httpx.Client = client or httpx.Client(timeout=self.config.timeout)
        self._close_client = client is None
        self._executor = RetryExecutor(self.config, log=self.logger)

    def __enter__(self) -> Self:
        if self._close_client:
            self._client.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._close_client:
            self._client.__exit__(exc_type, exc_val, exc_tb)
            self._close_client = False

    def close(self) -> None:
        """Close the underlying ``httpx.Client``."""
        self._client.close()
        self._close_client = False

    @property
    def http_client(self) -> httpx.Client:
        """The underlying ``httpx.Client``."""
        return self._client

    def set_authorization_token(self, token: str | None) -> None:
        """Set the bearer token attached to the next requests.

        ``None`` removes the ``Authorization`` header.
        """
        self.authorization_token = token

    def url_for(self, uri: Uri) -> str:
        """Return the absolute URL of a relative ``Uri``."""
        return build_uri(self.base_url, uri)

    def build_request(self, spec: RequestSpec) -> httpx.Request:
        """Build the request of a spec with its default headers.

        The ``Content-Type`` header is set first, then the bearer token
        if any, then the middleware of the spec runs and may override
        both.
        """
        request = self._client.build_request(
            spec.method.value, self.url_for(spec.uri), content=spec.body
        )
        request.headers["Content-Type"] = spec.resolve_content_type(self.default_content_type)
        if self.authorization_token:
            request.headers["Authorization"] = f"Bearer {self.authorization_token}"
        if spec.request_middleware_func is not None:
            spec.request_middleware_func(request)
        return request

    def _send(self, request: httpx.Request) -> httpx.Response | None:
        return self._client.send(request, stream=True)

    def request(self, spec: RequestSpec) -> httpx.Response:
        r"""Send the request described by a spec.

        Args:
            spec: The description of the call.

        Returns:
            The response, with its body still open. The caller must
            close it, typically in a ``try/finally`` block.

        Raises:
            TransportError: If the request failed at the network level
                and the retry policy gave up.
            NilResponseError: If the HTTP stack returned no response.
            UnexpectedStatusError: If the status of the final response
                is not accepted by the spec.
        """
        request = self.build_request(spec)
        method = request.method
        url = str(request.url)
        self.logger.debug(f"Sending {method} request to {url}")

        response = self._executor.execute(
            self._send, request, spec, disable_retries=self.disable_retries
        )
        if response is None:
            raise NilResponseError(method=method, url=url, message="nil response received")
        return validate_response(response, spec, method=method, url=url, log=self.logger)

    def _request(
        self, method: HttpMethod, uri: Uri, valid_status_codes: tuple[int, ...], **kwargs: Any
    ) -> httpx.Response:
        return self.request(
            RequestSpec(method=method, uri=uri, valid_status_codes=valid_status_codes, **kwargs)
        )

    def get(self, uri: Uri, valid_status_codes: tuple[int, ...], **kwargs: Any) -> httpx.Response:
        r"""Send a GET request.

        Args:
            uri: The location of the request.
            valid_status_codes: The statuses considered a success.
            **kwargs: Additional fields of the ``RequestSpec``.

        Returns:
            The open response.
        """
        return self._request(HttpMethod.GET, uri, valid_status_codes, **kwargs)

    def post(self, uri: Uri, valid_status_codes: tuple[int, ...], **kwargs: Any) -> httpx.Response:
        r"""Send a POST request. See ``get``."""
        return self._request(HttpMethod.POST, uri, valid_status_codes, **kwargs)

    def put(self, uri: Uri, valid_status_codes: tuple[int, ...], **kwargs: Any) -> httpx.Response:
        r"""Send a PUT request. See ``get``."""
        return self._request(HttpMethod.PUT, uri, valid_status_codes, **kwargs)

    def patch(self, uri: Uri, valid_status_codes: tuple[int, ...], **kwargs: Any) -> httpx.Response:
        r"""Send a PATCH request. See ``get``."""
        return self._request(HttpMethod.PATCH, uri, valid_status_codes, **kwargs)

    def delete(self, uri: Uri, valid_status_codes: tuple[int, ...], **kwargs: Any) -> httpx.Response:
        r"""Send a DELETE request. See ``get``."""
        return self._request(HttpMethod.DELETE, uri, valid_status_codes, **kwargs)
