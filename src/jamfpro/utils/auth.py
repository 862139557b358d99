r"""Request middlewares setting credentials on outgoing requests."""

from __future__ import annotations

__all__ = ["basic_auth_middleware"]

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from jamfpro.core.request_spec import RequestMiddlewareFunc


def basic_auth_middleware(username: str, password: str) -> RequestMiddlewareFunc:
    """Return a middleware setting a Basic ``Authorization`` header.

    It replaces the bearer token the client may have set.

    Example:
        ```pycon
        >>> import httpx
        >>> from jamfpro.utils.auth import basic_auth_middleware
        >>> request = httpx.Request("POST", "https://example.jamfcloud.com/api/v1/auth/token")
        >>> basic_auth_middleware("admin", "secret")(request)
        >>> request.headers["Authorization"]
        'Basic YWRtaW46c2VjcmV0'

        ```
    """
    auth = httpx.BasicAuth(username, password)

    def set_basic_auth(request: httpx.Request) -> None:
        next(auth.auth_flow(request))

    return set_basic_auth
