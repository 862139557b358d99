r"""Web console session of the Jamf Pro server."""

from __future__ import annotations

__all__ = ["SessionService", "encode_form"]

import httpx

from jamfpro.core.config import FORM_CONTENT_TYPE
from jamfpro.core.response import read_response
from jamfpro.core.uri import Uri
from jamfpro.informal.common import InformalService


def encode_form(fields: dict[str, str]) -> bytes:
    """Encode fields as an ``application/x-www-form-urlencoded`` body,
    sorted by name."""
    return httpx.Request("POST", "http://localhost", data=dict(sorted(fields.items()))).read()


class SessionService(InformalService):
    def create(self, login_url: str) -> httpx.Response:
        r"""Log in to the web console with a form POST.

        The server answers ``302 Found`` with the session cookies, which
        the underlying ``httpx.Client`` keeps for the next requests.

        Args:
            login_url: The URL of the login form. Only its path and
                query are used, e.g. ``/index.html?redirect=%2F``.

        Returns:
            The response of the server, already closed.

        Raises:
            ValueError: If ``login_url`` cannot be parsed.
        """
        try:
            url = httpx.URL(login_url)
        except httpx.InvalidURL as exc:
            msg = f"SessionService.create(): invalid login URL {login_url!r}: {exc}"
            raise ValueError(msg) from exc
        params = {key: url.params.get_list(key) for key in url.params}
        body = encode_form({"username": self.username, "password": self.password})
        response = self.client.post(
            Uri(url.path, params or None),
            (302,),
            body=body,
            content_type=FORM_CONTENT_TYPE,
        )
        read_response(response, self.client.logger)
        return response
