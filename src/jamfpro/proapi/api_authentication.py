r"""Bearer token acquisition (``/v1/auth``)."""

from __future__ import annotations

__all__ = ["APIAuthenticationService", "AuthToken"]

from jamfpro.core.uri import Uri
from jamfpro.proapi.common import ProModel, ProService
from jamfpro.utils.auth import basic_auth_middleware


class AuthToken(ProModel):
    token: str | None = None
    # ISO 8601 date, e.g. 2024-01-31T09:30:00.000Z
    expires: str | None = None


class APIAuthenticationService(ProService):
    path = "/v1/auth"

    def token(self, username: str, password: str) -> AuthToken:
        r"""Request a bearer token with Basic authentication.

        The token is not stored on the client. Use
        ``ProClient.authenticate`` for that.

        Args:
            username: The name of the Jamf Pro account.
            password: The password of the account.

        Returns:
            The token and its expiry date.
        """
        response = self.client.post(
            Uri(f"{self.path}/token"),
            (200,),
            request_middleware_func=basic_auth_middleware(username, password),
        )
        return self._decode(response, AuthToken)
