r"""Client of the Jamf Pro API (``/api``)."""

from __future__ import annotations

__all__ = ["PRO_API_PREFIX", "ProClient"]

from typing import TYPE_CHECKING

from jamfpro.client import BaseClient
from jamfpro.core.config import JSON_CONTENT_TYPE
from jamfpro.proapi.api_authentication import APIAuthenticationService, AuthToken
from jamfpro.proapi.categories import CategoriesService
from jamfpro.proapi.icon import IconService
from jamfpro.proapi.scripts import ScriptsService
from jamfpro.proapi.sso_failover import SSOFailoverService

if TYPE_CHECKING:
    import logging

    import httpx

    from jamfpro.core.config import ClientConfig

PRO_API_PREFIX = "/api"


class ProClient(BaseClient):
    r"""Client of the JSON based Jamf Pro API.

    Args:
        server_url: The Jamf Pro server URL, e.g.
            ``https://yourdomain.jamfcloud.com``.
        config: Optional retry and transport configuration.
        client: Optional ``httpx.Client`` used to send the requests.
        logger: Optional logger receiving the diagnostics of the client.

    Example:
        ```pycon
        >>> from jamfpro.proapi import ProClient
        >>> with ProClient("https://example.jamfcloud.com") as client:  # doctest: +SKIP
        ...     token = client.authenticate("admin", "secret")
        ...     scripts = client.scripts.list()
        ...

        ```
    """

    def __init__(
        self,
        server_url: str,
        *,
        config: ClientConfig | None = None,
        client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(
            server_url,
            prefix=PRO_API_PREFIX,
            config=config,
            client=client,
            default_content_type=JSON_CONTENT_TYPE,
            logger=logger,
        )
        self.api_authentication = APIAuthenticationService(self)
        self.categories = CategoriesService(self)
        self.icon = IconService(self)
        self.scripts = ScriptsService(self)
        self.sso_failover = SSOFailoverService(self)

    def authenticate(self, username: str, password: str) -> AuthToken:
        """Request a bearer token and attach it to the next requests.

        The token is not refreshed when it expires.
        """
        token = self.api_authentication.token(username, password)
        self.set_authorization_token(token.token)
        return token
