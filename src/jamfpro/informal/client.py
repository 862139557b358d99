r"""Client of the undocumented endpoints of the Jamf Pro web console."""

from __future__ import annotations

__all__ = ["InformalClient"]

from typing import TYPE_CHECKING

from jamfpro.client import BaseClient
from jamfpro.informal.distribution_file_upload import DistributionFileUploadService
from jamfpro.informal.session import SessionService

if TYPE_CHECKING:
    import logging

    import httpx

    from jamfpro.core.config import ClientConfig


class InformalClient(BaseClient):
    r"""Client of the web console endpoints, with no path prefix.

    These endpoints do not accept bearer tokens. The account
    credentials are sent by each service, as Basic authentication or
    as a login form.

    Args:
        server_url: The Jamf Pro server URL.
        username: The name of the Jamf Pro account.
        password: The password of the account.
        config: Optional retry and transport configuration.
        client: Optional ``httpx.Client`` used to send the requests.
        logger: Optional logger receiving the diagnostics of the client.
    """

    def __init__(
        self,
        server_url: str,
        username: str,
        password: str,
        *,
        config: ClientConfig | None = None,
        client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(server_url, config=config, client=client, logger=logger)
        self.distribution_file_upload = DistributionFileUploadService(self, username, password)
        self.session = SessionService(self, username, password)
