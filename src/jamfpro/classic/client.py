r"""Client of the Classic API (``/JSSResource``)."""

from __future__ import annotations

__all__ = ["CLASSIC_API_PREFIX", "ClassicClient"]

from typing import TYPE_CHECKING

from jamfpro.classic.computer_extension_attributes import ComputerExtensionAttributesService
from jamfpro.classic.computer_groups import ComputerGroupsService
from jamfpro.classic.osx_configuration_profiles import OSXConfigurationProfilesService
from jamfpro.classic.packages import PackagesService
from jamfpro.classic.policies import PoliciesService
from jamfpro.client import BaseClient
from jamfpro.core.config import XML_CONTENT_TYPE

if TYPE_CHECKING:
    import logging

    import httpx

    from jamfpro.core.config import ClientConfig

CLASSIC_API_PREFIX = "/JSSResource"


class ClassicClient(BaseClient):
    r"""Client of the XML based Classic API.

    The bearer token is usually obtained through the Jamf Pro API, see
    ``jamfpro.proapi.ProClient.authenticate``.

    Args:
        server_url: The Jamf Pro server URL, e.g.
            ``https://yourdomain.jamfcloud.com``.
        config: Optional retry and transport configuration.
        client: Optional ``httpx.Client`` used to send the requests.
        logger: Optional logger receiving the diagnostics of the client.

    Example:
        ```pycon
        >>> from jamfpro.classic import ClassicClient
        >>> client = ClassicClient("https://example.jamfcloud.com")
        >>> str(client.base_url)
        'https://example.jamfcloud.com/JSSResource'
        >>> client.set_authorization_token("token")
        >>> packages = client.packages.list()  # doctest: +SKIP

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
            prefix=CLASSIC_API_PREFIX,
            config=config,
            client=client,
            default_content_type=XML_CONTENT_TYPE,
            logger=logger,
        )
        self.computer_extension_attributes = ComputerExtensionAttributesService(self)
        self.computer_groups = ComputerGroupsService(self)
        self.osx_configuration_profiles = OSXConfigurationProfilesService(self)
        self.packages = PackagesService(self)
        self.policies = PoliciesService(self)
