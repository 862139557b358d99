r"""jamfpro - Typed client of the Jamf Pro device management APIs.

The package provides one client per API family, all built on the same
retrying HTTP transport (``jamfpro.client.BaseClient``):

    - ``ClassicClient``: the XML based Classic API (``/JSSResource``)
    - ``ProClient``: the JSON based Jamf Pro API (``/api``)
    - ``InformalClient``: undocumented web console endpoints

Example:
    ```pycon
    >>> from jamfpro import ClassicClient, ProClient
    >>> from jamfpro.core import ClientConfig
    >>> pro = ProClient("https://example.jamfcloud.com")
    >>> token = pro.authenticate("admin", "secret")  # doctest: +SKIP
    >>> classic = ClassicClient(
    ...     "https://example.jamfcloud.com", config=ClientConfig(max_retries=2)
    ... )
    >>> classic.set_authorization_token(token.token)  # doctest: +SKIP
    >>> groups = classic.computer_groups.list()  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "BaseClient",
    "ClassicClient",
    "ClientConfig",
    "InformalClient",
    "JamfError",
    "JamfRequestError",
    "ProClient",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from jamfpro.classic import ClassicClient
from jamfpro.client import BaseClient
from jamfpro.core.config import ClientConfig
from jamfpro.exceptions import JamfError, JamfRequestError
from jamfpro.informal import InformalClient
from jamfpro.proapi import ProClient

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
