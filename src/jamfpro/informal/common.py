r"""Base class of the services of the informal endpoints."""

from __future__ import annotations

__all__ = ["InformalService"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jamfpro.client import BaseClient


class InformalService:
    """Service authenticating with the credentials of a Jamf Pro account.

    Args:
        client: The informal client.
        username: The name of the Jamf Pro account.
        password: The password of the account.
    """

    def __init__(self, client: BaseClient, username: str, password: str) -> None:
        self.client = client
        self.username = username
        self.password = password
