r"""Client of the JSON based Jamf Pro API."""

from __future__ import annotations

__all__ = ["PRO_API_PREFIX", "ListOptions", "ProClient"]

from jamfpro.proapi.client import PRO_API_PREFIX, ProClient
from jamfpro.proapi.common import ListOptions
