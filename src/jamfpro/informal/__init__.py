r"""Client of the undocumented endpoints of the Jamf Pro web console."""

from __future__ import annotations

__all__ = ["InformalClient"]

from jamfpro.informal.client import InformalClient
