r"""Jamf Pro API SSO failover URL (``/v1/sso/failover``)."""

from __future__ import annotations

__all__ = ["SSOFailover", "SSOFailoverService"]

from jamfpro.core.uri import Uri
from jamfpro.proapi.common import ProModel, ProService


class SSOFailover(ProModel):
    failover_url: str | None = None
    # Epoch in milliseconds
    generation_time: int | None = None


class SSOFailoverService(ProService):
    path = "/v1/sso/failover"

    def get(self) -> SSOFailover:
        return self._decode(self.client.get(Uri(self.path), (200,)), SSOFailover)

    def generate(self) -> SSOFailover:
        """Generate a new failover URL, invalidating the current one."""
        return self._decode(self.client.post(Uri(f"{self.path}/generate"), (200,)), SSOFailover)
