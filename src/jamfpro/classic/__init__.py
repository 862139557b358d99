r"""Client of the XML based Classic API."""

from __future__ import annotations

__all__ = ["CLASSIC_API_PREFIX", "ClassicClient", "retry_on_404"]

from jamfpro.classic.client import CLASSIC_API_PREFIX, ClassicClient
from jamfpro.classic.common import retry_on_404
