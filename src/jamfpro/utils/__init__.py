r"""Helper functions shared by the transport modules."""

from __future__ import annotations

__all__ = ["basic_auth_middleware", "parse_retry_after", "retry_after_delay"]

from jamfpro.utils.auth import basic_auth_middleware
from jamfpro.utils.retry_after import parse_retry_after, retry_after_delay
