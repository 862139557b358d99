r"""Backoff strategies used to space out retry attempts."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ConstantBackoff", "ExponentialBackoff"]

from jamfpro.backoff.base import BaseBackoffStrategy
from jamfpro.backoff.constant import ConstantBackoff
from jamfpro.backoff.exponential import ExponentialBackoff
