r"""Retry policy of the transport: when to retry and how long to
wait."""

from __future__ import annotations

__all__ = ["FAILED_DEPENDENCY", "RetryDecider", "RetryExecutor", "RetryStrategy"]

from jamfpro.retry.decider import FAILED_DEPENDENCY, RetryDecider
from jamfpro.retry.executor import RetryExecutor
from jamfpro.retry.strategy import RetryStrategy
