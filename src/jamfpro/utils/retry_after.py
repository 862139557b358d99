r"""Parsing of the ``Retry-After`` response header (RFC 9110)."""

from __future__ import annotations

__all__ = ["RETRY_AFTER_STATUS_CODES", "parse_retry_after", "retry_after_delay"]

import logging
import math
from contextlib import suppress
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)

# Only throttling and maintenance responses carry a meaningful Retry-After.
RETRY_AFTER_STATUS_CODES = (429, 503)


def parse_retry_after(value: str | None) -> float | None:
    """Parse a ``Retry-After`` header value into a number of seconds.

    The value is either a number of seconds (``"120"``) or an HTTP-date
    (``"Wed, 21 Oct 2015 07:28:00 GMT"``). Dates in the past give
    ``0.0``. Infinite and NaN values are rejected.

    Args:
        value: The raw header value, or ``None`` if absent.

    Returns:
        The delay in seconds, or ``None`` if the value is missing or
        cannot be parsed.

    Example:
        ```pycon
        >>> from jamfpro.utils import parse_retry_after
        >>> parse_retry_after("120")
        120.0
        >>> parse_retry_after("soon") is None
        True
        >>> parse_retry_after(None) is None
        True

        ```
    """
    if value is None:
        return None

    with suppress(ValueError):
        seconds = float(value)
        if not math.isfinite(seconds):
            logger.debug(f"Ignoring non-finite Retry-After header: {value!r}")
            return None
        return max(0.0, seconds)

    try:
        retry_date: datetime = parsedate_to_datetime(value)
    except (ValueError, TypeError, OverflowError):
        logger.debug(f"Failed to parse Retry-After header: {value!r}")
        return None
    if retry_date.tzinfo is None:
        retry_date = retry_date.replace(tzinfo=timezone.utc)
    return max(0.0, (retry_date - datetime.now(timezone.utc)).total_seconds())


def retry_after_delay(response: httpx.Response | None) -> float | None:
    """Return the server suggested delay for a throttled response.

    Args:
        response: The last response, or ``None`` after a transport error.

    Returns:
        The delay in seconds when the response is a 429 or 503 carrying
        a valid ``Retry-After`` header, otherwise ``None``.
    """
    if response is None or response.status_code not in RETRY_AFTER_STATUS_CODES:
        return None
    return parse_retry_after(response.headers.get("Retry-After"))
