r"""Transport building blocks shared by every API family: configuration,
request specs, URL construction and response validation."""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_MAX_WAIT_TIME",
    "DEFAULT_TIMEOUT",
    "JSON_CONTENT_TYPE",
    "RETRY_STATUS_CODES",
    "XML_CONTENT_TYPE",
    "ClientConfig",
    "HttpMethod",
    "RequestSpec",
    "Uri",
    "build_uri",
    "close_response",
    "parse_base_url",
    "read_response",
    "validate_response",
]

from jamfpro.core.config import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_MAX_WAIT_TIME,
    DEFAULT_TIMEOUT,
    JSON_CONTENT_TYPE,
    RETRY_STATUS_CODES,
    XML_CONTENT_TYPE,
    ClientConfig,
)
from jamfpro.core.request_spec import HttpMethod, RequestSpec
from jamfpro.core.response import close_response, read_response, validate_response
from jamfpro.core.uri import Uri, build_uri, parse_base_url
