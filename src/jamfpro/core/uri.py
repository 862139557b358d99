r"""Construction of absolute request URLs.

A client holds a base URL made of the server URL and the fixed path
prefix of an API family (``/JSSResource`` for the Classic API, ``/api``
for the Jamf Pro API). Each request names an entity path relative to
that prefix plus optional query parameters.
"""

from __future__ import annotations

__all__ = ["Uri", "build_uri", "encode_params", "join_path", "parse_base_url"]

import posixpath
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Union

import httpx

from jamfpro.exceptions import InvalidBaseURLError

ParamValue = Union[str, int, Sequence[Union[str, int]]]


@dataclass(frozen=True)
class Uri:
    """Relative location of a request.

    Args:
        entity: The path relative to the client base URL, e.g.
            ``/computergroups/id/1``.
        params: Optional query parameters. Sequence values produce one
            ``key=value`` pair per item.
    """

    entity: str = ""
    params: Mapping[str, ParamValue] | None = None


def join_path(base: str, entity: str) -> str:
    """Join two URL paths the way a path join would.

    Duplicate slashes are collapsed, ``.`` and ``..`` segments resolved,
    and the trailing slash of ``entity`` is kept.

    Example:
        ```pycon
        >>> from jamfpro.core.uri import join_path
        >>> join_path("/JSSResource", "/computergroups/id/0")
        '/JSSResource/computergroups/id/0'
        >>> join_path("/tenant/", "//api//v1/scripts/")
        '/tenant/api/v1/scripts/'
        >>> join_path("/", "")
        '/'

        ```
    """
    parts = [part.strip("/") for part in (base, entity)]
    joined = posixpath.normpath("/" + "/".join(part for part in parts if part))
    if entity.endswith("/") and joined != "/":
        joined += "/"
    return joined


def encode_params(params: Mapping[str, ParamValue]) -> list[tuple[str, str]]:
    """Flatten query parameters into key/value pairs sorted by key.

    Example:
        ```pycon
        >>> from jamfpro.core.uri import encode_params
        >>> encode_params({"page-size": 100, "page": 0, "sort": ["id:asc", "name:desc"]})
        [('page', '0'), ('page-size', '100'), ('sort', 'id:asc'), ('sort', 'name:desc')]

        ```
    """
    pairs: list[tuple[str, str]] = []
    for key in sorted(params):
        value = params[key]
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if isinstance(item, bool):
                item = str(item).lower()  # noqa: PLW2901
            pairs.append((key, str(item)))
    return pairs


def parse_base_url(server_url: str, prefix: str = "") -> httpx.URL:
    """Validate a server URL and append the API family prefix.

    Args:
        server_url: The Jamf Pro server URL, e.g.
            ``https://yourdomain.jamfcloud.com``.
        prefix: The fixed path prefix of the API family.

    Returns:
        The base URL of the client.

    Raises:
        InvalidBaseURLError: If the URL cannot be parsed, is not http(s)
            or has no host.

    Example:
        ```pycon
        >>> from jamfpro.core.uri import parse_base_url
        >>> str(parse_base_url("https://example.jamfcloud.com", "/JSSResource"))
        'https://example.jamfcloud.com/JSSResource'

        ```
    """
    try:
        url = httpx.URL(server_url)
    except (httpx.InvalidURL, TypeError) as exc:
        msg = f"invalid server URL {server_url!r}: {exc}"
        raise InvalidBaseURLError(msg) from exc
    if url.scheme not in ("http", "https"):
        msg = f"invalid server URL {server_url!r}: scheme must be http or https"
        raise InvalidBaseURLError(msg)
    if not url.host:
        msg = f"invalid server URL {server_url!r}: missing host"
        raise InvalidBaseURLError(msg)
    if prefix:
        url = url.copy_with(path=join_path(url.path, prefix))
    return url


def build_uri(base_url: httpx.URL, uri: Uri) -> str:
    """Resolve a relative ``Uri`` against the client base URL.

    Args:
        base_url: The base URL of the client.
        uri: The relative location of the request.

    Returns:
        The absolute URL. Query parameters are encoded in sorted key
        order, so the same ``Uri`` always gives the same string.

    Example:
        ```pycon
        >>> import httpx
        >>> from jamfpro.core.uri import Uri, build_uri
        >>> base = httpx.URL("https://example.jamfcloud.com/api")
        >>> build_uri(base, Uri("/v1/categories", {"page-size": 10, "page": 0}))
        'https://example.jamfcloud.com/api/v1/categories?page=0&page-size=10'

        ```
    """
    url = base_url.copy_with(path=join_path(base_url.path, uri.entity))
    if uri.params:
        url = url.copy_with(params=encode_params(uri.params))
    return str(url)
