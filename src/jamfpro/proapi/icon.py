r"""Jamf Pro API icons (``/v1/icon``)."""

from __future__ import annotations

__all__ = ["Icon", "IconContentOptions", "IconResolution", "IconService"]

from dataclasses import dataclass
from enum import Enum
from typing import IO, Any

import httpx

from jamfpro.core.uri import Uri
from jamfpro.proapi.common import ProModel, ProService


class IconResolution(str, Enum):
    ORIGINAL = "original"
    RES_300 = "300"
    RES_512 = "512"


class Icon(ProModel):
    id: int | None = None
    name: str | None = None
    url: str | None = None


@dataclass
class IconContentOptions:
    res: IconResolution | None = None
    # 0 keeps the original scale
    scale: str | None = None

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self.res is not None:
            params["res"] = IconResolution(self.res).value
        if self.scale is not None:
            params["scale"] = self.scale
        return params


def encode_multipart_file(name: str, filename: str, src: IO[bytes] | bytes) -> tuple[bytes, str]:
    """Encode a single file as a ``multipart/form-data`` body.

    Returns:
        The body and its ``Content-Type``, boundary included.
    """
    request = httpx.Request("POST", "http://localhost", files={name: (filename, src)})
    return request.read(), request.headers["Content-Type"]


class IconService(ProService):
    path = "/v1/icon"

    def get(self, icon_id: int) -> Icon:
        return self._decode(self.client.get(Uri(f"{self.path}/{icon_id}"), (200,)), Icon)

    def upload(self, icon_name: str, src: IO[bytes] | bytes) -> Icon:
        r"""Upload an image to be used as a Self Service icon.

        Args:
            icon_name: The file name of the icon, e.g. ``app.png``.
            src: The image content, as bytes or a binary file object.

        Returns:
            The created icon.
        """
        body, content_type = encode_multipart_file("file", icon_name, src)
        response = self.client.post(Uri(self.path), (201,), body=body, content_type=content_type)
        return self._decode(response, Icon)

    def download(self, icon_id: int, options: IconContentOptions | None = None) -> httpx.Response:
        r"""Download the image of an icon.

        The body is not read so large images can be streamed. The
        caller must close the response.

        Example:
            ```pycon
            >>> from jamfpro.proapi import ProClient
            >>> from jamfpro.proapi.icon import IconContentOptions, IconResolution
            >>> client = ProClient("https://example.jamfcloud.com")
            >>> response = client.icon.download(
            ...     1, IconContentOptions(res=IconResolution.RES_300, scale="0")
            ... )  # doctest: +SKIP
            >>> with open("icon.png", "wb") as f:  # doctest: +SKIP
            ...     try:
            ...         for chunk in response.iter_bytes():
            ...             f.write(chunk)
            ...     finally:
            ...         response.close()
            ...

            ```
        """
        params = (options or IconContentOptions()).to_params()
        return self.client.get(Uri(f"{self.path}/download/{icon_id}", params), (200,))
