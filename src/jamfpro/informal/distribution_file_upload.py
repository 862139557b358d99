r"""Upload of package, eBook and in-house app files to the cloud
distribution point (``/dbfileupload``)."""

from __future__ import annotations

__all__ = ["Destination", "DistributionFileUploadService", "FileType"]

from enum import Enum
from typing import IO

import httpx

from jamfpro.core.config import OCTET_STREAM_CONTENT_TYPE
from jamfpro.core.response import read_response
from jamfpro.core.uri import Uri
from jamfpro.informal.common import InformalService
from jamfpro.utils.auth import basic_auth_middleware


class Destination(str, Enum):
    DEFAULT = "0"


class FileType(str, Enum):
    PACKAGE = "0"
    EBOOK = "1"
    IN_HOUSE_APP = "2"


class DistributionFileUploadService(InformalService):
    path = "/dbfileupload"

    def upload(
        self,
        package_id: int,
        package_name: str,
        file_type: FileType,
        destination: Destination,
        src: IO[bytes] | bytes,
    ) -> httpx.Response:
        r"""Upload the file of an object created with the Classic API.

        Args:
            package_id: The ID of the object the file belongs to.
            package_name: The file name, e.g. ``app.pkg``.
            file_type: The kind of object.
            destination: The distribution point.
            src: The file content, as bytes or a binary file object.

        Returns:
            The response of the server, already closed.

        Example:
            ```pycon
            >>> from jamfpro.informal import InformalClient
            >>> from jamfpro.informal.distribution_file_upload import Destination, FileType
            >>> client = InformalClient("https://example.jamfcloud.com", "admin", "secret")
            >>> with open("app.pkg", "rb") as f:  # doctest: +SKIP
            ...     client.distribution_file_upload.upload(
            ...         1, "app.pkg", FileType.PACKAGE, Destination.DEFAULT, f
            ...     )
            ...

            ```
        """
        body = src if isinstance(src, bytes) else src.read()
        set_basic_auth = basic_auth_middleware(self.username, self.password)

        def set_upload_headers(request: httpx.Request) -> None:
            set_basic_auth(request)
            request.headers["DESTINATION"] = Destination(destination).value
            request.headers["OBJECT_ID"] = str(package_id)
            request.headers["FILE_TYPE"] = FileType(file_type).value
            request.headers["FILE_NAME"] = package_name

        response = self.client.post(
            Uri(self.path),
            (200,),
            body=body,
            content_type=OCTET_STREAM_CONTENT_TYPE,
            request_middleware_func=set_upload_headers,
        )
        read_response(response, self.client.logger)
        return response
