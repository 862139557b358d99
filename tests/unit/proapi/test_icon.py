r"""Unit tests for the Jamf Pro API icons."""

from __future__ import annotations

import io
from unittest.mock import Mock

import httpx
import pytest
from coola.equality import objects_are_equal

from jamfpro.exceptions import UnexpectedStatusError
from jamfpro.proapi import ProClient
from jamfpro.proapi.icon import Icon, IconContentOptions, IconResolution, encode_multipart_file
from tests.helpers import SERVER_URL, create_client, json_response

ICON_URL = f"{SERVER_URL}/api/v1/icon"
PNG = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


###########################################
#     Tests for encode_multipart_file     #
###########################################


def test_encode_multipart_file() -> None:
    body, content_type = encode_multipart_file("file", "app.png", PNG)
    assert content_type.startswith("multipart/form-data; boundary=")
    boundary = content_type.split("boundary=")[1].encode("ascii")
    assert body.startswith(b"--" + boundary + b"\r\n")
    assert b'Content-Disposition: form-data; name="file"; filename="app.png"' in body
    assert b"Content-Type: image/png" in body
    assert PNG in body
    assert body.endswith(b"--" + boundary + b"--\r\n")


def test_encode_multipart_file_object() -> None:
    body, _ = encode_multipart_file("file", "app.png", io.BytesIO(PNG))
    assert PNG in body


########################################
#     Tests for IconContentOptions     #
########################################


def test_icon_content_options_to_params() -> None:
    assert IconContentOptions(res=IconResolution.RES_512, scale="0").to_params() == {
        "res": "512",
        "scale": "0",
    }


def test_icon_content_options_to_params_string_res() -> None:
    assert IconContentOptions(res="original").to_params() == {"res": "original"}


def test_icon_content_options_to_params_invalid_res() -> None:
    with pytest.raises(ValueError, match=r"'1024' is not a valid IconResolution"):
        IconContentOptions(res="1024").to_params()


def test_icon_content_options_to_params_default() -> None:
    assert IconContentOptions().to_params() == {}


#################################
#     Tests for IconService     #
#################################


def test_icon_get(mock_sleep: Mock) -> None:
    client, transport = create_client(
        ProClient, json_response(200, {"id": 1, "name": "app.png", "url": f"{ICON_URL}/download/1"})
    )
    assert objects_are_equal(
        client.icon.get(1), Icon(id=1, name="app.png", url=f"{ICON_URL}/download/1")
    )
    assert transport.urls == [f"{ICON_URL}/1"]
    mock_sleep.assert_not_called()


def test_icon_upload(mock_sleep: Mock) -> None:
    client, transport = create_client(
        ProClient, json_response(201, {"id": 2, "name": "app.png", "url": f"{ICON_URL}/download/2"})
    )
    client.set_authorization_token("token")
    icon = client.icon.upload("app.png", PNG)
    assert objects_are_equal(icon, Icon(id=2, name="app.png", url=f"{ICON_URL}/download/2"))
    request = transport.requests[0]
    assert request.method == "POST"
    assert str(request.url) == ICON_URL
    assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
    assert request.headers["Authorization"] == "Bearer token"
    assert b'name="file"; filename="app.png"' in request.content
    assert PNG in request.content
    mock_sleep.assert_not_called()


def test_icon_upload_retry_resends_body(mock_sleep: Mock) -> None:
    client, transport = create_client(
        ProClient,
        json_response(502),
        json_response(201, {"id": 2, "name": "app.png", "url": f"{ICON_URL}/download/2"}),
    )
    client.icon.upload("app.png", io.BytesIO(PNG))
    first, second = transport.requests
    assert first.content == second.content
    assert PNG in second.content
    mock_sleep.assert_called_once()


def test_icon_download(mock_sleep: Mock) -> None:
    client, transport = create_client(
        ProClient,
        httpx.Response(200, content=PNG, headers={"Content-Type": "image/png"}),
    )
    response = client.icon.download(1, IconContentOptions(res=IconResolution.RES_300, scale="0"))
    try:
        assert response.read() == PNG
    finally:
        response.close()
    url = transport.requests[0].url
    assert url.path == "/api/v1/icon/download/1"
    assert url.params.multi_items() == [("res", "300"), ("scale", "0")]
    mock_sleep.assert_not_called()


def test_icon_download_not_found(mock_sleep: Mock) -> None:
    client, _ = create_client(ProClient, json_response(404))
    with pytest.raises(UnexpectedStatusError, match=r"unexpected status 404"):
        client.icon.download(5)
    mock_sleep.assert_not_called()
