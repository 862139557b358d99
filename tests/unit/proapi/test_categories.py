r"""Unit tests for the Jamf Pro API categories."""

from __future__ import annotations

import json
from unittest.mock import Mock

import pytest
from coola.equality import objects_are_equal

from jamfpro.exceptions import UnexpectedStatusError
from jamfpro.proapi import ListOptions, ProClient
from jamfpro.proapi.categories import Category, ListCategory
from tests.helpers import SERVER_URL, create_client, json_response

CATEGORIES_URL = f"{SERVER_URL}/api/v1/categories"


def test_category_create(mock_sleep: Mock) -> None:
    client, transport = create_client(
        ProClient, json_response(201, {"id": "3", "href": f"{CATEGORIES_URL}/3"})
    )
    assert client.categories.create(Category(name="Apps", priority=9)) == "3"
    request = transport.requests[0]
    assert request.method == "POST"
    assert str(request.url) == CATEGORIES_URL
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {"name": "Apps", "priority": 9}
    mock_sleep.assert_not_called()


@pytest.mark.parametrize(
    ("category", "message"),
    [
        (Category(priority=9), r"CategoriesService.create\(\): cannot create category with None name"),
        (Category(name="Apps"), r"cannot create category with None priority"),
    ],
)
def test_category_create_invalid(category: Category, message: str) -> None:
    client, transport = create_client(ProClient)
    with pytest.raises(ValueError, match=message):
        client.categories.create(category)
    assert not transport.requests


def test_category_create_retries_server_error(mock_sleep: Mock) -> None:
    client, transport = create_client(
        ProClient,
        json_response(503),
        json_response(201, {"id": "3", "href": f"{CATEGORIES_URL}/3"}),
    )
    assert client.categories.create(Category(name="Apps", priority=9)) == "3"
    assert len(transport.requests) == 2
    assert transport.requests[1].content == transport.requests[0].content
    mock_sleep.assert_called_once_with(0.0)


def test_category_get(mock_sleep: Mock) -> None:
    client, transport = create_client(
        ProClient, json_response(200, {"id": "3", "name": "Apps", "priority": 9})
    )
    assert objects_are_equal(client.categories.get("3"), Category(id="3", name="Apps", priority=9))
    assert transport.urls == [f"{CATEGORIES_URL}/3"]
    mock_sleep.assert_not_called()


def test_category_get_not_found(mock_sleep: Mock) -> None:
    """Test that a 404 of the Jamf Pro API is not retried."""
    client, transport = create_client(
        ProClient, json_response(404, {"httpStatus": 404, "errors": [{"code": "INVALID_ID"}]})
    )
    with pytest.raises(UnexpectedStatusError, match=r"INVALID_ID"):
        client.categories.get("99")
    assert len(transport.requests) == 1
    mock_sleep.assert_not_called()


def test_category_list(mock_sleep: Mock) -> None:
    client, transport = create_client(
        ProClient,
        json_response(
            200,
            {
                "totalCount": 2,
                "results": [
                    {"id": "1", "name": "Apps", "priority": 9},
                    {"id": "2", "name": "Utilities", "priority": 5},
                ],
            },
        ),
    )
    assert objects_are_equal(
        client.categories.list(),
        ListCategory(
            total_count=2,
            categories=[
                Category(id="1", name="Apps", priority=9),
                Category(id="2", name="Utilities", priority=5),
            ],
        ),
    )
    assert transport.urls == [CATEGORIES_URL]
    mock_sleep.assert_not_called()


def test_category_list_options(mock_sleep: Mock) -> None:
    client, transport = create_client(ProClient, json_response(200, {"totalCount": 0, "results": []}))
    page = client.categories.list(
        ListOptions(page=1, page_size=10, sort=["name:asc", "id:desc"], filter='name=="Apps"')
    )
    assert objects_are_equal(page, ListCategory(total_count=0, categories=[]))
    url = transport.requests[0].url
    assert url.path == "/api/v1/categories"
    assert url.params.multi_items() == [
        ("filter", 'name=="Apps"'),
        ("page", "1"),
        ("page-size", "10"),
        ("sort", "name:asc,id:desc"),
    ]
    mock_sleep.assert_not_called()


def test_category_update(mock_sleep: Mock) -> None:
    client, transport = create_client(
        ProClient, json_response(200, {"id": "3", "name": "Applications", "priority": 8})
    )
    assert objects_are_equal(
        client.categories.update(Category(id="3", name="Applications", priority=8)),
        Category(id="3", name="Applications", priority=8),
    )
    request = transport.requests[0]
    assert request.method == "PUT"
    assert str(request.url) == f"{CATEGORIES_URL}/3"
    assert json.loads(request.content) == {"id": "3", "name": "Applications", "priority": 8}
    mock_sleep.assert_not_called()


@pytest.mark.parametrize(
    ("category", "field"),
    [
        (Category(name="Apps", priority=9), "id"),
        (Category(id="3", priority=9), "name"),
        (Category(id="3", name="Apps"), "priority"),
    ],
)
def test_category_update_invalid(category: Category, field: str) -> None:
    client, transport = create_client(ProClient)
    with pytest.raises(
        ValueError, match=rf"CategoriesService.update\(\): cannot update category with None {field}"
    ):
        client.categories.update(category)
    assert not transport.requests


def test_category_delete(mock_sleep: Mock) -> None:
    client, transport = create_client(ProClient, json_response(204))
    assert client.categories.delete("3") is None
    assert transport.requests[0].method == "DELETE"
    assert transport.urls == [f"{CATEGORIES_URL}/3"]
    mock_sleep.assert_not_called()


def test_category_delete_rejects_200(mock_sleep: Mock) -> None:
    client, _ = create_client(ProClient, json_response(200))
    with pytest.raises(UnexpectedStatusError, match=r"unexpected status 200 received with no body"):
        client.categories.delete("3")
    mock_sleep.assert_not_called()


def test_category_delete_multiple(mock_sleep: Mock) -> None:
    client, transport = create_client(ProClient, json_response(204))
    client.categories.delete_multiple(["1", "2"])
    request = transport.requests[0]
    assert request.method == "POST"
    assert str(request.url) == f"{CATEGORIES_URL}/delete-multiple"
    assert json.loads(request.content) == {"ids": ["1", "2"]}
    mock_sleep.assert_not_called()
