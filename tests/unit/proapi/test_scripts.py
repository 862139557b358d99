r"""Unit tests for the Jamf Pro API scripts."""

from __future__ import annotations

import json
from unittest.mock import Mock

import pytest
from coola.equality import objects_are_equal
from pydantic import ValidationError

from jamfpro.exceptions import DecodeError
from jamfpro.proapi import ListOptions, ProClient
from jamfpro.proapi.scripts import ListScript, Script, ScriptPriority
from tests.helpers import SERVER_URL, create_client, json_response

SCRIPTS_URL = f"{SERVER_URL}/api/v1/scripts"

SCRIPT = {
    "id": "1",
    "name": "cleanup.sh",
    "info": "",
    "notes": "Removes caches",
    "priority": "AFTER",
    "categoryId": "-1",
    "categoryName": "NONE",
    "parameter4": "--all",
    "osRequirements": "",
    "scriptContents": "#!/bin/sh\nrm -rf /Library/Caches/example",
}


def test_script_create(mock_sleep: Mock) -> None:
    client, transport = create_client(
        ProClient, json_response(201, {"id": "1", "href": f"{SCRIPTS_URL}/1"})
    )
    script_id = client.scripts.create(
        Script(name="cleanup.sh", priority=ScriptPriority.AFTER, script_contents="#!/bin/sh\n")
    )
    assert script_id == "1"
    request = transport.requests[0]
    assert request.method == "POST"
    assert str(request.url) == SCRIPTS_URL
    assert json.loads(request.content) == {
        "name": "cleanup.sh",
        "priority": "AFTER",
        "scriptContents": "#!/bin/sh\n",
    }
    mock_sleep.assert_not_called()


def test_script_create_none_name() -> None:
    client, transport = create_client(ProClient)
    with pytest.raises(ValueError, match=r"ScriptsService.create\(\): cannot create script with None name"):
        client.scripts.create(Script(priority=ScriptPriority.BEFORE))
    assert not transport.requests


def test_script_get(mock_sleep: Mock) -> None:
    client, transport = create_client(ProClient, json_response(200, SCRIPT))
    assert objects_are_equal(
        client.scripts.get("1"),
        Script(
            id="1",
            name="cleanup.sh",
            info="",
            notes="Removes caches",
            priority=ScriptPriority.AFTER,
            category_id="-1",
            category_name="NONE",
            parameter4="--all",
            os_requirements="",
            script_contents="#!/bin/sh\nrm -rf /Library/Caches/example",
        ),
    )
    assert transport.urls == [f"{SCRIPTS_URL}/1"]
    mock_sleep.assert_not_called()


def test_script_get_unknown_priority(mock_sleep: Mock) -> None:
    client, _ = create_client(ProClient, json_response(200, {"id": "1", "priority": "DURING"}))
    with pytest.raises(DecodeError, match=r"invalid Script document") as exc:
        client.scripts.get("1")
    assert "priority" in str(exc.value)
    assert isinstance(exc.value.__cause__, ValidationError)
    mock_sleep.assert_not_called()


def test_script_list(mock_sleep: Mock) -> None:
    client, transport = create_client(
        ProClient, json_response(200, {"totalCount": 1, "results": [SCRIPT]})
    )
    page = client.scripts.list(ListOptions(page=0, page_size=100))
    assert page.total_count == 1
    assert [script.name for script in page.scripts] == ["cleanup.sh"]
    assert transport.requests[0].url.params.multi_items() == [("page", "0"), ("page-size", "100")]
    mock_sleep.assert_not_called()


def test_script_list_empty(mock_sleep: Mock) -> None:
    client, _ = create_client(ProClient, json_response(200, {"totalCount": 0, "results": []}))
    assert objects_are_equal(client.scripts.list(), ListScript(total_count=0, scripts=[]))
    mock_sleep.assert_not_called()


def test_script_update(mock_sleep: Mock) -> None:
    client, transport = create_client(ProClient, json_response(200, SCRIPT))
    script = client.scripts.update(Script(id="1", name="cleanup.sh", parameter4="--all"))
    assert script.notes == "Removes caches"
    request = transport.requests[0]
    assert request.method == "PUT"
    assert str(request.url) == f"{SCRIPTS_URL}/1"
    assert json.loads(request.content) == {"id": "1", "name": "cleanup.sh", "parameter4": "--all"}
    mock_sleep.assert_not_called()


@pytest.mark.parametrize(
    ("script", "message"),
    [
        (Script(name="cleanup.sh"), r"cannot update script with None id"),
        (Script(id="1"), r"cannot update script with None name"),
    ],
)
def test_script_update_invalid(script: Script, message: str) -> None:
    client, transport = create_client(ProClient)
    with pytest.raises(ValueError, match=message):
        client.scripts.update(script)
    assert not transport.requests


def test_script_delete(mock_sleep: Mock) -> None:
    client, transport = create_client(ProClient, json_response(204))
    client.scripts.delete("1")
    assert transport.requests[0].method == "DELETE"
    assert transport.urls == [f"{SCRIPTS_URL}/1"]
    mock_sleep.assert_not_called()
