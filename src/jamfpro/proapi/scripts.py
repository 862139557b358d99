r"""Jamf Pro API scripts (``/v1/scripts``)."""

from __future__ import annotations

__all__ = ["ListScript", "Script", "ScriptPriority", "ScriptsService"]

from enum import Enum

from pydantic import Field

from jamfpro.core.uri import Uri
from jamfpro.proapi.common import CreatedResource, ListOptions, ProModel, ProService, encode_model


class ScriptPriority(str, Enum):
    BEFORE = "BEFORE"
    AFTER = "AFTER"
    AT_REBOOT = "AT_REBOOT"


class Script(ProModel):
    id: str | None = None
    name: str | None = None
    info: str | None = None
    notes: str | None = None
    priority: ScriptPriority | None = None
    category_id: str | None = None
    category_name: str | None = None
    parameter4: str | None = None
    parameter5: str | None = None
    parameter6: str | None = None
    parameter7: str | None = None
    parameter8: str | None = None
    parameter9: str | None = None
    parameter10: str | None = None
    parameter11: str | None = None
    os_requirements: str | None = None
    script_contents: str | None = None


class ListScript(ProModel):
    total_count: int | None = None
    scripts: list[Script] | None = Field(default=None, alias="results")


class ScriptsService(ProService):
    path = "/v1/scripts"

    def create(self, script: Script) -> str | None:
        """Create a script and return its ID.

        Raises:
            ValueError: If ``name`` is missing.
        """
        if script.name is None:
            msg = "ScriptsService.create(): cannot create script with None name"
            raise ValueError(msg)
        response = self.client.post(Uri(self.path), (201,), body=encode_model(script))
        return self._decode(response, CreatedResource).id

    def get(self, script_id: str) -> Script:
        return self._decode(self.client.get(Uri(f"{self.path}/{script_id}"), (200,)), Script)

    def list(self, options: ListOptions | None = None) -> ListScript:
        params = (options or ListOptions()).to_params()
        return self._decode(self.client.get(Uri(self.path, params), (200,)), ListScript)

    def update(self, script: Script) -> Script:
        if script.id is None:
            msg = "ScriptsService.update(): cannot update script with None id"
            raise ValueError(msg)
        if script.name is None:
            msg = "ScriptsService.update(): cannot update script with None name"
            raise ValueError(msg)
        response = self.client.put(Uri(f"{self.path}/{script.id}"), (200,), body=encode_model(script))
        return self._decode(response, Script)

    def delete(self, script_id: str) -> None:
        self._discard(self.client.delete(Uri(f"{self.path}/{script_id}"), (204,)))
