r"""Helpers shared by the Jamf Pro API services."""

from __future__ import annotations

__all__ = ["CreatedResource", "ListOptions", "ProModel", "ProService", "encode_model"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from jamfpro.core.response import read_response
from jamfpro.exceptions import DecodeError

if TYPE_CHECKING:
    import httpx

    from jamfpro.client import BaseClient


class ProModel(BaseModel):
    r"""Base class of the Jamf Pro API models.

    Fields are snake_case in Python and camelCase on the wire. Both
    names are accepted when a model is built.

    Example:
        ```pycon
        >>> from jamfpro.proapi.common import ProModel, encode_model
        >>> class Item(ProModel):
        ...     category_id: str | None = None
        ...     name: str | None = None
        ...
        >>> encode_model(Item(category_id="1"))
        b'{"categoryId":"1"}'
        >>> Item.model_validate_json('{"categoryId": "1"}').category_id
        '1'

        ```
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


T = TypeVar("T", bound=ProModel)


def encode_model(model: ProModel) -> bytes:
    """Encode a model as a JSON body, omitting unset fields."""
    return model.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


@dataclass
class ListOptions:
    r"""Paging, sorting and filtering of a list request.

    Args:
        page: The 0-indexed page to return.
        page_size: The number of results per page.
        sort: Sort criteria, e.g. ``["name:asc", "id:desc"]``.
        filter: An RSQL filter, e.g. ``name=="Apps"``.

    Example:
        ```pycon
        >>> from jamfpro.proapi import ListOptions
        >>> ListOptions(page=0, page_size=100, sort=["id:asc", "name:desc"]).to_params()
        {'page': 0, 'page-size': 100, 'sort': 'id:asc,name:desc'}

        ```
    """

    page: int | None = None
    page_size: int | None = None
    sort: list[str] | None = None
    filter: str | None = None

    def to_params(self) -> dict[str, Any]:
        """Return the query parameters of the options."""
        params: dict[str, Any] = {}
        if self.page is not None:
            params["page"] = self.page
        if self.page_size is not None:
            params["page-size"] = self.page_size
        if self.sort:
            params["sort"] = ",".join(self.sort)
        if self.filter is not None:
            params["filter"] = self.filter
        return params


class CreatedResource(ProModel):
    id: str | None = None
    href: str | None = None


class ProService:
    """Base class of the Jamf Pro API services.

    Args:
        client: The Jamf Pro API client.
    """

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    def _decode(self, response: httpx.Response, cls: type[T]) -> T:
        body = read_response(response, self.client.logger)
        try:
            return cls.model_validate_json(body)
        except ValidationError as exc:
            msg = f"invalid {cls.__name__} document: {exc}"
            raise DecodeError(msg) from exc

    def _discard(self, response: httpx.Response) -> None:
        read_response(response, self.client.logger)
