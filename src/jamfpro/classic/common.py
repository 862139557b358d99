r"""Models and service base shared by the Classic API resources."""

from __future__ import annotations

__all__ = [
    "Building",
    "ClassicService",
    "Department",
    "GeneralCategory",
    "ScopeComputer",
    "ScopeComputerGroup",
    "ScopeIbeacon",
    "ScopeNetworkSegment",
    "SelfServiceCategory",
    "SelfServiceIcon",
    "Site",
    "retry_on_404",
]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from jamfpro.codec.xml import decode_xml, encode_xml
from jamfpro.core.response import read_response
from jamfpro.core.uri import Uri

if TYPE_CHECKING:
    import httpx

    from jamfpro.client import BaseClient

T = TypeVar("T")
L = TypeVar("L")


def retry_on_404(response: httpx.Response | None) -> bool:
    """Consistency-failure predicate matching ``404 Not Found``.

    The Classic API may answer 404 for a short while after an object
    is created.
    """
    return response is not None and response.status_code == 404


@dataclass
class Site:
    id: int | None = None
    name: str | None = None


@dataclass
class Building:
    id: int | None = None
    name: str | None = None


@dataclass
class Department:
    id: int | None = None
    name: str | None = None


@dataclass
class GeneralCategory:
    id: int | None = None
    name: str | None = None


@dataclass
class SelfServiceCategory:
    id: int | None = None
    name: str | None = None
    display_in: bool | None = None
    feature_in: bool | None = None


@dataclass
class SelfServiceIcon:
    id: int | None = None
    filename: str | None = None
    uri: str | None = None


@dataclass
class ScopeComputer:
    id: int | None = None
    name: str | None = None
    udid: str | None = None


@dataclass
class ScopeComputerGroup:
    id: int | None = None
    name: str | None = None


@dataclass
class ScopeNetworkSegment:
    id: int | None = None
    name: str | None = None


@dataclass
class ScopeIbeacon:
    id: int | None = None
    name: str | None = None


@dataclass
class CreatedObject:
    id: int | None = None


class ClassicService(Generic[T, L]):
    r"""CRUD operations of one Classic API resource.

    Subclasses set the resource path, the tag of the document element
    and the model classes, and expose public methods validating their
    input before calling the helpers below.

    Args:
        client: The Classic API client.
    """

    path: ClassVar[str]
    root_tag: ClassVar[str]
    model: ClassVar[type[Any]]
    list_model: ClassVar[type[Any]]

    def __init__(self, client: BaseClient) -> None:
        self.client = client

    def _id_uri(self, object_id: int | str) -> Uri:
        return Uri(f"{self.path}/id/{object_id}")

    def _create(self, obj: T) -> int | None:
        # ID 0 lets the server pick the ID
        response = self.client.post(
            self._id_uri(0), (201,), body=encode_xml(obj, self.root_tag)
        )
        body = read_response(response, self.client.logger)
        return decode_xml(body, CreatedObject, self.root_tag).id

    def _get(self, object_id: int) -> T:
        response = self.client.get(
            self._id_uri(object_id), (200,), consistency_failure_func=retry_on_404
        )
        return decode_xml(read_response(response, self.client.logger), self.model)

    def _list(self) -> L:
        response = self.client.get(Uri(self.path), (200,))
        return decode_xml(read_response(response, self.client.logger), self.list_model)

    def _update(self, object_id: int, obj: T) -> None:
        response = self.client.put(
            self._id_uri(object_id),
            (201,),
            body=encode_xml(obj, self.root_tag),
            consistency_failure_func=retry_on_404,
        )
        read_response(response, self.client.logger)

    def _delete(self, object_id: int) -> None:
        response = self.client.delete(
            self._id_uri(object_id), (200,), consistency_failure_func=retry_on_404
        )
        read_response(response, self.client.logger)
