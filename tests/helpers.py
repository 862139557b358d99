r"""Shared test helpers.

The clients are exercised against ``ScriptedTransport``, an
``httpx.MockTransport`` answering each request with the next outcome of
a fixed list and recording the requests it receives.
"""

from __future__ import annotations

__all__ = [
    "SERVER_URL",
    "ScriptedTransport",
    "create_base_client",
    "create_client",
    "create_http_client",
    "json_response",
    "no_wait_config",
    "xml_response",
]

import json
from typing import TYPE_CHECKING, Any, TypeVar, Union

import httpx

from jamfpro.backoff import ConstantBackoff
from jamfpro.client import BaseClient
from jamfpro.core.config import ClientConfig

if TYPE_CHECKING:
    from collections.abc import Iterable

SERVER_URL = "https://example.jamfcloud.com"

Outcome = Union[httpx.Response, Exception]

T = TypeVar("T", bound=BaseClient)


class ScriptedTransport(httpx.MockTransport):
    """Mock transport answering requests with a list of outcomes.

    Each request consumes the next outcome: a response is returned, an
    exception is raised. A request beyond the end of the list fails the
    test.

    Args:
        outcomes: The responses or exceptions, in order.
    """

    def __init__(self, outcomes: Iterable[Outcome]) -> None:
        super().__init__(self._handle)
        self.outcomes = list(outcomes)
        self.requests: list[httpx.Request] = []

    def _handle(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if not self.outcomes:
            msg = f"unexpected request: {request.method} {request.url}"
            raise AssertionError(msg)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def urls(self) -> list[str]:
        return [str(request.url) for request in self.requests]


def create_http_client(*outcomes: Outcome) -> tuple[httpx.Client, ScriptedTransport]:
    """Create an ``httpx.Client`` answered by a ``ScriptedTransport``."""
    transport = ScriptedTransport(outcomes)
    return httpx.Client(transport=transport), transport


def no_wait_config(**kwargs: Any) -> ClientConfig:
    """Create a config whose retries do not wait."""
    kwargs.setdefault("backoff_strategy", ConstantBackoff(0.0))
    return ClientConfig(**kwargs)


def create_base_client(
    *outcomes: Outcome, prefix: str = "/JSSResource", **kwargs: Any
) -> tuple[BaseClient, ScriptedTransport]:
    """Create a ``BaseClient`` answered by a ``ScriptedTransport``.

    Keyword arguments other than ``prefix`` are fields of the
    ``ClientConfig``.
    """
    http_client, transport = create_http_client(*outcomes)
    client = BaseClient(SERVER_URL, prefix=prefix, config=no_wait_config(**kwargs), client=http_client)
    return client, transport


def create_client(cls: type[T], *outcomes: Outcome, **kwargs: Any) -> tuple[T, ScriptedTransport]:
    """Create an API client of class ``cls`` answered by a
    ``ScriptedTransport``.

    Keyword arguments are forwarded to the constructor.
    """
    http_client, transport = create_http_client(*outcomes)
    kwargs.setdefault("config", no_wait_config())
    return cls(SERVER_URL, client=http_client, **kwargs), transport


def xml_response(status_code: int, body: str = "") -> httpx.Response:
    return httpx.Response(
        status_code, content=body.encode("utf-8"), headers={"Content-Type": "application/xml"}
    )


def json_response(status_code: int, data: Any = None) -> httpx.Response:
    content = b"" if data is None else json.dumps(data).encode("utf-8")
    return httpx.Response(
        status_code, content=content, headers={"Content-Type": "application/json"}
    )
