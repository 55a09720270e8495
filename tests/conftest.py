import json
from typing import Any, Callable, Dict, List, Union

import httpx
import pytest

from odoo_jsonrpc import JsonRpcClient


Route = Union[Dict[str, Any], httpx.Response, Callable[[httpx.Request], Any]]


class FakeOdoo:
    """MockTransport handler answering from a path -> payload table."""

    def __init__(self) -> None:
        self.routes: Dict[str, Route] = {}
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        route = self.routes.get(request.url.path, {"result": True})
        if isinstance(route, httpx.Response):
            return route
        if callable(route):
            return route(request)
        return httpx.Response(200, json=route)

    @property
    def bodies(self) -> List[Dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]

    @property
    def last_body(self) -> Dict[str, Any]:
        return self.bodies[-1]


def make_client(handler: Callable[[httpx.Request], Any], host: str = "odoo.test") -> JsonRpcClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return JsonRpcClient(host, http_client=http_client)


@pytest.fixture
def server() -> FakeOdoo:
    return FakeOdoo()


@pytest.fixture
def client(server: FakeOdoo) -> JsonRpcClient:
    return make_client(server)
