"""Shared fixtures: a scripted fake of the spreadsheet endpoint."""

import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from catalogue.shared.core.configuration import AppConfig, RemoteConfig
from catalogue.shared.infrastructure.remote.gateway import RemoteGateway
from catalogue.showroom.state import Store

TEST_URL = "https://script.example.test/exec"

SAMPLE_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Cotton Sheet Set",
        "description": "Soft percale sheets",
        "price": 49.5,
        "category": "Bedding",
        "imageUrl": ["https://img.test/sheet.jpg"],
    },
    {
        "id": 2,
        "name": "Bath Towel",
        "description": "Thick cotton towel",
        "price": "12",
        "category": "Towels",
        "imageUrl": [],
    },
    {
        "id": 3,
        "name": "Bamboo Toothbrush",
        "description": "",
        "price": 3,
        "category": "Eco-Friendly",
        "imageUrl": None,
    },
]


class FakeEndpoint:
    """Records every request and answers from per-method/action scripts.

    ``get`` answers the product list request; ``actions`` maps a POST
    ``action`` name to a response or to a callable returning one.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.get: Any = list(SAMPLE_PRODUCTS)
        self.actions: Dict[str, Any] = {}

    @property
    def posted(self) -> List[Dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests if r.method == "POST"]

    @property
    def actions_sent(self) -> List[str]:
        return [body.get("action") for body in self.posted]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET":
            return self._respond(self.get, request)
        body = json.loads(request.content)
        scripted = self.actions.get(body.get("action"), {"success": True})
        return self._respond(scripted, request, body)

    @staticmethod
    def _respond(scripted: Any, request: httpx.Request, body: Optional[Dict[str, Any]] = None) -> httpx.Response:
        if callable(scripted):
            scripted = scripted(request, body)
        if isinstance(scripted, httpx.Response):
            return scripted
        if isinstance(scripted, Exception):
            raise scripted
        return httpx.Response(200, json=scripted)


@pytest.fixture
def endpoint() -> FakeEndpoint:
    return FakeEndpoint()


@pytest.fixture
def remote_config() -> RemoteConfig:
    return RemoteConfig(api_url=TEST_URL, timeout=5)


@pytest.fixture
def gateway(endpoint: FakeEndpoint, remote_config: RemoteConfig) -> RemoteGateway:
    return RemoteGateway(remote_config, transport=httpx.MockTransport(endpoint))


@pytest.fixture
def store(endpoint: FakeEndpoint, remote_config: RemoteConfig) -> Store:
    config = AppConfig(remote=remote_config)
    return Store(config, transport=httpx.MockTransport(endpoint))


@pytest.fixture
def logged_in_store(store: Store) -> Store:
    assert store.app.login("Admin", "MarketingComfort25")
    return store


def json_response(status: int, payload: Any) -> Callable[..., httpx.Response]:
    """Scripted response with an explicit status code."""
    def _make(request, body=None):
        return httpx.Response(status, json=payload)
    return _make
