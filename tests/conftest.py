from __future__ import annotations

import json
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_openweather_client
from app.clients.openweather import OpenWeatherClient
from app.main import create_app

API_KEY = "test-key"

SAMPLE_PAYLOAD = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [
        {"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"},
        {"id": 701, "main": "Mist", "description": "mist", "icon": "50d"},
    ],
    "base": "stations",
    "main": {"temp": 11.62, "feels_like": 10.9, "pressure": 1012, "humidity": 81},
    "visibility": 10000,
    "wind": {"speed": 4.12, "deg": 200},
    "sys": {"type": 2, "country": "GB", "sunrise": 1697697187, "sunset": 1697734711},
    "id": 2643743,
    "name": "London",
    "cod": 200,
}


class FakeProvider:
    """Stands in for OpenWeatherMap; records every outbound request."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda req: httpx.Response(
            200, text=json.dumps(SAMPLE_PAYLOAD)
        )

    def respond(self, status_code: int = 200, *, text: str | None = None, json_body: dict | None = None) -> None:
        if json_body is not None:
            text = json.dumps(json_body)
        self.handler = lambda req: httpx.Response(status_code, text=text or "")

    def fail(self, exc: Exception) -> None:
        def _raise(req: httpx.Request) -> httpx.Response:
            raise exc
        self.handler = _raise

    def _dispatch(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def client(self) -> OpenWeatherClient:
        return OpenWeatherClient(
            api_key=API_KEY,
            base_url="http://provider.test",
            transport=httpx.MockTransport(self._dispatch),
        )


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def client(provider: FakeProvider):
    app = create_app()
    app.dependency_overrides[get_openweather_client] = provider.client
    with TestClient(app) as c:
        yield c
