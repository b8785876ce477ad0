import json
import pytest
import httpx
from fastapi.testclient import TestClient
import sys
from pathlib import Path

# Add the project root (WORKDIR) to sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lagos_price.core.config import Settings  # noqa: E402

SERVICE_URL = "http://predictor.test"

VALID_FORM = {
    "bedrooms": "4",
    "bathrooms": "3",
    "toilets": "5",
    "parking_space": "2",
    "town": "Lekki",
    "title": "Detached Duplex",
}


class FakePredictionService:
    """
    Stand-in for the remote prediction service, mounted as an httpx transport.
    Records every request; answers with `reply` (a dict, an httpx.Response,
    or an exception to raise).
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.reply = {"predicted_price": 45000000}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.reply
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, httpx.Response):
            return reply
        return httpx.Response(200, json=reply)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def settings():
    return Settings(prediction_api_url=SERVICE_URL)


@pytest.fixture
def service():
    return FakePredictionService()


@pytest.fixture
def client(settings, service):
    from lagos_price.main import create_app

    app = create_app(settings=settings, transport=service.transport)
    # Using context manager ensures lifespan runs before the first request
    with TestClient(app) as c:
        yield c
