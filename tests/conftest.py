"""Shared fixtures: a gateway whose HTTP traffic goes to httpx.MockTransport."""

import json

import httpx
import pytest

from pixabay.config import PixabayConfig
from pixabay.gateway import MediaGateway

API_KEY = "test-key-1234567890"

SAMPLE_IMAGES = {
    "total": 1,
    "totalHits": 1,
    "hits": [
        {
            "id": 195893,
            "pageURL": "https://pixabay.com/en/blossom-bloom-flower-195893/",
            "type": "photo",
            "tags": "blossom, bloom, flower",
            "user": "Josch13",
        }
    ],
}


class RecordingHandler:
    """MockTransport handler that remembers every request it answers."""

    def __init__(self, status_code=200, payload=None, text=None, content=None, exc=None):
        self.status_code = status_code
        self.payload = SAMPLE_IMAGES if payload is None else payload
        self.text = text
        self.content = content
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, content=json.dumps(self.payload).encode(),
                              headers={"content-type": "application/json"})

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.requests[-1].url.params)


def make_gateway(handler, api_key=API_KEY) -> MediaGateway:
    return MediaGateway(PixabayConfig(api_key=api_key), transport=httpx.MockTransport(handler))


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def gateway(handler):
    return make_gateway(handler)
