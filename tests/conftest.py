"""Shared pytest fixtures for ColorEngine tests."""

import json

import httpx
import pytest

from colorengine.providers.gemini_provider import GeminiImageProvider
from colorengine.utils.codec import encode

SAMPLE_IMAGE = bytes(range(10))


def inline_data_body(data: str, mime_type: str = "image/png") -> dict:
    """Build a reply whose first part carries inline data."""
    return {"candidates": [{"content": {"parts": [{"inlineData": {"mimeType": mime_type, "data": data}}]}}]}


def text_body(text: str) -> dict:
    """Build a reply whose first part carries text."""
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class RecordingTransport:
    """Mock transport that records requests and replies with a fixed response."""

    def __init__(self, status_code: int = 200, body: dict | str | None = None, stream=None):
        self.status_code = status_code
        self.body = body
        self.stream = stream
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.stream is not None:
            return httpx.Response(self.status_code, stream=self.stream)
        if isinstance(self.body, dict):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body or "")

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def sample_image() -> bytes:
    """Fixture for a 10-byte source image."""
    return SAMPLE_IMAGE


@pytest.fixture
def make_provider():
    """Fixture building a provider whose HTTP client uses a RecordingTransport."""

    def _make(transport: RecordingTransport, **kwargs) -> GeminiImageProvider:
        client = httpx.AsyncClient(transport=httpx.MockTransport(transport.handler))
        return GeminiImageProvider(api_key="test-key", http_client=client, **kwargs)

    return _make


@pytest.fixture
def success_transport(sample_image):
    """Fixture for a transport answering 200 with the sample image as inline data."""
    return RecordingTransport(200, inline_data_body(encode(sample_image)))
