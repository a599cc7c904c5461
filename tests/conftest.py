"""
Shared test configuration and fixtures
The Gemini API is replaced by an httpx.MockTransport; no test touches the network.
"""
import os

os.environ.setdefault("ENV", "test")

import httpx
import pytest
from typing import Any, Callable, Dict, Generator, List, Optional

from fastapi.testclient import TestClient

from exam_relay.core import settings as settings_module
from exam_relay.main import create_app
from exam_relay.services.gemini_client import GeminiClient


# ===========================================
# Gemini response helpers
# ===========================================

def gemini_body(*texts: Optional[str]) -> Dict[str, Any]:
    """generateContent body with one candidate holding the given parts"""
    parts = [{} if t is None else {"text": t} for t in texts]
    return {
        "candidates": [
            {"content": {"role": "model", "parts": parts}, "finishReason": "STOP"}
        ],
        "modelVersion": "gemini-test",
    }


class FakeGemini:
    """
    Callable for httpx.MockTransport
    Records every outbound request; ``handler`` decides the reply.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], Any] = (
            lambda request: httpx.Response(200, json=gemini_body("1. What is 2 + 2?"))
        )

    def __call__(self, request: httpx.Request):
        self.requests.append(request)
        return self.handler(request)

    def reply(self, status_code: int = 200, json: Any = None, **kwargs) -> None:
        self.handler = lambda request: httpx.Response(status_code, json=json, **kwargs)

    def reply_text(self, *texts: Optional[str]) -> None:
        self.reply(200, json=gemini_body(*texts))

    def fail_with(self, exc_factory: Callable[[httpx.Request], Exception]) -> None:
        def _raise(request):
            raise exc_factory(request)
        self.handler = _raise

    @property
    def call_count(self) -> int:
        return len(self.requests)


# ===========================================
# Settings
# ===========================================

@pytest.fixture
def make_settings() -> Callable[..., settings_module.BaseConfig]:
    """Settings factory; keyword overrides win over the environment"""
    def _make(**overrides):
        values = {
            "GEMINI_API_KEY": "test-api-key",
            "GEMINI_MODEL_ID": "gemini-test",
            "GEMINI_BASE_URL": "https://gemini.test/v1beta/models",
            "REQUEST_TIMEOUT_S": 30,
            "PORT": 5000,
        }
        values.update(overrides)
        return settings_module.TestConfig(**values)
    return _make


@pytest.fixture
def test_settings(make_settings):
    return make_settings()


# ===========================================
# Fake provider and clients
# ===========================================

@pytest.fixture
def fake_gemini() -> FakeGemini:
    return FakeGemini()


@pytest.fixture
def gemini_client(test_settings, fake_gemini) -> GeminiClient:
    return GeminiClient.from_settings(test_settings, transport=httpx.MockTransport(fake_gemini))


@pytest.fixture
def make_client(fake_gemini):
    """
    TestClient factory for a given settings object
    Clients are closed when the test ends.
    """
    opened = []

    def _make(settings) -> TestClient:
        client = GeminiClient.from_settings(settings, transport=httpx.MockTransport(fake_gemini))
        test_client = TestClient(create_app(settings, client))
        test_client.__enter__()
        opened.append(test_client)
        return test_client

    yield _make

    for test_client in opened:
        test_client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, test_settings) -> Generator:
    """TestClient with a configured API key and the fake provider"""
    yield make_client(test_settings)


@pytest.fixture
def unconfigured_client(make_client, make_settings) -> Generator:
    """TestClient without GEMINI_API_KEY"""
    yield make_client(make_settings(GEMINI_API_KEY=None))


# ===========================================
# Utilities
# ===========================================

@pytest.fixture
def capture_logs():
    """Capture log records"""
    import logging

    class LogCapture(logging.Handler):
        def __init__(self):
            super().__init__()
            self.records = []

        def emit(self, record):
            self.records.append(record)

        def get_messages(self):
            return [r.getMessage() for r in self.records]

    handler = LogCapture()
    logger = logging.getLogger()
    logger.addHandler(handler)
    yield handler
    logger.removeHandler(handler)


@pytest.fixture
def anyio_backend():
    """anyio backend for async tests"""
    return "asyncio"
