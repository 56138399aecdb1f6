from typing import Any, Dict, List

import httpx
import pytest


class _MockResponse:
    def __init__(self, status_code: int, payload: Any = None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ""

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class _MockClient:
    """Stand-in for ``httpx.Client`` that records each POST."""

    requests: List[Dict[str, Any]] = []
    response: _MockResponse = _MockResponse(200, {})
    error: Exception | None = None

    def __init__(self, *args, **kwargs):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def post(self, url: str, headers, content: bytes):
        type(self).requests.append({"url": url, "headers": list(headers), "content": content})
        if type(self).error is not None:
            raise type(self).error
        return type(self).response


@pytest.fixture
def mock_http(monkeypatch):
    """Patch ``httpx.Client``; set ``.response`` or ``.error`` on the returned class."""

    class Client(_MockClient):
        requests: List[Dict[str, Any]] = []
        response = _MockResponse(200, {})
        error = None

    monkeypatch.setattr(httpx, "Client", Client)
    return Client


@pytest.fixture
def make_response():
    return _MockResponse


@pytest.fixture
def credentials_env(monkeypatch):
    monkeypatch.setenv("TENCENT_TRANSLATION_SECRET_ID", "AKIDtestid")
    monkeypatch.setenv("TENCENT_TRANSLATION_SECRET_KEY", "testkey")
    for name in ("TENCENT_TRANSLATION_REGION", "TENCENT_TRANSLATION_PROJECT_ID", "TENCENT_TRANSLATION_TOKEN"):
        monkeypatch.delenv(name, raising=False)
