from __future__ import annotations

import json

import httpx
import pytest

PAYRIFF_ENV = (
    "PAYRIFF_BASE_URL",
    "PAYRIFF_SECRET_KEY",
    "PAYRIFF_CALLBACK_URL",
    "PAYRIFF_LANGUAGE",
    "PAYRIFF_CURRENCY",
    "PAYRIFF_TIMEOUT_SEC",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """No PAYRIFF_* variables and no stray .env file."""
    for name in PAYRIFF_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, body=None, *, status_code: int = 200, content: bytes | None = None):
        self.requests: list[httpx.Request] = []
        if body is None and content is None:
            body = ok_envelope()

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=body)

        super().__init__(handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


def ok_envelope(payload=None, code: str = "00000") -> dict:
    return {
        "code": code,
        "message": "Approved",
        "route": "/api/v3/orders",
        "internalMessage": None,
        "responseId": "3f0e5f4c-8d1a-4b9e-9c41-1f0a2b3c4d5e",
        "payload": payload,
    }


@pytest.fixture
def transport():
    return RecordingTransport()
