from __future__ import annotations

import sys
from pathlib import Path

import pytest
import requests


_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self._payload = payload or {}
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        return self._payload


def image_response(data="aGVsbG8=", mime_type="image/png"):
    return {
        "candidates": [
            {
                "content": {
                    "parts": [
                        {"text": "Here is your image."},
                        {"inlineData": {"mimeType": mime_type, "data": data}},
                    ]
                }
            }
        ]
    }


def text_response(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.fixture(autouse=True)
def gemini_key(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")


@pytest.fixture
def captured_posts(monkeypatch):
    """Replace `requests.post` in the transport; returns the list of captured calls.

    Set `captured_posts.response` to control what the fake returns.
    """

    class Recorder(list):
        response = FakeResponse(image_response())

    calls = Recorder()

    def fake_post(url, headers=None, json=None, timeout=None):
        calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        return calls.response

    monkeypatch.setattr("geminivision.llm.client.requests.post", fake_post)
    return calls
