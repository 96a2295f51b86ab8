import pytest
import requests

from geminivision.core.errors import ProviderConfigError
from geminivision.llm import provider_config
from geminivision.llm.client import (
    build_gemini_payload,
    build_sanitized_http_error,
    extract_media_url,
    extract_text,
    send_request,
)
from geminivision.llm.service import generate_text
from geminivision.safety.policy import sanitizer_safety_settings

from conftest import FakeResponse, text_response


def test_build_gemini_payload_moves_safety_settings_to_top_level():
    payload = {
        "model": "m",
        "prompt": "a cat",
        "config": {
            "responseModalities": ["TEXT", "IMAGE"],
            "safetySettings": [{"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_NONE"}],
        },
    }

    body = build_gemini_payload(payload)

    assert body["contents"] == [{"role": "user", "parts": [{"text": "a cat"}]}]
    assert body["generationConfig"] == {"responseModalities": ["TEXT", "IMAGE"]}
    assert body["safetySettings"][0]["category"] == "HARM_CATEGORY_HARASSMENT"
    # caller payload untouched
    assert "safetySettings" in payload["config"]


def test_build_gemini_payload_without_config():
    body = build_gemini_payload({"model": "m", "prompt": "x"})
    assert "generationConfig" not in body
    assert "safetySettings" not in body


def test_send_request_posts_to_model_endpoint(captured_posts):
    captured_posts.response = FakeResponse(text_response("ok"))

    data = send_request({"model": "gemini-test", "prompt": "hi"}, provider_config.PROVIDERS, "gemini")

    assert data == text_response("ok")
    call = captured_posts[0]
    assert call["url"].endswith("/models/gemini-test:generateContent")
    assert call["headers"]["x-goog-api-key"] == "test-key"
    assert call["timeout"] == provider_config.REQUEST_TIMEOUT


def test_send_request_raises_on_http_error(captured_posts):
    captured_posts.response = FakeResponse(status_code=429)

    with pytest.raises(requests.exceptions.HTTPError):
        send_request({"model": "m", "prompt": "hi"}, provider_config.PROVIDERS, "gemini")


def test_send_request_unknown_provider():
    with pytest.raises(ProviderConfigError):
        send_request({"model": "m", "prompt": "hi"}, provider_config.PROVIDERS, "nope")


def test_send_request_missing_key(monkeypatch, tmp_path, captured_posts):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)

    with pytest.raises(ProviderConfigError, match="GEMINI_API_KEY"):
        send_request({"model": "m", "prompt": "hi"}, provider_config.PROVIDERS, "gemini")
    assert captured_posts == []


def test_load_key_prefers_environment_then_file(monkeypatch, tmp_path):
    key_file = tmp_path / "gemini.key"
    key_file.write_text("from-file\n")

    assert provider_config.load_key(str(key_file)) == "test-key"

    monkeypatch.delenv("GEMINI_API_KEY")
    assert provider_config.load_key(str(key_file)) == "from-file"
    assert provider_config.load_key(str(tmp_path / "missing.key")) is None
    assert provider_config.load_key(None) is None


def test_extract_media_url_builds_data_uri():
    data = {"candidates": [{"content": {"parts": [
        {"text": "caption"},
        {"inlineData": {"mimeType": "image/jpeg", "data": "QUJD"}},
    ]}}]}
    assert extract_media_url(data) == "data:image/jpeg;base64,QUJD"


def test_extract_media_url_accepts_file_uri():
    data = {"candidates": [{"content": {"parts": [{"fileData": {"fileUri": "https://example.test/a.png"}}]}}]}
    assert extract_media_url(data) == "https://example.test/a.png"


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"candidates": []},
        {"candidates": [{"finishReason": "SAFETY"}]},
        text_response("I can't draw that."),
        None,
    ],
)
def test_extract_media_url_returns_none_without_image(data):
    assert extract_media_url(data) is None


def test_extract_text_joins_parts():
    data = {"candidates": [{"content": {"parts": [{"text": " a calm "}, {"text": "cat "}]}}]}
    assert extract_text(data) == "a calm cat"
    assert extract_text({"candidates": []}) == ""


def test_build_sanitized_http_error_includes_status():
    err = requests.exceptions.HTTPError("boom", response=FakeResponse(status_code=503))
    assert build_sanitized_http_error("gemini", err) == "GEMINI HTTP ERROR (503)"
    assert build_sanitized_http_error(None, requests.exceptions.ConnectionError()) == "PROVIDER HTTP ERROR"


def test_generate_text_forwards_safety_settings(captured_posts):
    captured_posts.response = FakeResponse(text_response("  rewritten  "))

    assert generate_text("prompt", safety_settings=sanitizer_safety_settings()) == "rewritten"

    body = captured_posts[0]["json"]
    assert len(body["safetySettings"]) == 5
    assert body["contents"][0]["parts"][0]["text"] == "prompt"
    assert captured_posts[0]["url"].endswith(f"/models/{provider_config.MODEL_NAME}:generateContent")
