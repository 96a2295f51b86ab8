import pytest

from geminivision.core.errors import IMAGE_URL_MISSING_MESSAGE, ImageGenerationError, ProviderConfigError
from geminivision.core.generation_types import GenerationSpec
from geminivision.image.service import build_image_payload, generate_image, generate_image_from_prompt
from geminivision.llm.provider_config import IMAGE_MODEL
from geminivision.safety.policy import IMAGE_SAFETY_SETTINGS

from conftest import FakeResponse, image_response, text_response


def test_build_image_payload_attaches_fixed_config():
    payload = build_image_payload("a cat")

    assert payload["model"] == IMAGE_MODEL
    assert payload["prompt"] == "a cat"
    assert payload["config"]["responseModalities"] == ["TEXT", "IMAGE"]
    assert payload["config"]["safetySettings"] == IMAGE_SAFETY_SETTINGS


def test_generate_image_sends_composed_prompt(captured_posts):
    spec = GenerationSpec(prompt="a cat", aspect_ratio="square", negative_prompt="blurry", seed=5)

    result = generate_image(spec)

    assert result["image_url"] == "data:image/png;base64,aGVsbG8="
    assert result["prompt"] == "a cat, square image, 1:1 aspect ratio. Avoid the following: blurry, generation seed: 5"

    body = captured_posts[0]["json"]
    assert body["contents"][0]["parts"][0]["text"] == result["prompt"]
    assert body["generationConfig"] == {"responseModalities": ["TEXT", "IMAGE"]}
    assert [s["threshold"] for s in body["safetySettings"]] == [
        "BLOCK_ONLY_HIGH",
        "BLOCK_NONE",
        "BLOCK_MEDIUM_AND_ABOVE",
        "BLOCK_LOW_AND_ABOVE",
    ]
    assert captured_posts[0]["url"].endswith(f"/models/{IMAGE_MODEL}:generateContent")


def test_missing_media_raises_descriptive_error(captured_posts):
    captured_posts.response = FakeResponse(text_response("I cannot help with that."))

    with pytest.raises(ImageGenerationError) as excinfo:
        generate_image_from_prompt("a cat")

    assert str(excinfo.value) == IMAGE_URL_MISSING_MESSAGE


def test_http_failure_becomes_image_generation_error(captured_posts):
    captured_posts.response = FakeResponse(status_code=500)

    with pytest.raises(ImageGenerationError, match=r"GEMINI HTTP ERROR \(500\)"):
        generate_image_from_prompt("a cat")
    assert len(captured_posts) == 1


def test_provider_misconfiguration_propagates(monkeypatch, tmp_path, captured_posts):
    monkeypatch.delenv("GEMINI_API_KEY")
    monkeypatch.chdir(tmp_path)

    with pytest.raises(ProviderConfigError):
        generate_image_from_prompt("a cat")


def test_file_uri_is_returned_unchanged(captured_posts):
    captured_posts.response = FakeResponse(
        {"candidates": [{"content": {"parts": [{"fileData": {"fileUri": "https://cdn.test/x.png"}}]}}]}
    )
    assert generate_image_from_prompt("a cat") == {"image_url": "https://cdn.test/x.png"}


def test_image_mime_type_is_preserved(captured_posts):
    captured_posts.response = FakeResponse(image_response(data="d2VicA==", mime_type="image/webp"))
    assert generate_image_from_prompt("a cat")["image_url"] == "data:image/webp;base64,d2VicA=="
