"""Provider-specific transport client for Gemini `generateContent` requests.

Architectural role:
    Executes HTTP requests against the configured model provider and extracts
    text or media from the response. Shared by the sanitizer (text) and the
    image service (image + text).

Model invocation flow:
    caller payload `{model, prompt, config}` -> `send_request(payload)` ->
    Gemini request body -> parsed JSON -> `extract_text` / `extract_media_url`.

Retry behavior:
    No retry loop is implemented. Each HTTP call is attempted once with
    `REQUEST_TIMEOUT`.

Base64:
    Inline image data is forwarded as a data URI. It is never decoded here.

Failure handling model:
    - Unknown provider / missing key -> `ProviderConfigError`.
    - HTTP/transport failures -> `requests.exceptions.RequestException`, left to
      callers; `build_sanitized_http_error` gives them a provider-labeled
      message without raw response bodies.
"""

import os

import requests

from geminivision.core.errors import ProviderConfigError
from geminivision.llm.provider_config import REQUEST_TIMEOUT, load_key


def build_sanitized_http_error(provider_name: str, err: requests.exceptions.RequestException) -> str:
    """Build provider-labeled HTTP error text without exposing raw internals.

    Args:
        provider_name: Active provider label.
        err: Request exception instance.

    Returns:
        Sanitized error string with optional status code.
    """
    status_code = None
    if getattr(err, "response", None) is not None:
        status_code = getattr(err.response, "status_code", None)

    label = str(provider_name or "provider").upper()
    if status_code:
        return f"{label} HTTP ERROR ({status_code})"
    return f"{label} HTTP ERROR"


def build_gemini_payload(payload: dict) -> dict:
    """Map a provider-agnostic payload onto the Gemini request body.

    `config.safetySettings` moves to the top level; `responseModalities` and
    sampling fields are placed under `generationConfig`.
    """
    config = dict(payload.get("config") or {})
    safety_settings = config.pop("safetySettings", None)

    gemini_payload = {
        "contents": [
            {
                "role": "user",
                "parts": [{"text": str(payload.get("prompt", ""))}],
            }
        ],
    }

    if config:
        gemini_payload["generationConfig"] = config
    if safety_settings:
        gemini_payload["safetySettings"] = safety_settings

    return gemini_payload


def send_request(payload: dict, providers: dict, provider: str) -> dict:
    """Send one `generateContent` request and return the parsed JSON response.

    Args:
        payload: `{model, prompt, config}` produced by service layers.
        providers: Endpoint map (`PROVIDERS` or `IMAGE_PROVIDERS`).
        provider: Active provider name within `providers`.

    Returns:
        Decoded JSON response body.

    Failure scenarios:
        - Unknown provider or missing key -> `ProviderConfigError`.
        - Non-2xx response -> `requests.exceptions.HTTPError`.
        - Connection/timeout errors propagate from `requests`.
    """
    provider_config = providers.get(provider)
    if not provider_config:
        raise ProviderConfigError(f"Unknown provider: {provider}")

    key_file = provider_config.get("key_file")
    api_key = load_key(key_file)
    if key_file and not api_key:
        raise ProviderConfigError(
            f"{provider.upper()} API key missing: set {_key_env_name(key_file)} or create {key_file}"
        )

    url = provider_config["url"].format(model=payload.get("model", ""))

    headers = {
        "Content-Type": "application/json",
    }
    if api_key:
        headers["x-goog-api-key"] = api_key

    response = requests.post(
        url,
        headers=headers,
        json=build_gemini_payload(payload),
        timeout=REQUEST_TIMEOUT,
    )

    response.raise_for_status()
    return response.json()


def _key_env_name(key_file: str) -> str:
    return os.path.splitext(os.path.basename(key_file))[0].upper() + "_API_KEY"


def _iter_parts(data: dict):
    """Yield content parts of every candidate, skipping malformed entries."""
    for candidate in (data or {}).get("candidates") or []:
        if not isinstance(candidate, dict):
            continue
        content = candidate.get("content") or {}
        for part in content.get("parts") or []:
            if isinstance(part, dict):
                yield part


def extract_text(data: dict) -> str:
    """Return concatenated text parts of a response, stripped ("" when absent)."""
    texts = [str(part["text"]) for part in _iter_parts(data) if part.get("text")]
    return "".join(texts).strip()


def extract_media_url(data: dict) -> str | None:
    """Return the first image of a response as a URL, or `None`.

    Inline data becomes `data:<mime>;base64,<data>`; file references are
    returned as their URI.
    """
    for part in _iter_parts(data):
        inline = part.get("inlineData") or part.get("inline_data")
        if isinstance(inline, dict) and inline.get("data"):
            mime_type = inline.get("mimeType") or inline.get("mime_type") or "image/png"
            return f"data:{mime_type};base64,{inline['data']}"

        file_data = part.get("fileData") or part.get("file_data")
        if isinstance(file_data, dict):
            uri = file_data.get("fileUri") or file_data.get("file_uri")
            if uri:
                return uri

    return None
