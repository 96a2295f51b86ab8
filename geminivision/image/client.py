"""Image-provider HTTP client.

Processing flow:
    1. Resolve active image provider from `geminivision.llm.provider_config`.
    2. Delegate the `generateContent` call to the shared LLM transport.
    3. Return parsed JSON response or raise on failure.

Base64 and temporary files:
    - This module does not decode Base64 content.
    - This module does not create or manage temporary files.

Error handling strategy:
    - Misconfiguration and HTTP failures raise exceptions for upstream handling.

Determinism:
    - Request assembly is deterministic for fixed inputs/configuration.
    - Final output remains provider/network dependent.
"""

from geminivision.llm.client import send_request
from geminivision.llm.provider_config import IMAGE_PROVIDER, IMAGE_PROVIDERS


def send_image_request(payload: dict) -> dict:
    """Send an image-generation request to the currently selected provider.

    Args:
        payload: `{model, prompt, config}` with response modalities and safety
            settings already attached.

    Returns:
        Parsed JSON response from provider.

    Error handling:
        - Unknown provider / missing key -> `ProviderConfigError`
        - Non-2xx HTTP response -> `requests.exceptions.HTTPError`
    """
    return send_request(payload, IMAGE_PROVIDERS, IMAGE_PROVIDER)
