"""Image service used by core generation orchestration.

Role in pipeline:
    - Receives a `GenerationSpec` from orchestration.
    - Composes the effective prompt and attaches the fixed response/safety config.
    - Submits one request to the configured image provider.
    - Returns the media URL unchanged to upstream callers.

Base64 and temporary files:
    - Inline image data is returned as a data URI, never decoded.
    - No temporary-file lifecycle management.

Error handling strategy:
    - A response without media raises `ImageGenerationError` with a fixed
      descriptive message; safety blocks, overly complex prompts and internal
      faults are indistinguishable at this layer.
    - Transport failures are wrapped in `ImageGenerationError` with a
      provider-labeled message. Configuration errors propagate unchanged.

Determinism:
    Payload assembly is deterministic for fixed inputs/configuration. The seed
    clause is a textual hint only; output remains non-deterministic.
"""

import logging

import requests

from geminivision.core.errors import IMAGE_URL_MISSING_MESSAGE, ImageGenerationError
from geminivision.core.generation_types import GenerationSpec
from geminivision.image.client import send_image_request
from geminivision.llm.client import build_sanitized_http_error, extract_media_url
from geminivision.llm.provider_config import IMAGE_MODEL, IMAGE_PROVIDER
from geminivision.prompting.prompt_builder import compose_prompt
from geminivision.safety.policy import image_generation_config


logger = logging.getLogger(__name__)


def build_image_payload(prompt: str) -> dict:
    """Build the provider-agnostic request for an already composed prompt."""
    return {
        "model": IMAGE_MODEL,
        "prompt": prompt,
        "config": image_generation_config(),
    }


def generate_image_from_prompt(prompt: str) -> dict:
    """Submit a composed prompt and return `{"image_url": ...}`.

    Raises:
        ImageGenerationError: no media in the response or transport failure.
        ProviderConfigError: provider misconfiguration.
    """
    try:
        response = send_image_request(build_image_payload(prompt))
    except requests.exceptions.RequestException as err:
        message = build_sanitized_http_error(IMAGE_PROVIDER, err)
        raise ImageGenerationError(f"Image generation failed: {message}") from err

    image_url = extract_media_url(response)
    if not image_url:
        logger.warning("Image model returned no media (model=%s)", IMAGE_MODEL)
        raise ImageGenerationError(IMAGE_URL_MISSING_MESSAGE)

    return {"image_url": image_url}


def generate_image(spec: GenerationSpec) -> dict:
    """Generate an image for a structured spec.

    Args:
        spec: Per-request generation parameters.

    Returns:
        `{"image_url": <url>, "prompt": <composed prompt>}`.
    """
    prompt = compose_prompt(spec)
    result = generate_image_from_prompt(prompt)
    result["prompt"] = prompt
    return result
