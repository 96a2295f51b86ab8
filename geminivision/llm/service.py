"""Prompt-to-payload adapter for text generation.

Architectural role:
    Provides the text-generation entrypoint used by the sanitizer. This module
    bridges prompt construction to transport (`geminivision.llm.client`).

Model call flow:
    prompt -> payload construction -> `client.send_request(...)` -> text.

Determinism:
    Payload construction is deterministic for fixed inputs and configuration.
    Generated output remains non-deterministic because inference runs remotely.
"""

from geminivision.llm.client import extract_text, send_request
from geminivision.llm.provider_config import MODEL_NAME, PROVIDER, PROVIDERS


def generate_text(prompt: str, safety_settings: list | None = None, temperature: float | None = None) -> str:
    """Invoke the configured text model once and return its text output.

    Args:
        prompt: Fully constructed prompt.
        safety_settings: Per-category thresholds forwarded to the provider.
        temperature: Optional sampling temperature; provider default when `None`.

    Returns:
        Response text, stripped. Empty string when the model returned no text
        (for example a safety block).

    Failure scenarios:
        Configuration and transport errors propagate from `client.send_request`.
    """
    config = {}
    if safety_settings:
        config["safetySettings"] = safety_settings
    if temperature is not None:
        config["temperature"] = temperature

    payload = {
        "model": MODEL_NAME,
        "prompt": prompt,
        "config": config,
    }

    return extract_text(send_request(payload, PROVIDERS, PROVIDER))
