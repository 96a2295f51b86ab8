"""Provider/runtime configuration for the LLM and image layers.

Architectural role:
    Centralizes model/provider selection, endpoint maps, transport timeout, and
    credential lookup for `geminivision.llm.client`, `geminivision.llm.service`
    and `geminivision.image.service`.

Model call flow integration:
    - `service.generate_text` consumes `MODEL_NAME`.
    - `image.service.generate_image` consumes `IMAGE_MODEL`.
    - `client.send_request` consumes endpoint maps, `REQUEST_TIMEOUT` and key
      resolution.

Determinism:
    Deterministic for a fixed process environment and key files. Values are resolved
    at import time (plus runtime key-file reads in `load_key`).

Failure behavior:
    Missing key material is represented as `None` and turned into
    `ProviderConfigError` by `client`.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Text model used by the prompt sanitizer.
PROVIDER = os.getenv("PROVIDER", "gemini")
MODEL_NAME = os.getenv("MODEL_NAME", "gemini-2.0-flash")

# Image model; only Gemini's native image output is wired up.
IMAGE_PROVIDER = os.getenv("IMAGE_PROVIDER", "gemini")
IMAGE_MODEL = os.getenv("IMAGE_MODEL", "gemini-2.0-flash-exp")

# Seconds per HTTP call. One attempt only, no retry.
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "120"))

GEMINI_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "{model}:generateContent"
)

PROVIDERS = {

    "gemini": {
        "url": GEMINI_URL_TEMPLATE,
        "key_file": "config/gemini.key"
    },

}

IMAGE_PROVIDERS = {

    "gemini": {
        "url": GEMINI_URL_TEMPLATE,
        "key_file": "config/gemini.key"
    },

}


def load_key(path):
    """Load API key from environment override or key file.

    Resolution order:
        1. Environment variable inferred from file stem (for example
           `config/gemini.key` -> `GEMINI_API_KEY`).
        2. Raw file contents at `path`.

    Args:
        path: Configured key file path or `None`.

    Returns:
        Key string or `None` when not available.

    Edge cases:
        - `None` path returns `None`.
        - Missing file returns `None`.
    """
    if not path:
        return None
    key_name = os.path.splitext(os.path.basename(path))[0].upper() + "_API_KEY"
    env_value = os.getenv(key_name)
    if env_value:
        return env_value
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None
