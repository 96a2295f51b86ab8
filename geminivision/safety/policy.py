"""Content-safety thresholds sent with every remote model call.

Current status:
    Both remote paths (image generation and prompt sanitizing) attach a fixed
    list of per-category thresholds. Filtering itself happens provider-side;
    this module only declares the policy envelope.

Decision model:
    - Data only, no local classification.
    - The sanitizer path additionally guards civic-integrity content.

Determinism:
    Constant for the process lifetime. Callers receive copies so a request can
    never alter the shared policy.
"""

from copy import deepcopy


HARM_CATEGORY_HATE_SPEECH = "HARM_CATEGORY_HATE_SPEECH"
HARM_CATEGORY_DANGEROUS_CONTENT = "HARM_CATEGORY_DANGEROUS_CONTENT"
HARM_CATEGORY_HARASSMENT = "HARM_CATEGORY_HARASSMENT"
HARM_CATEGORY_SEXUALLY_EXPLICIT = "HARM_CATEGORY_SEXUALLY_EXPLICIT"
HARM_CATEGORY_CIVIC_INTEGRITY = "HARM_CATEGORY_CIVIC_INTEGRITY"

BLOCK_NONE = "BLOCK_NONE"
BLOCK_ONLY_HIGH = "BLOCK_ONLY_HIGH"
BLOCK_MEDIUM_AND_ABOVE = "BLOCK_MEDIUM_AND_ABOVE"
BLOCK_LOW_AND_ABOVE = "BLOCK_LOW_AND_ABOVE"

# Image model output: text is allowed alongside the image part.
RESPONSE_MODALITIES = ["TEXT", "IMAGE"]

IMAGE_SAFETY_SETTINGS = [
    {"category": HARM_CATEGORY_HATE_SPEECH, "threshold": BLOCK_ONLY_HIGH},
    {"category": HARM_CATEGORY_DANGEROUS_CONTENT, "threshold": BLOCK_NONE},
    {"category": HARM_CATEGORY_HARASSMENT, "threshold": BLOCK_MEDIUM_AND_ABOVE},
    {"category": HARM_CATEGORY_SEXUALLY_EXPLICIT, "threshold": BLOCK_LOW_AND_ABOVE},
]

SANITIZER_SAFETY_SETTINGS = IMAGE_SAFETY_SETTINGS + [
    {"category": HARM_CATEGORY_CIVIC_INTEGRITY, "threshold": BLOCK_ONLY_HIGH},
]


def image_safety_settings() -> list:
    """Return a fresh copy of the image-generation thresholds."""
    return deepcopy(IMAGE_SAFETY_SETTINGS)


def sanitizer_safety_settings() -> list:
    """Return a fresh copy of the sanitizer thresholds."""
    return deepcopy(SANITIZER_SAFETY_SETTINGS)


def image_generation_config() -> dict:
    """Build the fixed response/safety config forwarded with image requests."""
    return {
        "responseModalities": list(RESPONSE_MODALITIES),
        "safetySettings": image_safety_settings(),
    }
