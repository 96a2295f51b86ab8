"""Exception types raised across the generation pipeline.

Unrecognized categorical values are deliberately absent here: the composer
ignores them instead of raising.
"""


class EmptyInputError(ValueError):
    """Caller-side validation failure (blank prompt or invalid seed)."""


class ProviderConfigError(RuntimeError):
    """Unknown provider or missing API key."""


class ImageGenerationError(RuntimeError):
    """The image model returned no media, or the request to it failed."""


class SanitizationError(RuntimeError):
    """The sanitizer produced no usable text. Callers recover with the original prompt."""


IMAGE_URL_MISSING_MESSAGE = (
    "Image generation failed: The model did not return an image URL. "
    "This could be due to safety filters, a very complex prompt, or an internal issue."
)
