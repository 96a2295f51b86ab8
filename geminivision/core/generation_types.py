"""Generation data contracts shared by prompting, image and core layers.

Architectural role:
    Defines the immutable per-request parameter set consumed by the prompt
    composer, the request envelope accepted by `geminivision.core.engine`, and
    the result returned to API/CLI adapters.

Lifecycle:
    A `GenerationSpec` is built per request, composed once, and discarded. No
    caching and no identity beyond a single call.

Determinism:
    The data classes are purely structural and state-free.
"""

from dataclasses import dataclass


# Defaults mirror the original request form: square canvas, no style preference,
# standard quality, and no lighting/color/camera preference.
DEFAULT_ASPECT_RATIO = "square"
DEFAULT_STYLE_PRESET = "none"
DEFAULT_QUALITY = "standard"
DEFAULT_LIGHTING = "none"
DEFAULT_COLOR_SCHEME = "none"
DEFAULT_CAMERA_VIEW = "none"


@dataclass(frozen=True)
class GenerationSpec:
    """Structured input to prompt composition.

    Attributes:
        prompt: Base description. Callers guarantee it is non-empty after trimming.
        aspect_ratio: Canvas shape key (`square`, `landscape`, `portrait`).
        style_preset: Artistic style key; `"none"` means no preference.
        quality: Quality key; `"standard"` is the implicit default and adds nothing.
        negative_prompt: Free-text exclusions, applied only when non-blank.
        seed: Positive integer embedded as a textual hint.
        lighting: Lighting key; `"none"` means no preference.
        color_scheme: Palette key; `"none"` means no preference.
        camera_view: Camera angle key; `"none"` means no preference.

    Unknown categorical values are tolerated and ignored by the composer.
    """

    prompt: str
    aspect_ratio: str | None = None
    style_preset: str | None = None
    quality: str | None = None
    negative_prompt: str | None = None
    seed: int | None = None
    lighting: str | None = None
    color_scheme: str | None = None
    camera_view: str | None = None


@dataclass(frozen=True)
class GenerationRequest:
    """Raw caller request before validation and sanitizing.

    `seed` may still be a user-typed string here; `validate_generation_request`
    turns it into a positive `int` or `None`.
    """

    prompt: str
    aspect_ratio: str | None = DEFAULT_ASPECT_RATIO
    style_preset: str | None = DEFAULT_STYLE_PRESET
    quality: str | None = DEFAULT_QUALITY
    negative_prompt: str | None = ""
    seed: int | str | None = None
    lighting: str | None = DEFAULT_LIGHTING
    color_scheme: str | None = DEFAULT_COLOR_SCHEME
    camera_view: str | None = DEFAULT_CAMERA_VIEW
    sanitize: bool = True


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one end-to-end generation request.

    Attributes:
        image_url: Media URL returned by the image model (often a data URI).
        original_prompt: Prompt exactly as the caller submitted it.
        effective_prompt: Base prompt after sanitizing (or the original on fallback).
        composed_prompt: Final text sent to the image model.
        prompt_adjusted: Whether the sanitizer changed the prompt.
    """

    image_url: str
    original_prompt: str
    effective_prompt: str
    composed_prompt: str
    prompt_adjusted: bool = False
