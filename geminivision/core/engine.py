"""Core request orchestration for sanitizing, composition, and image generation.

Architectural role:
    Provides the execution pipeline used by API/CLI layers to turn one user
    generation request into an image URL.

Control-flow model (strictly sequential, no fan-out):
    1. Validate caller input (blank prompt, seed shape).
    2. Optionally sanitize the free-text prompt; fall back to the original on failure.
    3. Build the immutable `GenerationSpec`.
    4. Compose the effective prompt and call the image model.

Interaction surface:
    - Safety: `safety.sanitizer.sanitize_prompt`.
    - Image: `image.service.generate_image` (composes via the prompt builder).

Error handling strategy:
    - `EmptyInputError` is raised before any remote call.
    - `SanitizationError` is recovered locally and logged.
    - `ImageGenerationError` / `ProviderConfigError` propagate unchanged; a single
      failed remote call is terminal for the request. No retries.

Determinism:
    Validation, fallback and composition are deterministic. Sanitizer output and
    generated images are not.
"""

import asyncio
import logging

from geminivision.core.errors import EmptyInputError, SanitizationError
from geminivision.core.generation_types import GenerationRequest, GenerationResult, GenerationSpec
from geminivision.image.service import generate_image
from geminivision.safety.sanitizer import sanitize_prompt


logger = logging.getLogger(__name__)

EMPTY_PROMPT_MESSAGE = "Please enter a prompt to generate an image."
INVALID_SEED_MESSAGE = "Seed must be a positive whole number."


def parse_seed(seed) -> int | None:
    """Normalize a caller-supplied seed.

    Args:
        seed: `None`, an `int`, or a user-typed string.

    Returns:
        Positive `int`, or `None` when absent/blank.

    Raises:
        EmptyInputError: seed present but not a positive whole number.
    """
    if seed is None:
        return None

    if isinstance(seed, bool):
        raise EmptyInputError(INVALID_SEED_MESSAGE)

    if isinstance(seed, str):
        text = seed.strip()
        if not text:
            return None
        if not text.isdecimal():
            raise EmptyInputError(INVALID_SEED_MESSAGE)
        seed = int(text)

    if not isinstance(seed, int) or seed <= 0:
        raise EmptyInputError(INVALID_SEED_MESSAGE)

    return seed


def validate_generation_request(prompt: str, seed=None) -> int | None:
    """Reject requests the core must never see.

    Returns:
        Normalized seed (see `parse_seed`).

    Raises:
        EmptyInputError: blank prompt or invalid seed.
    """
    if not prompt or not str(prompt).strip():
        raise EmptyInputError(EMPTY_PROMPT_MESSAGE)

    return parse_seed(seed)


def resolve_effective_prompt(original: str, sanitized: str | None) -> str:
    """Return the sanitized prompt when usable, else the original."""
    if sanitized is None or not sanitized.strip():
        return original
    return sanitized


def was_prompt_adjusted(original: str, sanitized: str | None) -> bool:
    """Whether the sanitizer produced a different, non-blank prompt."""
    return bool(sanitized and sanitized.strip()) and sanitized != original


async def sanitize_with_fallback(prompt: str) -> tuple[str, bool]:
    """Sanitize `prompt`, keeping the original when sanitizing fails.

    Returns:
        `(effective_prompt, fallback_used)`.
    """
    try:
        sanitized = await sanitize_prompt(prompt)
    except SanitizationError:
        logger.warning("Prompt sanitizing unavailable; using original prompt", exc_info=True)
        return prompt, True

    return resolve_effective_prompt(prompt, sanitized), False


def build_spec(request: GenerationRequest, prompt: str, seed: int | None) -> GenerationSpec:
    """Copy the categorical fields of `request` into an immutable spec."""
    return GenerationSpec(
        prompt=prompt,
        aspect_ratio=request.aspect_ratio,
        style_preset=request.style_preset,
        quality=request.quality,
        negative_prompt=request.negative_prompt,
        seed=seed,
        lighting=request.lighting,
        color_scheme=request.color_scheme,
        camera_view=request.camera_view,
    )


async def process_generation(request: GenerationRequest) -> GenerationResult:
    """Run one generation request end to end.

    Args:
        request: Raw caller request.

    Returns:
        `GenerationResult` with the image URL and the prompts used.

    Raises:
        EmptyInputError: before any remote call, for blank prompt / bad seed.
        ImageGenerationError: image model returned no media or failed.
        ProviderConfigError: provider misconfiguration on the image path.

    Edge cases:
        - Sanitizer failure or empty output -> original prompt is used.
        - `request.sanitize=False` skips the sanitizer entirely.
    """
    seed = validate_generation_request(request.prompt, request.seed)
    original = request.prompt

    if request.sanitize:
        effective, fallback_used = await sanitize_with_fallback(original)
    else:
        effective, fallback_used = original, False

    adjusted = not fallback_used and was_prompt_adjusted(original, effective)
    if adjusted:
        logger.debug("Prompt adjusted by sanitizer: original=%r used=%r", original, effective)

    spec = build_spec(request, effective, seed)
    try:
        result = await asyncio.to_thread(generate_image, spec)
    except Exception:
        logger.exception("Image generation failed")
        raise

    composed = result["prompt"]
    logger.debug("Composed image prompt: %r", composed)

    return GenerationResult(
        image_url=result["image_url"],
        original_prompt=original,
        effective_prompt=effective,
        composed_prompt=composed,
        prompt_adjusted=adjusted,
    )
