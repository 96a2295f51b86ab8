"""
HTTP API adapter for the GeminiVision pipeline.

Architectural role:
- Expose JSON endpoints for option discovery, prompt composition, prompt
  sanitizing, and image generation.
- Enforce adapter-level input validation through pydantic request models.
- Delegate generation work to `geminivision.core.engine`.

Endpoint responsibilities:
- `GET /v1/options`: list recognized keys per categorical axis.
- `POST /v1/prompts/compose`: compose a prompt locally (no remote call).
- `POST /v1/prompts/sanitize`: sanitize free text, falling back to the original.
- `POST /v1/images/generations`: full sanitize -> compose -> generate pipeline.

Error handling strategy:
- `EmptyInputError` -> HTTP 400.
- `ImageGenerationError` -> HTTP 502, message forwarded verbatim.
- `ProviderConfigError` -> HTTP 500.
- Pydantic validation errors follow FastAPI default handling (HTTP 422).

Side effects:
- Emits debug logs only when `DEBUG == "true"`.
- Loads environment variables at import time via `load_dotenv()`.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os
import time
import uuid

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from geminivision.core.engine import (
    parse_seed,
    process_generation,
    sanitize_with_fallback,
)
from geminivision.core.errors import EmptyInputError, ImageGenerationError, ProviderConfigError
from geminivision.core.generation_types import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_CAMERA_VIEW,
    DEFAULT_COLOR_SCHEME,
    DEFAULT_LIGHTING,
    DEFAULT_QUALITY,
    DEFAULT_STYLE_PRESET,
    GenerationRequest,
    GenerationSpec,
)
from geminivision.prompting.prompt_builder import available_options, compose_prompt


logger = logging.getLogger(__name__)

app = FastAPI(title="GeminiVision")
# Sensitive request/response debug logging is opt-in.
DEBUG = os.getenv("DEBUG") == "true"


# ============================================================
# Request Schemas
# ============================================================

class ComposeRequest(BaseModel):
    """Structured generation parameters; mirrors `GenerationSpec` plus defaults."""

    prompt: str
    aspect_ratio: str | None = DEFAULT_ASPECT_RATIO
    style_preset: str | None = DEFAULT_STYLE_PRESET
    quality: str | None = DEFAULT_QUALITY
    negative_prompt: str | None = ""
    seed: int | str | None = None
    lighting: str | None = DEFAULT_LIGHTING
    color_scheme: str | None = DEFAULT_COLOR_SCHEME
    camera_view: str | None = DEFAULT_CAMERA_VIEW


class ImageGenerationBody(ComposeRequest):
    sanitize: bool = True


class SanitizeRequest(BaseModel):
    prompt: str = ""


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# ============================================================
# Options
# ============================================================

@app.get("/v1/options")
def list_options():
    """Return recognized values, sentinels and defaults for every axis."""
    return {
        "object": "list",
        "options": available_options(),
        "defaults": {
            "aspect_ratio": DEFAULT_ASPECT_RATIO,
            "style_preset": DEFAULT_STYLE_PRESET,
            "quality": DEFAULT_QUALITY,
            "lighting": DEFAULT_LIGHTING,
            "color_scheme": DEFAULT_COLOR_SCHEME,
            "camera_view": DEFAULT_CAMERA_VIEW,
        },
    }


# ============================================================
# Prompt endpoints
# ============================================================

@app.post("/v1/prompts/compose")
def compose(body: ComposeRequest):
    """
    Compose the effective prompt without contacting any model.

    Input validation behavior:
    - Blank prompt -> HTTP 400.
    - Seed that is not a positive whole number -> HTTP 400.
    """
    if not body.prompt.strip():
        return _error(400, "Please enter a prompt to generate an image.")

    try:
        seed = parse_seed(body.seed)
    except EmptyInputError as err:
        return _error(400, str(err))

    spec = GenerationSpec(
        prompt=body.prompt,
        aspect_ratio=body.aspect_ratio,
        style_preset=body.style_preset,
        quality=body.quality,
        negative_prompt=body.negative_prompt,
        seed=seed,
        lighting=body.lighting,
        color_scheme=body.color_scheme,
        camera_view=body.camera_view,
    )
    return {"prompt": compose_prompt(spec)}


@app.post("/v1/prompts/sanitize")
async def sanitize(body: SanitizeRequest):
    """
    Sanitize free text.

    The original prompt is returned (with `fallback: true`) whenever the
    sanitizer fails or produces nothing; the endpoint never blocks on it.
    """
    sanitized, fallback_used = await sanitize_with_fallback(body.prompt)

    if DEBUG:
        logger.debug("Sanitize: original=%r sanitized=%r fallback=%s", body.prompt, sanitized, fallback_used)

    return {
        "prompt": body.prompt,
        "sanitized_prompt": sanitized,
        "fallback": fallback_used,
    }


# ============================================================
# Image generation
# ============================================================

@app.post("/v1/images/generations")
async def generate(body: ImageGenerationBody):
    """
    Run the full pipeline for one request.

    API request lifecycle:
    1. Validate body (pydantic) and map it to a `GenerationRequest`.
    2. Delegate to `process_generation` (validation, sanitize, compose, generate).
    3. Map pipeline errors to HTTP status codes.
    4. Return an envelope with the image URL and the prompts used.
    """
    request = GenerationRequest(**body.model_dump())

    if DEBUG:
        logger.debug("Image request: %r", request)

    try:
        result = await process_generation(request)
    except EmptyInputError as err:
        return _error(400, str(err))
    except ImageGenerationError as err:
        return _error(502, str(err))
    except ProviderConfigError as err:
        return _error(500, str(err))

    if DEBUG:
        logger.debug("Composed prompt: %r", result.composed_prompt)

    return {
        "id": f"img-{uuid.uuid4().hex}",
        "object": "image.generation",
        "created": int(time.time()),
        "data": [{"url": result.image_url}],
        "prompt": {
            "original": result.original_prompt,
            "effective": result.effective_prompt,
            "composed": result.composed_prompt,
            "adjusted": result.prompt_adjusted,
        },
    }
