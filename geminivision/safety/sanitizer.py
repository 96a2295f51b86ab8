"""LLM-backed prompt sanitizing before image generation.

Intent logic:
- Rewrites a raw user prompt so disallowed content is removed while the user's
  intent is preserved. The rewriting judgment belongs to the remote model; this
  module only defines the instruction template and the safety thresholds.

Interaction with core:
- Called from `geminivision.core.engine` before prompt composition.
- The engine owns the fallback: on `SanitizationError` it keeps the original
  prompt instead of blocking the request.

Determinism:
- Template filling and output cleanup are deterministic.
- The rewrite itself is model-dependent and therefore non-deterministic.

Failure handling:
- Empty model output and collaborator failures raise `SanitizationError`.
"""

import asyncio
import logging
import re

from geminivision.core.errors import SanitizationError
from geminivision.llm.service import generate_text
from geminivision.safety.policy import sanitizer_safety_settings


logger = logging.getLogger(__name__)


SANITIZE_PROMPT_TEMPLATE = """You are an AI assistant that sanitizes user prompts to ensure they are safe and appropriate for image generation.

Your goal is to prevent the generation of harmful, unethical, or inappropriate content.

Rewrite the following prompt to remove any potentially problematic elements while preserving the user's intent as much as possible.

Original Prompt: {prompt}

Sanitized Prompt:"""

# Models sometimes echo the answer cue from the template.
_ANSWER_LABEL = re.compile(r"^\s*sanitized prompt\s*:\s*", flags=re.IGNORECASE)


def build_sanitize_prompt(raw_prompt: str) -> str:
    """Fill the instruction template with the raw prompt (verbatim)."""
    return SANITIZE_PROMPT_TEMPLATE.format(prompt=raw_prompt or "")


def _clean_llm_output(text: str) -> str:
    """Normalize sanitizer output: drop answer label and wrapping quotes."""
    if not text:
        return ""

    line = _ANSWER_LABEL.sub("", text.strip())
    line = line.strip().strip('"').strip("'").strip()
    return line


def sanitize_prompt_sync(raw_prompt: str) -> str:
    """Rewrite `raw_prompt` under the sanitizer safety policy (blocking).

    Args:
        raw_prompt: Any user text, including the empty string.

    Returns:
        Sanitized prompt text, never empty.

    Raises:
        SanitizationError: the collaborator failed or returned no text.
    """
    try:
        rewritten = generate_text(
            build_sanitize_prompt(raw_prompt),
            safety_settings=sanitizer_safety_settings(),
        )
    except Exception as err:
        raise SanitizationError(f"Prompt sanitizing failed: {err}") from err

    sanitized = _clean_llm_output(rewritten)
    if not sanitized:
        raise SanitizationError("Prompt sanitizing returned no text.")

    return sanitized


async def sanitize_prompt(raw_prompt: str) -> str:
    """Async wrapper running the blocking sanitizer call in a worker thread."""
    return await asyncio.to_thread(sanitize_prompt_sync, raw_prompt)
