"""
Interactive CLI adapter for GeminiVision.

Architectural role:
- Exposes terminal interaction over the generation pipeline.
- Keeps the current option set between turns so only the prompt needs typing.
- Delegates all generation work to `geminivision.core.engine.process_generation`.

Request lifecycle (per user turn, CLI):
1. Read stdin.
2. Handle local control commands (`exit`/`quit`, `/set`, `/unset`, `/show`,
   `/options`, `/reset`).
3. Submit any other line as the prompt with the current options.
4. Print composed prompt, sanitizer notice, and image URL.

Input validation behavior:
- Empty input is ignored.
- `/set` only accepts known field names; values are not checked against the
  hint tables (unknown values are ignored by the composer).
- Blank prompt / invalid seed errors are printed and the loop continues.

Error handling strategy:
- Pipeline errors are printed without traceback output.
- EOF and keyboard interrupts terminate the loop.
"""

from dotenv import load_dotenv

load_dotenv()

import asyncio
import logging
import sys
from dataclasses import replace

from geminivision.core.engine import process_generation
from geminivision.core.errors import EmptyInputError, ImageGenerationError, ProviderConfigError
from geminivision.core.generation_types import GenerationRequest
from geminivision.prompting.prompt_builder import available_options


# Data URIs are long; show a prefix only.
URL_PREVIEW_CHARS = 80

SETTABLE_FIELDS = (
    "aspect_ratio",
    "style_preset",
    "quality",
    "lighting",
    "color_scheme",
    "camera_view",
    "negative_prompt",
    "seed",
    "sanitize",
)


# =========================================================
# UTF-8 SAFE OUTPUT
# Best-effort stdout encoding normalization for interactive terminals.
# =========================================================

if hasattr(sys.stdout, "reconfigure"):
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="ignore")
    except Exception:
        pass


def default_request() -> GenerationRequest:
    """Return the option template used before any `/set` command."""
    return GenerationRequest(prompt="")


def apply_command(current: GenerationRequest, line: str) -> tuple[GenerationRequest, str]:
    """Apply one `/set`, `/unset`, `/reset`, `/show` or `/options` command.

    Returns:
        Updated template and the message to print.
    """
    parts = line.split(maxsplit=2)
    command = parts[0].lower()

    if command == "/reset":
        return default_request(), "Options reset."

    if command == "/show":
        return current, format_request(current)

    if command == "/options":
        return current, format_options()

    if command in ("/set", "/unset"):
        if len(parts) < 2 or parts[1] not in SETTABLE_FIELDS:
            return current, "Usage: /set <field> <value> | /unset <field>\nFields: " + ", ".join(SETTABLE_FIELDS)

        field = parts[1]
        if command == "/unset":
            value = True if field == "sanitize" else None
        elif len(parts) < 3:
            return current, f"Missing value for {field}."
        elif field == "sanitize":
            value = parts[2].strip().lower() in ("1", "true", "yes", "on")
        else:
            value = parts[2].strip()

        return replace(current, **{field: value}), f"{field} = {value!r}"

    return current, f"Unknown command: {command}"


def format_request(request: GenerationRequest) -> str:
    return "\n".join(f"{field}: {getattr(request, field)!r}" for field in SETTABLE_FIELDS)


def format_options() -> str:
    lines = []
    for field, option in available_options().items():
        lines.append(f"{field}: {', '.join(option['values'])}")
    return "\n".join(lines)


def preview_url(url: str) -> str:
    if len(url) <= URL_PREVIEW_CHARS:
        return url
    return f"{url[:URL_PREVIEW_CHARS]}... ({len(url)} chars)"


# =========================================================
# MAIN
# =========================================================

def main():
    """
    Run CLI loop with option controls.

    Error handling strategy:
    - Validation and generation failures print a message and keep the loop alive.
    - EOF/interrupt are handled without stack traces.
    """
    logging.basicConfig(level=logging.WARNING)

    template = default_request()

    print("GeminiVision started. (Type 'exit' to quit, '/options' for choices)")
    print("-" * 60)

    while True:

        try:
            line = input("Prompt: ").strip()

        except EOFError:
            print()
            break

        except KeyboardInterrupt:
            print("\nOperation cancelled by user.")
            break

        if not line:
            continue

        if line.lower() in ("exit", "quit"):
            print("Shutting down.")
            break

        if line.startswith("/"):
            template, message = apply_command(template, line)
            print(message)
            continue

        request = replace(template, prompt=line)

        try:
            result = asyncio.run(process_generation(request))
        except EmptyInputError as err:
            print(f"Invalid input: {err}")
            continue
        except (ImageGenerationError, ProviderConfigError) as err:
            print(f"Generation failed: {err}")
            continue

        if result.prompt_adjusted:
            print(f"Prompt adjusted for safety. Used: {result.effective_prompt}")
        print(f"Composed prompt: {result.composed_prompt}")
        print(f"Image: {preview_url(result.image_url)}")
        print("\n" + "-" * 60 + "\n")


if __name__ == "__main__":
    main()
