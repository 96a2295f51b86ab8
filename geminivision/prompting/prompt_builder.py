"""Image prompt composition from a structured generation spec.

This module is intentionally narrow: it only turns a `GenerationSpec` into the
single natural-language prompt sent to the image model. Sanitizing, validation
and model invocation happen outside this module.

Design constraints:
    - Deterministic construction for identical inputs.
    - Fixed ordering of prompt components.
    - No hidden side effects (no I/O, no global state mutation, no input mutation).

Tolerance policy:
    - Absent, sentinel, or unrecognized categorical values add nothing.
    - Nothing in this module raises for bad optional values.
"""

from collections import namedtuple

from geminivision.core.generation_types import GenerationSpec
from geminivision.prompting.hint_tables import (
    ASPECT_RATIO_HINTS,
    CAMERA_VIEW_HINTS,
    COLOR_SCHEME_HINTS,
    LIGHTING_HINTS,
    QUALITY_HINTS,
    STYLE_HINTS,
)


# =========================================================
# AXIS DECLARATION
# =========================================================
# One entry per optional categorical field of `GenerationSpec`.
# Ordering guarantee: hint clauses are appended in exactly this order,
# independent of how the caller populated `GenerationSpec`. The model weighs clauses
# by proximity to the base description, so reordering changes output.
#
# `sentinel` is the "no preference" value for the axis, or `None` when the
# axis has none (aspect ratio: any recognized value is stated).

HintAxis = namedtuple("HintAxis", ["field", "table", "sentinel"])

HINT_AXES = (
    HintAxis("aspect_ratio", ASPECT_RATIO_HINTS, None),
    HintAxis("style_preset", STYLE_HINTS, "none"),
    HintAxis("quality", QUALITY_HINTS, "standard"),
    HintAxis("lighting", LIGHTING_HINTS, "none"),
    HintAxis("color_scheme", COLOR_SCHEME_HINTS, "none"),
    HintAxis("camera_view", CAMERA_VIEW_HINTS, "none"),
)

HINT_SEPARATOR = ", "
NEGATIVE_PROMPT_PREFIX = ". Avoid the following: "
SEED_PREFIX = ", generation seed: "


def hint_for(axis: HintAxis, value) -> str | None:
    """Return the clause for `value` on `axis`, or `None` when nothing applies."""
    if not value or value == axis.sentinel:
        return None
    if not isinstance(value, str):
        return None
    return axis.table.get(value)


def collect_hints(spec: GenerationSpec) -> list:
    """Return recognized hint clauses for `spec` in fixed axis order."""
    hints = []

    for axis in HINT_AXES:
        clause = hint_for(axis, getattr(spec, axis.field, None))
        if clause:
            hints.append(clause)

    return hints


# =========================================================
# EFFECTIVE PROMPT
# =========================================================
# Prompt component order:
#   1) Base prompt (verbatim, not trimmed or validated)
#   2) Hint clauses, one per recognized axis value, in `HINT_AXES` order
#   3) Negative-prompt exclusion clause (trimmed, only when non-blank)
#   4) Seed clause (always last)

def compose_prompt(spec: GenerationSpec) -> str:
    """Build the effective image prompt from a structured spec.

    Args:
        spec: Per-request generation parameters.

    Returns:
        Base prompt followed by the applicable hint, exclusion and seed clauses.

    Determinism:
        Deterministic for identical `spec` values. The seed clause is only a
        textual hint; the remote model has no native seed parameter.

    Edge cases:
        - No optional fields set -> `spec.prompt` unchanged.
        - Whitespace-only or non-string `negative_prompt` adds no exclusion clause.
        - A zero or absent seed adds no seed clause.
        - Unknown categorical values are silently dropped.
    """
    result = spec.prompt

    for clause in collect_hints(spec):
        result += HINT_SEPARATOR + clause

    negative = spec.negative_prompt.strip() if isinstance(spec.negative_prompt, str) else ""
    if negative:
        result += NEGATIVE_PROMPT_PREFIX + negative

    if spec.seed:
        result += f"{SEED_PREFIX}{spec.seed}"

    return result


def available_options() -> dict:
    """Return recognized keys and the sentinel for each axis.

    Used by API/CLI adapters to list choices. Sentinel keys are included as
    selectable "no preference" values.
    """
    options = {}

    for axis in HINT_AXES:
        values = list(axis.table)
        if axis.sentinel and axis.sentinel not in values:
            values.insert(0, axis.sentinel)
        options[axis.field] = {
            "values": values,
            "sentinel": axis.sentinel,
        }

    return options
