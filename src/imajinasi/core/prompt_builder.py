"""Prompt templates built from structured image parameters.

Two renderings are produced from the same ImageParameters:

- **Display prompt**: a compact numbered list shown under the result and
  copied to the clipboard.
- **Generation prompt**: the verbose text actually sent to the model, with
  bold labels and a closing instruction sentence.

Display structure::

    Create an image with the following specifications:
    1. Main Subject: [subject]
    2. Visual Style: [style]
    3. Lighting: [lighting]
    4. Colors: [colors]
    5. Details: [details]
    Ratio: [aspect ratio]

Generation structure::

    Create a high-quality image based on the following structured specification:

    1. **Main Subject**: [subject]
    ...
    6. **Aspect Ratio**: [aspect ratio]

    Please ensure the image adheres strictly to the visual style and atmosphere described.

Empty fields render as a fallback label instead of being dropped, so the
numbering never shifts. Both functions are pure.
"""

from __future__ import annotations

from .models import ImageParameters

FALLBACK_EN = "Not specified"
# Indonesian label for callers that render prompts in Indonesian; the English
# UI always uses FALLBACK_EN.
FALLBACK_ID = "Tidak ditentukan"

# (field name, display label, generation label)
# Both renderings iterate this table so they stay in sync.
PROMPT_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("subject", "Main Subject", "Main Subject"),
    ("style", "Visual Style", "Visual Style"),
    ("lighting", "Lighting", "Lighting Atmosphere"),
    ("colors", "Colors", "Dominant Colors"),
    ("details", "Details", "Additional Details"),
)

_DISPLAY_HEADER = "Create an image with the following specifications:"
_GENERATION_HEADER = (
    "Create a high-quality image based on the following structured specification:"
)
_GENERATION_FOOTER = (
    "Please ensure the image adheres strictly to the visual style and atmosphere described."
)


def _field_value(params: ImageParameters, name: str, fallback: str) -> str:
    value = (getattr(params, name) or "").strip()
    return value or fallback


def build_display_prompt(params: ImageParameters, fallback: str = FALLBACK_EN) -> str:
    """Render the compact, user-facing prompt.

    Args:
        params: Image parameters from the form
        fallback: Label used for empty fields

    Returns:
        Multi-line prompt text ending with the ratio line
    """
    lines = [_DISPLAY_HEADER]
    for index, (name, label, _) in enumerate(PROMPT_FIELDS, start=1):
        lines.append(f"{index}. {label}: {_field_value(params, name, fallback)}")
    lines.append(f"Ratio: {params.aspect_ratio.value}")
    return "\n".join(lines)


def build_generation_prompt(params: ImageParameters, fallback: str = FALLBACK_EN) -> str:
    """Render the verbose prompt sent to the image model.

    Args:
        params: Image parameters from the form
        fallback: Label used for empty fields

    Returns:
        Prompt text with emphasized labels and a trailing instruction
    """
    lines = []
    for index, (name, _, label) in enumerate(PROMPT_FIELDS, start=1):
        lines.append(f"{index}. **{label}**: {_field_value(params, name, fallback)}")
    lines.append(f"{len(PROMPT_FIELDS) + 1}. **Aspect Ratio**: {params.aspect_ratio.value}")

    return "\n\n".join([_GENERATION_HEADER, "\n".join(lines), _GENERATION_FOOTER])
