"""Data models for Imajinasi UI state and form constants."""

from dataclasses import dataclass, field
from enum import Enum

from imajinasi.core.models import GenerationResult, ImageParameters


class FormStatus(str, Enum):
    """Lifecycle of one generation cycle."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class FormState:
    """Session state for the Gradio form.

    Each user session gets its own FormState through ``gr.State``. Only the
    functions in ``imajinasi.ui.state`` change it.

    Attributes
    ----------
    params : ImageParameters
        Current form values
    status : FormStatus
        Where the current generation cycle stands
    result : GenerationResult | None
        Image from the last successful generation
    error : str | None
        User-facing message from the last failed or rejected submit
    show_prompt : bool
        Whether the ready-to-use prompt box is shown
    download_path : str | None
        PNG file offered by the download button
    """

    params: ImageParameters = field(default_factory=ImageParameters)
    status: FormStatus = FormStatus.IDLE
    result: GenerationResult | None = None
    error: str | None = None
    show_prompt: bool = False
    download_path: str | None = None

    @property
    def is_submitting(self) -> bool:
        return self.status is FormStatus.SUBMITTING

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"FormState(status={self.status.value}, "
            f"has_result={self.result is not None}, "
            f"error={self.error!r})"
        )


@dataclass(frozen=True)
class FieldSpec:
    """Label, placeholder and suggestion chips for one text field."""

    name: str
    label: str
    placeholder: str = ""
    multiline: bool = False
    suggestions: tuple[str, ...] = ()
    helper_text: str = ""


# UI Constants
STYLE_SUGGESTIONS = (
    "Photorealistic",
    "Anime",
    "Cyberpunk",
    "Oil Painting",
    "3D Render",
    "Pixel Art",
)

LIGHTING_SUGGESTIONS = (
    "Cinematic",
    "Golden Hour",
    "Neon",
    "Soft Studio",
    "Dark & Moody",
)

FIELD_SPECS = {
    "subject": FieldSpec(
        name="subject",
        label="1. Main Subject",
        placeholder="Example: an astronaut cat sitting on the moon...",
        multiline=True,
        helper_text="Describe what you want to see at the center of the image.",
    ),
    "style": FieldSpec(
        name="style",
        label="2. Visual Style",
        placeholder="Pick a style or type your own...",
        suggestions=STYLE_SUGGESTIONS,
    ),
    "lighting": FieldSpec(
        name="lighting",
        label="3. Lighting",
        suggestions=LIGHTING_SUGGESTIONS,
    ),
    "colors": FieldSpec(
        name="colors",
        label="4. Dominant Colors",
        placeholder="Red & Gold, Pastel...",
    ),
    "details": FieldSpec(
        name="details",
        label="5. Additional Details",
        placeholder="Glowing dust particles, blurred background...",
        multiline=True,
    ),
}

ASPECT_RATIO_LABEL = "6. Aspect Ratio"

SUBJECT_REQUIRED_MESSAGE = "Please fill in 'Main Subject' first."
LOADING_MESSAGE = "AI is painting your imagination..."
LOADING_HINT = "This may take a few seconds depending on complexity."
EMPTY_STATE_MESSAGE = 'Fill in the form and press "Generate Image" to see the magic.'
ERROR_TITLE = "Failed to Generate Image"
PROMPT_COPIED_MESSAGE = "Prompt copied to clipboard!"
