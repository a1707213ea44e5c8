"""UI event handlers organized by feature area.

- form: text fields, suggestion chips, aspect ratio and prompt copy
- generation: image generation and result rendering
"""

from .form import (
    COPY_PROMPT_JS,
    apply_suggestion_handler,
    notify_prompt_copied,
    select_aspect_ratio_handler,
    update_field_handler,
)
from .generation import (
    generate_image,
    render_form_state,
)

__all__ = [
    # Form handlers
    "COPY_PROMPT_JS",
    "apply_suggestion_handler",
    "notify_prompt_copied",
    "select_aspect_ratio_handler",
    "update_field_handler",
    # Generation handlers
    "generate_image",
    "render_form_state",
]
