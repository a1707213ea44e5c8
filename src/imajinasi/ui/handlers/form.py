"""Form input handlers: text fields, suggestion chips, aspect ratio, copy."""

import logging

import gradio as gr

from ..models import PROMPT_COPIED_MESSAGE, FormState
from ..state import apply_suggestion, select_aspect_ratio, update_parameter
from ..validation import ValidationError

logger = logging.getLogger(__name__)

# Runs in the browser before notify_prompt_copied; its return value becomes
# the handler input.
COPY_PROMPT_JS = """
(text) => {
    if (navigator.clipboard) {
        navigator.clipboard.writeText(text);
    }
    return text;
}
"""


def update_field_handler(field: str, value: str, state: FormState) -> FormState:
    """Store a textbox change in the form state.

    Args:
        field: ImageParameters field bound to the textbox
        value: New textbox value
        state: Form state

    Returns:
        Updated form state
    """
    try:
        return update_parameter(state, field, value)
    except ValidationError as e:
        logger.error(f"Field update rejected: {e}")
        return state


def apply_suggestion_handler(
    field: str, suggestion: str, state: FormState
) -> tuple[dict, FormState]:
    """Handle a suggestion chip click.

    Returns:
        Tuple of (textbox_update, updated_state)
    """
    try:
        state = apply_suggestion(state, field, suggestion)
    except ValidationError as e:
        logger.error(f"Suggestion rejected: {e}")
        return gr.update(), state
    return gr.update(value=suggestion), state


def select_aspect_ratio_handler(ratio: str, state: FormState) -> FormState:
    """Store the aspect ratio picked in the radio group."""
    try:
        return select_aspect_ratio(state, ratio)
    except ValueError as e:
        logger.warning(f"Ignoring aspect ratio selection: {e}")
        return state


def notify_prompt_copied(prompt_text: str) -> None:
    """Confirm the clipboard copy done by COPY_PROMPT_JS."""
    logger.debug(f"Prompt copied ({len(prompt_text or '')} characters)")
    gr.Info(PROMPT_COPIED_MESSAGE)
