"""Form state transitions for Imajinasi UI.

The form moves through four states::

    idle --submit--> submitting --ok--> succeeded
                          |
                          +--error--> failed

    succeeded | failed --submit--> submitting

A submit with an empty subject never leaves ``idle`` (or returns to it):
the validation message is stored and no request is made. Every failure is
converted into a message string here; nothing propagates to Gradio.

All functions update the given FormState in place and return it, so they
can be used directly as Gradio handlers that round-trip ``gr.State``.
"""

import logging

from imajinasi.core.client import UNEXPECTED_ERROR_MESSAGE
from imajinasi.core.downloads import discard_download
from imajinasi.core.errors import GenerationError
from imajinasi.core.models import AspectRatio, GenerationResult

from .models import FormState, FormStatus
from .validation import ValidationError, validate_field_name, validate_parameters

logger = logging.getLogger(__name__)


def initialize_form_state(
    state: FormState | None = None, aspect_ratio: AspectRatio | str | None = None
) -> FormState:
    """Create a FormState if needed and apply the default aspect ratio.

    Args:
        state: Existing FormState or None
        aspect_ratio: Initial aspect ratio (default: keep current)

    Returns:
        FormState instance
    """
    if state is None:
        logger.info("Creating new FormState")
        state = FormState()

    if aspect_ratio is not None:
        state.params = state.params.with_field("aspect_ratio", aspect_ratio)

    return state


def update_parameter(state: FormState, field: str, value: str | None) -> FormState:
    """Replace one text field with the value typed by the user."""
    validate_field_name(field)
    state.params = state.params.with_field(field, value)
    return state


def apply_suggestion(state: FormState, field: str, suggestion: str) -> FormState:
    """Set a field to a suggestion chip's literal value.

    The chip overwrites whatever was typed; it never appends.
    """
    logger.debug(f"Suggestion selected for {field}: {suggestion}")
    return update_parameter(state, field, suggestion)


def select_aspect_ratio(state: FormState, ratio: AspectRatio | str) -> FormState:
    """Set the requested aspect ratio.

    Raises:
        ValueError: If the ratio is not supported
    """
    state.params = state.params.with_field("aspect_ratio", ratio)
    return state


def begin_submission(state: FormState) -> FormState:
    """Handle the submit trigger.

    Clears the previous result and error and deletes the previous download
    file. With a valid form the state moves to ``submitting``; with an empty
    subject it stays ``idle`` and carries the validation message.

    Args:
        state: Current form state

    Returns:
        Updated state; check ``state.is_submitting`` to know whether to
        dispatch the request
    """
    state.result = None
    state.error = None
    state.show_prompt = False
    discard_download(state.download_path)
    state.download_path = None

    try:
        validate_parameters(state.params)
    except ValidationError as e:
        logger.warning(f"Validation error: {e}")
        state.status = FormStatus.IDLE
        state.error = str(e)
        return state

    state.status = FormStatus.SUBMITTING
    logger.info(f"Submitting generation: {state.params.aspect_ratio.value}")
    return state


def complete_submission(state: FormState, result: GenerationResult) -> FormState:
    """Store a successful result and reveal the prompt box."""
    state.status = FormStatus.SUCCEEDED
    state.result = result
    state.error = None
    state.show_prompt = True
    logger.info(f"Generation succeeded ({result.mime_type})")
    return state


def fail_submission(state: FormState, message: str) -> FormState:
    """Store a failure message; no image stays visible."""
    state.status = FormStatus.FAILED
    state.result = None
    state.error = message or UNEXPECTED_ERROR_MESSAGE
    state.show_prompt = False
    discard_download(state.download_path)
    state.download_path = None
    return state


async def run_submission(state: FormState, client) -> FormState:
    """Await the client for a state already in ``submitting``.

    Args:
        state: Form state after begin_submission
        client: Object with ``async generate(params) -> GenerationResult``

    Returns:
        State in ``succeeded`` or ``failed``
    """
    if not state.is_submitting:
        logger.debug(f"No request dispatched from status {state.status.value}")
        return state

    try:
        result = await client.generate(state.params)
    except GenerationError as e:
        logger.warning(f"Generation failed: {e.message}")
        return fail_submission(state, e.message)
    except Exception as e:
        logger.error(f"Unexpected error generating image: {e}", exc_info=True)
        return fail_submission(state, str(e))

    return complete_submission(state, result)


async def submit(state: FormState, client) -> FormState:
    """Validate, dispatch one request and record the outcome.

    Args:
        state: Current form state
        client: Object with ``async generate(params) -> GenerationResult``

    Returns:
        Final state (``idle`` with a validation message, ``succeeded`` or ``failed``)
    """
    if state.is_submitting:
        logger.warning("Submit ignored: a generation is already in progress")
        return state

    state = begin_submission(state)
    return await run_submission(state, client)
