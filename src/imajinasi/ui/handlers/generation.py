"""Image generation handler and result rendering."""

import logging
from collections.abc import AsyncIterator

import gradio as gr

from imajinasi.core.client import ImageGenerationClient
from imajinasi.core.config import ImajinasiConfig, config
from imajinasi.core.downloads import save_for_download
from imajinasi.core.prompt_builder import build_display_prompt

from ..models import ERROR_TITLE, FormState, FormStatus
from ..state import begin_submission, fail_submission, run_submission

logger = logging.getLogger(__name__)

GENERATE_LABEL = "Generate Image"
GENERATING_LABEL = "Generating..."


def render_form_state(state: FormState) -> tuple:
    """Translate a FormState into Gradio updates.

    Exactly one of spinner, error panel, image or empty hint is visible.

    Args:
        state: Form state

    Returns:
        Tuple of updates for (generate_button, loading, error, image,
        empty_hint, download_button, prompt_group, prompt_text)
    """
    submitting = state.is_submitting
    show_error = not submitting and state.error is not None
    show_image = not submitting and not show_error and state.result is not None
    show_hint = not (submitting or show_error or show_image)
    show_prompt = state.show_prompt and not submitting

    button = gr.update(
        value=GENERATING_LABEL if submitting else GENERATE_LABEL,
        interactive=not submitting,
    )
    error = gr.update(
        value=f"**{ERROR_TITLE}**\n\n{state.error}" if show_error else "",
        visible=show_error,
    )
    image = gr.update(
        value=state.result.to_image() if show_image else None,
        visible=show_image,
    )
    download = gr.update(
        value=state.download_path if show_image else None,
        visible=show_image and state.download_path is not None,
    )
    prompt_text = gr.update(value=build_display_prompt(state.params) if show_prompt else "")

    return (
        button,
        gr.update(visible=submitting),
        error,
        image,
        gr.update(visible=show_hint),
        download,
        gr.update(visible=show_prompt),
        prompt_text,
    )


def _prepare_result(state: FormState, settings: ImajinasiConfig) -> FormState:
    """Check the image decodes and write the download file."""
    try:
        state.result.to_image()
    except (OSError, ValueError) as e:
        logger.error(f"Returned image could not be decoded: {e}")
        return fail_submission(state, f"The returned image could not be decoded: {e}")

    try:
        path = save_for_download(state.result, settings.downloads_dir, settings.download_prefix)
        state.download_path = str(path)
    except OSError as e:
        # The image is still shown; only the download button stays hidden
        logger.error(f"Could not write download file: {e}", exc_info=True)
        state.download_path = None

    return state


async def generate_image(
    state: FormState,
    client: ImageGenerationClient,
    settings: ImajinasiConfig | None = None,
) -> AsyncIterator[tuple]:
    """Generate an image from the current form values.

    Yields the ``submitting`` render first so the spinner shows and the
    button is disabled while the request is in flight, then the final
    render.

    Args:
        state: Form state
        client: Image client built by create_ui
        settings: Configuration for downloads (default: global config)

    Yields:
        Render updates followed by the updated state
    """
    settings = settings or config

    if state.is_submitting:
        logger.warning("Generate clicked while a request is in flight; ignoring")
        yield (*render_form_state(state), state)
        return

    state = begin_submission(state)
    yield (*render_form_state(state), state)

    if not state.is_submitting:
        return

    state = await run_submission(state, client)
    if state.status is FormStatus.SUCCEEDED:
        state = _prepare_result(state, settings)

    yield (*render_form_state(state), state)
