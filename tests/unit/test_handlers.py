"""Unit tests for Gradio event handlers."""

import asyncio
import inspect
from pathlib import Path
from unittest.mock import AsyncMock, Mock, patch

import pytest

from imajinasi.core.errors import RefusalError
from imajinasi.core.models import GenerationResult
from imajinasi.ui import handlers
from imajinasi.ui.handlers import (
    apply_suggestion_handler,
    generate_image,
    notify_prompt_copied,
    render_form_state,
    select_aspect_ratio_handler,
    update_field_handler,
)
from imajinasi.ui.handlers.generation import GENERATE_LABEL, GENERATING_LABEL
from imajinasi.ui.models import (
    PROMPT_COPIED_MESSAGE,
    SUBJECT_REQUIRED_MESSAGE,
    FormState,
    FormStatus,
)
from imajinasi.ui.state import begin_submission, complete_submission, fail_submission

# Indices into render_form_state output
BUTTON, LOADING, ERROR, IMAGE, HINT, DOWNLOAD, PROMPT_GROUP, PROMPT_TEXT = range(8)
PANES = (LOADING, ERROR, IMAGE, HINT)


def visible_panes(updates: tuple) -> list[int]:
    return [index for index in PANES if updates[index]["visible"]]


def collect(agen) -> list:
    async def _run():
        return [item async for item in agen]

    return asyncio.run(_run())


class TestFormHandlers:
    """Tests for field, chip and aspect ratio handlers."""

    def test_update_field_handler(self):
        state = update_field_handler("colors", "Red & Gold", FormState())
        assert state.params.colors == "Red & Gold"

    def test_update_field_handler_unknown_field(self):
        state = FormState()
        assert update_field_handler("mood", "calm", state) is state

    def test_apply_suggestion_handler(self):
        update, state = apply_suggestion_handler("lighting", "Golden Hour", FormState())

        assert update["value"] == "Golden Hour"
        assert state.params.lighting == "Golden Hour"

    def test_select_aspect_ratio_handler(self):
        state = select_aspect_ratio_handler("16:9", FormState())
        assert state.params.aspect_ratio.value == "16:9"

    def test_select_aspect_ratio_handler_invalid(self):
        state = select_aspect_ratio_handler("7:5", FormState())
        assert state.params.aspect_ratio.value == "1:1"

    def test_notify_prompt_copied(self):
        with patch("imajinasi.ui.handlers.form.gr.Info") as mock_info:
            notify_prompt_copied("prompt text")

        mock_info.assert_called_once_with(PROMPT_COPIED_MESSAGE)


class TestRenderFormState:
    """Exactly one result pane is visible for each state."""

    def test_idle_shows_hint(self):
        updates = render_form_state(FormState())

        assert visible_panes(updates) == [HINT]
        assert updates[BUTTON]["interactive"] is True
        assert updates[BUTTON]["value"] == GENERATE_LABEL
        assert updates[PROMPT_GROUP]["visible"] is False

    def test_submitting_shows_spinner_and_disables_button(self, form_state):
        updates = render_form_state(begin_submission(form_state))

        assert visible_panes(updates) == [LOADING]
        assert updates[BUTTON]["interactive"] is False
        assert updates[BUTTON]["value"] == GENERATING_LABEL

    def test_failed_shows_error(self, form_state):
        updates = render_form_state(fail_submission(form_state, "quota exceeded"))

        assert visible_panes(updates) == [ERROR]
        assert "quota exceeded" in updates[ERROR]["value"]
        assert updates[DOWNLOAD]["visible"] is False

    def test_validation_error_shows_error(self):
        updates = render_form_state(begin_submission(FormState()))

        assert visible_panes(updates) == [ERROR]
        assert SUBJECT_REQUIRED_MESSAGE in updates[ERROR]["value"]

    def test_succeeded_shows_image_and_prompt(self, form_state, png_result):
        state = complete_submission(begin_submission(form_state), png_result)
        state.download_path = "/tmp/imajinasi-ai-1.png"

        updates = render_form_state(state)

        assert visible_panes(updates) == [IMAGE]
        assert updates[IMAGE]["value"].size == (4, 4)
        assert updates[DOWNLOAD]["visible"] is True
        assert updates[DOWNLOAD]["value"] == "/tmp/imajinasi-ai-1.png"
        assert updates[PROMPT_GROUP]["visible"] is True
        assert "1. Main Subject: a red fox in snow" in updates[PROMPT_TEXT]["value"]


class TestGenerateImage:
    """Tests for the generate_image async generator."""

    def test_client_is_required(self):
        """Test that the handler only uses the client create_ui passes in."""
        parameter = inspect.signature(generate_image).parameters["client"]

        assert parameter.default is inspect.Parameter.empty
        assert not hasattr(handlers, "get_client")

    def test_success_flow(self, form_state, png_result, test_config):
        client = Mock()
        client.generate = AsyncMock(return_value=png_result)

        outputs = collect(generate_image(form_state, client=client, settings=test_config))

        assert len(outputs) == 2
        first, final = outputs
        assert first[LOADING]["visible"] is True
        assert first[BUTTON]["interactive"] is False

        state = final[-1]
        assert state.status is FormStatus.SUCCEEDED
        assert state.download_path is not None
        assert state.download_path.startswith(str(test_config.downloads_dir))
        assert final[IMAGE]["visible"] is True
        assert final[BUTTON]["interactive"] is True

    def test_next_cycle_removes_previous_download(self, form_state, png_result, test_config):
        """Test that generated files do not pile up across cycles."""
        client = Mock()
        client.generate = AsyncMock(return_value=png_result)
        state = collect(generate_image(form_state, client=client, settings=test_config))[-1][-1]
        first_path = Path(state.download_path)
        assert first_path.exists()

        client.generate = AsyncMock(side_effect=RefusalError("Generation failed: no"))
        state = collect(generate_image(state, client=client, settings=test_config))[-1][-1]

        assert state.status is FormStatus.FAILED
        assert not first_path.exists()
        assert list(test_config.downloads_dir.iterdir()) == []

    def test_empty_subject_single_render(self, test_config):
        client = Mock()
        client.generate = AsyncMock()

        outputs = collect(generate_image(FormState(), client=client, settings=test_config))

        assert len(outputs) == 1
        client.generate.assert_not_called()
        assert outputs[0][-1].error == SUBJECT_REQUIRED_MESSAGE

    def test_refusal_shows_error(self, form_state, test_config):
        client = Mock()
        client.generate = AsyncMock(
            side_effect=RefusalError("Generation failed: content policy violation")
        )

        outputs = collect(generate_image(form_state, client=client, settings=test_config))
        final = outputs[-1]

        assert final[-1].status is FormStatus.FAILED
        assert visible_panes(final[:-1]) == [ERROR]
        assert "content policy violation" in final[ERROR]["value"]

    def test_undecodable_image_fails(self, form_state, test_config):
        client = Mock()
        client.generate = AsyncMock(
            return_value=GenerationResult.from_bytes(b"not an image", mime_type="image/png")
        )

        outputs = collect(generate_image(form_state, client=client, settings=test_config))
        state = outputs[-1][-1]

        assert state.status is FormStatus.FAILED
        assert "could not be decoded" in state.error

    def test_download_failure_keeps_image(self, form_state, png_result, test_config):
        client = Mock()
        client.generate = AsyncMock(return_value=png_result)

        with patch(
            "imajinasi.ui.handlers.generation.save_for_download",
            side_effect=OSError("disk full"),
        ):
            outputs = collect(generate_image(form_state, client=client, settings=test_config))

        final = outputs[-1]
        assert final[-1].status is FormStatus.SUCCEEDED
        assert final[IMAGE]["visible"] is True
        assert final[DOWNLOAD]["visible"] is False

    def test_in_flight_state_not_resubmitted(self, form_state, test_config):
        client = Mock()
        client.generate = AsyncMock()
        begin_submission(form_state)

        outputs = collect(generate_image(form_state, client=client, settings=test_config))

        assert len(outputs) == 1
        client.generate.assert_not_called()

    @pytest.mark.parametrize("ratio", ["1:1", "9:16"])
    def test_aspect_ratio_passed_through(self, form_state, png_result, test_config, ratio):
        client = Mock()
        client.generate = AsyncMock(return_value=png_result)
        select_aspect_ratio_handler(ratio, form_state)

        collect(generate_image(form_state, client=client, settings=test_config))

        params = client.generate.call_args.args[0]
        assert params.aspect_ratio.value == ratio
