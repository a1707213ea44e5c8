"""Reusable UI components for the Imajinasi Gradio interface."""

import gradio as gr

from imajinasi.core.models import AspectRatio

from .models import (
    ASPECT_RATIO_LABEL,
    EMPTY_STATE_MESSAGE,
    LOADING_HINT,
    LOADING_MESSAGE,
    FieldSpec,
)


class ParameterInputUI:
    """Labelled input bound to one ImageParameters text field.

    Each input has:
    - Textbox (single line or multi-line)
    - Optional row of suggestion chips that overwrite the textbox value
    - Optional helper text shown under the label
    """

    def __init__(self, spec: FieldSpec, value: str = ""):
        """Initialize a parameter input.

        Args:
            spec: Field label, placeholder and suggestions
            value: Initial textbox value
        """
        self.spec = spec
        self.name = spec.name

        with gr.Column():
            self.textbox = gr.Textbox(
                label=spec.label,
                value=value,
                placeholder=spec.placeholder or None,
                lines=3 if spec.multiline else 1,
                max_lines=6 if spec.multiline else 1,
                info=spec.helper_text or None,
                elem_id=f"field-{spec.name}",
            )

            self.chips: list[tuple[str, gr.Button]] = []
            if spec.suggestions:
                with gr.Row():
                    for suggestion in spec.suggestions:
                        chip = gr.Button(
                            suggestion,
                            size="sm",
                            variant="secondary",
                            min_width=0,
                            elem_classes=["suggestion-chip"],
                        )
                        self.chips.append((suggestion, chip))


def create_aspect_ratio_selector(value: AspectRatio = AspectRatio.SQUARE) -> gr.Radio:
    """Create the aspect ratio radio group."""
    return gr.Radio(
        label=ASPECT_RATIO_LABEL,
        choices=AspectRatio.choices(),
        value=value.value,
        elem_id="aspect-ratio",
    )


class ResultPanelUI:
    """Output pane: exactly one of spinner, error, image or hint is visible.

    Below it, the ready-to-use prompt box with its copy button appears after
    a successful generation.
    """

    def __init__(self):
        with gr.Column():
            with gr.Row():
                gr.Markdown("### Generation Result")
                self.download_button = gr.DownloadButton(
                    "Download Image",
                    size="sm",
                    variant="secondary",
                    visible=False,
                )

            self.loading = gr.Markdown(
                value=f"**{LOADING_MESSAGE}**\n\n*{LOADING_HINT}*",
                visible=False,
                elem_id="result-loading",
            )
            self.error = gr.Markdown(value="", visible=False, elem_id="result-error")
            self.image = gr.Image(
                label="Result",
                type="pil",
                interactive=False,
                visible=False,
                height=512,
            )
            self.empty_hint = gr.Markdown(value=f"*{EMPTY_STATE_MESSAGE}*", visible=True)

            with gr.Group(visible=False) as self.prompt_group:
                self.prompt_text = gr.Textbox(
                    label="Ready-to-use Prompt (English)",
                    interactive=False,
                    lines=7,
                    elem_id="display-prompt",
                )
                self.copy_button = gr.Button("Copy Prompt", size="sm", variant="secondary")

    def get_output_components(self) -> list[gr.components.Component]:
        """Return components updated by render_form_state, in order.

        Returns:
            [loading, error, image, empty_hint, download_button, prompt_group, prompt_text]
        """
        return [
            self.loading,
            self.error,
            self.image,
            self.empty_hint,
            self.download_button,
            self.prompt_group,
            self.prompt_text,
        ]
