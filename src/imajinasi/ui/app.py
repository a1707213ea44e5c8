"""Gradio UI for Imajinasi AI."""

import logging
from functools import partial

import gradio as gr

from imajinasi.core.client import ImageGenerationClient
from imajinasi.core.config import ImajinasiConfig, config

from .components import ParameterInputUI, ResultPanelUI, create_aspect_ratio_selector
from .handlers import (
    COPY_PROMPT_JS,
    apply_suggestion_handler,
    generate_image,
    notify_prompt_copied,
    select_aspect_ratio_handler,
    update_field_handler,
)
from .handlers.generation import GENERATE_LABEL
from .models import FIELD_SPECS
from .state import initialize_form_state

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

CUSTOM_CSS = """
.suggestion-chip {
    flex-grow: 0 !important;
    font-size: 0.75rem !important;
}
#result-error {
    color: #f87171;
}
"""


def bind_parameter_input(parameter: ParameterInputUI, ui_state: gr.State) -> None:
    """Wire a parameter input's textbox and chips to the form state."""
    parameter.textbox.change(
        fn=partial(update_field_handler, parameter.name),
        inputs=[parameter.textbox, ui_state],
        outputs=[ui_state],
    )

    for suggestion, chip in parameter.chips:
        chip.click(
            fn=partial(apply_suggestion_handler, parameter.name, suggestion),
            inputs=[ui_state],
            outputs=[parameter.textbox, ui_state],
        )


def create_ui(
    settings: ImajinasiConfig | None = None,
    client: ImageGenerationClient | None = None,
) -> tuple[gr.Blocks, str]:
    """Create the Gradio UI.

    Args:
        settings: Configuration (default: global config)
        client: Image client (default: built from settings)

    Returns:
        Tuple of (Gradio Blocks app, custom CSS string)
    """
    settings = settings or config
    client = client or ImageGenerationClient.from_config(settings)

    app = gr.Blocks(title="Imajinasi AI")

    with app:
        # Session state - one instance per user
        ui_state = gr.State(initialize_form_state(aspect_ratio=settings.default_aspect_ratio))

        gr.Markdown(
            """
            # Imajinasi AI
            Create stunning images by filling in the structured details below.
            Your ideas become a ready-to-use prompt and are visualized instantly.
            """
        )

        with gr.Row():
            # Input panel
            with gr.Column(scale=5):
                gr.Markdown("### Image Parameters")

                subject = ParameterInputUI(FIELD_SPECS["subject"])
                style = ParameterInputUI(FIELD_SPECS["style"])
                with gr.Row():
                    lighting = ParameterInputUI(FIELD_SPECS["lighting"])
                    colors = ParameterInputUI(FIELD_SPECS["colors"])
                details = ParameterInputUI(FIELD_SPECS["details"])

                aspect_ratio = create_aspect_ratio_selector(settings.default_aspect_ratio)

                generate_button = gr.Button(GENERATE_LABEL, variant="primary", size="lg")

            # Output panel
            with gr.Column(scale=7):
                result_panel = ResultPanelUI()

        for parameter in (subject, style, lighting, colors, details):
            bind_parameter_input(parameter, ui_state)

        aspect_ratio.change(
            fn=select_aspect_ratio_handler,
            inputs=[aspect_ratio, ui_state],
            outputs=[ui_state],
        )

        generate_button.click(
            fn=partial(generate_image, client=client, settings=settings),
            inputs=[ui_state],
            outputs=[generate_button, *result_panel.get_output_components(), ui_state],
            concurrency_limit=None,
        )

        result_panel.copy_button.click(
            fn=notify_prompt_copied,
            inputs=[result_panel.prompt_text],
            outputs=None,
            js=COPY_PROMPT_JS,
        )

    return app, CUSTOM_CSS


def main():
    """Main entry point for the application."""
    logger.info("Starting Imajinasi AI...")
    logger.info(f"Configuration: {config.model_dump(exclude={'api_key'})}")

    if not config.has_api_key:
        logger.warning(
            "No API key configured (IMAJINASI_API_KEY / GEMINI_API_KEY / API_KEY); "
            "generation requests will fail until one is set"
        )

    app, custom_css = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")

    app.launch(
        server_name=config.gradio_server_name,
        server_port=config.gradio_server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
        css=custom_css,
        allowed_paths=[str(config.downloads_dir)],
    )


if __name__ == "__main__":
    main()
