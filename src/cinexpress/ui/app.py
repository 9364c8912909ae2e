"""Gradio UI for CineXpress."""

import logging

import gradio as gr

from cinexpress.core.config import config

from .components import OptionsPanel, ReferenceImagesUI
from .formatting import format_director_note
from .handlers import (
    clear_history_handler,
    clear_input_handler,
    dismiss_error_handler,
    generate_prompt,
    load_history_on_start,
    select_history_item,
)
from .models import UIState

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
.error-banner {
    border-left: 4px solid #ef4444;
    padding: 8px 12px;
}
.director-note blockquote {
    font-style: italic;
}
"""


def create_ui() -> gr.Blocks:
    """Create the Gradio UI.

    Returns:
        Gradio Blocks app
    """
    app = gr.Blocks(title="CineXpress", css=CUSTOM_CSS)

    with app:
        # Session state - one instance per user
        ui_state = gr.State(UIState())

        gr.Markdown(
            """
            # CINE X PRESS
            ### De idea vaga a prompt cinematográfico
            """
        )

        with gr.Row():
            with gr.Column(scale=7):
                idea_input = gr.Textbox(
                    label="Logline / Idea Inicial",
                    placeholder=(
                        "Ej: Una escena cyberpunk en Tokio bajo lluvia neón, estilo Blade Runner. "
                        "Quiero generar un video con esta atmósfera."
                    ),
                    lines=5,
                )
                clear_input_btn = gr.Button("Limpiar", size="sm")

                images_ui = ReferenceImagesUI()
                options_panel = OptionsPanel()

                generate_btn = gr.Button("🎬 GENERAR ESCENA", variant="primary", size="lg")

                with gr.Row():
                    error_output = gr.Markdown(
                        value="", visible=False, elem_classes=["error-banner"]
                    )
                dismiss_error_btn = gr.Button("Cerrar aviso", size="sm")

            with gr.Column(scale=5):
                director_note = gr.Markdown(
                    value=format_director_note(None), elem_classes=["director-note"]
                )
                prompt_output = gr.Textbox(
                    label="Guion / Prompt",
                    lines=12,
                    interactive=False,
                    show_copy_button=True,
                )

                gr.Markdown("### Archivo de Producción")
                history_dropdown = gr.Dropdown(
                    label="Tomas anteriores",
                    choices=[],
                    value=None,
                    interactive=True,
                )
                clear_history_btn = gr.Button("Eliminar Tomas", size="sm", variant="stop")

        # Fill history when the session starts
        app.load(
            fn=load_history_on_start,
            inputs=[ui_state],
            outputs=[history_dropdown, ui_state],
        )

        # Generation; the button stays disabled while a request is in flight
        generate_btn.click(
            fn=lambda: gr.update(interactive=False, value="EN PROCESO..."),
            outputs=[generate_btn],
        ).then(
            fn=generate_prompt,
            inputs=[
                idea_input,
                *images_ui.get_input_components(),
                *options_panel.get_input_components(),
                ui_state,
            ],
            outputs=[prompt_output, director_note, error_output, history_dropdown, ui_state],
        ).then(
            fn=lambda: gr.update(interactive=True, value="🎬 GENERAR ESCENA"),
            outputs=[generate_btn],
        )

        dismiss_error_btn.click(
            fn=dismiss_error_handler,
            inputs=[ui_state],
            outputs=[error_output, ui_state],
        )

        clear_input_btn.click(
            fn=clear_input_handler,
            inputs=[ui_state],
            outputs=[idea_input, *images_ui.get_input_components(), ui_state],
        )

        history_dropdown.select(
            fn=select_history_item,
            inputs=[history_dropdown, ui_state],
            outputs=[idea_input, prompt_output, director_note, ui_state],
        )

        clear_history_btn.click(
            fn=clear_history_handler,
            inputs=[ui_state],
            outputs=[history_dropdown, error_output, ui_state],
        )

    return app


def main():
    """Launch the Gradio UI on its own (without the REST API)."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting CineXpress UI...")
    logger.info(f"Configuration: {config.model_dump(exclude={'gemini_api_key'})}")

    app = create_ui()

    logger.info(f"Launching Gradio UI on {config.server_host}:{config.server_port}")

    app.queue().launch(
        server_name=config.server_host,
        server_port=config.server_port,
        show_error=True,
        inbrowser=False,
    )


if __name__ == "__main__":
    main()
