"""Reusable UI components for the CineXpress Gradio interface."""

import gradio as gr

from cinexpress.core.config import config
from cinexpress.core.options import Lens, OutputLanguage, PromptOptions, Structure, Tone

from .models import MAX_REFERENCE_IMAGES


class OptionsPanel:
    """Production configuration controls.

    Groups the structure, tone, lens and language selectors plus the two
    flags, initialized from a PromptOptions instance.
    """

    def __init__(self, defaults: PromptOptions | None = None):
        """Create the controls inside the current Gradio context.

        Args:
            defaults: Initial option values (default: PromptOptions())
        """
        defaults = defaults or PromptOptions()

        with gr.Group():
            gr.Markdown("**Configuración de Producción**")

            self.structure = gr.Dropdown(
                label="Formato de Salida",
                choices=[s.value for s in Structure],
                value=defaults.structure.value,
            )
            with gr.Row():
                self.tone = gr.Dropdown(
                    label="Género / Estilo",
                    choices=[t.value for t in Tone],
                    value=defaults.tone.value,
                )
                self.lens = gr.Dropdown(
                    label="Lente / Óptica",
                    choices=[lens.value for lens in Lens],
                    value=defaults.lens.value,
                )
            self.language = gr.Dropdown(
                label="Idioma",
                choices=[lang.value for lang in OutputLanguage],
                value=defaults.language.value,
            )
            with gr.Row():
                self.include_examples = gr.Checkbox(
                    label="Incluir Refs Visuales (Texto)",
                    value=defaults.include_examples,
                )
                self.add_reasoning = gr.Checkbox(
                    label="Nota del Director detallada",
                    value=defaults.add_reasoning,
                )

    def get_input_components(self) -> list:
        """Components in the order expected by ``build_options``."""
        return [
            self.tone,
            self.structure,
            self.lens,
            self.language,
            self.include_examples,
            self.add_reasoning,
        ]


class ReferenceImagesUI:
    """Upload slots for reference images.

    Always MAX_REFERENCE_IMAGES slots so the handler signature stays fixed;
    only the first ``limit`` are shown, the rest always send None.
    """

    def __init__(self, limit: int | None = None):
        limit = min(limit or config.max_reference_images, MAX_REFERENCE_IMAGES)
        gr.Markdown(f"*Añadir Referencia Visual (Max {limit})*")
        with gr.Row():
            self.slots = [
                gr.Image(
                    label=f"Referencia {i + 1}",
                    type="filepath",
                    sources=["upload", "clipboard"],
                    height=160,
                    visible=i < limit,
                )
                for i in range(MAX_REFERENCE_IMAGES)
            ]

    def get_input_components(self) -> list:
        return list(self.slots)
