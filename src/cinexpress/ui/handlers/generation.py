"""Prompt generation handlers."""

import logging

import gradio as gr

from cinexpress.core.config import config
from cinexpress.core.errors import (
    EMPTY_INPUT_MESSAGE,
    GENERATION_ERROR_MESSAGE,
    GenerationError,
    ValidationError,
)
from cinexpress.core.optimizer import optimize_prompt

from ..formatting import format_director_note, format_error, format_history_choices
from ..models import UIState
from ..state import (
    dismiss_error,
    initialize_ui_state,
    record_result,
    set_reference_images,
    update_options,
)
from ..validation import build_options, collect_reference_images

logger = logging.getLogger(__name__)


def render_result_outputs(state: UIState) -> tuple[str, str, dict, dict, UIState]:
    """Render the result view, the error banner and the history list from state.

    Returns:
        Tuple of (prompt_text, director_note_md, error_update, history_update, state)
    """
    prompt_text = state.result.optimized_prompt if state.result else ""
    return (
        prompt_text,
        format_director_note(state.result),
        gr.update(value=format_error(state.error), visible=bool(state.error)),
        gr.update(choices=format_history_choices(state.history), value=None),
        state,
    )


def generate_prompt(
    text: str,
    image_1: str | None,
    image_2: str | None,
    image_3: str | None,
    tone: str,
    structure: str,
    lens: str,
    language: str,
    include_examples: bool,
    add_reasoning: bool,
    state: UIState,
) -> tuple[str, str, dict, dict, UIState]:
    """Generate an optimized prompt from the UI inputs.

    Args:
        text: The user's idea
        image_1: First reference image path (optional)
        image_2: Second reference image path (optional)
        image_3: Third reference image path (optional)
        tone: Tone label
        structure: Structure label
        lens: Lens label
        language: Output language label
        include_examples: Include visual-reference examples flag
        add_reasoning: Detailed Director's Note flag
        state: UI state

    Returns:
        Tuple of (prompt_text, director_note_md, error_update, history_update, updated_state)
    """
    try:
        state = initialize_ui_state(state)
        state.input_text = text or ""
        state.error = None

        state = update_options(
            state,
            build_options(tone, structure, lens, language, include_examples, add_reasoning),
        )
        state = set_reference_images(
            state,
            collect_reference_images(
                [image_1, image_2, image_3], limit=config.max_reference_images
            ),
        )
        if not state.has_input():
            raise ValidationError(EMPTY_INPUT_MESSAGE)

        # The previous take stays on screen until the request is valid
        state.result = None
        result = optimize_prompt(
            state.input_text,
            state.image_inputs(),
            state.options,
            state.client,
            max_images=config.max_reference_images,
        )
        state = record_result(state, result)

    except ValidationError as e:
        logger.warning(f"Validation error: {e}")
        state.error = str(e)

    except GenerationError as e:
        # Cause already logged at the orchestration boundary
        state.error = str(e)

    except Exception as e:
        logger.error(f"Unexpected error generating prompt: {e}", exc_info=True)
        state.error = GENERATION_ERROR_MESSAGE

    return render_result_outputs(state)


def dismiss_error_handler(state: UIState) -> tuple[dict, UIState]:
    """Hide the error banner.

    Returns:
        Tuple of (error_update, updated_state)
    """
    state = dismiss_error(state)
    return gr.update(value="", visible=False), state
