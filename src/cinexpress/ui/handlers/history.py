"""History list and input-reset handlers."""

import logging

import gradio as gr

from ..formatting import format_director_note, format_error, format_history_choices
from ..models import UIState
from ..state import clear_history, clear_input, initialize_ui_state, load_history_item

logger = logging.getLogger(__name__)


def load_history_on_start(state: UIState) -> tuple[dict, UIState]:
    """Initialize the session and fill the history list.

    Returns:
        Tuple of (history_update, updated_state)
    """
    state = initialize_ui_state(state)
    return gr.update(choices=format_history_choices(state.history), value=None), state


def select_history_item(item_id: str | None, state: UIState) -> tuple[str, str, str, UIState]:
    """Load a stored take back into the idea box and the result view.

    Returns:
        Tuple of (idea_text, prompt_text, director_note_md, updated_state)
    """
    if item_id:
        state = load_history_item(state, item_id)

    prompt_text = state.result.optimized_prompt if state.result else ""
    return state.input_text, prompt_text, format_director_note(state.result), state


def clear_history_handler(state: UIState) -> tuple[dict, dict, UIState]:
    """Delete all stored takes.

    Returns:
        Tuple of (history_update, error_update, updated_state)
    """
    state = clear_history(state)
    if state.error:
        return (
            gr.update(choices=format_history_choices(state.history), value=None),
            gr.update(value=format_error(state.error), visible=True),
            state,
        )

    logger.info("History cleared from the UI")
    return gr.update(choices=[], value=None), gr.update(value="", visible=False), state


def clear_input_handler(state: UIState) -> tuple[str, None, None, None, UIState]:
    """Reset the idea box and the three image slots.

    Returns:
        Tuple of (idea_text, image_1, image_2, image_3, updated_state)
    """
    state = clear_input(state)
    return "", None, None, None, state
