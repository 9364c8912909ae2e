"""State management utilities for the CineXpress UI.

Every function here takes a UIState and returns the updated state. The
generation client and the history store are the only collaborators with
side effects, and both are injected into the state at initialization.
"""

import logging

from cinexpress.core.client import GenerationClient
from cinexpress.core.config import config
from cinexpress.core.errors import HISTORY_CLEAR_ERROR_MESSAGE, StorageError
from cinexpress.core.history import JsonHistoryStore
from cinexpress.core.models import HistoryItem, OptimizedResult
from cinexpress.core.options import PromptOptions

from .models import MAX_REFERENCE_IMAGES, UIState, UploadedImage

logger = logging.getLogger(__name__)


def initialize_ui_state(
    state: UIState | None = None,
    client=None,
    history_store=None,
) -> UIState:
    """Initialize or ensure UI state is ready.

    Creates the generation client and the history store from the global
    configuration when they are not supplied, then loads the stored history.

    Args:
        state: Existing UIState or None
        client: GenerationClient to use (default: built from config)
        history_store: HistoryStore to use (default: JSON file from config)

    Returns:
        Initialized UIState instance
    """
    if state is None:
        logger.info("Creating new UIState")
        state = UIState()

    if client is not None:
        state.client = client
    if history_store is not None:
        state.history_store = history_store

    if state.is_initialized():
        logger.debug("UIState already initialized")
        return state

    logger.info("Initializing UIState components...")

    if state.client is None:
        logger.info(f"Initializing GenerationClient: {config.model_name}")
        state.client = GenerationClient.from_config(config)

    if state.history_store is None:
        logger.info(f"Initializing JsonHistoryStore at {config.history_path}")
        state.history_store = JsonHistoryStore(config.history_path, config.history_limit)

    state.history = state.history_store.load()
    logger.info(f"UIState initialization complete: {state}")
    return state


def update_options(state: UIState, options: PromptOptions) -> UIState:
    state.options = options
    return state


def set_reference_images(state: UIState, images: list[UploadedImage]) -> UIState:
    """Replace the attached images (the UI upload slots are the source of truth)."""
    state.images = list(images)[:MAX_REFERENCE_IMAGES]
    return state


def clear_input(state: UIState) -> UIState:
    """Clear the idea text and the attached images."""
    state.input_text = ""
    state.images = []
    return state


def dismiss_error(state: UIState) -> UIState:
    state.error = None
    return state


def record_result(state: UIState, result: OptimizedResult) -> UIState:
    """Show ``result`` and store it at the head of the history.

    A history that cannot be written is logged and left as it was; the
    result stays on display.
    """
    state.result = result
    state.error = None

    if state.history_store is None:
        logger.warning("Cannot store result: history store not initialized")
        return state

    try:
        item, state.history = state.history_store.add(result)
    except (StorageError, OSError) as e:
        logger.warning(f"Result not stored in history: {e}")
        return state

    logger.info(f"Stored history item {item.id} ({len(state.history)} in history)")
    return state


def load_history_item(state: UIState, item_id: str) -> UIState:
    """Bring a stored result back to the result view and the idea box."""
    item: HistoryItem | None = next((h for h in state.history if h.id == item_id), None)
    if item is None:
        logger.warning(f"History item not found: {item_id}")
        return state

    state.result = item.result
    state.input_text = item.original_text
    return state


def clear_history(state: UIState) -> UIState:
    """Delete every stored result."""
    state.error = None
    if state.history_store is not None:
        try:
            state.history_store.clear()
        except (StorageError, OSError) as e:
            logger.warning(f"Cannot clear history: {e}")
            state.error = HISTORY_CLEAR_ERROR_MESSAGE
            return state
    state.history = []
    return state
