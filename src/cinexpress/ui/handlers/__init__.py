"""UI event handlers organized by feature area.

- generation: Prompt generation and the error banner
- history: Stored takes and input reset
"""

from .generation import dismiss_error_handler, generate_prompt, render_result_outputs
from .history import (
    clear_history_handler,
    clear_input_handler,
    load_history_on_start,
    select_history_item,
)

__all__ = [
    # Generation handlers
    "dismiss_error_handler",
    "generate_prompt",
    "render_result_outputs",
    # History handlers
    "clear_history_handler",
    "clear_input_handler",
    "load_history_on_start",
    "select_history_item",
]
