"""Data models for CineXpress UI state."""

from dataclasses import dataclass, field
from typing import Any

from cinexpress.core.models import HistoryItem, ImageInput, OptimizedResult
from cinexpress.core.options import PromptOptions


@dataclass
class UploadedImage:
    """A reference image attached in the UI.

    Carries the payload sent to the model plus what the UI needs to list
    and remove it.
    """

    id: str
    data: str
    mime_type: str
    name: str = ""

    def to_input(self) -> ImageInput:
        return ImageInput(data=self.data, mime_type=self.mime_type)


@dataclass
class UIState:
    """Session state for the Gradio UI.

    Each user session gets its own UIState. Handlers receive the state,
    return an updated one, and never touch module-level globals; the
    generation client and the history store are collaborators held here.

    Attributes
    ----------
    input_text : str
        Current idea typed by the user
    images : list[UploadedImage]
        Attached reference images, in upload order (at most MAX_REFERENCE_IMAGES)
    options : PromptOptions
        Current production options
    result : OptimizedResult | None
        Result currently on display
    history : list[HistoryItem]
        In-memory copy of the stored history, newest first
    error : str | None
        User-facing error message, None when dismissed
    client : Any | None
        GenerationClient (or compatible) instance
    history_store : Any | None
        HistoryStore implementation
    """

    input_text: str = ""
    images: list[UploadedImage] = field(default_factory=list)
    options: PromptOptions = field(default_factory=PromptOptions)
    result: OptimizedResult | None = None
    history: list[HistoryItem] = field(default_factory=list)
    error: str | None = None

    # Collaborators
    client: Any | None = None  # GenerationClient instance
    history_store: Any | None = None  # HistoryStore instance

    def is_initialized(self) -> bool:
        """Check if the collaborators are in place.

        Returns:
            True if both the generation client and the history store are set
        """
        return self.client is not None and self.history_store is not None

    def has_input(self) -> bool:
        """Whether there is anything to send (idea text or an image)."""
        return bool(self.input_text.strip()) or bool(self.images)

    def image_inputs(self) -> list[ImageInput]:
        return [image.to_input() for image in self.images]

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"UIState(initialized={self.is_initialized()}, "
            f"images={len(self.images)}, "
            f"history={len(self.history)}, "
            f"structure={self.options.structure.name})"
        )


# UI Constants
MAX_REFERENCE_IMAGES = 3
