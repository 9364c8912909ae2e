"""Data models for generation inputs, results and history entries."""

from dataclasses import dataclass
from typing import Any

from .errors import ValidationError


@dataclass(frozen=True)
class ImageInput:
    """A reference image as sent to the model.

    Attributes:
        data: Base64-encoded image bytes (no ``data:`` URL prefix)
        mime_type: MIME type, must start with ``image/``
    """

    data: str
    mime_type: str

    def validate(self) -> None:
        """Check the MIME type and payload.

        Raises:
            ValidationError: If the image cannot be sent to the model
        """
        if not self.mime_type or not self.mime_type.startswith("image/"):
            raise ValidationError(f"Tipo de archivo no soportado: {self.mime_type or '(vacío)'}")
        if not self.data:
            raise ValidationError("La imagen de referencia está vacía")


@dataclass(frozen=True)
class OptimizedResult:
    """Outcome of one successful generation call."""

    original_text: str
    optimized_prompt: str
    explanation: str  # Director's Note

    def to_dict(self) -> dict[str, Any]:
        return {
            "originalText": self.original_text,
            "optimizedPrompt": self.optimized_prompt,
            "explanation": self.explanation,
        }


@dataclass(frozen=True)
class HistoryItem(OptimizedResult):
    """An OptimizedResult stamped with an id and epoch-millisecond timestamp."""

    id: str = ""
    timestamp: int = 0

    @property
    def result(self) -> OptimizedResult:
        return OptimizedResult(
            original_text=self.original_text,
            optimized_prompt=self.optimized_prompt,
            explanation=self.explanation,
        )

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["id"] = self.id
        data["timestamp"] = self.timestamp
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "HistoryItem":
        """Build an item from its persisted form.

        Raises:
            ValueError: If the record does not have the persisted layout
        """
        if not isinstance(data, dict):
            raise ValueError(f"History entry must be an object, got {type(data).__name__}")

        for key in ("originalText", "optimizedPrompt", "explanation", "id"):
            if not isinstance(data.get(key), str):
                raise ValueError(f"History entry field {key!r} must be a string")

        timestamp = data.get("timestamp")
        if isinstance(timestamp, bool) or not isinstance(timestamp, int):
            raise ValueError("History entry field 'timestamp' must be an integer")

        return cls(
            original_text=data["originalText"],
            optimized_prompt=data["optimizedPrompt"],
            explanation=data["explanation"],
            id=data["id"],
            timestamp=timestamp,
        )
