"""Pydantic request and response models for the CineXpress API.

These models define the JSON schema for every API endpoint. FastAPI uses
them for automatic request validation, serialisation, and OpenAPI
documentation generation. Field aliases follow the camelCase wire format of
the persisted history.

Models
------
ImagePayload
    One reference image (base64 data and MIME type).
OptionsPayload
    Production options, given as enum labels or member names.
OptimizeRequest
    Payload for ``POST /api/optimize``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from cinexpress.core.models import ImageInput
from cinexpress.core.options import Lens, OutputLanguage, PromptOptions, Structure, Tone


class ImagePayload(BaseModel):
    """A reference image attached to an optimize request.

    Attributes:
        data: Base64-encoded image bytes, without a ``data:`` URL prefix.
        mime_type: MIME type of the image (must start with ``image/``).
    """

    model_config = ConfigDict(populate_by_name=True)

    data: str = Field(
        ...,
        description="Base64-encoded image bytes.",
    )
    mime_type: str = Field(
        ...,
        alias="mimeType",
        description="MIME type, e.g. 'image/png'.",
    )

    def to_input(self) -> ImageInput:
        return ImageInput(data=self.data, mime_type=self.mime_type)


class OptionsPayload(BaseModel):
    """Production options for an optimize request.

    Enum fields accept either the label (as listed by ``GET /api/config``)
    or the member name (e.g. ``"ANAMORPHIC"``). Values are checked against
    the closed sets when converted with :meth:`to_options`.
    """

    model_config = ConfigDict(populate_by_name=True)

    tone: str = Field(default=Tone.CINEMATIC.value)
    structure: str = Field(default=Structure.VISUAL_PROMPT.value)
    lens: str = Field(default=Lens.STANDARD.value)
    language: str = Field(default=OutputLanguage.ENGLISH.value)
    include_examples: bool = Field(default=False, alias="includeExamples")
    add_reasoning: bool = Field(default=False, alias="addReasoning")

    def to_options(self) -> PromptOptions:
        """Convert to PromptOptions.

        Raises:
            ValidationError: If an enum value is outside its closed set
        """
        return PromptOptions(
            tone=self.tone,
            structure=self.structure,
            lens=self.lens,
            language=self.language,
            include_examples=self.include_examples,
            add_reasoning=self.add_reasoning,
        )


class OptimizeRequest(BaseModel):
    """Request body for the ``POST /api/optimize`` endpoint.

    Attributes:
        text: The user's idea (may be empty when images are attached).
        images: Up to three reference images, in the order they should be
            shown to the model.
        options: Production options.
    """

    text: str = Field(
        default="",
        description="Free-text film or video idea.",
    )
    images: list[ImagePayload] = Field(
        default_factory=list,
        max_length=3,
        description="Reference images, at most max_reference_images (never above three).",
    )
    options: OptionsPayload = Field(
        default_factory=OptionsPayload,
        description="Production options.",
    )
