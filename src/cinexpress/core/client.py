"""Gemini client for the prompt optimizer.

Issues exactly one ``generate_content`` call per composed request, with the
response constrained to the :class:`~cinexpress.core.mapper.OptimizedPayload`
JSON schema. There is no retry and no streaming: the call either yields a
text payload or fails with :class:`~cinexpress.core.errors.GenerationError`.

The SDK client is created lazily on the first call, so the application can
start (and render its UI) without an API key configured.
"""

import base64
import binascii
import logging
from typing import Any

from google import genai
from google.genai import types

from .composer import ComposedRequest, ImagePart, TextPart
from .config import CineXpressConfig
from .errors import GenerationError
from .mapper import OptimizedPayload

logger = logging.getLogger(__name__)


class GenerationClient:
    """Thin wrapper around ``google.genai.Client`` for one-shot generation.

    Args:
        api_key: Gemini API key (ignored when ``client`` is given)
        model_name: Model identifier, e.g. ``gemini-2.5-flash``
        client: Pre-built SDK client, mainly for tests
    """

    def __init__(
        self,
        api_key: str | None = None,
        model_name: str = "gemini-2.5-flash",
        client: Any | None = None,
    ):
        self.api_key = api_key
        self.model_name = model_name
        self._client = client

    @classmethod
    def from_config(cls, cfg: CineXpressConfig) -> "GenerationClient":
        return cls(api_key=cfg.gemini_api_key, model_name=cfg.model_name)

    def _get_client(self) -> Any:
        if self._client is None:
            if not self.api_key:
                logger.error("Gemini API key is not configured (set CINEXPRESS_GEMINI_API_KEY)")
                raise GenerationError()
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    @staticmethod
    def build_contents(request: ComposedRequest) -> list[types.Content]:
        """Convert composed parts to SDK content, preserving order.

        Raises:
            GenerationError: If an image payload is not valid base64
        """
        parts: list[types.Part] = []
        for part in request.parts:
            if isinstance(part, TextPart):
                parts.append(types.Part.from_text(text=part.text))
            elif isinstance(part, ImagePart):
                try:
                    raw = base64.b64decode(part.data, validate=True)
                except (binascii.Error, ValueError) as e:
                    logger.error(f"Reference image payload is not valid base64: {e}")
                    raise GenerationError() from e
                parts.append(types.Part.from_bytes(data=raw, mime_type=part.mime_type))
        return [types.Content(role="user", parts=parts)]

    @staticmethod
    def build_config(request: ComposedRequest) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=request.system_instruction,
            response_mime_type="application/json",
            response_schema=OptimizedPayload,
        )

    def generate(self, request: ComposedRequest) -> str:
        """Send one request and return the raw JSON text.

        Args:
            request: Composed system instruction and content parts

        Returns:
            The model's text payload (not yet validated)

        Raises:
            GenerationError: On SDK/network/auth/quota failure or an empty answer
        """
        client = self._get_client()
        contents = self.build_contents(request)
        generation_config = self.build_config(request)

        logger.info(
            f"Requesting generation from {self.model_name} "
            f"({len(request.image_parts)} reference images)"
        )

        try:
            response = client.models.generate_content(
                model=self.model_name,
                contents=contents,
                config=generation_config,
            )
        except Exception as e:
            logger.error(f"Generation request failed: {e}", exc_info=True)
            raise GenerationError() from e

        text = getattr(response, "text", None)
        if not text:
            logger.error("Generation returned no text (blocked or empty candidate)")
            raise GenerationError()

        return text
