"""Orchestration boundary for one prompt optimization.

``optimize_prompt`` is the single call site that runs
composer -> client -> mapper. Validation problems reach the caller as
:class:`ValidationError` before anything is sent; every other failure is
logged with its cause and re-raised as the generic :class:`GenerationError`.
"""

import logging
from typing import Protocol

from .composer import MAX_REFERENCE_IMAGES, ComposedRequest, compose_request
from .errors import GenerationError, ParseError, ValidationError
from .mapper import parse_response
from .models import ImageInput, OptimizedResult
from .options import PromptOptions

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Anything that turns a composed request into the model's raw text."""

    def generate(self, request: ComposedRequest) -> str: ...


def optimize_prompt(
    text: str,
    images: list[ImageInput],
    options: PromptOptions,
    client: TextGenerator,
    max_images: int = MAX_REFERENCE_IMAGES,
) -> OptimizedResult:
    """Generate an optimized cinematic prompt for the user's idea.

    Args:
        text: Free-text idea
        images: Reference images
        options: Production options
        client: Generation client issuing the single external call
        max_images: Per-request reference image limit

    Returns:
        The parsed OptimizedResult

    Raises:
        ValidationError: Empty input or invalid images (no call is made)
        GenerationError: Any failure of the call or of the response
    """
    request = compose_request(text, images, options, max_images)

    try:
        payload = client.generate(request)
        result = parse_response(payload, text)
    except ValidationError:
        raise
    except GenerationError:
        # Cause already logged by the client
        raise
    except ParseError as e:
        logger.error(f"Production error, unusable response: {e}", exc_info=True)
        raise GenerationError() from e
    except Exception as e:
        logger.error(f"Production error: {e}", exc_info=True)
        raise GenerationError() from e

    logger.info(
        f"Optimized prompt generated ({options.structure.name}, "
        f"{len(result.optimized_prompt)} chars)"
    )
    return result
