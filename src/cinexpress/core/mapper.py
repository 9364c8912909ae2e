"""Response mapping for the generation endpoint.

The endpoint is asked to answer with a JSON object constrained by
:class:`OptimizedPayload`. The constraint is enforced remotely, but the
payload is validated again locally before a result is built so a
non-conforming answer never reaches the user as a partial result.

Empty strings are accepted: a well-formed answer with empty fields is a
valid, if poor, take.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .errors import ParseError
from .models import OptimizedResult


class OptimizedPayload(BaseModel):
    """Output schema declared to the model and checked on the way back.

    Field names match the wire format exactly.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    optimizedPrompt: str = Field(  # noqa: N815
        ...,
        description="El prompt visual o guion final.",
    )
    explanation: str = Field(
        ...,
        description="Notas del director sobre la técnica y estilo aplicados.",
    )


def parse_response(payload: str, original_text: str) -> OptimizedResult:
    """Parse the model's JSON answer into an OptimizedResult.

    Values are copied verbatim; nothing is trimmed or reordered.

    Args:
        payload: Raw text returned by the generation endpoint
        original_text: The user's idea, carried into the result

    Returns:
        OptimizedResult built from the payload

    Raises:
        ParseError: If the payload is not a JSON object with both string fields
    """
    if not isinstance(payload, str) or not payload:
        raise ParseError("Empty response payload")

    try:
        parsed = OptimizedPayload.model_validate_json(payload)
    except PydanticValidationError as e:
        raise ParseError(f"Response does not match the output schema: {e}") from e

    return OptimizedResult(
        original_text=original_text,
        optimized_prompt=parsed.optimizedPrompt,
        explanation=parsed.explanation,
    )
