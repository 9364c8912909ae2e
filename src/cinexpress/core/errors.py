"""Error taxonomy shared by the core, the UI and the REST API.

Every failure of a generation attempt ends up as one of these types at the
orchestration boundary (:func:`cinexpress.core.optimizer.optimize_prompt`).
"""

GENERATION_ERROR_MESSAGE = "Error en el set. Por favor intenta otra toma."
EMPTY_INPUT_MESSAGE = "El guion está vacío. Escribe una idea o sube una imagen de referencia."
HISTORY_CLEAR_ERROR_MESSAGE = "No se pudo borrar el archivo de producción."


class CineXpressError(Exception):
    """Base class for all CineXpress errors."""


class ValidationError(CineXpressError):
    """User-friendly validation error.

    Raised before any external call is attempted. The message is intended
    to be displayed directly to the user.
    """


class GenerationError(CineXpressError):
    """Failure of the external generation call or of its response.

    The message is always the generic production error; the underlying
    cause is kept as ``__cause__`` for logging only.
    """

    def __init__(self, message: str = GENERATION_ERROR_MESSAGE):
        super().__init__(message)


class ParseError(CineXpressError):
    """The model returned text that does not match the declared schema."""


class StorageError(CineXpressError):
    """Persisted history could not be read. Never fatal."""
