"""Validation and conversion of UI inputs.

Reference images arrive from Gradio as file paths. They are opened with
Pillow to confirm they really are images, and their bytes are base64
encoded for the generation request.
"""

import base64
import logging
import uuid
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from cinexpress.core.errors import ValidationError
from cinexpress.core.options import PromptOptions

from .models import MAX_REFERENCE_IMAGES, UploadedImage

logger = logging.getLogger(__name__)


def detect_image_mime(path: Path) -> str:
    """Return the MIME type of an image file.

    Raises:
        ValidationError: If the file is not an image Pillow can identify
    """
    try:
        with Image.open(path) as img:
            img.verify()
            image_format = img.format
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ValidationError(f"El archivo no es una imagen válida: {path.name}") from e

    mime_type = Image.MIME.get(image_format or "")
    if not mime_type or not mime_type.startswith("image/"):
        raise ValidationError(f"Formato de imagen no soportado: {image_format}")
    return mime_type


def image_file_to_upload(path: str | Path) -> UploadedImage:
    """Read an image file into an UploadedImage with a base64 payload.

    Args:
        path: Path to the uploaded file

    Returns:
        UploadedImage ready to be sent as a reference

    Raises:
        ValidationError: If the file is missing or not an image
    """
    path = Path(path)
    if not path.is_file():
        raise ValidationError(f"Archivo no encontrado: {path.name}")

    mime_type = detect_image_mime(path)
    data = base64.b64encode(path.read_bytes()).decode("ascii")

    return UploadedImage(
        id=uuid.uuid4().hex[:9],
        data=data,
        mime_type=mime_type,
        name=path.name,
    )


def collect_reference_images(
    paths: list[str | Path | None], limit: int = MAX_REFERENCE_IMAGES
) -> list[UploadedImage]:
    """Convert uploaded files, skipping non-images and keeping the first ``limit``.

    Non-image files are dropped with a warning rather than failing the whole
    upload.
    """
    images: list[UploadedImage] = []
    for path in paths:
        if not path:
            continue
        try:
            images.append(image_file_to_upload(path))
        except ValidationError as e:
            logger.warning(f"Skipping reference image: {e}")

    if len(images) > limit:
        logger.info(f"Dropping {len(images) - limit} reference images over the limit of {limit}")
    return images[:limit]


def build_options(
    tone: str,
    structure: str,
    lens: str,
    language: str,
    include_examples: bool,
    add_reasoning: bool,
) -> PromptOptions:
    """Build PromptOptions from raw widget values.

    Raises:
        ValidationError: If any value is outside its closed set
    """
    return PromptOptions(
        tone=tone,
        structure=structure,
        lens=lens,
        language=language,
        include_examples=include_examples,
        add_reasoning=add_reasoning,
    )
