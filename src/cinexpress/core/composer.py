"""Request composition for the prompt optimizer.

Turns the user's idea, reference images and production options into the two
pieces the generation endpoint expects:

1. **System instruction** - the director persona, the rule block of exactly
   one structural mode and the description of the JSON output.
2. **Content parts** - one text part restating the idea and the full option
   set, followed by one inline image part per reference image, in the order
   they were supplied.

Composition is a pure transformation: no I/O and no retained state.

Usage Example
-------------
    from cinexpress.core.composer import compose_request
    from cinexpress.core.options import Lens, PromptOptions

    request = compose_request(
        "A cyberpunk street in the rain",
        [],
        PromptOptions(lens=Lens.ANAMORPHIC),
    )
    print(request.system_instruction)
"""

import logging
from dataclasses import dataclass, field

from .errors import EMPTY_INPUT_MESSAGE, ValidationError
from .models import ImageInput
from .options import LENS_EFFECTS, OutputLanguage, PromptOptions, StructuralMode

logger = logging.getLogger(__name__)

MAX_REFERENCE_IMAGES = 3

DIRECTOR_PREAMBLE = """\
Eres un Director de Cine Galardonado y experto en Ingeniería de Prompts para medios visuales.
Tu objetivo es transformar ideas vagas (y referencias visuales si las hay) en instrucciones \
cinematográficas precisas y evocadoras."""

SHARED_RULES = """\
REGLAS:
- Interpreta la intención artística del usuario basándote en su texto y sus imágenes de referencia.
- Eleva el nivel de sofisticación del lenguaje cinematográfico."""

OUTPUT_DESCRIPTION = """\
SALIDA JSON:
- optimizedPrompt: El resultado final.
- explanation: "Nota del Director". Explica brevemente las decisiones artísticas (iluminación, \
lentes, tono) que tomaste y cómo integraste las referencias visuales."""

DETAILED_REASONING_NOTE = """\
- En la "Nota del Director" detalla tu razonamiento paso a paso: por qué elegiste cada recurso \
de cámara, iluminación y narrativa, y qué alternativas descartaste."""

SCREENPLAY_RULES = """\
FORMATO: ESCENA DE GUION
- Usa formato estricto de guion (Sluglines INT./EXT., Nombres de personajes en mayúsculas, \
Diálogos, Acotaciones).
- Enfócate en "Show, Don't Tell"."""

SYNOPSIS_RULES = """\
FORMATO: SINOPSIS
- Escribe un resumen narrativo completo de la historia estructurado claramente en tres actos \
(Inicio, Desarrollo/Nudo y Desenlace).
- Usa tiempo PRESENTE y tercera persona.
- Céntrate en el arco del protagonista, los obstáculos principales y la resolución.
- No uses lenguaje de marketing (como "prepárate para ver..."), narra la historia objetivamente."""

STORY_RULES = """\
FORMATO: LOGLINE / HISTORIA
- Sigue estructuras narrativas probadas (Inciting Incident, Climax).
- Mantén claro quién es el protagonista, qué quiere y qué se lo impide."""


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class ImagePart:
    """Inline image content; ``data`` is the untouched base64 payload."""

    data: str
    mime_type: str


ContentPart = TextPart | ImagePart


@dataclass(frozen=True)
class ComposedRequest:
    """System instruction plus ordered content parts for one generation call."""

    system_instruction: str
    parts: tuple[ContentPart, ...] = field(default_factory=tuple)

    @property
    def image_parts(self) -> list[ImagePart]:
        return [part for part in self.parts if isinstance(part, ImagePart)]


def _visual_rules(options: PromptOptions, has_images: bool) -> str:
    lines = [
        "FORMATO: PROMPT VISUAL (Para IA de Video/Imagen)",
        "- Debes especificar: Sujeto, Acción, Entorno, Iluminación (ej. Golden Hour, Neon, "
        "Chiaroscuro), Estilo de Cámara (ej. Anamorphic lens, Dolly zoom, 35mm film grain), "
        "Paleta de Colores y Referencias a Directores si aplica.",
        f'- LENTE/ÓPTICA: El usuario ha elegido explícitamente el lente: "{options.lens.value}". '
        f"Su efecto óptico: {LENS_EFFECTS[options.lens]}. Describe cómo afecta esto a la imagen "
        "(profundidad de campo, distorsión, ángulo de visión).",
        "- El prompt debe ser denso, descriptivo y visualmente rico.",
    ]
    if has_images:
        lines.append(
            "- IMÁGENES DE REFERENCIA: Analiza su estilo, iluminación, paleta de colores y "
            "composición. Incorpora estos elementos visuales explícitamente en el prompt generado."
        )
    if options.language is OutputLanguage.ENGLISH:
        lines.append(
            '- Escribe en inglés usando terminología técnica de cine (e.g., "Depth of field", '
            '"Bokeh", "Color Grading").'
        )
    return "\n".join(lines)


def mode_rules(options: PromptOptions, has_images: bool = False) -> str:
    """Return the rule block of the structural mode selected by ``options``."""
    mode = options.mode
    if mode is StructuralMode.VISUAL:
        return _visual_rules(options, has_images)
    if mode is StructuralMode.SCREENPLAY:
        return SCREENPLAY_RULES
    if mode is StructuralMode.SYNOPSIS:
        return SYNOPSIS_RULES
    return STORY_RULES


def build_system_instruction(options: PromptOptions, has_images: bool = False) -> str:
    """Assemble the full system instruction for one request."""
    output = OUTPUT_DESCRIPTION
    if options.add_reasoning:
        output = f"{output}\n{DETAILED_REASONING_NOTE}"

    sections = [
        DIRECTOR_PREAMBLE,
        "CONTEXTO DE SALIDA:\n" + mode_rules(options, has_images),
        SHARED_RULES,
        output,
    ]
    return "\n\n".join(sections)


def build_user_text(text: str, image_count: int, options: PromptOptions) -> str:
    """Restate the idea, the attached images and every option to the model."""
    lines = [f'Idea del Usuario: "{text}"', ""]

    if image_count > 0:
        lines.append(
            f"[NOTA: El usuario ha adjuntado {image_count} imágenes de referencia visual. "
            "Úsalas para definir la estética, iluminación y composición del resultado.]"
        )
        lines.append("")

    lines.extend(
        [
            "Configuración de Producción:",
            f"- Estilo/Género: {options.tone.value}",
            f"- Formato de Salida: {options.structure.value}",
            f"- Lente / Óptica: {options.lens.value}",
            f"- Idioma del Prompt: {options.language.value}",
            "- Incluir Referencias Visuales (Few-Shot): "
            f"{'Sí' if options.include_examples else 'No'}",
            "",
            "¡Acción! Genera el contenido cinematográfico optimizado.",
        ]
    )
    return "\n".join(lines)


def compose_request(
    text: str,
    images: list[ImageInput] | tuple[ImageInput, ...],
    options: PromptOptions,
    max_images: int = MAX_REFERENCE_IMAGES,
) -> ComposedRequest:
    """Compose the system instruction and content parts for one generation.

    Args:
        text: Free-text idea (may be empty when images are supplied)
        images: Reference images, at most ``max_images``
        options: Production options
        max_images: Per-request image limit (never above MAX_REFERENCE_IMAGES)

    Returns:
        ComposedRequest with the text part first, then image parts in input order

    Raises:
        ValidationError: If there is neither text nor an image, if more than
            ``max_images`` images are supplied, or if an image is not an ``image/*`` type
    """
    text = text or ""
    images = list(images or [])

    if not text.strip() and not images:
        raise ValidationError(EMPTY_INPUT_MESSAGE)

    max_images = min(max_images, MAX_REFERENCE_IMAGES)
    if len(images) > max_images:
        raise ValidationError(
            f"Máximo {max_images} imágenes de referencia, se recibieron {len(images)}"
        )

    for image in images:
        image.validate()

    system_instruction = build_system_instruction(options, has_images=bool(images))
    parts: list[ContentPart] = [TextPart(build_user_text(text, len(images), options))]
    parts.extend(ImagePart(data=image.data, mime_type=image.mime_type) for image in images)

    logger.debug(
        f"Composed request: mode={options.mode.value}, images={len(images)}, "
        f"instruction_chars={len(system_instruction)}"
    )
    return ComposedRequest(system_instruction=system_instruction, parts=tuple(parts))
