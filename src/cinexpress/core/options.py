"""Production options offered to the user.

All option sets are closed enumerations. Their values are the labels shown
in the UI and restated to the model, so they are kept in the product's
working language.

Structural modes
----------------
The seven output structures collapse onto four instruction modes. Each mode
has its own rule block in the system instruction (see
:mod:`cinexpress.core.composer`):

=====================  ==========
Structure              Mode
=====================  ==========
VISUAL_PROMPT          visual
SCREENPLAY_SCENE       screenplay
SYNOPSIS               synopsis
LOGLINE                story
CHARACTER_BIO          story
STORY_BEATS            story
DIRECTORS_TREATMENT    story
=====================  ==========
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from .errors import ValidationError


class Tone(str, Enum):
    DRAMATIC = "Dramático & Intenso"
    CINEMATIC = "Cinematográfico / Blockbuster"
    NOIR = "Film Noir / Misterio"
    SCI_FI = "Ciencia Ficción / Cyberpunk"
    WHIMSICAL = "Fantasía / Estilo Wes Anderson"
    HORROR = "Terror / Psicológico"
    DOCUMENTARY = "Documentary / Realistic"
    VINTAGE = "Vintage / 35mm Retro"


class Structure(str, Enum):
    VISUAL_PROMPT = "Prompt Visual (Para IA de Video: Veo, Sora, Midjourney)"
    SCREENPLAY_SCENE = "Escena de Guion (Formato Estándar)"
    SYNOPSIS = "Sinopsis (Resumen Narrativo)"
    LOGLINE = "Logline & Pitch de Venta"
    CHARACTER_BIO = "Perfil de Personaje & Casting"
    STORY_BEATS = "Estructura Narrativa (Beat Sheet)"
    DIRECTORS_TREATMENT = "Tratamiento de Director (Visión Artística)"


class Lens(str, Enum):
    ULTRA_WIDE = "Gran Angular Extremo (14mm)"
    WIDE = "Gran Angular (24mm)"
    STANDARD = "Estándar (50mm)"
    PORTRAIT = "Retrato (85mm)"
    TELEPHOTO = "Teleobjetivo (200mm)"
    ANAMORPHIC = "Anamórfico (2x Squeeze)"


class OutputLanguage(str, Enum):
    ENGLISH = "Inglés (Recomendado para Generadores de Video)"
    SPANISH = "Español"
    FRENCH = "Francés"
    JAPANESE = "Japonés"
    GERMAN = "Alemán"


class StructuralMode(str, Enum):
    VISUAL = "visual"
    SCREENPLAY = "screenplay"
    SYNOPSIS = "synopsis"
    STORY = "story"


STRUCTURAL_MODES: dict[Structure, StructuralMode] = {
    Structure.VISUAL_PROMPT: StructuralMode.VISUAL,
    Structure.SCREENPLAY_SCENE: StructuralMode.SCREENPLAY,
    Structure.SYNOPSIS: StructuralMode.SYNOPSIS,
    Structure.LOGLINE: StructuralMode.STORY,
    Structure.CHARACTER_BIO: StructuralMode.STORY,
    Structure.STORY_BEATS: StructuralMode.STORY,
    Structure.DIRECTORS_TREATMENT: StructuralMode.STORY,
}

# Optical character of each lens, restated to the model in visual mode.
LENS_EFFECTS: dict[Lens, str] = {
    Lens.ULTRA_WIDE: (
        "ángulo de visión extremo (~114°), fuerte distorsión de barril en los bordes, "
        "profundidad de campo casi infinita y perspectiva exagerada que agiganta el primer plano"
    ),
    Lens.WIDE: (
        "ángulo de visión amplio (~84°), distorsión leve en los bordes, gran profundidad "
        "de campo y sensación de espacio envolvente"
    ),
    Lens.STANDARD: (
        "ángulo de visión natural (~46°) similar al ojo humano, sin distorsión apreciable "
        "y profundidad de campo moderada"
    ),
    Lens.PORTRAIT: (
        "ángulo de visión estrecho (~28°), compresión favorecedora de rasgos, profundidad "
        "de campo reducida y bokeh cremoso que aísla al sujeto"
    ),
    Lens.TELEPHOTO: (
        "ángulo de visión muy estrecho (~12°), fuerte compresión de planos, profundidad "
        "de campo mínima y fondos convertidos en manchas de color"
    ),
    Lens.ANAMORPHIC: (
        "encuadre panorámico 2.39:1 con campo de visión horizontal ampliado, distorsión "
        "ovalada del bokeh, destellos horizontales (lens flares) y profundidad de campo "
        "reducida con caída de foco característica"
    ),
}


def structural_mode(structure: Structure) -> StructuralMode:
    """Return the instruction mode used for an output structure."""
    return STRUCTURAL_MODES[structure]


def coerce_option(enum_cls: type[Enum], value: Any) -> Enum:
    """Resolve a raw value to a member of ``enum_cls``.

    Accepts a member, its value (the UI label) or its name.

    Raises:
        ValidationError: If the value is not part of the closed set
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            pass
        if value in enum_cls.__members__:
            return enum_cls[value]
    raise ValidationError(f"Opción no válida para {enum_cls.__name__}: {value!r}")


@dataclass(frozen=True)
class PromptOptions:
    """Production configuration for one generation request."""

    tone: Tone = Tone.CINEMATIC
    structure: Structure = Structure.VISUAL_PROMPT
    lens: Lens = Lens.STANDARD
    language: OutputLanguage = OutputLanguage.ENGLISH
    include_examples: bool = False
    add_reasoning: bool = False

    def __post_init__(self):
        # Frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "tone", coerce_option(Tone, self.tone))
        object.__setattr__(self, "structure", coerce_option(Structure, self.structure))
        object.__setattr__(self, "lens", coerce_option(Lens, self.lens))
        object.__setattr__(self, "language", coerce_option(OutputLanguage, self.language))
        object.__setattr__(self, "include_examples", bool(self.include_examples))
        object.__setattr__(self, "add_reasoning", bool(self.add_reasoning))

    @property
    def mode(self) -> StructuralMode:
        return structural_mode(self.structure)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the enum labels."""
        data = asdict(self)
        for key in ("tone", "structure", "lens", "language"):
            data[key] = data[key].value
        return data


def option_catalog() -> dict[str, list[str]]:
    """Enumerated option values exposed to the UI and the REST API."""
    return {
        "tones": [t.value for t in Tone],
        "structures": [s.value for s in Structure],
        "lenses": [lens.value for lens in Lens],
        "languages": [lang.value for lang in OutputLanguage],
    }
