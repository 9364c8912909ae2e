"""CineXpress - cinematic prompt optimizer powered by Gemini."""

__version__ = "0.1.0"

from cinexpress.core.config import CineXpressConfig, config
from cinexpress.core.options import Lens, OutputLanguage, PromptOptions, Structure, Tone

__all__ = [
    "CineXpressConfig",
    "config",
    "Lens",
    "OutputLanguage",
    "PromptOptions",
    "Structure",
    "Tone",
]
