"""Core functionality for cinematic prompt optimization.

This module provides the core components of CineXpress:

- **Option Model** (options.py): closed enums and the PromptOptions record
- **Request Composer** (composer.py): system instruction and content parts
- **Generation Client** (client.py): one Gemini call with a response schema
- **Response Mapper** (mapper.py): local validation of the JSON answer
- **optimize_prompt** (optimizer.py): composer -> client -> mapper boundary
- **History Store** (history.py): capped, newest-first result history
- **CineXpressConfig** (config.py): Pydantic Settings configuration

None of the components keeps state between calls; the history store is the
only persistence boundary and is injected by the caller.

Usage Example
-------------
    from cinexpress.core import GenerationClient, PromptOptions, config, optimize_prompt

    client = GenerationClient.from_config(config)
    result = optimize_prompt("A cyberpunk street in the rain", [], PromptOptions(), client)
    print(result.optimized_prompt)
    print(result.explanation)
"""

from cinexpress.core.client import GenerationClient
from cinexpress.core.composer import ComposedRequest, compose_request
from cinexpress.core.config import CineXpressConfig, config
from cinexpress.core.errors import (
    GenerationError,
    ParseError,
    StorageError,
    ValidationError,
)
from cinexpress.core.history import InMemoryHistoryStore, JsonHistoryStore
from cinexpress.core.mapper import parse_response
from cinexpress.core.models import HistoryItem, ImageInput, OptimizedResult
from cinexpress.core.optimizer import optimize_prompt
from cinexpress.core.options import Lens, OutputLanguage, PromptOptions, Structure, Tone

__all__ = [
    "CineXpressConfig",
    "ComposedRequest",
    "GenerationClient",
    "GenerationError",
    "HistoryItem",
    "ImageInput",
    "InMemoryHistoryStore",
    "JsonHistoryStore",
    "Lens",
    "OptimizedResult",
    "OutputLanguage",
    "ParseError",
    "PromptOptions",
    "StorageError",
    "Structure",
    "Tone",
    "ValidationError",
    "compose_request",
    "config",
    "optimize_prompt",
    "parse_response",
]
