"""Shared pytest fixtures for CineXpress tests."""

import base64
import json
import shutil
import tempfile
from pathlib import Path
from types import SimpleNamespace
from typing import Generator
from unittest.mock import MagicMock

import pytest
from PIL import Image

from cinexpress.core.client import GenerationClient
from cinexpress.core.config import CineXpressConfig
from cinexpress.core.history import InMemoryHistoryStore, JsonHistoryStore
from cinexpress.core.models import ImageInput, OptimizedResult
from cinexpress.core.options import PromptOptions
from cinexpress.ui.models import UIState

# 1x1 transparent PNG
PNG_PIXEL_B64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> CineXpressConfig:
    """Create a test configuration with a temporary data directory."""
    return CineXpressConfig(
        _env_file=None,
        gemini_api_key="test-key",
        data_dir=str(temp_dir / "data"),
    )


@pytest.fixture
def default_options() -> PromptOptions:
    return PromptOptions()


@pytest.fixture
def png_image() -> ImageInput:
    return ImageInput(data=PNG_PIXEL_B64, mime_type="image/png")


@pytest.fixture
def image_file(temp_dir: Path) -> Path:
    """Write a small real PNG to disk."""
    path = temp_dir / "reference.png"
    Image.new("RGB", (8, 8), color=(200, 30, 30)).save(path, format="PNG")
    return path


@pytest.fixture
def text_file(temp_dir: Path) -> Path:
    path = temp_dir / "notes.txt"
    path.write_text("not an image")
    return path


def make_sdk_response(payload: dict | str | None) -> SimpleNamespace:
    """Mimic a google-genai response object carrying ``text``."""
    if isinstance(payload, dict):
        payload = json.dumps(payload)
    return SimpleNamespace(text=payload)


@pytest.fixture
def sdk_client() -> MagicMock:
    """A stand-in for google.genai.Client answering with a valid payload."""
    client = MagicMock()
    client.models.generate_content.return_value = make_sdk_response(
        {"optimizedPrompt": "Anamorphic wide shot of a neon street", "explanation": "Nota"}
    )
    return client


@pytest.fixture
def generation_client(sdk_client: MagicMock) -> GenerationClient:
    return GenerationClient(model_name="gemini-2.5-flash", client=sdk_client)


@pytest.fixture
def sample_result() -> OptimizedResult:
    return OptimizedResult(
        original_text="A cyberpunk street in the rain",
        optimized_prompt="Neon-soaked street, anamorphic flares",
        explanation="Lluvia y neón para el contraste.",
    )


@pytest.fixture
def history_store() -> InMemoryHistoryStore:
    return InMemoryHistoryStore(limit=10)


@pytest.fixture
def json_history_store(temp_dir: Path) -> JsonHistoryStore:
    return JsonHistoryStore(temp_dir / "history.json", limit=10)


@pytest.fixture
def ui_state(generation_client, history_store) -> UIState:
    """UI state with fake collaborators already in place."""
    return UIState(client=generation_client, history_store=history_store)


@pytest.fixture
def png_bytes() -> bytes:
    return base64.b64decode(PNG_PIXEL_B64)


@pytest.fixture
def make_response():
    """Factory for fake google-genai responses."""
    return make_sdk_response


class FailingHistoryStore(InMemoryHistoryStore):
    """In-memory store whose writes always fail, like a full disk."""

    def save(self, items):
        raise OSError("disk full")

    def clear(self):
        raise OSError("read-only file system")


@pytest.fixture
def failing_history_store() -> FailingHistoryStore:
    return FailingHistoryStore(limit=10)
