"""Configuration management for CineXpress.

Settings for the Gemini client, the history file and the server are read
from ``CINEXPRESS_``-prefixed environment variables through Pydantic
Settings, so a deployment never needs a code change.

Where values come from
----------------------
Highest priority first:
1. Environment variables (CINEXPRESS_* prefix)
2. .env file in the project root
3. Default values defined in CineXpressConfig

The Gemini API key is the one exception to the prefix rule: it is also read
from the plain ``GEMINI_API_KEY`` and ``API_KEY`` variables used by the
Google tooling.

Example .env file:
    CINEXPRESS_GEMINI_API_KEY=your-key
    CINEXPRESS_MODEL_NAME=gemini-2.5-flash
    CINEXPRESS_DATA_DIR=data
    CINEXPRESS_HISTORY_LIMIT=10

The ``config`` instance
-----------------------
Importing this module builds ``config`` once; every layer (client, history
store, UI, API) reads from it.

Usage Example
-------------
    from cinexpress.core.config import config

    print(config.model_name)
    print(config.history_path)

Directory Management
--------------------
The configuration creates ``data_dir`` on initialization; the history file
lives inside it.
"""

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CineXpressConfig(BaseSettings):
    """Main configuration for CineXpress.

    Attributes
    ----------
    Generation Settings:
        gemini_api_key : str | None
            API key for the Gemini endpoint. Without it every generation
            attempt fails with the generic production error.
        model_name : str
            Gemini model used for multimodal prompt optimization.

    History Settings:
        data_dir : Path
            Directory holding persisted application data
        history_filename : str
            Name of the JSON history file inside data_dir
        history_limit : int
            Number of most-recent results kept in the history

    Input Settings:
        max_reference_images : int
            Maximum number of reference images per request (1-3)

    Server Settings:
        server_host : str
            Bind address for uvicorn (0.0.0.0 for local network)
        server_port : int
            Server port (1024-65535)
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root logging level for the entry points

    Examples
    --------
        >>> custom_config = CineXpressConfig(
        ...     model_name="gemini-2.5-pro",
        ...     history_limit=5,
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CINEXPRESS_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Generation settings
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "gemini_api_key", "CINEXPRESS_GEMINI_API_KEY", "GEMINI_API_KEY", "API_KEY"
        ),
        description="API key for the Gemini generation endpoint",
    )
    model_name: str = Field(
        default="gemini-2.5-flash",
        description="Gemini model used for multimodal prompt optimization",
    )

    # History settings
    data_dir: Path = Field(
        default=Path("data"),
        description="Directory for persisted application data",
    )
    history_filename: str = Field(
        default="history.json",
        description="JSON file (inside data_dir) holding the result history",
    )
    history_limit: int = Field(
        default=10,
        description="Number of most-recent results kept in the history",
        ge=1,
        le=100,
    )

    # Input settings
    max_reference_images: int = Field(
        default=3,
        description="Maximum reference images per request",
        ge=1,
        le=3,
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level used by the entry points",
    )

    def __init__(self, **kwargs):
        """Initialize configuration and create the data directory.

        Args:
            **kwargs: Configuration overrides (typically from environment variables)
        """
        super().__init__(**kwargs)

        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def history_path(self) -> Path:
        """Absolute location of the persisted history file."""
        return self.data_dir / self.history_filename


# Global configuration instance
# Loads values from environment variables (CINEXPRESS_* prefix) and .env file.
config = CineXpressConfig()
