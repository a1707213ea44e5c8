"""Configuration management for Imajinasi AI.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the IMAJINASI_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (IMAJINASI_* prefix)
2. .env file in the project root
3. Default values defined in ImajinasiConfig

Example .env file:
    IMAJINASI_API_KEY=your-gemini-key
    IMAJINASI_MODEL_NAME=gemini-2.5-flash-image
    IMAJINASI_GRADIO_SERVER_PORT=7860

The API key is also read from ``GEMINI_API_KEY`` or plain ``API_KEY`` so an
existing Gemini setup works unchanged.

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
The UI builds its ImageGenerationClient from it; tests construct their own
ImajinasiConfig and inject it instead.

Usage Example
-------------
    from imajinasi.core.config import config

    print(config.model_name)
    print(config.has_api_key)
"""

import tempfile
from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import AspectRatio


class ImajinasiConfig(BaseSettings):
    """Main configuration for Imajinasi AI.

    Attributes
    ----------
    Generation Settings:
        api_key : SecretStr | None
            Gemini API key. Missing keys are reported when generating, not here.
        model_name : str
            Gemini model that returns inline images
        default_aspect_ratio : AspectRatio
            Aspect ratio preselected in the form

    Downloads:
        downloads_dir : Path
            Directory where downloadable PNG files are written
        download_prefix : str
            File name prefix for downloaded images

    UI Settings:
        gradio_server_name : str
            Server bind address (0.0.0.0 for local network)
        gradio_server_port : int
            Server port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)

    Examples
    --------
        >>> custom_config = ImajinasiConfig(api_key="test-key", gradio_server_port=8080)
        >>> custom_config.has_api_key
        True
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="IMAJINASI_",
        case_sensitive=False,
        extra="ignore",
    )

    # Generation settings
    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("api_key", "IMAJINASI_API_KEY", "GEMINI_API_KEY", "API_KEY"),
        description="Gemini API key",
    )
    model_name: str = Field(
        default="gemini-2.5-flash-image",
        description="Gemini model used for image generation",
    )
    default_aspect_ratio: AspectRatio = Field(
        default=AspectRatio.SQUARE,
        description="Aspect ratio preselected in the form",
    )

    # Downloads
    downloads_dir: Path = Field(
        default=Path(tempfile.gettempdir()) / "imajinasi-ai",
        description="Directory for downloadable images",
    )
    download_prefix: str = Field(
        default="imajinasi-ai",
        min_length=1,
        description="File name prefix for downloaded images",
    )

    # UI settings
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )

    def __init__(self, **kwargs):
        """Initialize configuration and create the downloads directory."""
        super().__init__(**kwargs)
        self.downloads_dir.mkdir(parents=True, exist_ok=True)

    @property
    def has_api_key(self) -> bool:
        """True when a non-blank API key is configured."""
        return bool(self.api_key and self.api_key.get_secret_value().strip())

    def get_api_key(self) -> str | None:
        """Return the plain API key, or None when unset or blank."""
        if not self.has_api_key:
            return None
        return self.api_key.get_secret_value().strip()


# Global configuration instance
config = ImajinasiConfig()
