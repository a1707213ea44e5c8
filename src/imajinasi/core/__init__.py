"""Core functionality for Imajinasi AI.

- **models**: AspectRatio, ImageParameters, GenerationResult
- **prompt_builder**: display and generation prompt renderings
- **client**: ImageGenerationClient wrapping the Gemini SDK
- **errors**: ConfigurationError, ServiceError, RefusalError
- **config**: ImajinasiConfig and the global `config` instance
- **downloads**: PNG files for the download button

Usage Example
-------------
    from imajinasi.core import ImageGenerationClient, ImageParameters, config

    client = ImageGenerationClient.from_config(config)
    result = await client.generate(ImageParameters(subject="a red fox in snow"))
"""

from imajinasi.core.client import ImageGenerationClient
from imajinasi.core.config import ImajinasiConfig, config
from imajinasi.core.errors import (
    ConfigurationError,
    GenerationError,
    RefusalError,
    ServiceError,
)
from imajinasi.core.models import AspectRatio, GenerationResult, ImageParameters
from imajinasi.core.prompt_builder import build_display_prompt, build_generation_prompt

__all__ = [
    "AspectRatio",
    "ConfigurationError",
    "GenerationError",
    "GenerationResult",
    "ImageGenerationClient",
    "ImageParameters",
    "ImajinasiConfig",
    "RefusalError",
    "ServiceError",
    "build_display_prompt",
    "build_generation_prompt",
    "config",
]
