"""Imajinasi AI - structured prompt form for Gemini image generation."""

__version__ = "0.1.0"

from imajinasi.core.client import ImageGenerationClient
from imajinasi.core.config import ImajinasiConfig, config
from imajinasi.core.models import AspectRatio, GenerationResult, ImageParameters

__all__ = [
    "AspectRatio",
    "GenerationResult",
    "ImageGenerationClient",
    "ImageParameters",
    "ImajinasiConfig",
    "config",
]
