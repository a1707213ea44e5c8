"""Gemini image generation client.

Wraps a single call to the Google GenAI SDK: the structured parameters are
rendered into the generation prompt, sent with the requested aspect ratio,
and the first inline image in the response is returned as a
GenerationResult.

The SDK client is created lazily so that a missing API key is reported as a
ConfigurationError before anything touches the network. A pre-built
``genai.Client`` (or a test double exposing ``aio.models.generate_content``)
can be injected instead.

Usage Example
-------------
    from imajinasi.core.client import ImageGenerationClient
    from imajinasi.core.config import config

    client = ImageGenerationClient.from_config(config)
    result = await client.generate(params)
    print(result.data_uri[:40])
"""

from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from .config import ImajinasiConfig
from .errors import ConfigurationError, RefusalError, ServiceError
from .models import GenerationResult, ImageParameters
from .prompt_builder import build_generation_prompt

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash-image"
DEFAULT_MIME_TYPE = "image/png"

MISSING_KEY_MESSAGE = "API Key is missing. Please check your environment configuration."
NO_IMAGE_MESSAGE = "No image generated."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while generating the image."


class ImageGenerationClient:
    """Generate images from ImageParameters with a Gemini image model.

    Each call to :meth:`generate` issues exactly one request. There are no
    retries, no caching and no timeout beyond what the SDK transport applies.

    Attributes
    ----------
    model : str
        Gemini model name
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = DEFAULT_MODEL,
        genai_client: Any | None = None,
    ):
        """Initialize the client.

        Args:
            api_key: Gemini API key, or None if not configured
            model: Gemini model name
            genai_client: Optional pre-built SDK client (used by tests)
        """
        self._api_key = api_key.strip() if api_key else None
        self.model = model
        self._client = genai_client

    @classmethod
    def from_config(cls, config: ImajinasiConfig) -> ImageGenerationClient:
        """Build a client from application settings."""
        return cls(api_key=config.get_api_key(), model=config.model_name)

    def _get_client(self) -> Any:
        if self._client is not None:
            return self._client
        if not self._api_key:
            raise ConfigurationError(MISSING_KEY_MESSAGE)
        logger.info(f"Creating Gemini client for model: {self.model}")
        self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def generate(self, params: ImageParameters) -> GenerationResult:
        """Generate one image.

        Args:
            params: Structured image parameters

        Returns:
            GenerationResult holding the base64 image payload

        Raises:
            ConfigurationError: If no API key is configured (no request is sent)
            ServiceError: If the request fails in transport or at the service
            RefusalError: If the service returns no image, only text
        """
        client = self._get_client()
        prompt = build_generation_prompt(params)
        aspect_ratio = params.aspect_ratio.value

        logger.info(
            f"Requesting image from {self.model} "
            f"(aspect_ratio={aspect_ratio}, prompt_length={len(prompt)})"
        )

        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    image_config=types.ImageConfig(aspect_ratio=aspect_ratio),
                ),
            )
        except genai_errors.APIError as e:
            logger.error(f"Gemini API error ({e.code}): {e.message}")
            raise ServiceError(e.message or str(e) or UNEXPECTED_ERROR_MESSAGE) from e
        except Exception as e:
            logger.error(f"Gemini request failed: {e}", exc_info=True)
            raise ServiceError(str(e) or UNEXPECTED_ERROR_MESSAGE) from e

        return extract_image(response)


def _response_parts(response: Any) -> list[Any]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    return list(getattr(content, "parts", None) or [])


def _refusal_text(response: Any, parts: list[Any]) -> str:
    texts = [part.text for part in parts if getattr(part, "text", None)]
    if texts:
        return "".join(texts)

    feedback = getattr(response, "prompt_feedback", None)
    block_reason = getattr(feedback, "block_reason", None)
    if block_reason:
        reason = getattr(block_reason, "value", block_reason)
        return f"Prompt blocked ({reason})"

    return NO_IMAGE_MESSAGE


def extract_image(response: Any) -> GenerationResult:
    """Pull the first inline image out of a generate_content response.

    Args:
        response: ``GenerateContentResponse`` from the SDK

    Returns:
        GenerationResult for the first part carrying inline data

    Raises:
        RefusalError: If no part carries image data
    """
    parts = _response_parts(response)

    for part in parts:
        inline_data = getattr(part, "inline_data", None)
        if inline_data is not None and inline_data.data:
            mime_type = inline_data.mime_type or DEFAULT_MIME_TYPE
            logger.info(f"Received image ({mime_type}, {len(inline_data.data)} bytes)")
            return GenerationResult.from_bytes(inline_data.data, mime_type=mime_type)

    text = _refusal_text(response, parts)
    logger.warning(f"Model returned no image: {text}")
    raise RefusalError(f"Generation failed: {text}")
