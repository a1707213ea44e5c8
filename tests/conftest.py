"""Shared pytest fixtures for Imajinasi tests."""

import io
import shutil
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types
from PIL import Image

from imajinasi.core.config import ImajinasiConfig
from imajinasi.core.models import AspectRatio, GenerationResult, ImageParameters
from imajinasi.ui.models import FormState


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
def test_config(temp_dir: Path) -> ImajinasiConfig:
    """Create a test configuration with a temporary downloads directory."""
    return ImajinasiConfig(
        _env_file=None,
        api_key="test-key",
        downloads_dir=str(temp_dir / "downloads"),
        download_prefix="imajinasi-ai",
    )


@pytest.fixture
def fox_params() -> ImageParameters:
    """Parameters from the red fox scenario."""
    return ImageParameters(
        subject="a red fox in snow",
        style="watercolor",
        aspect_ratio=AspectRatio.LANDSCAPE,
    )


@pytest.fixture
def png_bytes() -> bytes:
    """A tiny valid PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_result(png_bytes: bytes) -> GenerationResult:
    """GenerationResult wrapping png_bytes."""
    return GenerationResult.from_bytes(png_bytes, mime_type="image/png")


@pytest.fixture
def form_state(fox_params: ImageParameters) -> FormState:
    """Form state filled with the fox parameters."""
    return FormState(params=fox_params)


def make_response(*parts: types.Part) -> types.GenerateContentResponse:
    """Build a generate_content response with one candidate."""
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


@pytest.fixture
def response_factory():
    """Expose make_response to tests."""
    return make_response


@pytest.fixture
def image_response(png_bytes: bytes) -> types.GenerateContentResponse:
    """Response carrying an inline PNG image after a text part."""
    return make_response(
        types.Part(text="Here is your image."),
        types.Part(inline_data=types.Blob(data=png_bytes, mime_type="image/png")),
    )


@pytest.fixture
def refusal_response() -> types.GenerateContentResponse:
    """Response with explanatory text only."""
    return make_response(types.Part(text="content policy violation"))


@pytest.fixture
def fake_genai_client():
    """Stand-in for genai.Client exposing aio.models.generate_content."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock()
    return client
