"""Core data models for image parameters and generation results."""

from __future__ import annotations

import base64
import binascii
import io
from dataclasses import dataclass, fields, replace
from enum import Enum

from PIL import Image


class AspectRatio(str, Enum):
    """Width:height proportions accepted by the image model."""

    SQUARE = "1:1"
    LANDSCAPE = "16:9"
    PORTRAIT = "9:16"
    CLASSIC_LANDSCAPE = "4:3"
    CLASSIC_PORTRAIT = "3:4"

    @classmethod
    def parse(cls, value: AspectRatio | str) -> AspectRatio:
        """Resolve an enum member or a ratio label such as ``"16:9"``.

        Raises:
            ValueError: If the value is not one of the supported ratios
        """
        if isinstance(value, cls):
            return value
        for ratio in cls:
            if ratio.value == value:
                return ratio
        raise ValueError(f"Unsupported aspect ratio: {value!r}")

    @classmethod
    def choices(cls) -> list[str]:
        """Return ratio labels in display order."""
        return [ratio.value for ratio in cls]

    def __str__(self) -> str:
        return self.value


@dataclass
class ImageParameters:
    """Structured description of the image the user wants.

    Text fields start empty and are filled one at a time from the form.
    Only ``subject`` is required at submit time.
    """

    subject: str = ""
    style: str = ""
    lighting: str = ""
    colors: str = ""
    details: str = ""
    aspect_ratio: AspectRatio = AspectRatio.SQUARE

    def __post_init__(self) -> None:
        self.aspect_ratio = AspectRatio.parse(self.aspect_ratio)

    @classmethod
    def text_fields(cls) -> list[str]:
        """Names of the free-text fields, in form order."""
        return [f.name for f in fields(cls) if f.name != "aspect_ratio"]

    def with_field(self, name: str, value: str | AspectRatio) -> ImageParameters:
        """Return a copy with a single field replaced.

        Args:
            name: Field name (a text field or ``aspect_ratio``)
            value: New value; ``None`` is treated as an empty string

        Raises:
            ValueError: If the field name is unknown
        """
        if name == "aspect_ratio":
            return replace(self, aspect_ratio=AspectRatio.parse(value))
        if name not in self.text_fields():
            raise ValueError(f"Unknown image parameter: {name!r}")
        return replace(self, **{name: value or ""})

    def has_subject(self) -> bool:
        """Check if the required subject field has content."""
        return bool(self.subject and self.subject.strip())


@dataclass(frozen=True)
class GenerationResult:
    """A generated image held as a base64 payload with its MIME type."""

    mime_type: str
    data: str

    @property
    def data_uri(self) -> str:
        """Self-contained ``data:`` URI usable directly as an image source."""
        return f"data:{self.mime_type};base64,{self.data}"

    @classmethod
    def from_bytes(cls, raw: bytes, mime_type: str = "image/png") -> GenerationResult:
        """Wrap raw image bytes."""
        return cls(mime_type=mime_type, data=base64.b64encode(raw).decode("ascii"))

    def to_bytes(self) -> bytes:
        """Decode the base64 payload.

        Raises:
            ValueError: If the payload is not valid base64
        """
        try:
            return base64.b64decode(self.data, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Invalid image payload: {e}") from e

    def to_image(self) -> Image.Image:
        """Open the payload as a Pillow image."""
        image = Image.open(io.BytesIO(self.to_bytes()))
        image.load()
        return image
