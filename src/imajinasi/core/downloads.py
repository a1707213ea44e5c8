"""Write generated images to disk for the download button."""

import logging
import time
from pathlib import Path

from .models import GenerationResult

logger = logging.getLogger(__name__)


def download_filename(prefix: str, timestamp_ms: int | None = None) -> str:
    """Build a ``<prefix>-<epoch millis>.png`` file name.

    Args:
        prefix: File name prefix (e.g. "imajinasi-ai")
        timestamp_ms: Milliseconds since the epoch (default: now)

    Returns:
        File name with a .png extension
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{prefix}-{timestamp_ms}.png"


def save_for_download(
    result: GenerationResult,
    directory: Path,
    prefix: str,
    timestamp_ms: int | None = None,
) -> Path:
    """Save a generation result as a PNG file.

    Non-PNG payloads are converted with Pillow so the file extension always
    matches the content.

    Args:
        result: Generated image
        directory: Target directory (created if missing)
        prefix: File name prefix
        timestamp_ms: Optional fixed timestamp

    Returns:
        Path to the written file
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / download_filename(prefix, timestamp_ms)

    if result.mime_type == "image/png":
        path.write_bytes(result.to_bytes())
    else:
        image = result.to_image()
        if image.mode not in ("RGB", "RGBA", "L", "LA", "P"):
            image = image.convert("RGBA")
        image.save(path, format="PNG")

    logger.info(f"Saved image for download: {path}")
    return path


def discard_download(path: str | Path | None) -> None:
    """Delete a previously written download file, if any.

    A file that is already gone is ignored; other OS errors are logged and
    the file is left in place.
    """
    if not path:
        return
    try:
        Path(path).unlink(missing_ok=True)
        logger.debug(f"Removed stale download: {path}")
    except OSError as e:
        logger.warning(f"Could not remove download file {path}: {e}")
