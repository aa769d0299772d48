"""PNG codec for image attachments, backed by Pillow."""

import io
import logging

import structlog
from PIL import Image

from ..config import settings
from .logging import Timer

# Routed through stdlib logging so events stay silent until the host
# application configures handlers and levels.
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    wrapper_class=structlog.stdlib.BoundLogger,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def encode_png(image: Image.Image, compress_level: int | None = None) -> bytes:
    """
    Encode an in-memory image as a PNG byte stream.

    PNG is lossless at every zlib level, so ``compress_level`` only trades
    CPU time for size. The input image is not modified.

    Args:
        image: Pillow image to encode
        compress_level: zlib level 0-9, defaults to ``settings.png_compress_level``

    Returns:
        PNG-encoded bytes

    Raises:
        Whatever Pillow raises for an invalid, closed or unwritable image.
    """
    if compress_level is None:
        compress_level = settings.png_compress_level

    buffer = io.BytesIO()
    with Timer() as t:
        image.save(buffer, format="PNG", compress_level=compress_level)
    data = buffer.getvalue()

    logger.debug(
        "Image encoded",
        width=image.width,
        height=image.height,
        mode=image.mode,
        size_bytes=len(data),
        duration_ms=t.duration_ms,
    )
    return data
