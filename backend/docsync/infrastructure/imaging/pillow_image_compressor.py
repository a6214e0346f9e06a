"""Pillow-based image compressor for document captures.

Policy:
    1. Resize so the longest side is at most ``max_dimension`` (2560 px by
       default), which keeps full-page text legible.
    2. Encode as WEBP at quality 85 to keep text edges sharp while still
       shrinking raw camera output considerably.
"""

import base64
import io
import logging

from PIL import Image, ImageOps, UnidentifiedImageError

from docsync.application.interfaces import ImageCompressor
from docsync.domain.entities import CompressedImage
from docsync.domain.exceptions import ValidationFailureError

logger = logging.getLogger(__name__)

_MIME_TYPES = {
    "WEBP": "image/webp",
    "JPEG": "image/jpeg",
    "PNG": "image/png",
}


class PillowImageCompressor(ImageCompressor):
    """Infrastructure adapter — downscales and re-encodes images with Pillow."""

    def __init__(self, max_dimension: int = 2560, quality: int = 85, image_format: str = "WEBP"):
        image_format = image_format.upper()
        if image_format not in _MIME_TYPES:
            raise ValueError(f"Unsupported image format: {image_format}")
        self._max_dimension = max_dimension
        self._quality = quality
        self._format = image_format

    def compress(self, content: bytes) -> CompressedImage:
        try:
            with Image.open(io.BytesIO(content)) as source:
                image = ImageOps.exif_transpose(source)
                image.load()
        except (UnidentifiedImageError, OSError) as exc:
            raise ValidationFailureError([f"Could not decode image: {exc}"]) from exc

        image.thumbnail((self._max_dimension, self._max_dimension), Image.Resampling.LANCZOS)
        if self._format == "JPEG" and image.mode not in ("RGB", "L"):
            image = image.convert("RGB")

        buffer = io.BytesIO()
        save_kwargs = {} if self._format == "PNG" else {"quality": self._quality}
        image.save(buffer, format=self._format, **save_kwargs)
        encoded = buffer.getvalue()

        mime_type = _MIME_TYPES[self._format]
        logger.debug(
            "Compressed image %d -> %d bytes (%dx%d)",
            len(content), len(encoded), image.width, image.height,
        )
        return CompressedImage(
            data=f"data:{mime_type};base64,{base64.b64encode(encoded).decode('ascii')}",
            mime_type=mime_type,
            width=image.width,
            height=image.height,
            size_bytes=len(encoded),
        )
