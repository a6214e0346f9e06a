"""Unit tests for the Pillow image compressor."""

import base64
import io

import pytest
from PIL import Image

from docsync.domain.exceptions import ValidationFailureError
from docsync.infrastructure.imaging import PillowImageCompressor


def _png_bytes(width: int, height: int) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color=(240, 240, 230)).save(buffer, format="PNG")
    return buffer.getvalue()


def test_large_capture_is_downscaled_to_max_dimension():
    result = PillowImageCompressor().compress(_png_bytes(4000, 3000))

    assert (result.width, result.height) == (2560, 1920)
    assert result.mime_type == "image/webp"
    assert result.data.startswith("data:image/webp;base64,")

    decoded = base64.b64decode(result.data.split(",", 1)[1])
    assert len(decoded) == result.size_bytes
    with Image.open(io.BytesIO(decoded)) as image:
        assert image.format == "WEBP"


def test_small_image_keeps_its_size():
    result = PillowImageCompressor().compress(_png_bytes(800, 600))

    assert (result.width, result.height) == (800, 600)


def test_jpeg_output_converts_alpha_images():
    buffer = io.BytesIO()
    Image.new("RGBA", (100, 50), color=(0, 0, 0, 128)).save(buffer, format="PNG")

    result = PillowImageCompressor(image_format="jpeg").compress(buffer.getvalue())

    assert result.mime_type == "image/jpeg"


def test_garbage_bytes_are_a_validation_failure():
    with pytest.raises(ValidationFailureError):
        PillowImageCompressor().compress(b"definitely not an image")


def test_unsupported_format_is_rejected():
    with pytest.raises(ValueError):
        PillowImageCompressor(image_format="BMP")
