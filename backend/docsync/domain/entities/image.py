"""Domain value object for a compressed, transport-ready image."""

from dataclasses import dataclass


@dataclass
class CompressedImage:
    """Encoded image ready to be stored as a detail record."""

    data: str  # data:<mime>;base64,... URL
    mime_type: str
    width: int
    height: int
    size_bytes: int
