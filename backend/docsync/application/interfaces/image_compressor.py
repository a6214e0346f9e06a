"""Abstract interface for image compression."""

from abc import ABC, abstractmethod

from docsync.domain.entities import CompressedImage


class ImageCompressor(ABC):
    """Turns raw camera bytes into a compact, transportable encoded image."""

    @abstractmethod
    def compress(self, content: bytes) -> CompressedImage:
        """Compress raw image bytes.

        Raises:
            ValidationFailureError: The bytes are not a decodable image.
        """
        ...
