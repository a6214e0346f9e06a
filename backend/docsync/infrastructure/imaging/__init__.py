from .pillow_image_compressor import PillowImageCompressor

__all__ = ["PillowImageCompressor"]
