"""Recover an image from bitwise transformations verified by masking records."""

__version__ = "0.1.0"
__all__ = ["bitops", "pixels", "masking", "cli"]