"""Loading and saving images as packed RGB byte buffers."""

from __future__ import annotations

import os
from dataclasses import dataclass

from PIL import Image


@dataclass(frozen=True)
class PixelImage:
    """An image held as row-major RGB bytes, three per pixel, no padding."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        expected = self.width * self.height * 3
        if len(self.data) != expected:
            raise ValueError(
                f"pixel data holds {len(self.data)} bytes, expected {expected}"
            )

    @property
    def size(self) -> int:
        """Number of bytes in the pixel buffer."""
        return len(self.data)


def load_pixels(path: str | os.PathLike[str]) -> PixelImage:
    """Load an image file and return its pixels converted to RGB."""
    try:
        with Image.open(path) as img:
            rgb = img.convert("RGB")
    except OSError as exc:
        raise OSError(f"could not load image {os.fspath(path)!r}") from exc
    width, height = rgb.size
    return PixelImage(width, height, rgb.tobytes())


def export_image(image: PixelImage, path: str | os.PathLike[str]) -> None:
    """Write ``image`` to ``path`` as a BMP file."""
    img = Image.frombytes("RGB", (image.width, image.height), image.data)
    try:
        img.save(path, format="BMP")
    except (OSError, ValueError) as exc:
        raise OSError(f"could not save image {os.fspath(path)!r}") from exc