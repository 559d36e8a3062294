"""Recover an original image by undoing a chain of masked bit operations."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .bitops import and_bytes, or_bytes, xor_bytes
from .masking import load_seed_masking, verify_transformation
from .pixels import PixelImage, export_image, load_pixels

DISTORTED_NAME = "I_D.bmp"
RANDOM_IMAGE_NAME = "I_M.bmp"
MASK_NAME = "M.bmp"
OUTPUT_NAME = "IO.bmp"
DEFAULT_STEPS = 6

_OPERATIONS = (xor_bytes, or_bytes, and_bytes)


def reconstruct(directory: str | os.PathLike[str], steps: int) -> PixelImage:
    """Undo ``steps`` transformations using the files found in ``directory``.

    For step ``i`` (counting from 0) the masking file ``M{steps - i}.txt`` is
    used. Each of XOR, OR and AND with ``I_M.bmp`` is tried in turn, and any
    result that agrees with the masking record replaces the current pixels.
    """
    base = Path(directory)
    current = load_pixels(base / DISTORTED_NAME)
    random_image = load_pixels(base / RANDOM_IMAGE_NAME)
    mask = load_pixels(base / MASK_NAME)
    data = current.data

    for i in range(steps):
        masking = load_seed_masking(base / f"M{steps - i}.txt")
        for operation in _OPERATIONS:
            transformation = operation(data, random_image.data)
            if verify_transformation(masking, mask.data, transformation):
                data = transformation

    return PixelImage(current.width, current.height, data)


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="maskrecover",
        description="Recover an original BMP image from its distorted version.",
    )
    parser.add_argument(
        "directory", nargs="?", default=".", help="folder holding the input files"
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=DEFAULT_STEPS,
        help="number of transformations applied to the original",
    )
    parser.add_argument(
        "--output", help=f"output path (default: DIRECTORY/{OUTPUT_NAME})"
    )
    args = parser.parse_args(argv)

    output = Path(args.output) if args.output else Path(args.directory) / OUTPUT_NAME
    try:
        image = reconstruct(args.directory, args.steps)
        export_image(image, output)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Recovered image saved as {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())