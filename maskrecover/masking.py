"""Masking records: a seed offset plus the RGB sums of a masked region."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from dataclasses import dataclass

_INT = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class MaskingData:
    """Seed offset and flattened R, G, B values read from a masking file."""

    seed: int
    values: tuple[int, ...]

    @property
    def n_pixels(self) -> int:
        """Number of RGB triples held."""
        return len(self.values) // 3


def _integers(text: str) -> Iterator[int]:
    for token in text.split():
        if not _INT.fullmatch(token):
            return
        yield int(token)


def load_seed_masking(path: str | os.PathLike[str]) -> MaskingData:
    """Read a seed and the following complete RGB triples from a text file.

    Reading stops at the first token that is not an integer; a trailing
    incomplete triple is dropped.
    """
    with open(path, encoding="utf-8") as handle:
        numbers = list(_integers(handle.read()))
    if not numbers:
        raise ValueError(f"no seed found in {os.fspath(path)!r}")
    seed, rest = numbers[0], numbers[1:]
    usable = len(rest) - len(rest) % 3
    return MaskingData(seed, tuple(rest[:usable]))


def verify_transformation(
    masking: MaskingData, mask: bytes, transformation: bytes
) -> bool:
    """Check that mask plus the transformation at the seed offset gives the stored values."""
    count = len(masking.values)
    if masking.seed < 0 or masking.seed + count > len(transformation):
        raise ValueError("masked region lies outside the transformed data")
    if count > len(mask):
        raise ValueError("mask is smaller than the masked region")
    window = transformation[masking.seed : masking.seed + count]
    return all(m + t == v for m, t, v in zip(mask, window, masking.values))