"""Boolean on/off masks that carve arbitrary shapes out of a square grid."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

import numpy as np
from PIL import Image

PathLike = Union[str, Path]

CLOSED_CHARS = ("X", "x")
DARK_THRESHOLD = 32


class Mask:
    """Rows x cols grid of flags; ``True`` marks a cell that exists in the maze."""

    def __init__(self, rows: int, cols: int, bits: Optional[np.ndarray] = None) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"Mask dimensions must be non-negative, got {rows}x{cols}")
        if bits is None:
            bits = np.ones((rows, cols), dtype=bool)
        elif bits.shape != (rows, cols):
            raise ValueError(f"Mask bits have shape {bits.shape}, expected {(rows, cols)}")
        self.rows = rows
        self.cols = cols
        self.bits = bits.astype(bool)

    @classmethod
    def from_array(cls, bits) -> "Mask":
        array = np.asarray(bits, dtype=bool)
        if array.ndim != 2:
            raise ValueError("Mask arrays must be two-dimensional")
        rows, cols = array.shape
        return cls(rows, cols, array)

    @classmethod
    def from_txt(cls, path: PathLike) -> "Mask":
        """Load a mask from text, one line per row; ``X`` marks a closed cell."""

        lines = [line.rstrip("\r\n") for line in Path(path).read_text(encoding="utf-8").splitlines()]
        while lines and not lines[-1].strip():
            lines.pop()
        if not lines:
            raise ValueError(f"Mask file is empty: {path}")
        rows = len(lines)
        cols = max(len(line) for line in lines)
        bits = np.zeros((rows, cols), dtype=bool)
        for r, line in enumerate(lines):
            for c, char in enumerate(line):
                bits[r, c] = char not in CLOSED_CHARS
        return cls(rows, cols, bits)

    @classmethod
    def from_image(cls, path: PathLike, *, threshold: int = DARK_THRESHOLD) -> "Mask":
        """Load a mask from an image, one pixel per cell; black pixels are closed."""

        with Image.open(path) as image:
            pixels = np.asarray(image.convert("RGB"), dtype=np.int16)
        if pixels.size == 0:
            raise ValueError(f"Mask image is empty: {path}")
        dark = np.all(pixels <= threshold, axis=2)
        rows, cols = dark.shape
        return cls(rows, cols, ~dark)

    def __getitem__(self, location: Tuple[int, int]) -> bool:
        row, col = location
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            return False
        return bool(self.bits[row, col])

    def __setitem__(self, location: Tuple[int, int], value: bool) -> None:
        row, col = location
        self.bits[row, col] = bool(value)

    def count(self) -> int:
        return int(np.count_nonzero(self.bits))

    def locations(self) -> Iterator[Tuple[int, int]]:
        for row, col in zip(*np.nonzero(self.bits)):
            yield int(row), int(col)

    def random_location(self, rng: Optional[random.Random] = None) -> Tuple[int, int]:
        open_cells: List[Tuple[int, int]] = list(self.locations())
        if not open_cells:
            raise ValueError("Mask has no open cells")
        return (rng or random).choice(open_cells)

    def __repr__(self) -> str:
        return f"Mask(rows={self.rows}, cols={self.cols}, open={self.count()})"


__all__ = ["Mask"]
