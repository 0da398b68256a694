"""Integer grid coordinates.

Positions are plain values. Anything that depends on the grid dimensions
(bounds checks, tile indices) takes the owning grid as an argument instead of
looking up a globally active scenario.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..errors import BadSaveError

if TYPE_CHECKING:  # pragma: no cover
    from .grid import Grid

_INTEGER = re.compile(r"[+-]?\d+")


def parse_int(text: str) -> int:
    """Parse a strict base-10 integer (no whitespace, no underscores)."""
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"{text!r} is not an integer")
    return int(text)


@dataclass(frozen=True)
class Position:
    """An (x, y) pair. May be negative or out of bounds until checked."""

    x: int = 0
    y: int = 0

    @classmethod
    def from_index(cls, index: int, grid: "Grid") -> "Position":
        return cls(index % grid.width, index // grid.width)

    def in_bounds(self, grid: "Grid") -> bool:
        return 0 <= self.x < grid.width and 0 <= self.y < grid.height

    def index(self, grid: "Grid") -> int:
        return self.x + self.y * grid.width

    def distance(self, other: "Position") -> "Position":
        """Signed delta from this position to ``other``."""
        return Position(other.x - self.x, other.y - self.y)

    def manhattan(self, other: "Position") -> int:
        delta = self.distance(other)
        return abs(delta.x) + abs(delta.y)

    def translate(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def encode(self) -> str:
        return f"{self.x},{self.y}"

    @classmethod
    def decode(cls, encoded: str) -> "Position":
        """Inverse of :meth:`encode`.

        Raises:
            BadSaveError: If the text does not hold exactly one comma separating
                two integers.
        """
        if encoded.count(",") != 1:
            raise BadSaveError(
                "The number of commas (,) detected was more/fewer than expected"
            )
        raw_x, raw_y = encoded.split(",")
        try:
            return cls(parse_int(raw_x), parse_int(raw_y))
        except ValueError:
            raise BadSaveError(
                "The x or y component of the coordinate can not be parsed as an integer"
            ) from None

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
