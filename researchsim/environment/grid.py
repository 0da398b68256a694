"""Terrain grid.

A scenario map is a fixed-size rectangle of tiles stored in row-major order.
Each tile has an immutable terrain kind and at most one occupant. Only the
scenario that owns the grid should change occupants.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..errors import BadSaveError, NoSuchEntityError, OutOfBoundsError
from .position import Position

if TYPE_CHECKING:  # pragma: no cover
    from ..schemas import Entity


class TileKind(str, Enum):
    """Terrain categories with their single-character save codes."""

    LAND = "LAND"
    OCEAN = "OCEAN"
    MOUNTAIN = "MOUNTAIN"
    SAND = "SAND"

    @property
    def code(self) -> str:
        return _TILE_CODES[self]

    @classmethod
    def decode(cls, code: str) -> "TileKind":
        try:
            return _TILE_KINDS[code]
        except KeyError:
            raise BadSaveError(f"Unknown terrain code {code!r}") from None


_TILE_CODES = {
    TileKind.LAND: "L",
    TileKind.OCEAN: "O",
    TileKind.MOUNTAIN: "M",
    TileKind.SAND: "S",
}
_TILE_KINDS = {code: kind for kind, code in _TILE_CODES.items()}


@dataclass
class Tile:
    """A single map cell."""

    kind: TileKind
    occupant: Optional["Entity"] = None

    def has_occupant(self) -> bool:
        return self.occupant is not None

    def get_occupant(self) -> "Entity":
        if self.occupant is None:
            raise NoSuchEntityError()
        return self.occupant

    def __str__(self) -> str:
        if self.occupant is None:
            return f"{self.kind.value} tile"
        return f"{self.kind.value} tile holding {self.occupant}"


@dataclass
class Grid:
    """Row-major rectangle of tiles."""

    width: int
    height: int
    tiles: List[Tile] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.tiles:
            self.tiles = [Tile(TileKind.LAND) for _ in range(self.width * self.height)]
        if len(self.tiles) != self.width * self.height:
            raise ValueError(
                f"A {self.width}x{self.height} grid needs {self.width * self.height} "
                f"tiles, got {len(self.tiles)}"
            )

    @classmethod
    def filled(cls, width: int, height: int, kind: TileKind = TileKind.LAND) -> "Grid":
        return cls(width, height, [Tile(kind) for _ in range(width * height)])

    @classmethod
    def from_kinds(cls, width: int, height: int, kinds: Sequence[TileKind]) -> "Grid":
        return cls(width, height, [Tile(kind) for kind in kinds])

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, position: Position) -> bool:
        return position.in_bounds(self)

    def require_in_bounds(self, position: Position) -> None:
        if not position.in_bounds(self):
            raise OutOfBoundsError(position, width=self.width, height=self.height)

    def tile_at(self, position: Position) -> Tile:
        self.require_in_bounds(position)
        return self.tiles[position.index(self)]

    def occupant_at(self, position: Position) -> "Entity":
        """Return the entity on ``position``; raises NoSuchEntityError if empty."""
        tile = self.tile_at(position)
        if tile.occupant is None:
            raise NoSuchEntityError(position)
        return tile.occupant

    def clear(self, position: Position) -> None:
        self.tile_at(position).occupant = None

    def occupy(self, position: Position, entity: "Entity") -> None:
        self.tile_at(position).occupant = entity

    def rows(self) -> Iterator[List[Tile]]:
        for row in range(self.height):
            yield self.tiles[row * self.width:(row + 1) * self.width]

    def occupied(self) -> Iterator[Tuple[Position, "Entity"]]:
        """Yield ``(position, occupant)`` pairs in row-major order."""
        for index, tile in enumerate(self.tiles):
            if tile.occupant is not None:
                yield Position.from_index(index, self), tile.occupant

    def kinds(self) -> List[TileKind]:
        return [tile.kind for tile in self.tiles]

    def positions(self) -> Iterable[Position]:
        return (Position.from_index(index, self) for index in range(self.size))
