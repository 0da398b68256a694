"""Pydantic snapshots of the terrain grid.

These models mirror the dataclasses in ``grid.py`` but stay serializable so a
scenario can be dumped to JSON for inspection. They are display-only; the
text save format in ``researchsim.codec`` is the persistence format.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .grid import Grid, TileKind


class TileState(BaseModel):
    """One tile: terrain plus the machine encoding of its occupant, if any."""

    x: int
    y: int
    kind: TileKind
    occupant: str | None = Field(
        None, description="Entity encoding (e.g. 'Flora-SMALL-1,2'); None when empty",
    )


class GridState(BaseModel):
    """Dense representation of a terrain grid."""

    width: int
    height: int
    rows: List[str] = Field(
        default_factory=list,
        description="One string of terrain codes per row, top row first",
    )
    occupied: List[TileState] = Field(
        default_factory=list,
        description="Occupied tiles in row-major order",
    )

    @classmethod
    def from_grid(cls, grid: Grid) -> "GridState":
        rows = ["".join(tile.kind.code for tile in row) for row in grid.rows()]
        occupied = [
            TileState(
                x=position.x,
                y=position.y,
                kind=grid.tile_at(position).kind,
                occupant=entity.encode(),
            )
            for position, entity in grid.occupied()
        ]
        return cls(width=grid.width, height=grid.height, rows=rows, occupied=occupied)

    def to_grid(self) -> Grid:
        """Rebuild the terrain (occupants are not restored)."""
        kinds = [TileKind.decode(code) for row in self.rows for code in row]
        return Grid.from_kinds(self.width, self.height, kinds)
