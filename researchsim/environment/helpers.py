"""Geometry and display utilities for the terrain grid."""

from __future__ import annotations

from typing import Dict, List, Optional

from .grid import Grid, TileKind
from .position import Position


def manhattan_ball(center: Position, radius: int) -> List[Position]:
    """Return every position within ``radius`` Manhattan steps of ``center``.

    The result is not clipped to any grid, so it may contain negative or
    otherwise out-of-bounds coordinates, and it includes ``center`` itself.
    Candidates are generated from the bounding square, column by column.
    """

    within: List[Position] = []
    for x in range(center.x - radius, center.x + radius + 1):
        for y in range(center.y - radius, center.y + radius + 1):
            candidate = Position(x, y)
            if center.manhattan(candidate) <= radius:
                within.append(candidate)
    return within


def _leg(delta: int) -> List[int]:
    """Signed offsets 1..delta (empty when delta is 0)."""
    step = 1 if delta > 0 else -1
    return [step * i for i in range(1, abs(delta) + 1)]


def l_shaped_path(origin: Position, target: Position, *, horizontal_first: bool) -> List[Position]:
    """Return the tiles walked from ``origin`` to ``target`` with at most one bend.

    The walk covers one axis completely, then the other. The origin is
    excluded and the target is always the last element. When the delta along
    an axis is zero that leg is empty, so straight moves come out as a
    single leg.
    """

    delta = origin.distance(target)
    if horizontal_first:
        first = [origin.translate(dx, 0) for dx in _leg(delta.x)]
        second = [origin.translate(delta.x, dy) for dy in _leg(delta.y)]
    else:
        first = [origin.translate(0, dy) for dy in _leg(delta.y)]
        second = [origin.translate(dx, delta.y) for dx in _leg(delta.x)]
    return first + second


_DEFAULT_KIND_SYMBOLS: Dict[TileKind, str] = {
    TileKind.LAND: ".",
    TileKind.OCEAN: "~",
    TileKind.MOUNTAIN: "^",
    TileKind.SAND: ":",
}

_DEFAULT_OCCUPANT_SYMBOLS: Dict[str, str] = {
    "User": "@",
    "Fauna": "f",
    "Flora": "*",
}


def render_ascii_map(
    grid: Grid,
    *,
    kind_symbols: Optional[Dict[TileKind, str]] = None,
    occupant_symbols: Optional[Dict[str, str]] = None,
) -> str:
    """Render the grid top row first, one character per tile.

    Occupied tiles show the occupant symbol (keyed by entity kind); empty
    tiles show the terrain symbol. Unknown kinds fall back to ``?``. Display
    only, not round-trippable.
    """

    kinds = {**_DEFAULT_KIND_SYMBOLS, **(kind_symbols or {})}
    occupants = {**_DEFAULT_OCCUPANT_SYMBOLS, **(occupant_symbols or {})}

    lines: List[str] = []
    for row in grid.rows():
        chars: List[str] = []
        for tile in row:
            if tile.occupant is not None:
                chars.append(occupants.get(tile.occupant.kind, "?"))
            else:
                chars.append(kinds.get(tile.kind, "?"))
        lines.append("".join(chars))
    return "\n".join(lines)
