"""Terrain grid primitives for researchsim."""

from .position import Position, parse_int
from .grid import Grid, Tile, TileKind
from .schemas import GridState, TileState
from .helpers import l_shaped_path, manhattan_ball, render_ascii_map

__all__ = [
    "Position",
    "parse_int",
    "Grid",
    "Tile",
    "TileKind",
    "GridState",
    "TileState",
    "l_shaped_path",
    "manhattan_ball",
    "render_ascii_map",
]
