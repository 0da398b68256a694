"""Movement validation for users and wild animals.

A move is legal when the target is a different in-bounds tile within the
mover's budget, the mover may stand on the target terrain, the target is free
(or, for users, holds something collectable), and the route can be walked as
an L: straight along one axis, then straight along the other. Both orderings
are tried. Every tile on the route before the target must be walkable
terrain and completely empty.

Users have a fixed budget of USER_MOVE_DISTANCE regardless of the size
table; animals use ``size.move_distance``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from .collection import try_collect
from .environment import Grid, Position, l_shaped_path, manhattan_ball
from .errors import OutOfBoundsError
from .logging_utils import (
    LOG_TAG_DETERMINISTIC,
    LOG_TAG_SUCCESS,
    log_deterministic,
    log_success,
    verbose_enabled,
)
from .schemas import Entity, MoveEvent, User, is_collectable, is_movable

if TYPE_CHECKING:  # pragma: no cover
    from .scenario import Scenario

USER_MOVE_DISTANCE = 4


@dataclass(frozen=True)
class MoveCheck:
    """Outcome of :func:`check_move`.

    ``allowed`` is False whenever ``error`` is set.
    """

    allowed: bool
    error: Optional[OutOfBoundsError] = None


def move_budget(entity: Entity) -> int:
    """Maximum Manhattan distance ``entity`` may cover in one move."""
    if isinstance(entity, User):
        return USER_MOVE_DISTANCE
    return entity.size.move_distance


def _require_movable(entity: Entity) -> None:
    if not is_movable(entity):
        raise TypeError(f"{entity.kind} entities cannot move")


def _tile_is_passable(grid: Grid, entity: Entity, position: Position, *, final: bool) -> bool:
    """Check one tile of a route.

    Intermediate tiles must be empty. The final tile may also hold a
    collectable occupant when the mover is a user.
    """

    if entity.position.manhattan(position) > move_budget(entity):
        return False

    tile = grid.tile_at(position)
    if not entity.can_occupy(tile.kind):
        return False

    if tile.occupant is None:
        return True
    return final and isinstance(entity, User) and is_collectable(tile.occupant)


def _route_is_clear(grid: Grid, entity: Entity, target: Position, *, horizontal_first: bool) -> bool:
    path = l_shaped_path(entity.position, target, horizontal_first=horizontal_first)
    return all(
        _tile_is_passable(grid, entity, step, final=False) for step in path[:-1]
    )


def can_move(grid: Grid, entity: Entity, target: Position) -> bool:
    """Return whether ``entity`` may move to ``target`` on ``grid``.

    Raises:
        OutOfBoundsError: If ``target`` is outside ``grid``.
        TypeError: If ``entity`` is not movable (plants).
    """

    _require_movable(entity)
    grid.require_in_bounds(target)

    if target == entity.position:
        return False

    if not _tile_is_passable(grid, entity, target, final=True):
        return False

    return _route_is_clear(grid, entity, target, horizontal_first=True) or _route_is_clear(
        grid, entity, target, horizontal_first=False
    )


def check_move(grid: Grid, entity: Entity, target: Position) -> MoveCheck:
    """Like :func:`can_move`, but an out-of-bounds target is reported, not raised."""

    try:
        return MoveCheck(allowed=can_move(grid, entity, target))
    except OutOfBoundsError as exc:
        return MoveCheck(allowed=False, error=exc)


def get_possible_moves(grid: Grid, entity: Entity) -> List[Position]:
    """Every position ``entity`` could legally move to right now.

    Candidates come from the Manhattan ball of the entity's move budget;
    candidates that fall off the grid are dropped.
    """

    _require_movable(entity)
    candidates = manhattan_ball(entity.position, move_budget(entity))
    return [target for target in candidates if check_move(grid, entity, target).allowed]


def move(scenario: "Scenario", entity: Entity, target: Position) -> int:
    """Move ``entity`` to ``target`` and return any points collected on arrival.

    The caller must have checked :func:`can_move`; the move is not validated
    again here. The MoveEvent is always logged before any CollectEvent. A
    collection failure never stops the move.
    """

    _require_movable(entity)
    grid = scenario.grid
    origin = entity.position

    scenario.log.append(MoveEvent.record(entity, target))
    if verbose_enabled():
        log_deterministic(f"  {LOG_TAG_DETERMINISTIC} [{entity.display_name()}] {origin} -> {target}")

    points = 0
    if isinstance(entity, User):
        # A failed collection (usually an empty tile) is dropped.
        points = try_collect(scenario, entity, target).points

    grid.clear(origin)
    grid.occupy(target, entity)
    entity.position = target

    if verbose_enabled():
        log_success(f"  {LOG_TAG_SUCCESS} [{entity.display_name()}] Now at {target}")
    return points
