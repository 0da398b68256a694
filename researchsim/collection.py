"""Harvesting plants and animals.

A user may collect any Fauna or Flora. The neighbourhood enumeration only
offers the four orthogonal neighbours, but ``collect`` itself has no range
limit: ``move`` relies on that when a user lands on a distant collectable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from .environment import Grid, Position
from .errors import NoSuchEntityError, OutOfBoundsError
from .logging_utils import (
    LOG_TAG_DETERMINISTIC,
    LOG_TAG_SUCCESS,
    log_deterministic,
    log_success,
    verbose_enabled,
)
from .schemas import CollectEvent, Fauna, User, is_collectable

if TYPE_CHECKING:  # pragma: no cover
    from .scenario import Scenario

# left, up, down, right
_NEIGHBOUR_OFFSETS = ((-1, 0), (0, -1), (0, 1), (1, 0))


@dataclass(frozen=True)
class CollectionResult:
    """Outcome of :func:`try_collect`.

    ``error`` holds the OutOfBoundsError or NoSuchEntityError that ``collect``
    would have raised; ``points`` is 0 in that case.
    """

    points: int = 0
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def get_possible_collections(grid: Grid, user: User) -> List[Position]:
    """Orthogonal neighbours of ``user`` holding something collectable."""

    candidates = [user.position.translate(dx, dy) for dx, dy in _NEIGHBOUR_OFFSETS]
    return [
        position
        for position in candidates
        if grid.in_bounds(position)
        and grid.tile_at(position).has_occupant()
        and is_collectable(grid.tile_at(position).get_occupant())
    ]


def collect(scenario: "Scenario", user: User, coordinate: Position) -> int:
    """Collect whatever stands on ``coordinate`` and return the points earned.

    Collecting a non-collectable occupant (another user) is a silent no-op
    that returns 0 and logs nothing.

    Raises:
        OutOfBoundsError: If ``coordinate`` is outside the scenario grid.
        NoSuchEntityError: If the tile at ``coordinate`` is empty.
    """

    grid = scenario.grid
    target = grid.occupant_at(coordinate)
    if not is_collectable(target):
        return 0

    # Snapshot both parties before any state changes.
    scenario.log.append(CollectEvent.record(user, target))
    grid.clear(coordinate)
    if isinstance(target, Fauna):
        scenario.animals.remove(target)

    points = target.size.points
    if verbose_enabled():
        log_success(f"  {LOG_TAG_SUCCESS} [{user.name}] Collected {target} (+{points})")
    return points


def try_collect(scenario: "Scenario", user: User, coordinate: Position) -> CollectionResult:
    """Run :func:`collect`, returning its failure instead of raising it."""

    try:
        return CollectionResult(points=collect(scenario, user, coordinate))
    except (OutOfBoundsError, NoSuchEntityError) as exc:
        if verbose_enabled():
            log_deterministic(f"  {LOG_TAG_DETERMINISTIC} [{user.name}] Nothing collected: {exc}")
        return CollectionResult(error=exc)
