"""
Scenarios: a named terrain grid, its inhabitants, and everything that has
happened on it.

This module provides:
- Scenario: owns the Grid, seed, EventLog and AnimalController
- ScenarioRegistry: explicit name -> Scenario lookup with an "active" pick
- ScenarioLoader: reads and writes save files in a scenarios directory

Design philosophy:
- Scenarios are data (text saves), not code - anyone can author a map by hand
- The grid size and seed are fixed for a scenario's lifetime; resizing means
  building a new scenario
- Nothing here is global: positions and rules receive the grid they act on

Usage:
    loader = ScenarioLoader()
    scenario = loader.load("island")
    user = scenario.entities()[0]
    moves = get_possible_moves(scenario.grid, user)
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .animals import AnimalController
from .config import Config
from .environment import Grid, GridState, Position, TileKind
from .event_log import EventLog
from .logging_utils import LOG_TAG_INFO, LOG_TAG_SUCCESS, log_info, log_success
from .schemas import Entity, Fauna, ScenarioState

MIN_SIZE = 5
MAX_SIZE = 15


class Scenario:
    """A single exploration session.

    Validation:
    - MIN_SIZE <= width, height <= MAX_SIZE
    - seed >= 0
    - name is not None
    Raises ValueError if any check fails.

    A new scenario is all LAND with no inhabitants; use ``set_terrain`` and
    ``place`` (or ``Scenario.decode``) to populate it.
    """

    def __init__(self, name: str, width: int, height: int, seed: int) -> None:
        if width > MAX_SIZE or width < MIN_SIZE:
            raise ValueError(
                f"The given width does not conform to the requirement: "
                f"{MIN_SIZE} <= width <= {MAX_SIZE} (got {width})."
            )
        if height > MAX_SIZE or height < MIN_SIZE:
            raise ValueError(
                f"The given height does not conform to the requirement: "
                f"{MIN_SIZE} <= height <= {MAX_SIZE} (got {height})."
            )
        if seed < 0:
            raise ValueError(
                f"The given seed does not conform to the requirement: 0 <= seed (got {seed})."
            )
        if name is None:
            raise ValueError("The given name does not conform to the requirement: name != None.")
        if not name.strip():
            raise ValueError("The given name does not conform to the requirement: name is not blank.")
        if name.splitlines() != [name]:
            raise ValueError(
                f"The given name does not conform to the requirement: a single line (got {name!r})."
            )

        self.name = name
        self.width = width
        self.height = height
        self.seed = seed
        self.grid = Grid.filled(width, height)
        self.log = EventLog()
        self.animals = AnimalController()
        self.random = random.Random(seed)

    @property
    def size(self) -> int:
        return self.width * self.height

    def set_terrain(self, kinds: Sequence[TileKind]) -> None:
        """Replace the map with fresh, empty tiles of the given kinds (row-major)."""
        if len(kinds) != self.size:
            raise ValueError(
                f"Terrain for a {self.width}x{self.height} scenario needs {self.size} "
                f"tiles, got {len(kinds)}"
            )
        self.grid = Grid.from_kinds(self.width, self.height, kinds)
        self.animals = AnimalController()

    def place(self, entity: Entity) -> None:
        """Put ``entity`` on the map at its own position.

        Raises:
            OutOfBoundsError: If the entity's position is off the map.
            ValueError: If the tile is occupied or the terrain does not suit
                the entity.
        """

        tile = self.grid.tile_at(entity.position)
        if tile.has_occupant():
            raise ValueError(f"Tile {entity.position} is already occupied by {tile.occupant}")
        if not entity.can_occupy(tile.kind):
            raise ValueError(f"{entity} cannot be placed on {tile.kind.value}")
        tile.occupant = entity
        if isinstance(entity, Fauna):
            self.animals.add(entity)

    def entities(self) -> List[Entity]:
        """All inhabitants in row-major tile order."""
        return [entity for _, entity in self.grid.occupied()]

    def occupant_at(self, position: Position) -> Entity:
        return self.grid.occupant_at(position)

    def encode(self) -> str:
        from .codec import encode_scenario

        return encode_scenario(self)

    @classmethod
    def decode(cls, text: str) -> "Scenario":
        from .codec import decode_scenario

        return decode_scenario(text)

    def to_state(self) -> ScenarioState:
        return ScenarioState(
            name=self.name,
            seed=self.seed,
            grid=GridState.from_grid(self.grid),
            entities=self.entities(),
            events=self.log.events,
            points_earned=self.log.points_earned,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scenario):
            return NotImplemented
        return (
            self.name == other.name
            and self.width == other.width
            and self.height == other.height
            and self.grid.tiles == other.grid.tiles
        )

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return "\n".join(
            [
                self.name,
                f"Width: {self.width}, Height: {self.height}",
                f"Entities: {len(self.entities())}",
            ]
        )


class ScenarioRegistry:
    """Scenarios known to a session, by name, with one optionally active.

    Nothing in the core consults the registry implicitly; it is a
    convenience for front-ends juggling several loaded scenarios.
    """

    def __init__(self) -> None:
        self._scenarios: Dict[str, Scenario] = {}
        self._active: Optional[str] = None

    def add(self, scenario: Scenario) -> None:
        self._scenarios[scenario.name] = scenario

    def get(self, name: str) -> Scenario:
        try:
            return self._scenarios[name]
        except KeyError:
            raise KeyError(f"No scenario named {name!r}") from None

    def set_active(self, name: str) -> Scenario:
        scenario = self.get(name)
        self._active = name
        return scenario

    @property
    def active(self) -> Scenario:
        if self._active is None:
            raise LookupError("No scenario is active")
        return self._scenarios[self._active]

    def names(self) -> List[str]:
        return list(self._scenarios)

    def reset(self) -> None:
        self._scenarios.clear()
        self._active = None

    def __contains__(self, name: object) -> bool:
        return name in self._scenarios

    def __len__(self) -> int:
        return len(self._scenarios)


class ScenarioLoader:
    """Load and save scenario files from a directory.

    Directory structure:
    - Default: Config.SCENARIOS_DIR ({PROJECT_ROOT}/examples/scenarios)
    - Override via constructor: ScenarioLoader(Path("/custom/scenarios"))
    - Scenario files: {scenario_name}{Config.SCENARIO_SUFFIX} (e.g. "island.txt")

    When a registry is supplied every loaded scenario is added to it.
    """

    def __init__(
        self,
        scenarios_dir: Optional[Path] = None,
        registry: Optional[ScenarioRegistry] = None,
    ):
        self.scenarios_dir = Path(scenarios_dir) if scenarios_dir is not None else Config.SCENARIOS_DIR
        self.suffix = Config.SCENARIO_SUFFIX
        self.registry = registry

    def path_for(self, scenario_name: str) -> Path:
        return self.scenarios_dir / f"{scenario_name}{self.suffix}"

    def load(self, scenario_name: str) -> Scenario:
        """Load a scenario by name from the scenarios directory.

        Raises:
            FileNotFoundError: If the file doesn't exist in scenarios_dir
            BadSaveError: If the file is not a valid save
        """
        scenario_path = self.path_for(scenario_name)
        if not scenario_path.exists():
            raise FileNotFoundError(
                f"Scenario '{scenario_name}' not found at {scenario_path}"
            )
        return self.load_path(scenario_path)

    def load_path(self, path: Path) -> Scenario:
        from .codec import decode_scenario

        path = Path(path)
        with path.open(encoding="utf-8") as handle:
            scenario = decode_scenario(handle)
        log_info(f"{LOG_TAG_INFO} Loaded scenario '{scenario.name}' from {path}")

        if self.registry is not None:
            self.registry.add(scenario)
        return scenario

    def save(self, scenario: Scenario, scenario_name: Optional[str] = None) -> Path:
        """Write ``scenario`` as ``{scenario_name or scenario.name}{suffix}``."""
        path = self.path_for(scenario_name or scenario.name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(scenario.encode(), encoding="utf-8")
        log_success(f"{LOG_TAG_SUCCESS} Saved scenario '{scenario.name}' to {path}")
        return path

    def list_scenarios(self) -> List[str]:
        """List all available scenario names (without the suffix)."""
        if not self.scenarios_dir.exists():
            return []

        return sorted(
            f.stem for f in self.scenarios_dir.glob(f"*{self.suffix}")
            if not f.name.startswith("_")
        )

    def get_scenario_info(self, scenario_name: str) -> Dict[str, Any]:
        """Summary of a scenario: name, dimensions, seed and entity count."""
        scenario = self.load(scenario_name)
        return {
            "name": scenario.name,
            "width": scenario.width,
            "height": scenario.height,
            "seed": scenario.seed,
            "num_entities": len(scenario.entities()),
        }


def load_scenario(scenario_name: Optional[str] = None) -> Scenario:
    """Convenience function to load a scenario from Config.SCENARIOS_DIR.

    Falls back to Config.DEFAULT_SCENARIO when no name is given.
    """
    loader = ScenarioLoader()
    return loader.load(scenario_name or Config.DEFAULT_SCENARIO)
