"""
Pydantic schemas for the researchsim world.

Entities and events are defined here.

Design Philosophy:
- Entities form a closed tagged union on ``kind`` (User, Fauna, Flora); code
  dispatches on the variant or on the Movable/Collectable capabilities below
  rather than on open-ended subclassing
- Only an entity's ``position`` changes after construction
- Events hold deep-copied snapshots, so later moves never rewrite history
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Dict, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from researchsim.environment import GridState, Position, TileKind


# ============================================================================
# Entity Schemas
# ============================================================================


class Size(str, Enum):
    """Size category shared by every entity.

    Each size fixes how far a wild animal may travel in one move and how many
    points it is worth when collected.
    """

    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"
    GIANT = "GIANT"

    @property
    def move_distance(self) -> int:
        return _SIZE_TABLE[self][0]

    @property
    def points(self) -> int:
        return _SIZE_TABLE[self][1]


# size -> (move distance, points)
_SIZE_TABLE: Dict[Size, Tuple[int, int]] = {
    Size.SMALL: (4, 1),
    Size.MEDIUM: (3, 3),
    Size.LARGE: (2, 5),
    Size.GIANT: (1, 10),
}


class Entity(BaseModel):
    """Anything that can occupy a tile.

    Equality is by value: two entities are equal when they are the same kind,
    share a size and a position, and agree on any variant-specific fields.
    """

    kind: str
    size: Size
    position: Position

    def display_name(self) -> str:
        """Human-readable name used in renderings."""
        raise NotImplementedError

    def can_occupy(self, terrain: TileKind) -> bool:
        """Whether this entity may stand on (or be placed on) ``terrain``."""
        raise NotImplementedError

    def encode(self) -> str:
        return f"{self.kind}-{self.size.value}-{self.position.encode()}"

    def __str__(self) -> str:
        return f"{self.display_name()} [{self.kind}] at {self.position}"


class User(Entity):
    """The researcher exploring the map. Always MEDIUM sized."""

    kind: Literal["User"] = "User"
    size: Size = Size.MEDIUM
    name: str = Field(..., description="Display name of the researcher")

    @field_validator("size")
    @classmethod
    def _check_size(cls, size: Size) -> Size:
        if size is not Size.MEDIUM:
            raise ValueError(f"Users are always MEDIUM, got {size.value}")
        return size

    @field_validator("name")
    @classmethod
    def _check_name(cls, name: str) -> str:
        # Must survive the single-line, hyphen-separated save encoding.
        if not name.strip():
            raise ValueError("User names must not be blank")
        if "-" in name:
            raise ValueError(f"User names must not contain '-': {name!r}")
        if name.splitlines() != [name]:
            raise ValueError(f"User names must fit on one line: {name!r}")
        return name

    def display_name(self) -> str:
        return self.name

    def can_occupy(self, terrain: TileKind) -> bool:
        return terrain not in (TileKind.OCEAN, TileKind.MOUNTAIN)

    def encode(self) -> str:
        return f"{self.kind}-{self.position.encode()}-{self.name}"


_FAUNA_NAMES: Dict[Size, Tuple[str, str]] = {
    # size -> (land name, ocean name)
    Size.SMALL: ("Mouse", "Crab"),
    Size.MEDIUM: ("Dog", "Fish"),
    Size.LARGE: ("Horse", "Shark"),
    Size.GIANT: ("Elephant", "Whale"),
}


class Fauna(Entity):
    """A wild animal that lives on either land or ocean tiles."""

    kind: Literal["Fauna"] = "Fauna"
    habitat: TileKind

    @field_validator("habitat")
    @classmethod
    def _check_habitat(cls, habitat: TileKind) -> TileKind:
        if habitat not in (TileKind.LAND, TileKind.OCEAN):
            raise ValueError(f"Animal was created with a bad habitat: {habitat.value}")
        return habitat

    def display_name(self) -> str:
        land, ocean = _FAUNA_NAMES[self.size]
        return land if self.habitat is TileKind.LAND else ocean

    def can_occupy(self, terrain: TileKind) -> bool:
        if self.habitat is TileKind.OCEAN:
            return terrain is TileKind.OCEAN
        return terrain is not TileKind.OCEAN

    def encode(self) -> str:
        return f"{super().encode()}-{self.habitat.value}"

    def __str__(self) -> str:
        return f"{super().__str__()} [{self.habitat.value}]"


_FLORA_NAMES: Dict[Size, str] = {
    Size.SMALL: "Flower",
    Size.MEDIUM: "Shrub",
    Size.LARGE: "Sapling",
    Size.GIANT: "Tree",
}


class Flora(Entity):
    """A plant. Never moves; can be collected."""

    kind: Literal["Flora"] = "Flora"

    def display_name(self) -> str:
        return _FLORA_NAMES[self.size]

    def can_occupy(self, terrain: TileKind) -> bool:
        return terrain is not TileKind.OCEAN


# Discriminated union of every concrete entity variant.
AnyEntity = Annotated[Union[User, Fauna, Flora], Field(discriminator="kind")]

MOVABLE_KINDS = (User, Fauna)
COLLECTABLE_KINDS = (Fauna, Flora)


def is_movable(entity: Entity) -> bool:
    return isinstance(entity, MOVABLE_KINDS)


def is_collectable(entity: Entity) -> bool:
    return isinstance(entity, COLLECTABLE_KINDS)


# ============================================================================
# Event Schemas
# ============================================================================


class Event(BaseModel):
    """An immutable record of something a movable entity did.

    Events exist for human-readable reconstruction only; the core never
    replays them.
    """

    model_config = ConfigDict(frozen=True)

    actor: AnyEntity = Field(..., description="Snapshot of the acting entity before the action")
    origin: Position = Field(..., description="Where the actor stood before the action")
    target: Position = Field(..., description="Coordinate the action was aimed at")


class MoveEvent(Event):
    """``actor`` moved from ``origin`` to ``target``."""

    event_type: Literal["move"] = "move"

    @classmethod
    def record(cls, actor: Entity, target: Position) -> "MoveEvent":
        return cls(actor=actor.model_copy(deep=True), origin=actor.position, target=target)

    def __str__(self) -> str:
        return "\n".join([str(self.actor), f"MOVED TO {self.target}", "-" * 5])


class CollectEvent(Event):
    """A user collected ``collected`` (which stood on ``target``)."""

    event_type: Literal["collect"] = "collect"
    collected: AnyEntity = Field(..., description="Snapshot of the collected entity")

    @classmethod
    def record(cls, user: "User", collected: Entity) -> "CollectEvent":
        return cls(
            actor=user.model_copy(deep=True),
            origin=user.position,
            target=collected.position,
            collected=collected.model_copy(deep=True),
        )

    def __str__(self) -> str:
        return "\n".join([str(self.actor), "COLLECTED", str(self.collected), "-" * 5])


AnyEvent = Annotated[Union[MoveEvent, CollectEvent], Field(discriminator="event_type")]


# ============================================================================
# Snapshot Schemas
# ============================================================================


class ScenarioState(BaseModel):
    """JSON-friendly snapshot of a scenario for display and inspection.

    Not a save format: the text codec is the only persistence.
    """

    name: str
    seed: int
    grid: GridState
    entities: List[AnyEntity] = Field(default_factory=list)
    events: List[AnyEvent] = Field(default_factory=list)
    points_earned: int = 0
