"""
researchsim - grid exploration simulation.

A researcher walks a terrain grid collecting plants and animals. Moves follow
one-bend (L-shaped) routes, every action lands in an ordered event log, and
whole scenarios round-trip through a plain-text save format.

No global state: every rule receives the grid or scenario it acts on.
"""

__version__ = "0.1.0"

from .errors import BadSaveError, NoSuchEntityError, OutOfBoundsError, ResearchSimError
from .environment import (
    Grid,
    GridState,
    Position,
    Tile,
    TileKind,
    TileState,
    l_shaped_path,
    manhattan_ball,
    render_ascii_map,
)

# Core schemas
from .schemas import (
    AnyEntity,
    CollectEvent,
    Entity,
    Event,
    Fauna,
    Flora,
    MoveEvent,
    ScenarioState,
    Size,
    User,
    is_collectable,
    is_movable,
)

# Collaborators
from .event_log import EventLog
from .animals import AnimalController

# Scenario + save format
from .scenario import MAX_SIZE, MIN_SIZE, Scenario, ScenarioLoader, ScenarioRegistry, load_scenario
from .codec import decode_entity, decode_scenario, encode_scenario

# Rules
from .movement import (
    USER_MOVE_DISTANCE,
    MoveCheck,
    can_move,
    check_move,
    get_possible_moves,
    move,
    move_budget,
)
from .collection import CollectionResult, collect, get_possible_collections, try_collect

__all__ = [
    # Errors
    "ResearchSimError",
    "OutOfBoundsError",
    "NoSuchEntityError",
    "BadSaveError",
    # Environment
    "Grid",
    "GridState",
    "Position",
    "Tile",
    "TileKind",
    "TileState",
    "l_shaped_path",
    "manhattan_ball",
    "render_ascii_map",
    # Schemas
    "AnyEntity",
    "Entity",
    "User",
    "Fauna",
    "Flora",
    "Size",
    "Event",
    "MoveEvent",
    "CollectEvent",
    "ScenarioState",
    "is_collectable",
    "is_movable",
    # Collaborators
    "EventLog",
    "AnimalController",
    # Scenario
    "Scenario",
    "ScenarioLoader",
    "ScenarioRegistry",
    "load_scenario",
    "MIN_SIZE",
    "MAX_SIZE",
    "decode_entity",
    "decode_scenario",
    "encode_scenario",
    # Rules
    "USER_MOVE_DISTANCE",
    "MoveCheck",
    "can_move",
    "check_move",
    "get_possible_moves",
    "move",
    "move_budget",
    "CollectionResult",
    "collect",
    "get_possible_collections",
    "try_collect",
]
