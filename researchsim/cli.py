"""Command-line access to scenario saves.

Examples:

    python -m researchsim list
    python -m researchsim config
    python -m researchsim show island
    python -m researchsim moves island 0 0
    python -m researchsim move examples/scenarios/island.txt 0 0 0 3 --save

The scenario argument is either a path to a save file or the name of a
scenario in Config.SCENARIOS_DIR.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .collection import get_possible_collections
from .config import Config
from .environment import Position, render_ascii_map
from .errors import ResearchSimError
from .logging_utils import (
    LOG_TAG_ERROR,
    LOG_TAG_INFO,
    LOG_TAG_SUCCESS,
    log_error,
    log_info,
    log_success,
)
from .movement import can_move, get_possible_moves, move
from .scenario import Scenario, ScenarioLoader
from .schemas import Entity, User, is_movable


def _resolve(loader: ScenarioLoader, source: str) -> Tuple[Scenario, Path]:
    path = Path(source)
    if path.is_file():
        return loader.load_path(path), path
    return loader.load(source), loader.path_for(source)


def _format_positions(positions: List[Position]) -> str:
    return " ".join(str(position) for position in positions) or "(none)"


def _require_movable(entity: Entity) -> bool:
    if not is_movable(entity):
        log_error(f"{LOG_TAG_ERROR} {entity} cannot move")
        return False
    return True


def _cmd_list(loader: ScenarioLoader, args: argparse.Namespace) -> int:
    names = loader.list_scenarios()
    if not names:
        log_info(f"{LOG_TAG_INFO} No scenarios found in {loader.scenarios_dir}")
        return 0
    for name in names:
        print(name)
    return 0


def _cmd_config(loader: ScenarioLoader, args: argparse.Namespace) -> int:
    print(Config.display())
    return 0


def _cmd_show(loader: ScenarioLoader, args: argparse.Namespace) -> int:
    scenario, _ = _resolve(loader, args.scenario)
    if args.json:
        print(scenario.to_state().model_dump_json(indent=2))
        return 0
    print(scenario)
    print(render_ascii_map(scenario.grid))
    for entity in scenario.entities():
        print(f"  {entity}")
    return 0


def _cmd_moves(loader: ScenarioLoader, args: argparse.Namespace) -> int:
    scenario, _ = _resolve(loader, args.scenario)
    entity = scenario.occupant_at(Position(args.x, args.y))
    if not _require_movable(entity):
        return 1
    print(_format_positions(get_possible_moves(scenario.grid, entity)))
    return 0


def _cmd_collections(loader: ScenarioLoader, args: argparse.Namespace) -> int:
    scenario, _ = _resolve(loader, args.scenario)
    entity = scenario.occupant_at(Position(args.x, args.y))
    if not isinstance(entity, User):
        log_error(f"{LOG_TAG_ERROR} Only users can collect; {entity} is not a user")
        return 1
    print(_format_positions(get_possible_collections(scenario.grid, entity)))
    return 0


def _cmd_move(loader: ScenarioLoader, args: argparse.Namespace) -> int:
    scenario, path = _resolve(loader, args.scenario)
    entity = scenario.occupant_at(Position(args.x, args.y))
    target = Position(args.tx, args.ty)
    if not _require_movable(entity):
        return 1

    if not can_move(scenario.grid, entity, target):
        log_error(f"{LOG_TAG_ERROR} {entity} cannot move to {target}")
        return 1

    points = move(scenario, entity, target)
    print(scenario.log)
    log_success(f"{LOG_TAG_SUCCESS} Points earned: {points}")

    if args.save:
        path.write_text(scenario.encode(), encoding="utf-8")
        log_success(f"{LOG_TAG_SUCCESS} Saved to {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="researchsim",
        description="Inspect and play researchsim scenario saves.",
    )
    parser.add_argument(
        "--scenarios-dir",
        type=Path,
        default=None,
        help=f"Directory of named scenarios (default: {Config.SCENARIOS_DIR})",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List scenarios in the scenarios directory")
    sub.add_parser("config", help="Print the active configuration")

    show = sub.add_parser("show", help="Print a scenario summary and map")
    show.add_argument("scenario", nargs="?", default=Config.DEFAULT_SCENARIO)
    show.add_argument("--json", action="store_true", help="Dump a JSON snapshot instead")

    for name, help_text in (
        ("moves", "List legal moves for the entity at X Y"),
        ("collections", "List collectable neighbours of the user at X Y"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("scenario")
        cmd.add_argument("x", type=int)
        cmd.add_argument("y", type=int)

    move_cmd = sub.add_parser("move", help="Move the entity at X Y to TX TY")
    move_cmd.add_argument("scenario")
    for coord in ("x", "y", "tx", "ty"):
        move_cmd.add_argument(coord, type=int)
    move_cmd.add_argument("--save", action="store_true", help="Write the result back")

    return parser


_COMMANDS = {
    "list": _cmd_list,
    "config": _cmd_config,
    "show": _cmd_show,
    "moves": _cmd_moves,
    "collections": _cmd_collections,
    "move": _cmd_move,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    Config.validate()
    loader = ScenarioLoader(scenarios_dir=args.scenarios_dir)
    try:
        return _COMMANDS[args.command](loader, args)
    except (ResearchSimError, FileNotFoundError) as exc:
        log_error(f"{LOG_TAG_ERROR} {exc}")
        return 1
