"""Scripted expedition across the sample island.

Loads a scenario, then greedily walks the first user toward the nearest
collectable entity, collecting whatever it lands on, until nothing reachable
is left or the step limit runs out:

    python examples/expedition/run.py --steps 6
    python examples/expedition/run.py --scenario lagoon --verbose

Set RESEARCHSIM_NO_COLOR=1 to disable colored output.
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from researchsim import (
    Position,
    Scenario,
    ScenarioLoader,
    User,
    get_possible_moves,
    is_collectable,
    move,
    render_ascii_map,
)
from researchsim.logging_utils import LOG_TAG_INFO, LOG_TAG_SUCCESS, log_info, log_success

SCENARIOS_DIR = Path(__file__).resolve().parent.parent / "scenarios"


def nearest_collectable(scenario: Scenario, user: User) -> Position | None:
    targets = [entity.position for entity in scenario.entities() if is_collectable(entity)]
    if not targets:
        return None
    return min(targets, key=user.position.manhattan)


def choose_step(scenario: Scenario, user: User, goal: Position) -> Position | None:
    options = get_possible_moves(scenario.grid, user)
    if not options:
        return None
    if goal in options:
        return goal
    return min(options, key=goal.manhattan)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--scenario", default="island")
    parser.add_argument("--steps", type=int, default=8)
    parser.add_argument("--verbose", action="store_true", help="Trace every rule check")
    args = parser.parse_args()

    if args.verbose:
        os.environ["RESEARCHSIM_VERBOSE"] = "1"

    scenario = ScenarioLoader(scenarios_dir=SCENARIOS_DIR).load(args.scenario)
    user = next(entity for entity in scenario.entities() if isinstance(entity, User))

    print(scenario)
    print(render_ascii_map(scenario.grid))

    for step in range(1, args.steps + 1):
        goal = nearest_collectable(scenario, user)
        if goal is None:
            log_info(f"{LOG_TAG_INFO} Nothing left to collect")
            break
        target = choose_step(scenario, user, goal)
        if target is None or target == user.position:
            log_info(f"{LOG_TAG_INFO} {user.name} is stuck at {user.position}")
            break
        points = move(scenario, user, target)
        log_success(f"{LOG_TAG_SUCCESS} Step {step}: {user.name} -> {target} (+{points})")

    print()
    print(scenario.log)
    print(render_ascii_map(scenario.grid))
    log_success(
        f"{LOG_TAG_SUCCESS} Collected {scenario.log.entities_collected} entities for "
        f"{scenario.log.points_earned} points over {scenario.log.tiles_traversed} tiles"
    )


if __name__ == "__main__":
    main()
