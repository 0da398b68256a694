"""Shared fixtures: a 12x6 all-LAND survey with two users side by side."""

from types import SimpleNamespace

import pytest

from researchsim import Fauna, Flora, Position, Scenario, Size, TileKind, User


def make_scenario(name="scenario1", width=12, height=6, kinds=None):
    scenario = Scenario(name, width, height, 0)
    if kinds is not None:
        scenario.set_terrain(kinds)
    return scenario


@pytest.fixture
def survey():
    scenario = make_scenario()
    user1 = User(position=Position(11, 3), name="user1")
    fauna1 = Fauna(size=Size.LARGE, position=Position(11, 4), habitat=TileKind.LAND)
    user2 = User(position=Position(4, 2), name="user2")
    fauna2 = Fauna(size=Size.SMALL, position=Position(2, 1), habitat=TileKind.LAND)
    user3 = User(position=Position(5, 2), name="user2")
    for entity in (user1, fauna1, user2, fauna2, user3):
        scenario.place(entity)
    return SimpleNamespace(
        scenario=scenario,
        grid=scenario.grid,
        user1=user1,
        user2=user2,
        user3=user3,
        fauna1=fauna1,
        fauna2=fauna2,
    )


@pytest.fixture
def flower():
    return Flora(size=Size.SMALL, position=Position(1, 2))
