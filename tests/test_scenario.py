"""Tests for Scenario construction, placement and the registry."""

import json

import pytest

from researchsim import (
    MAX_SIZE,
    MIN_SIZE,
    Fauna,
    Flora,
    OutOfBoundsError,
    Position,
    Scenario,
    ScenarioRegistry,
    Size,
    TileKind,
    User,
)


@pytest.mark.parametrize(
    "width,height,seed,message",
    [
        (MIN_SIZE - 1, 5, 0, "width"),
        (MAX_SIZE + 1, 5, 0, "width"),
        (5, MIN_SIZE - 1, 0, "height"),
        (5, MAX_SIZE + 1, 0, "height"),
        (5, 5, -1, "seed"),
    ],
)
def test_constructor_validation(width, height, seed, message):
    with pytest.raises(ValueError, match=message):
        Scenario("bad", width, height, seed)


def test_constructor_rejects_missing_name():
    with pytest.raises(ValueError, match="name"):
        Scenario(None, 5, 5, 0)


def test_new_scenario_is_empty_land():
    scenario = Scenario("blank", MAX_SIZE, MIN_SIZE, 3)

    assert scenario.size == MAX_SIZE * MIN_SIZE
    assert all(tile.kind is TileKind.LAND for tile in scenario.grid.tiles)
    assert scenario.entities() == []
    assert len(scenario.log) == 0
    assert len(scenario.animals) == 0


def test_str():
    scenario = Scenario("Delta", 6, 5, 0)
    scenario.place(User(position=Position(1, 1), name="x"))
    assert str(scenario) == "Delta\nWidth: 6, Height: 5\nEntities: 1"


def test_equality_ignores_seed():
    assert Scenario("a", 5, 5, 1) == Scenario("a", 5, 5, 2)
    assert Scenario("a", 5, 5, 1) != Scenario("b", 5, 5, 1)
    assert Scenario("a", 5, 5, 1) != Scenario("a", 6, 5, 1)

    left, right = Scenario("a", 5, 5, 1), Scenario("a", 5, 5, 1)
    left.place(Flora(size=Size.SMALL, position=Position(0, 0)))
    assert left != right


def test_seeded_random_is_reproducible():
    draws = [Scenario("r", 5, 5, 11).random.random() for _ in range(2)]
    assert draws[0] == draws[1]


def test_set_terrain_size_mismatch():
    scenario = Scenario("t", 5, 5, 0)
    with pytest.raises(ValueError):
        scenario.set_terrain([TileKind.OCEAN] * 24)


def test_set_terrain_resets_inhabitants():
    scenario = Scenario("t", 5, 5, 0)
    scenario.place(Fauna(size=Size.SMALL, position=Position(0, 0), habitat=TileKind.LAND))
    scenario.set_terrain([TileKind.SAND] * 25)

    assert scenario.entities() == []
    assert len(scenario.animals) == 0
    assert scenario.grid.tile_at(Position(4, 4)).kind is TileKind.SAND


def test_place_rules():
    scenario = Scenario("p", 5, 5, 0)
    scenario.set_terrain([TileKind.OCEAN] + [TileKind.LAND] * 24)

    with pytest.raises(OutOfBoundsError):
        scenario.place(User(position=Position(5, 0), name="x"))
    with pytest.raises(ValueError):
        scenario.place(User(position=Position(0, 0), name="x"))  # ocean
    with pytest.raises(ValueError):
        scenario.place(Fauna(size=Size.SMALL, position=Position(1, 0), habitat=TileKind.OCEAN))

    fish = Fauna(size=Size.SMALL, position=Position(0, 0), habitat=TileKind.OCEAN)
    scenario.place(fish)
    assert fish in scenario.animals
    assert scenario.occupant_at(Position(0, 0)) is fish

    with pytest.raises(ValueError):
        scenario.place(Fauna(size=Size.LARGE, position=Position(0, 0), habitat=TileKind.OCEAN))


def test_to_state_is_json_friendly(survey):
    state = survey.scenario.to_state()
    payload = json.loads(state.model_dump_json())

    assert payload["name"] == "scenario1"
    assert payload["grid"]["width"] == 12
    assert len(payload["grid"]["rows"]) == 6
    assert [entity["kind"] for entity in payload["entities"]] == [
        "Fauna", "User", "User", "User", "Fauna",
    ]
    assert payload["events"] == []


def test_registry():
    registry = ScenarioRegistry()
    first, second = Scenario("first", 5, 5, 0), Scenario("second", 5, 5, 0)
    registry.add(first)
    registry.add(second)

    assert registry.names() == ["first", "second"]
    assert "first" in registry
    assert len(registry) == 2
    assert registry.get("second") is second

    with pytest.raises(LookupError):
        registry.active
    assert registry.set_active("first") is first
    assert registry.active is first

    with pytest.raises(KeyError):
        registry.set_active("third")
    with pytest.raises(KeyError):
        registry.get("third")

    registry.reset()
    assert len(registry) == 0
    with pytest.raises(LookupError):
        registry.active


@pytest.mark.parametrize("name", ["", "  ", "two\nlines"])
def test_constructor_rejects_unsaveable_names(name):
    with pytest.raises(ValueError, match="name"):
        Scenario(name, 5, 5, 0)
