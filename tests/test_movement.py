"""Tests for L-shaped movement validation and applying moves."""

import pytest

from researchsim import (
    USER_MOVE_DISTANCE,
    CollectEvent,
    Fauna,
    Flora,
    MoveEvent,
    OutOfBoundsError,
    Position,
    Size,
    TileKind,
    User,
    can_move,
    check_move,
    get_possible_moves,
    manhattan_ball,
    move,
    move_budget,
)

from conftest import make_scenario


def test_can_move_examples(survey):
    grid, user1 = survey.grid, survey.user1

    assert can_move(grid, user1, Position(8, 3)) is True  # straight, distance 3
    assert can_move(grid, user1, Position(11, 3)) is False  # zero distance
    assert can_move(grid, user1, Position(11, 5)) is False  # blocked both ways by the horse
    assert can_move(grid, user1, Position(7, 2)) is False  # distance 5

    with pytest.raises(OutOfBoundsError):
        can_move(grid, user1, Position(14, 3))


def test_user_target_occupancy(survey):
    grid = survey.grid
    assert can_move(grid, survey.user2, Position(5, 2)) is False  # another user
    assert can_move(grid, survey.user2, Position(2, 1)) is True  # collectable
    assert can_move(grid, survey.user2, Position(6, 2)) is False  # path crosses a user


def test_user_budget_boundary():
    scenario = make_scenario("open")
    user = User(position=Position(0, 0), name="walker")
    scenario.place(user)

    assert move_budget(user) == USER_MOVE_DISTANCE == 4
    assert can_move(scenario.grid, user, Position(4, 0)) is True
    assert can_move(scenario.grid, user, Position(2, 2)) is True
    assert can_move(scenario.grid, user, Position(5, 0)) is False
    assert can_move(scenario.grid, user, Position(3, 2)) is False


def test_possible_moves_for_user1(survey):
    expected = {
        Position(11, 0), Position(11, 1), Position(11, 2), Position(11, 4),
        Position(10, 0), Position(10, 1), Position(10, 2), Position(10, 3),
        Position(10, 4), Position(10, 5),
        Position(9, 1), Position(9, 2), Position(9, 3), Position(9, 4), Position(9, 5),
        Position(8, 2), Position(8, 3), Position(8, 4),
        Position(7, 3),
    }
    moves = get_possible_moves(survey.grid, survey.user1)
    assert set(moves) == expected
    assert len(moves) == len(expected)


def test_possible_moves_for_user2(survey):
    moves = set(get_possible_moves(survey.grid, survey.user2))
    assert Position(2, 1) in moves  # collectable mouse
    assert Position(5, 2) not in moves  # user3
    assert Position(6, 2) not in moves  # behind user3
    assert Position(4, 2) not in moves  # own tile
    assert all(position.in_bounds(survey.grid) for position in moves)


@pytest.mark.parametrize("name", ["user1", "user2", "user3", "fauna1", "fauna2"])
def test_possible_moves_match_can_move(survey, name):
    entity = getattr(survey, name)
    grid = survey.grid
    by_hand = {
        target
        for target in manhattan_ball(entity.position, move_budget(entity))
        if grid.in_bounds(target) and can_move(grid, entity, target)
    }
    assert set(get_possible_moves(grid, entity)) == by_hand


def test_check_move_reports_out_of_bounds(survey):
    result = check_move(survey.grid, survey.user1, Position(14, 3))
    assert result.allowed is False
    assert isinstance(result.error, OutOfBoundsError)

    assert check_move(survey.grid, survey.user1, Position(8, 3)).allowed is True
    assert check_move(survey.grid, survey.user1, Position(8, 3)).error is None


def test_user_terrain_and_single_bend():
    kinds = [TileKind.LAND] * 25
    kinds[1] = TileKind.MOUNTAIN  # (1,0)
    kinds[3] = TileKind.OCEAN  # (3,0)
    scenario = make_scenario("ridge", 5, 5, kinds)
    user = User(position=Position(0, 0), name="u")
    scenario.place(user)
    grid = scenario.grid

    assert can_move(grid, user, Position(1, 0)) is False  # mountain target
    assert can_move(grid, user, Position(3, 0)) is False  # ocean target
    assert can_move(grid, user, Position(1, 1)) is True  # vertical-first avoids the mountain
    assert can_move(grid, user, Position(2, 0)) is False  # straight line through the mountain

    kinds[5] = TileKind.MOUNTAIN  # (0,1) closes the other route
    scenario = make_scenario("walled", 5, 5, kinds)
    user = User(position=Position(0, 0), name="u")
    scenario.place(user)
    assert can_move(scenario.grid, user, Position(1, 1)) is False


def test_collectables_block_the_route_but_not_the_target():
    scenario = make_scenario("meadow", 5, 5)
    user = User(position=Position(0, 0), name="u")
    scenario.place(user)
    scenario.place(Flora(size=Size.SMALL, position=Position(1, 0)))

    assert can_move(scenario.grid, user, Position(1, 0)) is True
    assert can_move(scenario.grid, user, Position(2, 0)) is False
    assert can_move(scenario.grid, user, Position(2, 1)) is True  # around via (0,1)


def test_fauna_habitat_and_budget():
    kinds = [TileKind.OCEAN] * 10 + [TileKind.LAND] * 15
    scenario = make_scenario("coast", 5, 5, kinds)
    crab = Fauna(size=Size.SMALL, position=Position(0, 0), habitat=TileKind.OCEAN)
    dog = Fauna(size=Size.MEDIUM, position=Position(0, 4), habitat=TileKind.LAND)
    scenario.place(crab)
    scenario.place(dog)
    grid = scenario.grid

    assert can_move(grid, crab, Position(4, 0)) is True
    assert can_move(grid, crab, Position(0, 2)) is False  # land
    assert can_move(grid, crab, Position(2, 2)) is False  # land target
    assert can_move(grid, dog, Position(0, 2)) is True
    assert can_move(grid, dog, Position(0, 1)) is False  # ocean
    assert can_move(grid, dog, Position(4, 4)) is False  # MEDIUM budget is 3
    assert move_budget(dog) == 3


def test_fauna_never_lands_on_occupied_tiles(survey):
    grid = survey.grid
    scenario = survey.scenario
    scenario.place(Flora(size=Size.SMALL, position=Position(2, 3)))
    mouse = survey.fauna2  # SMALL at (2,1), budget 4

    assert can_move(grid, mouse, Position(2, 3)) is False
    assert can_move(grid, mouse, Position(2, 2)) is True
    assert can_move(grid, survey.fauna1, Position(11, 3)) is False  # user1


def test_flora_cannot_move(flower):
    scenario = make_scenario("garden", 5, 5)
    scenario.place(flower)
    with pytest.raises(TypeError):
        can_move(scenario.grid, flower, Position(1, 1))
    with pytest.raises(TypeError):
        get_possible_moves(scenario.grid, flower)


def test_move_only(survey):
    scenario = survey.scenario
    points = move(scenario, survey.user1, Position(8, 3))

    assert points == 0
    assert len(scenario.log) == 1
    event = scenario.log.events[0]
    assert isinstance(event, MoveEvent)
    assert event.origin == Position(11, 3)
    assert event.target == Position(8, 3)
    assert scenario.grid.tile_at(Position(8, 3)).occupant is survey.user1
    assert not scenario.grid.tile_at(Position(11, 3)).has_occupant()
    assert survey.user1.position == Position(8, 3)
    assert scenario.log.tiles_traversed == 3


def test_move_and_collect(survey):
    scenario = survey.scenario
    points = move(scenario, survey.user2, Position(2, 1))

    events = scenario.log.events
    assert [type(event) for event in events] == [MoveEvent, CollectEvent]
    assert points == Size.SMALL.points
    assert isinstance(scenario.grid.tile_at(Position(2, 1)).occupant, User)
    assert not scenario.grid.tile_at(Position(4, 2)).has_occupant()
    assert survey.fauna2 not in scenario.animals
    assert events[1].origin == Position(4, 2)
    assert scenario.log.points_earned == Size.SMALL.points


def test_fauna_move_keeps_tracking(survey):
    scenario = survey.scenario
    assert can_move(scenario.grid, survey.fauna1, Position(11, 5))
    points = move(scenario, survey.fauna1, Position(11, 5))

    assert points == 0
    assert len(scenario.log) == 1
    assert survey.fauna1 in scenario.animals
    assert scenario.grid.tile_at(Position(11, 5)).occupant is survey.fauna1
    assert not scenario.grid.tile_at(Position(11, 4)).has_occupant()
