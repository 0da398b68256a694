"""Tests for the Position value type."""

import pytest

from researchsim import BadSaveError, Grid, Position


def test_encode_and_str():
    position = Position(-2, -1)
    assert position.encode() == "-2,-1"
    assert str(position) == "(-2,-1)"
    assert str(Position()) == "(0,0)"


def test_decode_accepts_signed_integers():
    assert Position.decode("-2,-1") == Position(-2, -1)
    assert Position.decode("11,3") == Position(11, 3)
    assert Position.decode("+4,0") == Position(4, 0)


@pytest.mark.parametrize("encoded", ["1,2,3", "12", "", "a,1", "1,b", "1,", ",1", " 1,2", "1.5,2", "1_0,2"])
def test_decode_rejects_malformed(encoded):
    with pytest.raises(BadSaveError):
        Position.decode(encoded)


def test_value_semantics():
    assert Position(3, 4) == Position(3, 4)
    assert Position(3, 4) != Position(4, 3)
    assert len({Position(1, 1), Position(1, 1), Position(2, 1)}) == 2


def test_distance_manhattan_translate():
    origin = Position(11, 3)
    assert origin.distance(Position(8, 5)) == Position(-3, 2)
    assert origin.manhattan(Position(8, 5)) == 5
    assert origin.translate(-1, 2) == Position(10, 5)


def test_bounds_and_index_use_the_given_grid():
    grid = Grid(12, 6)
    assert Position(11, 5).in_bounds(grid)
    assert not Position(12, 3).in_bounds(grid)
    assert not Position(0, -1).in_bounds(grid)
    assert not Position(-1, 0).in_bounds(grid)
    assert Position(11, 3).index(grid) == 11 + 3 * 12
    assert Position.from_index(47, grid) == Position(11, 3)

    narrow = Grid(5, 5)
    assert not Position(11, 3).in_bounds(narrow)
