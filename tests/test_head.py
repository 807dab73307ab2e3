import pytest

from turing.head import Direction, Head, is_valid_direction
from turing.tape import Tape


@pytest.fixture
def head():
    return Head(Tape.from_list(0, [(0, 1), (2, 1)]), 5)


def test_create(head):
    assert head.position == 5
    assert head.tape == Tape.from_list(0, [(0, 1), (2, 1)])


@pytest.mark.parametrize(
    "direction, offset",
    [
        (Direction.LEFT, -1),
        (Direction.RIGHT, 1),
        (Direction.STAY, 0),
        ("Left", -1),
        ("Right", 1),
        ("Stay", 0),
    ],
)
def test_move(head, direction, offset):
    moved = head.move(direction)
    assert moved.position == head.position + offset
    assert moved.tape == head.tape
    assert head.position == 5


def test_move_invalid_direction(head):
    with pytest.raises(ValueError):
        head.move("Up")


def test_read():
    head = Head(Tape.from_list(0, [(-1, 1)]), -1)
    assert head.read() == 1
    assert head.move(Direction.RIGHT).read() == 0


def test_write(head):
    written = head.write(1)
    assert written.read() == 1
    assert written.position == head.position
    assert head.read() == 0


def test_write_blank_erases():
    head = Head(Tape.from_list(0, [(0, 1)]), 0)
    assert head.write(0).tape.to_list() == []


@pytest.mark.parametrize("direction", list(Direction) + ["Left", "Right", "Stay"])
def test_valid_directions(direction):
    assert is_valid_direction(direction)


@pytest.mark.parametrize("direction", ["left", "Up", "", None, 1, -1, ["Left"], "L"])
def test_invalid_directions(direction):
    assert not is_valid_direction(direction)


def test_direction_offsets():
    assert [d.offset for d in Direction] == [-1, 1, 0]
