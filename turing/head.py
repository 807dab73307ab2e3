from enum import Enum

from turing.tape import Tape


class Direction(str, Enum):
    LEFT = "Left"
    RIGHT = "Right"
    STAY = "Stay"

    @property
    def offset(self):
        return _OFFSETS[self]


_OFFSETS = {
    Direction.LEFT: -1,
    Direction.RIGHT: 1,
    Direction.STAY: 0,
}


def is_valid_direction(direction):
    """True for the Direction members and their plain string values."""
    try:
        Direction(direction)
    except (ValueError, TypeError):
        return False
    return True


class Head:
    """Read/write cursor over a tape. Writes and moves return a new head."""

    __slots__ = ("_tape", "_position")

    def __init__(self, tape: Tape, position: int = 0):
        self._tape = tape
        self._position = position

    @property
    def tape(self) -> Tape:
        return self._tape

    @property
    def position(self) -> int:
        return self._position

    def read(self):
        return self._tape.read_cell(self._position)

    def write(self, symbol) -> "Head":
        return Head(self._tape.write_cell(self._position, symbol), self._position)

    def move(self, direction) -> "Head":
        if not is_valid_direction(direction):
            raise ValueError(f"Invalid direction: {direction!r}")
        return Head(self._tape, self._position + Direction(direction).offset)

    def __eq__(self, other):
        if not isinstance(other, Head):
            return NotImplemented
        return self._position == other._position and self._tape == other._tape

    def __hash__(self):
        return hash((self._tape, self._position))

    def __repr__(self):
        return f"Head(tape={self._tape!r}, position={self._position})"
