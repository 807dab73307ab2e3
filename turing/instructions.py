from typing import Any, NamedTuple

from pyrsistent import pmap

from turing.errors import ValidationError, ValidationKind
from turing.head import is_valid_direction
from turing.ordering import ordered


class Inputs(NamedTuple):
    """Left-hand side of an instruction: what the head reads and the current state."""

    symbol: Any
    state: Any


class Outputs(NamedTuple):
    """Right-hand side of an instruction: what to write, where to move, the next state."""

    symbol: Any
    direction: Any
    state: Any


class InstructionTable:
    """Deterministic partial mapping (symbol, state) -> (new symbol, direction, new state).

    Stored as a persistent two-level map keyed by symbol, then state.
    Adding an existing input replaces its output. Every change returns a
    new table.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules=None):
        self._rules = pmap(rules or {})

    @classmethod
    def empty(cls):
        return cls()

    @classmethod
    def from_list(cls, instruction_list):
        table = cls.empty()
        for inputs, outputs in instruction_list:
            table = table.add(inputs, outputs)
        return table

    def to_list(self):
        return [(inputs, self._rules[inputs.symbol][inputs.state]) for inputs in self.inputs()]

    def add(self, inputs, outputs):
        symbol, state = inputs
        outputs = Outputs(*outputs)
        by_state = self._rules.get(symbol, pmap())
        return InstructionTable(self._rules.set(symbol, by_state.set(state, outputs)))

    def remove(self, inputs):
        symbol, state = inputs
        by_state = self._rules.get(symbol)
        if by_state is None or state not in by_state:
            return self

        by_state = by_state.remove(state)
        if not by_state:
            return InstructionTable(self._rules.remove(symbol))
        return InstructionTable(self._rules.set(symbol, by_state))

    def run(self, inputs):
        """Look up the outputs for ``inputs``; None when there is no such instruction."""
        symbol, state = inputs
        by_state = self._rules.get(symbol)
        if by_state is None:
            return None
        return by_state.get(state)

    def inputs(self):
        return ordered(
            Inputs(symbol, state) for symbol, by_state in self._rules.items() for state in by_state
        )

    def outputs(self):
        """Distinct outputs reachable from any input, duplicates collapsed."""
        distinct = []
        for _, outputs in self.to_list():
            if outputs not in distinct:
                distinct.append(outputs)
        return distinct

    def validate(self, alphabet, possible_states):
        """Return the table if every symbol, state and direction it uses is valid."""
        for symbol, state in self.inputs():
            if symbol not in alphabet:
                raise ValidationError(
                    ValidationKind.INPUT_SYMBOL_INVALID,
                    f"The instruction set contains an input symbol not in the alphabet: {symbol!r}",
                )
            if state not in possible_states:
                raise ValidationError(
                    ValidationKind.INPUT_STATE_INVALID,
                    f"The instruction set contains an input state not in the set of possible states: {state!r}",
                )

        for symbol, direction, state in self.outputs():
            if symbol not in alphabet:
                raise ValidationError(
                    ValidationKind.OUTPUT_SYMBOL_INVALID,
                    f"The instruction set contains an output symbol not in the alphabet: {symbol!r}",
                )
            if state not in possible_states:
                raise ValidationError(
                    ValidationKind.OUTPUT_STATE_INVALID,
                    f"The instruction set contains an output state not in the set of possible states: {state!r}",
                )
            if not is_valid_direction(direction):
                raise ValidationError(
                    ValidationKind.OUTPUT_DIRECTION_INVALID,
                    f"The instruction set contains an invalid direction in an output: {direction!r}",
                )

        return self

    def __len__(self):
        return sum(len(by_state) for by_state in self._rules.values())

    def __contains__(self, inputs):
        return self.run(inputs) is not None

    def __iter__(self):
        return iter(self.to_list())

    def __eq__(self, other):
        if not isinstance(other, InstructionTable):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self):
        return hash(self._rules)

    def __repr__(self):
        return f"InstructionTable({self.to_list()!r})"
