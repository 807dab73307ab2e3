from pyrsistent import pset

from turing.errors import TransitionError, TransitionKind, ValidationError, ValidationKind
from turing.head import Head
from turing.instructions import InstructionTable, Inputs
from turing.tape import Tape


class Machine:
    """A single-tape Turing machine.

    Construction does no checking so that invalid machines can be built
    and inspected; call :meth:`validate` before trusting :meth:`step`.
    :meth:`step` never changes the machine it is called on.
    """

    __slots__ = ("_alphabet", "_head", "_possible_states", "_halt_states", "_state", "_instructions")

    def __init__(self, alphabet, head: Head, possible_states, halt_states, state, instructions: InstructionTable):
        self._alphabet = pset(alphabet)
        self._head = head
        self._possible_states = pset(possible_states)
        self._halt_states = pset(halt_states)
        self._state = state
        self._instructions = instructions

    @property
    def alphabet(self):
        return self._alphabet

    @property
    def head(self) -> Head:
        return self._head

    @property
    def tape(self) -> Tape:
        return self._head.tape

    @property
    def blank_symbol(self):
        return self._head.tape.blank_symbol

    @property
    def possible_states(self):
        return self._possible_states

    @property
    def halt_states(self):
        return self._halt_states

    @property
    def state(self):
        return self._state

    @property
    def instructions(self) -> InstructionTable:
        return self._instructions

    @property
    def is_halted(self) -> bool:
        return self._state in self._halt_states

    def validate(self) -> "Machine":
        if self.blank_symbol not in self._alphabet:
            raise ValidationError(
                ValidationKind.BLANK_SYMBOL_NOT_IN_ALPHABET,
                f"The machine's blank symbol {self.blank_symbol!r} is not in its alphabet",
            )

        if self._state not in self._possible_states:
            raise ValidationError(
                ValidationKind.STATE_NOT_IN_POSSIBLE_STATES,
                f"The machine is not in a possible state: {self._state!r}",
            )

        if not self._halt_states.issubset(self._possible_states):
            extra = sorted(repr(state) for state in self._halt_states - self._possible_states)
            raise ValidationError(
                ValidationKind.HALT_STATES_NOT_SUBSET,
                f"The machine's halt states are not a subset of its possible states: {', '.join(extra)}",
            )

        self._instructions.validate(self._alphabet, self._possible_states)
        self.tape.validate(self._alphabet)
        return self

    def step(self) -> "Machine":
        """Execute one instruction and return the resulting machine."""
        if self.is_halted:
            raise TransitionError(
                TransitionKind.ALREADY_HALTED,
                f"The machine has already halted in state {self._state!r}",
                state=self._state,
            )

        symbol = self._head.read()
        outputs = self._instructions.run(Inputs(symbol, self._state))
        if outputs is None:
            raise TransitionError(
                TransitionKind.UNDEFINED_INSTRUCTION,
                f"No instruction for symbol {symbol!r} in state {self._state!r}",
                symbol=symbol,
                state=self._state,
            )

        new_symbol, direction, new_state = outputs
        head = self._head.write(new_symbol).move(direction)
        return Machine(
            self._alphabet,
            head,
            self._possible_states,
            self._halt_states,
            new_state,
            self._instructions,
        )

    def __eq__(self, other):
        if not isinstance(other, Machine):
            return NotImplemented
        return (
            self._state == other._state
            and self._head == other._head
            and self._alphabet == other._alphabet
            and self._possible_states == other._possible_states
            and self._halt_states == other._halt_states
            and self._instructions == other._instructions
        )

    def __hash__(self):
        return hash((self._state, self._head, self._alphabet, self._possible_states, self._halt_states))

    def __repr__(self):
        return (
            f"Machine(state={self._state!r}, head={self._head!r}, "
            f"alphabet={set(self._alphabet)!r}, possible_states={set(self._possible_states)!r}, "
            f"halt_states={set(self._halt_states)!r}, instructions={self._instructions!r})"
        )
