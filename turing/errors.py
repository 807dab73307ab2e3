from enum import Enum


class ValidationKind(Enum):
    BLANK_SYMBOL_NOT_IN_ALPHABET = "blank-symbol-not-in-alphabet"
    STATE_NOT_IN_POSSIBLE_STATES = "state-not-in-possible-states"
    HALT_STATES_NOT_SUBSET = "halt-states-not-subset"
    INPUT_SYMBOL_INVALID = "instruction-input-symbol-invalid"
    INPUT_STATE_INVALID = "instruction-input-state-invalid"
    OUTPUT_SYMBOL_INVALID = "instruction-output-symbol-invalid"
    OUTPUT_STATE_INVALID = "instruction-output-state-invalid"
    OUTPUT_DIRECTION_INVALID = "instruction-output-direction-invalid"
    TAPE_SYMBOL_NOT_IN_ALPHABET = "tape-symbol-not-in-alphabet"


class TransitionKind(Enum):
    ALREADY_HALTED = "already-halted"
    UNDEFINED_INSTRUCTION = "undefined-instruction"


class MachineError(Exception):
    """Base class for every error raised by the machine core."""

    def __init__(self, kind, message):
        super().__init__(message)
        self.kind = kind
        self.message = message


class ValidationError(MachineError, ValueError):
    """A tape, instruction table or machine violates one of its invariants."""


class TransitionError(MachineError, RuntimeError):
    """A step was requested that the machine cannot take."""

    def __init__(self, kind, message, symbol=None, state=None):
        super().__init__(kind, message)
        self.symbol = symbol
        self.state = state
