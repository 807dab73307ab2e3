import json
import os

from turing.head import Direction, Head, is_valid_direction
from turing.instructions import InstructionTable
from turing.machine import Machine
from turing.ordering import ordered
from turing.tape import Tape

REQUIRED_KEYS = [
    "alphabet",
    "blank_symbol",
    "tape",
    "position",
    "possible_states",
    "halt_states",
    "state",
    "instructions",
]


def _hashable(value):
    # JSON arrays come back as lists; symbols and states must be hashable.
    if isinstance(value, list):
        return tuple(_hashable(item) for item in value)
    return value


def _jsonable(value):
    if isinstance(value, Direction):
        return value.value
    if isinstance(value, tuple):
        return [_jsonable(item) for item in value]
    return value


def _direction(value):
    value = _hashable(value)
    if is_valid_direction(value):
        return Direction(value)
    # Left for Machine.validate to report.
    return value


def machine_to_dict(machine):
    return {
        "alphabet": [_jsonable(sym) for sym in ordered(machine.alphabet)],
        "blank_symbol": _jsonable(machine.blank_symbol),
        "tape": [[pos, _jsonable(sym)] for pos, sym in machine.tape.to_list()],
        "position": machine.head.position,
        "possible_states": [_jsonable(state) for state in ordered(machine.possible_states)],
        "halt_states": [_jsonable(state) for state in ordered(machine.halt_states)],
        "state": _jsonable(machine.state),
        "instructions": [
            [[_jsonable(inputs.symbol), _jsonable(inputs.state)],
             [_jsonable(outputs.symbol), _jsonable(outputs.direction), _jsonable(outputs.state)]]
            for inputs, outputs in machine.instructions.to_list()
        ],
    }


def machine_from_dict(data):
    """Build a machine from its dict form. The result is not validated."""
    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise ValueError(f"Machine description is missing required keys: {', '.join(missing)}")

    blank_symbol = _hashable(data["blank_symbol"])
    tape = Tape.from_list(blank_symbol, [(int(pos), _hashable(sym)) for pos, sym in data["tape"]])
    head = Head(tape, int(data["position"]))

    instruction_list = []
    for entry in data["instructions"]:
        if len(entry) != 2 or len(entry[0]) != 2 or len(entry[1]) != 3:
            raise ValueError(f"Invalid instruction entry: {entry!r}")
        (symbol, state), (new_symbol, direction, new_state) = entry
        instruction_list.append((
            (_hashable(symbol), _hashable(state)),
            (_hashable(new_symbol), _direction(direction), _hashable(new_state)),
        ))

    return Machine(
        alphabet=[_hashable(sym) for sym in data["alphabet"]],
        head=head,
        possible_states=[_hashable(state) for state in data["possible_states"]],
        halt_states=[_hashable(state) for state in data["halt_states"]],
        state=_hashable(data["state"]),
        instructions=InstructionTable.from_list(instruction_list),
    )


def load_machine(path):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Machine file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return machine_from_dict(json.load(f))


def save_machine(machine, path):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(machine_to_dict(machine), f, indent=4)
