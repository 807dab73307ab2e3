from enum import Enum

import pytest

from turing.errors import TransitionError, TransitionKind, ValidationError, ValidationKind
from turing.head import Direction, Head
from turing.instructions import InstructionTable
from turing.machine import Machine
from turing.tape import Tape


def make_machine(**overrides):
    fields = {
        "alphabet": {0, 1},
        "head": Head(Tape.from_list(0, [(0, 1)]), 0),
        "possible_states": {"A", "Halt"},
        "halt_states": {"Halt"},
        "state": "A",
        "instructions": InstructionTable.from_list([
            ((0, "A"), (1, Direction.RIGHT, "A")),
            ((1, "A"), (1, Direction.STAY, "Halt")),
        ]),
    }
    fields.update(overrides)
    return Machine(**fields)


def test_getters():
    machine = make_machine()
    assert machine.alphabet == {0, 1}
    assert machine.blank_symbol == 0
    assert machine.possible_states == {"A", "Halt"}
    assert machine.halt_states == {"Halt"}
    assert machine.state == "A"
    assert machine.head.position == 0
    assert machine.tape == Tape.from_list(0, [(0, 1)])
    assert len(machine.instructions) == 2


def test_is_halted():
    assert not make_machine().is_halted
    assert make_machine(state="Halt").is_halted


def test_step_to_halt():
    machine = make_machine().step()
    assert machine.is_halted
    assert machine.state == "Halt"
    assert machine.head.position == 0
    assert machine.tape.read_cell(0) == 1


def test_step_write_then_move():
    machine = make_machine(head=Head(Tape.empty(0), 3)).step()
    assert machine.state == "A"
    assert machine.head.position == 4
    assert machine.tape.to_list() == [(3, 1)]


def test_step_copies_static_fields():
    before = make_machine()
    after = before.step()
    assert after.alphabet == before.alphabet
    assert after.possible_states == before.possible_states
    assert after.halt_states == before.halt_states
    assert after.instructions == before.instructions


def test_step_does_not_change_original():
    machine = make_machine(head=Head(Tape.empty(0), 3))
    snapshot = (machine.state, machine.head, machine.tape.to_list(), machine.instructions)
    machine.step()
    assert (machine.state, machine.head, machine.tape.to_list(), machine.instructions) == snapshot


def test_step_halted_machine():
    with pytest.raises(TransitionError) as excinfo:
        make_machine(state="Halt").step()
    assert excinfo.value.kind is TransitionKind.ALREADY_HALTED


def test_step_every_halt_state():
    for state in ["H1", "H2"]:
        machine = make_machine(possible_states={"A", "H1", "H2"}, halt_states={"H1", "H2"}, state=state)
        with pytest.raises(TransitionError) as excinfo:
            machine.step()
        assert excinfo.value.kind is TransitionKind.ALREADY_HALTED


def test_step_undefined_instruction():
    machine = make_machine(instructions=InstructionTable.empty())
    with pytest.raises(TransitionError) as excinfo:
        machine.step()
    assert excinfo.value.kind is TransitionKind.UNDEFINED_INSTRUCTION
    assert excinfo.value.symbol == 1
    assert excinfo.value.state == "A"


def test_validate():
    machine = make_machine()
    assert machine.validate() is machine


@pytest.mark.parametrize(
    "overrides, kind",
    [
        ({"alphabet": {1}}, ValidationKind.BLANK_SYMBOL_NOT_IN_ALPHABET),
        ({"state": "B"}, ValidationKind.STATE_NOT_IN_POSSIBLE_STATES),
        ({"halt_states": {"Halt", "Stop"}}, ValidationKind.HALT_STATES_NOT_SUBSET),
        (
            {"instructions": InstructionTable.from_list([((0, "A"), (1, "Up", "A"))])},
            ValidationKind.OUTPUT_DIRECTION_INVALID,
        ),
        (
            {"instructions": InstructionTable.from_list([((0, "B"), (1, Direction.LEFT, "A"))])},
            ValidationKind.INPUT_STATE_INVALID,
        ),
        ({"head": Head(Tape.from_list(0, [(0, 2)]), 0)}, ValidationKind.TAPE_SYMBOL_NOT_IN_ALPHABET),
    ],
)
def test_validate_failures(overrides, kind):
    with pytest.raises(ValidationError) as excinfo:
        make_machine(**overrides).validate()
    assert excinfo.value.kind is kind


def test_validate_checks_instructions_before_tape():
    machine = make_machine(
        head=Head(Tape.from_list(0, [(0, 2)]), 0),
        instructions=InstructionTable.from_list([((0, "A"), (1, "Up", "A"))]),
    )
    with pytest.raises(ValidationError) as excinfo:
        machine.validate()
    assert excinfo.value.kind is ValidationKind.OUTPUT_DIRECTION_INVALID


def test_invalid_machine_is_constructible():
    machine = make_machine(alphabet=set(), state="nowhere")
    assert machine.state == "nowhere"


def test_equality():
    assert make_machine() == make_machine()
    assert make_machine() != make_machine(state="Halt")
    assert make_machine().step() == make_machine(state="Halt")


class State(Enum):
    A = "A"
    B = "B"
    HALT = "Halt"


def enum_machine(**overrides):
    fields = {
        "alphabet": {0, "x"},
        "head": Head(Tape.empty(0), 0),
        "possible_states": set(State),
        "halt_states": {State.HALT},
        "state": State.A,
        "instructions": InstructionTable.from_list([
            ((0, State.A), ("x", Direction.RIGHT, State.B)),
            ((0, State.B), ("x", Direction.LEFT, State.HALT)),
        ]),
    }
    fields.update(overrides)
    return Machine(**fields)


def test_enum_states_and_mixed_alphabet_step():
    machine = enum_machine()
    assert machine.validate() is machine

    first = machine.step()
    assert first.state is State.B
    assert first.head.position == 1
    assert first.tape.to_list() == [(0, "x")]

    second = first.step()
    assert second.is_halted
    assert second.head.position == 0
    assert second.tape.to_list() == [(0, "x"), (1, "x")]
    assert second.validate() is second


def test_enum_states_validate_output_state():
    machine = enum_machine(possible_states={State.A, State.B}, halt_states=set())
    with pytest.raises(ValidationError) as excinfo:
        machine.validate()
    assert excinfo.value.kind is ValidationKind.OUTPUT_STATE_INVALID


def test_mixed_alphabet_validate_output_symbol():
    machine = enum_machine(alphabet={0, 1})
    with pytest.raises(ValidationError) as excinfo:
        machine.validate()
    assert excinfo.value.kind is ValidationKind.OUTPUT_SYMBOL_INVALID
