from typing import NamedTuple

from turing.errors import TransitionError, TransitionKind
from turing.machine import Machine


class RunResult(NamedTuple):
    machine: Machine
    steps: int
    halted: bool
    stuck: bool


def run(machine, max_steps=10000, on_step=None):
    """Step ``machine`` until it halts, gets stuck or ``max_steps`` is reached.

    A missing instruction ends the run with ``stuck=True``. ``on_step`` is
    called as ``on_step(steps, machine)`` after every step.
    """
    steps = 0
    while not machine.is_halted and steps < max_steps:
        try:
            machine = machine.step()
        except TransitionError as e:
            if e.kind is not TransitionKind.UNDEFINED_INSTRUCTION:
                raise
            return RunResult(machine, steps, False, True)
        steps += 1
        if on_step is not None:
            on_step(steps, machine)
    return RunResult(machine, steps, machine.is_halted, False)


def render(machine, window=10):
    """Display a small window around the head."""
    tape = machine.tape
    head = machine.head.position
    positions = sorted(tape.nonblank_cell_indices())
    if not positions:
        tape_range = range(head - window, head + window + 1)
    else:
        min_pos = min(positions[0], head) - window
        max_pos = max(positions[-1], head) + window
        tape_range = range(min_pos, max_pos + 1)

    cells = []
    carets = []
    for pos in tape_range:
        symbol = str(tape.read_cell(pos))
        cells.append(symbol)
        carets.append("^".ljust(len(symbol)) if pos == head else " " * len(symbol))

    lines = [
        " ".join(cells).rstrip(),
        " ".join(carets).rstrip(),
        f"State: {machine.state}, Halted: {machine.is_halted}",
    ]
    return "\n".join(lines)
