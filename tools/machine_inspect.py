# tools/machine_inspect.py

import argparse

from rich.console import Console
from rich.table import Table

from turing.head import Direction, is_valid_direction
from turing.instructions import Inputs
from turing.machine_io import load_machine
from turing.ordering import ordered

console = Console()

DIRECTION_LETTERS = {
    Direction.LEFT: "L",
    Direction.RIGHT: "R",
    Direction.STAY: "S",
}


def format_action(outputs):
    """Compact action notation: written symbol, move letter, next state (e.g. ``1RB``)."""
    if outputs is None:
        return "---"
    symbol, direction, state = outputs
    if is_valid_direction(direction):
        move = DIRECTION_LETTERS[Direction(direction)]
    else:
        move = f"?{direction}?"
    return f"{symbol}{move}{state}"


def instruction_rows(machine):
    """One row per state: the state followed by its action for every alphabet symbol."""
    symbols = ordered(machine.alphabet)
    rows = []
    for state in ordered(machine.possible_states):
        row = [str(state)]
        for symbol in symbols:
            if state in machine.halt_states:
                row.append("HALT")
            else:
                row.append(format_action(machine.instructions.run(Inputs(symbol, state))))
        rows.append(row)
    return symbols, rows


def build_table(machine, title="Transition Table"):
    symbols, rows = instruction_rows(machine)
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("State", justify="center")
    for symbol in symbols:
        table.add_column(str(symbol), justify="center")
    for row in rows:
        style = "green" if row[1:] and all(cell == "HALT" for cell in row[1:]) else None
        table.add_row(*row, style=style)
    return table


def print_machine(machine):
    console.print(f"[bold]Alphabet:[/bold] {', '.join(str(s) for s in ordered(machine.alphabet))}")
    console.print(f"[bold]Blank symbol:[/bold] {machine.blank_symbol}")
    console.print(f"[bold]States:[/bold] {', '.join(str(s) for s in ordered(machine.possible_states))}")
    console.print(f"[bold]Halt states:[/bold] {', '.join(str(s) for s in ordered(machine.halt_states))}")
    console.print(f"[bold]Current state:[/bold] {machine.state}")
    console.print(f"[bold]Head position:[/bold] {machine.head.position}")
    console.print(f"[bold]Instructions:[/bold] {len(machine.instructions)}")
    console.print(build_table(machine))


def main():
    parser = argparse.ArgumentParser(description="Turing Machine Instruction Table Inspector")
    parser.add_argument("machine", help="Path to a machine JSON file")
    args = parser.parse_args()

    print_machine(load_machine(args.machine))


if __name__ == "__main__":
    main()
