# app.py

import argparse
import os
import sys

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from config.config_loader import DEFAULT_CONFIG, load_config
from logger.logger import JSONLogger
from tools.machine_inspect import print_machine
from tools.simulate_batch import simulate_batch
from turing.errors import ValidationError
from turing.machine_io import load_machine
from turing.runner import render, run

console = Console()

DEFAULT_CONFIG_PATH = "config/runtime_config.json"

EXIT_HALTED = 0
EXIT_INVALID = 1
EXIT_NOT_HALTED = 2


# === Utilities ===
def load_runtime_config(path=None):
    """Load the runtime config; the default path is optional, an explicit one is not."""
    if path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return DEFAULT_CONFIG.copy()
        path = DEFAULT_CONFIG_PATH
    return load_config(path)


def summary_table(name, result):
    table = Table(title=f"Run Summary: {name}", show_header=True, header_style="bold magenta")
    table.add_column("Field")
    table.add_column("Value", justify="right")
    if result.halted:
        outcome = "[green]Halted[/green]"
    elif result.stuck:
        outcome = "[red]Stuck (no instruction)[/red]"
    else:
        outcome = "[yellow]Step limit reached[/yellow]"
    table.add_row("Outcome", outcome)
    table.add_row("Steps", f"{result.steps:,}")
    table.add_row("Final state", str(result.machine.state))
    table.add_row("Head position", str(result.machine.head.position))
    table.add_row("Non-blank cells", f"{len(result.machine.tape.nonblank_cell_indices()):,}")
    return table


def validate_machine(machine):
    """Return None if valid, otherwise the validation error."""
    try:
        machine.validate()
    except ValidationError as e:
        return e
    return None


# === Commands ===
def handle_run(path, config, max_steps=None, trace=False):
    machine = load_machine(path)
    name = os.path.splitext(os.path.basename(path))[0]

    if config["validate_before_run"]:
        error = validate_machine(machine)
        if error is not None:
            console.print(f"[red]Invalid machine ({error.kind.value}): {escape(str(error))}[/red]")
            return EXIT_INVALID

    logger = JSONLogger(config["output_directory"], config["log_file_prefix"])
    save_trace = trace or config["save_trace"]
    log_frequency = config["log_frequency"]

    def on_step(steps, current):
        if save_trace and steps % log_frequency == 0:
            logger.log_step(steps, current)

    limit = max_steps if max_steps is not None else config["max_steps"]
    console.print(f"[cyan]Running {name} for up to {limit:,} steps...[/cyan]")
    result = run(machine, max_steps=limit, on_step=on_step)

    console.print(render(result.machine, window=config["trace_window"]), markup=False)
    console.print(summary_table(name, result))
    logger.log_result(name, result)

    return EXIT_HALTED if result.halted else EXIT_NOT_HALTED


def handle_validate(path):
    error = validate_machine(load_machine(path))
    if error is not None:
        console.print(f"[red]Invalid ({error.kind.value}): {escape(str(error))}[/red]")
        return EXIT_INVALID
    console.print("[green]OK[/green]")
    return EXIT_HALTED


def handle_inspect(path):
    print_machine(load_machine(path))
    return EXIT_HALTED


def handle_batch(machine_dir, config, output_dir="results"):
    logger = JSONLogger(config["output_directory"], config["log_file_prefix"])
    simulate_batch(
        machine_dir,
        output_dir,
        max_steps=config["max_steps"],
        validate=config["validate_before_run"],
        logger=logger,
    )
    return EXIT_HALTED


def show_main_menu():
    console.print("\n[bold cyan]Turing Machine Simulator[/bold cyan]")
    console.print("[1] Run a machine")
    console.print("[2] Validate a machine")
    console.print("[3] Inspect a machine")
    console.print("[4] Simulate a directory of machines")
    console.print("[5] Exit")


def interactive_main(config):
    while True:
        show_main_menu()
        choice = Prompt.ask("\nChoose an option", choices=["1", "2", "3", "4", "5"], default="5")

        if choice == "5":
            console.print("[bold green]Goodbye![/bold green]")
            break

        if choice == "4":
            machine_dir = Prompt.ask("Machine directory")
            handle_batch(machine_dir, config)
            continue

        path = Prompt.ask("Machine file")
        try:
            if choice == "1":
                max_steps = IntPrompt.ask("Max Steps", default=config["max_steps"])
                trace = Confirm.ask("Save step trace?", default=config["save_trace"])
                handle_run(path, config, max_steps=max_steps, trace=trace)
            elif choice == "2":
                handle_validate(path)
            elif choice == "3":
                handle_inspect(path)
        except (FileNotFoundError, ValueError) as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")


# === CLI Mode for Automation ===
def build_parser():
    parser = argparse.ArgumentParser(description="Single-tape Turing Machine Simulator")
    parser.add_argument("--config", help="Path to a runtime config JSON file")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Run a machine until it halts or the step limit is hit")
    run_parser.add_argument("machine", help="Path to a machine JSON file")
    run_parser.add_argument("--max-steps", type=int, help="Override the configured step limit")
    run_parser.add_argument("--trace", action="store_true", help="Log a step trace")

    validate_parser = subparsers.add_parser("validate", help="Validate a machine")
    validate_parser.add_argument("machine", help="Path to a machine JSON file")

    inspect_parser = subparsers.add_parser("inspect", help="Print a machine's instruction table")
    inspect_parser.add_argument("machine", help="Path to a machine JSON file")

    batch_parser = subparsers.add_parser("batch", help="Simulate every machine file in a directory")
    batch_parser.add_argument("directory", help="Directory of machine JSON files")
    batch_parser.add_argument("--output", default="results", help="Output directory (default: results)")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = load_runtime_config(args.config)

    if args.command is None:
        interactive_main(config)
        return EXIT_HALTED

    try:
        if args.command == "run":
            return handle_run(args.machine, config, max_steps=args.max_steps, trace=args.trace)
        if args.command == "validate":
            return handle_validate(args.machine)
        if args.command == "inspect":
            return handle_inspect(args.machine)
        return handle_batch(args.directory, config, args.output)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
