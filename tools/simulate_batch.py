# tools/simulate_batch.py

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from turing.errors import MachineError
from turing.machine_io import load_machine
from turing.runner import run

console = Console()


# === Utility Loaders ===
def find_machine_files(machine_dir):
    return sorted(Path(machine_dir).glob("*.json"))


def load_checkpoint(checkpoint_path):
    if checkpoint_path.exists():
        with open(checkpoint_path, "r", encoding="utf-8") as f:
            checkpoint = json.load(f)
        return checkpoint.get("completed", [])
    return []


def save_checkpoint(completed, checkpoint_path):
    with open(checkpoint_path, "w", encoding="utf-8") as f:
        json.dump({"completed": completed}, f, indent=4)


def simulate_file(path, max_steps=10000, validate=True):
    """Run one machine file and return its result entry."""
    machine = load_machine(path)
    if validate:
        machine.validate()
    result = run(machine, max_steps=max_steps)
    return {
        "machine": Path(path).stem,
        "steps_taken": result.steps,
        "halted": result.halted,
        "stuck": result.stuck,
        "final_state": str(result.machine.state),
        "nonblank_cells": len(result.machine.tape.nonblank_cell_indices()),
    }


# === Main Simulation Runner ===
def simulate_batch(machine_dir, output_dir="results", max_steps=10000, validate=True, logger=None):
    results_folder = Path(output_dir) / Path(machine_dir).name
    results_folder.mkdir(parents=True, exist_ok=True)
    results_file = results_folder / "results.jsonl"
    checkpoint_file = results_folder / "results_checkpoint.json"

    all_files = find_machine_files(machine_dir)
    completed = load_checkpoint(checkpoint_file)
    pending = [p for p in all_files if p.name not in completed]
    console.print(f"Loaded {len(all_files):,} machine files. {len(pending):,} pending.")

    batch_results = []
    with Progress(
            SpinnerColumn(),
            BarColumn(),
            "[progress.percentage]{task.percentage:>3.0f}%",
            TextColumn("{task.completed}/{task.total} Machines"),
            TimeElapsedColumn(),
            console=console,
    ) as progress:
        task = progress.add_task("[cyan]Simulating...", total=len(pending))

        for path in pending:
            try:
                entry = simulate_file(path, max_steps=max_steps, validate=validate)
            except (MachineError, ValueError, OSError) as e:
                console.print(f"[yellow][WARNING] Failed to simulate {escape(path.name)}: {escape(str(e))}[/yellow]")
                entry = {"machine": path.stem, "error": str(e)}

            batch_results.append(entry)
            completed.append(path.name)
            if logger is not None:
                logger.log(entry)
            progress.update(task, advance=1)

    # === BULK WRITE once per batch ===
    with open(results_file, "a", encoding="utf-8") as f:
        for entry in batch_results:
            f.write(json.dumps(entry) + "\n")

    save_checkpoint(completed, checkpoint_file)
    console.print("[green][SUCCESS] All machines simulated. Results saved.[/green]")
    return batch_results


# === CLI ===
def main():
    parser = argparse.ArgumentParser(description="Simulate every machine file in a directory with checkpointing.")
    parser.add_argument("--machines", required=True, help="Directory of machine JSON files")
    parser.add_argument("--output", default="results", help="Output directory (default: results)")
    parser.add_argument("--max_steps", type=int, default=10000, help="Maximum steps before giving up")
    parser.add_argument("--no-validate", action="store_true", help="Skip validation before running")
    args = parser.parse_args()

    simulate_batch(args.machines, args.output, max_steps=args.max_steps, validate=not args.no_validate)


if __name__ == "__main__":
    main()
