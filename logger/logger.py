import json
import os
from datetime import datetime, timezone


def _default(value):
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    return str(value)


class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="turing_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry, default=_default) + "\n")

    def log(self, entry: dict):
        """Log a single entry to the main run log."""
        self.log_batch([entry])

    def log_batch(self, entries: list):
        """Log a batch of entries to the main run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry, default=_default) + "\n")

    def log_step(self, steps, machine):
        """Log one trace entry for a machine after ``steps`` steps."""
        self.log({
            "event": "step",
            "steps": steps,
            "state": machine.state,
            "position": machine.head.position,
            "symbol": machine.head.read(),
        })

    def log_result(self, name, result):
        """Log the outcome of a run, both to the main log and to the per-outcome log."""
        if result.halted:
            outcome = "halted"
        elif result.stuck:
            outcome = "stuck"
        else:
            outcome = "running"
        entry = {
            "event": "result",
            "machine": name,
            "outcome": outcome,
            "steps": result.steps,
            "state": result.machine.state,
            "position": result.machine.head.position,
            "nonblank_cells": len(result.machine.tape.nonblank_cell_indices()),
        }
        self.log(entry)
        self._log_to_file(f"{outcome}_{self.today}.jsonl", [entry])
        return entry
