# tools/simulate_inputs.py

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from simulator.diagnostics import InvalidSymbol
from simulator.encoding import hash_encoding
from simulator.turing_machine import Outcome
from tools.machine_loader import load_machine, with_input

console = Console()

# === Bounded Runner ===
def run_bounded(machine, max_steps=1000000, trace=False, out=None):
    """
    Drive a machine one transition at a time, giving up after max_steps.
    A run that exhausts the budget comes back with Outcome.RUNNING.
    """
    out = out or console
    execution = machine.start_execution()

    while execution.outcome is Outcome.RUNNING and execution.steps < max_steps:
        if trace:
            out.print(f"[dim]step {execution.steps}, state {execution.state}[/dim]")
            out.print(execution.tape.visualize(), markup=False, highlight=False)
        execution.step()

    if trace:
        out.print(execution.tape.visualize(), markup=False, highlight=False)

    machine.last_result = execution.result()
    return machine.last_result

def result_entry(machine, input_string, result):
    encoded = machine.encode()
    return {
        "machine_hash": hash_encoding(encoded),
        "encoding": encoded,
        "input": input_string,
        "outcome": result.outcome.value,
        "steps_taken": result.steps,
        "final_state": result.state_name,
        "head": result.head,
        "diagnostic": result.diagnostic.to_dict() if result.diagnostic else None
    }

# === Utility Loaders ===
def load_inputs(inputs_file):
    with open(inputs_file, "r", encoding="utf-8") as f:
        inputs = [line.strip() for line in f if line.strip()]
    return inputs

def save_results(entries, results_file):
    Path(results_file).parent.mkdir(parents=True, exist_ok=True)
    with open(results_file, "a", encoding="utf-8") as f:
        for entry in entries:
            f.write(json.dumps(entry) + "\n")

# === Main Simulation Runner ===
def simulate_inputs(machine, inputs, max_steps=1000000, logger=None, results_file=None, show_progress=True):
    """Run one fresh copy of the machine per input, sequentially."""
    entries = []

    with Progress(
            SpinnerColumn(),
            BarColumn(),
            "[progress.percentage]{task.percentage:>3.0f}%",
            TextColumn("{task.completed}/{task.total} Inputs"),
            TimeElapsedColumn(),
            console=console,
            disable=not show_progress
    ) as progress:

        task = progress.add_task("[cyan]Simulating...", total=len(inputs))

        for input_string in inputs:
            try:
                runner = with_input(machine, input_string)
            except InvalidSymbol as e:
                console.print(f"[yellow][WARNING] Skipping input {input_string!r}: {e}[/yellow]")
                progress.update(task, advance=1)
                continue

            result = run_bounded(runner, max_steps=max_steps)
            entries.append(result_entry(runner, input_string, result))
            progress.update(task, advance=1)

    if logger is not None:
        logger.log_runs(entries)
    if results_file:
        save_results(entries, results_file)

    return entries

# === CLI ===
def main():
    parser = argparse.ArgumentParser(description="Run a Turing machine over a file of binary inputs.")
    parser.add_argument("--machine", required=True, help="Path to machine description JSON")
    parser.add_argument("--inputs", required=True, help="Path to inputs file (one binary string per line)")
    parser.add_argument("--max_steps", type=int, default=1000000, help="Step budget per input")
    parser.add_argument("--output", default="results/results.jsonl", help="Results file (JSON lines)")
    args = parser.parse_args()

    machine = load_machine(args.machine)
    entries = simulate_inputs(machine, load_inputs(args.inputs), max_steps=args.max_steps, results_file=args.output)
    accepted = sum(1 for e in entries if e["outcome"] == "accepted")
    console.print(f"[green]{accepted:,} of {len(entries):,} inputs accepted. Results saved to {args.output}[/green]")

if __name__ == "__main__":
    main()
