# app.py

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt, IntPrompt, Confirm

from config.config_loader import DEFAULT_CONFIG_PATH, load_config, save_config, validate_config
from logger.logger import JSONLogger
from simulator.diagnostics import InvalidSymbol, emit
from simulator.turing_machine import Outcome
from tools.machine_inspect import pretty_print_machine
from tools.machine_loader import load_machine, with_input
from tools.simulate_inputs import load_inputs, result_entry, run_bounded, simulate_inputs

console = Console()

OUTCOME_STYLES = {
    Outcome.ACCEPTED: ("green", "ACCEPT"),
    Outcome.REJECTED: ("red", "REJECT"),
    Outcome.FAULTED: ("magenta", "FAULT (reject)"),
    Outcome.RUNNING: ("yellow", "UNDECIDED (step budget exhausted)"),
}

# === Utilities ===
def make_logger(config):
    if not config["log_results"]:
        return None
    return JSONLogger(config["output_directory"], config["log_file_prefix"])

def make_sink(config):
    """Diagnostic sink that follows the current colour setting."""
    def sink(diagnostic):
        emit(diagnostic, markup=config["color"])
    return sink

def print_result(input_string, result, color=True):
    style, label = OUTCOME_STYLES[result.outcome]
    text = f"{input_string or '<empty>'}: {label} after {result.steps:,} steps"
    if color:
        console.print(f"[{style}]{text}[/{style}]", highlight=False)
    else:
        console.print(text, markup=False, highlight=False)

def run_single(machine, input_string, config, logger=None):
    runner = with_input(machine, input_string)
    result = run_bounded(runner, max_steps=config["max_steps"], trace=config["trace"])
    print_result(input_string, result, color=config["color"])
    if logger is not None:
        logger.log_runs([result_entry(runner, input_string, result)])
    return result

def run_batch(machine, inputs_file, config, logger=None):
    entries = simulate_inputs(
        machine,
        load_inputs(inputs_file),
        max_steps=config["max_steps"],
        logger=logger,
        results_file=config["results_file"]
    )
    accepted = sum(1 for e in entries if e["outcome"] == "accepted")
    console.print(f"[green]{accepted:,} of {len(entries):,} inputs accepted. Results saved to {config['results_file']}[/green]")
    return entries

def show_main_menu(machine_path):
    console.print("\n[bold cyan]Turing Machine Simulator[/bold cyan]")
    console.print(f"Machine: {machine_path}")
    console.print("[1] Run an input")
    console.print("[2] Run an inputs file")
    console.print("[3] Inspect machine")
    console.print("[4] Edit config")
    console.print("[5] Exit")

def handle_edit_config(config, config_path):
    console.print("\n[bold]Edit Configuration[/bold]")

    config.update({
        "max_steps": IntPrompt.ask("Max Steps", default=config["max_steps"]),
        "trace": Confirm.ask("Trace every step?", default=config["trace"]),
        "color": Confirm.ask("Colored output?", default=config["color"]),
        "log_results": Confirm.ask("Log runs to JSON lines?", default=config["log_results"])
    })

    save_config(config, config_path)
    console.print("[green]Configuration updated successfully.[/green]")

def interactive_main(machine, machine_path, config, config_path):
    logger = make_logger(config)

    while True:
        show_main_menu(machine_path)
        choice = Prompt.ask("\nChoose an option", choices=["1", "2", "3", "4", "5"], default="5")

        if choice == "1":
            input_string = Prompt.ask("Input (binary string)", default="")
            try:
                run_single(machine, input_string, config, logger)
            except InvalidSymbol as e:
                console.print(f"[red]{escape(str(e))}[/red]")
        elif choice == "2":
            inputs_file = Prompt.ask("Inputs file (one binary string per line)")
            if not Path(inputs_file).exists():
                console.print(f"[red]Inputs file not found: {inputs_file}[/red]")
                continue
            run_batch(machine, inputs_file, config, logger)
        elif choice == "3":
            pretty_print_machine(machine)
        elif choice == "4":
            handle_edit_config(config, config_path)
            logger = make_logger(config)
        elif choice == "5":
            console.print("[bold green]Goodbye![/bold green]")
            break

# === CLI Mode for Automation ===
def cli_main(args, machine, config):
    logger = make_logger(config)
    status = 0

    if args.inspect:
        pretty_print_machine(machine)
    if args.input is not None:
        result = run_single(machine, args.input, config, logger)
        status = 0 if result.accepted else 1
    if args.inputs:
        run_batch(machine, args.inputs, config, logger)

    return status

def main(argv=None):
    parser = argparse.ArgumentParser(description="Deterministic single-tape Turing machine simulator")
    parser.add_argument("--machine", required=True, help="Path to machine description JSON")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to runtime config JSON")
    parser.add_argument("--input", help="Run a single binary input and exit")
    parser.add_argument("--inputs", help="Run every input in a file (one per line) and exit")
    parser.add_argument("--inspect", action="store_true", help="Print the machine's table, description and encoding")
    parser.add_argument("--trace", action="store_true", help="Print the tape after every step")
    parser.add_argument("--max-steps", type=int, help="Override the configured step budget")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        if args.trace:
            config["trace"] = True
        if args.max_steps is not None:
            config["max_steps"] = args.max_steps
        validate_config(config)
    except (ValueError, TypeError, FileNotFoundError) as e:
        console.print(f"[red]Config error: {escape(str(e))}[/red]")
        return 2

    try:
        machine = load_machine(args.machine, sink=make_sink(config))
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 2

    if args.input is not None or args.inputs or args.inspect:
        try:
            return cli_main(args, machine, config)
        except InvalidSymbol as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            return 2

    interactive_main(machine, args.machine, config, args.config)
    return 0

if __name__ == "__main__":
    sys.exit(main())
