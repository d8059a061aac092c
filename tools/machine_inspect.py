import argparse

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from simulator.alphabet import GAMMA
from simulator.encoding import encode_table, hash_encoding
from tools.machine_loader import load_machine

console = Console()

def transition_rows(machine):
    """One row per state: [name, action for 0, action for 1, action for B]. Actions read like 1RX."""
    lookup = machine.transition_map()
    rows = []
    for state in machine.states:
        row = [state.name]
        for symbol in GAMMA:
            t = lookup.get((state, symbol))
            if t is None:
                action = "ACCEPT" if state is machine.accept else "REJECT" if state is machine.reject else "---"
            else:
                action = f"{t.write}{t.move}{t.dst.name}"
            row.append(action)
        rows.append(row)
    return rows

def latex_table(rows):
    lines = [r"\begin{array}{c|" + "c" * len(GAMMA) + "}"]
    lines.append("State/Symbol & " + " & ".join([f"\\text{{{s}}}" for s in GAMMA]) + r" \\ \hline")
    for row in rows:
        lines.append(" & ".join(row) + r" \\")
    lines.append(r"\end{array}")
    return "\n".join(lines)

def pretty_print_machine(machine, out=None, latex=False):
    """Print the transition table, description and encoding of a machine."""
    out = out or console

    table = Table(title="Transition Table")
    table.add_column("State")
    for symbol in GAMMA:
        table.add_column(str(symbol), justify="center")
    for row in transition_rows(machine):
        table.add_row(*row)
    out.print(table)

    out.print("\n[bold]Description[/bold]")
    out.print(machine.description(), markup=False, highlight=False)

    encoded = machine.encode()
    out.print("\n[bold]Encoding[/bold]")
    out.print(encoded, markup=False, highlight=False)
    out.print(f"  Hash: {hash_encoding(encoded)}")
    out.print(encode_table(machine.transitions))

    violation = machine.validate()
    if violation is None:
        out.print("[green]Machine description is valid.[/green]")
    else:
        out.print(f"[red]Invalid: {violation.category.value}: {escape(violation.message)}[/red]", highlight=False)

    if latex:
        out.print("\n[bold]LaTeX Table[/bold]")
        out.print(latex_table(transition_rows(machine)), markup=False, highlight=False)

def main():
    parser = argparse.ArgumentParser(description="Turing Machine Inspector")
    parser.add_argument("--machine", required=True, help="Path to machine description JSON")
    parser.add_argument("--latex", action="store_true", help="Also print the table as LaTeX")
    args = parser.parse_args()

    pretty_print_machine(load_machine(args.machine), latex=args.latex)

if __name__ == "__main__":
    main()
