import json
from pathlib import Path

from simulator.turing_machine import State, Transition, TuringMachine

REQUIRED_KEYS = ("states", "start", "accept", "reject", "transitions")


def build_machine(description, input_string="", sink=None):
    """
    Build a TuringMachine from a dict:
        {"states": [...], "start": "q0", "accept": "qA", "reject": "qR",
         "transitions": [[from, read, to, write, move], ...], "indices": {name: int}}
    Names that are referenced but never declared in "states" get their own State
    outside Q, so the machine's validation reports them.
    """
    for key in REQUIRED_KEYS:
        if key not in description:
            raise ValueError(f"Machine description is missing key: {key}")

    indices = description.get("indices", {})
    if not isinstance(indices, dict):
        raise ValueError(f"\"indices\" must map state names to integers, got {indices!r}")
    for name, index in indices.items():
        # bool is an int subclass; true/false are not indices
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise ValueError(f"Index for state {name} must be a non-negative integer, got {index!r}")

    declared = {}
    for name in description["states"]:
        if name in declared:
            raise ValueError(f"Duplicate state name: {name}")
        declared[name] = State(name, indices.get(name))

    undeclared = {}

    def resolve(name):
        if name in declared:
            return declared[name]
        if name not in undeclared:
            undeclared[name] = State(name, indices.get(name))
        return undeclared[name]

    transitions = []
    for row in description["transitions"]:
        if len(row) != 5:
            raise ValueError(f"Transition must have 5 fields [from, read, to, write, move], got {row}")
        src, read, dst, write, move = row
        transitions.append(Transition(resolve(src), read, resolve(dst), write, move))

    return TuringMachine(
        declared.values(),
        resolve(description["start"]),
        resolve(description["accept"]),
        resolve(description["reject"]),
        transitions,
        input_string,
        sink=sink,
    )


def load_machine(path, input_string="", sink=None):
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Machine description {path} not found.")
    with open(path, "r", encoding="utf-8") as f:
        description = json.load(f)
    return build_machine(description, input_string, sink=sink)


def with_input(machine, input_string):
    """A fresh machine sharing states and transitions, with its own tape."""
    return TuringMachine(
        machine.states, machine.start, machine.accept, machine.reject,
        machine.transitions, input_string, sink=machine.sink,
    )
