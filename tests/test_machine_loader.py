import json
from pathlib import Path

import pytest

from simulator.diagnostics import Category
from tools.machine_loader import build_machine, load_machine, with_input

SAMPLE = Path(__file__).resolve().parent.parent / "machines" / "trailing_bit.json"


def _description(**overrides):
    description = {
        "states": ["q0", "q1", "q2"],
        "start": "q0",
        "accept": "q1",
        "reject": "q2",
        "transitions": [["q0", "0", "q1", "1", "R"]],
    }
    description.update(overrides)
    return description


def test_build_and_run():
    machine = build_machine(_description(), "0", sink=lambda d: None)
    assert machine.run() is True
    assert machine.encode() == "0#0#1#1#1"


def test_names_resolve_to_shared_states():
    machine = build_machine(_description())
    (t,) = machine.transitions
    assert t.src is machine.start
    assert t.dst is machine.accept


def test_missing_key():
    description = _description()
    del description["reject"]
    with pytest.raises(ValueError, match="reject"):
        build_machine(description)


def test_bad_transition_arity():
    with pytest.raises(ValueError, match="5 fields"):
        build_machine(_description(transitions=[["q0", "0", "q1", "1"]]))


def test_duplicate_state_name():
    with pytest.raises(ValueError, match="Duplicate"):
        build_machine(_description(states=["q0", "q0", "q1", "q2"]))


def test_undeclared_names_fail_validation_not_loading():
    machine = build_machine(_description(transitions=[["q0", "0", "q9", "1", "R"]]))
    violation = machine.validate()
    assert violation.category is Category.TRANSITION_ENDPOINT_NOT_IN_Q
    assert violation.state_name == "q9"

    machine = build_machine(_description(start="nowhere"))
    assert machine.validate().category is Category.START_STATE_NOT_IN_Q


def test_explicit_indices():
    machine = build_machine(_description(indices={"q0": 5, "q1": 6}))
    assert machine.encode() == "5#0#6#1#1"


def test_load_sample_machine():
    machine = load_machine(SAMPLE, "0110", sink=lambda d: None)
    assert machine.run() is True
    assert machine.encode() == "0#0#0#0#1;0#1#0#1#1;0#B#3#B#0;3#1#2#1#1;3#0#1#0#1"


def test_load_from_tmp(tmp_path):
    path = tmp_path / "m.json"
    path.write_text(json.dumps(_description()), encoding="utf-8")
    assert load_machine(path, "1", sink=lambda d: None).run() is False


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_machine(tmp_path / "absent.json")


def test_with_input_gives_fresh_tape():
    machine = build_machine(_description(), "0")
    other = with_input(machine, "1")
    assert other.states == machine.states
    assert other.transitions == machine.transitions
    assert other.tape is not machine.tape
    assert other.tape.render_with_head() == "[1]B"


@pytest.mark.parametrize("indices", [
    [0, 1, 2],
    {"q0": -1},
    {"q0": "3"},
    {"q0": True},
    {"q0": 1.5},
])
def test_malformed_indices(indices):
    with pytest.raises(ValueError, match="ndex"):
        build_machine(_description(indices=indices))
