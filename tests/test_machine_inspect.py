import io

from rich.console import Console

from simulator.turing_machine import State, TuringMachine
from tools.machine_inspect import latex_table, pretty_print_machine, transition_rows


def test_transition_rows(make_trailing_bit):
    rows = transition_rows(make_trailing_bit())
    assert rows == [
        ["q0", "0Rq0", "1Rq0", "BLX"],
        ["qAccept", "ACCEPT", "ACCEPT", "ACCEPT"],
        ["qReject", "REJECT", "REJECT", "REJECT"],
        ["X", "0RqAccept", "1RqReject", "---"],
    ]


def test_latex_table():
    text = latex_table([["q0", "1Rq1", "---", "---"]])
    assert text.startswith(r"\begin{array}{c|ccc}")
    assert r"q0 & 1Rq1 & --- & --- \\" in text
    assert text.endswith(r"\end{array}")


def test_pretty_print(make_trailing_bit):
    buffer = io.StringIO()
    pretty_print_machine(make_trailing_bit(), out=Console(file=buffer, width=200), latex=True)
    output = buffer.getvalue()
    assert "Transition Table" in output
    assert "0#B#0#B#0" in output
    assert "valid" in output
    assert r"\begin{array}" in output


def test_pretty_print_reports_invalid():
    q0, accept, reject = State("q0"), State("qAccept"), State("qReject")
    machine = TuringMachine([accept, reject], q0, accept, reject, [])
    buffer = io.StringIO()
    pretty_print_machine(machine, out=Console(file=buffer, width=200))
    assert "StartStateNotInQ" in buffer.getvalue()
