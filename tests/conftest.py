import pytest

from simulator.alphabet import Motion
from simulator.turing_machine import State, Transition, TuringMachine

L, R = Motion.LEFT, Motion.RIGHT


@pytest.fixture
def collected():
    """Diagnostic sink that keeps everything it receives."""
    return []


@pytest.fixture
def make_trailing_bit(collected):
    """Accepts binary strings ending in 0 and rejects those ending in 1."""
    def factory(input_string=""):
        q0 = State("q0")
        accept = State("qAccept")
        reject = State("qReject")
        x = State("X")
        delta = [
            Transition(q0, "0", q0, "0", R),
            Transition(q0, "1", q0, "1", R),
            Transition(q0, "B", x, "B", L),
            Transition(x, "1", reject, "1", R),
            Transition(x, "0", accept, "0", R),
        ]
        return TuringMachine([q0, accept, reject, x], q0, accept, reject, delta, input_string,
                             sink=collected.append)
    return factory


@pytest.fixture
def empty_delta_machine(collected):
    q0, accept, reject = State("q0"), State("qAccept"), State("qReject")
    return TuringMachine([q0, accept, reject], q0, accept, reject, [], "0", sink=collected.append)


@pytest.fixture
def left_move_machine(collected):
    q0, accept, reject = State("q0"), State("qAccept"), State("qReject")
    delta = [Transition(q0, "0", accept, "0", L)]
    return TuringMachine([q0, accept, reject], q0, accept, reject, delta, "0", sink=collected.append)


@pytest.fixture
def encoding_machine(collected):
    q0, q1, reject = State("q0"), State("q1"), State("qReject")
    delta = [Transition(q0, "0", q1, "1", R)]
    return TuringMachine([q0, q1, reject], q0, q1, reject, delta, "0", sink=collected.append)
