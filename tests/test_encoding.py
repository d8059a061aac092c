import numpy as np

from simulator.alphabet import Motion
from simulator.encoding import encode, encode_table, hash_encoding, state_index
from simulator.turing_machine import State, Transition


def test_single_transition_encoding(encoding_machine):
    assert encode(encoding_machine.transitions) == "0#0#1#1#1"


def test_state_index_from_name():
    assert state_index(State("q10")) == 10
    assert state_index(State("state7b12")) == 7
    assert state_index(State("X")) == 0


def test_explicit_index_overrides_name():
    assert state_index(State("q10", 3)) == 3
    assert state_index(State("X", 4)) == 4


def test_encoding_keeps_transition_order(make_trailing_bit):
    machine = make_trailing_bit()
    # qAccept, qReject and X carry no digits and all collapse to 0
    assert machine.encode() == "0#0#0#0#1;0#1#0#1#1;0#B#0#B#0;0#1#0#1#1;0#0#0#0#1"


def test_empty_transition_set():
    assert encode([]) == ""
    assert encode_table([]).shape == (0, 5)


def test_encode_table():
    q0, q2 = State("q0"), State("q2")
    delta = [
        Transition(q0, "B", q2, "1", Motion.LEFT),
        Transition(q2, "1", q0, "0", Motion.RIGHT),
    ]
    table = encode_table(delta)
    assert table.dtype == np.int32
    np.testing.assert_array_equal(table, [[0, 2, 2, 1, 0], [2, 1, 0, 0, 1]])


def test_hash_encoding_is_stable():
    digest = hash_encoding("0#0#1#1#1")
    assert digest == hash_encoding("0#0#1#1#1")
    assert digest != hash_encoding("0#0#1#1#0")
    assert len(digest) == 64
