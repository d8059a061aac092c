import hashlib
import re

import numpy as np

from simulator.alphabet import GAMMA, Motion

DIGITS = re.compile(r"\d+")

# Numeric codes used by encode_table()
SYMBOL_CODES = {symbol: code for code, symbol in enumerate(GAMMA)}


def state_index(state):
    """Explicit index if the state has one, else the first run of digits in its name, else 0."""
    if state.index is not None:
        return state.index
    match = DIGITS.search(state.name)
    return int(match.group()) if match else 0


def motion_bit(move):
    return 0 if move == Motion.LEFT else 1


def encode_transition(t):
    return f"{state_index(t.src)}#{t.read}#{state_index(t.dst)}#{t.write}#{motion_bit(t.move)}"


def encode(transitions):
    """Flatten a transition set into '<from>#<read>#<to>#<write>#<dir>' quintuples joined by ';'."""
    return ";".join(encode_transition(t) for t in transitions)


def encode_table(transitions):
    """Same quintuples as encode(), as an int32 array of shape (n, 5). Blank is coded as 2."""
    rows = [
        (state_index(t.src), SYMBOL_CODES[t.read], state_index(t.dst), SYMBOL_CODES[t.write], motion_bit(t.move))
        for t in transitions
    ]
    return np.array(rows, dtype=np.int32).reshape(len(rows), 5)


def hash_encoding(encoded):
    """Hash an encoded transition set deterministically."""
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()
