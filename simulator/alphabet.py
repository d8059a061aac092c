from enum import Enum

from simulator.diagnostics import InvalidSymbol


class Symbol(str, Enum):
    ZERO = "0"
    ONE = "1"
    BLANK = "B"

    def __str__(self):
        return self.value


class Motion(str, Enum):
    LEFT = "L"
    RIGHT = "R"

    def __str__(self):
        return self.value


# Input alphabet and tape alphabet
SIGMA = (Symbol.ZERO, Symbol.ONE)
GAMMA = (Symbol.ZERO, Symbol.ONE, Symbol.BLANK)
MOTIONS = (Motion.LEFT, Motion.RIGHT)


def to_symbol(value, allowed=GAMMA):
    """Coerce a character (or Symbol) into a Symbol of the given alphabet."""
    for symbol in allowed:
        if value == symbol:
            return symbol
    raise InvalidSymbol(value, allowed)


def parse_input(text):
    """Convert an input string over {0, 1} into a list of Symbols."""
    return [to_symbol(c, SIGMA) for c in text]
