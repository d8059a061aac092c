from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True)


class InvalidSymbol(ValueError):
    """Raised when a tape or transition symbol is outside its alphabet."""

    def __init__(self, value, allowed):
        self.value = value
        self.allowed = tuple(allowed)
        allowed_str = ", ".join(str(s) for s in self.allowed)
        super().__init__(f"Invalid symbol {value!r}, expected one of {{{allowed_str}}}.")


class Severity(Enum):
    ERROR = "red"
    DETAIL = "yellow"


class Category(Enum):
    # Validation-time
    START_STATE_NOT_IN_Q = "StartStateNotInQ"
    ACCEPT_STATE_NOT_IN_Q = "AcceptStateNotInQ"
    REJECT_STATE_NOT_IN_Q = "RejectStateNotInQ"
    TRANSITION_ENDPOINT_NOT_IN_Q = "TransitionEndpointNotInQ"
    INVALID_MOTION = "InvalidMotion"
    NONDETERMINISTIC_TRANSITION = "NondeterministicTransition"
    # Execution-time
    NO_TRANSITION_DEFINED = "NoTransitionDefined"
    ILLEGAL_LEFT_MOVE = "IllegalLeftMove"


@dataclass(frozen=True)
class Diagnostic:
    """One reported failure: which check failed and the machine snapshot at that point."""
    category: Category
    message: str
    state_name: Optional[str] = None
    tape: Optional[str] = None
    head: Optional[int] = None
    transition: Optional[str] = None
    endpoint: Optional[str] = None  # "from" or "to" for TransitionEndpointNotInQ

    @property
    def has_snapshot(self):
        return self.tape is not None

    def snapshot(self):
        """Tape image, state name and head index, one per line."""
        return f"{self.tape}\n{self.state_name}\n{self.head}"

    def to_dict(self):
        return {
            "category": self.category.value,
            "message": self.message,
            "state": self.state_name,
            "tape": self.tape,
            "head": self.head,
            "transition": self.transition,
            "endpoint": self.endpoint,
        }


def colorize(text, severity=Severity.ERROR, markup=True):
    if not markup:
        return text
    color = severity.value
    return f"[{color}]{escape(text)}[/{color}]"


def format_diagnostic(diagnostic, markup=True):
    """Render a diagnostic as console text; the snapshot block follows in DETAIL colour."""
    lines = [colorize(f"{diagnostic.category.value}: {diagnostic.message}", Severity.ERROR, markup)]
    if diagnostic.has_snapshot:
        lines.append(colorize(diagnostic.snapshot(), Severity.DETAIL, markup))
    return "\n".join(lines)


def emit(diagnostic, console=None, markup=True):
    """Default diagnostic sink: print to stderr, coloured unless markup is False."""
    (console or err_console).print(format_diagnostic(diagnostic, markup), markup=markup, highlight=False)
