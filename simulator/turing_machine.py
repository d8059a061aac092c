from dataclasses import dataclass
from enum import Enum
from typing import Optional

from simulator.alphabet import MOTIONS, to_symbol
from simulator.diagnostics import Category, Diagnostic, emit
from simulator.encoding import encode
from simulator.tape import Tape


@dataclass(frozen=True, eq=False)
class State:
    """A named vertex of the machine. Compared by identity, never by name."""
    name: str
    index: Optional[int] = None  # explicit number used by encode(); parsed from the name when None

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Transition:
    """(src, read) -> (dst, write, move)."""
    src: State
    read: str
    dst: State
    write: str
    move: str

    def __post_init__(self):
        object.__setattr__(self, "read", to_symbol(self.read))
        object.__setattr__(self, "write", to_symbol(self.write))

    def __str__(self):
        return f"({_name(self.src)}, {self.read}) -> ({_name(self.dst)}, {self.write}, {self.move})"


class Outcome(Enum):
    RUNNING = "running"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    FAULTED = "faulted"


@dataclass
class RunResult:
    outcome: Outcome
    steps: int
    state_name: Optional[str]
    tape: str
    head: int
    diagnostic: Optional[Diagnostic] = None

    @property
    def accepted(self):
        return self.outcome is Outcome.ACCEPTED

    @property
    def halted(self):
        return self.outcome is not Outcome.RUNNING


def _name(state):
    return state.name if state is not None else "None"


class Execution:
    """
    One pass of a machine over its tape, advanced a transition at a time.
    There is no step limit here: callers wanting one drive step() themselves.
    """

    def __init__(self, machine):
        self.machine = machine
        self.tape = machine.tape
        self.state = machine.start
        self.steps = 0
        self.outcome = Outcome.RUNNING
        self.diagnostic = None

        violation = machine.validate()
        if violation is not None:
            self._fault(violation)
            return

        self._lookup = machine.transition_map()
        self.tape.reset()
        self._check_halt()

    def _check_halt(self):
        if self.state is self.machine.accept:
            self.outcome = Outcome.ACCEPTED
        elif self.state is self.machine.reject:
            self.outcome = Outcome.REJECTED

    def _fault(self, diagnostic):
        self.outcome = Outcome.FAULTED
        self.diagnostic = diagnostic
        self.machine.report(diagnostic)

    def _snapshot_fault(self, category, message):
        self._fault(Diagnostic(
            category=category,
            message=message,
            state_name=_name(self.state),
            tape=self.tape.render_with_head(),
            head=self.tape.head_index(),
        ))

    def step(self):
        """Apply one transition and return the resulting outcome."""
        if self.outcome is not Outcome.RUNNING:
            return self.outcome

        symbol = self.tape.read()
        transition = self._lookup.get((self.state, symbol))
        if transition is None:
            self._snapshot_fault(
                Category.NO_TRANSITION_DEFINED,
                f"No transition found from state '{_name(self.state)}' reading symbol '{symbol}'",
            )
            return self.outcome

        self.tape.write(transition.write)
        if not self.tape.move(transition.move):
            self._snapshot_fault(
                Category.ILLEGAL_LEFT_MOVE,
                f"Invalid move left of the tape origin from state '{_name(self.state)}'",
            )
            return self.outcome

        self.state = transition.dst
        self.steps += 1
        self._check_halt()
        return self.outcome

    def result(self):
        return RunResult(
            outcome=self.outcome,
            steps=self.steps,
            state_name=_name(self.state),
            tape=self.tape.render_with_head(),
            head=self.tape.head_index(),
            diagnostic=self.diagnostic,
        )


class TuringMachine:
    """Deterministic single-tape machine over input alphabet {0, 1}."""

    def __init__(self, states, start, accept, reject, transitions, input_string="", sink=None):
        self.states = tuple(dict.fromkeys(states))
        self._members = set(self.states)
        self.start = start
        self.accept = accept
        self.reject = reject
        self.transitions = tuple(dict.fromkeys(transitions))
        self.tape = Tape(input_string)
        self.sink = sink if sink is not None else emit
        self.diagnostics = []
        self.last_result = None

    # === Validation ===
    def validate(self):
        """Return the first violated invariant as a Diagnostic, or None when the machine is well-formed."""
        if self.start not in self._members:
            return Diagnostic(Category.START_STATE_NOT_IN_Q,
                              f"Initial state {_name(self.start)} not in Q",
                              state_name=_name(self.start))
        if self.accept not in self._members:
            return Diagnostic(Category.ACCEPT_STATE_NOT_IN_Q,
                              f"Accepting state {_name(self.accept)} not in Q",
                              state_name=_name(self.accept))
        if self.reject not in self._members:
            return Diagnostic(Category.REJECT_STATE_NOT_IN_Q,
                              f"Rejecting state {_name(self.reject)} not in Q",
                              state_name=_name(self.reject))

        for t in self.transitions:
            for endpoint, state in (("from", t.src), ("to", t.dst)):
                if state not in self._members:
                    return Diagnostic(Category.TRANSITION_ENDPOINT_NOT_IN_Q,
                                      f"Transition {endpoint} state not in Q: {_name(state)}",
                                      state_name=_name(state), transition=str(t), endpoint=endpoint)
            if t.move not in MOTIONS:
                return Diagnostic(Category.INVALID_MOTION,
                                  f"Invalid direction in transition: {t.move}",
                                  transition=str(t))

        seen = {}
        for t in self.transitions:
            key = (t.src, t.read)
            if key in seen:
                return Diagnostic(Category.NONDETERMINISTIC_TRANSITION,
                                  f"Transitions {seen[key]} and {t} share state '{_name(t.src)}' and symbol '{t.read}'",
                                  state_name=_name(t.src), transition=str(t))
            seen[key] = t
        return None

    def transition_map(self):
        """(state, symbol) -> Transition; the first transition listed wins on overlap."""
        lookup = {}
        for t in self.transitions:
            lookup.setdefault((t.src, t.read), t)
        return lookup

    def report(self, diagnostic):
        self.diagnostics.append(diagnostic)
        self.sink(diagnostic)

    # === Execution ===
    def start_execution(self):
        self.diagnostics = []
        return Execution(self)

    def execute(self):
        """Run until accept, reject or fault and return the full RunResult."""
        execution = self.start_execution()
        while execution.step() is Outcome.RUNNING:
            pass
        self.last_result = execution.result()
        return self.last_result

    def run(self):
        """True when the input is accepted; False for a reject or any fault."""
        return self.execute().accepted

    # === Inspection ===
    def description(self):
        q = ", ".join(_name(s) for s in self.states)
        delta = ", ".join(str(t) for t in self.transitions)
        return (
            f"Q = {{{q}}}, Sigma = {{0, 1}}, Gamma = {{0, 1, B}}, "
            f"q0 = {_name(self.start)}, qAccept = {_name(self.accept)}, qReject = {_name(self.reject)}, "
            f"Delta = {{{delta}}}"
        )

    def encode(self):
        return encode(self.transitions)

    def __str__(self):
        return self.description()
