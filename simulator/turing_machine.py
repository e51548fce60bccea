from enum import Enum

from simulator.errors import (
    HaltedMachine,
    InvalidTransition,
    LeftEdgeViolation,
    MachineReleased,
    NotFinalized,
    NotStarted,
)
from simulator.tape import Tape
from simulator.transition_table import (
    ACCEPT,
    INITIAL,
    REJECT,
    Direction,
    Transition,
    TransitionTable,
)


class RunPhase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    HALTED = "halted"
    ABORTED = "aborted"


class TuringMachine:
    """
    Deterministic single-tape Turing machine, built then run.

    Build phase: add_transition() any number of times, then finalize().
    Run phase: start(input) seeds a fresh tape with the head on cell 0 in the
    INITIAL state, and step()/step_n()/run() advance it. A (state, symbol) pair
    with no transition sends the machine to REJECT. The table is shared by
    every run started on the same machine.

    `logger` is optional; anything with a log(dict) method receives run events.
    """

    def __init__(self, logger=None):
        self.transitions = TransitionTable()
        self.logger = logger
        self.tape = None
        self.head = 0
        self.current_state = INITIAL
        self.steps = 0
        self.phase = RunPhase.NOT_STARTED
        self._released = False

    # === Build ===
    def add_transition(self, in_state, in_symbol, out_state, out_symbol, direction):
        self._check_open()
        try:
            direction = Direction(direction)
        except ValueError as exc:
            raise InvalidTransition(f"direction={direction!r}") from exc
        transition = Transition(in_state, in_symbol, out_state, out_symbol, direction)
        self.transitions.insert(transition)
        return transition

    def finalize(self):
        self._check_open()
        self.transitions.finalize()

    # === Run ===
    def start(self, input_symbols):
        self._check_open()
        if not self.transitions.is_finalized:
            raise NotFinalized()
        input_symbols = list(input_symbols)
        # Built before anything is replaced so a bad input keeps the old run
        tape = Tape.from_input(input_symbols)

        self.tape = tape
        self.head = 0
        self.current_state = INITIAL
        self.steps = 0
        self.phase = RunPhase.RUNNING
        self._log({"event": "start", "input_length": len(input_symbols), "capacity": tape.capacity})

    def step(self):
        self._check_started()
        if self.phase is RunPhase.ABORTED:
            raise LeftEdgeViolation(self.current_state, self.tape.read(self.head), self.steps)
        if self.halted:
            raise HaltedMachine(f"state={self.current_state}")

        symbol = self.tape.read(self.head)
        transition = self.transitions.lookup(self.current_state, symbol)

        if transition is None:
            self.current_state = REJECT
            self.steps += 1
            self._halt()
            return

        if transition.moves_right:
            if self.head + 1 == self.tape.capacity:
                old_capacity = self.tape.capacity
                self.tape.grow()
                self._log({"event": "grow", "old_capacity": old_capacity, "new_capacity": self.tape.capacity})
        elif self.head == 0:
            self.phase = RunPhase.ABORTED
            self._log({"event": "abort", "state": self.current_state, "steps": self.steps, "head": self.head})
            raise LeftEdgeViolation(self.current_state, symbol, self.steps)

        self.tape.write(self.head, transition.out_symbol)
        self.current_state = transition.out_state
        self.head += 1 if transition.moves_right else -1
        self.steps += 1

        if self.halted:
            self._halt()

    def step_n(self, count):
        """Step `count` times, stopping at the first error."""
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError(f"Step count must be a non-negative integer, got {count!r}")
        for _ in range(count):
            self.step()

    def run(self, max_steps=10000):
        """Step until the machine halts or max_steps is spent. Returns steps taken."""
        self._check_started()
        steps = 0
        while not self.halted and steps < max_steps:
            self.step()
            steps += 1
        return steps

    # === Introspection ===
    def peek_tape(self):
        """Return (copy of every stored cell, stored length)."""
        self._check_started()
        return self.tape.snapshot(), self.tape.capacity

    def peek_tape_symbol(self, position):
        self._check_started()
        return self.tape.read(position)

    def peek_state(self):
        self._check_started()
        return self.current_state

    def peek_head(self):
        self._check_started()
        return self.head

    def peek_steps(self):
        self._check_started()
        return self.steps

    @property
    def halted(self):
        return self.phase is not RunPhase.NOT_STARTED and self.current_state in (ACCEPT, REJECT)

    @property
    def accepted(self):
        return self.halted and self.current_state == ACCEPT

    @property
    def rejected(self):
        return self.halted and self.current_state == REJECT

    # === Teardown ===
    def close(self):
        if self._released:
            return
        self.tape = None
        self.transitions.clear()
        self.phase = RunPhase.NOT_STARTED
        self._released = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    # === Internals ===
    def _check_open(self):
        if self._released:
            raise MachineReleased()

    def _check_started(self):
        self._check_open()
        if self.phase is RunPhase.NOT_STARTED:
            raise NotStarted()

    def _halt(self):
        self.phase = RunPhase.HALTED
        self._log({"event": "halt", "state": self.current_state, "steps": self.steps, "head": self.head})

    def _log(self, entry):
        if self.logger is not None:
            self.logger.log(entry)
