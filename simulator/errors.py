class MachineError(Exception):
    """Base class for recoverable engine errors. The machine is left as it was."""

    message = "tm: engine error"

    def __init__(self, detail=None):
        self.detail = detail
        super().__init__(self.message if detail is None else f"{self.message} ({detail})")


class AllocationFailed(MachineError):
    message = "tm: tape allocation failed"


class DuplicateKey(MachineError):
    message = "tm: a transition with the same (state, symbol) inputs is already in the table"


class AlreadyFinalized(MachineError):
    message = "tm: the transition table is already finalized and can no longer be changed"


class NotFinalized(MachineError):
    message = "tm: the transition table must be finalized before a run can start"


class InvalidSymbol(MachineError):
    message = "tm: input symbols must be integers in the range 1..2**63 - 1"


class InvalidTransition(MachineError):
    message = "tm: transition fields must be unsigned 64-bit integers with a LEFT/RIGHT direction"


class NotStarted(MachineError):
    message = "tm: no run has been started on this machine"


class HaltedMachine(MachineError):
    message = "tm: the machine has halted, no further steps are possible"


class MachineReleased(MachineError):
    message = "tm: the machine has been closed and its storage released"


class LeftEdgeViolation(RuntimeError):
    """
    Fatal: the transition table tried to move the head left of cell 0.

    Not a MachineError. The table is malformed for a left-bounded tape, the run
    is aborted and cannot be resumed; only introspection and a fresh start()
    remain possible.
    """

    def __init__(self, state, symbol, steps):
        self.state = state
        self.symbol = symbol
        self.steps = steps
        super().__init__(
            f"tm: malformed machine, moved left off cell 0 "
            f"(state={state}, symbol={symbol}, step={steps})"
        )
