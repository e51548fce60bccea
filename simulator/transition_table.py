from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from simulator.errors import AlreadyFinalized, DuplicateKey, InvalidTransition

UINT64_MAX = 0xFFFFFFFFFFFFFFFF

# Reserved states
INITIAL = 0
ACCEPT = UINT64_MAX
REJECT = UINT64_MAX - 1

BLANK = 0


class Direction(IntEnum):
    # Same dir bit as the ruleset files: 0 = L, 1 = R
    LEFT = 0
    RIGHT = 1


def _is_uint64(value):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return False
    return 0 <= value <= UINT64_MAX


@dataclass(frozen=True)
class Transition:
    in_state: int
    in_symbol: int
    out_state: int
    out_symbol: int
    direction: Direction

    def __post_init__(self):
        for name in ("in_state", "in_symbol", "out_state", "out_symbol"):
            value = getattr(self, name)
            if not _is_uint64(value):
                raise InvalidTransition(f"{name}={value!r}")
            # numpy scalars are stored as plain ints so lookups hash the same
            object.__setattr__(self, name, int(value))
        if not isinstance(self.direction, Direction):
            raise InvalidTransition(f"direction={self.direction!r}")

    @property
    def key(self):
        return (self.in_state, self.in_symbol)

    @property
    def moves_right(self):
        return self.direction is Direction.RIGHT


class TransitionTable:
    """Deterministic (state, symbol) -> Transition map, sealed by finalize()."""

    def __init__(self):
        self._transitions = {}
        self._finalized = False

    def insert(self, transition: Transition):
        # Duplicate check wins over the finalized check when both apply
        if transition.key in self._transitions:
            raise DuplicateKey(f"state={transition.in_state}, symbol={transition.in_symbol}")
        if self._finalized:
            raise AlreadyFinalized()
        self._transitions[transition.key] = transition

    def finalize(self):
        if self._finalized:
            raise AlreadyFinalized()
        self._finalized = True

    def lookup(self, state, symbol):
        """Return the matching Transition, or None. A miss means reject."""
        return self._transitions.get((state, symbol))

    def clear(self):
        self._transitions.clear()

    @property
    def is_finalized(self):
        return self._finalized

    def __len__(self):
        return len(self._transitions)

    def __iter__(self):
        return iter(self._transitions.values())

    def __contains__(self, key):
        return key in self._transitions
