import numpy as np

from simulator.errors import AllocationFailed, InvalidSymbol
from simulator.transition_table import BLANK

INPUT_SYMBOL_MAX = 0x7FFFFFFFFFFFFFFF


def validate_input(input_symbols):
    """Check every input symbol is in 1..INPUT_SYMBOL_MAX; return them as a list."""
    symbols = list(input_symbols)
    for position, symbol in enumerate(symbols):
        if isinstance(symbol, (bool, np.bool_)) or not isinstance(symbol, (int, np.integer)):
            raise InvalidSymbol(f"position {position}: {symbol!r}")
        if symbol < 1 or symbol > INPUT_SYMBOL_MAX:
            raise InvalidSymbol(f"position {position}: {symbol}")
    return [int(symbol) for symbol in symbols]


class Tape:
    """
    Right-unbounded, left-bounded tape over a uint64 numpy buffer.

    Cells past the buffer read as blank. The buffer only grows, by doubling,
    and always before the head moves onto a cell that is not yet allocated.
    """

    def __init__(self, cells):
        self.cells = cells

    @classmethod
    def from_input(cls, input_symbols):
        symbols = validate_input(input_symbols)
        try:
            # An empty input still gets one blank cell for the head to sit on
            cells = np.zeros(max(len(symbols), 1), dtype=np.uint64)
        except MemoryError as exc:
            raise AllocationFailed(f"{len(symbols)} cells") from exc
        if symbols:
            cells[:len(symbols)] = np.array(symbols, dtype=np.uint64)
        return cls(cells)

    @property
    def capacity(self):
        return self.cells.shape[0]

    def read(self, position):
        if position < 0:
            raise IndexError(f"Tape position {position} is left of cell 0")
        if position >= self.capacity:
            return BLANK
        return int(self.cells[position])

    def write(self, position, symbol):
        if position < 0 or position >= self.capacity:
            raise IndexError(f"Tape position {position} outside allocated range 0..{self.capacity - 1}")
        self.cells[position] = symbol

    def grow(self):
        """Double the buffer, blank-filling the new half. Returns the new capacity."""
        try:
            grown = np.zeros(self.capacity * 2, dtype=np.uint64)
        except MemoryError as exc:
            raise AllocationFailed(f"{self.capacity * 2} cells") from exc
        grown[:self.capacity] = self.cells
        self.cells = grown
        return self.capacity

    def snapshot(self):
        return self.cells.copy()

    def __len__(self):
        return self.capacity
