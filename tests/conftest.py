"""
Pytest fixtures for simulator tests.
"""

import json

import pytest

from simulator.transition_table import ACCEPT, INITIAL, Direction
from simulator.turing_machine import TuringMachine


class RecordingLogger:
    """Collects run events in memory."""

    def __init__(self):
        self.entries = []

    def log(self, entry):
        self.entries.append(entry)

    def events(self, name):
        return [entry for entry in self.entries if entry["event"] == name]


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def empty_machine() -> TuringMachine:
    """Finalized machine with no transitions at all."""
    machine = TuringMachine()
    machine.finalize()
    return machine


@pytest.fixture
def right_scanner(recorder) -> TuringMachine:
    """Single rule (INITIAL, 1) -> (INITIAL, 1, R)."""
    machine = TuringMachine(logger=recorder)
    machine.add_transition(INITIAL, 1, INITIAL, 1, Direction.RIGHT)
    machine.finalize()
    return machine


@pytest.fixture
def unary_successor() -> TuringMachine:
    """Scans right over 1s, writes one more 1 on the first blank and accepts."""
    machine = TuringMachine()
    machine.add_transition(INITIAL, 1, INITIAL, 1, Direction.RIGHT)
    machine.add_transition(INITIAL, 0, ACCEPT, 1, Direction.RIGHT)
    machine.finalize()
    return machine


@pytest.fixture
def machine_file(tmp_path):
    """Write a machine JSON file and return its path."""

    def _write(transitions, name="machine"):
        path = tmp_path / f"{name}.json"
        path.write_text(json.dumps({"transitions": transitions}), encoding="utf-8")
        return path

    return _write
