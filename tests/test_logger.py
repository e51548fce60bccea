"""Tests for the JSON-lines run logger."""

import json

from logger.logger import RunLogger
from simulator.transition_table import ACCEPT, INITIAL, REJECT, Direction
from simulator.turing_machine import TuringMachine


def read_lines(path):
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f]


class TestRunLogger:
    """Tests for RunLogger file output."""

    def test_log_appends_with_timestamp(self, tmp_path):
        logger = RunLogger(str(tmp_path / "logs"), "run_")
        logger.log({"event": "start"})
        logger.log({"event": "grow"})
        logger.log({"event": "halt", "state": ACCEPT})
        entries = read_lines(logger.current_log)
        assert [e["event"] for e in entries] == ["start", "grow", "halt"]
        assert all("timestamp" in e for e in entries)
        assert entries[2]["state"] == ACCEPT
        assert logger.current_log.endswith(f"run_{logger.today}.jsonl")

    def test_existing_timestamp_kept(self, tmp_path):
        logger = RunLogger(str(tmp_path))
        logger.log({"event": "start", "timestamp": "fixed"})
        assert read_lines(logger.current_log)[0]["timestamp"] == "fixed"

    def test_outcome_files(self, tmp_path):
        logger = RunLogger(str(tmp_path))
        logger.log_halted([{"machine": "a"}])
        logger.log_running([{"machine": "b"}, {"machine": "c"}])
        assert len(read_lines(tmp_path / f"halted_{logger.today}.jsonl")) == 1
        assert len(read_lines(tmp_path / f"running_{logger.today}.jsonl")) == 2

    def test_machine_events_written(self, tmp_path):
        logger = RunLogger(str(tmp_path))
        machine = TuringMachine(logger=logger)
        machine.add_transition(INITIAL, 1, INITIAL, 1, Direction.RIGHT)
        machine.finalize()
        machine.start([1])
        machine.run(10)
        events = [e["event"] for e in read_lines(logger.current_log)]
        assert events == ["start", "grow", "halt"]
        assert read_lines(logger.current_log)[-1]["state"] == REJECT
