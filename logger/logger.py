import json
import os
from datetime import datetime, timezone

class RunLogger:
    """
    JSON-lines logger for machine runs.

    Engine events (start, grow, halt, abort) go to the main dated log; run
    summaries can be split by outcome with log_halted / log_running.
    """

    def __init__(self, output_directory="logs/", log_file_prefix="tm_run_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(self._stamp(entry)) + "\n")

    def _stamp(self, entry):
        if "timestamp" in entry:
            return entry
        return {**entry, "timestamp": datetime.now(timezone.utc).isoformat()}

    def log(self, entry: dict):
        """Log a single entry to the main run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(self._stamp(entry)) + "\n")

    def log_halted(self, entries: list):
        """Log summaries of runs that reached ACCEPT or REJECT."""
        self._log_to_file(f"halted_{self.today}.jsonl", entries)

    def log_running(self, entries: list):
        """Log summaries of runs that used up their step budget."""
        self._log_to_file(f"running_{self.today}.jsonl", entries)
