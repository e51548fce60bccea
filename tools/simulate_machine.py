# tools/simulate_machine.py

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from config.config_loader import DEFAULT_CONFIG, load_config
from logger.logger import RunLogger
from simulator.transition_table import ACCEPT, INITIAL, REJECT, Direction
from simulator.turing_machine import TuringMachine

console = Console()

RESERVED_STATES = {"INITIAL": INITIAL, "ACCEPT": ACCEPT, "REJECT": REJECT}
DIRECTIONS = {"L": Direction.LEFT, "R": Direction.RIGHT}

# === Loaders ===
def parse_state(value):
    if isinstance(value, str):
        if value not in RESERVED_STATES:
            raise ValueError(f"Unknown state name {value!r}, expected one of {sorted(RESERVED_STATES)}")
        return RESERVED_STATES[value]
    return value

def parse_direction(value):
    if isinstance(value, str):
        if value not in DIRECTIONS:
            raise ValueError(f"Unknown direction {value!r}, expected 'L' or 'R'")
        return DIRECTIONS[value]
    return value

def load_transitions(machine_file):
    """Load [in_state, in_symbol, out_state, out_symbol, dir] rows from a JSON file."""
    with open(machine_file, "r", encoding="utf-8") as f:
        data = json.load(f)

    rows = []
    for row in data["transitions"]:
        if len(row) != 5:
            raise ValueError(f"Transition row must have 5 fields, got {row!r}")
        in_state, in_symbol, out_state, out_symbol, direction = row
        rows.append((parse_state(in_state), in_symbol, parse_state(out_state), out_symbol, parse_direction(direction)))
    return rows

def parse_input(text):
    if not text:
        return []
    return [int(part) for part in text.split(",") if part.strip()]

def build_machine(rows, logger=None):
    machine = TuringMachine(logger=logger)
    for row in rows:
        machine.add_transition(*row)
    machine.finalize()
    return machine

def state_name(state):
    for name, value in RESERVED_STATES.items():
        if state == value:
            return name
    return str(state)

# === Main Simulation Runner ===
def simulate_machine(machine_file, input_symbols, max_steps=1000000, log_frequency=10000, logger=None):
    rows = load_transitions(machine_file)
    with build_machine(rows, logger=logger) as machine:
        machine.start(input_symbols)
        entry = run_with_progress(machine, Path(machine_file).stem, max_steps, log_frequency)

    if logger is not None:
        if entry["halted"]:
            logger.log_halted([entry])
        else:
            logger.log_running([entry])

    return entry

def run_with_progress(machine, name, max_steps, log_frequency):
    with Progress(
            SpinnerColumn(),
            BarColumn(),
            "[progress.percentage]{task.percentage:>3.0f}%",
            TextColumn("{task.completed:,.0f} steps"),
            TimeElapsedColumn(),
            console=console,
            transient=True
    ) as progress:
        task = progress.add_task("[cyan]Simulating...", total=max_steps)
        steps = 0
        while not machine.halted and steps < max_steps:
            taken = machine.run(min(log_frequency, max_steps - steps))
            steps += taken
            progress.update(task, advance=taken)

    cells, length = machine.peek_tape()
    entry = {
        "machine": name,
        "steps_taken": machine.peek_steps(),
        "halted": machine.halted,
        "state": machine.peek_state(),
        "head": machine.peek_head(),
        "tape_length": length,
        "nonblank_cells": int((cells != 0).sum())
    }
    return entry

def print_summary(entry):
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Machine", justify="center")
    table.add_column("Steps", justify="right")
    table.add_column("Final State", justify="center")
    table.add_column("Head", justify="right")
    table.add_column("Tape Length", justify="right")
    table.add_column("Non-blank", justify="right")

    state = state_name(entry["state"])
    color = {"ACCEPT": "green", "REJECT": "red"}.get(state, "yellow")
    table.add_row(
        entry["machine"],
        f"{entry['steps_taken']:,}",
        f"[{color}]{state}[/{color}]",
        str(entry["head"]),
        str(entry["tape_length"]),
        str(entry["nonblank_cells"])
    )
    console.print(table)

# === CLI ===
def run_cli(argv=None):
    """Parse arguments, run the machine and print the summary. Returns the summary entry."""
    parser = argparse.ArgumentParser(description="Run a single Turing machine from a JSON transition table.")
    parser.add_argument("--machine", required=True, help="Path to machine JSON file")
    parser.add_argument("--input", default="", help="Comma separated input symbols, e.g. 1,1,1")
    parser.add_argument("--config", help="Path to runtime config JSON (defaults are used when omitted)")
    parser.add_argument("--max_steps", type=int, help="Step budget, overrides the config value")
    args = parser.parse_args(argv)

    config = load_config(args.config) if args.config else DEFAULT_CONFIG.copy()
    max_steps = args.max_steps if args.max_steps is not None else config["max_steps"]

    logger = None
    if config["trace_enabled"]:
        logger = RunLogger(config["output_directory"], config["log_file_prefix"])

    console.print(f"[cyan]Simulating {args.machine} for up to {max_steps:,} steps...[/cyan]")
    entry = simulate_machine(
        args.machine,
        parse_input(args.input),
        max_steps=max_steps,
        log_frequency=config["log_frequency"],
        logger=logger
    )
    print_summary(entry)
    return entry

def main(argv=None):
    run_cli(argv)

if __name__ == "__main__":
    main()
