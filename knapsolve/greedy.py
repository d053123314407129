"""Greedy knapsack heuristics and a command that runs them over a directory."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Sequence

from .items import Item, read_instance

RESULTS_FILE = "results_greedy_knapsack.csv"


class Method(str, Enum):
    """Order in which the greedy heuristic considers items."""

    RATIO = "ratio"
    VALUE = "value"


@dataclass
class GreedyOutcome:
    """Result of one greedy run on one instance."""

    filename: str
    method: Method
    total_value: int = 0
    total_weight: int = 0
    time_ms: int = 0
    chosen_values: list[int] = field(default_factory=list)
    chosen_weights: list[int] = field(default_factory=list)

    def report(self) -> str:
        """The outcome as a block of text, ending in a blank line."""
        values = " ".join(map(str, self.chosen_values))
        weights = " ".join(map(str, self.chosen_weights))
        return (
            f"Filename: {self.filename} Approach: {Method(self.method).value}\n"
            f" Total Value: {self.total_value} Total Weight: {self.total_weight}"
            f" Time Taken: {self.time_ms} ms\n"
            f" Values Chosen: {values}\n"
            f" Weights Chosen: {weights}\n\n"
        )


def solve_greedy(
    items: Iterable[Item], capacity: int, filename: str, method: Method | str
) -> GreedyOutcome:
    """Take items in the method's order whenever they still fit."""
    method = Method(method)
    start = time.perf_counter()
    if method is Method.RATIO:
        ordered = sorted(items, key=lambda item: (item.ratio(), item.value), reverse=True)
    else:
        ordered = sorted(items, key=lambda item: item.value, reverse=True)

    outcome = GreedyOutcome(filename, method)
    for item in ordered:
        if outcome.total_weight + item.weight <= capacity:
            outcome.total_weight += item.weight
            outcome.total_value += item.value
            outcome.chosen_values.append(item.value)
            outcome.chosen_weights.append(item.weight)
    outcome.time_ms = int((time.perf_counter() - start) * 1000)
    return outcome


def main(argv: Sequence[str] | None = None) -> int:
    """Run both heuristics on every file in a directory and write a report."""
    args = sys.argv[1:] if argv is None else list(argv)
    directory = Path(args[0]) if args else Path("data")
    if not directory.is_dir():
        print(f"Cannot access directory: {directory}", file=sys.stderr)
        return 1

    outcomes: list[GreedyOutcome] = []
    for entry in sorted(directory.iterdir()):
        if not entry.is_file():
            continue
        try:
            items, capacity = read_instance(entry, value_first=True)
        except OSError:
            print(f"Could not open: {entry}", file=sys.stderr)
            continue
        except ValueError as exc:
            print(f"Could not read: {exc}", file=sys.stderr)
            continue
        for method in Method:
            outcomes.append(solve_greedy(items, capacity, entry.name, method))

    text = "".join(outcome.report() for outcome in outcomes)
    sys.stdout.write(text)
    try:
        Path(RESULTS_FILE).write_text(text)
    except OSError:
        print(f"Failed to write to {RESULTS_FILE}", file=sys.stderr)
        return 1
    print(f"Output written to {RESULTS_FILE}", file=sys.stderr)
    return 0