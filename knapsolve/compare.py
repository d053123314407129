"""Run branch and bound and the genetic algorithm side by side over instance files."""

from __future__ import annotations

import csv
import sys
import time
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Sequence

from .branch_bound import BranchBoundResult, branch_and_bound
from .genetic import GeneticResult, genetic_algorithm
from .items import read_instance

DATA_DIR = "data"
SUMMARY_FILE = "summary_knapsack_results.csv"
DETAIL_DIR = "knapsack_individual_results"
SUMMARY_HEADER = (
    "File",
    "BestValue_BnB",
    "Weight_BnB",
    "Time_BnB_ms",
    "BestValue_GA",
    "Weight_GA",
    "Time_GA_ms",
)


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


@dataclass(frozen=True)
class FileComparison:
    """Both solvers' results on one instance file, with their run times."""

    filename: str
    stem: str
    bnb: BranchBoundResult
    bnb_time_ms: int
    ga: GeneticResult
    ga_time_ms: int

    def summary_row(self) -> list[str | int]:
        """One line of the summary table, in the order of ``SUMMARY_HEADER``."""
        return [
            self.filename,
            self.bnb.best_value,
            self.bnb.total_weight(),
            self.bnb_time_ms,
            self.ga.best_value,
            self.ga.total_weight(),
            self.ga_time_ms,
        ]

    def detail_rows(self) -> list[list[str | int]]:
        """Per-item chosen weights: branch and bound in sorted order, then GA."""
        return [
            ["BnB", *self.bnb.selected_weights()],
            ["GA", *self.ga.selected_weights()],
        ]


def compare_file(path: str | PathLike[str]) -> FileComparison | None:
    """Solve one instance with both methods; ``None`` if it holds no items."""
    path = Path(path)
    items, capacity = read_instance(path)
    if not items:
        return None

    start = time.monotonic()
    bnb = branch_and_bound(items, capacity)
    bnb_time = _elapsed_ms(start)

    start = time.monotonic()
    ga = genetic_algorithm(items, capacity)
    ga_time = _elapsed_ms(start)

    return FileComparison(path.name, path.stem, bnb, bnb_time, ga, ga_time)


def run_directory(
    data_dir: str | PathLike[str],
    summary_path: str | PathLike[str],
    detail_dir: str | PathLike[str],
) -> list[FileComparison]:
    """Compare every regular file in ``data_dir`` and write the CSV reports.

    Raises ``NotADirectoryError`` if ``data_dir`` is not a directory and
    ``OSError`` if the summary cannot be created.
    """
    data_dir = Path(data_dir)
    detail_dir = Path(detail_dir)
    if not data_dir.is_dir():
        raise NotADirectoryError(f'cannot open directory "{data_dir}"')

    comparisons: list[FileComparison] = []
    with open(summary_path, "w", newline="") as summary_file:
        summary = csv.writer(summary_file, lineterminator="\n")
        summary.writerow(SUMMARY_HEADER)
        detail_dir.mkdir(parents=True, exist_ok=True)

        for entry in sorted(data_dir.iterdir()):
            if not entry.is_file():
                continue
            print(f"Processing file: {entry.name}")
            try:
                comparison = compare_file(entry)
            except OSError:
                print(f"  Cannot open file: {entry}", file=sys.stderr)
                continue
            except ValueError as exc:
                print(f"  Cannot read file: {exc}", file=sys.stderr)
                continue
            if comparison is None:
                continue

            print(
                f"  [BnB] Value={comparison.bnb.best_value}, "
                f"Weight={comparison.bnb.total_weight()}, "
                f"Time={comparison.bnb_time_ms} ms"
            )
            print(
                f"  [GA ] Value={comparison.ga.best_value}, "
                f"Weight={comparison.ga.total_weight()}, "
                f"Time={comparison.ga_time_ms} ms"
            )
            summary.writerow(comparison.summary_row())
            comparisons.append(comparison)

            try:
                with open(detail_dir / f"{comparison.stem}.csv", "w", newline="") as detail:
                    csv.writer(detail, lineterminator="\n").writerows(
                        comparison.detail_rows()
                    )
            except OSError:
                pass

    return comparisons


def main(argv: Sequence[str] | None = None) -> int:
    """Compare both solvers on every file of the data directory."""
    args = sys.argv[1:] if argv is None else list(argv)
    data_dir = args[0] if args else DATA_DIR

    print(f"Current working directory: {Path.cwd()}")
    print(f"Scanning folder: {data_dir}")
    try:
        run_directory(data_dir, SUMMARY_FILE, DETAIL_DIR)
    except NotADirectoryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError:
        print(f'Error: cannot create file "{SUMMARY_FILE}"', file=sys.stderr)
        return 1
    print(f'Finished. Summary saved to "{SUMMARY_FILE}"')
    return 0