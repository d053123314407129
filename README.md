# knapsolve

Solvers for the 0/1 knapsack problem, plus two command-line runners that
process every instance file in a folder.

* **Branch and bound** (`knapsolve.branch_bound`): best-first search over
  items sorted by value/weight ratio. The bound fills greedily and adds the
  fractional remainder scaled by 0.95. The search stops after a time limit
  (120 seconds by default) and goes at most 80 items deep by default, and
  returns the best selection found so far.
* **Genetic algorithm** (`knapsolve.genetic`): tournament selection,
  one-point crossover, bit-flip mutation, elitism and a ratio-based repair
  for overweight individuals. Defaults: population 60, 250 generations,
  mutation rate 0.04.
* **Greedy** (`knapsolve.greedy`): take items in order of value/weight ratio
  (ties broken by higher value) or of value alone, whenever they still fit.

## Installation

```
pip install .
```

Python 3.10 or newer is required; there are no third-party dependencies.
Install the `test` extra to run the tests with pytest.

## Instance files

An instance is a plain text file of whitespace-separated integers: the item
count and the capacity, followed by one pair of numbers per item. The
comparison runner reads each pair as `weight value`; the greedy runner reads
each pair as `value weight`.

```
4 10
5 10
4 40
6 30
3 50
```

A file that is truncated or holds something other than an integer is
reported and skipped.

## Commands

Compare branch and bound with the genetic algorithm on every file in a folder
(default `data`):

```
knapsolve-compare [DIRECTORY]
```

Files are processed in name order; files with no items are skipped. For each
file it prints the value, weight and time of both methods, adds a row to
`summary_knapsack_results.csv` (columns `File, BestValue_BnB, Weight_BnB,
Time_BnB_ms, BestValue_GA, Weight_GA, Time_GA_ms`), and writes
`knapsack_individual_results/<name>.csv`. That file has a `BnB` row and a
`GA` row listing the weight of each item if it was selected and 0 if not.
The `BnB` row follows the ratio-sorted item order; the `GA` row follows the
order of the file.

Run both greedy heuristics on every file in a folder (default `data`):

```
knapsolve-greedy [DIRECTORY]
```

The report goes to standard output and also to `results_greedy_knapsack.csv`.
Despite its name, that file holds the same plain-text report, not CSV.

Both commands return exit status 1 if the folder cannot be read or the
output file cannot be created.

## Library use

```python
import random
from knapsolve.items import Item, read_instance
from knapsolve.branch_bound import branch_and_bound
from knapsolve.genetic import genetic_algorithm
from knapsolve.greedy import Method, solve_greedy

items = [Item(weight=5, value=10), Item(weight=4, value=40),
         Item(weight=6, value=30), Item(weight=3, value=50)]

bb = branch_and_bound(items, 10, time_limit=None)
print(bb.best_value, bb.total_weight(), bb.selected_weights())

ga = genetic_algorithm(items, 10, rng=random.Random(1))
print(ga.best_value, ga.total_weight(), ga.selected_weights())

outcome = solve_greedy(items, 10, "example", Method.RATIO)
print(outcome.report())
```

`read_instance(path, value_first)` loads an instance file and returns the
items and the capacity. Pass `value_first=True` when each pair is written as
`value weight`.

`knapsolve.compare` offers `compare_file(path)`, which runs both solvers on
one file, and `run_directory(data_dir, summary_path, detail_dir)`, which does
what `knapsolve-compare` does with paths of your choosing.

The genetic operators (`fitness`, `repair`, `crossover`, `mutate`,
`tournament`) and the bound (`upper_bound`) are public and return new values
rather than changing their arguments.

## Limits

The branch and bound search is cut off by its time limit and depth cap, so
on large instances its result is the best found, not a proven optimum. The
genetic algorithm and the greedy heuristics give no optimality guarantee.