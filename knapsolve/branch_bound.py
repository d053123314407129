"""Best-first branch and bound for the 0/1 knapsack problem."""

from __future__ import annotations

import heapq
import itertools
import time
from dataclasses import dataclass
from typing import Iterable, Sequence

from .items import Item, sort_by_ratio

TIME_LIMIT = 120.0
MAX_LEVEL = 80
BOUND_FACTOR = 0.95


@dataclass(frozen=True)
class BranchBoundResult:
    """Best value found and the chosen flags, in ratio-sorted item order."""

    best_value: int
    taken: tuple[bool, ...]
    sorted_items: tuple[Item, ...]

    def total_weight(self) -> int:
        return sum(item.weight for item, chosen in zip(self.sorted_items, self.taken) if chosen)

    def selected_weights(self) -> list[int]:
        """Weight of each sorted item if it was chosen, else 0."""
        return [item.weight if chosen else 0 for item, chosen in zip(self.sorted_items, self.taken)]


def upper_bound(
    level: int, weight: int, value: int, capacity: int, sorted_items: Sequence[Item]
) -> float:
    """Greedy bound from ``level`` on, with the fractional part scaled down."""
    if weight >= capacity:
        return 0.0
    bound = float(value)
    for item in sorted_items[level:]:
        if weight + item.weight > capacity:
            bound += (capacity - weight) * item.ratio() * BOUND_FACTOR
            break
        weight += item.weight
        bound += item.value
    return bound


def branch_and_bound(
    items: Iterable[Item],
    capacity: int,
    time_limit: float | None = TIME_LIMIT,
    max_level: int = MAX_LEVEL,
) -> BranchBoundResult:
    """Search for the most valuable selection within ``capacity``.

    The search explores at most ``max_level`` items deep and stops after
    ``time_limit`` seconds, returning the best selection seen so far.
    """
    sorted_items = tuple(sort_by_ratio(items))
    count = len(sorted_items)
    start = time.monotonic()
    order = itertools.count()

    best_value = 0
    best_taken: tuple[bool, ...] = (False,) * count
    root_bound = upper_bound(0, 0, 0, capacity, sorted_items)
    heap = [(-root_bound, next(order), 0, 0, 0, best_taken)]

    while heap:
        if time_limit is not None and time.monotonic() - start > time_limit:
            break
        neg_bound, _, level, weight, value, taken = heapq.heappop(heap)
        if level >= max_level or level >= count:
            continue
        if -neg_bound <= best_value:
            continue

        item = sorted_items[level]
        following = level + 1

        with_weight = weight + item.weight
        with_value = value + item.value
        with_taken = taken[:level] + (True,) + taken[following:]
        if with_weight <= capacity and with_value > best_value:
            best_value = with_value
            best_taken = with_taken
        bound = upper_bound(following, with_weight, with_value, capacity, sorted_items)
        if bound > best_value:
            heapq.heappush(
                heap, (-bound, next(order), following, with_weight, with_value, with_taken)
            )

        bound = upper_bound(following, weight, value, capacity, sorted_items)
        if bound > best_value:
            heapq.heappush(heap, (-bound, next(order), following, weight, value, taken))

    return BranchBoundResult(best_value, best_taken, sorted_items)