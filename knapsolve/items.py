"""Knapsack items and the plain-text instance format."""

from __future__ import annotations

import math
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable


@dataclass(frozen=True)
class Item:
    """One object that may be packed: its weight and its value."""

    weight: int
    value: int

    def ratio(self) -> float:
        """Value per unit of weight; zero-weight items rank above all others."""
        if self.weight == 0:
            return math.inf
        return self.value / self.weight


def _parse_int(token: str, path: str | PathLike[str]) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise ValueError(f"{path}: expected an integer, got {token!r}") from exc


def read_instance(
    path: str | PathLike[str], value_first: bool = False
) -> tuple[list[Item], int]:
    """Read an instance file: a count and a capacity, then one pair per item.

    Pairs are ``weight value`` unless ``value_first`` is set, in which case
    they are ``value weight``. Returns the items and the capacity.
    """
    tokens = Path(path).read_text().split()
    if len(tokens) < 2:
        raise ValueError(f"{path}: missing item count or capacity")
    count = _parse_int(tokens[0], path)
    capacity = _parse_int(tokens[1], path)
    if count < 0:
        raise ValueError(f"{path}: negative item count {count}")
    fields = tokens[2 : 2 + 2 * count]
    if len(fields) < 2 * count:
        raise ValueError(f"{path}: expected {count} items, file is truncated")
    numbers = [_parse_int(token, path) for token in fields]
    pairs = zip(numbers[::2], numbers[1::2])
    if value_first:
        items = [Item(weight=second, value=first) for first, second in pairs]
    else:
        items = [Item(weight=first, value=second) for first, second in pairs]
    return items, capacity


def sort_by_ratio(items: Iterable[Item]) -> list[Item]:
    """Items in descending order of value per weight, ties kept in input order."""
    return sorted(items, key=Item.ratio, reverse=True)