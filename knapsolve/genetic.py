"""Genetic algorithm for the 0/1 knapsack problem."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Sequence

from .items import Item

POPULATION_SIZE = 60
GENERATIONS = 250
MUTATION_RATE = 0.04


@dataclass(frozen=True)
class GeneticResult:
    """Best fitness found and its genes, one per item in input order."""

    best_value: int
    genes: tuple[bool, ...]
    items: tuple[Item, ...]

    def total_weight(self) -> int:
        return sum(item.weight for item, chosen in zip(self.items, self.genes) if chosen)

    def selected_weights(self) -> list[int]:
        """Weight of each item if it was chosen, else 0."""
        return [item.weight if chosen else 0 for item, chosen in zip(self.items, self.genes)]


def _weight(genes: Sequence[bool], items: Sequence[Item]) -> int:
    return sum(item.weight for chosen, item in zip(genes, items) if chosen)


def fitness(genes: Sequence[bool], items: Sequence[Item], capacity: int) -> int:
    """Total value of the chosen items, or 0 if they exceed the capacity."""
    total_weight = 0
    total_value = 0
    for chosen, item in zip(genes, items):
        if chosen:
            total_weight += item.weight
            total_value += item.value
    return total_value if total_weight <= capacity else 0


def repair(genes: Sequence[bool], items: Sequence[Item], capacity: int) -> list[bool]:
    """Drop the chosen items of lowest value per weight until the rest fit."""
    repaired = list(genes)
    total = _weight(repaired, items)
    if total <= capacity:
        return repaired
    chosen = sorted(
        (index for index, flag in enumerate(repaired) if flag),
        key=lambda index: items[index].ratio(),
    )
    for index in chosen:
        if total <= capacity:
            break
        repaired[index] = False
        total -= items[index].weight
    return repaired


def crossover(
    a: Sequence[bool], b: Sequence[bool], rng: random.Random
) -> tuple[list[bool], list[bool]]:
    """One-point crossover: the tails from a random cut on are swapped."""
    if len(a) != len(b):
        raise ValueError("genomes must have the same length")
    if not a:
        raise ValueError("cannot cross empty genomes")
    cut = rng.randrange(len(a))
    return list(a[:cut]) + list(b[cut:]), list(b[:cut]) + list(a[cut:])


def mutate(genes: Sequence[bool], rate: float, rng: random.Random) -> list[bool]:
    """Flip each gene independently with probability ``rate``."""
    return [not gene if rng.random() < rate else gene for gene in genes]


def tournament(
    population: Sequence[tuple[Sequence[bool], int]], rng: random.Random
) -> tuple[Sequence[bool], int]:
    """Pick two ``(genes, fitness)`` members at random; the fitter one wins.

    On a tie the second pick wins.
    """
    first = population[rng.randrange(len(population))]
    second = population[rng.randrange(len(population))]
    return first if first[1] > second[1] else second


def genetic_algorithm(
    items: Iterable[Item],
    capacity: int,
    population_size: int = POPULATION_SIZE,
    generations: int = GENERATIONS,
    mutation_rate: float = MUTATION_RATE,
    rng: random.Random | None = None,
) -> GeneticResult:
    """Evolve selections with elitism, tournaments, crossover and repair."""
    if population_size < 1:
        raise ValueError("population size must be at least 1")
    rng = rng if rng is not None else random.Random()
    items = tuple(items)
    count = len(items)
    if count == 0:
        return GeneticResult(0, (), items)

    def evaluate(genes: Sequence[bool]) -> tuple[list[bool], int]:
        fixed = repair(genes, items, capacity)
        return fixed, fitness(fixed, items, capacity)

    population = [
        evaluate([bool(rng.getrandbits(1)) for _ in range(count)])
        for _ in range(population_size)
    ]
    best_genes: list[bool] = [False] * count
    best_fitness = 0

    for _ in range(generations):
        champion = max(population, key=lambda member: member[1])
        if champion[1] > best_fitness:
            best_genes, best_fitness = champion
        offspring = [champion]
        while len(offspring) < population_size:
            first_parent, _ = tournament(population, rng)
            second_parent, _ = tournament(population, rng)
            first_child, second_child = crossover(first_parent, second_parent, rng)
            first_child = mutate(first_child, mutation_rate, rng)
            second_child = mutate(second_child, mutation_rate, rng)
            offspring.append(evaluate(first_child))
            if len(offspring) < population_size:
                offspring.append(evaluate(second_child))
        population = offspring

    for genes, score in population:
        if score > best_fitness:
            best_genes, best_fitness = genes, score

    return GeneticResult(best_fitness, tuple(best_genes), items)