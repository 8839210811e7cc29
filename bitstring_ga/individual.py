"""
Individual representation for the binary genetic search.

An individual is a fixed-length array of 0/1 genes plus a reference to the
fitness function of the population that created it.
"""

from typing import Callable
import numpy as np


class Individual:
    """
    A single candidate solution.

    Attributes:
        genes: numpy uint8 array of 0/1 values
        fitness_fn: Scoring function injected by the owning population
    """

    def __init__(self, genes: np.ndarray, fitness_fn: Callable[["Individual"], int]):
        self.genes = np.asarray(genes, dtype=np.uint8)
        self.fitness_fn = fitness_fn

    @classmethod
    def random(
        cls,
        size: int,
        fitness_fn: Callable[["Individual"], int],
        rng: np.random.Generator
    ) -> "Individual":
        """
        Create an individual with uniformly random genes.

        Args:
            size: Number of genes
            fitness_fn: Function mapping an Individual to an integer score
            rng: Random number generator

        Returns:
            New Individual
        """
        genes = rng.integers(0, 2, size=size, dtype=np.uint8)
        return cls(genes, fitness_fn)

    def fitness(self) -> int:
        """Score this individual with its injected fitness function."""
        return self.fitness_fn(self)

    def mutate(self, mutation_rate: float, rng: np.random.Generator) -> None:
        """
        Redraw each gene independently with probability mutation_rate.

        A redrawn gene is a fresh random bit, so it keeps its old value half
        of the time.

        Args:
            mutation_rate: Per-gene mutation probability in [0, 1]
            rng: Random number generator
        """
        size = len(self.genes)
        mask = rng.random(size) < mutation_rate
        redrawn = rng.integers(0, 2, size=size, dtype=np.uint8)
        self.genes[mask] = redrawn[mask]

    def render(self) -> str:
        return "".join("1" if gene else "0" for gene in self.genes)

    def __len__(self) -> int:
        return len(self.genes)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Individual(genes={self.render()!r})"
