"""
Population and evolution step for the binary genetic search.

Implements fitness scoring against the target genome, tournament selection,
uniform crossover, and the elitist replacement policy.
"""

from typing import List, Optional
import numpy as np

from .individual import Individual


# Operator settings used by evolve() unless configured rates are wired in
TOURNAMENT_SIZE = 5
EVOLVE_UNIFORM_RATE = 0.5
EVOLVE_MUTATION_RATE = 0.015


class GenomeLengthError(ValueError):
    """Raised when two genomes of different length are recombined."""
    pass


def crossover(
    parent_a: Individual,
    parent_b: Individual,
    uniform_rate: float,
    rng: np.random.Generator
) -> Individual:
    """
    Combine two parents using uniform crossover.

    Each gene position independently takes parent A's gene with probability
    uniform_rate, otherwise parent B's gene.

    Args:
        parent_a: First parent (child inherits its fitness function)
        parent_b: Second parent
        uniform_rate: Probability of taking a gene from parent A
        rng: Random number generator

    Returns:
        New child Individual

    Raises:
        GenomeLengthError: If parents have different gene lengths
    """
    if len(parent_a.genes) != len(parent_b.genes):
        raise GenomeLengthError(
            f"Cannot cross genomes of length {len(parent_a.genes)} "
            f"and {len(parent_b.genes)}"
        )

    from_a = rng.random(len(parent_a.genes)) < uniform_rate
    genes = np.where(from_a, parent_a.genes, parent_b.genes).astype(np.uint8)

    return Individual(genes, parent_a.fitness_fn)


class Population:
    """
    Ordered collection of individuals evolving toward a target genome.

    The constructor only allocates empty slots; use Population.initialized()
    to fill them with random individuals.

    Attributes:
        individuals: List of Individual slots (None until filled)
        target: Target genome as a numpy uint8 array
        generation: Number of evolve() calls so far
        uniform_rate: Configured crossover rate
        mutation_rate: Configured mutation rate
        elitist: Whether the fittest individual survives unchanged
        rng: Random number generator shared by all operators
        use_configured_rates: If True, evolve() uses uniform_rate and
            mutation_rate instead of the module-level operator settings
    """

    def __init__(
        self,
        size: int,
        uniform_rate: float,
        mutation_rate: float,
        target,
        elitist: bool,
        rng: Optional[np.random.Generator] = None,
        use_configured_rates: bool = False
    ):
        self.individuals: List[Optional[Individual]] = [None] * size
        self.target = np.asarray(target, dtype=np.uint8)
        self.generation = 0
        self.uniform_rate = uniform_rate
        self.mutation_rate = mutation_rate
        self.elitist = elitist
        self.rng = rng if rng is not None else np.random.default_rng()
        self.use_configured_rates = use_configured_rates

    @classmethod
    def initialized(
        cls,
        size: int,
        uniform_rate: float,
        mutation_rate: float,
        target,
        elitist: bool,
        rng: Optional[np.random.Generator] = None,
        use_configured_rates: bool = False
    ) -> "Population":
        """
        Create a population filled with random individuals.

        Each individual scores itself through this population's fitness
        method, so fitness always reflects this population's target.
        """
        population = cls(
            size, uniform_rate, mutation_rate, target, elitist,
            rng=rng, use_configured_rates=use_configured_rates
        )
        for i in range(size):
            population.individuals[i] = Individual.random(
                len(population.target), population.fitness, population.rng
            )
        return population

    def fitness(self, individual: Individual) -> int:
        """
        Count gene positions matching the target.

        Returns 0 when the gene length differs from the target length.
        """
        if len(individual.genes) != len(self.target):
            return 0
        return int(np.count_nonzero(individual.genes == self.target))

    def fittest(self) -> Individual:
        """
        Return the individual with the highest fitness.

        Ties go to the earliest individual.

        Raises:
            ValueError: If the population holds no individuals
        """
        if not self.individuals:
            raise ValueError("Population is empty")

        best = self.individuals[0]
        best_fitness = best.fitness()
        for individual in self.individuals[1:]:
            score = individual.fitness()
            if score > best_fitness:
                best, best_fitness = individual, score
        return best

    def individual_by_tournament(self, tournament_size: int) -> Individual:
        """
        Select an individual by tournament.

        Draws tournament_size individuals uniformly with replacement and
        returns the fittest of the sample.

        Args:
            tournament_size: Number of draws

        Returns:
            Winning Individual (same object as in this population)
        """
        tournament = Population(
            tournament_size, self.uniform_rate, self.mutation_rate,
            self.target, self.elitist, rng=self.rng
        )
        picks = self.rng.integers(0, len(self.individuals), size=tournament_size)
        for i, idx in enumerate(picks):
            tournament.individuals[i] = self.individuals[idx]
        return tournament.fittest()

    def evolve(self) -> None:
        """
        Replace the population with the next generation.

        With elitism the current fittest individual is kept in slot 0 as the
        same object. Every other slot gets a mutated crossover child of two
        tournament winners.
        """
        if self.use_configured_rates:
            uniform_rate, mutation_rate = self.uniform_rate, self.mutation_rate
        else:
            uniform_rate, mutation_rate = EVOLVE_UNIFORM_RATE, EVOLVE_MUTATION_RATE

        evolved = Population(
            len(self.individuals), self.uniform_rate, self.mutation_rate,
            self.target, self.elitist, rng=self.rng
        )

        start_at = 0
        if self.elitist:
            evolved.individuals[0] = self.fittest()
            start_at = 1

        for i in range(start_at, len(self.individuals)):
            parent_a = self.individual_by_tournament(TOURNAMENT_SIZE)
            parent_b = self.individual_by_tournament(TOURNAMENT_SIZE)
            child = crossover(parent_a, parent_b, uniform_rate, self.rng)
            child.mutate(mutation_rate, self.rng)
            evolved.individuals[i] = child

        self.generation += 1
        self.individuals = evolved.individuals

    def mean_fitness(self) -> float:
        """Average fitness over all individuals."""
        return float(np.mean([ind.fitness() for ind in self.individuals]))

    def __len__(self) -> int:
        return len(self.individuals)
