"""
Orchestration module for the binary genetic search.

Implements the driver loop that evolves a population until its fittest
individual matches the target, plus the run workflow used by the CLI.
"""

from pathlib import Path
from typing import Callable, Optional
import numpy as np

from .config import RunConfig, validate_run_config
from .data_models import GenerationSummary, SearchResult
from .io_utils import save_history_log
from .population import Population


def summarize(population: Population) -> GenerationSummary:
    """Snapshot the population's current generation."""
    best = population.fittest()
    return GenerationSummary(
        generation=population.generation,
        best_fitness=best.fitness(),
        best_genes=best.render(),
        mean_fitness=population.mean_fitness(),
    )


def print_summary(summary: GenerationSummary) -> None:
    print(f"Generation: {summary.generation} Fittest: {summary.best_fitness}")
    print(summary.best_genes)
    print()


def run_search(
    population: Population,
    max_generations: Optional[int] = None,
    verbose: bool = True,
    report_every: int = 1,
    on_generation: Optional[Callable[[GenerationSummary], None]] = None,
    keep_history: bool = False
) -> SearchResult:
    """
    Evolve the population until its fittest individual matches the target.

    Args:
        population: Initialized population
        max_generations: Stop after this many evolve() calls (None = no limit)
        verbose: Print progress lines
        report_every: Print every N-th generation
        on_generation: Optional callback receiving each summary
        keep_history: Keep every summary in the result; otherwise only the last

    Returns:
        SearchResult; solved is False only when max_generations cut the run short

    Algorithm:
        1. Summarize current generation (record, callback)
        2. Stop if best fitness equals the target length
        3. Report progress
        4. Stop if the generation limit is reached
        5. evolve() and repeat
    """
    target_length = len(population.target)
    history = []
    evolutions = 0

    while True:
        summary = summarize(population)
        if keep_history:
            history.append(summary)
        else:
            history[:] = [summary]
        if on_generation is not None:
            on_generation(summary)

        if summary.best_fitness >= target_length:
            break

        if verbose and summary.generation % report_every == 0:
            print_summary(summary)

        if max_generations is not None and evolutions >= max_generations:
            break

        population.evolve()
        evolutions += 1

    last = history[-1]
    return SearchResult(
        solved=last.best_fitness == target_length,
        generations=population.generation,
        best_fitness=last.best_fitness,
        best_genes=last.best_genes,
        target_length=target_length,
        history=history,
    )


def run_from_config(config: RunConfig, verbose: bool = True) -> SearchResult:
    """
    Validate configuration, build the population and run the search.

    Args:
        config: Run configuration
        verbose: Print banner, progress and summary

    Returns:
        SearchResult of the run

    Raises:
        ConfigValidationError: If config is invalid (before any population is built)
        FileExistsError: If the history log already exists (before any population is built)
    """
    validate_run_config(config)
    target = config.target_genes()

    if config.history_csv and Path(config.history_csv).exists():
        raise FileExistsError(f"History log already exists: {config.history_csv}")

    seed = config.random_seed
    if seed is None:
        seed = int(np.random.randint(0, 2**31))
    rng = np.random.default_rng(seed)

    if verbose:
        print("=" * 70)
        print("BINARY TARGET SEARCH")
        print("=" * 70)
        print(f"Target: {config.target} ({len(target)} genes)")
        print(f"Population size: {config.population_size}")
        print(f"Elitist: {config.elitist}")
        print(f"Random seed: {seed}")
        if config.use_configured_rates:
            print(f"Rates: uniform={config.uniform_rate}, mutation={config.mutation_rate}")
        print()

    population = Population.initialized(
        config.population_size,
        config.uniform_rate,
        config.mutation_rate,
        target,
        config.elitist,
        rng=rng,
        use_configured_rates=config.use_configured_rates,
    )

    result = run_search(
        population,
        max_generations=config.max_generations,
        verbose=verbose,
        report_every=config.report_every,
        keep_history=bool(config.history_csv),
    )
    result.seed = seed

    if config.history_csv:
        history_path = save_history_log(result.history, config.history_csv)
        if verbose:
            print(f"History log: {history_path}")

    if verbose:
        if result.solved:
            print("Solution found!")
        else:
            print(f"No solution within {config.max_generations} generations")
        print(f"Generations: {result.generations}")
        print(f"Genes: {result.best_genes}")

    return result
