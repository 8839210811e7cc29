"""
Binary Target Genetic Search

Evolves a population of fixed-length binary genomes toward an exact match
of a target bit string using tournament selection, uniform crossover,
per-gene mutation and optional elitism.

Modules:
- individual: Individual genome with injected fitness function
- population: Population, tournament selection, crossover, evolution step
- config: Run configuration loading and validation
- data_models: Generation summaries and search results
- orchestration: Driver loop and run workflow
- io_utils: History CSV export
- cli: Command-line interface
"""

__version__ = "0.1.0"

from .individual import Individual
from .population import Population, GenomeLengthError, crossover
from .config import RunConfig, ConfigValidationError, parse_target
from .data_models import GenerationSummary, SearchResult
from .orchestration import run_search, run_from_config

__all__ = [
    "Individual",
    "Population",
    "GenomeLengthError",
    "crossover",
    "RunConfig",
    "ConfigValidationError",
    "parse_target",
    "GenerationSummary",
    "SearchResult",
    "run_search",
    "run_from_config",
]
