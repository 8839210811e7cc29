"""
Data models for search reporting.

Per-generation summaries and the final search result produced by the driver loop.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class GenerationSummary:
    """
    Snapshot of one generation, taken before it evolves.

    Attributes:
        generation: Generation counter value
        best_fitness: Fitness of the fittest individual
        best_genes: Rendering of the fittest individual's genes
        mean_fitness: Average fitness over the population
    """
    generation: int
    best_fitness: int
    best_genes: str
    mean_fitness: float

    def to_dict(self) -> dict[str, Any]:
        """
        Convert summary to dictionary for CSV export.

        Returns:
            Dictionary with string-serializable values
        """
        return {
            "generation": self.generation,
            "best_fitness": self.best_fitness,
            "mean_fitness": f"{self.mean_fitness:.4f}",
            "best_genes": self.best_genes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GenerationSummary":
        """Create summary from dictionary (e.g., a CSV row)."""
        return cls(
            generation=int(data["generation"]),
            best_fitness=int(data["best_fitness"]),
            best_genes=str(data["best_genes"]),
            mean_fitness=float(data["mean_fitness"]),
        )


@dataclass
class SearchResult:
    """
    Outcome of a search run.

    Attributes:
        solved: True if the fittest individual matched the target exactly
        generations: Generation counter when the search stopped
        best_fitness: Fitness of the final fittest individual
        best_genes: Rendering of the final fittest individual
        target_length: Length of the target genome
        seed: Seed of the random generator, if known
        history: Summaries of every generation examined
    """
    solved: bool
    generations: int
    best_fitness: int
    best_genes: str
    target_length: int
    seed: Any = None
    history: list[GenerationSummary] = field(default_factory=list)
