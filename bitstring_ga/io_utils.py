"""
I/O utilities for the binary genetic search.

Saves and reloads the per-generation history log.
"""

import csv
from pathlib import Path
from typing import Union

from .data_models import GenerationSummary


HISTORY_FIELDS = ['generation', 'best_fitness', 'mean_fitness', 'best_genes']


def save_history_log(
    summaries: list[GenerationSummary],
    output_path: Union[str, Path],
    overwrite: bool = False
) -> Path:
    """
    Save generation summaries to CSV file.

    Args:
        summaries: List of GenerationSummary objects
        output_path: Path for output CSV
        overwrite: If True, overwrite existing file

    Returns:
        Path to saved history log

    Raises:
        FileExistsError: If file exists and overwrite=False
    """
    output_path = Path(output_path)

    if output_path.exists() and not overwrite:
        raise FileExistsError(f"History log already exists: {output_path}")

    # Create parent directory if needed
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=HISTORY_FIELDS)
        writer.writeheader()

        for summary in summaries:
            writer.writerow(summary.to_dict())

    return output_path


def load_history_log(input_path: Union[str, Path]) -> list[GenerationSummary]:
    """
    Load generation summaries from CSV file.

    Args:
        input_path: Path to history CSV

    Returns:
        List of GenerationSummary objects in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If required columns are missing
    """
    input_path = Path(input_path)

    if not input_path.exists():
        raise FileNotFoundError(f"History log not found: {input_path}")

    with open(input_path, 'r', newline='') as f:
        reader = csv.DictReader(f)

        if not reader.fieldnames or not set(HISTORY_FIELDS).issubset(reader.fieldnames):
            raise ValueError(
                f"Invalid history format in {input_path}. "
                f"Expected columns: {','.join(HISTORY_FIELDS)}"
            )

        return [GenerationSummary.from_dict(row) for row in reader]
