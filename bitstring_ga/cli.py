"""
CLI module for the binary genetic search.

Parses command-line flags, merges them over an optional YAML run
configuration, and runs the search.
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from .config import ConfigValidationError, RunConfig, load_run_config
from .orchestration import run_from_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bitstring-ga",
        description="Evolve a population of binary genomes toward a target gene sequence",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 ga_cli.py                                  # Default target 110011
  python3 ga_cli.py --target 1011001110 --size 100   # Custom target and population
  python3 ga_cli.py --no-elitist --seed 7            # Reproducible run without elitism
  python3 ga_cli.py --config examples/run.yaml       # Settings from YAML (flags override)
  python3 ga_cli.py --history history.csv            # Save per-generation history
        """
    )

    parser.add_argument('--config', '-c', metavar='PATH',
                        help='Run configuration YAML file')
    parser.add_argument('--size', type=int, dest='population_size', metavar='N',
                        help='Population size (default: 50)')
    parser.add_argument('--uniform-rate', type=float, dest='uniform_rate', metavar='RATE',
                        help='Crossover uniform rate (default: 0.5)')
    parser.add_argument('--mutation-rate', type=float, dest='mutation_rate', metavar='RATE',
                        help='Mutation rate (default: 0.015)')
    parser.add_argument('--elitist', dest='elitist', action='store_true', default=None,
                        help='Keep the fittest individual each generation (default)')
    parser.add_argument('--no-elitist', dest='elitist', action='store_false',
                        help='Disable elitism')
    parser.add_argument('--target', '-t', metavar='BITS',
                        help='Target gene sequence of 1s and 0s (default: 110011)')
    parser.add_argument('--seed', type=int, dest='random_seed', metavar='SEED',
                        help='Random seed (default: drawn at start and printed)')
    parser.add_argument('--max-generations', type=int, dest='max_generations', metavar='N',
                        help='Give up after N generations (default: no limit)')
    parser.add_argument('--use-configured-rates', dest='use_configured_rates',
                        action='store_true', default=None,
                        help='Use --uniform-rate/--mutation-rate in the evolution step '
                             'instead of the built-in 0.5/0.015')
    parser.add_argument('--history', dest='history_csv', metavar='PATH',
                        help='Write per-generation history CSV')
    parser.add_argument('--report-every', type=int, dest='report_every', metavar='N',
                        help='Print progress every N generations (default: 1)')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Only print the final result')

    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    """
    Build run configuration from parsed arguments.

    Values from --config are loaded first; explicit flags override them.

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ConfigValidationError: If the config file is invalid
    """
    config = RunConfig()
    if args.config:
        config = RunConfig.from_dict(load_run_config(args.config))

    overrides: Dict[str, Any] = {
        'population_size': args.population_size,
        'uniform_rate': args.uniform_rate,
        'mutation_rate': args.mutation_rate,
        'elitist': args.elitist,
        'target': args.target,
        'random_seed': args.random_seed,
        'max_generations': args.max_generations,
        'use_configured_rates': args.use_configured_rates,
        'history_csv': args.history_csv,
        'report_every': args.report_every,
    }
    return config.merged(overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the search CLI."""
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args)
        result = run_from_config(config, verbose=not args.quiet)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 1
    except (ConfigValidationError, FileNotFoundError, FileExistsError) as e:
        print(f"Error: {e}")
        return 1

    if args.quiet:
        print(f"Generations: {result.generations}")
        print(f"Genes: {result.best_genes}")

    return 0 if result.solved else 2


if __name__ == '__main__':
    sys.exit(main())
