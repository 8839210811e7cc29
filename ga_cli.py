#!/usr/bin/env python3
"""
Binary Target Search CLI - Minimal entry point.

Evolves a population of binary genomes until the fittest one matches the
target gene sequence. Settings come from flags, optionally layered over a
YAML run configuration.

Usage:
    python3 ga_cli.py [--target 110011] [--size 50] [--no-elitist] [--seed N]
    python3 ga_cli.py --config examples/run.yaml
    python3 ga_cli.py --help
"""

import sys
from pathlib import Path

# Add project root to path if needed
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def main():
    """Main entry point for the search CLI."""
    from bitstring_ga.cli import main as cli_main
    sys.exit(cli_main())


if __name__ == '__main__':
    main()
