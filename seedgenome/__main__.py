"""
Entry point for running seedgenome as a module.

Builds two random parent genomes, prints their encodings, merges them and
prints the child along with its similarity to each parent.

Usage:
    python -m seedgenome [options]

Options:
    --pool-size N   Genes per genome (default: 3)
    --gene-size N   Trait markers per gene (default: 2)
    --seed N        Random seed for reproducibility
    --mutate        Allow child genes to mutate
    --verbose       Show debug logging
"""

import argparse
import logging
import sys

import numpy as np

from .evolution.dna import DNA


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='seedgenome',
        description='Create two genomes and merge them'
    )
    parser.add_argument(
        '--pool-size', type=int, default=3,
        help='Genes per genome (default: 3)'
    )
    parser.add_argument(
        '--gene-size', type=int, default=2,
        help='Trait markers per gene (default: 2)'
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Random seed for reproducibility'
    )
    parser.add_argument(
        '--mutate', action='store_true',
        help='Allow child genes to mutate'
    )
    parser.add_argument(
        '--verbose', action='store_true',
        help='Show debug logging'
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    rng = np.random.default_rng(args.seed)

    try:
        parent1 = DNA.new(args.pool_size, args.gene_size, rng)
        parent2 = DNA.new(args.pool_size, args.gene_size, rng)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"Parent 1: {parent1.encode()}")
    print(f"Parent 2: {parent2.encode()}")

    child = DNA.merge(parent1.copy(), parent2.copy(), apply_mutation=args.mutate, rng=rng)
    print(f"Child   : {child.encode()}")
    print(f"Similarity to parent 1: {DNA.compare(child, parent1):.3f}")
    print(f"Similarity to parent 2: {DNA.compare(child, parent2):.3f}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
