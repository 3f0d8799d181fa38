#!/usr/bin/env python3
"""
Quick Start - Minimal example to get started with seedgenome.

Creates two genomes, breeds them and turns the child into a latent vector.
"""

import numpy as np

from seedgenome import DNA, Gene, MutationKind

print("seedgenome - Quick Start")
print("="*40)

rng = np.random.default_rng(42)

# A single gene: one influence marker plus 4 trait markers
gene = Gene.new(4, rng)
print(f"\nGene:      {gene.encode()}")
print(f"Influence: {gene.get_influence():.4f}")
print(f"Traits:    {[round(float(v), 4) for v in gene.get_markers()]}")

record = gene.mutate(rng, kind=MutationKind.REVERSAL)
print(f"After {record.kind.value} (target={record.target}, secondary={record.secondary}):")
print(f"           {gene.encode()}")

# Two parents of identical shape
mother = DNA.new(pool_size=16, gene_size=4, rng=rng)
father = DNA.new(pool_size=16, gene_size=4, rng=rng)

# Merge consumes its inputs, so pass copies to keep the parents around
child = DNA.merge(mother.copy(), father.copy(), apply_mutation=True, rng=rng)
print(f"\nChild shares {DNA.compare(child, mother)*100:.1f}% of genes with mother")
print(f"Child shares {DNA.compare(child, father)*100:.1f}% of genes with father")

# The text form is lossless
seed = child.encode()
print(f"\nSeed length: {len(seed)} characters")
assert DNA.decode(seed) == child

latent = child.to_latent_vector()
print(f"Latent vector: shape={latent.shape}, dtype={latent.dtype}")
