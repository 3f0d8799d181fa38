"""
Genome representation and genetic operators.

Key components:
- Marker: a single 32-bit trait value
- Gene: an influence marker followed by trait markers, with point mutation
- DNA: a fixed-size pool of genes with crossover, comparison and flattening
- GeneticsConfig: thresholds and options for the operators

Example usage:
    import numpy as np
    from seedgenome.evolution import DNA

    rng = np.random.default_rng(7)
    mother = DNA.new(pool_size=64, gene_size=4, rng=rng)
    father = DNA.new(pool_size=64, gene_size=4, rng=rng)

    child = DNA.merge(mother.copy(), father.copy(), apply_mutation=True, rng=rng)
    print(DNA.compare(child, mother), DNA.compare(child, father))

    seed_text = child.encode()
    latent = DNA.decode(seed_text).to_latent_vector()
"""

from .config import GeneticsConfig, DEFAULT_CONFIG
from .marker import Marker
from .mutation import MutationKind, MutationRecord, apply_mutation, draw_mutation_kind
from .gene import Gene
from .dna import DNA

__all__ = [
    # Core classes
    'Marker',
    'Gene',
    'DNA',
    # Configuration
    'GeneticsConfig',
    'DEFAULT_CONFIG',
    # Mutation
    'MutationKind',
    'MutationRecord',
    'apply_mutation',
    'draw_mutation_kind',
]
