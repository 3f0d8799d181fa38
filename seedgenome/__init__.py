"""
seedgenome - serializable numeric genomes and their genetic operators.

Genomes are fixed-shape pools of float markers with a lossless hex text
encoding, meant to be passed around as seeds for an external generative
process.
"""

__version__ = "0.1.0"

from .core import DecodeError, DecodeErrorReason, GeneConstructionError
from .evolution import DNA, Gene, GeneticsConfig, Marker, MutationKind

__all__ = [
    'DNA',
    'Gene',
    'Marker',
    'MutationKind',
    'GeneticsConfig',
    'DecodeError',
    'DecodeErrorReason',
    'GeneConstructionError',
]
