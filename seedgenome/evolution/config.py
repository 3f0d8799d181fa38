"""Tunable parameters for the genetic operators."""

from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass
class GeneticsConfig:
    """Configuration for merge, mutation and decoding."""
    # Crossover: a uniform draw >= threshold takes the left parent's gene
    crossover_threshold: float = 0.5

    # Mutation: a uniform draw >= threshold mutates the child gene
    mutation_threshold: float = 0.9

    # Keep index 0 as the influence slot when shifting
    pin_influence: bool = False

    # Reject encoded DNA whose gene count differs from its header
    strict_pool_size: bool = True

    def __post_init__(self):
        """Validate thresholds."""
        for name in ('crossover_threshold', 'mutation_threshold'):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} {value} out of range [0.0, 1.0]")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'crossover_threshold': self.crossover_threshold,
            'mutation_threshold': self.mutation_threshold,
            'pin_influence': self.pin_influence,
            'strict_pool_size': self.strict_pool_size,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GeneticsConfig':
        """Create config from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


DEFAULT_CONFIG = GeneticsConfig()
