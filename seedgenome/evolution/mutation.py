"""
Point mutation operators for gene marker sequences.

A mutation draws one of five kinds uniformly and a primary target index over
the whole marker sequence, influence slot included:
- Delete: zero the target marker
- New: replace the target with a fresh normal sample
- Duplication: copy the target's value onto a trait slot (1..n)
- Reversal: swap the target's value with a trait slot (1..n)
- Shift: permute the sequence

The secondary target of Duplication and Reversal never lands on the
influence slot, though the primary target may, so the influence value can
move into a trait position. Shift permutes the influence slot too unless
``pin_influence`` is set.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import numpy as np

from ..core.rng import randint, standard_normal
from .marker import Marker


class MutationKind(Enum):
    """The five mutation operators."""
    DELETE = 'delete'
    DUPLICATION = 'duplication'
    NEW = 'new'
    REVERSAL = 'reversal'
    SHIFT = 'shift'


MUTATION_KINDS = list(MutationKind)


@dataclass(frozen=True)
class MutationRecord:
    """
    What a single mutation did.

    Attributes:
        kind: Operator applied
        target: Primary target index (0 = influence)
        secondary: Trait slot written by Duplication/Reversal, else None
    """
    kind: MutationKind
    target: int
    secondary: Optional[int] = None


def draw_mutation_kind(rng: np.random.Generator) -> MutationKind:
    """Pick one of the five kinds with equal probability."""
    return MUTATION_KINDS[randint(rng, 0, len(MUTATION_KINDS))]


def apply_mutation(
    markers: List[Marker],
    kind: MutationKind,
    rng: np.random.Generator,
    pin_influence: bool = False,
) -> MutationRecord:
    """
    Apply one mutation to a marker sequence in place.

    Args:
        markers: Full marker sequence, influence at index 0
        kind: Operator to apply
        rng: Random source
        pin_influence: Keep index 0 fixed when shifting

    Returns:
        MutationRecord describing the change
    """
    target = randint(rng, 0, len(markers))

    if kind is MutationKind.DELETE:
        markers[target] = Marker(0.0)
        return MutationRecord(kind, target)

    if kind is MutationKind.NEW:
        markers[target] = Marker(standard_normal(rng))
        return MutationRecord(kind, target)

    if kind is MutationKind.DUPLICATION:
        # May pick the target itself, which leaves the gene unchanged
        secondary = randint(rng, 1, len(markers))
        markers[secondary] = markers[target].copy()
        return MutationRecord(kind, target, secondary)

    if kind is MutationKind.REVERSAL:
        secondary = randint(rng, 1, len(markers))
        markers[target], markers[secondary] = markers[secondary], markers[target]
        return MutationRecord(kind, target, secondary)

    if kind is MutationKind.SHIFT:
        start = 1 if pin_influence else 0
        order = rng.permutation(len(markers) - start) + start
        markers[start:] = [markers[i] for i in order]
        return MutationRecord(kind, target)

    raise ValueError(f"Unknown mutation kind: {kind}")
