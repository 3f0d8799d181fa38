"""
Gene: an ordered, fixed-length sequence of markers.

The first marker is the influence; the remaining ``num_markers`` are trait
markers addressed 0-based by the accessors. The encoded form is each
marker's 8 hex characters concatenated, influence first.
"""

import logging
from typing import List, Optional

import numpy as np

from ..core.codec import F32_HEX_WIDTH, U16_MAX, partition
from ..core.errors import DecodeError, DecodeErrorReason, GeneConstructionError
from ..core.rng import RngLike, get_rng
from .config import DEFAULT_CONFIG, GeneticsConfig
from .marker import Marker
from .mutation import MutationKind, MutationRecord, apply_mutation, draw_mutation_kind


logger = logging.getLogger(__name__)


class Gene:
    """
    One influence marker followed by ``num_markers`` trait markers.

    Attributes:
        markers: Full marker sequence, length ``num_markers + 1``
    """

    def __init__(self, markers: List[Marker]):
        if len(markers) < 2:
            raise GeneConstructionError(len(markers) - 1)
        if len(markers) - 1 > U16_MAX:
            raise ValueError(f"Gene has {len(markers) - 1} markers, max is {U16_MAX}")
        self.markers = markers

    @classmethod
    def new(cls, num_markers: int, rng: RngLike = None) -> 'Gene':
        """
        Create a gene of fresh normal markers.

        Args:
            num_markers: Number of trait markers (>= 1)
            rng: Random source

        Raises:
            GeneConstructionError: If ``num_markers`` < 1
        """
        if num_markers < 1:
            raise GeneConstructionError(num_markers)
        rng = get_rng(rng)
        return cls([Marker.new(rng) for _ in range(num_markers + 1)])

    @property
    def num_markers(self) -> int:
        """Number of trait markers (influence excluded)."""
        return len(self.markers) - 1

    def get_influence(self) -> np.float32:
        return self.markers[0].value

    def get_marker(self, position: int) -> Optional[np.float32]:
        """Trait marker at 0-based ``position``, or None if out of range."""
        if not 0 <= position < self.num_markers:
            return None
        return self.markers[position + 1].value

    def get_markers(self) -> List[np.float32]:
        """Trait marker values in order, influence excluded."""
        return [m.value for m in self.markers[1:]]

    def set_marker(self, index: int, value) -> None:
        """Replace the raw slot ``index`` (0 is the influence)."""
        if not 0 <= index < len(self.markers):
            raise IndexError(f"Marker index {index} out of range [0, {len(self.markers) - 1}]")
        self.markers[index] = Marker(value)

    def get_sum(self) -> float:
        """Sum of all marker values, influence included."""
        return float(np.sum([m.value for m in self.markers], dtype=np.float32))

    def zero(self) -> None:
        """Set every marker, influence included, to 0.0."""
        self.markers = [Marker(0.0) for _ in self.markers]

    def mutate(
        self,
        rng: RngLike = None,
        kind: Optional[MutationKind] = None,
        config: Optional[GeneticsConfig] = None,
    ) -> MutationRecord:
        """
        Apply one random mutation in place.

        Args:
            rng: Random source
            kind: Force a specific operator instead of drawing one
            config: Supplies ``pin_influence`` for Shift

        Returns:
            MutationRecord describing what changed
        """
        rng = get_rng(rng)
        config = config or DEFAULT_CONFIG
        if kind is None:
            kind = draw_mutation_kind(rng)
        record = apply_mutation(self.markers, kind, rng, pin_influence=config.pin_influence)
        logger.debug("Mutation %s target=%d secondary=%s", kind.value, record.target, record.secondary)
        return record

    def encode(self) -> str:
        return ''.join(m.encode() for m in self.markers)

    @classmethod
    def decode(cls, text: str, offset: int = 0) -> 'Gene':
        """
        Decode a gene from concatenated 8-character marker encodings.

        Raises:
            DecodeError: If the length is not a multiple of 8, fewer than two
                markers are present, or a character is not hex
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        chunks = partition(text, F32_HEX_WIDTH)
        if len(chunks) - 1 > U16_MAX:
            raise DecodeError(
                DecodeErrorReason.UNEXPECTED_LENGTH,
                f"Gene holds {len(chunks) - 1} markers, max is {U16_MAX}",
                offset=offset,
            )
        if len(chunks) < 2:
            raise DecodeError(
                DecodeErrorReason.UNEXPECTED_LENGTH,
                f"Gene needs at least 2 markers, got {len(chunks)}",
                text=text,
                offset=offset,
            )
        return cls([
            Marker.decode(chunk, offset + i * F32_HEX_WIDTH)
            for i, chunk in enumerate(chunks)
        ])

    def copy(self) -> 'Gene':
        return Gene([m.copy() for m in self.markers])

    @staticmethod
    def is_equal(left: 'Gene', right: 'Gene') -> bool:
        """Structural equality over the full sequence, lengths included."""
        if len(left.markers) != len(right.markers):
            return False
        return all(a == b for a, b in zip(left.markers, right.markers))

    @staticmethod
    def compare(left: 'Gene', right: 'Gene') -> bool:
        """Equality of the encoded text."""
        return left.encode() == right.encode()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Gene):
            return NotImplemented
        return Gene.is_equal(self, other)

    def __len__(self) -> int:
        return len(self.markers)

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"Gene(num_markers={self.num_markers}, influence={float(self.get_influence()):.4f})"
