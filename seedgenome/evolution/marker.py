"""
Marker: a single scalar trait value.

A marker holds one 32-bit float. Fresh markers are drawn from the standard
normal distribution; encoded markers are 8 lowercase hex characters holding
the big-endian IEEE-754 bytes, so a decode reproduces the exact bit pattern.
"""

from typing import Union

import numpy as np

from ..core.codec import encode_f32, decode_f32
from ..core.rng import RngLike, get_rng, standard_normal


class Marker:
    """
    A single trait value.

    Attributes:
        value: The marker value as a ``numpy.float32``
    """

    __slots__ = ('value',)

    def __init__(self, value: Union[float, np.float32] = 0.0):
        self.value = np.float32(value)

    @classmethod
    def new(cls, rng: RngLike = None) -> 'Marker':
        """Create a marker sampled from the standard normal distribution."""
        return cls(standard_normal(get_rng(rng)))

    def bits(self) -> int:
        """Raw IEEE-754 bit pattern as an unsigned integer."""
        return int(np.array([self.value], dtype=np.float32).view(np.uint32)[0])

    def encode(self) -> str:
        return encode_f32(self.value)

    @classmethod
    def decode(cls, text: str, offset: int = 0) -> 'Marker':
        """Decode 8 hex characters into a marker."""
        marker = cls.__new__(cls)
        marker.value = decode_f32(text, offset)
        return marker

    def copy(self) -> 'Marker':
        marker = Marker.__new__(Marker)
        marker.value = self.value
        return marker

    def __eq__(self, other) -> bool:
        if not isinstance(other, Marker):
            return NotImplemented
        return self.bits() == other.bits()

    def __hash__(self) -> int:
        return hash(self.bits())

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"Marker({float(self.value)!r})"
