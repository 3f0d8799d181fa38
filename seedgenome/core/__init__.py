"""Shared primitives: hex codec, error types and the random source."""

from .codec import (
    encode_u16,
    decode_u16,
    encode_f32,
    decode_f32,
    partition,
    U16_HEX_WIDTH,
    F32_HEX_WIDTH,
    U16_MAX,
)
from .errors import DecodeError, DecodeErrorReason, GeneConstructionError
from .rng import get_rng

__all__ = [
    'encode_u16',
    'decode_u16',
    'encode_f32',
    'decode_f32',
    'partition',
    'U16_HEX_WIDTH',
    'F32_HEX_WIDTH',
    'U16_MAX',
    'DecodeError',
    'DecodeErrorReason',
    'GeneConstructionError',
    'get_rng',
]
