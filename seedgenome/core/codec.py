"""
Hex codec for fixed-width binary fields.

Every field is written big-endian as lowercase hexadecimal with no
delimiters:
- unsigned 16-bit integers take 4 characters
- 32-bit IEEE-754 floats take 8 characters

Decoding validates each 2-character group and the exact length of the slice
before any bytes are interpreted, so malformed text raises DecodeError
instead of producing a default value.
"""

from typing import List

import numpy as np

from .errors import DecodeError, DecodeErrorReason


U16_HEX_WIDTH = 4
F32_HEX_WIDTH = 8
U16_MAX = 0xFFFF

_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')
_U16 = np.dtype('>u2')
_BITS = np.dtype('>u4')


def bytes_to_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex, two characters per byte."""
    return data.hex()


def hex_to_bytes(text: str, expected_bytes: int, offset: int = 0) -> bytes:
    """
    Decode hex text into exactly ``expected_bytes`` bytes.

    Args:
        text: Hex characters, two per byte
        expected_bytes: Number of bytes the text must describe
        offset: Position of ``text`` in the enclosing buffer (error reporting)

    Returns:
        The decoded bytes

    Raises:
        DecodeError: On a length mismatch or a non-hex character
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    if len(text) != expected_bytes * 2:
        raise DecodeError(
            DecodeErrorReason.UNEXPECTED_LENGTH,
            f"Expected {expected_bytes * 2} hex characters, got {len(text)}",
            text=text,
            offset=offset,
        )
    for i in range(0, len(text), 2):
        pair = text[i:i + 2]
        if not (pair[0] in _HEX_DIGITS and pair[1] in _HEX_DIGITS):
            raise DecodeError(
                DecodeErrorReason.BAD_HEX,
                f"Invalid hex byte {pair!r}",
                text=pair,
                offset=offset + i,
            )
    return bytes.fromhex(text)


def encode_u16(value: int) -> str:
    """Encode an unsigned 16-bit integer as 4 hex characters."""
    value = int(value)
    if not 0 <= value <= U16_MAX:
        raise ValueError(f"Value {value} out of range [0, {U16_MAX}]")
    return bytes_to_hex(np.array([value], dtype=_U16).tobytes())


def decode_u16(text: str, offset: int = 0) -> int:
    """Decode 4 hex characters into an unsigned 16-bit integer."""
    raw = hex_to_bytes(text, _U16.itemsize, offset)
    return int(np.frombuffer(raw, dtype=_U16)[0])


def encode_f32(value) -> str:
    """
    Encode a 32-bit float as 8 hex characters.

    Values that are already ``numpy.float32`` keep their exact bit pattern,
    NaN payloads included. Python floats are rounded to single precision.
    """
    bits = np.array([value], dtype=np.float32).view(np.uint32)
    return bytes_to_hex(bits.astype(_BITS).tobytes())


def decode_f32(text: str, offset: int = 0) -> np.float32:
    """Decode 8 hex characters into a ``numpy.float32`` with the exact bit pattern."""
    raw = hex_to_bytes(text, _BITS.itemsize, offset)
    bits = np.frombuffer(raw, dtype=_BITS).astype(np.uint32)
    return bits.view(np.float32)[0]


def partition(text: str, size: int, allow_remainder: bool = False) -> List[str]:
    """
    Split text into consecutive chunks of ``size`` characters.

    Args:
        text: Buffer to split
        size: Characters per chunk (must be positive)
        allow_remainder: Accept a final chunk shorter than ``size``

    Returns:
        List of chunks in order (empty for empty text)

    Raises:
        DecodeError: If the length is not a multiple of ``size`` and
            ``allow_remainder`` is False
    """
    if size < 1:
        raise ValueError(f"Partition size must be positive, got {size}")
    remainder = len(text) % size
    if remainder and not allow_remainder:
        raise DecodeError(
            DecodeErrorReason.UNEXPECTED_LENGTH,
            f"Length {len(text)} is not a multiple of {size}",
            text=text[-remainder:],
            offset=len(text) - remainder,
        )
    return [text[i:i + size] for i in range(0, len(text), size)]
