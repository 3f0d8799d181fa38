"""
Error types raised by the genome codec and constructors.

Both errors subclass ValueError so existing callers that guard genome
handling with ``except ValueError`` keep working.
"""

from enum import Enum
from typing import Optional


class DecodeErrorReason(Enum):
    """Why a piece of encoded genome text was rejected."""
    BAD_HEX = 'bad_hex'
    UNEXPECTED_LENGTH = 'unexpected_length'
    TRUNCATED_HEADER = 'truncated_header'
    GENE_COUNT_MISMATCH = 'gene_count_mismatch'


class GeneConstructionError(ValueError):
    """Raised when a gene is requested with fewer than one trait marker."""

    def __init__(self, num_markers: int):
        self.num_markers = num_markers
        super().__init__(f"Gene needs at least 1 marker, got {num_markers}")


class DecodeError(ValueError):
    """
    Raised when encoded text cannot be decoded.

    Attributes:
        reason: Which check failed
        text: The offending fragment (may be truncated for display)
        offset: Character offset of the fragment within the decoded text
    """

    def __init__(
        self,
        reason: DecodeErrorReason,
        message: str,
        text: str = '',
        offset: Optional[int] = None,
    ):
        self.reason = reason
        self.text = text
        self.offset = offset
        location = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"{message}{location} ({reason.value})")
