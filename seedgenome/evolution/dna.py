"""
DNA: a fixed-size pool of genes forming one genome.

Encoded layout (lowercase hex, no delimiters):

    pool_size (4 chars) | gene_size (4 chars) | gene_0 | gene_1 | ...

where each gene occupies ``8 * (gene_size + 1)`` characters. The header must
be read before the body can be sliced.
"""

import logging
from typing import List, Optional

import numpy as np

from ..core.codec import F32_HEX_WIDTH, U16_HEX_WIDTH, U16_MAX, decode_u16, encode_u16, partition
from ..core.errors import DecodeError, DecodeErrorReason
from ..core.rng import RngLike, get_rng, uniform
from .config import DEFAULT_CONFIG, GeneticsConfig
from .gene import Gene


logger = logging.getLogger(__name__)

HEADER_WIDTH = 2 * U16_HEX_WIDTH


class DNA:
    """
    Ordered pool of genes sharing one shape.

    Attributes:
        pool_size: Number of genes declared by the header
        gene_size: Trait markers per gene
        genes: The genes, each with ``gene_size`` trait markers
    """

    def __init__(self, pool_size: int, gene_size: int, genes: List[Gene]):
        for name, value in (('pool_size', pool_size), ('gene_size', gene_size)):
            if not 0 <= value <= U16_MAX:
                raise ValueError(f"{name} {value} out of range [0, {U16_MAX}]")
        for i, gene in enumerate(genes):
            if gene.num_markers != gene_size:
                raise ValueError(
                    f"Gene {i} has {gene.num_markers} markers, expected {gene_size}"
                )
        self.pool_size = pool_size
        self.gene_size = gene_size
        self.genes = genes

    @classmethod
    def new(cls, pool_size: int, gene_size: int, rng: RngLike = None) -> 'DNA':
        """
        Create a DNA of ``pool_size`` fresh random genes.

        Raises:
            GeneConstructionError: If ``gene_size`` < 1 and ``pool_size`` > 0
        """
        if not (0 <= pool_size <= U16_MAX and 0 <= gene_size <= U16_MAX):
            raise ValueError(f"Shape ({pool_size}, {gene_size}) out of range [0, {U16_MAX}]")
        rng = get_rng(rng)
        genes = [Gene.new(gene_size, rng) for _ in range(pool_size)]
        return cls(pool_size, gene_size, genes)

    @property
    def shape(self):
        return (self.pool_size, self.gene_size)

    @staticmethod
    def merge(
        left: 'DNA',
        right: 'DNA',
        apply_mutation: bool = False,
        rng: RngLike = None,
        config: Optional[GeneticsConfig] = None,
    ) -> Optional['DNA']:
        """
        Crossover two same-shaped DNA into a child.

        Each position independently takes the left gene when a uniform draw
        is >= ``crossover_threshold`` and the right gene otherwise. With
        ``apply_mutation``, a second independent draw >= ``mutation_threshold``
        mutates that child gene.

        The parents are treated as consumed: the child holds decoded copies,
        so copy the parents first if they are needed again.

        Args:
            left: First parent
            right: Second parent
            apply_mutation: Whether child genes may mutate
            rng: Random source
            config: Thresholds and mutation options

        Returns:
            The child DNA, or None if the shapes differ
        """
        if left.shape != right.shape:
            logger.debug("Merge skipped: shape %s != %s", left.shape, right.shape)
            return None

        rng = get_rng(rng)
        config = config or DEFAULT_CONFIG

        genes = []
        from_left = 0
        mutated = 0
        for left_gene, right_gene in zip(left.genes, right.genes):
            if uniform(rng) >= config.crossover_threshold:
                source = left_gene
                from_left += 1
            else:
                source = right_gene
            gene = Gene.decode(source.encode())
            if apply_mutation and uniform(rng) >= config.mutation_threshold:
                gene.mutate(rng, config=config)
                mutated += 1
            genes.append(gene)

        logger.debug(
            "Merged %d genes: %d from left, %d from right, %d mutated",
            len(genes), from_left, len(genes) - from_left, mutated,
        )
        return DNA(left.pool_size, left.gene_size, genes)

    @staticmethod
    def compare(left: 'DNA', right: 'DNA') -> float:
        """
        Fraction of positions whose genes encode identically.

        Returns 0.0 when the pool sizes differ and 1.0 for two empty pools.
        """
        if left.pool_size != right.pool_size:
            return 0.0
        if left.pool_size == 0:
            return 1.0
        matches = sum(
            1 for a, b in zip(left.genes, right.genes)
            if a.encode() == b.encode()
        )
        return matches / left.pool_size

    def to_latent_vector(self) -> np.ndarray:
        """All marker values, gene-major with influence first, as float32."""
        return np.array(
            [m.value for gene in self.genes for m in gene.markers],
            dtype=np.float32,
        )

    def encode(self) -> str:
        return (
            encode_u16(self.pool_size)
            + encode_u16(self.gene_size)
            + ''.join(gene.encode() for gene in self.genes)
        )

    @classmethod
    def decode(cls, text: str, config: Optional[GeneticsConfig] = None) -> 'DNA':
        """
        Decode DNA from its canonical text.

        Args:
            text: Encoded DNA
            config: ``strict_pool_size`` decides whether a gene count that
                differs from the header is an error; when lenient, the
                decoded pool_size is the number of genes actually present

        Raises:
            DecodeError: On a short header, a body that is not a whole number
                of genes, bad hex, or (strict) a gene count mismatch
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        config = config or DEFAULT_CONFIG

        if len(text) < HEADER_WIDTH:
            raise DecodeError(
                DecodeErrorReason.TRUNCATED_HEADER,
                f"Header needs {HEADER_WIDTH} characters, got {len(text)}",
                text=text,
                offset=0,
            )
        pool_size = decode_u16(text[:U16_HEX_WIDTH], 0)
        gene_size = decode_u16(text[U16_HEX_WIDTH:HEADER_WIDTH], U16_HEX_WIDTH)

        gene_width = F32_HEX_WIDTH * (gene_size + 1)
        chunks = partition(text[HEADER_WIDTH:], gene_width)
        if len(chunks) != pool_size:
            if config.strict_pool_size:
                raise DecodeError(
                    DecodeErrorReason.GENE_COUNT_MISMATCH,
                    f"Header declares {pool_size} genes, body holds {len(chunks)}",
                    offset=HEADER_WIDTH,
                )
            logger.warning(
                "Decoded DNA declares %d genes but holds %d; keeping %d",
                pool_size, len(chunks), len(chunks),
            )
            pool_size = len(chunks)

        genes = [
            Gene.decode(chunk, HEADER_WIDTH + i * gene_width)
            for i, chunk in enumerate(chunks)
        ]
        return cls(pool_size, gene_size, genes)

    def copy(self) -> 'DNA':
        return DNA(self.pool_size, self.gene_size, [g.copy() for g in self.genes])

    def __eq__(self, other) -> bool:
        if not isinstance(other, DNA):
            return NotImplemented
        return (
            self.shape == other.shape
            and len(self.genes) == len(other.genes)
            and all(Gene.is_equal(a, b) for a, b in zip(self.genes, other.genes))
        )

    def __len__(self) -> int:
        return len(self.genes)

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"DNA(pool_size={self.pool_size}, gene_size={self.gene_size})"
