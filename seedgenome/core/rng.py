"""Random source handling shared by every entropy-consuming operation."""

from typing import Union

import numpy as np


RngLike = Union[np.random.Generator, int, None]


def get_rng(rng: RngLike = None) -> np.random.Generator:
    """
    Normalise an rng argument into a numpy Generator.

    Args:
        rng: An existing Generator (returned unchanged), an integer seed,
            or None for a freshly entropy-seeded generator

    Returns:
        A numpy Generator
    """
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None:
        return np.random.default_rng()
    if isinstance(rng, (bool, float)) or not isinstance(rng, (int, np.integer)):
        raise TypeError(f"rng must be a numpy Generator, an int seed or None, got {type(rng).__name__}")
    return np.random.default_rng(int(rng))


def uniform(rng: np.random.Generator) -> float:
    """Uniform real in [0, 1)."""
    return float(rng.random())


def standard_normal(rng: np.random.Generator) -> np.float32:
    """Single-precision sample from the standard normal distribution."""
    return np.float32(rng.standard_normal(dtype=np.float32))


def randint(rng: np.random.Generator, low: int, high: int) -> int:
    """Uniform integer in [low, high)."""
    return int(rng.integers(low, high))
