"""
Random number generation utilities.

Geometry functions never draw random numbers themselves; callers create a
seeded generator here and pass it in, so sector generation stays
reproducible and unit-testable.
"""

import zlib
from typing import Optional, Union

import numpy as np

Seed = Union[int, str]


def seed_to_int(seed: Seed) -> int:
    """
    Map a seed to a non-negative integer.

    String seeds are hashed with CRC32 so the same string always yields
    the same generator state across runs and platforms.
    """
    if isinstance(seed, str):
        return zlib.crc32(seed.encode("utf-8"))
    if seed < 0:
        raise ValueError(f"Seed must be non-negative, got {seed}")
    return int(seed)


def create_rng(seed: Optional[Seed] = None) -> np.random.Generator:
    """
    Create a NumPy random generator.

    Args:
        seed: Integer or string seed; None draws fresh OS entropy

    Returns:
        numpy.random.Generator instance
    """
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(seed_to_int(seed))
