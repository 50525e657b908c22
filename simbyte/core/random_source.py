"""
Random sources consumed by data generators.

A generator never owns its randomness: the caller passes a source into every
fill call, so a fixed seed reproduces the full output, motif buffer included.

Any object with these two methods works:
- random(): uniform float in [0, 1)
- randrange(n): uniform int in [0, n)

random.Random already provides both. NumpyRandomSource adapts a
numpy.random.Generator to the same shape.
"""

import random
from typing import Optional, Protocol

import numpy as np

from .errors import ConfigError


class RandomSource(Protocol):
    def random(self) -> float:
        ...

    def randrange(self, n: int) -> int:
        ...


class NumpyRandomSource:
    """RandomSource backed by a numpy Generator (PCG64 by default)."""

    def __init__(self, generator: np.random.Generator):
        self.generator = generator

    def random(self) -> float:
        return float(self.generator.random())

    def randrange(self, n: int) -> int:
        return int(self.generator.integers(n))


BACKENDS = ("python", "numpy")


def make_random_source(seed: Optional[int] = None, backend: str = "python") -> RandomSource:
    """Create a seeded random source for the given backend."""
    if backend == "python":
        return random.Random(seed)
    if backend == "numpy":
        return NumpyRandomSource(np.random.default_rng(seed))
    raise ConfigError(f"Unknown random backend: {backend}", field="backend", value=backend)
