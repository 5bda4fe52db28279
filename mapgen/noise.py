"""Coherent noise sources used by island generation."""

from __future__ import annotations

import math
from typing import Protocol

import numpy as np

from mapgen.rng import RandomSource, derive_seed


class NoiseSource(Protocol):
    """Deterministic 2D scalar field with values in [-1, 1]."""

    def sample(self, x: float, y: float) -> float:
        ...


def _smoothstep(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


class ValueNoise2D:
    """Value noise over an unbounded domain.

    Lattice points carry random values in [-1, 1]; a shuffled permutation table
    hashes integer lattice coordinates onto them so the field tiles with a period
    of ``size`` cells. Samples between lattice points are smoothstep-interpolated,
    which keeps every sample inside [-1, 1].
    """

    def __init__(self, seed: int, *, size: int = 256) -> None:
        if size < 2:
            raise ValueError("size must be >= 2")
        self.seed = int(seed)
        self.size = size
        rng = np.random.Generator(np.random.PCG64(derive_seed(self.seed, "value-noise-lattice")))
        self._values = rng.uniform(-1.0, 1.0, size=size)
        perm = rng.permutation(size)
        self._perm = np.concatenate((perm, perm)).astype(np.int64)

    @classmethod
    def from_random(cls, rng: RandomSource, *, size: int = 256) -> "ValueNoise2D":
        """Seed a noise field from a single draw of ``rng``."""

        return cls(int(rng.next() * 2**32), size=size)

    def _lattice(self, ix: int, iy: int) -> float:
        hx = ix % self.size
        hy = iy % self.size
        return float(self._values[self._perm[self._perm[hx] + hy]])

    def sample(self, x: float, y: float) -> float:
        x0 = math.floor(x)
        y0 = math.floor(y)
        tx = _smoothstep(x - x0)
        ty = _smoothstep(y - y0)

        g00 = self._lattice(x0, y0)
        g10 = self._lattice(x0 + 1, y0)
        g01 = self._lattice(x0, y0 + 1)
        g11 = self._lattice(x0 + 1, y0 + 1)

        top = g00 * (1.0 - tx) + g10 * tx
        bottom = g01 * (1.0 - tx) + g11 * tx
        return top * (1.0 - ty) + bottom * ty
