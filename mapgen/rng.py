"""Deterministic random sources."""

from __future__ import annotations

import hashlib
from typing import Protocol

import numpy as np


def _normalize_seed(seed: int) -> int:
    return int(seed) & ((1 << 64) - 1)


def derive_seed(parent_seed: int, key: str, *, namespace: str = "mapgen") -> int:
    """Derive a deterministic child seed from a parent seed and label."""

    payload = f"{namespace}:{_normalize_seed(parent_seed)}:{key}".encode("utf-8")
    digest = hashlib.blake2b(payload, digest_size=8, person=b"mapgen-noise").digest()
    return int.from_bytes(digest, byteorder="big", signed=False)


def random_seed() -> int:
    """Return a fresh non-negative 32-bit seed from OS entropy."""

    return int(np.random.SeedSequence().generate_state(1, dtype=np.uint32)[0])


class RandomSource(Protocol):
    """Uniform random values in [0, 1), deterministic for a given seed."""

    def next(self) -> float:
        ...


class SeededRandom:
    """numpy PCG64 stream exposing one uniform draw at a time."""

    def __init__(self, seed: int) -> None:
        self.seed = int(seed)
        self._generator = np.random.Generator(np.random.PCG64(np.uint64(_normalize_seed(self.seed))))

    def next(self) -> float:
        return float(self._generator.random())

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed})"
