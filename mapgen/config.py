"""Configuration models for tile map generation."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any

from mapgen.rng import random_seed


DEFAULT_WIDTH = 100
DEFAULT_HEIGHT = 100
COMPASS_SYMBOLS = frozenset({"N", "S", "E", "W"})


class GenerationStrategy(str, Enum):
    """Selectable map composition strategies."""

    LAYERED = "layered"
    ISLAND = "island"


@dataclass(frozen=True)
class RingLayeringParams:
    """Concentric ring placement: guaranteed rings plus craggy extension chances."""

    thickness: int
    probabilities: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if self.thickness < 0:
            raise ValueError("thickness must be >= 0")
        object.__setattr__(self, "probabilities", tuple(float(p) for p in self.probabilities))
        for p in self.probabilities:
            if not 0.0 <= p <= 1.0:
                raise ValueError(f"ring probability must be within [0, 1], got {p}")

    @property
    def ring_count(self) -> int:
        return self.thickness + len(self.probabilities)


@dataclass(frozen=True)
class MountainConfig:
    """Controls the fractal mountain walk."""

    seed: tuple[str, ...] = ("S",)
    generations: int = 16
    start: tuple[int, int] | None = None
    enabled: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", tuple(self.seed))
        if self.generations < 0:
            raise ValueError("generations must be >= 0")
        if not self.seed:
            raise ValueError("mountain seed must contain at least one direction")
        unknown = [symbol for symbol in self.seed if symbol not in COMPASS_SYMBOLS]
        if unknown:
            raise ValueError(f"mountain seed symbols must be one of N, S, E, W, got {unknown}")


@dataclass(frozen=True)
class IslandConfig:
    """Controls noise sampling and classification for island maps."""

    frequency: float = 0.05
    secondary_scale: float = 0.8
    exponent: float = 0.8
    lattice_size: int = 256

    def __post_init__(self) -> None:
        if self.frequency <= 0:
            raise ValueError("frequency must be positive")
        if self.secondary_scale <= 0:
            raise ValueError("secondary_scale must be positive")
        if self.exponent <= 0:
            raise ValueError("exponent must be positive")
        if self.lattice_size < 2:
            raise ValueError("lattice_size must be >= 2")


@dataclass(frozen=True)
class GenerationConfig:
    """Primary generation configuration.

    ``seed`` defaults to a fresh random integer drawn when the config is built,
    so a config always carries the seed it will generate with.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    seed: int = field(default_factory=random_seed)
    strategy: GenerationStrategy = GenerationStrategy.LAYERED
    ocean: RingLayeringParams = field(default_factory=lambda: RingLayeringParams(2, (0.6, 0.3, 0.1)))
    beach: RingLayeringParams = field(default_factory=lambda: RingLayeringParams(1, (0.5, 0.2)))
    mountain: MountainConfig = field(default_factory=MountainConfig)
    island: IslandConfig = field(default_factory=IslandConfig)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        object.__setattr__(self, "seed", int(self.seed))
        object.__setattr__(self, "strategy", GenerationStrategy(self.strategy))

    @classmethod
    def from_optional(
        cls,
        width: int | None = None,
        height: int | None = None,
        seed: int | None = None,
        **kwargs: Any,
    ) -> "GenerationConfig":
        """Build a config where ``None`` means "use the default" for each field."""

        return cls(
            width=DEFAULT_WIDTH if width is None else width,
            height=DEFAULT_HEIGHT if height is None else height,
            seed=random_seed() if seed is None else seed,
            **kwargs,
        )

    def with_seed(self, seed: int) -> "GenerationConfig":
        return replace(self, seed=seed)

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["strategy"] = self.strategy.value
        return payload
