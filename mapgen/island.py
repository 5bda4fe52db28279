"""Noise-driven island maps."""

from __future__ import annotations

import math

from mapgen.config import IslandConfig
from mapgen.grid import Coordinate, Grid
from mapgen.model import CellType, MapCell
from mapgen.noise import NoiseSource


def sample_depth(noise: NoiseSource, coord: Coordinate, config: IslandConfig) -> float:
    """Blend two noise octaves at ``coord`` and flatten the result around zero."""

    y, x = coord
    f1 = config.frequency
    f2 = config.frequency * config.secondary_scale
    value = (noise.sample(x * f1, y * f1) + noise.sample(x * f2, y * f2)) / 2.0
    return math.copysign(abs(value) ** config.exponent, value)


def classify_depth(depth: float) -> CellType:
    return CellType.SEA if depth < 0 else CellType.GRASS


def generate_island_layer(
    width: int,
    height: int,
    noise: NoiseSource,
    config: IslandConfig | None = None,
) -> Grid[MapCell]:
    cfg = config or IslandConfig()

    def cell_at(coord: Coordinate) -> MapCell:
        depth = sample_depth(noise, coord, cfg)
        return MapCell(classify_depth(depth), depth)

    return Grid.filled_by(width, height, cell_at)
