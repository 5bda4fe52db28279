"""Rewriting-system direction walks used to draw mountain ranges."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Sequence

from mapgen.config import MountainConfig
from mapgen.grid import Coordinate, Grid
from mapgen.model import MOUNTAIN, MapCell


class Direction(str, Enum):
    N = "N"
    S = "S"
    E = "E"
    W = "W"


MOUNTAIN_RULES: dict[Direction, tuple[Direction, ...]] = {
    Direction.N: (Direction.E, Direction.E),
    Direction.E: (Direction.S, Direction.W),
    Direction.S: (Direction.W, Direction.W),
    Direction.W: (Direction.N, Direction.E),
}

# (dy, dx) per step; y grows downward.
_STEPS: dict[Direction, tuple[int, int]] = {
    Direction.N: (-1, 0),
    Direction.S: (1, 0),
    Direction.E: (0, 1),
    Direction.W: (0, -1),
}


def generate_fractal(seed: Sequence[Direction | str], generations: int) -> list[Direction]:
    """Expand ``seed`` by rewriting every symbol ``generations`` times.

    Each generation doubles the sequence length.
    """

    if generations < 0:
        raise ValueError("generations must be >= 0")
    sequence = [Direction(symbol) for symbol in seed]
    for _ in range(generations):
        sequence = [replacement for symbol in sequence for replacement in MOUNTAIN_RULES[symbol]]
    return sequence


def draw_directions(
    grid: Grid[MapCell],
    start: tuple[int, int],
    tile: MapCell,
    directions: Iterable[Direction],
) -> Coordinate:
    """Walk ``directions`` from ``start``, stamping ``tile`` on every in-bounds cell.

    The cursor is never clamped: once it leaves the grid, stamps are skipped
    until the walk happens to come back. Returns the final cursor.
    """

    y, x = start
    if grid.in_bounds((y, x)):
        grid.set((y, x), tile)
    for direction in directions:
        dy, dx = _STEPS[direction]
        y += dy
        x += dx
        if grid.in_bounds((y, x)):
            grid.set((y, x), tile)
    return Coordinate(y, x)


def generate_mountain_layer(width: int, height: int, config: MountainConfig | None = None) -> Grid[MapCell]:
    cfg = config or MountainConfig()
    start = cfg.start if cfg.start is not None else (height // 2, width // 2)
    mountains: Grid[MapCell] = Grid.empty(width, height)
    draw_directions(mountains, start, MOUNTAIN, generate_fractal(cfg.seed, cfg.generations))
    return mountains
