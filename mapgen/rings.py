"""Concentric ring layers for coastlines and beaches."""

from __future__ import annotations

import logging

from mapgen.config import RingLayeringParams
from mapgen.grid import Coordinate, Grid, RingOutOfRange
from mapgen.model import BEACH, SEA, MapCell
from mapgen.rng import RandomSource

logger = logging.getLogger(__name__)


def _ring_or_none(grid: Grid[MapCell], ring: int) -> list[Coordinate] | None:
    try:
        return grid.get_ring_coordinates(ring)
    except RingOutOfRange:
        logger.debug("ring %d past the centre of %dx%d grid, stopping", ring, grid.width, grid.height)
        return None


def _has_same_neighbour(grid: Grid[MapCell], coord: Coordinate, tile: MapCell) -> bool:
    return any(cell.type == tile.type for cell in grid.get_adjacent_neighbours(coord))


def place_rings(
    grid: Grid[MapCell],
    tile: MapCell,
    params: RingLayeringParams,
    rng: RandomSource,
    *,
    start_ring: int = 0,
) -> Grid[MapCell]:
    """Stamp ``tile`` on guaranteed rings, then on craggy extension rings.

    Guaranteed rings ``start_ring .. start_ring + thickness - 1`` are filled
    completely. Each extension ring after them draws once per coordinate and
    places the tile when the draw is within that ring's probability and the
    coordinate already touches a tile of the same type. Stops at the first ring
    past the centre of the grid.
    """

    for ring in range(start_ring, start_ring + params.thickness):
        coords = _ring_or_none(grid, ring)
        if coords is None:
            return grid
        for coord in coords:
            grid.set(coord, tile)

    first_craggy = start_ring + params.thickness
    for offset, chance in enumerate(params.probabilities):
        coords = _ring_or_none(grid, first_craggy + offset)
        if coords is None:
            return grid
        for coord in coords:
            draw = rng.next()
            if draw <= chance and _has_same_neighbour(grid, coord, tile):
                grid.set(coord, tile)
    return grid


def generate_ocean_layer(
    width: int,
    height: int,
    params: RingLayeringParams,
    rng: RandomSource,
) -> Grid[MapCell]:
    """Border the map with sea, ``params.thickness`` rings deep plus a craggy edge."""

    ocean: Grid[MapCell] = Grid.empty(width, height)
    return place_rings(ocean, SEA, params, rng)


def generate_beach_layer(
    ocean: Grid[MapCell],
    ocean_params: RingLayeringParams,
    beach_params: RingLayeringParams,
    rng: RandomSource,
) -> Grid[MapCell]:
    """Build beach inside the coastline of ``ocean``.

    Every cell on the ocean's craggy rings that the ocean left empty becomes
    beach; the beach's own rings continue inward from the ocean's last ring.
    """

    beach: Grid[MapCell] = Grid.empty(ocean.width, ocean.height)
    for ring in range(ocean_params.thickness, ocean_params.ring_count):
        coords = _ring_or_none(ocean, ring)
        if coords is None:
            return beach
        for coord in coords:
            if not ocean.is_present(coord):
                beach.set(coord, BEACH)
    return place_rings(beach, BEACH, beach_params, rng, start_ring=ocean_params.ring_count)
