from __future__ import annotations

from mapgen.config import RingLayeringParams
from mapgen.grid import Grid
from mapgen.model import BEACH, SEA, CellType, MapCell
from mapgen.rings import generate_beach_layer, generate_ocean_layer, place_rings


class FixedRandom:
    """Returns the same value on every draw and counts draws."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.draws = 0

    def next(self) -> float:
        self.draws += 1
        return self.value


def _ring_set(grid: Grid[MapCell], ring: int) -> set[tuple[int, int]]:
    return set(grid.get_ring_coordinates(ring))


def test_guaranteed_rings_fill_border_without_draws() -> None:
    rng = FixedRandom(0.0)
    ocean = generate_ocean_layer(6, 6, RingLayeringParams(2), rng)

    expected = _ring_set(ocean, 0) | _ring_set(ocean, 1)
    present = {coord for coord in ocean.coordinates() if ocean.is_present(coord)}
    assert present == expected
    assert all(ocean.get(coord) == SEA for coord in expected)
    assert rng.draws == 0


def test_craggy_ring_requires_a_same_type_neighbour() -> None:
    grid: Grid[MapCell] = Grid.empty(5, 5)
    grid.set((1, 1), SEA)

    place_rings(grid, SEA, RingLayeringParams(0, (1.0,)), FixedRandom(0.0))

    assert not grid.is_present((0, 0))
    assert grid.get((0, 1)) == SEA


def test_craggy_ring_ignores_neighbours_of_another_type() -> None:
    grid: Grid[MapCell] = Grid.empty(5, 5)
    grid.set((1, 1), BEACH)

    place_rings(grid, SEA, RingLayeringParams(0, (1.0,)), FixedRandom(0.0))

    assert not grid.is_present((0, 1))
    assert grid.present_count == 1


def test_craggy_ring_draws_once_per_candidate() -> None:
    rng = FixedRandom(0.99)
    ocean = generate_ocean_layer(6, 6, RingLayeringParams(1, (0.5,)), rng)

    assert rng.draws == 12
    assert ocean.present_count == 20


def test_failed_probability_check_places_nothing() -> None:
    grid: Grid[MapCell] = Grid.empty(5, 5)
    grid.set((1, 1), SEA)

    place_rings(grid, SEA, RingLayeringParams(0, (0.5,)), FixedRandom(0.75))

    assert grid.present_count == 1


def test_rings_stop_quietly_past_the_centre() -> None:
    rng = FixedRandom(0.0)
    ocean = generate_ocean_layer(4, 4, RingLayeringParams(1, (1.0, 1.0, 1.0, 1.0, 1.0)), rng)

    assert rng.draws == 4
    assert ocean.is_dense()


def test_guaranteed_rings_stop_quietly_past_the_centre() -> None:
    ocean = generate_ocean_layer(3, 3, RingLayeringParams(10), FixedRandom(0.0))

    assert ocean.is_dense()
    assert all(cell.type is CellType.SEA for row in ocean.get_grid() for cell in row)


def test_beach_fills_craggy_ocean_gaps_then_its_own_rings() -> None:
    ocean_params = RingLayeringParams(1, (0.0,))
    beach_params = RingLayeringParams(1)
    ocean = generate_ocean_layer(8, 8, ocean_params, FixedRandom(0.5))
    beach = generate_beach_layer(ocean, ocean_params, beach_params, FixedRandom(0.5))

    present = {coord for coord in beach.coordinates() if beach.is_present(coord)}
    assert present == _ring_set(beach, 1) | _ring_set(beach, 2)
    assert all(beach.get(coord) == BEACH for coord in present)


def test_beach_skips_cells_the_ocean_claimed() -> None:
    ocean_params = RingLayeringParams(1, (1.0,))
    ocean = generate_ocean_layer(8, 8, ocean_params, FixedRandom(0.0))
    beach = generate_beach_layer(ocean, ocean_params, RingLayeringParams(0), FixedRandom(0.0))

    assert all(ocean.is_present(coord) for coord in _ring_set(ocean, 1))
    assert beach.present_count == 0


def test_beach_craggy_rings_continue_after_ocean_rings() -> None:
    ocean_params = RingLayeringParams(2)
    beach_params = RingLayeringParams(1, (1.0,))
    ocean = generate_ocean_layer(10, 10, ocean_params, FixedRandom(0.0))
    rng = FixedRandom(0.0)
    beach = generate_beach_layer(ocean, ocean_params, beach_params, rng)

    assert rng.draws == len(beach.get_ring_coordinates(3))
    present = {coord for coord in beach.coordinates() if beach.is_present(coord)}
    assert present == _ring_set(beach, 2) | _ring_set(beach, 3)


def test_craggy_probabilities_apply_to_rings_in_order() -> None:
    grid: Grid[MapCell] = Grid.empty(7, 7)
    rng = FixedRandom(0.5)

    place_rings(grid, SEA, RingLayeringParams(1, (1.0, 0.0)), rng)

    assert all(grid.get(coord) == SEA for coord in _ring_set(grid, 1))
    assert not any(grid.is_present(coord) for coord in _ring_set(grid, 2))
    assert rng.draws == len(_ring_set(grid, 1)) + len(_ring_set(grid, 2))


def test_first_probability_belongs_to_first_craggy_ring() -> None:
    grid: Grid[MapCell] = Grid.empty(5, 5)
    grid.set((1, 1), SEA)

    place_rings(grid, SEA, RingLayeringParams(0, (1.0, 0.0)), FixedRandom(0.5))

    assert grid.get((0, 1)) == SEA
    assert not grid.is_present((1, 2))
