from __future__ import annotations

import pytest

from mapgen.config import GenerationConfig, GenerationStrategy
from mapgen.generator import generate_map
from mapgen.metrics import terrain_metrics
from mapgen.model import CellType, Layer, MapCell


def test_sanity_metrics_default_layered_map() -> None:
    game_map = generate_map(GenerationConfig(seed=4242))
    metrics = terrain_metrics(game_map.layers[0])

    assert metrics.total_cells == 100 * 100
    assert sum(metrics.fractions.values()) == pytest.approx(1.0)
    assert metrics.counts[CellType.EMPTY] == 0
    assert metrics.counts[CellType.SEA] > 0
    assert metrics.counts[CellType.BEACH] > 0
    assert metrics.counts[CellType.MOUNTAIN] > 0
    assert 0.0 < metrics.land_fraction < 1.0


def test_sanity_metrics_island_map() -> None:
    game_map = generate_map(GenerationConfig(width=96, height=64, seed=4242, strategy=GenerationStrategy.ISLAND))
    metrics = terrain_metrics(game_map.layers[0])

    assert metrics.counts[CellType.SEA] + metrics.counts[CellType.GRASS] == 96 * 64
    assert metrics.land_fraction == pytest.approx(metrics.fractions[CellType.GRASS])


def test_metrics_count_each_type() -> None:
    layer = Layer(cells=[[MapCell(CellType.SEA), MapCell(CellType.GRASS)], [MapCell(CellType.EMPTY), MapCell(CellType.BEACH)]])
    metrics = terrain_metrics(layer)

    assert metrics.counts[CellType.SEA] == 1
    assert metrics.counts[CellType.MOUNTAIN] == 0
    assert metrics.land_fraction == pytest.approx(0.5)


def test_metrics_reject_empty_layer() -> None:
    with pytest.raises(ValueError):
        terrain_metrics(Layer(cells=[]))
