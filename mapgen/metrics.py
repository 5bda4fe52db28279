"""Terrain composition metrics for generated layers."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from mapgen.model import CellType, Layer


@dataclass(frozen=True)
class TerrainMetrics:
    """Per-type cell counts and coverage for one layer."""

    total_cells: int
    counts: dict[CellType, int]
    fractions: dict[CellType, float]
    land_fraction: float


def terrain_metrics(layer: Layer) -> TerrainMetrics:
    """Count cell types in ``layer``; land is anything but sea and empty."""

    counter = Counter(cell.type for row in layer.cells for cell in row)
    total = sum(counter.values())
    if total == 0:
        raise ValueError("layer has no cells")

    counts = {cell_type: counter.get(cell_type, 0) for cell_type in CellType}
    fractions = {cell_type: count / total for cell_type, count in counts.items()}
    land = total - counts[CellType.SEA] - counts[CellType.EMPTY]
    return TerrainMetrics(
        total_cells=total,
        counts=counts,
        fractions=fractions,
        land_fraction=float(land / total),
    )
