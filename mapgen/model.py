"""Map value types handed to rendering clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import json
from typing import Any


class CellType(str, Enum):
    SEA = "sea"
    GRASS = "grass"
    BEACH = "beach"
    MOUNTAIN = "mountain"
    EMPTY = "empty"


@dataclass(frozen=True)
class MapCell:
    """Terrain of one cell; ``depth`` is only set by noise-driven generation."""

    type: CellType
    depth: float | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"type": self.type.value}
        if self.depth is not None:
            payload["depth"] = self.depth
        return payload


SEA = MapCell(CellType.SEA)
GRASS = MapCell(CellType.GRASS)
BEACH = MapCell(CellType.BEACH)
MOUNTAIN = MapCell(CellType.MOUNTAIN)
EMPTY = MapCell(CellType.EMPTY)


@dataclass(frozen=True)
class MetaData:
    width: int
    height: int
    seed: int

    def to_dict(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height, "seed": self.seed}


@dataclass(frozen=True)
class Layer:
    cells: list[list[MapCell]]

    def to_dict(self) -> dict[str, Any]:
        return {"cells": [[cell.to_dict() for cell in row] for row in self.cells]}


@dataclass(frozen=True)
class Map:
    """Generated map: echoed metadata plus an ordered list of layers."""

    metadata: MetaData
    layers: list[Layer] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "mapGrid": [layer.to_dict() for layer in self.layers],
        }

    def to_json(self, *, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
