"""Seeded tile map generation package."""

from .config import DEFAULT_HEIGHT, DEFAULT_WIDTH, GenerationConfig, GenerationStrategy
from .generator import MapGenerator, generate_map
from .model import CellType, Map, MapCell

__all__ = [
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "GenerationConfig",
    "GenerationStrategy",
    "MapGenerator",
    "generate_map",
    "CellType",
    "Map",
    "MapCell",
]
