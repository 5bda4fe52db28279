"""Map composition pipeline."""

from __future__ import annotations

import logging

from mapgen.config import GenerationConfig, GenerationStrategy
from mapgen.fractal import generate_mountain_layer
from mapgen.grid import Grid, flatten
from mapgen.island import generate_island_layer
from mapgen.metrics import terrain_metrics
from mapgen.model import EMPTY, GRASS, Layer, Map, MapCell, MetaData
from mapgen.noise import NoiseSource, ValueNoise2D
from mapgen.rings import generate_beach_layer, generate_ocean_layer
from mapgen.rng import RandomSource, SeededRandom

logger = logging.getLogger(__name__)


class MapGenerator:
    """Generates maps for one configuration.

    The random source and noise field belong to this instance; repeated
    ``generate`` calls continue their sequences. Pass ``rng`` or ``noise`` to
    substitute either. Without an injected noise field one is seeded from a
    single ``rng`` draw the first time the island strategy runs.
    """

    def __init__(
        self,
        config: GenerationConfig | None = None,
        *,
        rng: RandomSource | None = None,
        noise: NoiseSource | None = None,
    ) -> None:
        self.config = config or GenerationConfig()
        self.rng = rng if rng is not None else SeededRandom(self.config.seed)
        self._noise = noise

    @property
    def noise(self) -> NoiseSource:
        if self._noise is None:
            self._noise = ValueNoise2D.from_random(self.rng, size=self.config.island.lattice_size)
        return self._noise

    def generate(self) -> Map:
        cfg = self.config
        metadata = MetaData(width=cfg.width, height=cfg.height, seed=cfg.seed)
        logger.debug("generating %dx%d map, seed=%d, strategy=%s", cfg.width, cfg.height, cfg.seed, cfg.strategy.value)

        if cfg.strategy is GenerationStrategy.ISLAND:
            grid = self._generate_island()
        else:
            grid = self._generate_layered()

        layer = Layer(cells=grid.fill_empty_with(EMPTY).get_grid())
        if logger.isEnabledFor(logging.DEBUG):
            metrics = terrain_metrics(layer)
            logger.debug("land fraction %.3f over %d cells", metrics.land_fraction, metrics.total_cells)
        return Map(metadata=metadata, layers=[layer])

    def _generate_layered(self) -> Grid[MapCell]:
        cfg = self.config
        ground: Grid[MapCell] = Grid.filled(cfg.width, cfg.height, GRASS)
        ocean = generate_ocean_layer(cfg.width, cfg.height, cfg.ocean, self.rng)
        beach = generate_beach_layer(ocean, cfg.ocean, cfg.beach, self.rng)
        if not cfg.mountain.enabled:
            return flatten(ground, ocean, beach)
        mountains = generate_mountain_layer(cfg.width, cfg.height, cfg.mountain)
        return flatten(ground, ocean, beach, mountains)

    def _generate_island(self) -> Grid[MapCell]:
        cfg = self.config
        return generate_island_layer(cfg.width, cfg.height, self.noise, cfg.island)


def generate_map(
    config: GenerationConfig | None = None,
    *,
    rng: RandomSource | None = None,
    noise: NoiseSource | None = None,
) -> Map:
    """Generate one map from ``config`` with a fresh generator."""

    return MapGenerator(config, rng=rng, noise=noise).generate()
