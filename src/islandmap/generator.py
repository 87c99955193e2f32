"""Map generation orchestration."""

import logging

import numpy as np
from numpy.typing import NDArray

from .config import GenerationParams
from .fields import build_height_field
from .grid import TerrainGrid
from .island import build_falloff
from .noise import NoiseSource

logger = logging.getLogger(__name__)


class GenerationResult:
    """Result of map generation with the intermediate fields."""

    def __init__(
        self,
        grid: TerrainGrid,
        params: GenerationParams,
        falloff: NDArray[np.float64],
        elevation: NDArray[np.float64],
    ):
        self.grid = grid
        self.params = params
        self.falloff = falloff
        self.elevation = elevation


def generate_terrain(params: GenerationParams) -> GenerationResult:
    """Generate a complete terrain grid from parameters.

    Always rebuilds the whole grid. The falloff field is reused from cache
    when dimensions and island scale match an earlier run.

    Args:
        params: Generation parameters.

    Returns:
        GenerationResult with the grid and the fields used to build it.
    """
    width, height = params.width, params.height
    logger.info(f"Generating map {width}x{height} with seed {params.seed}")

    falloff = build_falloff(width, height, params.island_scale)

    logger.debug(f"Summing {params.octaves} octaves of noise")
    noise = NoiseSource(params.seed)
    elevation = build_height_field(
        falloff,
        noise,
        octaves=params.octaves,
        persistence=params.persistence,
        lacunarity=params.lacunarity,
        base_scale=params.noise_scale,
    )

    grid = TerrainGrid.from_elevation(elevation)
    _log_terrain_stats(grid)

    return GenerationResult(
        grid=grid,
        params=params,
        falloff=falloff,
        elevation=elevation,
    )


def _log_terrain_stats(grid: TerrainGrid) -> None:
    """Log terrain generation statistics."""
    total = grid.width * grid.height

    logger.info(f"Terrain stats ({total:,} cells):")
    for kind, count in grid.terrain_counts().items():
        pct = count / total * 100
        logger.info(f"  {kind.value}: {count:,} ({pct:.1f}%)")
