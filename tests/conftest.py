"""Shared test fixtures for islandmap tests."""

import pytest

from islandmap.config import GenerationParams
from islandmap.grid import TerrainGrid
from islandmap.terrain_types import Terrain


@pytest.fixture
def small_params() -> GenerationParams:
    """Small but non-trivial generation parameters."""
    return GenerationParams(width=48, height=40, seed=1234, octaves=4)


@pytest.fixture
def water_grid() -> TerrainGrid:
    """21x21 grid of water, marked clean."""
    grid = TerrainGrid.filled(21, 21, Terrain.water())
    grid.mark_clean()
    return grid


@pytest.fixture
def four_cell_grid() -> TerrainGrid:
    """2x2 grid, top row first.

        W S
        B G(5)
    """
    return TerrainGrid.from_rows(
        [
            [Terrain.water(), Terrain.stone()],
            [Terrain.beach(), Terrain.grass(5)],
        ]
    )
