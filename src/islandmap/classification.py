"""Elevation to terrain classification."""

import math

import numpy as np
from numpy.typing import NDArray

from .terrain_types import Terrain, TerrainKind, kind_to_code

WATER_MAX = 0.30
BEACH_MAX = 0.35
GRASS_MAX = 0.70


def classify(h: float) -> Terrain:
    """Classify a single elevation value.

    Boundary values belong to the upper bucket.

    Args:
        h: Elevation, normally in [0, 1].

    Returns:
        Water below 0.30, Beach below 0.35, Grass below 0.70 with
        intensity floor(h * 10), Stone otherwise.
    """
    if h < WATER_MAX:
        return Terrain.water()
    if h < BEACH_MAX:
        return Terrain.beach()
    if h < GRASS_MAX:
        return Terrain.grass(math.floor(h * 10))
    return Terrain.stone()


def classify_field(
    elevation: NDArray[np.float64],
) -> tuple[NDArray[np.uint8], NDArray[np.uint8]]:
    """Classify every cell of an elevation field.

    Produces the same terrain per cell as ``classify``.

    Args:
        elevation: Elevation field of shape (height, width).

    Returns:
        Tuple of (kind codes, grass intensity), both uint8 arrays of the
        same shape. Intensity is 0 for non-grass cells.
    """
    kinds = np.full(elevation.shape, kind_to_code(TerrainKind.STONE), dtype=np.uint8)
    kinds[elevation < GRASS_MAX] = kind_to_code(TerrainKind.GRASS)
    kinds[elevation < BEACH_MAX] = kind_to_code(TerrainKind.BEACH)
    kinds[elevation < WATER_MAX] = kind_to_code(TerrainKind.WATER)

    grass = kinds == kind_to_code(TerrainKind.GRASS)
    intensity = np.zeros(elevation.shape, dtype=np.uint8)
    intensity[grass] = np.floor(elevation[grass] * 10).astype(np.uint8)

    return kinds, intensity
