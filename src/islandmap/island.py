"""Island shaping: radial falloff field."""

from functools import lru_cache

import numpy as np
from numpy.typing import NDArray

from .noise import smoothstep


def build_falloff(width: int, height: int, island_scale: float) -> NDArray[np.float64]:
    """Build a radial falloff field centered on the grid.

    Each cell's offset from the center is normalized by the half-extent
    times ``island_scale`` on its axis. The Euclidean length of that
    offset is clamped to [0, 1], eased with smoothstep and inverted, so
    the center is 1 and everything at or beyond the radius is 0. Larger
    scales push the radius outwards and grow the island.

    Results are cached per (width, height, island_scale) and returned
    read-only.

    Args:
        width: Grid width in cells.
        height: Grid height in cells.
        island_scale: Radius multiplier relative to the half-extent.

    Returns:
        Array of shape (height, width) with values in [0, 1].
    """
    return _build_falloff_cached(int(width), int(height), float(island_scale))


@lru_cache(maxsize=8)
def _build_falloff_cached(width: int, height: int, island_scale: float) -> NDArray[np.float64]:
    center_x = (width - 1) / 2.0
    center_y = (height - 1) / 2.0

    x_coords = np.arange(width, dtype=np.float64)
    y_coords = np.arange(height, dtype=np.float64)
    xx, yy = np.meshgrid(x_coords, y_coords)

    # A single row or column has no extent on that axis
    dx = _normalized_offset(xx, center_x, island_scale)
    dy = _normalized_offset(yy, center_y, island_scale)

    distance = np.clip(np.sqrt(dx * dx + dy * dy), 0.0, 1.0)
    falloff = 1.0 - smoothstep(0.0, 1.0, distance)

    falloff.setflags(write=False)
    return falloff


def _normalized_offset(
    coords: NDArray[np.float64],
    center: float,
    island_scale: float,
) -> NDArray[np.float64]:
    if center == 0.0:
        return np.zeros_like(coords)
    return (coords - center) / (center * island_scale)


def clear_falloff_cache() -> None:
    """Drop cached falloff fields."""
    _build_falloff_cached.cache_clear()
