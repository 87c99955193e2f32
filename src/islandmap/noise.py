"""Seeded 2D gradient noise.

Provides the single-frequency OpenSimplex primitive used by the height
field. Octave summation is done by the caller.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from opensimplex import OpenSimplex

# Seeds wrap like an unsigned 32-bit integer
SEED_MODULUS = 2**32


def normalize_seed(seed: int) -> int:
    """Reduce any integer seed to the unsigned 32-bit range."""
    return int(seed) % SEED_MODULUS


class NoiseSource:
    """Deterministic OpenSimplex noise keyed by a seed.

    Negative or oversized seeds are wrapped into [0, 2**32), so ``-1`` and
    ``2**32 - 1`` name the same noise.
    """

    def __init__(self, seed: int):
        self._seed = normalize_seed(seed)
        self._simplex = OpenSimplex(seed=self._seed)

    @property
    def seed(self) -> int:
        return self._seed

    def sample(self, x: float, y: float) -> float:
        """Sample noise at a single point. Returns value in [-1, 1]."""
        return float(np.clip(self._simplex.noise2(x, y), -1.0, 1.0))

    def sample_grid(self, xs: ArrayLike, ys: ArrayLike) -> NDArray[np.float64]:
        """Sample noise on the grid spanned by two coordinate axes.

        Args:
            xs: 1D array of x coordinates (columns).
            ys: 1D array of y coordinates (rows).

        Returns:
            Array of shape (len(ys), len(xs)) where entry [i, j] is the
            noise at (xs[j], ys[i]), in [-1, 1].
        """
        xs = np.asarray(xs, dtype=np.float64).ravel()
        ys = np.asarray(ys, dtype=np.float64).ravel()
        values = self._simplex.noise2array(xs, ys)
        return np.clip(np.asarray(values, dtype=np.float64), -1.0, 1.0)


def smoothstep(edge0: float, edge1: float, x: ArrayLike) -> NDArray[np.float64]:
    """Smooth Hermite interpolation between 0 and 1.

    Args:
        edge0: Lower edge of transition.
        edge1: Upper edge of transition.
        x: Input values.

    Returns:
        Smoothly interpolated values in [0, 1].
    """
    t = np.clip((np.asarray(x, dtype=np.float64) - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)
