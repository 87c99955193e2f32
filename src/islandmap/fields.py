"""Height field synthesis from fractal noise and island falloff."""

import numpy as np
from numpy.typing import NDArray

from .exceptions import PreconditionError
from .noise import NoiseSource


def build_height_field(
    falloff: NDArray[np.float64],
    noise: NoiseSource,
    octaves: int,
    persistence: float,
    lacunarity: float,
    base_scale: float,
) -> NDArray[np.float64]:
    """Generate a normalized elevation field shaped by the falloff.

    Sums ``octaves`` layers of noise. Amplitude starts at 1 and is
    multiplied by ``persistence`` per octave; frequency starts at 1 and is
    multiplied by ``lacunarity`` per octave. Cell (row i, col j) samples
    noise at (j * base_scale * frequency, i * base_scale * frequency).
    The sum is remapped from [-1, 1] to [0, 1], multiplied by the falloff
    and clipped to [0, 1].

    Args:
        falloff: Falloff field of shape (height, width).
        noise: Noise source.
        octaves: Number of noise layers to sum.
        persistence: Amplitude multiplier between octaves.
        lacunarity: Frequency multiplier between octaves.
        base_scale: Coordinate scale of the first octave.

    Returns:
        Elevation array of shape (height, width) in [0, 1].

    Raises:
        PreconditionError: If octaves is less than 1.
    """
    if octaves < 1:
        raise PreconditionError(f"octaves must be at least 1, got {octaves}")

    height, width = falloff.shape
    cols = np.arange(width, dtype=np.float64)
    rows = np.arange(height, dtype=np.float64)

    total = np.zeros((height, width), dtype=np.float64)
    amplitude = 1.0
    frequency = 1.0

    for _ in range(octaves):
        sample_x = cols * base_scale * frequency
        sample_y = rows * base_scale * frequency
        total += noise.sample_grid(sample_x, sample_y) * amplitude
        amplitude *= persistence
        frequency *= lacunarity

    elevation = (total + 1.0) / 2.0
    elevation *= falloff

    # Octave sums can exceed [-1, 1] when persistence is large
    return np.clip(elevation, 0.0, 1.0)
