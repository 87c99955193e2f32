"""Tests for gradient noise."""

import numpy as np
import pytest

from islandmap.noise import NoiseSource, normalize_seed, smoothstep

AXIS = np.linspace(0.1, 9.9, 20)


class TestNoiseSource:
    """Tests for NoiseSource sampling."""

    def test_deterministic_with_same_seed(self) -> None:
        """Same seed and coordinates give identical values."""
        a = NoiseSource(42)
        b = NoiseSource(42)
        for x, y in [(0.5, 0.5), (3.25, 7.75), (101.1, 17.3)]:
            assert a.sample(x, y) == b.sample(x, y)

    def test_grid_deterministic(self) -> None:
        np.testing.assert_array_equal(
            NoiseSource(8).sample_grid(AXIS, AXIS), NoiseSource(8).sample_grid(AXIS, AXIS)
        )

    def test_different_seed_different_output(self) -> None:
        result1 = NoiseSource(123).sample_grid(AXIS, AXIS)
        result2 = NoiseSource(456).sample_grid(AXIS, AXIS)
        assert not np.allclose(result1, result2)

    def test_output_range(self) -> None:
        """Values stay within [-1, 1]."""
        axis = np.linspace(0, 50, 200)
        result = NoiseSource(7).sample_grid(axis, axis)
        assert result.min() >= -1.0
        assert result.max() <= 1.0

    def test_scalar_matches_grid(self) -> None:
        """Entry [i, j] of the grid is the noise at (xs[j], ys[i])."""
        noise = NoiseSource(2024)
        xs = np.array([0.3, 1.7, 12.45, 250.9, 300.01])
        ys = np.array([0.9, 4.2, 33.3])
        grid = noise.sample_grid(xs, ys)
        for i in range(len(ys)):
            for j in range(len(xs)):
                assert grid[i, j] == pytest.approx(noise.sample(float(xs[j]), float(ys[i])), abs=1e-12)

    def test_not_constant(self) -> None:
        result = NoiseSource(5).sample_grid(AXIS, AXIS)
        assert result.std() > 0.01

    def test_grid_shape(self) -> None:
        noise = NoiseSource(1)
        cols = np.arange(6, dtype=np.float64) * 0.3
        rows = np.arange(4, dtype=np.float64) * 0.3
        assert noise.sample_grid(cols, rows).shape == (4, 6)

    def test_seed_property(self) -> None:
        assert NoiseSource(17).seed == 17


class TestSeedWrapping:
    """Tests for out-of-range seeds."""

    def test_negative_seed_wraps_unsigned(self) -> None:
        assert normalize_seed(-1) == 2**32 - 1
        assert normalize_seed(-5) == 2**32 - 5
        assert NoiseSource(-5).seed == 2**32 - 5

    def test_large_seed_wraps(self) -> None:
        assert normalize_seed(2**32 + 3) == 3

    def test_wrapped_seeds_share_noise(self) -> None:
        np.testing.assert_array_equal(
            NoiseSource(-1).sample_grid(AXIS, AXIS),
            NoiseSource(2**32 - 1).sample_grid(AXIS, AXIS),
        )

    def test_negative_seed_deterministic(self) -> None:
        assert NoiseSource(-5).sample(1.3, 2.7) == NoiseSource(-5).sample(1.3, 2.7)


class TestSmoothstep:
    """Tests for smoothstep function."""

    def test_below_edge0_returns_zero(self) -> None:
        x = np.array([-1.0, 0.0, 0.1])
        result = smoothstep(0.2, 0.8, x)
        np.testing.assert_array_equal(result, [0.0, 0.0, 0.0])

    def test_above_edge1_returns_one(self) -> None:
        x = np.array([0.9, 1.0, 1.5])
        result = smoothstep(0.2, 0.8, x)
        np.testing.assert_array_equal(result, [1.0, 1.0, 1.0])

    def test_midpoint_returns_half(self) -> None:
        result = smoothstep(0.0, 1.0, np.array([0.5]))
        assert result[0] == 0.5

    def test_matches_cubic_ease(self) -> None:
        """On [0, 1] it is d^2 * (3 - 2d)."""
        d = np.linspace(0, 1, 11)
        np.testing.assert_allclose(smoothstep(0.0, 1.0, d), d * d * (3 - 2 * d))
