"""Tests for map generation orchestration."""

import numpy as np
import pytest
from pydantic import ValidationError

from islandmap.classification import classify
from islandmap.config import GenerationParams
from islandmap.generator import generate_terrain
from islandmap.grid import TerrainGrid
from islandmap.island import build_falloff
from islandmap.noise import NoiseSource
from islandmap.terrain_types import TerrainKind


class TestGenerateTerrain:
    """Tests for generate_terrain."""

    def test_grid_dimensions(self, small_params: GenerationParams) -> None:
        result = generate_terrain(small_params)
        assert result.grid.width == 48
        assert result.grid.height == 40
        assert result.elevation.shape == (40, 48)
        assert result.falloff.shape == (40, 48)

    def test_deterministic(self, small_params: GenerationParams) -> None:
        """Same parameters give bit-identical heights and colors."""
        first = generate_terrain(small_params)
        second = generate_terrain(small_params)
        np.testing.assert_array_equal(first.elevation, second.elevation)
        assert first.grid.color_buffer() == second.grid.color_buffer()

    def test_seed_changes_map(self, small_params: GenerationParams) -> None:
        other = small_params.model_copy(update={"seed": 999})
        assert not np.array_equal(
            generate_terrain(small_params).elevation, generate_terrain(other).elevation
        )

    def test_new_grid_is_dirty(self, small_params: GenerationParams) -> None:
        assert generate_terrain(small_params).grid.is_dirty

    def test_cells_follow_elevation(self, small_params: GenerationParams) -> None:
        result = generate_terrain(small_params)
        expected = TerrainGrid.from_elevation(result.elevation)
        assert result.grid.symbols() == expected.symbols()

    def test_edges_are_water(self) -> None:
        """The falloff drowns the map border."""
        params = GenerationParams(width=41, height=41, island_scale=1.0, seed=5)
        grid = generate_terrain(params).grid
        symbols = grid.symbols()
        assert symbols[0] == "W" * 41
        assert symbols[-1] == "W" * 41
        assert all(row[0] == "W" and row[-1] == "W" for row in symbols)

    def test_falloff_reused(self, small_params: GenerationParams) -> None:
        result = generate_terrain(small_params)
        assert result.falloff is build_falloff(48, 40, small_params.island_scale)

    def test_single_cell_map(self) -> None:
        """Every octave samples the origin, and the falloff there is 1."""
        params = GenerationParams(width=1, height=1, seed=3)
        result = generate_terrain(params)

        origin = NoiseSource(3).sample(0.0, 0.0)
        total = sum(origin * params.persistence**o for o in range(params.octaves))
        expected = min(max((total + 1.0) / 2.0, 0.0), 1.0)
        assert result.elevation[0, 0] == pytest.approx(expected)
        assert result.grid.get_cell(0, 0) == classify(float(result.elevation[0, 0]))

    def test_negative_seed_builds_map(self) -> None:
        params = GenerationParams(width=24, height=20, seed=-5)
        first = generate_terrain(params)
        second = generate_terrain(params)
        assert first.grid.width == 24
        assert first.grid.height == 20
        np.testing.assert_array_equal(first.elevation, second.elevation)
        assert first.grid.color_buffer() == second.grid.color_buffer()

    def test_negative_seed_wraps_like_unsigned(self) -> None:
        negative = generate_terrain(GenerationParams(width=16, height=16, seed=-1))
        wrapped = generate_terrain(GenerationParams(width=16, height=16, seed=2**32 - 1))
        np.testing.assert_array_equal(negative.elevation, wrapped.elevation)

    def test_has_several_terrain_kinds(self) -> None:
        params = GenerationParams(width=120, height=120, seed=8)
        counts = generate_terrain(params).grid.terrain_counts()
        assert counts[TerrainKind.WATER] > 0
        assert sum(counts.values()) == 120 * 120


class TestTerrainGridGenerate:
    """Tests for TerrainGrid.generate."""

    def test_matches_generate_terrain(self, small_params: GenerationParams) -> None:
        grid = TerrainGrid.generate(small_params)
        assert grid.color_buffer() == generate_terrain(small_params).grid.color_buffer()

    @pytest.mark.parametrize("field", ["width", "height"])
    def test_invalid_dimensions_fail_fast(self, field: str) -> None:
        with pytest.raises(ValidationError):
            GenerationParams(**{field: 0})
