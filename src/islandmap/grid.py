"""Terrain grid: cell storage, edits, dirty tracking and color readout."""

from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import structlog
from numpy.typing import NDArray

from .classification import classify_field
from .exceptions import PreconditionError
from .terrain_types import (
    BASE_COLORS,
    BRUSH_GRASS_INTENSITY,
    GRASS_SHADE_STEP,
    Terrain,
    TerrainKind,
    code_to_kind,
    kind_to_code,
)

if TYPE_CHECKING:
    from .config import GenerationParams

logger = structlog.get_logger()

_WATER = kind_to_code(TerrainKind.WATER)
_BEACH = kind_to_code(TerrainKind.BEACH)
_GRASS = kind_to_code(TerrainKind.GRASS)
_STONE = kind_to_code(TerrainKind.STONE)

# Kind code -> base RGB, indexed by code
_PALETTE = np.zeros((len(TerrainKind), 3), dtype=np.uint8)
for _kind, _rgb in BASE_COLORS.items():
    _PALETTE[kind_to_code(_kind)] = _rgb

# Kind code -> kind code after inversion
_INVERTED = np.zeros(len(TerrainKind), dtype=np.uint8)
_INVERTED[_WATER] = _STONE
_INVERTED[_STONE] = _WATER
_INVERTED[_GRASS] = _BEACH
_INVERTED[_BEACH] = _GRASS


class TerrainGrid:
    """Fixed-size grid of classified terrain.

    Cells are stored row-major in two uint8 arrays: the kind code and the
    grass intensity. Row 0 is the top row.

    Edit coordinates are bottom-up: ``y = 0`` is the bottom row, converted
    with ``row = height - 1 - y``. Color readout and PPM export are
    top-down; PNG export flips vertically.

    The dirty flag starts True, is set by every mutation and is only
    cleared by ``mark_clean``.
    """

    def __init__(self, kinds: NDArray[np.uint8], intensity: NDArray[np.uint8]):
        if kinds.ndim != 2 or kinds.shape[0] <= 0 or kinds.shape[1] <= 0:
            raise PreconditionError(f"Grid dimensions must be positive, got {kinds.shape}")
        if intensity.shape != kinds.shape:
            raise PreconditionError(
                f"Intensity shape {intensity.shape} does not match {kinds.shape}"
            )
        if np.any(kinds >= len(TerrainKind)):
            raise PreconditionError("Grid contains unknown terrain codes")

        self._kinds = np.array(kinds, dtype=np.uint8)
        self._intensity = np.array(intensity, dtype=np.uint8)
        self._dirty = True

    @classmethod
    def generate(cls, params: "GenerationParams") -> "TerrainGrid":
        """Build a grid by running the full generation pipeline.

        Args:
            params: Generation parameters.

        Returns:
            Freshly generated grid, dirty.
        """
        from .generator import generate_terrain

        return generate_terrain(params).grid

    @classmethod
    def from_elevation(cls, elevation: NDArray[np.float64]) -> "TerrainGrid":
        """Build a grid by classifying every cell of an elevation field."""
        kinds, intensity = classify_field(elevation)
        return cls(kinds, intensity)

    @classmethod
    def filled(cls, width: int, height: int, terrain: Terrain) -> "TerrainGrid":
        """Build a grid with every cell set to the same terrain."""
        if width <= 0 or height <= 0:
            raise PreconditionError(
                f"Grid dimensions must be positive, got {width}x{height}"
            )
        kinds = np.full((height, width), terrain.kind.code, dtype=np.uint8)
        intensity = np.full((height, width), terrain.intensity, dtype=np.uint8)
        return cls(kinds, intensity)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Terrain]]) -> "TerrainGrid":
        """Build a grid from rows of terrain, top row first.

        Raises:
            PreconditionError: If rows are empty or ragged.
        """
        if not rows or not rows[0]:
            raise PreconditionError("Grid needs at least one row and column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise PreconditionError("All rows must have the same length")

        kinds = np.array([[t.kind.code for t in row] for row in rows], dtype=np.uint8)
        intensity = np.array([[t.intensity for t in row] for row in rows], dtype=np.uint8)
        return cls(kinds, intensity)

    @property
    def width(self) -> int:
        return self._kinds.shape[1]

    @property
    def height(self) -> int:
        return self._kinds.shape[0]

    @property
    def is_dirty(self) -> bool:
        """Whether colors changed since the last ``mark_clean``."""
        return self._dirty

    def mark_clean(self) -> None:
        """Acknowledge that the consumer has read the current colors."""
        self._dirty = False

    def _row_for(self, x: int, y: int) -> int | None:
        row = self.height - 1 - y
        if 0 <= x < self.width and 0 <= row < self.height:
            return row
        return None

    def get_cell(self, x: int, y: int) -> Terrain | None:
        """Read the terrain at (x, y) in bottom-up coordinates.

        Returns:
            Terrain at the cell, or None if out of range.
        """
        row = self._row_for(x, y)
        if row is None:
            return None
        kind = code_to_kind(self._kinds[row, x])
        return Terrain(kind=kind, intensity=int(self._intensity[row, x]))

    def set_cell(self, x: int, y: int, terrain: Terrain) -> None:
        """Replace the terrain at (x, y) in bottom-up coordinates.

        Out-of-range coordinates are ignored and leave the dirty flag
        untouched.
        """
        row = self._row_for(x, y)
        if row is None:
            return
        self._kinds[row, x] = terrain.kind.code
        self._intensity[row, x] = terrain.intensity
        self._dirty = True

    def edit_circle(
        self,
        center_x: int,
        center_y: int,
        radius: int,
        kind: TerrainKind,
    ) -> None:
        """Paint a disc of brush terrain around (center_x, center_y).

        Scans the square [-radius, radius]^2 and sets every offset with
        dx^2 + dy^2 <= radius^2, boundary ring included. Cells falling off
        the map are skipped.

        Raises:
            PreconditionError: If kind is None.
        """
        if kind is None:
            raise PreconditionError("edit_circle needs a terrain kind")

        terrain = Terrain.for_brush(TerrainKind(kind))
        radius_sq = radius * radius
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                if dx * dx + dy * dy <= radius_sq:
                    self.set_cell(center_x + dx, center_y + dy, terrain)

    def invert(self) -> None:
        """Swap water with stone and grass with beach across the map.

        Beach becomes grass with the brush intensity; other kinds carry no
        intensity. Always marks the grid dirty.
        """
        self._kinds = _INVERTED[self._kinds]
        self._intensity = np.where(
            self._kinds == _GRASS, BRUSH_GRASS_INTENSITY, 0
        ).astype(np.uint8)
        self._dirty = True
        logger.debug("grid_inverted", width=self.width, height=self.height)

    def color_array(self) -> NDArray[np.uint8]:
        """RGB colors as an array of shape (height, width, 3), top row first."""
        colors = _PALETTE[self._kinds]
        grass = self._kinds == _GRASS
        shades = (self._intensity.astype(np.uint16) * GRASS_SHADE_STEP) & 0xFF
        colors[grass, 1] = shades[grass].astype(np.uint8)
        return colors

    def color_buffer(self) -> bytes:
        """Row-major RGB8 bytes, top row first. Does not clear dirty."""
        return self.color_array().tobytes()

    def symbols(self) -> list[str]:
        """Classification tags as one string per row, top row first."""
        lookup = np.array([code_to_kind(c).symbol for c in range(len(TerrainKind))])
        return ["".join(row) for row in lookup[self._kinds]]

    def terrain_counts(self) -> dict[TerrainKind, int]:
        """Number of cells holding each terrain kind."""
        counts = np.bincount(self._kinds.ravel(), minlength=len(TerrainKind))
        return {code_to_kind(code): int(n) for code, n in enumerate(counts)}

    def export_ppm(self, path: Path) -> bool:
        """Write the grid as an ASCII PPM. See ``export.export_ppm``."""
        from .export import export_ppm

        return export_ppm(self, path)

    def export_png(self, path: Path) -> bool:
        """Write the grid as a vertically flipped PNG. See ``export.export_png``."""
        from .export import export_png

        return export_png(self, path)

    def __repr__(self) -> str:
        return f"TerrainGrid(width={self.width}, height={self.height}, dirty={self._dirty})"
