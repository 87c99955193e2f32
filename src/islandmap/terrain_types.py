"""Terrain kinds and the immutable terrain value stored in each cell."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

# Intensity used for grass painted by hand or produced by inversion.
BRUSH_GRASS_INTENSITY = 5

# Green channel step per grass intensity level.
GRASS_SHADE_STEP = 25


class TerrainKind(str, Enum):
    """Closed set of terrain kinds a cell can hold."""

    WATER = "water"
    BEACH = "beach"
    GRASS = "grass"
    STONE = "stone"

    @property
    def symbol(self) -> str:
        """Single-character classification tag."""
        return _SYMBOLS[self]

    @property
    def code(self) -> int:
        """Compact uint8 value used for array storage."""
        return _KIND_CODES[self]


_SYMBOLS = {
    TerrainKind.WATER: "W",
    TerrainKind.BEACH: "B",
    TerrainKind.GRASS: "G",
    TerrainKind.STONE: "S",
}

_KIND_CODES = {
    TerrainKind.WATER: 0,
    TerrainKind.BEACH: 1,
    TerrainKind.GRASS: 2,
    TerrainKind.STONE: 3,
}

_CODE_KINDS = {code: kind for kind, code in _KIND_CODES.items()}

# Base RGB per kind; grass green channel is replaced by its shade.
BASE_COLORS: dict[TerrainKind, tuple[int, int, int]] = {
    TerrainKind.WATER: (0, 0, 255),
    TerrainKind.BEACH: (245, 222, 179),
    TerrainKind.GRASS: (0, 0, 0),
    TerrainKind.STONE: (128, 128, 128),
}


def kind_to_code(kind: TerrainKind) -> int:
    """Convert TerrainKind to its uint8 storage value."""
    return _KIND_CODES[kind]


def code_to_kind(code: int) -> TerrainKind:
    """Convert a uint8 storage value back to TerrainKind.

    Raises:
        KeyError: If the code does not name a terrain kind.
    """
    return _CODE_KINDS[int(code)]


def grass_shade(intensity: int) -> int:
    """Green channel value for grass of the given intensity."""
    return (intensity * GRASS_SHADE_STEP) & 0xFF


class Terrain(BaseModel, frozen=True):
    """Immutable terrain value held by a single grid cell."""

    kind: TerrainKind
    intensity: int = Field(default=0, ge=0, le=10)

    @model_validator(mode="after")
    def _only_grass_has_intensity(self) -> "Terrain":
        if self.kind != TerrainKind.GRASS and self.intensity != 0:
            raise ValueError(f"{self.kind.value} terrain carries no intensity")
        return self

    @classmethod
    def water(cls) -> "Terrain":
        return cls(kind=TerrainKind.WATER)

    @classmethod
    def beach(cls) -> "Terrain":
        return cls(kind=TerrainKind.BEACH)

    @classmethod
    def grass(cls, intensity: int) -> "Terrain":
        return cls(kind=TerrainKind.GRASS, intensity=intensity)

    @classmethod
    def stone(cls) -> "Terrain":
        return cls(kind=TerrainKind.STONE)

    @classmethod
    def for_brush(cls, kind: TerrainKind) -> "Terrain":
        """Terrain painted by manual edits.

        Grass always gets BRUSH_GRASS_INTENSITY regardless of the
        surrounding elevation.
        """
        if kind == TerrainKind.GRASS:
            return cls.grass(BRUSH_GRASS_INTENSITY)
        return cls(kind=kind)

    @property
    def symbol(self) -> str:
        """Single-character classification tag."""
        return self.kind.symbol

    @property
    def color(self) -> tuple[int, int, int]:
        """RGB color triple for this terrain."""
        if self.kind == TerrainKind.GRASS:
            return (0, grass_shade(self.intensity), 0)
        return BASE_COLORS[self.kind]
