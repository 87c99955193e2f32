"""Island terrain map generation.

Builds a grid of classified terrain from fractal gradient noise shaped by
a radial falloff, supports brush edits and inversion, and exports to PPM
and PNG.
"""

from .classification import classify, classify_field
from .config import ExportConfig, GenerationParams, MapConfig, load_config
from .exceptions import MapError, PreconditionError
from .export import export_png, export_ppm, format_ppm
from .fields import build_height_field
from .generator import GenerationResult, generate_terrain
from .grid import TerrainGrid
from .island import build_falloff
from .noise import NoiseSource
from .terrain_types import BRUSH_GRASS_INTENSITY, Terrain, TerrainKind

__all__ = [
    # Types
    "Terrain",
    "TerrainKind",
    "BRUSH_GRASS_INTENSITY",
    # Config
    "GenerationParams",
    "ExportConfig",
    "MapConfig",
    "load_config",
    # Generation
    "NoiseSource",
    "build_falloff",
    "build_height_field",
    "classify",
    "classify_field",
    "generate_terrain",
    "GenerationResult",
    # Grid
    "TerrainGrid",
    # Export
    "export_ppm",
    "export_png",
    "format_ppm",
    # Exceptions
    "MapError",
    "PreconditionError",
]
