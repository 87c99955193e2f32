"""Map generation configuration models and TOML loading."""

import tomllib
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class GenerationParams(BaseModel, frozen=True):
    """Complete parameter set for one map generation.

    A grid is always built from a full parameter set; change a field with
    ``model_copy(update=...)`` to get a new one.
    """

    width: int = Field(default=300, gt=0, description="Map width in cells")
    height: int = Field(default=300, gt=0, description="Map height in cells")
    island_scale: float = Field(
        default=1.1, gt=0, description="Falloff radius relative to half-extent"
    )
    seed: int = Field(
        default=0, description="Noise seed, wrapped to the unsigned 32-bit range"
    )
    octaves: int = Field(default=9, ge=1, description="Number of noise octaves")
    persistence: float = Field(
        default=0.5, description="Amplitude multiplier per octave"
    )
    lacunarity: float = Field(
        default=2.0, description="Frequency multiplier per octave"
    )
    noise_scale: float = Field(
        default=0.03, description="Coordinate scale of the first octave"
    )


class ExportConfig(BaseModel):
    """Export destination settings."""

    output_dir: str = Field(default="maps", description="Directory for exports")
    formats: list[Literal["ppm", "png"]] = Field(
        default_factory=lambda: ["png"], description="Formats to write"
    )


class MapConfig(BaseModel):
    """Complete configuration for a batch run."""

    generation: GenerationParams = Field(default_factory=GenerationParams)
    export: ExportConfig = Field(default_factory=ExportConfig)


def load_config(config_path: Path) -> MapConfig:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed MapConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If values are out of range.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return MapConfig.model_validate(data)
