"""Raster export of terrain grids to PPM and PNG."""

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Callable

import numpy as np
import structlog
from PIL import Image

if TYPE_CHECKING:
    from .grid import TerrainGrid

logger = structlog.get_logger()


def format_ppm(grid: "TerrainGrid") -> str:
    """Render the grid as ASCII PPM (P3) text.

    Header is ``P3``, then ``width height``, then ``255``, one per line.
    Each grid row becomes one line, top row first, with every ``r g b``
    triple followed by a single space and the line ended by ``\\n``.
    """
    lines = [f"P3\n{grid.width} {grid.height}\n255\n"]
    for row in grid.color_array().tolist():
        lines.append("".join(f"{r} {g} {b} " for r, g, b in row))
        lines.append("\n")
    return "".join(lines)


def export_ppm(grid: "TerrainGrid", path: Path) -> bool:
    """Write the grid to ``path`` as ASCII PPM.

    Rows are written top row first, not flipped.

    Returns:
        True if the file was written, False on any failure. A failed
        export leaves no partial file behind.
    """
    data = format_ppm(grid).encode("ascii")
    return _export(path, "ppm", lambda f: f.write(data))


def export_png(grid: "TerrainGrid", path: Path) -> bool:
    """Write the grid to ``path`` as an 8-bit RGB PNG.

    The image is flipped vertically: grid row ``height - 1 - y`` is
    written as image row ``y``, so the bottom-up edit origin ends up at
    the bottom of the picture.

    Returns:
        True if the file was written, False on any failure. A failed
        export leaves no partial file behind.
    """
    flipped = np.ascontiguousarray(np.flipud(grid.color_array()))
    image = Image.fromarray(flipped)
    return _export(path, "png", lambda f: image.save(f, format="PNG"))


def _export(path: Path, fmt: str, write: Callable[[BinaryIO], object]) -> bool:
    path = Path(path)
    try:
        _write_atomic(path, write)
    except (OSError, ValueError) as e:
        logger.warning("export_failed", path=str(path), format=fmt, error=str(e))
        return False

    logger.info("export_written", path=str(path), format=fmt)
    return True


def _write_atomic(path: Path, write: Callable[[BinaryIO], object]) -> None:
    """Write through a temporary file in the same directory, then rename."""
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            write(f)
        os.replace(tmp_path, path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise
