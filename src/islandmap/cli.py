"""Command-line interface for map generation and export."""

import argparse
import logging
import sys
import time
import tomllib
from pathlib import Path

import structlog

from .terrain_types import TerrainKind


def parse_brush(value: str) -> tuple[TerrainKind, int, int, int]:
    """Parse a brush edit of the form ``kind:x,y,radius``.

    Raises:
        ValueError: If the value is malformed or the kind is unknown.
    """
    if ":" not in value:
        raise ValueError(f"Invalid brush format: {value} (expected 'kind:x,y,radius')")
    kind_name, coords = value.split(":", 1)
    parts = coords.split(",")
    if len(parts) != 3:
        raise ValueError(f"Invalid coords format: {coords} (expected 'x,y,radius')")
    x, y, radius = (int(p) for p in parts)
    return TerrainKind(kind_name.strip().lower()), x, y, radius


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate an island terrain map and export it"
    )
    parser.add_argument(
        "--config", "-c", type=str, default=None, help="TOML config file"
    )
    parser.add_argument("--width", type=int, default=None, help="Map width")
    parser.add_argument("--height", type=int, default=None, help="Map height")
    parser.add_argument("--seed", type=int, default=None, help="Noise seed")
    parser.add_argument(
        "--island-scale", type=float, default=None, help="Falloff radius scale"
    )
    parser.add_argument("--octaves", type=int, default=None, help="Noise octaves")
    parser.add_argument(
        "--persistence", type=float, default=None, help="Amplitude per octave"
    )
    parser.add_argument(
        "--lacunarity", type=float, default=None, help="Frequency per octave"
    )
    parser.add_argument(
        "--noise-scale", type=float, default=None, help="Base noise scale"
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default="island",
        help="Output file name without extension (default: island)",
    )
    parser.add_argument(
        "--format",
        choices=["ppm", "png", "both"],
        default=None,
        help="Export format (default: from config, else png)",
    )
    parser.add_argument(
        "--brush",
        type=str,
        nargs="*",
        default=[],
        help="Paint a disc before export (e.g., 'stone:150,150,3')",
    )
    parser.add_argument(
        "--invert", action="store_true", help="Invert the map before export"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for map generation."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )

    # Import here to avoid slow startup for --help
    from pydantic import ValidationError

    from .config import GenerationParams, MapConfig, load_config
    from .grid import TerrainGrid

    if args.config:
        try:
            config = load_config(Path(args.config))
        except (FileNotFoundError, tomllib.TOMLDecodeError, ValidationError) as e:
            parser.error(str(e))
    else:
        config = MapConfig()

    overrides = {
        "width": args.width,
        "height": args.height,
        "seed": args.seed,
        "island_scale": args.island_scale,
        "octaves": args.octaves,
        "persistence": args.persistence,
        "lacunarity": args.lacunarity,
        "noise_scale": args.noise_scale,
    }
    try:
        params = GenerationParams.model_validate(
            {
                **config.generation.model_dump(),
                **{k: v for k, v in overrides.items() if v is not None},
            }
        )
    except ValidationError as e:
        parser.error(str(e))

    brushes = []
    for brush in args.brush:
        try:
            brushes.append(parse_brush(brush))
        except ValueError as e:
            parser.error(str(e))

    if args.format is None:
        formats = list(dict.fromkeys(config.export.formats))
    elif args.format == "both":
        formats = ["ppm", "png"]
    else:
        formats = [args.format]

    print(f"Generating {params.width}x{params.height} map with seed {params.seed}")

    start_time = time.time()
    grid = TerrainGrid.generate(params)
    print(f"Generation complete in {time.time() - start_time:.1f}s")

    for kind, x, y, radius in brushes:
        grid.edit_circle(x, y, radius, kind)
    if args.invert:
        grid.invert()

    output_dir = Path(config.export.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    failed = False
    for fmt in formats:
        path = output_dir / f"{args.output}.{fmt}"
        ok = grid.export_ppm(path) if fmt == "ppm" else grid.export_png(path)
        if ok:
            print(f"Saved to {path}")
        else:
            print(f"Export failed: {path}", file=sys.stderr)
            failed = True

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
