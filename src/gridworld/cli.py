"""Command-line interface for the tile world."""

import argparse
import logging
import sys
import time
from pathlib import Path

import structlog

from .config import Config, Size, find_config, load_config
from .exceptions import ConfigurationError


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog console output."""
    level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Explore an infinite procedurally generated tile world"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path or name of a TOML config (default: built-in defaults)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Noise seed (overrides config)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command")

    view = subparsers.add_parser("view", help="Open the interactive viewer (default)")
    view.add_argument(
        "--window", type=int, nargs=2, metavar=("W", "H"), default=None,
        help="Window size in pixels",
    )
    view.add_argument(
        "--tile-size", type=int, default=None, help="Starting pixels per tile"
    )
    view.add_argument(
        "--chunk-borders", action="store_true", help="Outline chunk edges"
    )

    preview = subparsers.add_parser("preview", help="Write a PNG of a tile region")
    preview.add_argument(
        "--origin", type=int, nargs=2, metavar=("X", "Y"), default=(0, 0),
        help="Top-left tile coordinate (default: 0 0)",
    )
    preview.add_argument(
        "--size", type=positive_int, nargs=2, metavar=("W", "H"),
        default=(200, 200),
        help="Region size in tiles (default: 200 200)",
    )
    preview.add_argument(
        "--tile-pixels", type=positive_int, default=2,
        help="Pixels per tile (default: 2)",
    )
    preview.add_argument(
        "--output", "-o", type=str, default="preview.png",
        help="Output path (default: preview.png)",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> Config:
    """Load the requested config and apply command-line overrides."""
    config = load_config(find_config(args.config)) if args.config else Config()

    if args.seed is not None:
        config = config.model_copy(
            update={
                "generation": config.generation.model_copy(update={"seed": args.seed})
            }
        )

    display_updates = {}
    if getattr(args, "window", None):
        display_updates["window"] = Size(width=args.window[0], height=args.window[1])
    if getattr(args, "tile_size", None) is not None:
        display_updates["tile_size"] = Size(width=args.tile_size, height=args.tile_size)
    if getattr(args, "chunk_borders", False):
        display_updates["show_chunk_borders"] = True
    if display_updates:
        config = config.model_copy(
            update={"display": config.display.model_copy(update=display_updates)}
        )

    # model_copy skips validation, so re-validate the merged result
    return Config.model_validate(config.model_dump())


def run_preview(args: argparse.Namespace, config: Config) -> None:
    from .preview import compute_terrain_stats, save_preview
    from .world import World

    world = World(config)
    output_path = Path(args.output)
    origin = tuple(args.origin)
    width, height = args.size

    start_time = time.time()
    save_preview(output_path, world.store, origin, width, height, args.tile_pixels)
    elapsed = time.time() - start_time

    stats = compute_terrain_stats(world.store, origin, width, height)
    print(f"Rendered {width}x{height} tiles at {origin} in {elapsed:.2f}s")
    print(f"Chunks generated: {len(world.store)}")
    for name, data in stats["terrain"].items():
        print(f"  {name:<12} {data['count']:>8,} ({data['percentage']:.1f}%)")
    summary = stats["summary"]
    print(
        f"  {'Waterlogged':<12} {summary['waterlogged_tiles']:>8,} "
        f"({summary['waterlogged_percentage']:.1f}%)"
    )
    print(f"Saved to {output_path}")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    logger = structlog.get_logger()

    try:
        config = resolve_config(args)
    except (ConfigurationError, ValueError) as exc:
        logger.error("config_invalid", error=str(exc))
        sys.exit(1)

    if args.command == "preview":
        run_preview(args, config)
        return

    from .viewer import run
    from .world import World

    run(World(config), config)


if __name__ == "__main__":
    main()
