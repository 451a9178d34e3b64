"""Headless rendering of a tile region to an image, with terrain stats."""

from collections import Counter
from pathlib import Path

import numpy as np
import structlog
from PIL import Image

from .chunks import ChunkStore
from .colors import color_for_tile
from .terrain_types import TerrainType
from .types import Coordinate

logger = structlog.get_logger()


def _prefetch_region(
    store: ChunkStore, origin: Coordinate, width: int, height: int
) -> None:
    """Generate every chunk under the region up front."""
    ox, oy = origin
    chunks = store.chunks_for_region(origin, (ox + width - 1, oy + height - 1))
    generated = store.prefetch(chunks)
    logger.debug("region_prefetched", chunks=len(chunks), generated=generated)


def render_preview(
    store: ChunkStore,
    origin: Coordinate,
    width: int,
    height: int,
    tile_pixels: int = 1,
) -> Image.Image:
    """Render a width x height tile region starting at origin.

    Args:
        store: Chunk store to resolve tiles from.
        origin: Tile coordinate of the top-left tile.
        width: Region width in tiles.
        height: Region height in tiles.
        tile_pixels: Edge length of each tile in the output image.

    Returns:
        RGB image of size (width * tile_pixels, height * tile_pixels).
    """
    if width <= 0 or height <= 0 or tile_pixels <= 0:
        raise ValueError("Preview dimensions must be positive")

    ox, oy = origin
    _prefetch_region(store, origin, width, height)
    pixels = np.zeros((height, width, 3), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            pixels[y, x] = color_for_tile(store.get_tile((ox + x, oy + y)))

    if tile_pixels > 1:
        pixels = np.repeat(np.repeat(pixels, tile_pixels, axis=0), tile_pixels, axis=1)
    return Image.fromarray(pixels)


def save_preview(
    path: Path,
    store: ChunkStore,
    origin: Coordinate,
    width: int,
    height: int,
    tile_pixels: int = 1,
) -> Image.Image:
    """Render a region and write it to path as PNG."""
    image = render_preview(store, origin, width, height, tile_pixels)
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path, format="PNG")
    logger.info(
        "preview_saved",
        path=str(path),
        origin=origin,
        tiles=(width, height),
        chunks_cached=len(store),
    )
    return image


def compute_terrain_stats(
    store: ChunkStore, origin: Coordinate, width: int, height: int
) -> dict:
    """Count terrain types and waterlogged tiles in a region.

    Returns:
        Dict with per-terrain counts/percentages and a water summary.
    """
    if width <= 0 or height <= 0:
        raise ValueError("Region dimensions must be positive")

    ox, oy = origin
    _prefetch_region(store, origin, width, height)
    total = width * height
    terrain_counts: Counter[TerrainType] = Counter()
    waterlogged = 0
    for y in range(height):
        for x in range(width):
            tile = store.get_tile((ox + x, oy + y))
            terrain_counts[tile.terrain] += 1
            waterlogged += tile.waterlogged

    return {
        "dimensions": {"width": width, "height": height, "total_tiles": total},
        "terrain": {
            terrain.label: {
                "count": terrain_counts.get(terrain, 0),
                "percentage": round(100 * terrain_counts.get(terrain, 0) / total, 2),
            }
            for terrain in TerrainType
        },
        "summary": {
            "waterlogged_tiles": waterlogged,
            "waterlogged_percentage": round(100 * waterlogged / total, 2),
        },
    }
