"""Terrain to display color mapping used by renderers."""

from typing import Mapping

import structlog

from .exceptions import UnmappedTerrainError
from .terrain_types import TerrainType, Tile

logger = structlog.get_logger()

RGB = tuple[int, int, int]

FALLBACK_COLOR: RGB = (255, 0, 255)  # Magenta
WATER_COLOR: RGB = (0, 121, 241)  # Blue

TERRAIN_COLORS: dict[TerrainType, RGB] = {
    TerrainType.UNDEFINED: FALLBACK_COLOR,
    TerrainType.SAND: (253, 249, 0),  # Yellow
    TerrainType.GRAVEL: (130, 130, 130),  # Gray
    TerrainType.DIRT: (127, 106, 79),  # Brown
    TerrainType.LOW_GRASS: (0, 158, 47),  # Lime
    TerrainType.HIGH_GRASS: (0, 228, 48),  # Green
    TerrainType.FOREST: (0, 117, 44),  # Dark green
    TerrainType.MOUNTAIN: (255, 255, 255),  # White
}


def lookup_color(
    terrain: TerrainType, colors: Mapping[TerrainType, RGB] = TERRAIN_COLORS
) -> RGB:
    """Color for a terrain type.

    Raises:
        UnmappedTerrainError: If colors has no entry for terrain.
    """
    try:
        return colors[terrain]
    except KeyError as exc:
        raise UnmappedTerrainError(f"No color for terrain type {terrain!r}") from exc


def color_for_tile(
    tile: Tile, colors: Mapping[TerrainType, RGB] = TERRAIN_COLORS
) -> RGB:
    """Color to draw a tile with. Waterlogged tiles are always water colored.

    Unmapped terrain draws as FALLBACK_COLOR and logs a warning; it never
    interrupts a frame.
    """
    if tile.waterlogged:
        return WATER_COLOR
    try:
        return lookup_color(tile.terrain, colors)
    except UnmappedTerrainError:
        logger.warning("unmapped_terrain", terrain=tile.terrain.name)
        return FALLBACK_COLOR
