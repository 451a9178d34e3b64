"""Terrain classification from height via ordered threshold bands."""

import math

from .terrain_types import TerrainType

# (upper_bound_exclusive, terrain), keep in order of increasing height.
# The last band also accepts exactly 1.0, the top of the noise range.
TERRAIN_BANDS: tuple[tuple[float, TerrainType], ...] = (
    (0.42, TerrainType.SAND),
    (0.45, TerrainType.GRAVEL),
    (0.47, TerrainType.DIRT),
    (0.55, TerrainType.LOW_GRASS),
    (0.60, TerrainType.HIGH_GRASS),
    (0.78, TerrainType.FOREST),
    (1.0, TerrainType.MOUNTAIN),
)


def classify_height(height: float) -> TerrainType:
    """Return the terrain of the first band whose upper bound exceeds height.

    Returns UNDEFINED for NaN and for heights above 1.0 rather than raising.
    """
    if math.isnan(height):
        return TerrainType.UNDEFINED

    for upper_bound, terrain in TERRAIN_BANDS:
        if height < upper_bound:
            return terrain

    top_bound, top_terrain = TERRAIN_BANDS[-1]
    if height == top_bound:
        return top_terrain
    return TerrainType.UNDEFINED
