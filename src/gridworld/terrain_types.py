"""Terrain categories and the immutable tile record."""

from enum import IntEnum

from pydantic import BaseModel, Field


class TerrainType(IntEnum):
    """Terrain categories in ascending height order.

    UNDEFINED is the fallback for heights outside every band.
    """

    UNDEFINED = 0
    SAND = 1
    GRAVEL = 2
    DIRT = 3
    LOW_GRASS = 4
    HIGH_GRASS = 5
    FOREST = 6
    MOUNTAIN = 7

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'Low Grass'."""
        return self.name.replace("_", " ").title()


class Tile(BaseModel, frozen=True):
    """Immutable generated tile.

    Terrain is classified from height alone, so a tile can be both SAND
    and waterlogged.
    """

    terrain: TerrainType
    waterlogged: bool = False
    height: float = Field(ge=0.0, le=1.0)

    def __str__(self) -> str:
        suffix = ", waterlogged" if self.waterlogged else ""
        return f"{self.terrain.label} ({self.height:.3f}{suffix})"
