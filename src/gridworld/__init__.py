"""Chunked, procedurally generated infinite tile world."""

from .camera import Camera
from .chunks import Chunk, ChunkGenerator, ChunkStore
from .classification import TERRAIN_BANDS, classify_height
from .config import Config, DisplayConfig, GenerationConfig, Scale, Size, load_config
from .controls import Controls
from .coordinates import (
    chunk_to_tile,
    floor_div,
    screen_to_world,
    tile_to_chunk,
    tile_to_offset,
    tile_to_world,
    true_mod,
    world_to_screen,
    world_to_tile,
)
from .exceptions import ConfigurationError, GridWorldError, UnmappedTerrainError
from .grid import Grid2D
from .noise import NoiseField
from .terrain_types import TerrainType, Tile
from .world import RenderSink, World

__all__ = [
    "Camera",
    "Chunk",
    "ChunkGenerator",
    "ChunkStore",
    "Config",
    "ConfigurationError",
    "Controls",
    "DisplayConfig",
    "GenerationConfig",
    "Grid2D",
    "GridWorldError",
    "NoiseField",
    "RenderSink",
    "Scale",
    "Size",
    "TERRAIN_BANDS",
    "TerrainType",
    "Tile",
    "UnmappedTerrainError",
    "World",
    "chunk_to_tile",
    "classify_height",
    "floor_div",
    "load_config",
    "screen_to_world",
    "tile_to_chunk",
    "tile_to_offset",
    "tile_to_world",
    "true_mod",
    "world_to_screen",
    "world_to_tile",
]
