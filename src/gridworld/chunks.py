"""Lazy chunk generation and caching for the unbounded tile grid."""

import threading
import time
from dataclasses import dataclass
from typing import Iterable

import structlog

from .classification import classify_height
from .config import GenerationConfig
from .coordinates import chunk_to_tile, floor_div, tile_to_chunk, tile_to_offset
from .grid import Grid2D
from .noise import NoiseField
from .terrain_types import TerrainType, Tile
from .types import Coordinate

logger = structlog.get_logger()

_PLACEHOLDER = Tile(terrain=TerrainType.UNDEFINED, height=0.0)


@dataclass(frozen=True)
class Chunk:
    """A chunk_size region of fully generated tiles. Immutable once built."""

    coordinate: Coordinate
    tiles: Grid2D[Tile]

    @property
    def width(self) -> int:
        return self.tiles.width

    @property
    def height(self) -> int:
        return self.tiles.height

    def tile(self, offset: Coordinate) -> Tile:
        """Tile at an in-chunk offset."""
        return self.tiles.at(offset[0], offset[1])


class ChunkGenerator:
    """Builds chunks from the noise field and classification bands."""

    def __init__(self, noise: NoiseField, config: GenerationConfig):
        self.noise = noise
        self.config = config

    @property
    def chunk_size(self) -> tuple[int, int]:
        return self.config.chunk_size.as_tuple()

    def generate(self, chunk_coordinate: Coordinate) -> Chunk:
        """Generate every tile of the chunk at chunk_coordinate."""
        width, height = self.chunk_size
        origin = chunk_to_tile(chunk_coordinate, (0, 0), self.chunk_size)
        heights = self.noise.sample_block(origin, width, height)

        tiles: Grid2D[Tile] = Grid2D(width, height, _PLACEHOLDER)
        for ly in range(height):
            for lx in range(width):
                h = float(heights[ly, lx])
                tiles.set(
                    lx,
                    ly,
                    Tile(
                        terrain=classify_height(h),
                        waterlogged=h < self.config.water_level,
                        height=h,
                    ),
                )
        return Chunk(coordinate=chunk_coordinate, tiles=tiles.freeze())


class ChunkStore:
    """Cache of generated chunks keyed by chunk coordinate.

    Chunks are generated on first access and kept for the life of the store.
    Generation happens at most once per coordinate; the lock only guards the
    miss path, and a chunk is published only after it is fully built.
    """

    def __init__(self, generator: ChunkGenerator):
        self.generator = generator
        self._chunks: dict[Coordinate, Chunk] = {}
        self._lock = threading.Lock()
        self.generated_count = 0

    @property
    def chunk_size(self) -> tuple[int, int]:
        return self.generator.chunk_size

    def __contains__(self, chunk_coordinate: Coordinate) -> bool:
        return chunk_coordinate in self._chunks

    def __len__(self) -> int:
        return len(self._chunks)

    def get_chunk(self, chunk_coordinate: Coordinate) -> Chunk:
        """Get the chunk at chunk_coordinate, generating it on a miss."""
        chunk = self._chunks.get(chunk_coordinate)
        if chunk is not None:
            return chunk

        with self._lock:
            # Another caller may have filled it while we waited
            chunk = self._chunks.get(chunk_coordinate)
            if chunk is None:
                start = time.perf_counter()
                chunk = self.generator.generate(chunk_coordinate)
                self._chunks[chunk_coordinate] = chunk
                self.generated_count += 1
                logger.debug(
                    "chunk_generated",
                    chunk_x=chunk_coordinate[0],
                    chunk_y=chunk_coordinate[1],
                    duration_ms=round((time.perf_counter() - start) * 1000, 3),
                    cached=len(self._chunks),
                )
        return chunk

    def get_tile(self, tile: Coordinate) -> Tile:
        """Resolve any tile in the world."""
        chunk = self.get_chunk(tile_to_chunk(tile, self.chunk_size))
        return chunk.tile(tile_to_offset(tile, self.chunk_size))

    def chunks_for_region(
        self, top_left: Coordinate, bottom_right: Coordinate
    ) -> list[Coordinate]:
        """Return chunk coordinates overlapping an inclusive tile rectangle.

        Args:
            top_left: Smallest tile coordinate in the rectangle.
            bottom_right: Largest tile coordinate in the rectangle.

        Returns:
            Chunk coordinates in row-major order.
        """
        cw, ch = self.chunk_size
        start_cx, end_cx = floor_div(top_left[0], cw), floor_div(bottom_right[0], cw)
        start_cy, end_cy = floor_div(top_left[1], ch), floor_div(bottom_right[1], ch)
        return [
            (cx, cy)
            for cy in range(start_cy, end_cy + 1)
            for cx in range(start_cx, end_cx + 1)
        ]

    def prefetch(self, chunk_coordinates: Iterable[Coordinate]) -> int:
        """Generate any missing chunks now. Returns how many were generated."""
        before = self.generated_count
        for coordinate in chunk_coordinates:
            self.get_chunk(coordinate)
        return self.generated_count - before
