"""Per-frame tile resolution for a bounded viewport over the unbounded grid."""

from typing import Callable, Iterator

import structlog

from .camera import Camera
from .chunks import ChunkGenerator, ChunkStore
from .config import Config
from .controls import Controls
from .coordinates import screen_to_world, world_to_screen, world_to_tile
from .noise import NoiseField
from .terrain_types import Tile
from .types import Coordinate, Point

logger = structlog.get_logger()

# Receives each visible tile and the screen position of its cell origin.
RenderSink = Callable[[Tile, Point], None]

MIN_TILE_SIZE = 1


class World:
    """Camera, chunk cache and viewport composed into a frame pass.

    Each world owns its tile size; zooming never touches the config.
    """

    def __init__(
        self,
        config: Config,
        camera: Camera | None = None,
        store: ChunkStore | None = None,
    ):
        self.config = config
        self.window_size: tuple[int, int] = config.display.window.as_tuple()
        self.tile_size: tuple[int, int] = config.display.tile_size.as_tuple()
        self.camera = camera or Camera(move_speed=config.display.move_speed)

        if store is None:
            generation = config.generation
            noise = NoiseField(generation.seed, generation.map_scale)
            store = ChunkStore(ChunkGenerator(noise, generation))
        self.store = store

        logger.info(
            "world_created",
            seed=config.generation.seed,
            chunk_size=self.store.chunk_size,
            window=self.window_size,
            tile_size=self.tile_size,
        )

    def screen_to_world(self, screen: Point) -> Point:
        return screen_to_world(screen, self.window_size, self.camera.center)

    def world_to_screen(self, world: Point) -> Point:
        return world_to_screen(world, self.window_size, self.camera.center)

    def tile_coordinate_at_screen(self, screen: Point) -> Coordinate:
        """Tile coordinate under a screen pixel."""
        return world_to_tile(self.screen_to_world(screen), self.tile_size)

    def tile_at_screen(self, screen: Point) -> Tile:
        """Tile under a screen pixel."""
        return self.store.get_tile(self.tile_coordinate_at_screen(screen))

    def zoom(self, steps: int) -> None:
        """Change tile size by steps pixels per axis, never below 1."""
        if steps == 0:
            return
        old = self.tile_size
        self.tile_size = (
            max(MIN_TILE_SIZE, old[0] + steps),
            max(MIN_TILE_SIZE, old[1] + steps),
        )
        if self.tile_size != old:
            logger.debug("zoom_changed", old=old, new=self.tile_size)

    def handle_input(self, controls: Controls) -> None:
        """Apply one frame of input: camera movement, then zoom."""
        self.camera.apply_controls(controls)
        self.zoom(controls.zoom)

    def visible_cells(self) -> Iterator[tuple[Tile, Point]]:
        """Yield (tile, cell_origin) for every visible cell, row-major.

        Cells step by the current tile size. When the tile size does not
        divide the window size the partial cells at the right and bottom
        edges are not yielded.
        """
        tw, th = self.tile_size
        columns = self.window_size[0] // tw
        rows = self.window_size[1] // th
        for row in range(rows):
            for column in range(columns):
                screen = (float(column * tw), float(row * th))
                yield self.tile_at_screen(screen), screen

    def draw(self, sink: RenderSink) -> int:
        """Feed every visible cell to sink. Returns the number of cells drawn."""
        count = 0
        for tile, screen in self.visible_cells():
            sink(tile, screen)
            count += 1
        return count
