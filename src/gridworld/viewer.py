"""pygame frame loop: window, rendering sink and keyboard input source.

pygame is an optional dependency; the core package never imports it.
"""

from typing import Sequence

import structlog

from .colors import FALLBACK_COLOR, color_for_tile
from .config import Config
from .controls import Controls
from .coordinates import tile_to_offset
from .terrain_types import Tile
from .types import Point
from .world import RenderSink, World

logger = structlog.get_logger()


def controls_from_keys(pressed: Sequence[bool]) -> Controls:
    """Build this frame's Controls from pygame.key.get_pressed()."""
    import pygame

    return Controls(
        up=bool(pressed[pygame.K_w]),
        down=bool(pressed[pygame.K_s]),
        left=bool(pressed[pygame.K_a]),
        right=bool(pressed[pygame.K_d]),
        zoom_in=bool(pressed[pygame.K_EQUALS]),
        zoom_out=bool(pressed[pygame.K_MINUS]),
    )


def make_surface_sink(surface, world: World, show_chunk_borders: bool) -> RenderSink:
    """Sink drawing each tile as a filled rectangle of the current tile size."""
    import pygame

    def sink(tile: Tile, screen: Point) -> None:
        tw, th = world.tile_size
        color = color_for_tile(tile)
        if show_chunk_borders:
            ox, oy = tile_to_offset(
                world.tile_coordinate_at_screen(screen), world.store.chunk_size
            )
            if ox == 0 or oy == 0:
                color = FALLBACK_COLOR
        surface.fill(color, pygame.Rect(int(screen[0]), int(screen[1]), tw, th))

    return sink


def run(world: World, config: Config) -> None:
    """Run the viewer until the window is closed."""
    import pygame

    display = config.display
    pygame.init()
    try:
        screen = pygame.display.set_mode(world.window_size)
        pygame.display.set_caption(display.title)
        clock = pygame.time.Clock()
        sink = make_surface_sink(screen, world, display.show_chunk_borders)

        logger.info("viewer_started", window=world.window_size, fps=display.fps)
        running = True
        frames = 0
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            screen.fill(display.clear_color)
            world.draw(sink)
            world.handle_input(controls_from_keys(pygame.key.get_pressed()))
            pygame.display.flip()
            clock.tick(display.fps)
            frames += 1
    finally:
        pygame.quit()

    logger.info(
        "viewer_stopped",
        frames=frames,
        chunks_cached=len(world.store),
        camera=world.camera.center,
    )
