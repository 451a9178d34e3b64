"""Conversions between screen, world, tile and chunk coordinate spaces.

Screen space is pixels relative to the viewport's top-left corner. World
space is the continuous space the camera lives in. Tile and chunk spaces are
integer grids. Every division here rounds toward negative infinity and every
modulo is non-negative, so tiles left of or above the origin land in chunk -1
at offset chunk_size - 1 rather than in chunk 0.
"""

from .types import Coordinate, Point


def floor_div(a: float, b: float) -> int:
    """Divide and round toward negative infinity.

    floor_div(-1, 25) == -1, not 0.
    """
    if b <= 0:
        raise ValueError(f"Divisor must be positive, got {b}")
    return int(a // b)


def true_mod(a: int, b: int) -> int:
    """Modulo that is always in [0, b) for positive b, whatever the sign of a.

    true_mod(-1, 25) == 24.
    """
    if b <= 0:
        raise ValueError(f"Modulus must be positive, got {b}")
    return a % b


def screen_to_world(
    screen: Point, window_size: tuple[int, int], camera_center: Point
) -> Point:
    """Convert a screen pixel position to world space."""
    return (
        screen[0] - window_size[0] / 2 + camera_center[0],
        screen[1] - window_size[1] / 2 + camera_center[1],
    )


def world_to_screen(
    world: Point, window_size: tuple[int, int], camera_center: Point
) -> Point:
    """Convert a world position to screen space. Inverse of screen_to_world."""
    return (
        world[0] - camera_center[0] + window_size[0] / 2,
        world[1] - camera_center[1] + window_size[1] / 2,
    )


def world_to_tile(world: Point, tile_size: tuple[int, int]) -> Coordinate:
    """Tile containing a world position. Lossy, many-to-one."""
    return (floor_div(world[0], tile_size[0]), floor_div(world[1], tile_size[1]))


def tile_to_world(tile: Coordinate, tile_size: tuple[int, int]) -> Point:
    """World position of a tile's top-left corner."""
    return (float(tile[0] * tile_size[0]), float(tile[1] * tile_size[1]))


def tile_to_chunk(tile: Coordinate, chunk_size: tuple[int, int]) -> Coordinate:
    """Chunk containing a tile."""
    return (floor_div(tile[0], chunk_size[0]), floor_div(tile[1], chunk_size[1]))


def tile_to_offset(tile: Coordinate, chunk_size: tuple[int, int]) -> Coordinate:
    """Offset of a tile within its chunk."""
    return (true_mod(tile[0], chunk_size[0]), true_mod(tile[1], chunk_size[1]))


def chunk_to_tile(
    chunk: Coordinate, offset: Coordinate, chunk_size: tuple[int, int]
) -> Coordinate:
    """Tile at an offset within a chunk. Inverse of tile_to_chunk + tile_to_offset."""
    return (
        chunk[0] * chunk_size[0] + offset[0],
        chunk[1] * chunk_size[1] + offset[1],
    )
